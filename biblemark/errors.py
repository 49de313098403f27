from __future__ import annotations


class ChapterStructureError(ValueError):
    """Error raised when a chapter document does not have the expected passage-text structure.

    The chapter cannot be converted at all when this happens, no partial output is produced.
    """

    def __init__(self, reason: str, class_value: str | None = None):
        self.reason = reason
        self.class_value = class_value
        self.message = (
            f"Chapter structure mismatch - {reason}"
            if class_value is None
            else f"Chapter structure mismatch - {reason}, class={class_value!r}"
        )
        super().__init__(self.message)


class ChapterFetchError(Exception):
    """Error raised when the source page for a chapter could not be retrieved."""
