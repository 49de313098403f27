"""Test suite for `biblemark.errors` module."""

from __future__ import annotations

from biblemark.errors import ChapterStructureError


class DescribeChapterStructureError:
    """Unit-test suite for `biblemark.errors.ChapterStructureError`."""

    def it_is_a_value_error(self):
        assert isinstance(ChapterStructureError("no passage-text node found"), ValueError)

    def it_describes_the_mismatch(self):
        error = ChapterStructureError("no passage-text node found")

        assert str(error) == "Chapter structure mismatch - no passage-text node found"
        assert error.reason == "no passage-text node found"
        assert error.class_value is None

    def and_it_names_the_offending_class_when_there_is_one(self):
        error = ChapterStructureError("verse component is not a number", "text Gen-1-x")

        assert str(error) == (
            "Chapter structure mismatch - verse component is not a number, class='text Gen-1-x'"
        )
        assert error.class_value == "text Gen-1-x"
