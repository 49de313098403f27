"""Removal of decorative nodes the target format renders on its own."""

from __future__ import annotations

from typing import Iterable

from biblemark.logger import trace_logger
from biblemark.partition.html.parser import ChapterElement
from biblemark.partition.utils.constants import DECORATIVE_CLASSES


def clean_chapter(root: ChapterElement, rejects: Iterable[str] = DECORATIVE_CLASSES) -> int:
    """Remove verse-number, chapter-number and cross-reference markers from `root` in place.

    Text following a removed marker is kept. Running this on an already-cleaned tree removes
    nothing. Returns the number of nodes removed.
    """
    removed = 0
    for reject in rejects:
        # -- materialize first, the tree can't be mutated while the xpath result is iterated --
        for element in list(root.iter_by_class(reject)):
            element.drop()
            removed += 1

    trace_logger.detail(f"Removed {removed} decorative nodes.")  # type: ignore
    return removed
