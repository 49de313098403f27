"""Derivation of the verse count and class fingerprint of a chapter."""

from __future__ import annotations

from typing import NamedTuple, Optional

from biblemark.errors import ChapterStructureError
from biblemark.partition.html.parser import ChapterElement
from biblemark.partition.utils.constants import PARAGRAPH_TAG, PASSAGE_TEXT_CLASS


class ChapterClass(NamedTuple):
    """What the last passage-text node of a chapter says about the chapter."""

    fingerprint: str
    """Class value with the leading "text " and the trailing verse number removed, e.g. "Gen-1-"."""

    verse_count: int


def classify_chapter(root: ChapterElement) -> ChapterClass:
    """Read the fingerprint and verse count from the last passage-text node under a `<p>`.

    The class of that node is like "text Gen-1-31", giving fingerprint "Gen-1-" and a verse count
    of 31. Raises `ChapterStructureError` when there is no such node or its class does not end in
    a positive verse number.
    """
    last = _last_passage_text_node(root)
    if last is None:
        raise ChapterStructureError("no passage-text node found")

    return parse_passage_class(last.class_value)


def parse_passage_class(class_value: str) -> ChapterClass:
    """Split a passage-text class value like "text Gen-1-31" into fingerprint and verse number."""
    prefix = f"{PASSAGE_TEXT_CLASS} "
    if not class_value.startswith(prefix):
        raise ChapterStructureError("passage-text class has no reference part", class_value)

    reference = class_value[len(prefix) :]
    head, sep, verse = reference.rpartition("-")
    if not sep or not head:
        raise ChapterStructureError("passage-text class has no verse component", class_value)

    try:
        verse_count = int(verse)
    except ValueError as e:
        raise ChapterStructureError("verse component is not a number", class_value) from e

    if verse_count < 1:
        raise ChapterStructureError("verse component is not a positive number", class_value)

    return ChapterClass(f"{head}-", verse_count)


def _last_passage_text_node(root: ChapterElement) -> Optional[ChapterElement]:
    last: Optional[ChapterElement] = None
    for element in root.iter_by_class(PASSAGE_TEXT_CLASS):
        if next(element.iterancestors(PARAGRAPH_TAG), None) is not None:
            last = element
    return last
