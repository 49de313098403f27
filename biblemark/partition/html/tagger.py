"""In-place marking of titles and paragraph-opening passage text."""

from __future__ import annotations

from biblemark.partition.html.parser import ChapterElement
from biblemark.partition.utils.constants import (
    PARAGRAPH_TAG,
    PASSAGE_TEXT_CLASS,
    ROLE_PARAGRAPH,
    ROLE_TITLE,
    TITLE_TAGS,
)


def tag_structure(root: ChapterElement, fingerprint: str) -> None:
    """Write the structural role of title and paragraph-opener nodes onto the nodes themselves.

    - Every passage-text node inside an `<h3>` or `<h4>` heading is a title.
    - The first content item of every `<p>` is a paragraph-opener when it is a passage-text node
      of this chapter (its class starts with "text " + `fingerprint`).

    Marking once here lets the verse segmenter recognize both by attribute lookup instead of
    walking ancestors at every node.
    """
    for heading in root.iter_tag(*TITLE_TAGS):
        for element in heading.iter_by_class(PASSAGE_TEXT_CLASS):
            element.role = ROLE_TITLE

    for paragraph in root.iter_tag(PARAGRAPH_TAG):
        opener = _first_content_element(paragraph)
        if opener is not None and is_chapter_passage_text(opener, fingerprint):
            opener.role = ROLE_PARAGRAPH


def is_chapter_passage_text(element: ChapterElement, fingerprint: str) -> bool:
    """True when `element` is a passage-text node of the chapter identified by `fingerprint`."""
    return element.class_value.startswith(f"{PASSAGE_TEXT_CLASS} {fingerprint}")


def _first_content_element(paragraph: ChapterElement) -> ChapterElement | None:
    """The first child element of `paragraph` when no text precedes it, None otherwise.

    Formatting whitespace before the first child does not count as text.
    """
    for item in paragraph.iter_contents():
        if isinstance(item, str):
            if item.strip():
                return None
            continue
        return item
    return None
