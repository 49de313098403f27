"""Segmentation of a tagged chapter tree into per-verse token streams.

For each verse number the passage-text nodes of that verse are collected in document order, each
is classified once (genre from its poetry-line ancestor, role from the structure tagger's mark)
and dispatched to the rule for that classification. The verse is finalized onto the chapter
record as soon as its last node is processed.

Paragraph breaks need one exception to this strictly forward flow. A paragraph that opens a verse
belongs, in the target markup, at the end of the _previous_ verse, so the break is appended to the
already-finalized text of that verse instead of to the verse under construction.
"""

from __future__ import annotations

from collections import defaultdict

from biblemark.documents.chapter import ChapterRecord, Genre, Role, VerseNode, VerseRecord
from biblemark.documents.tokens import (
    INDENT_CLOSE,
    INDENT_SINGLE,
    INDENT_TRIPLE,
    PARAGRAPH_BREAK,
    TITLE_CLOSE,
    TITLE_OPEN,
)
from biblemark.logger import logger, trace_logger
from biblemark.partition.html.flatten import FlattenContext, flatten
from biblemark.partition.html.parser import ChapterElement
from biblemark.partition.html.tagger import is_chapter_passage_text
from biblemark.partition.utils.constants import (
    CHAPTER_CONTAINER_FRAGMENT,
    PASSAGE_TEXT_CLASS,
    POETRY_LINE_INDENTED,
    POETRY_LINE_NORMAL,
    ROLE_PARAGRAPH,
    ROLE_TITLE,
)


def segment_verses(root: ChapterElement, chapter: ChapterRecord) -> None:
    """Append the finalized text of verses 1..`chapter.verse_count` to `chapter.verses`."""
    nodes_by_class = _index_passage_text(root, chapter.class_fingerprint)

    for number in range(1, chapter.verse_count + 1):
        signature = verse_signature(chapter.class_fingerprint, number)
        elements = nodes_by_class.get(signature, [])
        if not elements:
            logger.warning(f"No passage text found for {chapter.class_fingerprint}{number}.")

        verse = VerseRecord(number)
        context = FlattenContext(chapter.footnotes, chapter.class_fingerprint, number)
        for element in elements:
            node = classify_node(element, number)
            if node.genre is Genre.POETRY_FIRST:
                verse.is_poetic = True
            _dispatch(node, verse, chapter, context)

        chapter.append_verse(verse)
        trace_logger.detail(  # type: ignore
            f"Verse {number}: {len(elements)} nodes, {len(verse.tokens)} tokens."
        )


def verse_signature(fingerprint: str, number: int) -> str:
    """The exact class value of passage-text nodes of verse `number`, like "text Gen-1-3"."""
    return f"{PASSAGE_TEXT_CLASS} {fingerprint}{number}"


def classify_node(element: ChapterElement, verse_number: int) -> VerseNode:
    """Classify `element` by genre and role, once."""
    return VerseNode(element, classify_genre(element, verse_number), classify_role(element))


def classify_genre(element: ChapterElement, verse_number: int) -> Genre:
    """Genre of passage-text `element` from the class of the poetry-line node enclosing it.

    That is normally the parent. In the first verse of a chapter an extra chapter container can
    sit between the two, in which case the grandparent is consulted. Anything unrecognized is
    prose.
    """
    parent = element.parent_element
    ancestor_class = parent.class_value if parent is not None else ""

    if parent is not None and CHAPTER_CONTAINER_FRAGMENT in ancestor_class:
        if verse_number != 1:
            logger.warning(
                f"Chapter-container nesting found outside the first verse at"
                f" {element.class_value!r}, using grandparent class for its genre."
            )
        grandparent = parent.parent_element
        ancestor_class = grandparent.class_value if grandparent is not None else ""

    ancestor_class = ancestor_class.strip()
    if ancestor_class == POETRY_LINE_NORMAL:
        return Genre.POETRY_FIRST
    if ancestor_class == POETRY_LINE_INDENTED:
        return Genre.POETRY_CONTINUATION
    return Genre.PROSE


def classify_role(element: ChapterElement) -> Role:
    """Role of `element` as marked by the structure tagger."""
    role = element.role
    if role == ROLE_TITLE:
        return Role.TITLE
    if role == ROLE_PARAGRAPH:
        return Role.PARAGRAPH_OPENER
    return Role.PLAIN


def _dispatch(
    node: VerseNode, verse: VerseRecord, chapter: ChapterRecord, context: FlattenContext
) -> None:
    """Append the tokens for `node` to `verse` according to its role and genre."""
    if node.role is Role.TITLE:
        verse.tokens.append(TITLE_OPEN)
        verse.tokens.extend(flatten(node.element, context))
        verse.tokens.append(TITLE_CLOSE)
        return

    if node.role is Role.PARAGRAPH_OPENER:
        _open_paragraph(verse, chapter)

    if node.genre is Genre.POETRY_FIRST:
        verse.tokens.append(INDENT_SINGLE)
        verse.tokens.extend(flatten(node.element, context))
        verse.tokens.append(INDENT_CLOSE)
    elif node.genre is Genre.POETRY_CONTINUATION:
        # -- placeholder level, the indent normalizer never touches triple indents --
        verse.tokens.append(INDENT_TRIPLE)
        verse.tokens.extend(flatten(node.element, context))
        verse.tokens.append(INDENT_CLOSE)
    else:
        verse.tokens.extend(flatten(node.element, context))


def _open_paragraph(verse: VerseRecord, chapter: ChapterRecord) -> None:
    """Place the paragraph break for a paragraph starting at the current node.

    - At the very start of a verse the break goes to the end of the previous verse; in the first
      verse of the chapter there is nothing before it and no break is placed.
    - In the middle of a verse the break is appended to the verse, unless it would directly
      follow a title.
    """
    if not verse.tokens:
        if chapter.relocate_paragraph_break(PARAGRAPH_BREAK.rendered):
            trace_logger.detail(  # type: ignore
                f"Paragraph break opening verse {verse.number} moved to the previous verse."
            )
        return

    if verse.tokens[-1] != TITLE_CLOSE:
        verse.tokens.append(PARAGRAPH_BREAK)


def _index_passage_text(root: ChapterElement, fingerprint: str) -> dict[str, list[ChapterElement]]:
    """Passage-text nodes of this chapter grouped by class value, each group in document order."""
    index: defaultdict[str, list[ChapterElement]] = defaultdict(list)
    for element in root.iter_by_class(PASSAGE_TEXT_CLASS):
        if is_chapter_passage_text(element, fingerprint):
            index[element.class_value].append(element)
    return index
