"""Flattening of a passage-text subtree into an ordered token sequence."""

from __future__ import annotations

from typing import Iterator, Mapping, Optional

from biblemark.documents.tokens import (
    FOOTNOTE_CLOSE,
    FOOTNOTE_OPEN,
    QUOTED_SPEECH_CLOSE,
    QUOTED_SPEECH_OPEN,
    TextRun,
    Token,
)
from biblemark.logger import logger
from biblemark.partition.html.parser import ChapterElement
from biblemark.partition.utils.constants import (
    FOOTNOTE_FRAGMENT,
    QUOTED_SPEECH_FRAGMENT,
    SMALL_CAPS_FRAGMENT,
)


class FlattenContext:
    """What the flattener needs to know about the chapter and verse it is flattening for.

    Only used to look up footnotes and to say where a missing footnote was referenced.
    """

    def __init__(
        self,
        footnotes: Mapping[str, str],
        fingerprint: str = "",
        verse_number: Optional[int] = None,
    ):
        self.footnotes = footnotes
        self.fingerprint = fingerprint
        self.verse_number = verse_number

    def footnote_text(self, letter: str) -> str:
        """Expanded text of footnote `letter`, empty string when the chapter has no such note."""
        text = self.footnotes.get(letter)
        if text is None:
            logger.warning(
                f"Footnote {letter!r} referenced in {self.fingerprint}{self.verse_number} is not"
                " in the chapter's footnote list, substituting empty text."
            )
            return ""
        return text


def flatten(element: ChapterElement, context: FlattenContext) -> list[Token]:
    """Tokens representing the fully flattened contents of `element`, in document order.

    Each call builds and returns its own list; nested calls for quoted speech produce a separate
    list that is spliced into the caller's.
    """
    return list(_iter_tokens(element, context))


def _iter_tokens(element: ChapterElement, context: FlattenContext) -> Iterator[Token]:
    for item in element.iter_contents():
        if isinstance(item, str):
            yield TextRun(item)
        elif item.class_contains(QUOTED_SPEECH_FRAGMENT):
            yield QUOTED_SPEECH_OPEN
            yield from flatten(item, context)
            yield QUOTED_SPEECH_CLOSE
        elif item.class_contains(FOOTNOTE_FRAGMENT):
            yield from _footnote_tokens(item, context)
        elif item.class_contains(SMALL_CAPS_FRAGMENT):
            yield TextRun(item.text_content.upper())
        else:
            yield TextRun(item.text_content)


def _footnote_tokens(element: ChapterElement, context: FlattenContext) -> Iterator[Token]:
    """Footnote reference `element` replaced by the expanded footnote text.

    The reference letter is the text of the anchor nested in the reference, like the "a" of
    `<sup class="footnote">[<a href="#fen-NIV-26a">a</a>]</sup>`.
    """
    letter = "".join(a.text_content for a in element.iter_tag("a")).strip()
    yield FOOTNOTE_OPEN
    yield TextRun(context.footnote_text(letter))
    yield FOOTNOTE_CLOSE
