"""Chapter-wide normalization of poetry indentation."""

from __future__ import annotations

from biblemark.documents.chapter import ChapterRecord
from biblemark.documents.tokens import INDENT_DOUBLE, INDENT_SINGLE

_SINGLE = INDENT_SINGLE.rendered
_DOUBLE = INDENT_DOUBLE.rendered


def normalize_indents(chapter: ChapterRecord) -> None:
    """Demote all but the first single-indent of each poetic verse to a double-indent.

    Applies only to verses recorded as poetic. Running it again changes nothing.
    """
    chapter.verses[:] = [
        normalize_verse_indents(text) if is_poetic else text
        for text, is_poetic in zip(chapter.verses, chapter.poetic)
    ]


def normalize_verse_indents(text: str) -> str:
    """`text` with every single-indent after the first rewritten as a double-indent.

    Triple-indents are left as they are.
    """
    head, sep, rest = text.partition(_SINGLE)
    if not sep:
        return text
    return head + sep + rest.replace(_SINGLE, _DOUBLE)
