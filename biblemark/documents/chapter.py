"""Records holding the state of one chapter conversion.

A `ChapterRecord` is created fresh for each chapter and discarded once its `verses` are handed
back to the caller. A `VerseRecord` lives only while its verse is being assembled.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, NamedTuple

from biblemark.documents.tokens import Token, render_tokens

if TYPE_CHECKING:
    from biblemark.partition.html.parser import ChapterElement


class Genre(enum.Enum):
    """Literary genre of a passage-text node, derived from its poetry-line ancestor."""

    PROSE = "prose"
    POETRY_FIRST = "poetry-first"
    POETRY_CONTINUATION = "poetry-continuation"


class Role(enum.Enum):
    """Structural role of a passage-text node, as marked by the structure tagger."""

    TITLE = "title"
    PARAGRAPH_OPENER = "paragraph"
    PLAIN = "plain"


class VerseNode(NamedTuple):
    """A passage-text node together with its classification, computed once."""

    element: ChapterElement
    genre: Genre
    role: Role


@dataclass
class ChapterRecord:
    """Per-chapter conversion state.

    `verses[i]` is the finalized text of verse `i + 1`. `poetic[i]` records whether that verse
    contained a first-line poetry node, which is what the indent normalizer keys on.
    """

    class_fingerprint: str
    verse_count: int
    footnotes: dict[str, str] = field(default_factory=dict)
    verses: list[str] = field(default_factory=list)
    poetic: list[bool] = field(default_factory=list)

    def append_verse(self, verse: VerseRecord) -> None:
        """Finalize `verse` by rendering its tokens onto the end of `verses`."""
        self.verses.append(verse.text)
        self.poetic.append(verse.is_poetic)

    def relocate_paragraph_break(self, marker: str) -> bool:
        """Append `marker` to the most recently finalized verse.

        This is the one place a finalized verse is modified. Returns False, changing nothing,
        when no verse with text has been finalized yet, so a break never opens the chapter.
        """
        if not any(self.verses):
            return False
        self.verses[-1] = self.verses[-1] + marker
        return True


@dataclass
class VerseRecord:
    """A verse under construction."""

    number: int
    is_poetic: bool = False
    tokens: list[Token] = field(default_factory=list)

    @property
    def text(self) -> str:
        return render_tokens(self.tokens)
