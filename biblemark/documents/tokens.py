"""Token types making up the content of a verse.

A verse is an ordered sequence of tokens, each either a run of literal text or a control tag of
the target markup. The finalized verse string is the concatenation of the token renderings.
"""

from __future__ import annotations

from typing import Iterable, NamedTuple, Union

from typing_extensions import TypeAlias

from biblemark.partition.utils.constants import Marker


class TextRun(NamedTuple):
    """Literal passage text, rendered verbatim."""

    text: str

    @property
    def rendered(self) -> str:
        return self.text


class ControlTag(NamedTuple):
    """An inline control tag of the target markup."""

    kind: Marker

    @property
    def rendered(self) -> str:
        return self.kind.value


Token: TypeAlias = Union[TextRun, ControlTag]

# -- the tags are immutable so a single shared instance of each is all that's needed --
INDENT_SINGLE = ControlTag(Marker.INDENT_SINGLE)
INDENT_DOUBLE = ControlTag(Marker.INDENT_DOUBLE)
INDENT_TRIPLE = ControlTag(Marker.INDENT_TRIPLE)
INDENT_CLOSE = ControlTag(Marker.INDENT_CLOSE)
PARAGRAPH_BREAK = ControlTag(Marker.PARAGRAPH_BREAK)
TITLE_OPEN = ControlTag(Marker.TITLE_OPEN)
TITLE_CLOSE = ControlTag(Marker.TITLE_CLOSE)
QUOTED_SPEECH_OPEN = ControlTag(Marker.QUOTED_SPEECH_OPEN)
QUOTED_SPEECH_CLOSE = ControlTag(Marker.QUOTED_SPEECH_CLOSE)
FOOTNOTE_OPEN = ControlTag(Marker.FOOTNOTE_OPEN)
FOOTNOTE_CLOSE = ControlTag(Marker.FOOTNOTE_CLOSE)


def render_tokens(tokens: Iterable[Token]) -> str:
    """Concatenate the renderings of `tokens`, in order."""
    return "".join(t.rendered for t in tokens)
