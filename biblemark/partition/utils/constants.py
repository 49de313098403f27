from enum import Enum


class Marker(Enum):
    """Inline control tags of the MySword target markup, valued by their literal rendering."""

    INDENT_SINGLE = "<PI1>"
    INDENT_DOUBLE = "<PI2>"
    INDENT_TRIPLE = "<PI3>"
    INDENT_CLOSE = "<CI>"
    PARAGRAPH_BREAK = "<CM>"
    TITLE_OPEN = "<TS>"
    TITLE_CLOSE = "<Ts>"
    QUOTED_SPEECH_OPEN = "<FR>"
    QUOTED_SPEECH_CLOSE = "<Fr>"
    FOOTNOTE_OPEN = "<RF>"
    FOOTNOTE_CLOSE = "<Rf>"


# -- open-marker -> close-marker, for each of the paired structural tags --
PAIRED_MARKERS = {
    Marker.INDENT_SINGLE: Marker.INDENT_CLOSE,
    Marker.INDENT_DOUBLE: Marker.INDENT_CLOSE,
    Marker.INDENT_TRIPLE: Marker.INDENT_CLOSE,
    Marker.TITLE_OPEN: Marker.TITLE_CLOSE,
    Marker.QUOTED_SPEECH_OPEN: Marker.QUOTED_SPEECH_CLOSE,
    Marker.FOOTNOTE_OPEN: Marker.FOOTNOTE_CLOSE,
}

# -- source-page classes rendered automatically by the target format --
DECORATIVE_CLASSES = ("chapternum", "versenum", "crossreference")

PASSAGE_TEXT_CLASS = "text"
TITLE_TAGS = ("h3", "h4")
PARAGRAPH_TAG = "p"

POETRY_LINE_NORMAL = "line"
POETRY_LINE_INDENTED = "indent-1"
# -- parent class-fragment that signals the irregular first-verse nesting --
CHAPTER_CONTAINER_FRAGMENT = "chapter"

QUOTED_SPEECH_FRAGMENT = "woj"
FOOTNOTE_FRAGMENT = "footnote"
SMALL_CAPS_FRAGMENT = "small-caps"

FOOTNOTE_ID_FRAGMENT = "fen"
FOOTNOTE_TEXT_CLASS = "footnote-text"

PUBLISHER_INFO_CLASS = "publisher-info-bottom"

# -- attribute written by the structure tagger --
ROLE_ATTR = "data-biblemark-role"
ROLE_TITLE = "title"
ROLE_PARAGRAPH = "paragraph"
