"""Index of the chapter's footnotes, keyed by reference letter."""

from __future__ import annotations

from biblemark.partition.html.parser import ChapterElement
from biblemark.partition.utils.constants import FOOTNOTE_ID_FRAGMENT, FOOTNOTE_TEXT_CLASS


def index_footnotes(root: ChapterElement) -> dict[str, str]:
    """Map each footnote letter to its expanded text.

    Footnotes are the `<ol>` entries with an id like "fen-NIV-26a"; the last character of the id
    is the letter the inline reference shows. Other list entries (cross-references use "cen-"
    ids) are ignored. Most chapters have no footnotes and produce an empty mapping.
    """
    footnotes: dict[str, str] = {}

    lists = list(root.iter_tag("ol"))
    if not "".join(ol.text_content for ol in lists).strip():
        return footnotes

    for ol in lists:
        for item in ol.iterchildren():
            id_ = item.get("id", "")
            if FOOTNOTE_ID_FRAGMENT not in id_:
                continue
            note_text = "".join(e.text_content for e in item.iter_by_class(FOOTNOTE_TEXT_CLASS))
            # -- the site guarantees unique letters per chapter, last one wins otherwise --
            footnotes[id_[-1]] = note_text

    return footnotes
