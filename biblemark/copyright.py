"""Copyright notice of a translation, read once from a fixed reference chapter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from biblemark.fetch import build_chapter_url, fetch_html
from biblemark.logger import logger
from biblemark.partition.html.parser import ChapterElement, parse_chapter_html
from biblemark.partition.utils.config import env_config
from biblemark.partition.utils.constants import PUBLISHER_INFO_CLASS


@dataclass(frozen=True)
class CopyrightInfo:
    """Publisher and translation names printed at the bottom of every passage page."""

    translation: str
    copyright: str
    publisher: str

    @property
    def is_empty(self) -> bool:
        return not (self.translation or self.copyright or self.publisher)

    def __str__(self) -> str:
        lines = [self.translation, self.copyright]
        if self.publisher and self.publisher not in self.copyright:
            lines.append(self.publisher)
        return "\n".join(line for line in lines if line)


def parse_copyright_info(html_text: str) -> CopyrightInfo:
    """Extract the copyright block of the passage page `html_text`.

    Produces an empty `CopyrightInfo` when the page has no publisher-info block.
    """
    root = parse_chapter_html(html_text)

    paragraphs: list[ChapterElement] = []
    strongs: list[ChapterElement] = []
    for block in root.iter_by_class(PUBLISHER_INFO_CLASS):
        paragraphs.extend(block.iter_tag("p"))
        strongs.extend(block.iter_tag("strong"))

    return CopyrightInfo(
        translation=_joined_text(strongs),
        copyright=_joined_text(paragraphs),
        publisher=_joined_text([a for p in paragraphs for a in p.iter_tag("a")]),
    )


def fetch_copyright_info(version: Optional[str] = None) -> CopyrightInfo:
    """Retrieve the copyright notice of translation `version` from the reference chapter."""
    url = build_chapter_url(
        env_config.BIBLEMARK_COPYRIGHT_BOOK, env_config.BIBLEMARK_COPYRIGHT_CHAPTER, version
    )
    info = parse_copyright_info(fetch_html(url))
    if info.is_empty:
        logger.warning(f"No copyright notice found at {url}")
    else:
        logger.info(f"Copyright notice retrieved for {info.translation or url}")
    return info


def _joined_text(elements: list[ChapterElement]) -> str:
    return " ".join(" ".join(e.text_content.split()) for e in elements if e.text_content.strip())
