# pyright: reportPrivateUsage=false

"""Provides `partition_chapter()`."""

from __future__ import annotations

from typing import IO, Optional

from biblemark.documents.chapter import ChapterRecord
from biblemark.fetch import fetch_html
from biblemark.file_utils.encoding import read_txt_file
from biblemark.logger import logger
from biblemark.partition.html.classifier import classify_chapter
from biblemark.partition.html.cleaner import clean_chapter
from biblemark.partition.html.footnotes import index_footnotes
from biblemark.partition.html.indent import normalize_indents
from biblemark.partition.html.parser import ChapterElement, parse_chapter_html
from biblemark.partition.html.segmenter import segment_verses
from biblemark.partition.html.tagger import tag_structure
from biblemark.utils import lazyproperty


def partition_chapter(
    filename: Optional[str] = None,
    *,
    file: Optional[IO[bytes]] = None,
    text: Optional[str] = None,
    encoding: Optional[str] = None,
    url: Optional[str] = None,
    headers: Optional[dict[str, str]] = None,
    ssl_verify: bool = True,
) -> list[str]:
    """Converts the chapter page of a passage into one tagged string per verse.

    The result has one item for each verse number 1..N of the chapter, in order. Each is the verse
    text with the inline control tags of the target markup (titles, poetry indents, paragraph
    breaks, quoted speech, footnotes).

    Chapter page source parameters
    ------------------------------
    The page can be specified four different ways:

    filename
        A string defining the path of a saved chapter page.
    file
        A file-like object using "rb" mode --> open(filename, "rb").
    text
        The string representation of the chapter page.
    url
        The URL of the chapter page on the source site.
    headers
        The HTTP headers to be used in the HTTP request when `url` is specified.
    ssl_verify
        If the URL parameter is set, determines whether or not SSL verification is performed
        on the HTTP request.
    encoding
        The encoding used to decode a saved page. Detected when not specified.

    Raises `ChapterStructureError` when the page has no recognizable passage text.
    """
    # -- parser rejects an empty str, nip that edge-case in the bud here --
    if text is not None and text.strip() == "" and not file and not filename and not url:
        return []

    opts = ChapterPartitionerOptions(
        file_path=filename,
        file=file,
        text=text,
        encoding=encoding,
        url=url,
        headers=headers or {},
        ssl_verify=ssl_verify,
    )

    return _ChapterPartitioner.partition(opts)


class ChapterPartitionerOptions:
    """Encapsulates option validation and loading of the chapter page from its source."""

    def __init__(
        self,
        *,
        file_path: str | None,
        file: IO[bytes] | None,
        text: str | None,
        encoding: str | None,
        url: str | None,
        headers: dict[str, str],
        ssl_verify: bool,
    ):
        self._file_path = file_path
        self._file = file
        self._text = text
        self._encoding = encoding
        self._url = url
        self._headers = headers
        self._ssl_verify = ssl_verify

    @lazyproperty
    def html_text(self) -> str:
        """The chapter page as a string, loaded from wherever the caller specified."""
        if self._file_path:
            return read_txt_file(filename=self._file_path, encoding=self._encoding)[1]

        if self._file:
            return read_txt_file(file=self._file, encoding=self._encoding)[1]

        if self._text:
            return str(self._text)

        if self._url:
            return fetch_html(self._url, headers=self._headers, ssl_verify=self._ssl_verify)

        raise ValueError("Exactly one of filename, file, text, or url must be specified.")


class _ChapterPartitioner:
    """Convert one chapter page into tagged verse strings.

    Stages run strictly in sequence, each one needing the complete result of the one before.
    Nothing is retained between chapters.
    """

    def __init__(self, opts: ChapterPartitionerOptions):
        self._opts = opts

    @classmethod
    def partition(cls, opts: ChapterPartitionerOptions) -> list[str]:
        return cls(opts)._partition()

    def _partition(self) -> list[str]:
        root = self._root

        clean_chapter(root)
        chapter_class = classify_chapter(root)
        chapter = ChapterRecord(
            class_fingerprint=chapter_class.fingerprint,
            verse_count=chapter_class.verse_count,
            footnotes=index_footnotes(root),
        )
        tag_structure(root, chapter.class_fingerprint)
        segment_verses(root, chapter)
        normalize_indents(chapter)

        logger.info(
            f"Partitioned {chapter.class_fingerprint[:-1]}: {len(chapter.verses)} verses,"
            f" {len(chapter.footnotes)} footnotes."
        )
        return chapter.verses

    @lazyproperty
    def _root(self) -> ChapterElement:
        """The root element of the chapter page."""
        # NOTE: get `html_text` first so any loading error raised is not confused with a
        # parsing error.
        html_text = self._opts.html_text
        return parse_chapter_html(html_text)
