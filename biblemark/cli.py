#!/usr/bin/env python3
import json
import logging
from typing import Optional

import click

from biblemark.copyright import fetch_copyright_info
from biblemark.errors import ChapterFetchError, ChapterStructureError
from biblemark.fetch import build_chapter_url
from biblemark.logger import log_streaming_init, logger
from biblemark.partition.html.partition import partition_chapter
from biblemark.partition.utils.config import env_config


def _init_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.getLevelName(env_config.LOG_LEVEL)
    log_streaming_init(level if isinstance(level, int) else logging.WARNING)


@click.group()
def main():
    pass


@main.command()
@click.argument("book")
@click.argument("chapter", type=int)
@click.option("--version", "version", type=str, default=None, help="Translation code, e.g. NIV.")
@click.option(
    "--file",
    "filename",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Convert a saved chapter page instead of fetching it.",
)
@click.option("--encoding", type=str, default=None, help="Encoding of the saved page.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Write a JSON array.")
@click.option(
    "--accept-copyright",
    is_flag=True,
    default=False,
    help="Don't ask for acceptance of the translation's copyright notice.",
)
@click.option("-v", "--verbose", is_flag=True, default=False)
def chapter(
    book: str,
    chapter: int,
    version: Optional[str],
    filename: Optional[str],
    encoding: Optional[str],
    as_json: bool,
    accept_copyright: bool,
    verbose: bool,
):
    """Convert chapter CHAPTER of BOOK into one tagged line per verse."""
    _init_logging(verbose)

    try:
        if not accept_copyright:
            info = fetch_copyright_info(version)
            click.echo(str(info), err=True)
            if not click.confirm("Accept the copyright terms above?", err=True):
                raise click.Abort()

        if filename:
            verses = partition_chapter(filename, encoding=encoding)
        else:
            verses = partition_chapter(url=build_chapter_url(book, chapter, version))
    except (ChapterStructureError, ChapterFetchError) as e:
        logger.error(f"{book} {chapter}: {e}")
        raise click.ClickException(str(e)) from e

    if as_json:
        click.echo(json.dumps(verses, ensure_ascii=False))
        return

    for number, text in enumerate(verses, start=1):
        click.echo(f"{number}\t{text}")


@main.command()
@click.option("--version", "version", type=str, default=None, help="Translation code, e.g. NIV.")
@click.option("-v", "--verbose", is_flag=True, default=False)
def copyright(version: Optional[str], verbose: bool):
    """Print the copyright notice of a translation."""
    _init_logging(verbose)

    try:
        info = fetch_copyright_info(version)
    except ChapterFetchError as e:
        raise click.ClickException(str(e)) from e

    click.echo(str(info))


if __name__ == "__main__":
    main()
