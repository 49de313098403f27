"""Retrieval of chapter pages from the source site.

A page is either retrieved completely or the attempt fails with `ChapterFetchError`; the
conversion pipeline never sees a partial document.
"""

from __future__ import annotations

from typing import Optional, Union
from urllib.parse import urlencode

import backoff
import requests

from biblemark.errors import ChapterFetchError
from biblemark.logger import logger
from biblemark.partition.utils.config import env_config


def build_chapter_url(book: str, chapter: Union[int, str], version: Optional[str] = None) -> str:
    """URL of the passage page for `book` `chapter` in translation `version`.

    `version` defaults to the configured translation.
    """
    params = {"search": f"{book} {chapter}", "version": version or env_config.BIBLEMARK_VERSION}
    return f"{env_config.BIBLEMARK_BASE_URL}?{urlencode(params)}"


def fetch_html(url: str, headers: Optional[dict[str, str]] = None, ssl_verify: bool = True) -> str:
    """The HTML text of the page at `url`.

    A failed request is retried with exponential backoff up to the configured number of tries.
    Raises `ChapterFetchError` once those are used up, or straight away when the response is not
    an HTML document.
    """
    try:
        response = _get(url, headers or {}, ssl_verify)
    except requests.RequestException as e:
        raise ChapterFetchError(f"Unable to retrieve {url}: {e}") from e

    content_type = response.headers.get("Content-Type", "")
    if not content_type.startswith("text/html"):
        raise ChapterFetchError(f"Expected content type text/html. Got {content_type}.")

    logger.info(f"Fetched {url}")
    return response.text


@backoff.on_exception(
    backoff.expo,
    requests.RequestException,
    max_tries=lambda: env_config.BIBLEMARK_FETCH_MAX_TRIES,
    logger=logger,
)
def _get(url: str, headers: dict[str, str], ssl_verify: bool) -> requests.Response:
    response = requests.get(
        url, headers=headers, verify=ssl_verify, timeout=env_config.BIBLEMARK_FETCH_TIMEOUT
    )
    response.raise_for_status()
    return response
