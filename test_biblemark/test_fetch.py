"""Test suite for `biblemark.fetch` module."""

from __future__ import annotations

import pytest
import requests

from biblemark.errors import ChapterFetchError
from biblemark.fetch import build_chapter_url, fetch_html
from test_biblemark.unit_utils import FixtureRequest, Mock, MonkeyPatch, function_mock


class FakeResponse:
    def __init__(self, text: str, status_code: int = 200, content_type: str = "text/html"):
        self.text = text
        self.status_code = status_code
        self.headers = {"Content-Type": content_type}

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")


# -- build_chapter_url() -------------------------


def test_build_chapter_url_uses_the_configured_translation_by_default(monkeypatch: MonkeyPatch):
    monkeypatch.delenv("BIBLEMARK_VERSION", raising=False)

    assert build_chapter_url("Genesis", 1) == (
        "https://www.biblegateway.com/passage/?search=Genesis+1&version=NIV"
    )


def test_build_chapter_url_accepts_an_explicit_translation():
    assert build_chapter_url("1 John", 4, "WEB") == (
        "https://www.biblegateway.com/passage/?search=1+John+4&version=WEB"
    )


def test_build_chapter_url_uses_the_configured_base_url(monkeypatch: MonkeyPatch):
    monkeypatch.setenv("BIBLEMARK_BASE_URL", "http://localhost:8000/passage/")

    assert build_chapter_url("Ruth", "2", "KJV") == (
        "http://localhost:8000/passage/?search=Ruth+2&version=KJV"
    )


# -- fetch_html() --------------------------------


def test_fetch_html_returns_the_page_text(requests_get_: Mock):
    requests_get_.return_value = FakeResponse(
        "<html></html>", content_type="text/html; charset=utf-8"
    )

    assert fetch_html("https://example.com/passage/", headers={"Accept": "text/html"}) == (
        "<html></html>"
    )
    requests_get_.assert_called_once_with(
        "https://example.com/passage/", headers={"Accept": "text/html"}, verify=True, timeout=30.0
    )


def test_fetch_html_retries_a_failed_request_once_by_default(
    requests_get_: Mock, monkeypatch: MonkeyPatch
):
    monkeypatch.delenv("BIBLEMARK_FETCH_MAX_TRIES", raising=False)
    requests_get_.side_effect = [requests.ConnectionError("reset"), FakeResponse("<html></html>")]

    assert fetch_html("https://example.com/passage/") == "<html></html>"
    assert requests_get_.call_count == 2


def test_fetch_html_raises_once_the_tries_are_used_up(
    requests_get_: Mock, monkeypatch: MonkeyPatch
):
    monkeypatch.setenv("BIBLEMARK_FETCH_MAX_TRIES", "3")
    requests_get_.return_value = FakeResponse("", status_code=503)

    with pytest.raises(ChapterFetchError, match="Unable to retrieve https://example.com/passage/"):
        fetch_html("https://example.com/passage/")

    assert requests_get_.call_count == 3


def test_fetch_html_raises_when_the_page_is_not_html(requests_get_: Mock):
    requests_get_.return_value = FakeResponse("%PDF-1.7", content_type="application/pdf")

    with pytest.raises(ChapterFetchError, match="Expected content type text/html. Got application"):
        fetch_html("https://example.com/passage/")


def test_fetch_html_passes_the_ssl_verify_setting_on(requests_get_: Mock):
    requests_get_.return_value = FakeResponse("<html></html>")

    fetch_html("https://example.com/passage/", ssl_verify=False)

    assert requests_get_.call_args.kwargs["verify"] is False


# -- fixtures ------------------------------------------------------------------------------------


@pytest.fixture
def requests_get_(request: FixtureRequest, monkeypatch: MonkeyPatch) -> Mock:
    monkeypatch.setattr("time.sleep", lambda seconds: None)
    return function_mock(request, "biblemark.fetch.requests.get", autospec=False)
