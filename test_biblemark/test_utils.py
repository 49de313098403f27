"""Test suite for `biblemark.utils` module."""

from __future__ import annotations

import pytest

from biblemark.utils import lazyproperty


class DescribeLazyproperty:
    """Unit-test suite for `biblemark.utils.lazyproperty`."""

    def it_is_evaluated_only_on_first_access(self):
        class Page:
            calls = 0

            @lazyproperty
            def html_text(self) -> str:
                Page.calls += 1
                return "<html></html>"

        page = Page()

        assert page.html_text == "<html></html>"
        assert page.html_text == "<html></html>"
        assert Page.calls == 1

    def it_returns_the_descriptor_when_accessed_on_the_class(self):
        class Page:
            @lazyproperty
            def html_text(self) -> str:
                """The page."""
                return ""

        assert isinstance(Page.html_text, lazyproperty)
        assert Page.html_text.__doc__ == "The page."

    def it_is_read_only(self):
        class Page:
            @lazyproperty
            def html_text(self) -> str:
                return ""

        with pytest.raises(AttributeError, match="can't set attribute"):
            Page().html_text = "<html></html>"  # pyright: ignore
