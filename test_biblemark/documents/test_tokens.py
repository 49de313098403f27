"""Test suite for `biblemark.documents.tokens` module."""

from __future__ import annotations

import pytest

from biblemark.documents.tokens import (
    FOOTNOTE_CLOSE,
    FOOTNOTE_OPEN,
    INDENT_CLOSE,
    INDENT_SINGLE,
    PARAGRAPH_BREAK,
    QUOTED_SPEECH_CLOSE,
    QUOTED_SPEECH_OPEN,
    TITLE_CLOSE,
    TITLE_OPEN,
    ControlTag,
    TextRun,
    render_tokens,
)
from biblemark.partition.utils.constants import Marker


class DescribeTextRun:
    """Unit-test suite for `biblemark.documents.tokens.TextRun`."""

    def it_renders_its_text_verbatim(self):
        assert TextRun("And God said, <let there be>").rendered == "And God said, <let there be>"


class DescribeControlTag:
    """Unit-test suite for `biblemark.documents.tokens.ControlTag`."""

    @pytest.mark.parametrize(
        ("tag", "expected_value"),
        [
            (INDENT_SINGLE, "<PI1>"),
            (INDENT_CLOSE, "<CI>"),
            (PARAGRAPH_BREAK, "<CM>"),
            (TITLE_OPEN, "<TS>"),
            (TITLE_CLOSE, "<Ts>"),
            (QUOTED_SPEECH_OPEN, "<FR>"),
            (QUOTED_SPEECH_CLOSE, "<Fr>"),
            (FOOTNOTE_OPEN, "<RF>"),
            (FOOTNOTE_CLOSE, "<Rf>"),
        ],
    )
    def it_renders_as_its_markup_tag(self, tag: ControlTag, expected_value: str):
        assert tag.rendered == expected_value

    def it_compares_equal_to_another_tag_of_the_same_kind(self):
        assert ControlTag(Marker.TITLE_CLOSE) == TITLE_CLOSE
        assert ControlTag(Marker.TITLE_CLOSE) != TITLE_OPEN


def test_render_tokens_concatenates_the_renderings_in_order():
    tokens = [
        TITLE_OPEN,
        TextRun("The Beatitudes"),
        TITLE_CLOSE,
        QUOTED_SPEECH_OPEN,
        TextRun("Blessed are the meek"),
        QUOTED_SPEECH_CLOSE,
    ]

    assert render_tokens(tokens) == "<TS>The Beatitudes<Ts><FR>Blessed are the meek<Fr>"


def test_render_tokens_renders_an_empty_sequence_as_an_empty_string():
    assert render_tokens([]) == ""

