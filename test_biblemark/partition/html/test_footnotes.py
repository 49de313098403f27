"""Test suite for `biblemark.partition.html.footnotes` module."""

from __future__ import annotations

from biblemark.partition.html.footnotes import index_footnotes
from biblemark.partition.html.parser import parse_chapter_html


def test_index_footnotes_maps_each_footnote_letter_to_its_expanded_text():
    root = parse_chapter_html(
        "<html><body>"
        "<div class='footnotes'><h4>Footnotes</h4><ol type='a'>"
        "<li id='fen-NIV-26a'><a href='#en-NIV-26' title='Go to Genesis 1:26'>Genesis 1:26</a>"
        " <span class='footnote-text'>Probable reading of the original Hebrew text</span></li>"
        "<li id='fen-NIV-27b'><a href='#en-NIV-27'>Genesis 1:27</a>"
        " <span class='footnote-text'>See also <i>Exodus 3:14</i></span></li>"
        "</ol></div>"
        "<div class='crossrefs hidden'><h4>Cross references</h4><ol>"
        "<li id='cen-NIV-26A'><a href='#en-NIV-26'>Genesis 1:26</a> : Ps 100:3</li>"
        "</ol></div>"
        "</body></html>"
    )

    assert index_footnotes(root) == {
        "a": "Probable reading of the original Hebrew text",
        "b": "See also Exodus 3:14",
    }


def test_index_footnotes_produces_an_empty_mapping_when_the_chapter_has_no_footnotes():
    root = parse_chapter_html(
        "<html><body><p><span class='text Gen-1-1'>In the beginning</span></p></body></html>"
    )

    assert index_footnotes(root) == {}


def test_index_footnotes_produces_an_empty_mapping_when_the_lists_are_blank():
    root = parse_chapter_html("<html><body><ol>\n  <li>  </li>\n</ol></body></html>")

    assert index_footnotes(root) == {}


def test_index_footnotes_keeps_the_last_footnote_when_a_letter_repeats():
    root = parse_chapter_html(
        "<html><body><ol>"
        "<li id='fen-NIV-1a'><span class='footnote-text'>first</span></li>"
        "<li id='fen-NIV-2a'><span class='footnote-text'>second</span></li>"
        "</ol></body></html>"
    )

    assert index_footnotes(root) == {"a": "second"}
