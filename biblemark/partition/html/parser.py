# pyright: reportPrivateUsage=false

"""Provides the HTML parser used by `partition_chapter()`.

The chapter page is parsed with `lxml` into a tree of `ChapterElement` objects. This is an `lxml`
Custom Element Class: every element in the parsed tree is instantiated as a `ChapterElement`, so
the queries the conversion pipeline needs (class value, concatenated text, contents in document
order, the structural role written by the tagger) are available as methods on the nodes
themselves.

- _Anatomy of a passage-text node._ Consider this fragment of a chapter page:
  ```html
  <p><span class="text Gen-1-2"><sup class="versenum">2 </sup>Now the earth was
    <span class="small-caps">formless</span> and empty</span></p>
  ```
  - The `<span class="text Gen-1-2">` is the passage-text node for verse 2.
  - Its _contents_ are, in order: the `<sup>` element, the tail of the `<sup>` ("Now the earth
    was\n    "), the small-caps `<span>`, and the tail of that span (" and empty").
  - Text that follows an element, before the next element starts, is the _tail_ of that element.
    Removing an element with `lxml` removes its tail too unless care is taken, which is why
    `.drop()` re-homes the tail before removing the element.
"""

from __future__ import annotations

from typing import Iterator, Optional, Union, cast

from lxml import etree

from biblemark.partition.utils.constants import ROLE_ATTR


class ChapterElement(etree.ElementBase):
    """Custom element-class for every element of a parsed chapter page."""

    @property
    def class_value(self) -> str:
        """The raw `class` attribute value, empty string when there is none."""
        return self.get("class", "")

    def class_contains(self, fragment: str) -> bool:
        """True when `fragment` occurs anywhere in the `class` attribute value."""
        return fragment in self.class_value

    @property
    def text_content(self) -> str:
        """Concatenated text of this element and all its descendants, excluding its tail."""
        return "".join(cast(Iterator[str], self.itertext()))

    @property
    def role(self) -> Optional[str]:
        """Structural role written in place by the structure tagger, None when unmarked."""
        return self.get(ROLE_ATTR)

    @role.setter
    def role(self, value: str) -> None:
        self.set(ROLE_ATTR, value)

    @property
    def parent_element(self) -> Optional[ChapterElement]:
        return cast(Optional[ChapterElement], self.getparent())

    def iter_contents(self) -> Iterator[Union[str, ChapterElement]]:
        """Generate the direct content items of this element in document order.

        Items are either a `str` (the element text or a child tail) or a child `ChapterElement`.
        Empty text is skipped. Non-element children like processing instructions are skipped but
        their tails are not.
        """
        if self.text:
            yield self.text
        for child in self:
            if isinstance(child.tag, str):
                yield cast(ChapterElement, child)
            if child.tail:
                yield child.tail

    def iter_by_class(self, name: str) -> Iterator[ChapterElement]:
        """Generate each descendant having class token `name`, in document order."""
        xpath = f".//*[contains(concat(' ', normalize-space(@class), ' '), ' {name} ')]"
        yield from cast(list[ChapterElement], self.xpath(xpath))

    def iter_tag(self, *tags: str) -> Iterator[ChapterElement]:
        """Generate each descendant element with one of `tags`, in document order."""
        yield from cast(Iterator[ChapterElement], self.iterdescendants(*tags))

    def drop(self) -> None:
        """Remove this element and its descendants from the tree, keeping its tail text.

        The tail is appended to the tail of the preceding sibling, or to the parent's text when
        this element is the first child.
        """
        parent = self.getparent()
        if parent is None:
            return

        if tail := self.tail:
            previous = self.getprevious()
            if previous is not None:
                previous.tail = (previous.tail or "") + tail
            else:
                parent.text = (parent.text or "") + tail

        parent.remove(self)


# ------------------------------------------------------------------------------------------------
# HTML PARSER
# ------------------------------------------------------------------------------------------------


html_parser = etree.HTMLParser(remove_comments=True)
# -- every element in a chapter page is a ChapterElement --
html_parser.set_element_class_lookup(etree.ElementDefaultClassLookup(element=ChapterElement))


def parse_chapter_html(html_text: str) -> ChapterElement:
    """The root element of the chapter page `html_text`."""
    # NOTE: `lxml` will not parse a `str` that includes an XML encoding declaration and raises
    #     ValueError: Unicode strings with encoding declaration are not supported. ...
    # The browser accepts it, so work around it by parsing the UTF-8 encoded bytes instead.
    try:
        root = etree.fromstring(html_text, html_parser)
    except ValueError:
        root = etree.fromstring(html_text.encode("utf-8"), html_parser)

    # -- a document holding nothing but whitespace or a bare comment parses to None --
    if root is None:  # pyright: ignore[reportUnnecessaryComparison]
        raise ValueError("HTML text could not be parsed into a document tree")

    # -- script and style content is never passage text --
    etree.strip_elements(root, ["script", "style", "noscript"], with_tail=False)

    return cast(ChapterElement, root)
