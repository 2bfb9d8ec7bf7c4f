# article_parser/document.py
"""
Read-only view over one parsed HTML document.

Selectors are a closed set of small frozen dataclasses instead of CSS
strings; each one knows how to test a single tag.  Text is collected by
walking the tree and skipping unwanted subtrees, so the parsed soup is
never copied or modified.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Union

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import (
    Comment,
    Declaration,
    Doctype,
    ProcessingInstruction,
    Script,
    Stylesheet,
)

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

BLOCK_TAGS = ("div", "section", "main", "article")

# Comments, doctypes and script/style strings are not visible text;
# ruby annotations and template strings are
_HIDDEN_TYPES = (Comment, Declaration, Doctype, ProcessingInstruction, Script, Stylesheet)


def class_attr(tag: Tag) -> str:
    value = tag.get("class")
    if not value:
        return ""
    if isinstance(value, str):
        return value
    return " ".join(value)


@dataclass(frozen=True)
class TagSelector:
    name: str

    def matches(self, tag: Tag) -> bool:
        return tag.name == self.name


@dataclass(frozen=True)
class ClassSelector:
    """Whole class token, like ``.post``."""
    token: str

    def matches(self, tag: Tag) -> bool:
        return self.token in class_attr(tag).split()


@dataclass(frozen=True)
class ClassContainsSelector:
    """Substring of the class attribute, like ``[class*="date"]``."""
    fragment: str

    def matches(self, tag: Tag) -> bool:
        return self.fragment in class_attr(tag)


@dataclass(frozen=True)
class AttrSelector:
    """Attribute presence, or an exact value when ``value`` is set."""
    name: str
    value: Optional[str] = None
    tag: Optional[str] = None

    def matches(self, tag: Tag) -> bool:
        if self.tag is not None and tag.name != self.tag:
            return False
        if not tag.has_attr(self.name):
            return False
        return self.value is None or tag.get(self.name) == self.value


@dataclass(frozen=True)
class MetaSelector:
    """``<meta property=...>`` or ``<meta name=...>``; the value lives in ``content``."""
    attr: str
    value: str

    def matches(self, tag: Tag) -> bool:
        return tag.name == "meta" and tag.get(self.attr) == self.value


@dataclass(frozen=True)
class DescendantSelector:
    ancestor: "Selector"
    target: "Selector"

    def matches(self, tag: Tag) -> bool:
        if not self.target.matches(tag):
            return False
        return any(self.ancestor.matches(parent) for parent in tag.parents)


Selector = Union[
    TagSelector,
    ClassSelector,
    ClassContainsSelector,
    AttrSelector,
    MetaSelector,
    DescendantSelector,
]


def attribute(tag: Tag, name: str) -> Optional[str]:
    value = tag.get(name)
    if value is None:
        return None
    if not isinstance(value, str):
        value = " ".join(value)
    return value


def visible_text(element: Tag, skip: Optional[Callable[[Tag], bool]] = None) -> str:
    """
    Concatenate the text nodes under ``element`` in document order.

    Descendant tags for which ``skip`` returns True are left out together
    with their whole subtree.  The walk uses an explicit stack so deeply
    nested (often unclosed) markup cannot hit the recursion limit.
    """
    parts = []
    stack = [iter(element.children)]
    while stack:
        for child in stack[-1]:
            if isinstance(child, Tag):
                if skip is not None and skip(child):
                    continue
                stack.append(iter(child.children))
                break
            if isinstance(child, NavigableString) and not isinstance(child, _HIDDEN_TYPES):
                parts.append(str(child))
        else:
            stack.pop()
    return "".join(parts)


class ArticleDocument:
    """Parsed tree for a single extraction call."""

    def __init__(self, html: str):
        # html.parser is lenient and needs nothing beyond the stdlib
        self._soup = BeautifulSoup(html, "html.parser")

    def find_first(self, selector: Selector) -> Optional[Tag]:
        return self._soup.find(selector.matches)

    def iter_descendants(self) -> Iterator[Tag]:
        for node in self._soup.descendants:
            if isinstance(node, Tag):
                yield node

    def iter_blocks(self) -> Iterator[Tag]:
        for tag in self.iter_descendants():
            if tag.name in BLOCK_TAGS:
                yield tag
