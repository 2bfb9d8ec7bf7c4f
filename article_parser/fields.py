# article_parser/fields.py
import logging
from typing import Optional

from .document import (
    ArticleDocument,
    AttrSelector,
    ClassContainsSelector,
    ClassSelector,
    DescendantSelector,
    MetaSelector,
    TagSelector,
    attribute,
    visible_text,
)

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

# Priority order, first non-empty value wins
TITLE_SELECTORS = (
    DescendantSelector(TagSelector("article"), TagSelector("h1")),
    DescendantSelector(ClassSelector("post"), TagSelector("h1")),
    DescendantSelector(ClassSelector("content"), TagSelector("h1")),
    TagSelector("h1"),
    TagSelector("title"),
    MetaSelector("property", "og:title"),
)

DATE_SELECTORS = (
    AttrSelector("datetime", tag="time"),
    TagSelector("time"),
    ClassSelector("date"),
    ClassSelector("published"),
    ClassSelector("post-date"),
    ClassContainsSelector("date"),
    ClassContainsSelector("time"),
    MetaSelector("property", "article:published_time"),
    MetaSelector("name", "date"),
    MetaSelector("name", "publish-date"),
)


def resolve_title(doc: ArticleDocument) -> Optional[str]:
    for selector in TITLE_SELECTORS:
        el = doc.find_first(selector)
        if el is None:
            continue
        if isinstance(selector, MetaSelector):
            text = (attribute(el, "content") or "").strip()
        else:
            text = visible_text(el).strip()
        if text:
            logger.debug("title found via %s", selector)
            return text
    return None


def _attr_value(el, name: str) -> Optional[str]:
    # blank counts as missing, anything else is kept as written
    value = attribute(el, name)
    if value is None or not value.strip():
        return None
    return value


def resolve_date(doc: ArticleDocument) -> Optional[str]:
    """
    Return the publish date exactly as the page states it.

    An explicit ``datetime`` or ``content`` attribute beats the visible
    text of the same element.  The value is not parsed: pages mix ISO
    timestamps with free-form strings like "3 hours ago".
    """
    for selector in DATE_SELECTORS:
        el = doc.find_first(selector)
        if el is None:
            continue
        value = _attr_value(el, "datetime") or _attr_value(el, "content") or visible_text(el).strip()
        if value:
            logger.debug("date found via %s", selector)
            return value
    return None
