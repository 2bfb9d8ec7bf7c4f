# article_parser/content.py
"""
Body text extraction.

Two passes over the same document:

1. ``extract_primary_content`` tries well-known article containers in
   priority order and takes the first one whose cleaned text is long
   enough and reads like prose.
2. ``scan_fallback_blocks`` runs only when the first pass found nothing;
   it scores every block container in the page by text length and keeps
   the longest acceptable one.
"""

import logging
import re
from typing import Optional

from bs4 import Tag

from .document import (
    ArticleDocument,
    AttrSelector,
    ClassSelector,
    DescendantSelector,
    TagSelector,
    class_attr,
    visible_text,
)
from .quality import is_article_content
from .text import normalize_text

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

MIN_CONTENT_LENGTH = 200

CONTENT_SELECTORS = (
    TagSelector("article"),
    ClassSelector("post"),
    ClassSelector("content"),
    ClassSelector("article-content"),
    ClassSelector("entry-content"),
    AttrSelector("role", "article"),
    DescendantSelector(TagSelector("main"), TagSelector("article")),
    ClassSelector("post-content"),
    ClassSelector("article-body"),
    ClassSelector("post-body"),
)

TECHNICAL_TAGS = frozenset(
    ["script", "style", "noscript", "nav", "header", "footer", "aside", "code", "pre"]
)
AD_CLASSES = frozenset(["ad", "ads"])
CODE_CLASS = re.compile(r"code|syntax|highlight|css|style|script", re.IGNORECASE)

# the heading usually repeats the title, keep it out of the body.
# Its characters no longer count toward MIN_CONTENT_LENGTH, so a short
# article that only clears the minimum with its heading is rejected.
TITLE_TAGS = frozenset(["h1"])


def has_code_class(tag: Tag) -> bool:
    return bool(CODE_CLASS.search(class_attr(tag)))


def is_technical(tag: Tag) -> bool:
    """True for descendants that never carry article prose."""
    if tag.name in TECHNICAL_TAGS or tag.name in TITLE_TAGS:
        return True
    classes = class_attr(tag)
    if AD_CLASSES.intersection(classes.split()):
        return True
    return bool(CODE_CLASS.search(classes))


def candidate_text(element: Tag) -> Optional[str]:
    """Cleaned text of ``element`` if it is acceptable article content."""
    text = normalize_text(visible_text(element, skip=is_technical))
    if len(text) > MIN_CONTENT_LENGTH and is_article_content(text):
        return text
    return None


def extract_primary_content(doc: ArticleDocument) -> Optional[str]:
    for selector in CONTENT_SELECTORS:
        el = doc.find_first(selector)
        if el is None:
            continue
        text = candidate_text(el)
        if text:
            logger.debug("content found via %s (%d chars)", selector, len(text))
            return text
        logger.debug("container %s rejected", selector)
    return None


def scan_fallback_blocks(doc: ArticleDocument) -> Optional[str]:
    best_content = None
    max_score = 0
    scanned = 0

    for el in doc.iter_blocks():
        if has_code_class(el):
            continue
        scanned += 1
        text = candidate_text(el)
        if not text:
            continue
        score = len(text)
        # strictly greater: the earliest of equal-length blocks wins
        if score > max_score:
            max_score = score
            best_content = text

    logger.debug("fallback scanned %d blocks, best score %d", scanned, max_score)
    return best_content
