# article_parser/extractor.py
"""
Best-effort title, publish date and body text from an article page.

    article = parse_article(html)
    if article.content is None:
        ...  # nothing that looks like an article body

Every call parses its own tree and shares nothing with other calls, so
extraction is safe to run from several threads or processes at once.
Fetching, timeouts and input size limits belong to the caller.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Optional, Union

from bs4.builder import ParserRejectedMarkup

from .content import extract_primary_content, scan_fallback_blocks
from .document import ArticleDocument
from .fields import resolve_date, resolve_title

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class UndecodableDocumentError(ValueError):
    """Raised when the input bytes cannot be read as UTF-8 text."""


@dataclass(frozen=True)
class ParsedArticle:
    """Extraction result; a field is None when it was not found."""
    title: Optional[str] = None
    date: Optional[str] = None
    content: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


def _as_text(html: Union[str, bytes]) -> str:
    if isinstance(html, str):
        return html
    if isinstance(html, (bytes, bytearray)):
        try:
            return bytes(html).decode("utf-8")
        except UnicodeDecodeError as e:
            raise UndecodableDocumentError(f"document is not valid UTF-8: {e}") from e
    raise TypeError(f"expected str or bytes, got {type(html).__name__}")


def parse_article(html: Union[str, bytes]) -> ParsedArticle:
    text = _as_text(html)

    try:
        doc = ArticleDocument(text)
    except ParserRejectedMarkup as e:
        logger.warning("parser rejected markup, nothing extracted: %s", e)
        return ParsedArticle()

    title = resolve_title(doc)
    date = resolve_date(doc)

    content = extract_primary_content(doc)
    if content is None:
        logger.debug("no article container accepted, scanning all blocks")
        content = scan_fallback_blocks(doc)

    logger.info(
        "extracted title=%r date=%r content_len=%d",
        (title or "")[:60], date, len(content) if content else 0,
    )
    return ParsedArticle(title=title, date=date, content=content)
