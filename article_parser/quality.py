# article_parser/quality.py
"""
Heuristic check separating article prose from CSS/JS that leaked into text.
"""

import re

CSS_MARKERS = (":host", "::slotted", "var(--")
MAX_BRACE_RATIO = 0.05
MAX_CODE_LINES = 5

_BRACES = re.compile(r"[{}]")
_CODE_LINE_END = re.compile(r"[{};:]\s*$", re.MULTILINE)


def brace_ratio(text: str) -> float:
    if not text:
        return 0.0
    return len(_BRACES.findall(text)) / len(text)


def is_article_content(text: str) -> bool:
    """Return False when the block looks like a stylesheet or script."""
    if any(marker in text for marker in CSS_MARKERS):
        return False
    if brace_ratio(text) > MAX_BRACE_RATIO:
        return False
    # lines ending in ; { } : over a multi-line block read as code
    if _CODE_LINE_END.search(text) and len(text.split("\n")) > MAX_CODE_LINES:
        return False
    return True
