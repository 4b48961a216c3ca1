"""Plain-text extraction from article HTML."""

import re
from typing import Optional

MAX_CONTENT_LENGTH = 8000

CHROME_BLOCK_RES = [
    re.compile(rf"<{tag}[^>]*>[\s\S]*?</{tag}>", re.IGNORECASE)
    for tag in ("script", "style", "nav", "header", "footer")
]
TAG_RE = re.compile(r"<[^>]+>")
WHITESPACE_RE = re.compile(r"\s+")
TITLE_RE = re.compile(r"<title>([^<]+)</title>", re.IGNORECASE)


def extract_article_content(html: Optional[str], max_length: int = MAX_CONTENT_LENGTH) -> str:
    """Strip page chrome and markup, returning at most max_length characters of text."""
    if not html:
        return ""

    content = html
    for block_re in CHROME_BLOCK_RES:
        content = block_re.sub("", content)
    content = TAG_RE.sub(" ", content)
    content = WHITESPACE_RE.sub(" ", content).strip()

    return content[:max_length]


def extract_title(html: Optional[str]) -> Optional[str]:
    """Document <title>, if any."""
    if not html:
        return None
    match = TITLE_RE.search(html)
    return match.group(1).strip() if match else None
