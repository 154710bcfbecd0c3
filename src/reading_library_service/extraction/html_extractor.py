"""HTML article extraction driven by a pluggable content scoring strategy."""

import re
import time

from lxml import etree
from lxml.html import HtmlElement, document_fromstring, tostring

from .base import BaseExtractor, ExtractedDocument
from .content_type import ContentType
from .exceptions import ExtractionError
from .readability import ContentScoringStrategy, ReadabilityStrategy
from .utils import UNTITLED_ARTICLE, clean_text

XML_DECLARATION_RE = re.compile(r"^\s*<\?xml[^>]*\?>")
META_CHARSET_RE = re.compile(
    rb"<meta[^>]+charset\s*=\s*[\"']?\s*([A-Za-z0-9_.:-]+)", re.IGNORECASE
)
CHARSET_SNIFF_BYTES = 2048  # <meta charset> is expected near the top of <head>


class HTMLExtractor(BaseExtractor):
    """Extract the main article from an HTML page.

    The strategy decides which region is the article; this class owns parsing,
    the minimum content threshold, serialization and the title fallback.
    """

    content_type = ContentType.URL
    MIN_CONTENT_LENGTH = 100  # Minimum characters for valid extraction

    def __init__(
        self,
        strategy: ContentScoringStrategy | None = None,
        min_content_length: int | None = None,
    ) -> None:
        self.strategy = strategy or ReadabilityStrategy()
        self.min_content_length = (
            self.MIN_CONTENT_LENGTH if min_content_length is None else min_content_length
        )

    async def extract(self, content: bytes | str, source_name: str) -> ExtractedDocument:
        """Extract article content from HTML.

        Args:
            content: HTML page as bytes or string
            source_name: Final URL of the page

        Returns:
            ExtractedDocument with region markup as content

        Raises:
            ExtractionError: If the page cannot be parsed or has no article body
        """
        start_time = time.perf_counter()

        tree = parse_html(content)
        scored = self.strategy.score_and_extract(tree)
        if scored is None:
            raise ExtractionError(f"No article content found at {source_name}")

        plain_text = clean_text(scored.content_node.text_content())
        if len(plain_text) < self.min_content_length:
            raise ExtractionError(
                f"Extraction returned insufficient content ({len(plain_text)} chars)"
            )

        title = " ".join((scored.title or "").split()) or UNTITLED_ARTICLE

        return ExtractedDocument(
            title=title,
            content=tostring(scored.content_node, encoding="unicode", method="html"),
            plain_text=plain_text,
            content_type=self.content_type,
            original_url=source_name,
            extraction_method=self.strategy.name,
            extraction_time_ms=(time.perf_counter() - start_time) * 1000,
        )


def sniff_charset(content: bytes) -> str | None:
    """Return the charset declared by a <meta> tag near the top of the page."""
    match = META_CHARSET_RE.search(content[:CHARSET_SNIFF_BYTES])
    if match is None:
        return None
    return match.group(1).decode("ascii")


def decode_html(content: bytes, encoding: str | None = None) -> str:
    """Decode an HTML body.

    The charset comes from the HTTP header when present, then from the
    page's <meta charset>, then UTF-8. Unknown charsets fall back to UTF-8.
    """
    encoding = encoding or sniff_charset(content) or "utf-8"
    try:
        return content.decode(encoding, errors="replace")
    except LookupError:
        return content.decode("utf-8", errors="replace")


def parse_html(content: bytes | str) -> HtmlElement:
    """Parse a full HTML page into an lxml tree.

    Raises:
        ExtractionError: If the input is empty or unparseable
    """
    if isinstance(content, bytes):
        content = decode_html(content)

    # lxml rejects str input carrying an XML encoding declaration
    content = XML_DECLARATION_RE.sub("", content, count=1)
    if not content.strip():
        raise ExtractionError("Page is empty")

    try:
        return document_fromstring(content)
    except (etree.ParserError, ValueError) as e:
        raise ExtractionError(f"Could not parse HTML: {e}") from e
