"""Extraction result types and the abstract extractor base."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .content_type import ContentType


@dataclass
class ExtractedDocument:
    """Result of content extraction.

    Attributes:
        title: Document title (fallback already applied)
        content: Readable body; markup for URL sources, plain text otherwise
        plain_text: Text-only projection used for metadata derivation
        content_type: Source kind the document came from
        original_url: Final URL after redirects (URL sources only)
        extraction_method: Which extractor/strategy produced the content
        extraction_time_ms: Time taken to extract (milliseconds)
        warnings: Non-fatal issues noticed during extraction
    """

    title: str
    content: str
    plain_text: str
    content_type: ContentType
    original_url: str | None = None
    extraction_method: str = ""
    extraction_time_ms: float = 0.0
    warnings: list[str] = field(default_factory=list)

    @property
    def word_count(self) -> int:
        """Number of whitespace-separated words in the plain text."""
        return len(self.plain_text.split())


class BaseExtractor(ABC):
    """Abstract base class for content extractors.

    Extractors turn one kind of raw input into an ExtractedDocument.
    """

    content_type: ContentType

    @abstractmethod
    async def extract(self, content: bytes | str, source_name: str) -> ExtractedDocument:
        """Extract a readable document from raw content.

        Args:
            content: Raw content (bytes for PDF/HTML, str for pasted text)
            source_name: URL or filename the content came from

        Returns:
            ExtractedDocument with title, content and plain text

        Raises:
            IngestionError: If extraction fails
        """
        pass
