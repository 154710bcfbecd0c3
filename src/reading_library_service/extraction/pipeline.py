"""Content ingestion pipeline orchestration."""

import time
from dataclasses import dataclass
from typing import assert_never

import httpx

from ..config import Settings
from ..logging_config import get_logger
from ..metadata import DocumentMetadata, TopicTagger, derive_metadata
from .base import ExtractedDocument
from .content_type import ContentType, MediaType, detect_media_type
from .fetcher import ArticleFetcher
from .html_extractor import HTMLExtractor, decode_html
from .pdf_extractor import PDFExtractor
from .readability import ContentScoringStrategy, get_strategy
from .sources import PdfSource, RawSource, TextSource, UrlSource
from .text_extractor import TextExtractor

logger = get_logger(__name__)


@dataclass
class PipelineConfig:
    """Configuration for the ingestion pipeline.

    Attributes:
        timeout_seconds: HTTP request timeout
        max_content_size_mb: Maximum fetched body size
        max_upload_size_mb: Maximum PDF upload size
        user_agent: User-Agent header for requests
        min_content_length: Minimum article text length for HTML extraction
        scoring_strategy: Name of the content scoring strategy
        words_per_minute: Reading speed for reading time estimates
    """

    timeout_seconds: float = 10.0
    max_content_size_mb: int = 50
    max_upload_size_mb: int = 50
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
    )
    min_content_length: int = 100
    scoring_strategy: str = "readability"
    words_per_minute: int = 225

    @property
    def max_content_size_bytes(self) -> int:
        """Get max content size in bytes."""
        return self.max_content_size_mb * 1024 * 1024

    @property
    def max_upload_size_bytes(self) -> int:
        """Get max upload size in bytes."""
        return self.max_upload_size_mb * 1024 * 1024

    @classmethod
    def from_settings(cls, settings: Settings) -> "PipelineConfig":
        """Build pipeline configuration from application settings."""
        return cls(
            timeout_seconds=settings.extraction_timeout_seconds,
            max_content_size_mb=settings.extraction_max_content_size_mb,
            max_upload_size_mb=settings.max_upload_size_mb,
            user_agent=settings.extraction_user_agent,
            min_content_length=settings.min_content_length,
            scoring_strategy=settings.content_scoring_strategy,
            words_per_minute=settings.reading_words_per_minute,
        )


@dataclass(frozen=True)
class IngestionResult:
    """Extracted document plus its derived metadata."""

    document: ExtractedDocument
    metadata: DocumentMetadata


class ExtractionPipeline:
    """Turns a RawSource into an ExtractedDocument with metadata.

    Flow:
    1. Dispatch the source to its extractor (URL sources are fetched first)
    2. Extractor output is normalized (clean_text)
    3. Reading time, tags and headings are derived from the normalized text

    Every call is independent: no caching, no deduplication, no retries.
    """

    def __init__(
        self,
        config: PipelineConfig | None = None,
        strategy: ContentScoringStrategy | None = None,
        client: httpx.AsyncClient | None = None,
        tagger: TopicTagger | None = None,
    ) -> None:
        """Initialize pipeline.

        Args:
            config: Pipeline configuration (uses defaults if None)
            strategy: Content scoring strategy (overrides config.scoring_strategy)
            client: Optional HTTP client, e.g. one with a mock transport
            tagger: Optional tagger with a custom keyword table
        """
        self.config = config or PipelineConfig()
        self.tagger = tagger
        self._fetcher = ArticleFetcher(
            timeout_seconds=self.config.timeout_seconds,
            user_agent=self.config.user_agent,
            max_content_size_bytes=self.config.max_content_size_bytes,
            client=client,
        )
        self._html_extractor = HTMLExtractor(
            strategy=strategy or get_strategy(self.config.scoring_strategy),
            min_content_length=self.config.min_content_length,
        )
        self._pdf_extractor = PDFExtractor(max_size_bytes=self.config.max_upload_size_bytes)
        self._text_extractor = TextExtractor()

    async def ingest(self, source: RawSource) -> IngestionResult:
        """Extract a document from any source and derive its metadata.

        Raises:
            FetchError: URL could not be fetched
            ExtractionError: Page had no identifiable article body
            PdfParseError: PDF buffer was unreadable
        """
        start_time = time.perf_counter()
        logger.info("ingestion_started", source=repr(source)[:200])

        document = await self.extract(source)
        metadata = derive_metadata(
            document.title,
            document.plain_text,
            markup=document.content if document.content_type == ContentType.URL else None,
            words_per_minute=self.config.words_per_minute,
            tagger=self.tagger,
        )

        for warning in document.warnings:
            logger.warning(
                "extraction_warning",
                content_type=document.content_type.value,
                method=document.extraction_method,
                warning=warning,
            )

        logger.info(
            "ingestion_completed",
            content_type=document.content_type.value,
            method=document.extraction_method,
            words=document.word_count,
            reading_time_minutes=metadata.reading_time_minutes,
            tags=sorted(metadata.tags),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 1),
        )
        return IngestionResult(document=document, metadata=metadata)

    async def extract(self, source: RawSource) -> ExtractedDocument:
        """Route a source to the matching extractor."""
        if isinstance(source, UrlSource):
            return await self.extract_article(source.url)
        if isinstance(source, PdfSource):
            return await self.extract_pdf(source.data, source.filename)
        if isinstance(source, TextSource):
            return await self._text_extractor.extract(source.text)
        assert_never(source)

    async def extract_article(self, url: str) -> ExtractedDocument:
        """Fetch a URL and extract its main article.

        Resources served as PDF are routed to the PDF extractor and titled
        from the last path segment of the URL.
        """
        resource = await self._fetcher.fetch(url)

        media_type = detect_media_type(resource.url, resource.content_type, resource.content)
        if media_type == MediaType.PDF:
            filename = httpx.URL(resource.url).path.rsplit("/", 1)[-1]
            document = await self._pdf_extractor.extract(resource.content, filename)
            document.original_url = resource.url
            return document

        html = decode_html(resource.content, resource.encoding)
        return await self._html_extractor.extract(html, resource.url)

    async def extract_pdf(self, data: bytes, filename: str) -> ExtractedDocument:
        """Extract text from an uploaded PDF."""
        return await self._pdf_extractor.extract(data, filename)
