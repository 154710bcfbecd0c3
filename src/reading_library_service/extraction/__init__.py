"""Content extraction module.

Turns URLs, PDF uploads and pasted text into normalized documents.

Usage:
    from reading_library_service.extraction import ExtractionPipeline, UrlSource

    pipeline = ExtractionPipeline()
    result = await pipeline.ingest(UrlSource("https://example.com/article"))
    print(result.document.title, result.metadata.reading_time_minutes)
"""

from .base import BaseExtractor, ExtractedDocument
from .content_type import ContentType, MediaType, detect_media_type
from .exceptions import (
    ContentTooLargeError,
    ExtractionError,
    FetchError,
    IngestionError,
    PdfParseError,
    UnsupportedSourceError,
)
from .fetcher import ArticleFetcher, FetchedResource
from .html_extractor import HTMLExtractor
from .pdf_extractor import PDFExtractor
from .readability import (
    ContentScoringStrategy,
    ReadabilityStrategy,
    ScoredContent,
    TrafilaturaStrategy,
    get_strategy,
)
from .sources import PdfSource, RawSource, TextSource, UrlSource
from .text_extractor import TextExtractor
from .utils import clean_text, normalize_text, title_from_filename, title_from_text
from .pipeline import ExtractionPipeline, IngestionResult, PipelineConfig

__all__ = [
    # Base classes
    "BaseExtractor",
    "ExtractedDocument",
    # Content types
    "ContentType",
    "MediaType",
    "detect_media_type",
    # Sources
    "RawSource",
    "UrlSource",
    "PdfSource",
    "TextSource",
    # Extractors
    "ArticleFetcher",
    "FetchedResource",
    "HTMLExtractor",
    "PDFExtractor",
    "TextExtractor",
    # Strategies
    "ContentScoringStrategy",
    "ReadabilityStrategy",
    "TrafilaturaStrategy",
    "ScoredContent",
    "get_strategy",
    # Pipeline
    "ExtractionPipeline",
    "IngestionResult",
    "PipelineConfig",
    # Exceptions
    "IngestionError",
    "FetchError",
    "ContentTooLargeError",
    "ExtractionError",
    "PdfParseError",
    "UnsupportedSourceError",
    # Utilities
    "clean_text",
    "normalize_text",
    "title_from_filename",
    "title_from_text",
]
