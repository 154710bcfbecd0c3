"""Custom exceptions for content ingestion."""


class IngestionError(Exception):
    """Base exception for ingestion errors.

    Every failure is terminal for the single request that raised it. The
    pipeline produces values only, so nothing needs to be rolled back.
    """

    pass


class FetchError(IngestionError):
    """Fetching a URL failed (timeout, connection error, non-success status)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ContentTooLargeError(FetchError):
    """Fetched content exceeds maximum size limit."""

    pass


class ExtractionError(IngestionError):
    """HTML was fetched but no article body could be identified."""

    pass


class PdfParseError(IngestionError):
    """PDF buffer is malformed, encrypted or otherwise unreadable."""

    pass


class UnsupportedSourceError(IngestionError):
    """Source kind has no extractor."""

    pass
