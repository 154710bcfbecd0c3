"""Pydantic schemas for ingestion and annotation requests."""

from .annotation import (
    HighlightColor,
    HighlightCreateRequest,
    NoteCreateRequest,
    NoteUpdateRequest,
)
from .document import DocumentUpdateRequest
from .ingestion import (
    FileIngestionRequest,
    HeadingResponse,
    IngestionRequest,
    IngestionResponse,
    TextIngestionRequest,
    UrlIngestionRequest,
)
from .tag import DEFAULT_TAG_COLOR, TagCreateRequest

__all__ = [
    "HighlightColor",
    "HighlightCreateRequest",
    "NoteCreateRequest",
    "NoteUpdateRequest",
    "DocumentUpdateRequest",
    "FileIngestionRequest",
    "HeadingResponse",
    "IngestionRequest",
    "IngestionResponse",
    "TextIngestionRequest",
    "UrlIngestionRequest",
    "DEFAULT_TAG_COLOR",
    "TagCreateRequest",
]
