"""Ingestion request/response schemas."""

from typing import Literal

from pydantic import BaseModel, Field, HttpUrl, field_validator

from ..extraction.sources import PdfSource, TextSource, UrlSource

# =============================================================================
# Enums (as Literal types for better type safety)
# =============================================================================

ContentTypeValue = Literal["url", "pdf", "text"]


# =============================================================================
# Request Schemas
# =============================================================================


class UrlIngestionRequest(BaseModel):
    """Request to capture a web article."""

    url: HttpUrl = Field(
        ...,
        description="URL of the article to capture",
        examples=["https://example.com/posts/long-read"],
    )

    @field_validator("url")
    @classmethod
    def validate_url_scheme(cls, v: HttpUrl) -> HttpUrl:
        """Ensure URL uses http or https scheme."""
        if v.scheme not in ("http", "https"):
            raise ValueError("URL must use http or https scheme")
        return v

    def to_source(self) -> UrlSource:
        return UrlSource(url=str(self.url))


class TextIngestionRequest(BaseModel):
    """Request to capture pasted text."""

    text: str = Field(..., min_length=1, description="Pasted text")

    @field_validator("text")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject whitespace-only text."""
        if not v.strip():
            raise ValueError("Text is required")
        return v

    def to_source(self) -> TextSource:
        return TextSource(text=self.text)


class FileIngestionRequest(BaseModel):
    """Request to capture an uploaded PDF."""

    file_bytes: bytes = Field(..., min_length=1, description="Raw PDF bytes")
    file_name: str = Field("", max_length=512, description="Original filename")

    def to_source(self) -> PdfSource:
        return PdfSource(data=self.file_bytes, filename=self.file_name)


IngestionRequest = UrlIngestionRequest | TextIngestionRequest | FileIngestionRequest


# =============================================================================
# Response Schemas
# =============================================================================


class HeadingResponse(BaseModel):
    """Table-of-contents entry."""

    level: int = Field(..., ge=1, le=6, description="Heading rank (1-6)")
    text: str = Field(..., description="Flattened heading text")
    id: str = Field(..., description="Element id or synthetic heading-<n>")

    model_config = {"from_attributes": True}


class IngestionResponse(BaseModel):
    """Structured result handed to the storage collaborator."""

    title: str = Field(..., description="Document title")
    content: str = Field(..., description="Readable content (markup for URL sources)")
    content_type: ContentTypeValue = Field(..., description="Source kind")
    original_url: str | None = Field(None, description="Final URL (URL sources)")
    reading_time_minutes: int = Field(..., ge=1, description="Estimated reading time")
    tags: list[str] = Field(..., min_length=1, description="Topic tags, sorted")
    headings: list[HeadingResponse] = Field(
        default_factory=list,
        description="Table of contents (URL sources only)",
    )
    warnings: list[str] = Field(
        default_factory=list,
        description="Non-fatal extraction issues, e.g. a PDF without a text layer",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Hello world",
                    "content": "Hello world\nThis is a test",
                    "content_type": "text",
                    "original_url": None,
                    "reading_time_minutes": 1,
                    "tags": ["General"],
                    "headings": [],
                    "warnings": [],
                }
            ]
        },
    }
