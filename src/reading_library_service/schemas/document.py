"""Stored document update schemas."""

from pydantic import BaseModel, Field, field_validator


class DocumentUpdateRequest(BaseModel):
    """Partial update sent by the reader UI."""

    title: str | None = Field(None, min_length=1, max_length=512, description="New title")
    reading_progress: int | None = Field(None, ge=0, le=100, description="Percentage read")
    is_read: bool | None = Field(
        None,
        description="Explicit read flag (derived from progress when omitted)",
    )

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str | None) -> str | None:
        """Strip titles and reject blank ones."""
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("Title cannot be blank")
        return v
