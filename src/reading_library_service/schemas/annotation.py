"""Highlight and note request/response schemas."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

HighlightColor = Literal["yellow", "red", "green"]


class HighlightCreateRequest(BaseModel):
    """Selection made in the reading UI.

    Indices are positions in the document's plain-text projection, as measured
    by the client against the rendered content root.
    """

    document_id: int = Field(..., description="Document being highlighted")
    selected_text: str = Field(..., description="Text of the live selection")
    selection_start_index: int = Field(..., ge=0, description="Selection start")
    selection_end_index: int = Field(..., ge=0, description="Selection end")
    color: HighlightColor = Field("yellow", description="Highlight color")


class NoteCreateRequest(BaseModel):
    """Margin note, optionally pinned to a position."""

    document_id: int = Field(..., description="Document being annotated")
    content: str = Field(..., min_length=1, description="Note text")
    offset: int | None = Field(
        None,
        ge=0,
        description="Position in the plain-text projection (defaults to 0)",
    )

    @field_validator("content")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject whitespace-only notes."""
        if not v.strip():
            raise ValueError("Note content is required")
        return v


class NoteUpdateRequest(BaseModel):
    """Edit the text of an existing note."""

    content: str = Field(..., min_length=1, description="New note text")
