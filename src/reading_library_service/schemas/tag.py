"""User tag schemas."""

import re

from pydantic import BaseModel, Field, field_validator

DEFAULT_TAG_COLOR = "#3b82f6"
HEX_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


class TagCreateRequest(BaseModel):
    """Request to create a user tag for organizing documents."""

    name: str = Field(..., min_length=1, max_length=100, description="Tag name")
    color: str = Field(
        DEFAULT_TAG_COLOR,
        description="Display color as #rrggbb",
        examples=["#3b82f6"],
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Strip names and reject blank ones."""
        v = v.strip()
        if not v:
            raise ValueError("Tag name cannot be blank")
        return v

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: str) -> str:
        """Require a #rrggbb color."""
        if not HEX_COLOR_RE.match(v):
            raise ValueError("Color must be a hex value like #3b82f6")
        return v.lower()
