"""Annotation anchoring.

Highlights and notes are anchored to character offsets in the plain-text
projection of a document's stored content.
"""

from .anchors import HighlightAnchor, NoteAnchor, build_highlight, build_note
from .exceptions import (
    AnnotationError,
    EmptySelectionError,
    InvalidSelectionError,
    SelectionMismatchError,
)
from .offsets import AnchorOffsets, compute_offsets, plain_text_projection, validate_point

__all__ = [
    "HighlightAnchor",
    "NoteAnchor",
    "build_highlight",
    "build_note",
    "AnnotationError",
    "EmptySelectionError",
    "InvalidSelectionError",
    "SelectionMismatchError",
    "AnchorOffsets",
    "compute_offsets",
    "plain_text_projection",
    "validate_point",
]
