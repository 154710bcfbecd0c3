"""Highlight and note anchor construction."""

from dataclasses import dataclass

from ..logging_config import get_logger
from ..schemas.annotation import HighlightColor, HighlightCreateRequest, NoteCreateRequest
from .exceptions import SelectionMismatchError
from .offsets import compute_offsets, validate_point

logger = get_logger(__name__)


@dataclass(frozen=True)
class HighlightAnchor:
    """Highlight ready to be stored."""

    document_id: int
    text: str
    start_offset: int
    end_offset: int
    color: HighlightColor


@dataclass(frozen=True)
class NoteAnchor:
    """Note ready to be stored.

    offset_defaulted is True when the caller gave no position and the note was
    pinned to the start of the document.
    """

    document_id: int
    content: str
    offset: int
    offset_defaulted: bool = False


def build_highlight(rendered_text: str, request: HighlightCreateRequest) -> HighlightAnchor:
    """Anchor a highlight to the rendered plain text of its document.

    Raises:
        EmptySelectionError: Zero-length selection
        InvalidSelectionError: Selection outside the document
        SelectionMismatchError: Selected text differs from the document text
    """
    offsets = compute_offsets(
        rendered_text, request.selection_start_index, request.selection_end_index
    )
    if request.selected_text and request.selected_text != offsets.text:
        raise SelectionMismatchError(
            f"Selected text does not match document text at "
            f"[{offsets.start_offset}, {offsets.end_offset})"
        )

    return HighlightAnchor(
        document_id=request.document_id,
        text=offsets.text,
        start_offset=offsets.start_offset,
        end_offset=offsets.end_offset,
        color=request.color,
    )


def build_note(rendered_text: str, request: NoteCreateRequest) -> NoteAnchor:
    """Anchor a note to a point in the rendered plain text.

    A note without an offset is pinned to 0 rather than rejected.

    Raises:
        InvalidSelectionError: Offset outside the document
    """
    if request.offset is None:
        logger.warning("note_offset_defaulted", document_id=request.document_id)
        return NoteAnchor(
            document_id=request.document_id,
            content=request.content,
            offset=0,
            offset_defaulted=True,
        )

    return NoteAnchor(
        document_id=request.document_id,
        content=request.content,
        offset=validate_point(rendered_text, request.offset),
    )
