"""Character-offset anchors in a document's plain-text projection.

Offsets count characters of rendered text with markup ignored, from the start
of the document's content root. They are only meaningful while the stored
content is unchanged: anchors are not rebased if content is edited.
"""

from dataclasses import dataclass

from lxml import etree

from ..extraction.content_type import ContentType
from ..metadata.headings import parse_fragment
from .exceptions import EmptySelectionError, InvalidSelectionError


@dataclass(frozen=True)
class AnchorOffsets:
    """Validated [start_offset, end_offset) range and the text it covers."""

    start_offset: int
    end_offset: int
    text: str


def plain_text_projection(content: str, content_type: ContentType | str) -> str:
    """Text-only rendering of stored content, the coordinate space for offsets.

    URL documents store markup, so their projection is the concatenation of
    all text nodes. PDF and pasted-text documents are already plain text.
    """
    if ContentType(content_type) != ContentType.URL:
        return content
    if not content.strip():
        return ""

    try:
        return parse_fragment(content).text_content()
    except (etree.ParserError, ValueError):
        return content


def compute_offsets(rendered_text: str, selection_start: int, selection_end: int) -> AnchorOffsets:
    """Compute anchor offsets for a selection in rendered plain text.

    Backward selections (start after end) are normalized. The start offset is
    measured as the length of all text preceding the selection end, minus the
    selection length.

    Raises:
        EmptySelectionError: Zero-length selection
        InvalidSelectionError: Selection outside [0, len(rendered_text)]
    """
    start, end = sorted((selection_start, selection_end))

    if start == end:
        raise EmptySelectionError("Select some text to highlight")
    if start < 0 or end > len(rendered_text):
        raise InvalidSelectionError(
            f"Selection [{start}, {end}) is outside the document (length {len(rendered_text)})"
        )

    selected = rendered_text[start:end]
    start_offset = len(rendered_text[:end]) - len(selected)
    return AnchorOffsets(
        start_offset=start_offset,
        end_offset=start_offset + len(selected),
        text=selected,
    )


def validate_point(rendered_text: str, offset: int) -> int:
    """Check a single anchor point lies within the projection.

    Raises:
        InvalidSelectionError: Offset outside [0, len(rendered_text)]
    """
    if offset < 0 or offset > len(rendered_text):
        raise InvalidSelectionError(
            f"Offset {offset} is outside the document (length {len(rendered_text)})"
        )
    return offset
