"""Unit tests for character-offset anchoring."""

import pytest

from reading_library_service.annotations import (
    AnchorOffsets,
    EmptySelectionError,
    InvalidSelectionError,
    compute_offsets,
    plain_text_projection,
    validate_point,
)
from reading_library_service.extraction import ContentType

TEXT = "Hello world\nThis is a test"


class TestComputeOffsets:
    """Tests for compute_offsets."""

    def test_forward_selection(self) -> None:
        """Test a plain forward selection."""
        assert compute_offsets(TEXT, 6, 11) == AnchorOffsets(6, 11, "world")

    def test_backward_selection_normalized(self) -> None:
        """Test selections made right-to-left give the same anchor."""
        assert compute_offsets(TEXT, 11, 6) == compute_offsets(TEXT, 6, 11)

    def test_whole_document(self) -> None:
        """Test a selection spanning the entire text."""
        offsets = compute_offsets(TEXT, 0, len(TEXT))

        assert offsets.start_offset == 0
        assert offsets.end_offset == len(TEXT)
        assert offsets.text == TEXT

    def test_span_across_lines(self) -> None:
        """Test selections across a line break keep the newline."""
        assert compute_offsets(TEXT, 6, 16).text == "world\nThis"

    def test_empty_selection(self) -> None:
        """Test zero-length selections are rejected."""
        with pytest.raises(EmptySelectionError):
            compute_offsets(TEXT, 4, 4)

    @pytest.mark.parametrize(("start", "end"), [(-1, 3), (0, len(TEXT) + 1), (50, 60)])
    def test_out_of_range(self, start: int, end: int) -> None:
        """Test selections outside the text are rejected."""
        with pytest.raises(InvalidSelectionError):
            compute_offsets(TEXT, start, end)

    def test_every_selection_is_valid(self) -> None:
        """Test all non-empty selections yield in-range offsets matching the text."""
        text = "ab\ncd é"
        for start in range(len(text) + 1):
            for end in range(len(text) + 1):
                if start == end:
                    continue
                offsets = compute_offsets(text, start, end)
                assert 0 <= offsets.start_offset < offsets.end_offset <= len(text)
                assert text[offsets.start_offset : offsets.end_offset] == offsets.text


class TestValidatePoint:
    """Tests for validate_point."""

    @pytest.mark.parametrize("offset", [0, 5, len(TEXT)])
    def test_valid(self, offset: int) -> None:
        """Test points within the text, including both ends."""
        assert validate_point(TEXT, offset) == offset

    @pytest.mark.parametrize("offset", [-1, len(TEXT) + 1])
    def test_invalid(self, offset: int) -> None:
        """Test points outside the text."""
        with pytest.raises(InvalidSelectionError):
            validate_point(TEXT, offset)


class TestPlainTextProjection:
    """Tests for plain_text_projection."""

    def test_markup_ignored(self) -> None:
        """Test URL documents project to their concatenated text nodes."""
        content = "<div><h1>Title</h1><p>Hello <b>bold</b> world</p></div>"
        assert plain_text_projection(content, ContentType.URL) == "TitleHello bold world"

    def test_plain_documents_unchanged(self) -> None:
        """Test PDF and text documents are already plain text."""
        assert plain_text_projection(TEXT, ContentType.TEXT) == TEXT
        assert plain_text_projection(TEXT, ContentType.PDF) == TEXT

    def test_accepts_string_content_type(self) -> None:
        """Test stored string values are accepted."""
        assert plain_text_projection("<p>a</p>", "url") == "a"

    def test_blank_markup(self) -> None:
        """Test blank URL content projects to empty text."""
        assert plain_text_projection("  ", ContentType.URL) == ""

    def test_offsets_over_projection(self) -> None:
        """Test offsets index into the projection, not the markup."""
        projection = plain_text_projection("<p>Hello <em>there</em></p>", ContentType.URL)

        offsets = compute_offsets(projection, 6, 11)

        assert offsets.text == "there"
        assert offsets.start_offset == 6
