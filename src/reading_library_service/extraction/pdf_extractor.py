"""PDF text extraction using PyMuPDF."""

import time

import fitz  # PyMuPDF

from .base import BaseExtractor, ExtractedDocument
from .content_type import ContentType, looks_like_pdf
from .exceptions import PdfParseError
from .utils import clean_text, title_from_filename


class PDFExtractor(BaseExtractor):
    """Extract a flat text stream from an in-memory PDF.

    Design Decision: plain PyMuPDF page text
    - Page structure is not preserved; pages are joined with a blank line
      before normalization
    - The buffer is opened from memory, nothing touches the filesystem
    - The title comes from the upload filename, not PDF metadata

    Trade-offs:
    - ✅ Fast, dependency already used for PDF handling
    - ❌ Multi-column layouts may be scrambled
    - ❌ Scanned PDFs yield no text (no OCR)
    """

    content_type = ContentType.PDF

    def __init__(self, max_size_bytes: int | None = None) -> None:
        """Initialize extractor.

        Args:
            max_size_bytes: Reject buffers larger than this (None = no limit)
        """
        self.max_size_bytes = max_size_bytes

    async def extract(self, content: bytes | str, source_name: str) -> ExtractedDocument:
        """Extract text from a PDF buffer.

        Args:
            content: PDF bytes
            source_name: Upload filename (or URL) used to derive the title

        Returns:
            ExtractedDocument where content == plain_text

        Raises:
            PdfParseError: If the buffer is not a readable PDF
        """
        start_time = time.perf_counter()

        if isinstance(content, str):
            raise PdfParseError("PDF content must be bytes")
        if not content:
            raise PdfParseError("PDF file is empty")
        if self.max_size_bytes is not None and len(content) > self.max_size_bytes:
            raise PdfParseError(
                f"PDF size {len(content)} exceeds limit {self.max_size_bytes}"
            )
        if not looks_like_pdf(content):
            raise PdfParseError("File is not a PDF (missing %PDF header)")

        text, page_count = self._read_pages(content)
        plain_text = clean_text(text)

        warnings: list[str] = []
        if not plain_text:
            warnings.append(f"No extractable text in {page_count} page(s); the PDF may be scanned")

        return ExtractedDocument(
            title=title_from_filename(source_name),
            content=plain_text,
            plain_text=plain_text,
            content_type=self.content_type,
            extraction_method="pymupdf",
            extraction_time_ms=(time.perf_counter() - start_time) * 1000,
            warnings=warnings,
        )

    def _read_pages(self, content: bytes) -> tuple[str, int]:
        """Return joined page text and page count."""
        try:
            doc = fitz.open(stream=content, filetype="pdf")
        except Exception as e:
            raise PdfParseError(f"Failed to parse PDF: {e}") from e

        try:
            if doc.needs_pass:
                raise PdfParseError("PDF is password protected")
            if doc.page_count == 0:
                raise PdfParseError("PDF has no pages")

            text_parts = [page.get_text() for page in doc]
            return "\n\n".join(text_parts), doc.page_count
        except PdfParseError:
            raise
        except Exception as e:
            raise PdfParseError(f"Failed to parse PDF: {e}") from e
        finally:
            doc.close()
