"""Content type detection utilities."""

from enum import Enum
from urllib.parse import urlparse


class ContentType(str, Enum):
    """Kind of source a stored document was ingested from."""

    URL = "url"
    PDF = "pdf"
    TEXT = "text"


class MediaType(str, Enum):
    """Media types a fetched resource can be routed as."""

    HTML = "html"
    PDF = "pdf"
    UNKNOWN = "unknown"


def detect_media_type(url: str, content_type_header: str | None, content: bytes) -> MediaType:
    """Detect how a fetched resource should be extracted.

    Detection strategy:
    1. Content bytes (PDF magic number)
    2. Content-Type response header
    3. URL pattern (*.pdf)
    4. Default to HTML

    Args:
        url: Final URL of the resource
        content_type_header: Value of the Content-Type response header
        content: Response body

    Returns:
        Detected MediaType
    """
    from_bytes = detect_media_type_from_bytes(content)
    if from_bytes != MediaType.UNKNOWN:
        return from_bytes

    header = (content_type_header or "").lower()
    if "application/pdf" in header:
        return MediaType.PDF
    if "html" in header:
        return MediaType.HTML

    if urlparse(url).path.lower().endswith(".pdf"):
        return MediaType.PDF

    return MediaType.HTML


def detect_media_type_from_bytes(content: bytes) -> MediaType:
    """Detect media type by inspecting content bytes.

    Args:
        content: Content bytes to inspect

    Returns:
        Detected MediaType
    """
    if content.lstrip()[:5] == b"%PDF-":
        return MediaType.PDF

    # Check for HTML markers in first 1KB
    preview = content[:1024].lower()
    if b"<!doctype html" in preview or b"<html" in preview:
        return MediaType.HTML

    return MediaType.UNKNOWN


def looks_like_pdf(content: bytes) -> bool:
    """Check for the PDF magic number within the first kilobyte.

    Some writers emit junk bytes before the header; readers tolerate up to 1KB.
    """
    return b"%PDF-" in content[:1024]
