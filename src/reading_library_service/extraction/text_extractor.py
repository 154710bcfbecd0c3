"""Pasted text handling."""

from .base import BaseExtractor, ExtractedDocument
from .content_type import ContentType
from .utils import clean_text, title_from_text


class TextExtractor(BaseExtractor):
    """Clean pasted text and title it from its first line."""

    content_type = ContentType.TEXT

    async def extract(self, content: bytes | str, source_name: str = "") -> ExtractedDocument:
        if isinstance(content, bytes):
            content = content.decode("utf-8", errors="replace")

        plain_text = clean_text(content)
        return ExtractedDocument(
            title=title_from_text(plain_text),
            content=plain_text,
            plain_text=plain_text,
            content_type=self.content_type,
            extraction_method="text",
        )
