"""Raw ingestion sources.

A RawSource is exactly one of three variants. Consumers dispatch with
isinstance checks ending in typing.assert_never so a new variant cannot be
added without the type checker flagging every unhandled dispatch site.
"""

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class UrlSource:
    """Web page to fetch and run through the readability heuristic."""

    url: str


@dataclass(frozen=True)
class PdfSource:
    """Uploaded PDF buffer plus the filename used to title it."""

    data: bytes
    filename: str = ""

    def __repr__(self) -> str:
        return f"PdfSource(filename={self.filename!r}, size={len(self.data)})"


@dataclass(frozen=True)
class TextSource:
    """Pasted text."""

    text: str


RawSource: TypeAlias = UrlSource | PdfSource | TextSource
