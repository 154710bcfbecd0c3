"""Content cleaning and title helpers."""

import re
import unicodedata
from pathlib import PurePosixPath, PureWindowsPath

UNTITLED_ARTICLE = "Untitled"
UNTITLED_DOCUMENT = "Untitled Document"
MAX_TEXT_TITLE_LENGTH = 100

_HORIZONTAL_SPACE_RE = re.compile(r"[^\S\n]{2,}")
_EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")


def clean_text(text: str | None) -> str:
    """Clean and normalize extracted text.

    - Normalizes Unicode (NFC)
    - Normalizes line endings
    - Removes control characters
    - Normalizes whitespace (see normalize_text)

    Args:
        text: Raw extracted text

    Returns:
        Cleaned text
    """
    if not text:
        return ""

    text = unicodedata.normalize("NFC", text)
    text = text.replace("\r\n", "\n").replace("\r", "\n")

    # Remove control characters except newlines and tabs
    text = "".join(char for char in text if unicodedata.category(char) != "Cc" or char in "\n\t")

    return normalize_text(text)


def normalize_text(text: str) -> str:
    """Canonicalize whitespace and line breaks.

    Rules, applied in order:
    1. Runs of two or more non-newline whitespace characters become one space
    2. Runs of three or more newlines become exactly two
    3. Every line is stripped and empty lines are dropped
    4. The overall result is stripped

    Idempotent: normalize_text(normalize_text(x)) == normalize_text(x).

    Args:
        text: Text to normalize

    Returns:
        Text with normalized whitespace
    """
    text = _HORIZONTAL_SPACE_RE.sub(" ", text)
    text = _EXCESS_NEWLINES_RE.sub("\n\n", text)

    lines = [line.strip() for line in text.split("\n")]
    text = "\n".join(line for line in lines if line)

    return text.strip()


def title_from_filename(filename: str | None) -> str:
    """Derive a document title from an uploaded filename.

    Strips directory components and the last extension.

    >>> title_from_filename("reports/Q3 results.pdf")
    'Q3 results'
    """
    if not filename:
        return UNTITLED_DOCUMENT

    # Browsers on Windows may send the full client path
    name = PureWindowsPath(PurePosixPath(filename).name).name
    stem = name.rsplit(".", 1)[0] if "." in name else name
    return stem.strip() or UNTITLED_DOCUMENT


def title_from_text(text: str) -> str:
    """Use the first line of normalized text as its title."""
    first_line = text.split("\n", 1)[0] if text else ""
    return first_line[:MAX_TEXT_TITLE_LENGTH].strip() or UNTITLED_DOCUMENT
