"""Metadata derived from normalized document text.

Usage:
    from reading_library_service.metadata import auto_tag, estimate_reading_time

    estimate_reading_time("word " * 450)  # 2
    auto_tag("AI Article", "machine learning")  # frozenset({"Technology"})
"""

from .deriver import DocumentMetadata, derive_metadata
from .headings import Heading, extract_headings
from .reading_time import DEFAULT_WORDS_PER_MINUTE, count_words, estimate_reading_time
from .tagger import CATEGORY_KEYWORDS, GENERAL_TAG, TopicTagger, auto_tag

__all__ = [
    "DocumentMetadata",
    "derive_metadata",
    "Heading",
    "extract_headings",
    "DEFAULT_WORDS_PER_MINUTE",
    "count_words",
    "estimate_reading_time",
    "CATEGORY_KEYWORDS",
    "GENERAL_TAG",
    "TopicTagger",
    "auto_tag",
]
