"""Derive secondary metadata from normalized document text."""

from dataclasses import dataclass

from .headings import Heading, extract_headings
from .reading_time import DEFAULT_WORDS_PER_MINUTE, estimate_reading_time
from .tagger import TopicTagger, auto_tag


@dataclass(frozen=True)
class DocumentMetadata:
    """Reading time, topic tags and table of contents for one document.

    Never mutated; recompute wholesale when the source text changes.
    """

    reading_time_minutes: int
    tags: frozenset[str]
    headings: tuple[Heading, ...] = ()


def derive_metadata(
    title: str,
    plain_text: str,
    markup: str | None = None,
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
    tagger: TopicTagger | None = None,
) -> DocumentMetadata:
    """Compute metadata for one document.

    Args:
        title: Document title (participates in tagging)
        plain_text: Normalized text used for reading time and tags
        markup: Structured content to build the table of contents from
        words_per_minute: Reading speed
        tagger: Tagger with a custom table (built-in table if None)
    """
    tags = tagger.tag(title, plain_text) if tagger is not None else auto_tag(title, plain_text)

    return DocumentMetadata(
        reading_time_minutes=estimate_reading_time(plain_text, words_per_minute),
        tags=tags,
        headings=tuple(extract_headings(markup)) if markup else (),
    )
