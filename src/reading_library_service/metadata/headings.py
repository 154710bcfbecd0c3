"""Table-of-contents extraction from document markup."""

from dataclasses import dataclass

from lxml import etree
from lxml.html import HtmlElement, fragment_fromstring

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")


@dataclass(frozen=True)
class Heading:
    """One table-of-contents entry."""

    level: int
    text: str
    id: str


def parse_fragment(markup: str) -> HtmlElement:
    """Parse markup (fragment or full page) under a single <div> root."""
    return fragment_fromstring(markup, create_parent="div")


def extract_headings(content: str) -> list[Heading]:
    """Build a table of contents from h1-h6 elements in document order.

    Text is the flattened text content, whitespace included. Headings without
    an id attribute (or with an empty one) get `heading-<n>`, where n counts
    only the headings that lacked one.

    Args:
        content: Document markup; plain text simply yields no headings

    Returns:
        Headings in document order
    """
    if not content or not content.strip():
        return []

    try:
        root = parse_fragment(content)
    except (etree.ParserError, ValueError):
        return []

    headings: list[Heading] = []
    synthetic_count = 0

    for element in root.iter(*HEADING_TAGS):
        explicit_id = element.get("id")
        if explicit_id:
            heading_id = explicit_id
        else:
            heading_id = f"heading-{synthetic_count}"
            synthetic_count += 1

        headings.append(
            Heading(
                level=int(element.tag[1]),
                text=element.text_content(),
                id=heading_id,
            )
        )

    return headings
