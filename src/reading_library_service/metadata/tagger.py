"""Keyword-based topic tagging.

Matching is case-insensitive substring search, not word-boundary search:
"ai" matches "maintain" and "app" matches "happy". A document receives every
category with at least one matching keyword, or "General" when none match.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

GENERAL_TAG = "General"

CATEGORY_KEYWORDS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "Technology": (
            "tech",
            "software",
            "ai",
            "machine learning",
            "code",
            "programming",
            "app",
            "digital",
            "cyber",
            "algorithm",
        ),
        "Science": (
            "science",
            "research",
            "study",
            "experiment",
            "physics",
            "chemistry",
            "biology",
            "discovery",
            "scientist",
        ),
        "Business": (
            "business",
            "company",
            "market",
            "economy",
            "finance",
            "startup",
            "investment",
            "corporate",
            "enterprise",
        ),
        "Health": (
            "health",
            "medical",
            "doctor",
            "disease",
            "treatment",
            "wellness",
            "fitness",
            "nutrition",
            "mental health",
        ),
        "Politics": (
            "politics",
            "government",
            "election",
            "congress",
            "senate",
            "president",
            "law",
            "policy",
            "political",
        ),
        "Entertainment": (
            "movie",
            "music",
            "entertainment",
            "film",
            "actor",
            "celebrity",
            "show",
            "series",
            "game",
        ),
        "Sports": (
            "sports",
            "game",
            "team",
            "player",
            "championship",
            "league",
            "athletic",
            "competition",
        ),
        "Travel": (
            "travel",
            "destination",
            "journey",
            "trip",
            "tourism",
            "explore",
            "adventure",
            "vacation",
        ),
    }
)


class TopicTagger:
    """Multi-label classifier over a fixed category -> keywords table."""

    def __init__(self, categories: Mapping[str, Iterable[str]] = CATEGORY_KEYWORDS) -> None:
        """Initialize tagger.

        Args:
            categories: Category name -> keyword substrings. Copied and frozen.
        """
        self.categories: Mapping[str, tuple[str, ...]] = MappingProxyType(
            {
                name: tuple(keyword.lower() for keyword in keywords)
                for name, keywords in categories.items()
            }
        )

    def tag(self, title: str, content: str) -> frozenset[str]:
        """Return every category whose keywords occur in title or content."""
        text = f"{title} {content}".lower()
        tags = frozenset(
            name
            for name, keywords in self.categories.items()
            if any(keyword in text for keyword in keywords)
        )
        return tags or frozenset({GENERAL_TAG})


_default_tagger = TopicTagger()


def auto_tag(title: str, content: str) -> frozenset[str]:
    """Tag a document using the built-in category table."""
    return _default_tagger.tag(title, content)
