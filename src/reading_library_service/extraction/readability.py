"""Main-content detection strategies for parsed HTML pages.

A strategy takes an lxml document tree and returns the page title plus the
element holding the article body. HTMLExtractor only depends on the
ContentScoringStrategy interface, so the heuristic can be swapped or tuned
without touching the pipeline.

ReadabilityStrategy scoring, per paragraph-like block (p, pre, td and divs
without block-level descendants) of at least 25 characters:

    score = 1 + commas + min(chars / 100, 3)

The score is added to the block's parent and half of it to the grandparent.
Each candidate container starts from a tag-based score plus a +/-25 class/id
weight, and its total is scaled by (1 - link density). The best candidate and
its qualifying siblings form the article region.
"""

import copy
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

import trafilatura
from lxml.html import Element, HtmlElement, fragment_fromstring

NOISE_TAGS = (
    "script",
    "style",
    "noscript",
    "iframe",
    "form",
    "svg",
    "canvas",
    "template",
    "button",
    "input",
    "select",
    "textarea",
    "object",
    "embed",
)
BOILERPLATE_TAGS = frozenset({"nav", "aside", "footer"})
PROTECTED_TAGS = frozenset({"html", "body", "article", "main"})
BLOCK_TAGS = frozenset(
    {
        "article",
        "blockquote",
        "div",
        "dl",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "img",
        "ol",
        "p",
        "pre",
        "section",
        "table",
        "ul",
    }
)

UNLIKELY_CANDIDATES_RE = re.compile(
    r"combx|comment|community|disqus|extra|foot|header|menu|remark|rss|shoutbox|"
    r"sidebar|sponsor|ad-break|agegate|pagination|pager|popup|tweet|share|social|"
    r"cookie|banner|breadcrumb|related|newsletter|subscribe|nav",
    re.IGNORECASE,
)
MAYBE_CANDIDATE_RE = re.compile(
    r"article|body|column|main|shadow|content|story|post", re.IGNORECASE
)
POSITIVE_RE = re.compile(
    r"article|body|content|entry|hentry|h-entry|main|page|post|text|blog|story",
    re.IGNORECASE,
)
NEGATIVE_RE = re.compile(
    r"combx|comment|com-|contact|foot|footer|footnote|masthead|media|meta|outbrain|"
    r"promo|related|scroll|shoutbox|sidebar|sponsor|shopping|tags|tool|widget|"
    r"ad-|advert|nav|menu|share|social|cookie|banner",
    re.IGNORECASE,
)
SENTENCE_END_RE = re.compile(r"\.( |$)")
TITLE_SEPARATORS = (" | ", " - ", " – ", " — ", " :: ", " » ")

TAG_SCORES: dict[str, float] = {
    "article": 10,
    "div": 5,
    "main": 5,
    "section": 3,
    "pre": 3,
    "td": 3,
    "blockquote": 3,
    "address": -3,
    "ol": -3,
    "ul": -3,
    "dl": -3,
    "dd": -3,
    "dt": -3,
    "li": -3,
    "form": -3,
    "h1": -5,
    "h2": -5,
    "h3": -5,
    "h4": -5,
    "h5": -5,
    "h6": -5,
    "th": -5,
}


@dataclass
class ScoredContent:
    """Outcome of a content scoring pass.

    Attributes:
        title: Best-guess page title (None if nothing usable was found)
        content_node: Detached element holding the article region
        score: Strategy-specific score of the chosen region
    """

    title: str | None
    content_node: HtmlElement
    score: float = 0.0


class ContentScoringStrategy(ABC):
    """Interface for main-content detection."""

    name: str = ""

    @abstractmethod
    def score_and_extract(self, tree: HtmlElement) -> ScoredContent | None:
        """Locate the article region of a parsed page.

        Implementations must not mutate `tree`.

        Returns:
            ScoredContent, or None when no candidate region exists
        """
        pass


@dataclass
class _Candidate:
    element: HtmlElement
    score: float


def inner_text(element: HtmlElement) -> str:
    """Whitespace-collapsed text content of an element."""
    return " ".join(element.text_content().split())


def link_density(element: HtmlElement) -> float:
    """Share of an element's text that sits inside links."""
    total = len(inner_text(element))
    link_length = sum(len(inner_text(link)) for link in element.iter("a"))
    return link_length / max(total, 1)


def class_weight(element: HtmlElement) -> float:
    """+25/-25 per class and id attribute matching content/boilerplate patterns."""
    weight = 0.0
    for attribute in ("class", "id"):
        value = element.get(attribute)
        if not value:
            continue
        if NEGATIVE_RE.search(value):
            weight -= 25
        if POSITIVE_RE.search(value):
            weight += 25
    return weight


def find_title(tree: HtmlElement) -> str | None:
    """Best-guess article title.

    Preference order: h1 inside <article>, itemprop=headline, og:title /
    twitter:title meta, the page's only h1, then <title> with a trailing
    site-name suffix removed.
    """
    for path in ("//article//h1", "//*[@itemprop='headline']"):
        for element in tree.xpath(path):
            text = inner_text(element)
            if text:
                return text

    for value in tree.xpath(
        "//meta[@property='og:title']/@content | //meta[@name='twitter:title']/@content"
    ):
        text = " ".join(str(value).split())
        if text:
            return text

    headings = [text for text in (inner_text(h1) for h1 in tree.iter("h1")) if text]
    if len(headings) == 1:
        return headings[0]

    title_element = tree.find(".//title")
    if title_element is not None:
        return strip_site_suffix(inner_text(title_element)) or None
    return None


def strip_site_suffix(title: str) -> str:
    """Drop a trailing " | Site Name" when the remainder is still descriptive."""
    for separator in TITLE_SEPARATORS:
        if separator in title:
            head = title.rsplit(separator, 1)[0].strip()
            if len(head.split()) >= 3:
                return head
    return title


class ReadabilityStrategy(ContentScoringStrategy):
    """Readability-style heuristic implemented over lxml."""

    name = "readability"

    def __init__(
        self,
        min_paragraph_length: int = 25,
        sibling_score_ratio: float = 0.2,
    ) -> None:
        """Initialize strategy.

        Args:
            min_paragraph_length: Blocks with less text are not scored
            sibling_score_ratio: Share of the top score a sibling needs to be merged
        """
        self.min_paragraph_length = min_paragraph_length
        self.sibling_score_ratio = sibling_score_ratio

    def score_and_extract(self, tree: HtmlElement) -> ScoredContent | None:
        title = find_title(tree)

        doc = copy.deepcopy(tree)
        self._remove_noise(doc)
        self._remove_unlikely_candidates(doc)

        candidates = self._score_paragraphs(doc)
        if not candidates:
            return None

        best = max(candidates.values(), key=lambda candidate: candidate.score)
        region = self._merge_siblings(best, candidates)
        return ScoredContent(title=title, content_node=region, score=best.score)

    def _remove_noise(self, doc: HtmlElement) -> None:
        for element in list(doc.iter(*NOISE_TAGS)):
            element.drop_tree()
        for comment in doc.xpath("//comment()"):
            comment.drop_tree()

    def _remove_unlikely_candidates(self, doc: HtmlElement) -> None:
        for element in list(doc.iter()):
            tag = element.tag
            if not isinstance(tag, str) or tag in PROTECTED_TAGS:
                continue
            if tag in BOILERPLATE_TAGS:
                element.drop_tree()
                continue
            attributes = f"{element.get('class', '')} {element.get('id', '')}".strip()
            if len(attributes) < 2:
                continue
            if UNLIKELY_CANDIDATES_RE.search(attributes) and not MAYBE_CANDIDATE_RE.search(
                attributes
            ):
                element.drop_tree()

    def _initial_score(self, element: HtmlElement) -> float:
        return TAG_SCORES.get(element.tag, 0) + class_weight(element)

    def _is_paragraph_like(self, element: HtmlElement) -> bool:
        if element.tag != "div":
            return True
        return not any(child.tag in BLOCK_TAGS for child in element.iterdescendants())

    def _score_paragraphs(self, doc: HtmlElement) -> dict[HtmlElement, _Candidate]:
        candidates: dict[HtmlElement, _Candidate] = {}

        for element in doc.iter("p", "pre", "td", "div"):
            if not self._is_paragraph_like(element):
                continue
            parent = element.getparent()
            if parent is None:
                continue
            text = inner_text(element)
            if len(text) < self.min_paragraph_length:
                continue

            grand_parent = parent.getparent()
            for node in (parent, grand_parent):
                if node is not None and node not in candidates:
                    candidates[node] = _Candidate(node, self._initial_score(node))

            score = 1 + text.count(",") + min(len(text) / 100, 3)
            candidates[parent].score += score
            if grand_parent is not None:
                candidates[grand_parent].score += score / 2

        for candidate in candidates.values():
            candidate.score *= 1 - link_density(candidate.element)

        return candidates

    def _merge_siblings(
        self, best: _Candidate, candidates: dict[HtmlElement, _Candidate]
    ) -> HtmlElement:
        region = Element("div")
        parent = best.element.getparent()
        if parent is None:
            region.append(_detached_copy(best.element))
            return region

        threshold = max(10.0, best.score * self.sibling_score_ratio)
        best_class = best.element.get("class")

        for sibling in parent.iterchildren():
            if not isinstance(sibling.tag, str):
                continue
            if sibling is best.element or self._sibling_qualifies(
                sibling, candidates, threshold, best_class, best.score
            ):
                region.append(_detached_copy(sibling))

        return region

    def _sibling_qualifies(
        self,
        sibling: HtmlElement,
        candidates: dict[HtmlElement, _Candidate],
        threshold: float,
        best_class: str | None,
        best_score: float,
    ) -> bool:
        bonus = best_score * 0.2 if best_class and sibling.get("class") == best_class else 0.0
        candidate = candidates.get(sibling)
        if candidate is not None and candidate.score + bonus >= threshold:
            return True

        if sibling.tag != "p":
            return False
        text = inner_text(sibling)
        density = link_density(sibling)
        if len(text) > 80 and density < 0.25:
            return True
        return len(text) > 0 and density == 0 and bool(SENTENCE_END_RE.search(text))


class TrafilaturaStrategy(ContentScoringStrategy):
    """Delegate region detection to trafilatura."""

    name = "trafilatura"

    def score_and_extract(self, tree: HtmlElement) -> ScoredContent | None:
        extracted = trafilatura.extract(
            copy.deepcopy(tree),
            output_format="html",
            include_comments=False,
            include_tables=True,
            include_images=False,
            include_links=False,
            favor_recall=True,
        )
        if not extracted:
            return None

        content_node = fragment_fromstring(extracted, create_parent="div")
        metadata = trafilatura.extract_metadata(copy.deepcopy(tree))
        title = metadata.title if metadata is not None else None

        return ScoredContent(
            title=title or find_title(tree),
            content_node=content_node,
            score=float(len(inner_text(content_node))),
        )


def _detached_copy(element: HtmlElement) -> HtmlElement:
    clone = copy.deepcopy(element)
    # Merged blocks must stay separate words in the text projection
    clone.tail = "\n"
    return clone


def get_strategy(name: str) -> ContentScoringStrategy:
    """Build a strategy from its configured name."""
    if name == ReadabilityStrategy.name:
        return ReadabilityStrategy()
    if name == TrafilaturaStrategy.name:
        return TrafilaturaStrategy()
    raise ValueError(f"Unknown content scoring strategy: {name}")
