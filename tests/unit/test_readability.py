"""Unit tests for main-content scoring strategies."""

import pytest
from lxml.html import Element, HtmlElement, tostring

from reading_library_service.extraction import (
    ContentScoringStrategy,
    ReadabilityStrategy,
    ScoredContent,
    TrafilaturaStrategy,
    get_strategy,
)
from reading_library_service.extraction.html_extractor import parse_html
from reading_library_service.extraction.readability import (
    class_weight,
    find_title,
    inner_text,
    link_density,
    strip_site_suffix,
)

LONG_SENTENCE = (
    "Reading later means saving the article now and coming back to it when there is "
    "finally time to read it properly"
)


def region_text(scored: ScoredContent) -> str:
    return inner_text(scored.content_node)


class TestFindTitle:
    """Tests for title selection."""

    def test_prefers_article_heading(self, article_html: str) -> None:
        """Test the h1 inside <article> wins over <title>."""
        assert find_title(parse_html(article_html)) == "Understanding Offsets"

    def test_og_title(self) -> None:
        """Test og:title is used when there is no article heading."""
        tree = parse_html(
            '<html><head><meta property="og:title" content="Open Graph Title">'
            "<title>Page | Site</title></head><body><h1>A</h1><h1>B</h1></body></html>"
        )
        assert find_title(tree) == "Open Graph Title"

    def test_single_h1(self) -> None:
        """Test a page's only h1 is used."""
        tree = parse_html("<html><body><h1>Only Heading</h1><p>x</p></body></html>")
        assert find_title(tree) == "Only Heading"

    def test_title_element_with_site_suffix(self) -> None:
        """Test <title> is used with its site suffix removed."""
        tree = parse_html(
            "<html><head><title>A Much Longer Page Title | Example Site</title></head>"
            "<body><h1>One</h1><h1>Two</h1></body></html>"
        )
        assert find_title(tree) == "A Much Longer Page Title"

    def test_no_title(self) -> None:
        """Test None when nothing looks like a title."""
        assert find_title(parse_html("<html><body><p>text</p></body></html>")) is None


class TestHelpers:
    """Tests for scoring helpers."""

    def test_strip_site_suffix_keeps_short_heads(self) -> None:
        """Test a suffix is kept when the remainder would be too short."""
        assert strip_site_suffix("Home | Example") == "Home | Example"
        assert strip_site_suffix("Notes on Reading Well - Blog") == "Notes on Reading Well"

    def test_link_density(self) -> None:
        """Test link density is the linked share of the text."""
        tree = parse_html('<html><body><div id="x">abcd<a href="/">efgh</a></div></body></html>')
        (div,) = tree.xpath("//div[@id='x']")
        assert link_density(div) == pytest.approx(0.5)

    def test_link_density_empty(self) -> None:
        """Test an empty element has zero link density."""
        assert link_density(Element("div")) == 0

    def test_class_weight(self) -> None:
        """Test positive and negative class/id patterns."""
        tree = parse_html(
            '<html><body><div class="article-body">a</div>'
            '<div class="sidebar">b</div><div>c</div></body></html>'
        )
        positive, negative, neutral = tree.xpath("//body/div")

        assert class_weight(positive) == 25
        assert class_weight(negative) == -25
        assert class_weight(neutral) == 0


class TestReadabilityStrategy:
    """Tests for the built-in readability heuristic."""

    @pytest.fixture
    def strategy(self) -> ReadabilityStrategy:
        return ReadabilityStrategy()

    def test_selects_article_region(self, strategy: ReadabilityStrategy, article_html: str) -> None:
        """Test the article body is kept and page chrome dropped."""
        scored = strategy.score_and_extract(parse_html(article_html))

        assert scored is not None
        text = region_text(scored)
        assert "Highlights are stored as character offsets" in text
        assert "styled in the reader" in text
        assert "Subscribe" not in text
        assert "About us" not in text
        assert "Copyright" not in text
        assert "tracking" not in text
        assert scored.title == "Understanding Offsets"
        assert scored.score > 0

    def test_does_not_mutate_tree(self, strategy: ReadabilityStrategy, article_html: str) -> None:
        """Test the input tree is left untouched."""
        tree = parse_html(article_html)
        before = tostring(tree)

        strategy.score_and_extract(tree)

        assert tostring(tree) == before

    def test_region_is_detached_div(self, strategy: ReadabilityStrategy, article_html: str) -> None:
        """Test the region is a new <div> root."""
        scored = strategy.score_and_extract(parse_html(article_html))

        assert scored is not None
        assert isinstance(scored.content_node, HtmlElement)
        assert scored.content_node.tag == "div"
        assert scored.content_node.getparent() is None

    def test_comment_section_removed(self, strategy: ReadabilityStrategy) -> None:
        """Test unlikely candidates such as comment sections are dropped."""
        html = (
            "<html><body><div class='entry'>"
            f"<p>{LONG_SENTENCE}.</p><p>{LONG_SENTENCE}, again.</p></div>"
            "<div class='comments'><p>First! This is a long comment that nobody needs.</p>"
            "</div></body></html>"
        )

        scored = strategy.score_and_extract(parse_html(html))

        assert scored is not None
        assert "nobody needs" not in region_text(scored)

    def test_merges_qualifying_siblings(self, strategy: ReadabilityStrategy) -> None:
        """Test a long plain paragraph next to the best candidate is merged."""
        html = (
            "<html><body><div>"
            f"<div class='content'><p>{LONG_SENTENCE}.</p><p>{LONG_SENTENCE} today.</p></div>"
            "<p>Continued below the main block with more sentences about saving articles "
            "for later reading sessions.</p>"
            "</div></body></html>"
        )

        scored = strategy.score_and_extract(parse_html(html))

        assert scored is not None
        text = region_text(scored)
        assert LONG_SENTENCE in text
        assert "Continued below the main block" in text

    def test_merged_siblings_keep_word_boundary(self, strategy: ReadabilityStrategy) -> None:
        """Test merged blocks without whitespace between them do not glue words."""
        html = (
            "<html><body><div>"
            f"<div class='post'><p>{LONG_SENTENCE}.</p><p>{LONG_SENTENCE}, alpha</p></div>"
            "<p>beta continues the article with more sentences about saving articles "
            "for later reading sessions.</p>"
            "</div></body></html>"
        )

        scored = strategy.score_and_extract(parse_html(html))

        assert scored is not None
        words = scored.content_node.text_content().split()
        assert "alphabeta" not in words
        assert words[words.index("alpha") + 1] == "beta"

    def test_no_candidates(self, strategy: ReadabilityStrategy) -> None:
        """Test None when no block has enough text to score."""
        tree = parse_html("<html><body><p>Too short.</p><p>Also short.</p></body></html>")
        assert strategy.score_and_extract(tree) is None


class TestTrafilaturaStrategy:
    """Tests for the trafilatura-backed strategy."""

    def test_extracts_article(self) -> None:
        """Test trafilatura finds the article body."""
        paragraphs = "".join(
            f"<p>{LONG_SENTENCE}, paragraph number {i} of the saved article.</p>"
            for i in range(6)
        )
        html = (
            "<html><head><title>Saving Articles For Later | Blog</title></head><body>"
            f"<article><h1>Saving Articles For Later</h1>{paragraphs}</article>"
            "</body></html>"
        )

        scored = TrafilaturaStrategy().score_and_extract(parse_html(html))

        assert scored is not None
        assert "paragraph number 3" in region_text(scored)
        assert scored.title


class TestGetStrategy:
    """Tests for strategy lookup by name."""

    def test_known_names(self) -> None:
        """Test both configured names resolve."""
        assert isinstance(get_strategy("readability"), ReadabilityStrategy)
        assert isinstance(get_strategy("trafilatura"), TrafilaturaStrategy)

    def test_unknown_name(self) -> None:
        """Test an unknown name is rejected."""
        with pytest.raises(ValueError, match="Unknown content scoring strategy"):
            get_strategy("newspaper")

    def test_strategies_share_interface(self) -> None:
        """Test strategies implement ContentScoringStrategy."""
        assert isinstance(get_strategy("readability"), ContentScoringStrategy)
