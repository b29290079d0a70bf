"""Tests for search and social previews."""

import pytest
from metasight.config import AnalysisThresholds
from metasight.constants import MISSING_DESCRIPTION_TEXT, MISSING_TITLE_TEXT
from metasight.models import LinkRef, SeoReport
from metasight.previews import (
    heading_indent,
    metric_cards,
    open_graph_card,
    serp_preview,
    tag_statuses,
    twitter_card,
)

URL = "https://www.example.com/page"


@pytest.fixture
def full_report():
    """Report with every social tag present."""
    return SeoReport(
        title="A page title that is comfortably long enough",
        description="Page description",
        og_tags={
            "title": "OG title",
            "description": "OG description",
            "image": "https://example.com/og.png",
        },
        twitter_tags={
            "title": "Tw title",
            "description": "Tw description",
            "image": "https://example.com/tw.png",
        },
    )


class TestSerpPreview:
    """Search result preview."""

    def test_uses_page_tags(self, full_report):
        """Test title and description come from the page."""
        serp = serp_preview(full_report, URL)
        assert serp.url == URL
        assert serp.title == full_report.title
        assert serp.description == "Page description"

    def test_fallbacks(self):
        """Test missing tags use the placeholder texts."""
        serp = serp_preview(SeoReport(), URL)
        assert serp.title == MISSING_TITLE_TEXT == "No Title Found"
        assert serp.description == MISSING_DESCRIPTION_TEXT


class TestSocialCards:
    """Open Graph and Twitter card previews."""

    def test_open_graph_card(self, full_report):
        """Test og: tags fill the card."""
        card = open_graph_card(full_report, URL)
        assert card.domain == "WWW.EXAMPLE.COM"
        assert card.title == "OG title"
        assert card.description == "OG description"
        assert card.image == "https://example.com/og.png"

    def test_open_graph_card_fallbacks(self):
        """Test the card falls back to page title and description."""
        report = SeoReport(title="Page", description="Desc")
        card = open_graph_card(report, URL)
        assert card.title == "Page"
        assert card.description == "Desc"
        assert card.image is None
        assert card.missing_image_text == "No og:image specified"

    def test_twitter_card(self, full_report):
        """Test twitter: tags fill the card."""
        card = twitter_card(full_report, URL)
        assert card.domain == "www.example.com"
        assert (card.title, card.description, card.image) == (
            "Tw title",
            "Tw description",
            "https://example.com/tw.png",
        )

    def test_twitter_card_falls_back_to_open_graph(self):
        """Test title and image fall back to og:, description to the page."""
        report = SeoReport(
            description="Page desc",
            og_tags={"title": "OG title", "description": "OG desc", "image": "og.png"},
        )
        card = twitter_card(report, URL)
        assert card.title == "OG title"
        assert card.description == "Page desc"
        assert card.image == "og.png"

    def test_domain_for_unparseable_url(self):
        """Test the raw URL is shown when it has no hostname."""
        assert twitter_card(SeoReport(), "example.com").domain == "example.com"


class TestMetricCards:
    """Headline metrics."""

    def test_statuses(self):
        """Test length statuses for title and description."""
        report = SeoReport(
            title="x" * 45,
            description="short",
            word_count=1234,
            links=(
                LinkRef(href="/a", text="a"),
                LinkRef(href="https://o.com", text="o", is_external=True),
            ),
        )
        title, description, words, links = metric_cards(report)

        assert (title.value, title.status) == ("45 chars", "good")
        assert title.subtext == "Optimal (30-60 chars)"
        assert (description.status, description.subtext) == ("warning", "Needs improvement")
        assert words.value == "1,234"
        assert (links.value, links.subtext) == ("2", "1 External")

    def test_missing_title_is_bad(self):
        """Test an absent title is flagged."""
        title = metric_cards(SeoReport())[0]
        assert (title.value, title.status) == ("0 chars", "bad")

    def test_bounds_are_exclusive(self):
        """Test lengths equal to a bound are not optimal."""
        title = metric_cards(SeoReport(title="x" * 30))[0]
        assert title.status == "warning"

    def test_custom_thresholds(self):
        """Test thresholds can be overridden."""
        thresholds = AnalysisThresholds(title_min=1, title_max=10)
        title = metric_cards(SeoReport(title="short"), thresholds)[0]
        assert title.status == "good"


class TestTagStatuses:
    """Raw tag status board."""

    def test_found_and_missing(self, full_report):
        """Test each key tag reports Found or Missing."""
        statuses = {s.label: s.status_text for s in tag_statuses(full_report)}
        assert statuses == {
            "Title Tag": "Found",
            "Meta Desc": "Found",
            "og:title": "Found",
            "twitter:title": "Found",
        }
        assert all(not s.found for s in tag_statuses(SeoReport()))


def test_heading_indent():
    """Test outline indentation per level."""
    assert [heading_indent(f"h{i}") for i in range(1, 7)] == [0, 1, 2, 3, 3, 3]
