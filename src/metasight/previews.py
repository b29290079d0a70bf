"""Search result and social card previews derived from an SeoReport."""

from typing import Optional

from metasight.config import AnalysisThresholds, default_thresholds
from metasight.constants import (
    HEADING_INDENT,
    HEADING_INDENT_DEFAULT,
    MISSING_DESCRIPTION_TEXT,
    MISSING_OG_IMAGE_TEXT,
    MISSING_TITLE_TEXT,
    MISSING_TWITTER_IMAGE_TEXT,
)
from metasight.models import (
    MetricCard,
    SeoReport,
    SerpPreview,
    SocialCardPreview,
    TagStatus,
)
from metasight.urls import display_domain


def serp_preview(report: SeoReport, url: str) -> SerpPreview:
    """Build the search result preview."""
    return SerpPreview(
        url=url,
        title=report.title or MISSING_TITLE_TEXT,
        description=report.description or MISSING_DESCRIPTION_TEXT,
    )


def open_graph_card(report: SeoReport, url: str) -> SocialCardPreview:
    """Build the Facebook/LinkedIn link card preview.

    Falls back to the search preview's title and description when the
    og: tags are missing.
    """
    serp = serp_preview(report, url)
    return SocialCardPreview(
        platform="open_graph",
        domain=display_domain(url).upper(),
        title=report.og_tags.get("title") or serp.title,
        description=report.og_tags.get("description") or serp.description,
        image=report.og_tags.get("image") or None,
        missing_image_text=MISSING_OG_IMAGE_TEXT,
    )


def twitter_card(report: SeoReport, url: str) -> SocialCardPreview:
    """Build the Twitter card preview.

    twitter:* tags win, then the Open Graph card, then the page itself.
    """
    og_card = open_graph_card(report, url)
    return SocialCardPreview(
        platform="twitter",
        domain=display_domain(url),
        title=report.twitter_tags.get("title") or og_card.title,
        description=report.twitter_tags.get("description")
        or serp_preview(report, url).description,
        image=report.twitter_tags.get("image") or og_card.image,
        missing_image_text=MISSING_TWITTER_IMAGE_TEXT,
    )


def _length_status(length: int, low: int, high: int) -> str:
    if length == 0:
        return "bad"
    return "good" if low < length < high else "warning"


def metric_cards(
    report: SeoReport, thresholds: Optional[AnalysisThresholds] = None
) -> list[MetricCard]:
    """Headline metrics shown at the top of the report."""
    thresholds = thresholds or default_thresholds
    title_length = len(report.title or "")
    desc_length = len(report.description or "")

    title_status = _length_status(title_length, thresholds.title_min, thresholds.title_max)
    desc_status = _length_status(
        desc_length, thresholds.description_min, thresholds.description_max
    )

    return [
        MetricCard(
            title="Title Length",
            value=f"{title_length} chars",
            subtext=(
                f"Optimal ({thresholds.title_min}-{thresholds.title_max} chars)"
                if title_status == "good"
                else "Too short or long"
            ),
            status=title_status,
        ),
        MetricCard(
            title="Description Length",
            value=f"{desc_length} chars",
            subtext=(
                f"Optimal ({thresholds.description_min}-{thresholds.description_max} chars)"
                if desc_status == "good"
                else "Needs improvement"
            ),
            status=desc_status,
        ),
        MetricCard(
            title="Total Words",
            value=f"{report.word_count:,}",
            subtext="Estimated visible text",
            status="good",
        ),
        MetricCard(
            title="Total Links",
            value=str(len(report.links)),
            subtext=f"{len(report.external_links)} External",
            status="good",
        ),
    ]


def tag_statuses(report: SeoReport) -> list[TagStatus]:
    """Found/Missing status of the key tags."""
    return [
        TagStatus(label="Title Tag", found=bool(report.title)),
        TagStatus(label="Meta Desc", found=bool(report.description)),
        TagStatus(label="og:title", found=bool(report.og_tags.get("title"))),
        TagStatus(label="twitter:title", found=bool(report.twitter_tags.get("title"))),
    ]


def heading_indent(level: str) -> int:
    """Outline indentation step for a heading level."""
    return HEADING_INDENT.get(level, HEADING_INDENT_DEFAULT)
