"""Data models for SEO metadata extraction."""

from dataclasses import dataclass, field
from typing import Optional
from datetime import datetime


@dataclass(frozen=True)
class Heading:
    """A heading element in the page outline."""

    level: str  # h1..h6
    text: str


@dataclass(frozen=True)
class ImageRef:
    """An image with a non-empty src."""

    src: str
    alt: Optional[str] = None

    @property
    def missing_alt(self) -> bool:
        return self.alt is None


@dataclass(frozen=True)
class LinkRef:
    """An anchor found on the page."""

    href: str
    text: str
    is_external: bool = False
    nofollow: bool = False


@dataclass(frozen=True)
class SeoReport:
    """SEO metadata extracted from a single HTML document.

    Built once per analysis and never mutated afterwards. Sequences are
    tuples in document order; the tag mappings must not be modified by
    consumers.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    keywords: Optional[str] = None
    headings: tuple[Heading, ...] = ()
    og_tags: dict[str, str] = field(default_factory=dict)
    twitter_tags: dict[str, str] = field(default_factory=dict)
    images: tuple[ImageRef, ...] = ()
    links: tuple[LinkRef, ...] = ()
    word_count: int = 0

    @property
    def internal_links(self) -> list[LinkRef]:
        return [link for link in self.links if not link.is_external]

    @property
    def external_links(self) -> list[LinkRef]:
        return [link for link in self.links if link.is_external]

    @property
    def nofollow_links(self) -> list[LinkRef]:
        return [link for link in self.links if link.nofollow]

    @property
    def images_missing_alt(self) -> list[ImageRef]:
        return [image for image in self.images if image.missing_alt]

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dict with camelCase keys."""
        return {
            "title": self.title,
            "description": self.description,
            "keywords": self.keywords,
            "headings": [
                {"level": h.level, "text": h.text} for h in self.headings
            ],
            "ogTags": dict(self.og_tags),
            "twitterTags": dict(self.twitter_tags),
            "images": [{"src": img.src, "alt": img.alt} for img in self.images],
            "links": [
                {
                    "href": link.href,
                    "text": link.text,
                    "isExternal": link.is_external,
                    "nofollow": link.nofollow,
                }
                for link in self.links
            ],
            "wordCount": self.word_count,
        }


@dataclass
class FetchedPage:
    """Raw HTML returned by the retriever."""

    url: str
    html: str
    status_code: Optional[int] = None


@dataclass
class AnalysisResult:
    """Result of analyzing a single URL."""

    url: str
    report: Optional[SeoReport] = None
    success: bool = True
    error: Optional[str] = None
    request_id: int = 0
    analyzed_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict:
        return {
            "url": self.url,
            "success": self.success,
            "error": self.error,
            "analyzedAt": self.analyzed_at.isoformat(),
            "report": self.report.to_dict() if self.report else None,
        }


# =============================================================================
# Preview Models
# =============================================================================

@dataclass(frozen=True)
class SerpPreview:
    """How the page would appear as a search result."""

    url: str
    title: str
    description: str


@dataclass(frozen=True)
class SocialCardPreview:
    """A link card as rendered by a social platform."""

    platform: str  # 'open_graph' or 'twitter'
    domain: str
    title: str
    description: str
    image: Optional[str] = None
    missing_image_text: str = ""


@dataclass(frozen=True)
class MetricCard:
    """A headline metric with a status badge."""

    title: str
    value: str
    subtext: str
    status: str  # good/warning/bad


@dataclass(frozen=True)
class TagStatus:
    """Whether a key tag was found."""

    label: str
    found: bool

    @property
    def status_text(self) -> str:
        return "Found" if self.found else "Missing"
