"""HTML metadata extraction for SEO reports."""

import logging
import re
from typing import Iterator, Optional

from bs4 import BeautifulSoup
from bs4.element import (
    CData,
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    ProcessingInstruction,
    Tag,
)

from metasight.constants import (
    EXCLUDED_LINK_SCHEMES,
    HEADING_TAGS,
    HTML_PARSER,
    LINK_TEXT_PLACEHOLDER,
    OG_PREFIX,
    TWITTER_PREFIX,
)
from metasight.models import Heading, ImageRef, LinkRef, SeoReport
from metasight.urls import resolve_origin, safe_origin

logger = logging.getLogger(__name__)

# Strings that are not part of an element's text content
_NON_TEXT_STRINGS = (Comment, CData, Declaration, Doctype, ProcessingInstruction)

_WHITESPACE = re.compile(r"\s+")


def _text_nodes(node: Tag) -> Iterator[NavigableString]:
    for descendant in node.descendants:
        if isinstance(descendant, NavigableString) and not isinstance(
            descendant, _NON_TEXT_STRINGS
        ):
            yield descendant


def text_content(node: Tag) -> str:
    """All descendant text of ``node``, script and style included."""
    return "".join(_text_nodes(node))


def collapse_whitespace(text: str) -> str:
    """Trim ``text`` and collapse internal whitespace runs to one space."""
    return _WHITESPACE.sub(" ", text.strip())


class SeoExtractor:
    """Extracts SEO metadata from raw HTML.

    Extraction never raises for malformed markup: anything that cannot be
    found is left out of the report.
    """

    def __init__(
        self,
        parser: str = HTML_PARSER,
        link_text_placeholder: str = LINK_TEXT_PLACEHOLDER,
    ):
        """Initialize the extractor.

        Args:
            parser: BeautifulSoup tree builder name
            link_text_placeholder: Text recorded for anchors without text
        """
        self.parser = parser
        self.link_text_placeholder = link_text_placeholder

    def extract(self, html: str, base_url: str) -> SeoReport:
        """Extract an SEO report from HTML.

        Args:
            html: Raw HTML text
            base_url: Absolute URL the HTML was fetched from

        Returns:
            SeoReport for the document
        """
        # rel must stay a plain string for substring matching
        soup = BeautifulSoup(html or "", self.parser, multi_valued_attributes=None)

        description, keywords, og_tags, twitter_tags = self._extract_meta(soup)

        report = SeoReport(
            title=self._extract_title(soup),
            description=description,
            keywords=keywords,
            headings=self._extract_headings(soup),
            og_tags=og_tags,
            twitter_tags=twitter_tags,
            images=self._extract_images(soup),
            links=self._extract_links(soup, base_url),
            word_count=self._count_words(soup),
        )

        logger.debug(
            "Extracted %s: %d headings, %d images, %d links, %d words",
            base_url,
            len(report.headings),
            len(report.images),
            len(report.links),
            report.word_count,
        )
        return report

    def _extract_title(self, soup: BeautifulSoup) -> Optional[str]:
        title = soup.find("title")
        if title is None:
            return None
        return text_content(title) or None

    def _extract_meta(
        self, soup: BeautifulSoup
    ) -> tuple[Optional[str], Optional[str], dict[str, str], dict[str, str]]:
        """Scan meta tags for description, keywords and social tags.

        Returns:
            Tuple of (description, keywords, og_tags, twitter_tags)
        """
        description = None
        keywords = None
        og_tags: dict[str, str] = {}
        twitter_tags: dict[str, str] = {}

        for meta in soup.find_all("meta"):
            content = meta.get("content")
            if not content:
                continue

            name = (meta.get("name") or "").lower()
            prop = (meta.get("property") or "").lower()

            if name == "description":
                description = content
            elif name == "keywords":
                keywords = content
            elif prop.startswith(OG_PREFIX):
                og_tags[prop[len(OG_PREFIX):]] = content
            elif name.startswith(TWITTER_PREFIX):
                twitter_tags[name[len(TWITTER_PREFIX):]] = content

        return description, keywords, og_tags, twitter_tags

    def _extract_headings(self, soup: BeautifulSoup) -> tuple[Heading, ...]:
        headings = []
        for tag in soup.find_all(list(HEADING_TAGS)):
            text = collapse_whitespace(text_content(tag))
            if text:
                headings.append(Heading(level=tag.name.lower(), text=text))
        return tuple(headings)

    def _extract_images(self, soup: BeautifulSoup) -> tuple[ImageRef, ...]:
        return tuple(
            ImageRef(src=img.get("src"), alt=img.get("alt") or None)
            for img in soup.find_all("img")
            if img.get("src")
        )

    def _extract_links(self, soup: BeautifulSoup, base_url: str) -> tuple[LinkRef, ...]:
        """Collect anchors with their internal/external classification.

        Links are resolved against the base URL's origin. An href that cannot
        be resolved is treated as internal.
        """
        base_origin = safe_origin(base_url)
        if not base_origin:
            logger.debug("No origin for base URL %r", base_url)

        links = []
        for anchor in soup.find_all("a"):
            href = anchor.get("href")
            if not href or self._is_excluded_href(href):
                continue

            try:
                is_external = resolve_origin(href, base_origin) != base_origin
            except ValueError:
                is_external = False

            links.append(
                LinkRef(
                    href=href,
                    text=collapse_whitespace(text_content(anchor))
                    or self.link_text_placeholder,
                    is_external=is_external,
                    nofollow="nofollow" in (anchor.get("rel") or ""),
                )
            )
        return tuple(links)

    @staticmethod
    def _is_excluded_href(href: str) -> bool:
        return href.lstrip().lower().startswith(EXCLUDED_LINK_SCHEMES)

    def _count_words(self, soup: BeautifulSoup) -> int:
        body = soup.body
        if body is not None:
            text = text_content(body)
        else:
            # No <body> in the markup: use everything outside <head>
            text = "".join(
                str(s)
                for s in _text_nodes(soup)
                if s.find_parent(["head", "title"]) is None
            )
        return len(text.split())


_default_extractor = SeoExtractor()


def extract(html: str, base_url: str) -> SeoReport:
    """Extract an SEO report using the default extractor."""
    return _default_extractor.extract(html, base_url)
