"""Single-page SEO analysis: retrieve a page, then extract its metadata."""

import logging
from typing import Optional

from metasight.config import Config
from metasight.exceptions import RetrievalError
from metasight.extractor import SeoExtractor
from metasight.models import AnalysisResult
from metasight.retriever import AsyncPageRetriever, PageRetriever

logger = logging.getLogger(__name__)


class MetaSightAnalyzer:
    """Analyzes a single URL for SEO metadata."""

    def __init__(
        self,
        retriever: Optional[PageRetriever] = None,
        extractor: Optional[SeoExtractor] = None,
        config: Optional[Config] = None,
    ):
        """Initialize the analyzer.

        Args:
            retriever: Page retriever (built from config if None)
            extractor: HTML extractor (default extractor if None)
            config: Configuration used when building the retriever
        """
        self.config = config or Config.from_env()
        self.retriever = retriever or PageRetriever(config=self.config)
        self.extractor = extractor or SeoExtractor()

    def analyze_url(self, url: str, request_id: int = 0) -> AnalysisResult:
        """Fetch a URL and extract its SEO report.

        Args:
            url: URL to analyze, with or without scheme
            request_id: Id of the analysis request this result answers

        Returns:
            AnalysisResult; ``success`` is False when the page could not be
            retrieved
        """
        try:
            page = self.retriever.fetch(url)
        except RetrievalError as e:
            logger.error(f"Error analyzing URL {url}: {e.message}")
            return AnalysisResult(
                url=e.url or url,
                success=False,
                error=e.message,
                request_id=request_id,
            )

        return self.analyze_html(page.html, page.url, request_id=request_id)

    def analyze_html(
        self, html: str, base_url: str, request_id: int = 0
    ) -> AnalysisResult:
        """Extract an SEO report from HTML that is already available."""
        report = self.extractor.extract(html, base_url)
        logger.info(
            f"Analyzed {base_url}: {len(report.links)} links, "
            f"{len(report.images)} images, {report.word_count} words"
        )
        return AnalysisResult(url=base_url, report=report, request_id=request_id)


class AsyncMetaSightAnalyzer:
    """Async variant of MetaSightAnalyzer.

    Only retrieval is awaited; extraction runs synchronously.
    """

    def __init__(
        self,
        retriever: Optional[AsyncPageRetriever] = None,
        extractor: Optional[SeoExtractor] = None,
        config: Optional[Config] = None,
    ):
        self.config = config or Config.from_env()
        self.retriever = retriever or AsyncPageRetriever(config=self.config)
        self.extractor = extractor or SeoExtractor()

    async def analyze_url(self, url: str, request_id: int = 0) -> AnalysisResult:
        try:
            page = await self.retriever.fetch(url)
        except RetrievalError as e:
            logger.error(f"Error analyzing URL {url}: {e.message}")
            return AnalysisResult(
                url=e.url or url,
                success=False,
                error=e.message,
                request_id=request_id,
            )

        report = self.extractor.extract(page.html, page.url)
        return AnalysisResult(url=page.url, report=report, request_id=request_id)
