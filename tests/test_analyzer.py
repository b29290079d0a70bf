"""Tests for the single-page analyzer."""

from unittest.mock import AsyncMock, Mock

import pytest
from metasight.analyzer import AsyncMetaSightAnalyzer, MetaSightAnalyzer
from metasight.config import Config
from metasight.exceptions import RetrievalError
from metasight.models import FetchedPage

HTML = (
    "<html><head><title>Test Page</title></head>"
    "<body><h1>Main Heading</h1><a href='/page'>Link</a></body></html>"
)


class TestMetaSightAnalyzer:
    """Test cases for MetaSightAnalyzer."""

    @pytest.fixture
    def retriever(self):
        """Mock retriever returning a fixed page."""
        retriever = Mock()
        retriever.fetch.return_value = FetchedPage(
            url="https://example.com", html=HTML, status_code=200
        )
        return retriever

    def test_analyzer_initialization(self):
        """Test analyzer builds its collaborators from config."""
        analyzer = MetaSightAnalyzer(config=Config(proxy_url="https://proxy.test/get"))
        assert analyzer.retriever.config.proxy_url == "https://proxy.test/get"
        assert analyzer.extractor is not None

    def test_analyze_url_success(self, retriever):
        """Test successful URL analysis."""
        analyzer = MetaSightAnalyzer(retriever=retriever, config=Config())

        result = analyzer.analyze_url("example.com", request_id=7)

        retriever.fetch.assert_called_once_with("example.com")
        assert result.success is True
        assert result.error is None
        assert result.request_id == 7
        assert result.url == "https://example.com"
        assert result.report.title == "Test Page"
        assert result.report.links[0].is_external is False

    def test_analyze_url_failure(self, retriever):
        """Test retrieval failures give an unsuccessful result."""
        retriever.fetch.side_effect = RetrievalError(
            "Could not fetch content from the provided URL.", url="https://bad.example"
        )
        analyzer = MetaSightAnalyzer(retriever=retriever, config=Config())

        result = analyzer.analyze_url("bad.example")

        assert result.success is False
        assert result.report is None
        assert result.url == "https://bad.example"
        assert result.error == "Could not fetch content from the provided URL."

    def test_unexpected_errors_propagate(self, retriever):
        """Test errors other than retrieval failures are not swallowed."""
        retriever.fetch.side_effect = RuntimeError("boom")
        analyzer = MetaSightAnalyzer(retriever=retriever, config=Config())

        with pytest.raises(RuntimeError):
            analyzer.analyze_url("example.com")

    def test_analyze_html(self, retriever):
        """Test analysis of HTML that is already available."""
        analyzer = MetaSightAnalyzer(retriever=retriever, config=Config())

        result = analyzer.analyze_html(HTML, "https://example.com")

        retriever.fetch.assert_not_called()
        assert result.report.headings[0].text == "Main Heading"


class TestAsyncMetaSightAnalyzer:
    """Test cases for AsyncMetaSightAnalyzer."""

    @pytest.mark.asyncio
    async def test_analyze_url_success(self):
        """Test successful async analysis."""
        retriever = Mock()
        retriever.fetch = AsyncMock(
            return_value=FetchedPage(url="https://example.com", html=HTML)
        )
        analyzer = AsyncMetaSightAnalyzer(retriever=retriever, config=Config())

        result = await analyzer.analyze_url("example.com", request_id=3)

        assert result.success is True
        assert result.request_id == 3
        assert result.report.title == "Test Page"

    @pytest.mark.asyncio
    async def test_analyze_url_failure(self):
        """Test async retrieval failures give an unsuccessful result."""
        retriever = Mock()
        retriever.fetch = AsyncMock(side_effect=RetrievalError("Connection error: refused"))
        analyzer = AsyncMetaSightAnalyzer(retriever=retriever, config=Config())

        result = await analyzer.analyze_url("example.com")

        assert result.success is False
        assert result.url == "example.com"
        assert result.error == "Connection error: refused"
