"""Tests for report rendering."""

import json

import pytest
from metasight.extractor import extract
from metasight.models import AnalysisResult
from metasight.report_generator import ReportGenerator

HTML = """
<html>
  <head>
    <title>Test &lt;Page&gt;</title>
    <meta name="description" content="Test description">
    <meta name="keywords" content="test, seo">
    <meta property="og:title" content="OG Title">
  </head>
  <body>
    <h1>Main Heading</h1>
    <h2>Subheading</h2>
    <img src="test.jpg">
    <a href="/page">Link</a>
    <a href="https://other.com" rel="nofollow"></a>
  </body>
</html>
"""


@pytest.fixture
def generator():
    return ReportGenerator()


@pytest.fixture
def result():
    """Successful analysis of the sample page."""
    return AnalysisResult(url="https://example.com", report=extract(HTML, "https://example.com"))


@pytest.fixture
def failed_result():
    return AnalysisResult(
        url="https://bad.example",
        success=False,
        error="Could not fetch content from the provided URL.",
    )


class TestReportGenerator:
    """Test cases for ReportGenerator."""

    def test_render_text(self, generator, result):
        """Test the console report covers every section."""
        text = generator.render_text(result)

        assert "SEO Analysis for: https://example.com" in text
        assert "Test <Page>" in text
        assert "Title Tag: Found" in text
        assert "twitter:title: Missing" in text
        assert "[h2] Subheading" in text
        assert "No Text Text -> https://other.com [External, nofollow]" in text
        assert "Images: 1 total, 1 missing alt" in text
        assert "Keywords: test, seo" in text

    def test_render_text_failure(self, generator, failed_result):
        """Test failed analyses show the error."""
        text = generator.render_text(failed_result)
        assert "Failed to analyze https://bad.example" in text
        assert "Could not fetch content" in text

    def test_render_json(self, generator, result):
        """Test JSON output uses the camelCase report shape."""
        data = json.loads(generator.render_json(result))

        assert data["success"] is True
        report = data["report"]
        assert report["title"] == "Test <Page>"
        assert report["ogTags"] == {"title": "OG Title"}
        assert report["links"][1] == {
            "href": "https://other.com",
            "text": "No Text Text",
            "isExternal": True,
            "nofollow": True,
        }
        assert report["images"] == [{"src": "test.jpg", "alt": None}]

    def test_render_html_escapes_content(self, generator, result):
        """Test HTML output includes previews and escapes page text."""
        html = generator.render_html(result)

        assert "Google Search Preview" in html
        assert "Test &lt;Page&gt;" in html
        assert "Test <Page>" not in html
        assert "No og:image specified" in html

    def test_render_html_failure(self, generator, failed_result):
        """Test failed analyses render an error section."""
        html = generator.render_html(failed_result)
        assert "Analysis Error" in html
        assert "Could not fetch content" in html

    def test_render_unknown_format(self, generator, result):
        """Test unknown formats are rejected."""
        with pytest.raises(ValueError):
            generator.render(result, "xml")

    def test_write(self, generator, result, tmp_path):
        """Test output files are written, creating directories."""
        output_path = tmp_path / "reports" / "report.json"
        generator.write(generator.render(result, "json"), output_path)

        assert json.loads(output_path.read_text())["url"] == "https://example.com"
