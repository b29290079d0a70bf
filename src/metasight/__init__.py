"""MetaSight: SEO metadata extraction and search/social previews."""

__version__ = "0.1.0"

from metasight.extractor import SeoExtractor, extract
from metasight.retriever import PageRetriever, AsyncPageRetriever
from metasight.analyzer import MetaSightAnalyzer, AsyncMetaSightAnalyzer
from metasight.session import AnalysisSession
from metasight.report_generator import ReportGenerator
from metasight.exceptions import MetaSightError, RetrievalError
from metasight.models import (
    SeoReport,
    Heading,
    ImageRef,
    LinkRef,
    FetchedPage,
    AnalysisResult,
    SerpPreview,
    SocialCardPreview,
    MetricCard,
    TagStatus,
)
from metasight.config import Config, AnalysisThresholds, settings

__all__ = [
    # Core
    "SeoExtractor",
    "extract",
    "PageRetriever",
    "AsyncPageRetriever",
    "MetaSightAnalyzer",
    "AsyncMetaSightAnalyzer",
    "AnalysisSession",
    "ReportGenerator",
    # Errors
    "MetaSightError",
    "RetrievalError",
    # Models
    "SeoReport",
    "Heading",
    "ImageRef",
    "LinkRef",
    "FetchedPage",
    "AnalysisResult",
    "SerpPreview",
    "SocialCardPreview",
    "MetricCard",
    "TagStatus",
    # Config
    "Config",
    "AnalysisThresholds",
    "settings",
]
