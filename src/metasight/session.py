"""Holds the current analysis result with last-request-wins semantics.

Each analysis gets a monotonically increasing request id. A result is only
applied when its id is still the latest one issued; results of superseded
requests are dropped. In-flight fetches are never cancelled.
"""

import logging
import threading
from typing import Optional

from metasight.constants import ANALYSIS_FAILED_MESSAGE
from metasight.models import AnalysisResult, SeoReport

logger = logging.getLogger(__name__)


class AnalysisSession:
    """Tracks the latest analysis request and its result."""

    def __init__(self):
        self._lock = threading.Lock()
        self._latest_id = 0
        self._result: Optional[AnalysisResult] = None
        self._loading = False

    @property
    def latest_request_id(self) -> int:
        return self._latest_id

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def result(self) -> Optional[AnalysisResult]:
        return self._result

    @property
    def report(self) -> Optional[SeoReport]:
        result = self._result
        return result.report if result and result.success else None

    @property
    def error(self) -> Optional[str]:
        result = self._result
        return result.error if result and not result.success else None

    def begin(self) -> int:
        """Start a new request, discarding the previous report or error.

        Returns:
            The new request id
        """
        with self._lock:
            self._latest_id += 1
            self._result = None
            self._loading = True
            return self._latest_id

    def complete(self, request_id: int, result: AnalysisResult) -> bool:
        """Apply a finished result if it belongs to the latest request.

        Args:
            request_id: Id returned by begin()
            result: Finished analysis

        Returns:
            True if applied, False if the request was superseded
        """
        with self._lock:
            if request_id != self._latest_id:
                logger.debug(
                    f"Dropping stale result for request {request_id} "
                    f"(latest is {self._latest_id})"
                )
                return False
            self._result = result
            self._loading = False
            return True

    def run(self, analyzer, url: str) -> Optional[AnalysisResult]:
        """Analyze ``url`` as a new request.

        An exception raised by the analyzer becomes a failed result, so
        loading always ends for the latest request.

        Returns:
            The result if it is still current when it finishes, else None
        """
        request_id = self.begin()
        try:
            result = analyzer.analyze_url(url, request_id=request_id)
        except Exception as e:
            result = self._failure(url, request_id, e)
        return result if self.complete(request_id, result) else None

    async def run_async(self, analyzer, url: str) -> Optional[AnalysisResult]:
        """Async variant of run() for AsyncMetaSightAnalyzer."""
        request_id = self.begin()
        try:
            result = await analyzer.analyze_url(url, request_id=request_id)
        except Exception as e:
            result = self._failure(url, request_id, e)
        return result if self.complete(request_id, result) else None

    @staticmethod
    def _failure(url: str, request_id: int, error: Exception) -> AnalysisResult:
        """Turn an unexpected analyzer error into the request's failed result."""
        logger.exception(f"Analysis of {url} failed")
        return AnalysisResult(
            url=url,
            success=False,
            error=str(error) or ANALYSIS_FAILED_MESSAGE,
            request_id=request_id,
        )
