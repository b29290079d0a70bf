"""Page retrieval through a pass-through fetch service.

The proxy returns a JSON envelope with the fetched page body under
``contents`` so pages can be read regardless of cross-origin rules.
"""

import logging
from typing import Any, Optional

import httpx
import requests

from metasight.config import Config
from metasight.constants import FETCH_FAILED_MESSAGE, PROXY_CONTENTS_FIELD
from metasight.exceptions import RetrievalError
from metasight.models import FetchedPage
from metasight.urls import normalize_url

logger = logging.getLogger(__name__)


def _normalize(url: str) -> str:
    try:
        return normalize_url(url)
    except ValueError as e:
        raise RetrievalError(str(e), url=url) from e


def _page_from_envelope(url: str, envelope: Any) -> FetchedPage:
    """Build a FetchedPage from the proxy's JSON envelope.

    Raises:
        RetrievalError: If the envelope has no page body
    """
    contents = envelope.get(PROXY_CONTENTS_FIELD) if isinstance(envelope, dict) else None
    if not contents or not isinstance(contents, str):
        raise RetrievalError(FETCH_FAILED_MESSAGE, url=url)

    status = envelope.get("status")
    status_code = status.get("http_code") if isinstance(status, dict) else None
    logger.debug(f"Proxy fetched {url} (upstream status: {status_code})")

    return FetchedPage(
        url=url,
        html=contents,
        status_code=status_code,
    )


class PageRetriever:
    """Fetches raw HTML for a URL through the proxy using requests."""

    def __init__(
        self,
        config: Optional[Config] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the retriever.

        Args:
            config: Proxy URL, timeout and user agent (read from env if None)
            session: Optional requests session to reuse
        """
        self.config = config or Config.from_env()
        self.session = session or requests.Session()
        self.session.headers.update({
            "User-Agent": self.config.user_agent,
            "Accept": "application/json",
        })

    def fetch(self, url: str) -> FetchedPage:
        """Fetch the HTML of a URL.

        Args:
            url: Absolute or scheme-less URL

        Returns:
            FetchedPage with the normalized URL and raw HTML

        Raises:
            RetrievalError: On network failure, non-OK response or an
                envelope without content
        """
        target = _normalize(url)
        logger.info(f"Fetching {target} via {self.config.proxy_url}")

        try:
            response = self.session.get(
                self.config.proxy_url,
                params={"url": target},
                timeout=self.config.timeout,
            )
            response.raise_for_status()
            envelope = response.json()

        except requests.exceptions.HTTPError as e:
            raise RetrievalError(
                f"Proxy returned HTTP {e.response.status_code} for {target}", url=target
            ) from e

        except requests.exceptions.Timeout as e:
            raise RetrievalError(
                f"Request timeout after {self.config.timeout}s", url=target
            ) from e

        except requests.exceptions.ConnectionError as e:
            raise RetrievalError(f"Connection error: {e}", url=target) from e

        except ValueError as e:
            # Body was not JSON, or requests rejected the URL
            raise RetrievalError(FETCH_FAILED_MESSAGE, url=target) from e

        except requests.exceptions.RequestException as e:
            raise RetrievalError(str(e) or FETCH_FAILED_MESSAGE, url=target) from e

        return _page_from_envelope(target, envelope)

    def close(self) -> None:
        self.session.close()


class AsyncPageRetriever:
    """Async counterpart of PageRetriever built on httpx."""

    def __init__(
        self,
        config: Optional[Config] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the retriever.

        Args:
            config: Proxy URL, timeout and user agent (read from env if None)
            transport: Optional httpx transport (used by tests)
        """
        self.config = config or Config.from_env()
        self.transport = transport

    async def fetch(self, url: str) -> FetchedPage:
        """Fetch the HTML of a URL.

        The network round trip is the only await point.

        Raises:
            RetrievalError: On network failure, non-OK response or an
                envelope without content
        """
        target = _normalize(url)
        logger.info(f"Fetching {target} via {self.config.proxy_url}")

        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout,
                headers={
                    "User-Agent": self.config.user_agent,
                    "Accept": "application/json",
                },
                transport=self.transport,
            ) as client:
                response = await client.get(self.config.proxy_url, params={"url": target})
                response.raise_for_status()
                envelope = response.json()

        except httpx.TimeoutException as e:
            raise RetrievalError(
                f"Request timeout after {self.config.timeout}s", url=target
            ) from e

        except httpx.HTTPStatusError as e:
            raise RetrievalError(
                f"Proxy returned HTTP {e.response.status_code} for {target}", url=target
            ) from e

        except httpx.HTTPError as e:
            raise RetrievalError(f"Connection error: {e}", url=target) from e

        except ValueError as e:
            raise RetrievalError(FETCH_FAILED_MESSAGE, url=target) from e

        return _page_from_envelope(target, envelope)
