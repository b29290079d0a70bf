"""URL helpers: scheme normalization and origin comparison."""

import re
from typing import Optional
from urllib.parse import urljoin, urlsplit

from metasight.constants import (
    DEFAULT_SCHEME,
    OPAQUE_ORIGIN,
    SPECIAL_SCHEME_PORTS,
)

_SCHEME_PREFIX = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*://")
_SCHEME = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.\-]*):")

# Browsers drop ASCII tab and newline anywhere in a URL before parsing
_TAB_OR_NEWLINE = re.compile(r"[\t\n\r]")


def normalize_url(url: str) -> str:
    """Turn user input into an absolute URL.

    A secure scheme is prepended when the value carries no ``scheme://``
    prefix.

    Args:
        url: URL as typed by the user, possibly without a scheme

    Returns:
        Absolute URL string

    Raises:
        ValueError: If the input is empty
    """
    cleaned = (url or "").strip()
    if not cleaned:
        raise ValueError("URL must not be empty")

    if _SCHEME_PREFIX.match(cleaned):
        return cleaned
    if cleaned.startswith("//"):
        return f"{DEFAULT_SCHEME}:{cleaned}"
    return f"{DEFAULT_SCHEME}://{cleaned}"


def _clean(url: str) -> str:
    return _TAB_OR_NEWLINE.sub("", url.strip())


def url_origin(url: str) -> str:
    """Serialize the origin of an absolute URL.

    http(s), ws(s) and ftp URLs give ``scheme://host[:port]`` with the
    default port omitted; every other scheme gives ``"null"``.

    Args:
        url: Absolute URL

    Returns:
        Serialized origin

    Raises:
        ValueError: If the URL is relative, has an invalid port or IPv6
            literal, or uses a special scheme without a host
    """
    parts = urlsplit(_clean(url))
    scheme = parts.scheme.lower()
    if not scheme:
        raise ValueError(f"Not an absolute URL: {url!r}")

    if scheme not in SPECIAL_SCHEME_PORTS:
        return OPAQUE_ORIGIN

    host = parts.hostname
    if not host:
        raise ValueError(f"Missing host in URL: {url!r}")
    if ":" in host:
        host = f"[{host}]"

    port = parts.port
    if port is None or port == SPECIAL_SCHEME_PORTS[scheme]:
        return f"{scheme}://{host}"
    return f"{scheme}://{host}:{port}"


def safe_origin(url: str) -> str:
    """Origin of ``url``, or an empty string when it has none."""
    try:
        return url_origin(url)
    except ValueError:
        return ""


def resolve_origin(href: str, base_origin: str) -> str:
    """Resolve ``href`` against ``base_origin`` and return its origin.

    For http(s), ws(s) and ftp, backslashes count as slashes and an href
    such as ``http:evil.com`` with a scheme other than the base's names a
    host. Without a usable base origin only absolute hrefs can be resolved.

    Raises:
        ValueError: If ``href`` cannot be resolved
    """
    cleaned = _clean(href)
    base = base_origin if base_origin != OPAQUE_ORIGIN else ""
    base_scheme = base.split(":", 1)[0]

    match = _SCHEME.match(cleaned)
    if match:
        scheme = match.group(1).lower()
        if scheme not in SPECIAL_SCHEME_PORTS:
            return url_origin(cleaned)
        rest = cleaned[match.end():].replace("\\", "/")
        # "http:host/x" names a host unless the base shares its scheme
        if scheme != base_scheme or rest.startswith("//"):
            return url_origin(_with_authority(scheme, rest))
        cleaned = rest
    elif not base:
        raise ValueError(f"Cannot resolve {href!r} without a base origin")
    else:
        # Base origins are always special, where "\" is a path separator
        cleaned = cleaned.replace("\\", "/")

    if cleaned.startswith("//"):
        return url_origin(_with_authority(base_scheme, cleaned))
    return url_origin(urljoin(base, cleaned))


def _with_authority(scheme: str, rest: str) -> str:
    # Special schemes skip any run of slashes before the host
    return f"{scheme}://{rest.lstrip('/')}"


def display_domain(url: str) -> str:
    """Hostname of ``url`` for display, or the raw value if it has none."""
    try:
        hostname: Optional[str] = urlsplit(url).hostname
    except ValueError:
        return url
    return hostname or url
