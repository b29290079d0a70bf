# src/metasight/constants.py
"""Centralized constants for MetaSight.

Literal strings shown in reports and defaults shared across modules. For
user-configurable values, see config.py and AnalysisThresholds.
"""

# =============================================================================
# Extraction Constants
# =============================================================================

# Fallback text for anchors with no text content.
# NOTE: the duplicated word is intentional; saved reports and downstream
# consumers match on this exact literal. Change it together with them.
LINK_TEXT_PLACEHOLDER = "No Text Text"

# href prefixes that are never recorded as links (matched case-insensitively)
EXCLUDED_LINK_SCHEMES = ("javascript:", "mailto:")

# Heading tags scanned for the outline, in rank order
HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")

# Meta tag prefixes for social tags
OG_PREFIX = "og:"
TWITTER_PREFIX = "twitter:"

# Parser used for BeautifulSoup
HTML_PARSER = "html.parser"

# Default ports per scheme for origin comparison (WHATWG "special" schemes)
SPECIAL_SCHEME_PORTS = {
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
    "ftp": 21,
}

# Origin serialization for schemes without a tuple origin
OPAQUE_ORIGIN = "null"


# =============================================================================
# Retrieval Constants
# =============================================================================

DEFAULT_PROXY_URL = "https://api.allorigins.win/get"
DEFAULT_SCHEME = "https"
DEFAULT_TIMEOUT_SECONDS = 30
DEFAULT_USER_AGENT = "MetaSight/1.0"

# Envelope field holding the fetched page body
PROXY_CONTENTS_FIELD = "contents"

FETCH_FAILED_MESSAGE = "Could not fetch content from the provided URL."
ANALYSIS_FAILED_MESSAGE = "Failed to analyze URL"


# =============================================================================
# Preview Constants
# =============================================================================

MISSING_TITLE_TEXT = "No Title Found"
MISSING_DESCRIPTION_TEXT = (
    "No meta description provided. Search engines will show a snippet "
    "from the page content."
)
MISSING_OG_IMAGE_TEXT = "No og:image specified"
MISSING_TWITTER_IMAGE_TEXT = "No twitter:image specified"

# Indentation steps for the heading outline (h4-h6 share the last step)
HEADING_INDENT = {
    "h1": 0,
    "h2": 1,
    "h3": 2,
}
HEADING_INDENT_DEFAULT = 3
