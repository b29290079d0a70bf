"""Exception types raised by MetaSight."""

from typing import Optional


class MetaSightError(Exception):
    """Base class for MetaSight errors."""


class RetrievalError(MetaSightError):
    """Raised when a page's HTML cannot be obtained.

    The message is meant to be shown to the user as-is.
    """

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.url = url
