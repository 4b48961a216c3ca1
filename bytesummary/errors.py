"""Exceptions raised across the package."""

from typing import Optional


class ByteSummaryError(Exception):
    """Base class for ByteSummary errors."""


class FetchError(ByteSummaryError):
    """A listing or article page could not be retrieved."""

    def __init__(self, url: str, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class StoreError(ByteSummaryError):
    """The key-value store could not complete an operation."""


class SourceError(ByteSummaryError):
    """A custom source request was rejected."""
