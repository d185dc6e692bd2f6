"""
Error types raised by the contact extractor and its page fetcher.
"""

from typing import Optional


class ContactExtractorError(Exception):
    """Base class for all contact extractor errors."""


class InvalidSourceUrlError(ContactExtractorError, ValueError):
    """The source URL could not be parsed as an absolute URL."""

    def __init__(self, url: str, reason: str = "not an absolute URL"):
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid source URL {url!r}: {reason}")


class FetchError(ContactExtractorError):
    """A page could not be downloaded."""

    def __init__(self, url: str, message: str, status_code: Optional[int] = None):
        self.url = url
        self.status_code = status_code
        super().__init__(f"Failed to fetch {url}: {message}")
