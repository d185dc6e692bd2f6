"""
URL validation and domain derivation utilities.
"""

import logging
from urllib.parse import urlsplit

import validators as url_validators

from utils.exceptions import InvalidSourceUrlError
from utils.patterns import DocumentPatterns

_document_patterns = DocumentPatterns()


def validate_url(url: str) -> bool:
    """Validate if a URL is a fetchable http(s) address."""
    if not url or not isinstance(url, str):
        return False
    try:
        if urlsplit(url).scheme.lower() not in ('http', 'https'):
            return False
        return url_validators.url(url) is True
    except ValueError as e:
        logging.debug(f"URL validation failed for {url}: {e}")
        return False


def extract_host(source_url: str) -> str:
    """Return the host part of an absolute URL exactly as written (no lowercasing).

    Raises InvalidSourceUrlError when the URL has no scheme or no host.
    """
    if not isinstance(source_url, str):
        raise InvalidSourceUrlError(repr(source_url), "expected a string")

    try:
        parts = urlsplit(source_url.strip())
    except ValueError as e:
        raise InvalidSourceUrlError(source_url, str(e)) from e

    if not parts.scheme:
        raise InvalidSourceUrlError(source_url, "missing scheme")

    # user:password@host:port
    host = parts.netloc.rpartition('@')[2]
    if host.startswith('['):
        host = host[:host.find(']') + 1]
    else:
        host = host.partition(':')[0]

    if not host:
        raise InvalidSourceUrlError(source_url, "missing host")
    return host


def derive_domain(source_url: str) -> str:
    """Host of the source URL with a leading www. stripped."""
    host = extract_host(source_url)
    return _document_patterns.www_prefix.sub('', host, count=1) or host
