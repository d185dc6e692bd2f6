"""
Text processing utilities for sanitizing markup and normalizing extracted content.
"""

import html
import logging
import re
from typing import Iterable, List, Tuple

from bs4 import BeautifulSoup
from bs4.element import PreformattedString

from utils.patterns import SanitizePatterns


def unique_in_order(items: Iterable[str]) -> Tuple[str, ...]:
    """Drop exact duplicates, keeping the first occurrence of each item."""
    seen = set()
    ordered = []
    for item in items:
        if item not in seen:
            seen.add(item)
            ordered.append(item)
    return tuple(ordered)


class TextProcessor:
    """Utilities for sanitizing markup and cleaning text content."""

    def __init__(self):
        self.sanitize_patterns = SanitizePatterns()
        self.whitespace_pattern = re.compile(r'\s+')

    def sanitize_markup(self, content: str) -> str:
        """Remove script, style, svg and comment spans from markup."""
        if not content:
            return ""

        for pattern in self.sanitize_patterns.removable_blocks:
            content = pattern.sub('', content)
        return content

    def visible_text_nodes(self, content: str) -> List[str]:
        """Return the text nodes of (already sanitized) markup, entities decoded.

        Attribute values are not part of the result. Each node is returned
        separately so that matches never run across element boundaries.
        """
        if not content:
            return []

        try:
            soup = BeautifulSoup(content, 'html.parser')
            return [
                str(node) for node in soup.find_all(string=True)
                if not isinstance(node, PreformattedString)
            ]
        except Exception as e:
            logging.debug(f"HTML parsing error, falling back to tag stripping: {e}")
            chunks = self.sanitize_patterns.html_tag_pattern.split(content)
            return [html.unescape(chunk) for chunk in chunks if chunk]

    def normalize_whitespace(self, text: str) -> str:
        """Collapse whitespace runs to single spaces and trim."""
        if not text:
            return ""

        return self.whitespace_pattern.sub(' ', text).strip()
