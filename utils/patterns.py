"""
Pattern definitions for contact signal extraction.
Contains regex patterns for markup sanitization, emails, phone numbers, social profiles and page titles.
"""

import re


class SanitizePatterns:
    """Spans stripped from markup before any matching takes place."""

    def __init__(self):
        self.removable_blocks = [
            # Executable code
            re.compile(r'<script[^>]*>[\s\S]*?</script>', re.IGNORECASE),
            # Stylesheets
            re.compile(r'<style[^>]*>[\s\S]*?</style>', re.IGNORECASE),
            # Inline vector graphics
            re.compile(r'<svg[^>]*>[\s\S]*?</svg>', re.IGNORECASE),
            # Comments
            re.compile(r'<!--[\s\S]*?-->'),
        ]

        self.html_tag_pattern = re.compile(r'<[^>]+>')


class EmailPatterns:
    """Email detection patterns."""

    def __init__(self):
        self.standard = re.compile(
            r'\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b',
            re.ASCII
        )

        # Runs of characters an address can be made of; only runs holding an @ are scanned
        self.candidate_run = re.compile(r'[A-Za-z0-9._%+@-]+')


class PhonePatterns:
    """International phone number patterns. Only numbers with a leading + are considered."""

    def __init__(self):
        # href="tel:+15551234567"
        self.tel_link = re.compile(r'href=["\']tel:(\+\d[^"\']*)["\']', re.IGNORECASE | re.ASCII)

        # +1 (555) 123-4567 in visible text
        self.international = re.compile(r'\+\d[\d\s\xa0\-()]{6,}', re.ASCII)


class SocialPatterns:
    """Patterns for social media profile detection."""

    def __init__(self):
        self.patterns = {
            'twitter': re.compile(
                r'https?://(?:www\.)?(?:twitter|x)\.com/[A-Za-z0-9_]+',
                re.IGNORECASE
            ),
            'linkedin': re.compile(
                r'https?://(?:[a-z]{2,3}\.)?linkedin\.com/(?:in|company)/[A-Za-z0-9\-_%]+',
                re.IGNORECASE
            ),
        }


class DocumentPatterns:
    """Patterns for document-level metadata."""

    def __init__(self):
        self.title = re.compile(r'<title[^>]*>([^<]+)</title>', re.IGNORECASE)
        self.www_prefix = re.compile(r'^www\.', re.IGNORECASE)
