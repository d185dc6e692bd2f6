"""
Crawler module for fetching pages to extract contacts from.
"""

from .page_fetcher import PageFetcher

__all__ = ['PageFetcher']
