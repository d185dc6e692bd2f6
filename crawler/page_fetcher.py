"""
Page Fetcher - downloads a webpage and runs contact extraction on it.
One request per URL, no retries.
"""

import asyncio
from typing import Dict, List, Optional

import httpx

from extractors.contact_extractor import ContactExtractor
from utils.config import Config
from utils.exceptions import ContactExtractorError, FetchError, InvalidSourceUrlError
from utils.logger import LoggerMixin
from utils.progress_tracker import ProgressTracker
from utils.validators import validate_url


class PageFetcher(LoggerMixin):
    """Fetches pages over HTTP and extracts their contact signals.

    Use as an async context manager so the underlying client is closed:

        async with PageFetcher(config) as fetcher:
            result = await fetcher.extract_contacts("https://example.com")
    """

    def __init__(self, config: Config, transport: Optional[httpx.AsyncBaseTransport] = None,
                 progress_tracker: Optional[ProgressTracker] = None):
        self.config = config
        self.transport = transport
        self.extractor = ContactExtractor()
        self.progress_tracker = progress_tracker or ProgressTracker()
        self.client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        self.client = httpx.AsyncClient(
            timeout=self.config.request_timeout,
            headers={'User-Agent': self.config.user_agent},
            follow_redirects=self.config.follow_redirects,
            transport=self.transport,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.client:
            await self.client.aclose()
            self.client = None

    async def fetch(self, url: str) -> str:
        """Download a page and return its body text."""
        if self.client is None:
            raise RuntimeError("PageFetcher must be used as an async context manager")

        self.logger.info(f"Fetching {url}")
        try:
            response = await self.client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(url, f"HTTP {e.response.status_code}", e.response.status_code) from e
        except httpx.HTTPError as e:
            raise FetchError(url, str(e) or e.__class__.__name__) from e

        return response.text

    async def extract_contacts(self, url: str) -> Dict:
        """Validate, fetch and extract a single URL.

        Returns {"contacts": <signals payload>, "url": url}.
        """
        if not validate_url(url):
            raise InvalidSourceUrlError(url, "invalid URL format")

        content = await self.fetch(url)
        signals = self.extractor.extract(content, url)

        if not signals.has_contact_details:
            self.logger.warning(f"No contact information found on {url}")

        return {"contacts": signals.to_payload(), "url": url}

    async def extract_many(self, urls: List[str]) -> List[Dict]:
        """Extract several URLs concurrently, preserving input order.

        A failing URL produces {"url": url, "error": message} instead of
        aborting the batch.
        """
        self.logger.info(f"Starting extraction for {len(urls)} URLs")
        semaphore = asyncio.Semaphore(self.config.concurrent_requests)
        self.progress_tracker.start(len(urls))

        async def extract_with_semaphore(url: str) -> Dict:
            async with semaphore:
                try:
                    result = await self.extract_contacts(url)
                except ContactExtractorError as e:
                    self.logger.error(str(e))
                    self.progress_tracker.update_progress(url, failed=True)
                    return {"url": url, "error": str(e)}

                contacts = result["contacts"]
                self.progress_tracker.update_progress(
                    url, len(contacts["emails"]), len(contacts["phones"])
                )
                return result

        try:
            return list(await asyncio.gather(*(extract_with_semaphore(url) for url in urls)))
        finally:
            self.progress_tracker.finish()
