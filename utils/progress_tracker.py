"""
Progress tracking utilities for monitoring batch extraction.
"""

import logging
import time
from typing import Dict, Optional
from tqdm import tqdm


class ProgressTracker:
    """Tracks and reports progress while extracting contacts from many URLs."""

    def __init__(self, show_bar: bool = True):
        self.show_bar = show_bar
        self.start_time: Optional[float] = None
        self.pages_processed: int = 0
        self.emails_found: int = 0
        self.phones_found: int = 0
        self.failed_pages: int = 0
        self.current_url: str = ""
        self.progress_bar: Optional[tqdm] = None

    def start(self, total_pages: Optional[int] = None):
        """Start tracking a new batch."""
        self.start_time = time.time()
        self.pages_processed = 0
        self.emails_found = 0
        self.phones_found = 0
        self.failed_pages = 0

        if total_pages and self.show_bar:
            self.progress_bar = tqdm(
                total=total_pages,
                desc="Extracting",
                unit="pages",
                bar_format="{l_bar}{bar}| {n_fmt}/{total_fmt} [{elapsed}<{remaining}, {rate_fmt}]"
            )

        logging.info("Started extraction progress tracking")

    def update_progress(self, url: str, emails_count: int = 0, phones_count: int = 0, failed: bool = False):
        """Update progress with results from a single page."""
        self.current_url = url
        self.pages_processed += 1
        self.emails_found += emails_count
        self.phones_found += phones_count

        if failed:
            self.failed_pages += 1

        if self.progress_bar:
            self.progress_bar.update(1)
            self.progress_bar.set_postfix({
                'Emails': self.emails_found,
                'Phones': self.phones_found,
                'Failed': self.failed_pages
            })

    def finish(self):
        """Finish tracking and log final statistics."""
        if self.progress_bar:
            self.progress_bar.close()
            self.progress_bar = None

        stats = self.get_statistics()
        logging.info(
            f"Extraction completed: {stats['pages_processed']} pages, "
            f"{stats['emails_found']} emails, {stats['phones_found']} phones, "
            f"{stats['failed_pages']} failed in {stats['elapsed_time']:.2f}s"
        )

    def get_statistics(self) -> Dict:
        """Get current batch statistics."""
        elapsed_time = time.time() - self.start_time if self.start_time else 0
        succeeded = self.pages_processed - self.failed_pages

        return {
            'pages_processed': self.pages_processed,
            'emails_found': self.emails_found,
            'phones_found': self.phones_found,
            'failed_pages': self.failed_pages,
            'elapsed_time': elapsed_time,
            'success_rate': (succeeded / self.pages_processed) * 100 if self.pages_processed > 0 else 0,
            'current_url': self.current_url
        }
