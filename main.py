#!/usr/bin/env python3
"""
Contact Extractor - Webpage Contact Signal Extractor
Pulls emails, phone numbers, Twitter/X and LinkedIn profiles, organization name and domain out of webpages.
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from crawler.page_fetcher import PageFetcher
from extractors.contact_extractor import ContactExtractor
from extractors.signals import ContactSignals
from utils.config import Config
from utils.exceptions import ContactExtractorError
from utils.logger import setup_logging
from utils.validators import validate_url


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Webpage Contact Signal Extractor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --url https://example.com
  python main.py --urls-file websites.txt --concurrency 5
  python main.py --html-file page.html --source-url https://example.com/contact
        """
    )

    # Input options
    source_group = parser.add_mutually_exclusive_group(required=True)
    source_group.add_argument(
        "--url", "-u",
        type=str,
        help="Single URL to fetch and extract"
    )
    source_group.add_argument(
        "--urls-file", "-f",
        type=str,
        help="File containing URLs to extract (one per line)"
    )
    source_group.add_argument(
        "--html-file",
        type=str,
        help="Local HTML file to extract (requires --source-url)"
    )
    parser.add_argument(
        "--source-url",
        type=str,
        help="URL the --html-file was downloaded from"
    )

    # Fetch options
    parser.add_argument(
        "--timeout",
        type=float,
        help="Request timeout in seconds (default: 30)"
    )
    parser.add_argument(
        "--user-agent",
        type=str,
        help="Custom user agent string"
    )
    parser.add_argument(
        "--concurrency",
        type=int,
        help="Concurrent requests for --urls-file (default: 3)"
    )

    # Output options
    parser.add_argument(
        "--as-contact",
        action="store_true",
        help="Print reviewable contact rows instead of raw signals"
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2)"
    )

    # Logging options
    parser.add_argument(
        "--verbose", "-v",
        action="count",
        default=0,
        help="Increase verbosity (use -v or -vv)"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress all output except errors"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="Log file name (written under logs/)"
    )

    args = parser.parse_args(argv)
    if args.html_file and not args.source_url:
        parser.error("--html-file requires --source-url")
    return args


def load_urls_from_file(file_path: str) -> List[str]:
    """Load URLs from a text file, skipping blanks, comments and invalid URLs."""
    with open(file_path, 'r', encoding='utf-8') as f:
        urls = [line.strip() for line in f if line.strip() and not line.startswith('#')]

    valid_urls = []
    for url in urls:
        if validate_url(url):
            valid_urls.append(url)
        else:
            logging.warning(f"Invalid URL skipped: {url}")

    return valid_urls


def as_contact_row(result: Dict, index: int) -> Dict:
    """Turn a {"contacts": payload, "url": url} result into a contact row."""
    if "error" in result:
        return result

    signals = ContactSignals.model_validate(result["contacts"])
    return signals.to_contact(str(index)).to_payload()


def extract_from_file(html_file: str, source_url: str, as_contact: bool) -> Dict:
    """Run extraction on a local HTML file."""
    content = Path(html_file).read_text(encoding='utf-8', errors='replace')
    signals = ContactExtractor().extract(content, source_url)

    if not signals.has_contact_details:
        logging.warning(f"No contact information found in {html_file}")

    if as_contact:
        return signals.to_contact("0").to_payload()
    return {"contacts": signals.to_payload(), "url": source_url}


async def extract_single_url(url: str, config: Config) -> Dict:
    """Fetch and extract a single URL."""
    async with PageFetcher(config) as fetcher:
        return await fetcher.extract_contacts(url)


async def extract_multiple_urls(urls: List[str], config: Config) -> List[Dict]:
    """Fetch and extract several URLs concurrently."""
    async with PageFetcher(config) as fetcher:
        results = await fetcher.extract_many(urls)

    successful = sum(1 for result in results if "error" not in result)
    logging.info(f"Completed extraction. {successful}/{len(urls)} URLs successful.")
    return results


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)

    # Setup logging
    log_level = logging.WARNING
    if args.quiet:
        log_level = logging.ERROR
    elif args.verbose == 1:
        log_level = logging.INFO
    elif args.verbose >= 2:
        log_level = logging.DEBUG

    setup_logging(log_level, args.log_file)

    try:
        config = Config.from_env(
            request_timeout=args.timeout,
            user_agent=args.user_agent,
            concurrent_requests=args.concurrency,
        )

        if args.html_file:
            output = extract_from_file(args.html_file, args.source_url, args.as_contact)
        elif args.url:
            if not validate_url(args.url):
                logging.error(f"Invalid URL: {args.url}")
                return 1
            result = asyncio.run(extract_single_url(args.url, config))
            output = as_contact_row(result, 0) if args.as_contact else result
        else:
            urls = load_urls_from_file(args.urls_file)
            if not urls:
                logging.error("No valid URLs found in file")
                return 1
            results = asyncio.run(extract_multiple_urls(urls, config))
            output = [as_contact_row(r, i) for i, r in enumerate(results)] if args.as_contact else results

    except ContactExtractorError as e:
        logging.error(str(e))
        return 1
    except FileNotFoundError as e:
        logging.error(f"File not found: {e.filename}")
        return 1
    except ValueError as e:
        # pydantic rejects out-of-range settings
        logging.error(f"Invalid configuration: {e}")
        return 1
    except KeyboardInterrupt:
        logging.info("Extraction interrupted by user")
        return 1

    print(json.dumps(output, indent=args.indent, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
