"""
Command-line interface for hyperbrowser_llm.

    python -m hyperbrowser_llm scrape <url>
    python -m hyperbrowser_llm extract <jobId>
"""

import asyncio
import argparse
import json
import logging
import sys
from typing import List, Optional

from .client import APIError, CrawlJobStatus
from .config import LOG_LEVELS, config
from .crawler import CrawlTimeoutError, scrape_site
from .extraction import ProductExtractor

logger = logging.getLogger(__name__)


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Crawl a site and extract structured product data with an LLM"
    )
    # Both positionals are optional here so that missing values are reported
    # by main() with exit status 1.
    parser.add_argument("command", nargs="?", help="Command to run: scrape or extract")
    parser.add_argument("param", nargs="?", help="URL to scrape or job ID to extract")
    parser.add_argument(
        "--output",
        help="Also write extracted products to this file (extract only)",
    )
    parser.add_argument(
        "--poll-interval",
        type=float,
        default=config.crawler.poll_interval,
        help="Seconds between crawl status checks (default: %(default)s)",
    )
    parser.add_argument(
        "--max-polls",
        type=int,
        default=config.crawler.max_polls,
        help="Give up after this many status checks (default: no limit)",
    )
    parser.add_argument(
        "--max-pages",
        type=int,
        default=config.crawler.max_pages,
        help="Maximum pages to crawl (default: %(default)s)",
    )
    parser.add_argument(
        "--batch-size",
        type=int,
        default=config.crawler.batch_size,
        help="Pages per result batch when extracting (default: %(default)s)",
    )
    parser.add_argument(
        "--model",
        default=config.llm.model,
        help="LLM model used for extraction (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=config.log_level,
        help="Set the logging level (default: %(default)s)",
    )
    return parser.parse_args(args)


def _fail(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


async def run_scrape(args: argparse.Namespace) -> int:
    """Start a crawl job and wait for it to finish."""
    try:
        job = await scrape_site(
            args.param,
            max_pages=args.max_pages,
            poll_interval=args.poll_interval,
            max_polls=args.max_polls,
        )
    except CrawlTimeoutError as e:
        logger.error(str(e))
        return 1
    except APIError as e:
        logger.error(f"Failed to run crawl job for {args.param}: {e}")
        return 1

    if job.status == CrawlJobStatus.FAILED:
        return 1

    print(job.job_id)
    return 0


async def run_extract(args: argparse.Namespace) -> int:
    """Extract products from a finished crawl job and print them as JSON."""
    extractor = ProductExtractor(model=args.model)
    try:
        products = await extractor.extract_product_data(
            args.param, batch_size=args.batch_size
        )
    except APIError as e:
        logger.error(f"Failed to fetch crawl results for {args.param}: {e}")
        return 1

    output = json.dumps([product.model_dump() for product in products], indent=2)
    print(output)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output)
        logger.info(f"Saved output to {args.output}")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to parse arguments and dispatch the command."""
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if not args.command:
        return _fail("Please provide a command: scrape <url> or extract <jobId>")

    if args.command == "scrape":
        if not args.param:
            return _fail("Please provide a URL to scrape")
        if not config.crawler.api_key:
            return _fail("HYPERBROWSER_API_KEY is not set")
        return asyncio.run(run_scrape(args))

    if args.command == "extract":
        if not args.param:
            return _fail("Please provide a job ID to extract data from")
        if not config.crawler.api_key:
            return _fail("HYPERBROWSER_API_KEY is not set")
        if not config.llm.api_key:
            return _fail("OPENAI_API_KEY is not set")
        return asyncio.run(run_extract(args))

    return _fail("Invalid command. Use 'scrape <url>' or 'extract <jobId>'")


if __name__ == "__main__":
    sys.exit(main())
