#!/usr/bin/env python
"""
Example script demonstrating the full crawl-then-extract workflow in one process.

This script:
1. Starts a crawl job for a shop and waits for it to finish
2. Collects the crawled page markdown
3. Extracts product records with the configured LLM
4. Writes the products to a JSON file
"""
import asyncio
import argparse
import json
import logging
import sys

from hyperbrowser_llm.client import CrawlJobStatus, HyperbrowserClient
from hyperbrowser_llm.config import config
from hyperbrowser_llm.crawler import scrape_site
from hyperbrowser_llm.extraction import ProductExtractor

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("crawl_and_extract")


async def crawl_and_extract(url: str, output_path: str, max_polls: int) -> int:
    async with HyperbrowserClient.from_config(config.crawler) as client:
        job = await scrape_site(url, client=client, max_polls=max_polls)
        if job.status == CrawlJobStatus.FAILED:
            return 1

        extractor = ProductExtractor()
        products = await extractor.extract_product_data(job.job_id, client=client)

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump([product.model_dump() for product in products], f, indent=2)

    logger.info(f"Saved {len(products)} products from job {job.job_id} to {output_path}")
    return 0


def main():
    parser = argparse.ArgumentParser(description="Crawl a shop and extract its products")
    parser.add_argument("url", help="URL of the shop to crawl")
    parser.add_argument("--output", default="products.json", help="Output JSON file")
    parser.add_argument(
        "--max-polls", type=int, default=120, help="Give up after this many status checks"
    )
    args = parser.parse_args()

    sys.exit(asyncio.run(crawl_and_extract(args.url, args.output, args.max_polls)))


if __name__ == "__main__":
    main()
