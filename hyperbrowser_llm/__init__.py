"""
Hyperbrowser LLM product extraction package.

This package crawls e-commerce sites with a hosted crawler and extracts
structured product data from the crawled pages using an LLM.
"""

from typing import List

from .client import HyperbrowserClient
from .config import get_config
from .crawler import scrape_site
from .extraction import ProductExtractor
from .models import Product, ProductSchema

# Version
__version__ = "0.1.0"


async def extract_products(job_id: str) -> List[Product]:
    """
    Extract products from a finished crawl job.

    Args:
        job_id: Identifier of the crawl job.

    Returns:
        List of Product objects found in the crawled pages.
    """
    extractor = ProductExtractor()
    return await extractor.extract_product_data(job_id)


__all__ = [
    "extract_products",
    "scrape_site",
    "HyperbrowserClient",
    "Product",
    "ProductSchema",
    "ProductExtractor",
    "get_config",
]
