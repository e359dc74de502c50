"""
LLM extraction of structured product data from crawl results.
"""

from .exceptions import ExtractionError, NoDataExtracted
from .product_extractor import ProductExtractor

__all__ = [
    "ProductExtractor",
    "ExtractionError",
    "NoDataExtracted",
]
