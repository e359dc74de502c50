"""
Prompt templates for LLM-based extraction.
"""

from .product_extraction import PRODUCT_EXTRACTION_PROMPT

__all__ = ["PRODUCT_EXTRACTION_PROMPT"]
