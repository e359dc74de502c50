"""
Pydantic models for product data extraction.
"""

from typing import List

from pydantic import BaseModel, Field


class Product(BaseModel):
    """A single product extracted from crawled content."""

    name: str = Field(..., description="Product name")
    price: float = Field(..., description="Product price in the listed currency")
    description: str = Field(..., description="A brief description of the product")
    image: str = Field(..., description="URL of the main product image")


class ProductSchema(BaseModel):
    """Structured output shape the LLM response is constrained to."""

    products: List[Product] = Field(..., description="Products found in the content")
