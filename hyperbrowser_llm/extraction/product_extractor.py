"""
Product extractor that turns crawled page content into structured products.
"""

import logging
from typing import Any, Dict, List, Optional

from openai import AsyncOpenAI

from ..client import HyperbrowserClient
from ..config import config
from ..crawler.pagination import collect_markdown
from ..models import Product, ProductSchema
from ..prompts.product_extraction import PRODUCT_EXTRACTION_PROMPT
from .exceptions import NoDataExtracted

# Set up logging
logger = logging.getLogger(__name__)


class ProductExtractor:
    """Extracts product records from crawled content with an LLM."""

    def __init__(
        self,
        llm_client: Optional[AsyncOpenAI] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
    ):
        """
        Initialize the product extractor.

        Args:
            llm_client: An OpenAI async client. If None, one is created with the
                configured API key.
            model: Model name. If None, uses config value.
            temperature: Sampling temperature. If None, uses config value.
        """
        self.llm_client = llm_client or AsyncOpenAI(api_key=config.llm.api_key)
        self.model = model or config.llm.model
        self.temperature = (
            temperature if temperature is not None else config.llm.temperature
        )

    def _build_messages(self, content: str) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": PRODUCT_EXTRACTION_PROMPT},
            {"role": "user", "content": content},
        ]

    async def extract_products(self, content: str) -> List[Product]:
        """
        Extract products from text content with a schema-constrained completion.

        Args:
            content: Concatenated page content to extract from.

        Returns:
            List[Product]: Products parsed from the model's structured output.

        Raises:
            NoDataExtracted: If the model refuses or returns no parsed output.
        """
        logger.info(
            f"Extracting products with {self.model} from {len(content)} characters"
        )

        request: Dict[str, Any] = {
            "model": self.model,
            "messages": self._build_messages(content),
            "response_format": ProductSchema,
        }
        if self.temperature is not None:
            request["temperature"] = self.temperature

        completion = await self.llm_client.chat.completions.parse(**request)

        message = completion.choices[0].message
        if getattr(message, "refusal", None):
            raise NoDataExtracted(f"Model refused the extraction: {message.refusal}")
        if message.parsed is None:
            raise NoDataExtracted("Model returned no parsed product data")

        products = message.parsed.products
        logger.info(f"Extracted {len(products)} products")
        return products

    async def extract_product_data(
        self,
        job_id: str,
        client: Optional[HyperbrowserClient] = None,
        batch_size: Optional[int] = None,
    ) -> List[Product]:
        """
        Collect a crawl job's content and extract products from it.

        Args:
            job_id: Identifier of a finished crawl job.
            client: Crawler client. If None, one is created from config and
                closed afterwards.
            batch_size: Pages per result batch. If None, uses config value.

        Returns:
            List[Product]: Extracted products.
        """
        if not job_id:
            raise ValueError("A job ID is required to extract product data")

        owns_client = client is None
        client = client or HyperbrowserClient.from_config(config.crawler)
        try:
            content = await collect_markdown(
                client, job_id, batch_size=batch_size or config.crawler.batch_size
            )
        finally:
            if owns_client:
                await client.close()

        return await self.extract_products(content)
