"""
Client implementation for the hosted crawler API.

This module provides an async client for starting crawl jobs, checking their
status and paging through their results.
"""

import asyncio
import json
import logging
from typing import Any, Dict, Optional, Type, TypeVar

import aiohttp
from pydantic import BaseModel, ValidationError

from .models import (APIError, CrawlJobResponse, GetCrawlJobParams,
                     StartCrawlJobParams, StartCrawlJobResponse)

logger = logging.getLogger(__name__)

ResponseModel = TypeVar("ResponseModel", bound=BaseModel)


class HyperbrowserClient:
    """Client for the Hyperbrowser crawl job API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://app.hyperbrowser.ai",
        timeout: float = 60.0,
    ):
        """
        Initialize the client.

        Args:
            api_key: API key for authentication
            base_url: Base URL for the API
            timeout: Request timeout in seconds
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session: Optional[aiohttp.ClientSession] = None

    @classmethod
    def from_config(cls, crawler_config) -> "HyperbrowserClient":
        """Create a client from a CrawlerConfig section."""
        return cls(
            api_key=crawler_config.api_key or "",
            base_url=crawler_config.base_url,
            timeout=crawler_config.request_timeout,
        )

    async def __aenter__(self) -> "HyperbrowserClient":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure that an HTTP session exists and return it."""
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession(
                headers={"x-api-key": self.api_key},
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            )
        return self.session

    async def close(self) -> None:
        """Close the client session."""
        if self.session and not self.session.closed:
            await self.session.close()
            self.session = None

    @staticmethod
    def _error_detail(response_text: str) -> str:
        try:
            response_data = json.loads(response_text)
        except json.JSONDecodeError:
            return response_text
        if isinstance(response_data, dict):
            for key in ("message", "error", "detail"):
                if response_data.get(key):
                    return str(response_data[key])
        return response_text

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Make an HTTP request to the API.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: API endpoint path
            params: Query parameters
            json_data: JSON body data

        Returns:
            API response as a dictionary

        Raises:
            APIError: If the API returns an error or cannot be reached
        """
        session = await self._ensure_session()
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url} params={params}")

        try:
            async with session.request(
                method=method, url=url, params=params, json=json_data
            ) as response:
                response_text = await response.text()
                if response.status >= 400:
                    raise APIError(response.status, self._error_detail(response_text))

                try:
                    return json.loads(response_text)
                except json.JSONDecodeError:
                    raise APIError(
                        response.status, f"Failed to parse JSON response: {response_text}"
                    )

        except asyncio.TimeoutError:
            logger.error(f"Request to {url} timed out after {self.timeout} seconds")
            raise APIError(504, f"Request timed out after {self.timeout} seconds")
        except aiohttp.ClientError as e:
            logger.error(f"Request to {url} failed: {str(e)}")
            raise APIError(500, f"Request failed: {str(e)}")

    @staticmethod
    def _parse(model: Type[ResponseModel], response: Dict[str, Any]) -> ResponseModel:
        try:
            return model.model_validate(response)
        except ValidationError as e:
            raise APIError(502, f"Unexpected response from crawl API: {e}")

    async def start_crawl_job(self, params: StartCrawlJobParams) -> StartCrawlJobResponse:
        """
        Start a new crawl job.

        Args:
            params: Crawl job parameters

        Returns:
            Response holding the new job identifier
        """
        response = await self._request(
            "POST", "/api/crawl", json_data=params.to_request_body()
        )
        return self._parse(StartCrawlJobResponse, response)

    async def get_crawl_job(
        self, job_id: str, params: Optional[GetCrawlJobParams] = None
    ) -> CrawlJobResponse:
        """
        Get the status of a crawl job and, optionally, a batch of its results.

        Args:
            job_id: Identifier of the crawl job
            params: Pagination parameters for the result batch

        Returns:
            Job status with the requested result batch
        """
        query = params.to_query_params() if params else None
        response = await self._request("GET", f"/api/crawl/{job_id}", params=query)
        return self._parse(CrawlJobResponse, response)
