"""
Client library for the hosted crawler used by hyperbrowser_llm.
"""

from .client import HyperbrowserClient
from .models import (APIError, CrawledPage, CrawlJobResponse, CrawlJobStatus,
                     GetCrawlJobParams, StartCrawlJobParams,
                     StartCrawlJobResponse)

__all__ = [
    "HyperbrowserClient",
    "APIError",
    "CrawledPage",
    "CrawlJobResponse",
    "CrawlJobStatus",
    "GetCrawlJobParams",
    "StartCrawlJobParams",
    "StartCrawlJobResponse",
]
