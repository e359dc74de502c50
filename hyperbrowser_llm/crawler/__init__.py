"""
Crawl job submission, polling and result collection.
"""

from .exceptions import CrawlError, CrawlTimeoutError
from .pagination import collect_markdown
from .poller import scrape_site, wait_for_crawl_job

__all__ = [
    "CrawlError",
    "CrawlTimeoutError",
    "collect_markdown",
    "scrape_site",
    "wait_for_crawl_job",
]
