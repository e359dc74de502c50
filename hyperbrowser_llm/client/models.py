"""
Models for the hosted crawler client.

This module defines the Pydantic models used for requests and responses of the
crawl job API. Field aliases follow the camelCase names used on the wire.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class CrawlJobStatus(str, Enum):
    """Lifecycle states of a crawl job."""

    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (CrawlJobStatus.COMPLETED, CrawlJobStatus.FAILED)


class _WireModel(BaseModel):
    class Config:
        populate_by_name = True


class StartCrawlJobParams(_WireModel):
    """Parameters for starting a crawl job."""

    url: str = Field(..., description="URL to start crawling from")
    max_pages: int = Field(
        default=1000, alias="maxPages", description="Maximum pages to crawl"
    )
    follow_links: bool = Field(
        default=False, alias="followLinks", description="Whether to follow links"
    )
    ignore_sitemap: bool = Field(
        default=False, alias="ignoreSitemap", description="Whether to skip the sitemap"
    )
    exclude_patterns: List[str] = Field(
        default_factory=list, alias="excludePatterns", description="URL patterns to skip"
    )
    include_patterns: List[str] = Field(
        default_factory=list,
        alias="includePatterns",
        description="URL patterns to restrict the crawl to",
    )
    use_proxy: bool = Field(
        default=False, alias="useProxy", description="Route the crawl through a proxy"
    )
    solve_captchas: bool = Field(
        default=False, alias="solveCaptchas", description="Solve captchas while crawling"
    )

    def to_request_body(self) -> Dict[str, Any]:
        """Build the JSON body expected by the crawl endpoint."""
        return {
            "url": self.url,
            "maxPages": self.max_pages,
            "followLinks": self.follow_links,
            "ignoreSitemap": self.ignore_sitemap,
            "excludePatterns": self.exclude_patterns,
            "includePatterns": self.include_patterns,
            "sessionOptions": {
                "useProxy": self.use_proxy,
                "solveCaptchas": self.solve_captchas,
            },
        }


class StartCrawlJobResponse(_WireModel):
    """Response returned when a crawl job is created."""

    job_id: str = Field(..., alias="jobId", description="Identifier of the new job")


class GetCrawlJobParams(_WireModel):
    """Pagination parameters for fetching crawl job results."""

    page: Optional[int] = Field(None, description="Result batch to fetch (1-based)")
    batch_size: Optional[int] = Field(
        None, alias="batchSize", description="Number of pages per batch"
    )

    def to_query_params(self) -> Dict[str, Any]:
        """Build query parameters, omitting unset values."""
        return self.model_dump(by_alias=True, exclude_none=True)


class CrawledPage(_WireModel):
    """A single page produced by a crawl job."""

    url: str = Field(..., description="URL of the crawled page")
    status: str = Field(..., description="Crawl status of this page")
    error: Optional[str] = Field(None, description="Error for this page, if any")
    metadata: Optional[Dict[str, Any]] = Field(None, description="Page metadata")
    markdown: Optional[str] = Field(None, description="Page content as markdown")
    html: Optional[str] = Field(None, description="Page content as HTML")
    links: List[str] = Field(default_factory=list, description="Links found on the page")

    @field_validator("links", mode="before")
    @classmethod
    def _null_links(cls, value: Any) -> Any:
        return [] if value is None else value


class CrawlJobResponse(_WireModel):
    """State of a crawl job and one batch of its results."""

    job_id: str = Field(..., alias="jobId", description="Identifier of the job")
    status: CrawlJobStatus = Field(..., description="Current job status")
    error: Optional[str] = Field(None, description="Provider error message on failure")
    data: List[CrawledPage] = Field(
        default_factory=list, description="Pages in the requested batch"
    )
    total_crawled_pages: int = Field(
        default=0, alias="totalCrawledPages", description="Pages crawled so far"
    )
    total_page_batches: int = Field(
        default=0, alias="totalPageBatches", description="Number of result batches"
    )
    current_page_batch: int = Field(
        default=0, alias="currentPageBatch", description="Batch returned in this response"
    )
    batch_size: int = Field(
        default=0, alias="batchSize", description="Pages per result batch"
    )

    # The provider sends null for these while a job has no results yet
    @field_validator("data", mode="before")
    @classmethod
    def _null_data(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator(
        "total_crawled_pages", "total_page_batches", "current_page_batch", "batch_size",
        mode="before",
    )
    @classmethod
    def _null_count(cls, value: Any) -> Any:
        return 0 if value is None else value


class APIError(Exception):
    """Exception raised for crawl API errors."""

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"API Error ({status_code}): {detail}")
