"""
Crawl job submission and status polling.
"""

import asyncio
import logging
from typing import Optional

from ..client import (CrawlJobResponse, CrawlJobStatus, HyperbrowserClient,
                      StartCrawlJobParams)
from ..config import config
from .exceptions import CrawlTimeoutError

# Set up logging
logger = logging.getLogger(__name__)


async def wait_for_crawl_job(
    client: HyperbrowserClient,
    job_id: str,
    poll_interval: float = 5.0,
    max_polls: Optional[int] = None,
) -> CrawlJobResponse:
    """
    Poll a crawl job until it completes or fails.

    Args:
        client: Crawler client.
        job_id: Identifier of the job to poll.
        poll_interval: Seconds to sleep between status checks.
        max_polls: Maximum number of status checks, or None for no limit.

    Returns:
        CrawlJobResponse: The job in its terminal state.

    Raises:
        CrawlTimeoutError: If max_polls checks all report a non-terminal status.
    """
    polls = 0
    while True:
        job = await client.get_crawl_job(job_id)
        polls += 1

        if job.status.is_terminal:
            if job.status == CrawlJobStatus.FAILED:
                logger.error(f"Crawl job failed: {job.error}")
            else:
                logger.info(f"Crawl job completed: {job_id}")
            return job

        if max_polls is not None and polls >= max_polls:
            raise CrawlTimeoutError(job_id, polls)

        logger.info(f"Crawl job is still running: {job.status.value}")
        await asyncio.sleep(poll_interval)


async def scrape_site(
    url: str,
    client: Optional[HyperbrowserClient] = None,
    max_pages: Optional[int] = None,
    poll_interval: Optional[float] = None,
    max_polls: Optional[int] = None,
) -> CrawlJobResponse:
    """
    Start a crawl job for a site and wait for it to finish.

    Args:
        url: URL to crawl.
        client: Crawler client. If None, one is created from config and closed
            afterwards.
        max_pages: Page ceiling for the job. If None, uses config value.
        poll_interval: Seconds between status checks. If None, uses config value.
        max_polls: Maximum number of status checks. If None, uses config value.

    Returns:
        CrawlJobResponse: The job in its terminal state.
    """
    if not url:
        raise ValueError("A URL is required to start a crawl job")

    owns_client = client is None
    client = client or HyperbrowserClient.from_config(config.crawler)

    params = StartCrawlJobParams(
        url=url,
        max_pages=max_pages if max_pages is not None else config.crawler.max_pages,
        follow_links=False,
        use_proxy=False,
        solve_captchas=False,
    )

    try:
        crawl_job = await client.start_crawl_job(params)
        logger.info(f"Crawl job started: {crawl_job.job_id}")

        return await wait_for_crawl_job(
            client,
            crawl_job.job_id,
            poll_interval=(
                poll_interval if poll_interval is not None else config.crawler.poll_interval
            ),
            max_polls=max_polls if max_polls is not None else config.crawler.max_polls,
        )
    finally:
        if owns_client:
            await client.close()
