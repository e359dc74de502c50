"""
Paging through the results of a finished crawl job.
"""

import logging

from ..client import GetCrawlJobParams, HyperbrowserClient

logger = logging.getLogger(__name__)


async def collect_markdown(
    client: HyperbrowserClient, job_id: str, batch_size: int = 10
) -> str:
    """
    Fetch every result batch of a crawl job and join the page markdown.

    Batches are requested in order starting at page 1 until the provider's
    reported batch count is reached. Errors propagate, so a failure on any
    batch yields no content at all.

    Args:
        client: Crawler client.
        job_id: Identifier of the crawl job.
        batch_size: Number of pages per batch.

    Returns:
        str: Markdown of all crawled pages, concatenated in fetch order.
    """
    scraped_markdown = []
    page_index = 1

    while True:
        result = await client.get_crawl_job(
            job_id, GetCrawlJobParams(page=page_index, batch_size=batch_size)
        )
        logger.info(
            f"Fetched result batch {page_index}/{result.total_page_batches} "
            f"({len(result.data)} pages)"
        )

        for page in result.data:
            if page.markdown:
                scraped_markdown.append(page.markdown)

        if page_index >= result.total_page_batches:
            break
        page_index += 1

    return "".join(scraped_markdown)
