"""
Unit tests for crawl job polling and result pagination.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from hyperbrowser_llm.client import (APIError, CrawlJobResponse,
                                     GetCrawlJobParams, StartCrawlJobResponse)
from hyperbrowser_llm.crawler import (collect_markdown, scrape_site,
                                      wait_for_crawl_job)
from hyperbrowser_llm.crawler.exceptions import CrawlTimeoutError


def _job(status: str, **kwargs) -> CrawlJobResponse:
    return CrawlJobResponse(job_id="job_123", status=status, **kwargs)


def _batch(page: int, total: int, *markdown) -> CrawlJobResponse:
    return CrawlJobResponse.model_validate(
        {
            "jobId": "job_123",
            "status": "completed",
            "data": [
                {"url": f"https://shop.example.com/{page}/{i}", "status": "completed", "markdown": md}
                for i, md in enumerate(markdown)
            ],
            "totalPageBatches": total,
            "currentPageBatch": page,
        }
    )


@pytest.fixture
def mock_client():
    """Return a crawler client with mocked API methods."""
    client = MagicMock()
    client.start_crawl_job = AsyncMock(
        return_value=StartCrawlJobResponse(job_id="job_123")
    )
    client.get_crawl_job = AsyncMock()
    client.close = AsyncMock()
    return client


@pytest.fixture
def mock_sleep():
    with patch("hyperbrowser_llm.crawler.poller.asyncio.sleep", new_callable=AsyncMock) as sleep:
        yield sleep


class TestWaitForCrawlJob:
    """Test suite for the polling loop."""

    @pytest.mark.asyncio
    async def test_completed_on_first_fetch(self, mock_client, mock_sleep):
        mock_client.get_crawl_job.return_value = _job("completed")

        job = await wait_for_crawl_job(mock_client, "job_123")

        assert job.status == "completed"
        assert mock_client.get_crawl_job.await_count == 1
        mock_sleep.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_running_then_completed(self, mock_client, mock_sleep):
        mock_client.get_crawl_job.side_effect = [_job("running"), _job("completed")]

        job = await wait_for_crawl_job(mock_client, "job_123", poll_interval=5.0)

        assert job.status == "completed"
        assert mock_client.get_crawl_job.await_count == 2
        mock_sleep.assert_awaited_once_with(5.0)

    @pytest.mark.asyncio
    async def test_failed_job_returns_error(self, mock_client, mock_sleep):
        mock_client.get_crawl_job.side_effect = [
            _job("pending"),
            _job("failed", error="Site unreachable"),
        ]

        job = await wait_for_crawl_job(mock_client, "job_123")

        assert job.status == "failed"
        assert job.error == "Site unreachable"
        assert mock_sleep.await_count == 1

    @pytest.mark.asyncio
    async def test_max_polls_exceeded(self, mock_client, mock_sleep):
        mock_client.get_crawl_job.return_value = _job("running")

        with pytest.raises(CrawlTimeoutError) as exc_info:
            await wait_for_crawl_job(mock_client, "job_123", max_polls=3)

        assert exc_info.value.polls == 3
        assert mock_client.get_crawl_job.await_count == 3
        assert mock_sleep.await_count == 2


class TestScrapeSite:
    """Test suite for starting and polling a crawl."""

    @pytest.mark.asyncio
    async def test_scrape_site(self, mock_client, mock_sleep):
        mock_client.get_crawl_job.side_effect = [_job("running"), _job("completed")]

        job = await scrape_site(
            "https://shop.example.com", client=mock_client, poll_interval=1.0
        )

        assert job.status == "completed"
        params = mock_client.start_crawl_job.await_args.args[0]
        assert params.url == "https://shop.example.com"
        assert params.max_pages == 1000
        assert params.follow_links is False
        assert params.use_proxy is False
        assert params.solve_captchas is False
        mock_client.get_crawl_job.assert_awaited_with("job_123")
        mock_sleep.assert_awaited_once_with(1.0)
        # Injected clients are left open for the caller
        mock_client.close.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_scrape_site_requires_url(self, mock_client):
        with pytest.raises(ValueError):
            await scrape_site("", client=mock_client)
        mock_client.start_crawl_job.assert_not_awaited()


class TestCollectMarkdown:
    """Test suite for result pagination."""

    @pytest.mark.asyncio
    async def test_fetches_every_batch_in_order(self, mock_client):
        mock_client.get_crawl_job.side_effect = [
            _batch(1, 3, "page one. ", "page two. "),
            _batch(2, 3, "page three. "),
            _batch(3, 3, "page four."),
        ]

        content = await collect_markdown(mock_client, "job_123", batch_size=10)

        assert content == "page one. page two. page three. page four."
        assert mock_client.get_crawl_job.await_count == 3
        pages = [c.args[1].page for c in mock_client.get_crawl_job.await_args_list]
        assert pages == [1, 2, 3]
        assert mock_client.get_crawl_job.await_args_list[0].args == (
            "job_123",
            GetCrawlJobParams(page=1, batch_size=10),
        )

    @pytest.mark.asyncio
    async def test_skips_pages_without_markdown(self, mock_client):
        mock_client.get_crawl_job.return_value = _batch(1, 1, "kept", None, "")

        content = await collect_markdown(mock_client, "job_123")

        assert content == "kept"

    @pytest.mark.asyncio
    async def test_no_batches_stops_after_first_request(self, mock_client):
        mock_client.get_crawl_job.return_value = _batch(1, 0)

        content = await collect_markdown(mock_client, "job_123")

        assert content == ""
        assert mock_client.get_crawl_job.await_count == 1

    @pytest.mark.asyncio
    async def test_error_aborts_collection(self, mock_client):
        mock_client.get_crawl_job.side_effect = [
            _batch(1, 2, "page one"),
            APIError(502, "Bad gateway"),
        ]

        with pytest.raises(APIError):
            await collect_markdown(mock_client, "job_123")

    @pytest.mark.asyncio
    async def test_null_data_batch(self, mock_client):
        mock_client.get_crawl_job.return_value = CrawlJobResponse.model_validate(
            {"jobId": "job_123", "status": "completed", "data": None, "totalPageBatches": 1}
        )

        content = await collect_markdown(mock_client, "job_123")

        assert content == ""
        assert mock_client.get_crawl_job.await_count == 1


class TestPollingStatuses:
    """Terminal states are decided by CrawlJobStatus.is_terminal."""

    @pytest.mark.asyncio
    async def test_pending_is_polled_again(self, mock_client, mock_sleep):
        mock_client.get_crawl_job.side_effect = [
            CrawlJobResponse.model_validate(
                {"jobId": "job_123", "status": "pending", "data": None}
            ),
            _job("running"),
            _job("completed"),
        ]

        job = await wait_for_crawl_job(mock_client, "job_123", poll_interval=0.5)

        assert job.status.is_terminal
        assert mock_client.get_crawl_job.await_count == 3
        assert mock_sleep.await_count == 2
