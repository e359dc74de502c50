"""
Exceptions raised while running and polling crawl jobs.
"""


class CrawlError(Exception):
    """Base class for crawl job exceptions."""

    pass


class CrawlTimeoutError(CrawlError):
    """
    Exception raised when a crawl job does not finish in time.

    This exception is raised when the configured maximum number of status
    checks is reached while the job is still pending or running.
    """

    def __init__(self, job_id: str, polls: int):
        self.job_id = job_id
        self.polls = polls
        super().__init__(
            f"Crawl job {job_id} did not finish after {polls} status checks"
        )
