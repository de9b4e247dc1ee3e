class ScraperError(Exception):
    """Base class for crawl failures."""


class FetchError(ScraperError):
    """A page could not be retrieved (network failure, non-2xx, timeout)."""

    def __init__(self, url, reason, status=None):
        self.url = url
        self.reason = reason
        self.status = status
        detail = f"HTTP {status}" if status is not None else reason
        super().__init__(f"Failed to fetch {url}: {detail}")


class DiscoveryError(ScraperError):
    """Department or course-code discovery failed."""

    def __init__(self, target):
        self.target = target
        super().__init__(f"Failed to get {target} data")


class AggregationError(ScraperError):
    """A schedule or section lookup for one course failed."""

    def __init__(self, subject, code):
        self.subject = subject
        self.code = code
        super().__init__(f"Failed to get available sections for {subject} {code}")
