import asyncio
import logging

import aiohttp

from course_scraper import config
from course_scraper.errors import FetchError

logger = logging.getLogger(__name__)


class PageFetcher:
    """
    Retrieves raw markup for one URL at a time over a shared aiohttp session.

    Never retries. Network errors, timeouts and non-2xx responses all surface
    as FetchError. Use as an async context manager:

        async with PageFetcher() as fetcher:
            html = await fetcher.fetch(url)
    """

    def __init__(self, timeout_s=None, headers=None, max_connections=None):
        self.timeout_s = timeout_s if timeout_s is not None else config.TIMEOUT_S
        self.headers = headers if headers is not None else dict(config.HEADERS)
        self.max_connections = max_connections if max_connections is not None else config.MAX_CONNECTIONS
        self.session = None

    async def __aenter__(self):
        connector = aiohttp.TCPConnector(limit=self.max_connections)
        self.session = aiohttp.ClientSession(
            headers=self.headers,
            timeout=aiohttp.ClientTimeout(total=self.timeout_s),
            connector=connector,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def close(self):
        if self.session is not None:
            await self.session.close()
            self.session = None

    async def fetch(self, url: str) -> str:
        if self.session is None:
            raise RuntimeError("PageFetcher used outside of 'async with'")

        logger.debug("GET %s", url)
        try:
            async with self.session.get(url) as response:
                if not 200 <= response.status < 300:
                    raise FetchError(url, response.reason or "bad status", status=response.status)
                return await response.text(errors="replace")
        except asyncio.TimeoutError as e:
            raise FetchError(url, "timeout") from e
        except aiohttp.ClientError as e:
            raise FetchError(url, str(e) or type(e).__name__) from e
