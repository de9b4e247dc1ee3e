import asyncio

import pytest

from course_scraper import config
from course_scraper.errors import FetchError


class FakeFetcher:
    """In-memory stand-in for PageFetcher: url -> html, or url -> failure."""

    def __init__(self, pages=None, failing=()):
        self.pages = dict(pages or {})
        self.failing = set(failing)
        self.calls = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return None

    async def fetch(self, url):
        self.calls.append(url)
        await asyncio.sleep(0)
        if url in self.failing:
            raise FetchError(url, "boom", status=500)
        if url not in self.pages:
            raise FetchError(url, "not found", status=404)
        return self.pages[url]


def listing(*hrefs):
    links = "\n".join(f'<a href="{h}">{h}</a>' for h in hrefs)
    return f"<html><body><h1>Index</h1>{links}</body></html>"


def course_page(title, *schedule_hrefs):
    links = "".join(f'<a href="{h}">schedule</a>' for h in schedule_hrefs)
    return (
        f"<html><body><h2>{title}</h2>"
        '<a href="https://example.org/outside?term_in=199901">not a schedule</a>'
        f'<div id="schedules">{links}</div></body></html>'
    )


def sections_page(*link_texts):
    links = "".join(f'<a href="#">{t}</a>' for t in link_texts)
    return f'<html><body><a href="/">Return to Previous</a>{links}</body></html>'


def department_url(department):
    return f"{config.BASE_URL}{department}"


@pytest.fixture
def fake_fetcher():
    return FakeFetcher()
