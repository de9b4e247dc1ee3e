import asyncio

import pytest

from course_scraper import config
from course_scraper.aggregator import get_offered, get_sections, join_all
from course_scraper.conftest import FakeFetcher, course_page, sections_page
from course_scraper.errors import AggregationError, FetchError
from course_scraper.models import Course, Section

FALL = "?term_in=202009&subj_in=CSC&crse_in=225&schd_in="
SPRING = "?term_in=202101&subj_in=CSC&crse_in=225&schd_in="
NO_TERM = "?subj_in=CSC&crse_in=225&schd_in="


def schedule_href(params):
    return f"{config.SECTIONS_URL}{params}"


def test_get_sections():
    fetcher = FakeFetcher({
        config.sections_url(FALL): sections_page("Algorithms - 10001 - CSC 225 - A01"),
    })
    sections = asyncio.run(get_sections(fetcher, FALL))
    assert sections == [Section("10001", "A", "01")]


def test_one_course_per_schedule_with_sections():
    fetcher = FakeFetcher({
        config.course_url("CSC", "225"): course_page(" Algorithms ", schedule_href(FALL), schedule_href(SPRING), schedule_href(NO_TERM)),
        config.sections_url(FALL): sections_page(
            "Algorithms - 10001 - CSC 225 - A01",
            "Algorithms - 10002 - CSC 225 - B01",
        ),
        config.sections_url(SPRING): sections_page("No sections"),
        config.sections_url(NO_TERM): sections_page("Algorithms - 10003 - CSC 225 - T03"),
    })

    courses = asyncio.run(get_offered(fetcher, "CSC", "225"))

    assert courses == [
        Course("CSC", "225", " Algorithms ", "202009", (Section("10001", "A", "01"), Section("10002", "B", "01"))),
        Course("CSC", "225", " Algorithms ", "0", (Section("10003", "T", "03"),)),
    ]


def test_course_without_schedules_yields_nothing():
    fetcher = FakeFetcher({config.course_url("CSC", "100"): course_page("Intro")})
    assert asyncio.run(get_offered(fetcher, "CSC", "100")) == []


def test_course_page_failure_is_aggregation_error():
    fetcher = FakeFetcher(failing={config.course_url("CSC", "225")})
    with pytest.raises(AggregationError) as info:
        asyncio.run(get_offered(fetcher, "CSC", "225"))
    assert info.value.subject == "CSC"
    assert info.value.code == "225"
    assert isinstance(info.value.__cause__, FetchError)


def test_any_sections_failure_fails_the_course():
    fetcher = FakeFetcher(
        {
            config.course_url("CSC", "225"): course_page("Algorithms", schedule_href(FALL), schedule_href(SPRING)),
            config.sections_url(FALL): sections_page("Algorithms - 10001 - CSC 225 - A01"),
        },
        failing={config.sections_url(SPRING)},
    )
    with pytest.raises(AggregationError):
        asyncio.run(get_offered(fetcher, "CSC", "225"))
    # both schedules were requested
    assert config.sections_url(FALL) in fetcher.calls
    assert config.sections_url(SPRING) in fetcher.calls


def test_join_all_keeps_submission_order():
    async def value(v, delay):
        await asyncio.sleep(delay)
        return v

    async def scenario():
        return await join_all([value("a", 0.03), value("b", 0.0), value("c", 0.01)])

    assert asyncio.run(scenario()) == ["a", "b", "c"]


def test_join_all_settles_everything_before_raising():
    finished = []

    async def slow():
        await asyncio.sleep(0.02)
        finished.append("slow")
        return "slow"

    async def fail(name):
        raise FetchError(name, "boom")

    async def scenario():
        await join_all([fail("first"), slow(), fail("second")])

    with pytest.raises(FetchError) as info:
        asyncio.run(scenario())
    assert info.value.url == "first"
    assert finished == ["slow"]


def test_join_all_runs_concurrently():
    running = []
    peak = []

    async def task():
        running.append(1)
        peak.append(len(running))
        await asyncio.sleep(0.01)
        running.pop()

    asyncio.run(join_all([task() for _ in range(5)]))
    assert max(peak) == 5
