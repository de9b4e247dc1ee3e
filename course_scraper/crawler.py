import logging

from course_scraper import config
from course_scraper.aggregator import get_offered, join_all
from course_scraper.errors import DiscoveryError, FetchError, ScraperError
from course_scraper.extractors import extract_course_codes, extract_departments
from course_scraper.models import CrawlResult

logger = logging.getLogger(__name__)


async def get_departments(fetcher):
    """Department codes from the catalog root. A failed fetch here is fatal."""
    try:
        html = await fetcher.fetch(config.BASE_URL)
    except FetchError as e:
        raise DiscoveryError("department") from e
    return extract_departments(html)


async def get_course_codes(fetcher, department):
    try:
        html = await fetcher.fetch(f"{config.BASE_URL}{department}")
    except FetchError as e:
        raise DiscoveryError(f"{department} course") from e
    return extract_course_codes(html)


async def crawl(fetcher, on_department=None):
    """
    Walk departments -> course codes -> offered courses.

    Departments run one at a time; within a department every course code is
    aggregated concurrently. If anything in a department fails, the whole
    department goes to `failed` and none of its courses are kept.

    on_department(department, courses, error) is called once each department
    has settled; `error` is None on success.

    Raises DiscoveryError if the department list itself cannot be fetched.
    """
    departments = await get_departments(fetcher)
    logger.info("Found %d departments", len(departments))

    results = []
    failed = []

    for department in departments:
        try:
            codes = await get_course_codes(fetcher, department)
            batches = await join_all(get_offered(fetcher, department, code) for code in codes)
        except ScraperError as e:
            logger.warning("%s failed: %s", department, e)
            failed.append(department)
            courses, error = (), e
        else:
            courses = tuple(course for batch in batches for course in batch)
            results.extend(courses)
            error = None
            logger.info("%s: %d courses from %d codes", department, len(courses), len(codes))

        if on_department is not None:
            on_department(department, courses, error)

    return CrawlResult(courses=tuple(results), failed=tuple(failed))
