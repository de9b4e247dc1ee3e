import asyncio
import logging

from course_scraper import config
from course_scraper.errors import AggregationError, FetchError
from course_scraper.extractors import (
    extract_schedule_params,
    extract_sections,
    extract_term,
    extract_title,
)
from course_scraper.models import Course

logger = logging.getLogger(__name__)


async def join_all(aws):
    """
    Await every awaitable, results in submission order.

    Unlike a bare gather, every member settles before a failure is raised;
    the first failure in submission order wins.
    """
    results = await asyncio.gather(*aws, return_exceptions=True)
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return results


async def get_sections(fetcher, params):
    """Sections listed on the sections page addressed by `params` ('?term_in=...')."""
    html = await fetcher.fetch(config.sections_url(params))
    return extract_sections(html)


async def get_offered(fetcher, subject, code):
    """
    Gets the courses that are currently being offered for one subject + code.

    Fetches the course page, then every schedule's sections page concurrently.
    Returns one Course per schedule that lists at least one section, in page
    order. Any failed fetch raises AggregationError.
    """
    try:
        html = await fetcher.fetch(config.course_url(subject, code))
        title = extract_title(html)
        schedules = extract_schedule_params(html)
        section_lists = await join_all(get_sections(fetcher, params) for params in schedules)
    except FetchError as e:
        raise AggregationError(subject, code) from e

    courses = []
    for params, sections in zip(schedules, section_lists):
        if not sections:
            continue
        courses.append(Course(
            subject=subject,
            code=code,
            title=title,
            term=extract_term(params),
            sections=tuple(sections),
        ))

    logger.debug("%s %s: %d schedules, %d offered", subject, code, len(schedules), len(courses))
    return courses
