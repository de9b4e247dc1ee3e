"""
Markup -> identifiers and records, one function per page level.

All functions are pure and synchronous. Markup with nothing matching yields
an empty list, never an error.
"""
import re

from bs4 import BeautifulSoup

from course_scraper.models import Section, UNKNOWN_TERM

DEPARTMENT_RE = re.compile(r"^[A-Z]+")
COURSE_CODE_RE = re.compile(r"^[0-7]")
SECTION_TEXT_RE = re.compile(r"[\w\s]*-[\d\s]*-.*-.*")
TERM_RE = re.compile(r"term_in=(\d+)")


def _soup(html):
    return BeautifulSoup(html or "", "html.parser")


def _hrefs(soup):
    return [a["href"] for a in soup.find_all("a", href=True)]


def extract_departments(html):
    """Department codes from the catalog directory listing, in page order."""
    departments = []
    for href in _hrefs(_soup(html)):
        if DEPARTMENT_RE.match(href):
            departments.append(href[:-1] if href.endswith("/") else href)
    return departments


def extract_course_codes(html):
    """Course numbers from a department listing, e.g. '225.html' -> '225'."""
    codes = []
    for href in _hrefs(_soup(html)):
        if COURSE_CODE_RE.match(href):
            codes.append(href.split(".", 1)[0])
    return codes


def extract_title(html):
    # verbatim, surrounding whitespace included
    heading = _soup(html).find("h2")
    return heading.get_text() if heading else ""


def extract_schedule_params(html):
    """Query strings ('?...') of every link inside the #schedules block."""
    schedules = _soup(html).find(id="schedules")
    if schedules is None:
        return []

    params = []
    for href in _hrefs(schedules):
        idx = href.find("?")
        if idx == -1:
            continue
        params.append(href[idx:])
    return params


def parse_section(text):
    """
    Parse a section link like 'LEC - 12345 - A - L01 something'.

    Returns None when the text is not a section descriptor.
    """
    if not text or not SECTION_TEXT_RE.search(text):
        return None

    parts = text.split("-")
    crn = parts[1].strip()
    section_type = parts[3][1:2]
    section_number = parts[3][2:4]
    return Section(crn, section_type, section_number)


def extract_sections(html):
    sections = []
    for a in _soup(html).find_all("a"):
        section = parse_section(a.get_text())
        if section is not None:
            sections.append(section)
    return sections


def extract_term(params):
    match = TERM_RE.search(params or "")
    return match.group(1) if match else UNKNOWN_TERM
