import json
import os

import duckdb

from course_scraper import config
from course_scraper.models import Course


def build_duckdb(json_path=config.COURSES_JSON, db_path=config.COURSES_DUCKDB):
    """Rebuild the DuckDB file from a courses.json written by write_courses_json."""
    with open(json_path) as f:
        data = json.load(f)

    if os.path.exists(db_path):
        os.remove(db_path)

    parent = os.path.dirname(db_path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    con = duckdb.connect(db_path)
    try:
        con.execute("CREATE TABLE courses (subject TEXT, code TEXT, title TEXT, term TEXT, section_count INT)")
        con.execute("CREATE TABLE sections (subject TEXT, code TEXT, term TEXT, crn TEXT, section_type TEXT, section_number TEXT)")

        count = 0
        for record in data:
            course = Course.from_dict(record)
            con.execute("INSERT INTO courses VALUES (?, ?, ?, ?, ?)", (
                course.subject,
                course.code,
                course.title.strip(),
                course.term,
                len(course.sections),
            ))
            for section in course.sections:
                con.execute("INSERT INTO sections VALUES (?, ?, ?, ?, ?, ?)", (
                    course.subject,
                    course.code,
                    course.term,
                    section.crn,
                    section.section_type,
                    section.section_number,
                ))
            count += 1
    finally:
        con.close()

    print(f"✅ DuckDB built from {json_path} → {count} courses")
    return count
