import json
import os

from course_scraper import config


def write_courses_json(courses, output_path=config.COURSES_JSON):
    """Write Course records to `output_path` as a JSON array; returns the count written."""
    records = [course.to_dict() for course in courses]

    parent = os.path.dirname(output_path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    with open(output_path, "w") as f:
        json.dump(records, f, indent=2)

    print(f"🎉 {os.path.basename(output_path)} saved with {len(records)} courses at {output_path}")
    return len(records)
