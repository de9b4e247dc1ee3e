import argparse
import asyncio
import logging
import sys
import time

from course_scraper import config
from course_scraper.build_combined_json import write_courses_json
from course_scraper.build_duckdb import build_duckdb
from course_scraper.crawler import crawl
from course_scraper.errors import DiscoveryError
from course_scraper.fetcher import PageFetcher


def report_department(department, courses, error):
    if error is None:
        print(f"✅ {department} → {len(courses)} courses")
    else:
        print(f"❌ {department}: {error}")


async def run(output_path, timeout_s=None, max_connections=None):
    async with PageFetcher(timeout_s=timeout_s, max_connections=max_connections) as fetcher:
        result = await crawl(fetcher, on_department=report_department)
    write_courses_json(result.courses, output_path)
    return result


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Crawl the course calendar for currently offered sections.")
    parser.add_argument("-o", "--output", default=config.COURSES_JSON, help="courses JSON output path")
    parser.add_argument("--duckdb", nargs="?", const=config.COURSES_DUCKDB, default=None,
                        help="also load the output into a DuckDB file")
    parser.add_argument("--timeout", type=int, default=None, help="per-request timeout in seconds")
    parser.add_argument("--max-connections", type=int, default=None, help="cap on open connections (0 = no cap)")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.ERROR,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    start = time.perf_counter()
    try:
        result = asyncio.run(run(args.output, args.timeout, args.max_connections))
    except DiscoveryError as e:
        print(f"[ERROR] {e}: {e.__cause__}")
        return 1
    finish = time.perf_counter()

    if result.failed:
        print(f"⚠️ Failed departments: {list(result.failed)}")
    print(f"Getting course data took {(finish - start) / 60:.2f} minutes")

    if args.duckdb:
        build_duckdb(args.output, args.duckdb)
    return 0


if __name__ == "__main__":
    sys.exit(main())
