import os

import duckdb

from course_scraper import config

TABLES = ["courses", "sections"]


def print_duckdb(db_path=config.COURSES_DUCKDB, limit=1000):
    if not os.path.exists(db_path):
        raise FileNotFoundError("DuckDB not found. Run the crawler with --duckdb first to create it.")

    con = duckdb.connect(db_path, read_only=True)
    try:
        for table in TABLES:
            print(f"\n=== {table.upper()} ===")
            for row in con.execute(f"SELECT * FROM {table} LIMIT {int(limit)}").fetchall():
                print(row)
    finally:
        con.close()


if __name__ == "__main__":
    print_duckdb()
