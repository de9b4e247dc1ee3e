"""
Course offering crawler.

- fetcher.py: async page fetcher (aiohttp)
- extractors.py: markup -> departments, course codes, schedules, sections
- aggregator.py: one (subject, code) -> offered Course records
- crawler.py: departments -> course codes -> courses, per-department isolation
"""
