import os

# ---------- helpers ----------
def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


# ---------- endpoints ----------
BASE_URL = _env_str("COURSE_SCRAPER_BASE_URL", "https://web.uvic.ca/calendar2020-01/CDs/")
SECTIONS_URL = _env_str("COURSE_SCRAPER_SECTIONS_URL", "https://www.uvic.ca/BAN1P/bwckctlg.p_disp_listcrse")

# Request headers to avoid being blocked
HEADERS = {
    'User-Agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36'
}

TIMEOUT_S = _env_int("COURSE_SCRAPER_TIMEOUT_S", 30)

# 0 means no cap on open connections
MAX_CONNECTIONS = _env_int("COURSE_SCRAPER_MAX_CONNECTIONS", 0)

# ---------- outputs ----------
COURSES_JSON = "data/courses.json"
COURSES_DUCKDB = "data/courses.duckdb"


def course_url(subject, code):
    return f"{BASE_URL}{subject}/{code}.html"


def sections_url(params):
    return f"{SECTIONS_URL}{params}"
