"""Configuration constants for the Trade-a-Plane scraper.

Trade-a-Plane throttles aggressively, so the retry count and back-off below
are tuned for a single client making strictly sequential requests.
"""

TAP_SEARCH_URL = "https://www.trade-a-plane.com/search?"

TAP_MAX_RETRIES = 5
TAP_RETRY_SECONDS = 5.0
TAP_MAX_PAGE_SIZE = 96
TAP_MAX_USER_DISTANCE = 1000000

TAP_TYPES = [
    "Single Engine Piston",
    "Multi Engine Piston",
    "Turboprop",
    "Jets",
    "Gliders | Sailplanes",
    "Rotary Wing",
    "Piston Helicopters",
    "Turbine Helicopters",
]

FRACTIONAL_CHOICES = ["None", "Any", "1/2", "1/3", "1/4", "1/6", "1/7", "1/8", "1/16"]

SORT_KEYS = [
    "days_since_update",
    "price",
    "make",
    "model",
    "year",
    "overhaul1_time",
    "total_time",
]
SORT_ORDERS = ["asc", "desc"]

CATEGORY_LEVELS = ["1", "2"]

# Value used for the year when the title does not start with one
NOT_LISTED = "Not Listed"

# User agents to rotate (not user-configurable, just a static list)
USER_AGENTS = [
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:121.0) Gecko/20100101 Firefox/121.0",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.2 Safari/605.1.15",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
]
