"""Core Trade-a-Plane scraping logic."""

import logging
import random
import re
import time
from dataclasses import replace
from typing import Iterator, Optional
from urllib.parse import parse_qsl, urlparse

import requests
from bs4 import BeautifulSoup

from config import NOT_LISTED, TAP_MAX_PAGE_SIZE, TAP_MAX_RETRIES, TAP_RETRY_SECONDS, USER_AGENTS
from models import ListingRecord, PagePlan, QueryOptions
from query import build_url, page_url

logger = logging.getLogger(__name__)

RESULTS_RE = re.compile(r"^Showing.*of(.*)results*")

# Query string keys on the listing title link -> record fields
TITLE_LINK_KEYS = {
    "make": "make",
    "model": "model",
    "s-type": "type",
    "category_level1": "category",
}

DETAIL_SECTIONS = {
    "specs": "#bottom_section > #general_specs > p",
    "description": "#detailed_desc > pre",
    "avionics": "#avionics_equipment > pre",
    "airframe": "#airframe > pre",
    "engine": "#engines_mods > pre",
    "int_ext": "#interior_exterior > pre",
    "remarks": "#remarks > pre",
}


def _text(element, selector: str) -> str:
    found = element.select_one(selector)
    return found.get_text().strip() if found else ""


def _year_from_title(title: str) -> str:
    tokens = title.split()
    if not tokens:
        return NOT_LISTED
    try:
        int(tokens[0])
    except ValueError:
        return NOT_LISTED
    return tokens[0]


def _fetch_date() -> int:
    return int(time.time() * 1000)


class TradeAPlaneScraper:
    """Scrapes aircraft listings from Trade-a-Plane.

    Every request goes through fetch(), one at a time. Trade-a-Plane answers
    concurrent or rapid requests with 429s, so nothing here overlaps.
    """

    def __init__(self, session: Optional[requests.Session] = None,
                 max_retries: int = TAP_MAX_RETRIES,
                 retry_delay: float = TAP_RETRY_SECONDS,
                 page_size: int = TAP_MAX_PAGE_SIZE,
                 timeout: Optional[float] = None):
        self.session = session or requests.Session()
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.page_size = page_size
        self.timeout = timeout

    def _rotate_ua(self):
        self.session.headers.update({"User-Agent": random.choice(USER_AGENTS)})

    def fetch(self, url: str) -> str:
        """GET a URL, retrying with a fixed delay. Returns "" on failure."""
        logger.debug(f"fetching {url} ...")
        status = None
        error = None
        for attempt in range(1, self.max_retries + 1):
            self._rotate_ua()
            try:
                resp = self.session.get(url, timeout=self.timeout)
            except requests.RequestException as e:
                logger.error(f"Request failed for {url}: {e}")
                error = e
            else:
                if resp.status_code == 200:
                    return resp.text
                status = resp.status_code
                logger.warning(f"Got {status} for {url} (attempt {attempt}/{self.max_retries})")

            if attempt < self.max_retries:
                time.sleep(self.retry_delay)

        if status is not None:
            logger.warning(f"could not fetch '{url}': {status}")
        else:
            logger.warning(f"could not fetch '{url}': {error}")
        return ""

    def parse_result_count(self, html: str) -> Optional[int]:
        """Total result count from the "Showing 1-96 of N results" heading."""
        soup = BeautifulSoup(html, "lxml")
        heading = soup.select_one("#search_results_area > .search_options > h2")
        if heading is None:
            return None
        text = re.sub(r"\s", "", heading.get_text())
        match = RESULTS_RE.match(text)
        if not match:
            return None
        try:
            return int(match.group(1).replace(",", ""))
        except ValueError:
            return None

    def fetch_pages(self, url: str, first_body: str, plan: PagePlan) -> list[str]:
        """Fetch pages 2..total_pages in order. Page 1 is the body we already have."""
        bodies = [first_body]
        for page in range(2, plan.total_pages + 1):
            bodies.append(self.fetch(page_url(url, page)))
        logger.debug(f"scraped {plan.total_pages} pages ...")
        return bodies

    def parse_listings(self, html: str, fetch_date: int) -> Iterator[ListingRecord]:
        """Yield a ListingRecord for each .result_listing block, in page order."""
        soup = BeautifulSoup(html, "lxml")
        for element in soup.select(".result_listing"):
            yield self._parse_listing(element, fetch_date)

    def _parse_listing(self, element, fetch_date: int) -> ListingRecord:
        title = ""
        link_fields = dict.fromkeys(TITLE_LINK_KEYS.values(), "")
        link = element.select_one(".lst-title > h3 > a")
        if link is not None:
            title = link.get_text().strip()
            query = urlparse(link.get("href", "")).query
            for key, value in parse_qsl(query, keep_blank_values=True):
                if key in TITLE_LINK_KEYS:
                    link_fields[TITLE_LINK_KEYS[key]] = value

        return ListingRecord(
            id=element.get("data-listing_id", ""),
            model_group=element.get("data-model_group", "").strip(),
            seller_id=element.get("data-seller_id", ""),
            title=title,
            year=_year_from_title(title),
            price=_text(element, ".txt-price"),
            registration=re.sub(r"Reg#\s*", "", _text(element, ".txt-reg-num")),
            total_time=re.sub(r"TT:\s*", "", _text(element, ".txt-total-time")),
            address=_text(element, ".address"),
            last_updated=re.sub(r"Last Update:\s*", "", _text(element, ".last-update"), count=1),
            fetch_date=fetch_date,
            **link_fields,
        )

    def parse_listing_detail(self, html: str) -> dict:
        """Extract the free-text sections of a listing detail page."""
        soup = BeautifulSoup(html, "lxml")
        return {
            field: "".join(el.get_text() for el in soup.select(selector)).strip()
            for field, selector in DETAIL_SECTIONS.items()
        }

    def scrape_listing_detail(self, options: QueryOptions, record: ListingRecord) -> ListingRecord:
        """Fetch a listing's detail page and return the record with deep fields set."""
        url = build_url(options.for_listing(record.id), "listing")
        detail = self.parse_listing_detail(self.fetch(url))
        return replace(record, **detail)

    def search(self, options: QueryOptions, fetch_date: Optional[int] = None) -> Iterator[ListingRecord]:
        """Run a search and yield at most the effective cap of records."""
        if fetch_date is None:
            fetch_date = _fetch_date()

        url = build_url(options, "search")
        first_body = self.fetch(url)

        total = self.parse_result_count(first_body)
        if total is None:
            logger.warning("could not find result count, no listings will be emitted")
            return

        plan = PagePlan.from_count(total, options.number, page_size=self.page_size)
        logger.debug(f"fetching {plan.effective_cap} results over {plan.total_pages} page(s) ...")
        if plan.effective_cap <= 0:
            return

        processed = 0
        for body in self.fetch_pages(url, first_body, plan):
            for record in self.parse_listings(body, fetch_date):
                if options.deep:
                    record = self.scrape_listing_detail(options, record)
                yield record
                processed += 1
                if processed >= plan.effective_cap:
                    return

    def list_categories(self, options: QueryOptions) -> list[str]:
        """Names of the makes/models listed under a category."""
        soup = BeautifulSoup(self.fetch(build_url(options, "category")), "lxml")
        levels = []
        for link in soup.select(".column > ul > li > a"):
            title = (link.get("title") or "").strip()
            if title and title != "Show All Makes":
                levels.append(title)
        return levels
