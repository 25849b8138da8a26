"""Data classes for the Trade-a-Plane scraper."""

import math
from dataclasses import asdict, dataclass, replace
from typing import Optional

from config import TAP_MAX_PAGE_SIZE, TAP_MAX_USER_DISTANCE, TAP_TYPES

DEEP_FIELDS = ("specs", "description", "avionics", "airframe", "engine", "int_ext", "remarks")


@dataclass(frozen=True)
class QueryOptions:
    """A user request. Built once from CLI input and never mutated."""
    type: str = TAP_TYPES[0]
    fractional: str = "None"
    distance: int = TAP_MAX_USER_DISTANCE
    make: Optional[str] = None
    model: Optional[str] = None
    model_group: Optional[str] = None
    year: Optional[str] = None
    price: Optional[str] = None
    total_time: Optional[str] = None
    sort: Optional[str] = None
    sort_order: str = "asc"
    number: Optional[int] = None
    deep: bool = False
    level: str = "1"
    listing_id: Optional[str] = None

    def for_listing(self, listing_id: str) -> "QueryOptions":
        """Derive the options for a single-listing detail fetch."""
        return replace(self, listing_id=listing_id)


@dataclass(frozen=True)
class Range:
    min: str
    max: str

    @property
    def bounded(self) -> bool:
        return bool(self.min) and bool(self.max)


@dataclass(frozen=True)
class PagePlan:
    """How many pages to fetch to satisfy a search."""
    total_found: int
    effective_cap: int
    page_size: int = TAP_MAX_PAGE_SIZE

    @classmethod
    def from_count(cls, total_found: int, number: Optional[int] = None,
                   page_size: int = TAP_MAX_PAGE_SIZE) -> "PagePlan":
        cap = total_found if number is None else min(total_found, number)
        return cls(total_found=total_found, effective_cap=cap, page_size=page_size)

    @property
    def total_pages(self) -> int:
        if self.effective_cap <= self.page_size:
            return 1
        return math.ceil(self.effective_cap / self.page_size)


@dataclass(frozen=True)
class ListingRecord:
    """One aircraft listing scraped from a search results page."""
    id: str
    model_group: str
    seller_id: str
    title: str
    make: str
    model: str
    type: str
    category: str
    year: str
    price: str
    registration: str
    total_time: str
    address: str
    last_updated: str
    fetch_date: int
    # Deep mode only
    specs: Optional[str] = None
    description: Optional[str] = None
    avionics: Optional[str] = None
    airframe: Optional[str] = None
    engine: Optional[str] = None
    int_ext: Optional[str] = None
    remarks: Optional[str] = None

    def to_dict(self) -> dict:
        data = asdict(self)
        for key in DEEP_FIELDS:
            if data[key] is None:
                del data[key]
        return data
