"""Query URL construction for Trade-a-Plane searches."""

import logging
from typing import Optional
from urllib.parse import quote

from config import TAP_MAX_PAGE_SIZE, TAP_SEARCH_URL
from models import QueryOptions, Range

logger = logging.getLogger(__name__)

ACTIONS = ("category", "search", "listing")


def parse_range(value: str) -> Optional[Range]:
    """Parse a "min-max" string. Returns None if it isn't exactly two parts."""
    parts = value.split("-")
    if len(parts) != 2:
        logger.warning(f"invalid range format for {value}")
        return None
    return Range(min=parts[0], max=parts[1])


def _plus(value: str) -> str:
    return value.replace(" ", "+")


def _range_params(name: str, value: Optional[str]) -> str:
    if not value:
        return ""
    rng = parse_range(value)
    if rng is None or not rng.bounded:
        return ""
    return f"&{name}-min={rng.min}&{name}-max={rng.max}"


def _search_params(options: QueryOptions) -> str:
    url = "&s-advanced=yes"
    url += "&s-type=aircraft"
    url += "&sale_status=For+Sale"
    url += f"&s-page_size={TAP_MAX_PAGE_SIZE}"

    if options.fractional == "None":
        url += "&fractional_ownership=1%2F1"
    elif options.fractional != "Any":
        url += f"&fractional_ownership={quote(options.fractional, safe='')}"

    url += f"&user_distance={options.distance}"
    url += f"&category_level1={_plus(options.type)}"

    if options.model_group:
        url += f"&model_group={_plus(options.model_group.upper())}"
    if options.model:
        url += f"&model={_plus(options.model.upper())}"
    if options.make:
        url += f"&make={_plus(options.make.upper())}"

    url += _range_params("year", options.year)
    url += _range_params("total_time", options.total_time)
    url += _range_params("price", options.price)

    if options.sort:
        url += f"&s-sort_key={options.sort}"
        url += f"&s-sort_order={options.sort_order}"
    return url


def build_url(options: QueryOptions, action: str) -> str:
    """Build the query URL for one of the ACTIONS."""
    if action == "search":
        params = _search_params(options)
    elif action == "category":
        params = f"&s-type=aircraft&category_level1={_plus(options.type)}&s-lvl={options.level}"
    elif action == "listing":
        params = f"&listing_id={options.listing_id}"
    else:
        raise ValueError(f"can not build URL, invalid action {action}")
    return TAP_SEARCH_URL + params


def page_url(url: str, page: int) -> str:
    if page == 1:
        return url
    return f"{url}&s-page={page}"
