"""Utility modules for ghexport."""

from ghexport.utils.dates import (
    format_display_datetime,
    get_timezone,
    in_same_month,
    month_name,
    parse_datetime,
)
from ghexport.utils.pagination import get_next_page_url, parse_link_header

__all__ = [
    "parse_link_header",
    "get_next_page_url",
    "parse_datetime",
    "format_display_datetime",
    "get_timezone",
    "in_same_month",
    "month_name",
]
