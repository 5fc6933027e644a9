"""Pure conversion logic. No I/O, no framework imports."""

from salary_calc.core.converter import convert, hourly_from_yearly
from salary_calc.core.links import build_job_search_url
from salary_calc.core.related import find_related
from salary_calc.core.slugs import SlugMatch, parse_slug

__all__ = [
    "SlugMatch",
    "build_job_search_url",
    "convert",
    "find_related",
    "hourly_from_yearly",
    "parse_slug",
]
