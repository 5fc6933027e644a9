"""Slug Interpreter — URL path segment → (hourly rate, unit tag).

Recognised shapes, first match wins::

    30-dollar-per-hour                 -> 30            hourly
    80k-a-year-is-how-much-an-hour     -> 80000 / 2080  yearly
    50000-dollars-per-year             -> 50000 / 2080  yearly
    4000-dollars-per-month             -> 4000 / 173.33 hourly
    1500-a-week-is-how-much-a-year     -> 1500*52/2080  hourly
"""

from __future__ import annotations

import re
from typing import Callable, NamedTuple

from salary_calc.core.converter import hourly_from_yearly
from salary_calc.model import UnitTag
from salary_calc.policy.schedule import STANDARD_SCHEDULE, WorkSchedule
from salary_calc.utils.numbers import parse_finite


class SlugMatch(NamedTuple):
    hourly_rate: float
    unit: UnitTag


_ToHourly = Callable[[float, WorkSchedule], float]


class _SlugPattern(NamedTuple):
    regex: re.Pattern[str]
    to_hourly: _ToHourly
    unit: UnitTag


_PATTERNS: tuple[_SlugPattern, ...] = (
    _SlugPattern(
        re.compile(r"^([\d.-]+)-dollar-per-hour$", re.ASCII),
        lambda n, s: n,
        UnitTag.HOURLY,
    ),
    _SlugPattern(
        re.compile(r"^(\d+)k-a-year-is-how-much-an-hour$", re.ASCII),
        lambda n, s: hourly_from_yearly(n * 1000, schedule=s),
        UnitTag.YEARLY,
    ),
    _SlugPattern(
        re.compile(r"^(\d+)-dollars-per-year$", re.ASCII),
        lambda n, s: hourly_from_yearly(n, schedule=s),
        UnitTag.YEARLY,
    ),
    _SlugPattern(
        re.compile(r"^(\d+)-dollars-per-month$", re.ASCII),
        lambda n, s: n / s.hours_per_month,
        UnitTag.HOURLY,
    ),
    _SlugPattern(
        re.compile(r"^(\d+)-a-week-is-how-much-a-year$", re.ASCII),
        lambda n, s: n * s.weeks_per_year / s.hours_per_year,
        UnitTag.HOURLY,
    ),
)


def parse_slug(
    slug: str,
    *,
    schedule: WorkSchedule = STANDARD_SCHEDULE,
) -> SlugMatch | None:
    """Interpret *slug*; ``None`` means no pattern produced a usable rate.

    A pattern whose numeric token does not parse, or yields zero, is treated
    as not matching and the next pattern is tried.  Negative rates are
    rejected.
    """
    for pattern in _PATTERNS:
        m = pattern.regex.match(slug)
        if not m:
            continue
        number = parse_finite(m.group(1))
        if number is None:
            continue
        rate = pattern.to_hourly(number, schedule)
        if rate > 0:
            return SlugMatch(rate, pattern.unit)
    return None


def rate_slug(rate: float) -> str:
    """Canonical hourly slug for *rate*: ``13.5`` -> ``13.5-dollar-per-hour``."""
    text = f"{rate:.2f}".rstrip("0").rstrip(".")
    return f"{text}-dollar-per-hour"


def page_path(rate: float) -> str:
    """Landing-page path for an hourly *rate*."""
    return f"/salary-calculator/{rate_slug(rate)}/"
