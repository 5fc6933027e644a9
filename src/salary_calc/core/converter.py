"""Rate Converter — hourly rate → SalaryBreakdown.

Two modes share one entry point:

* ``ScheduleMode.CUSTOM`` — hours/day × days/week × weeks/year supplied by
  the caller (interactive calculator).
* ``ScheduleMode.FIXED`` — the standard 40-hour week: 2080 hours a year and
  173.33 hours a month, monthly figure rounded to whole dollars (landing
  pages).

The two modes agree on the standard schedule except for the monthly figure,
and diverge for any non-standard schedule.
"""

from __future__ import annotations

import math
from typing import Any

from salary_calc.model import ScheduleMode
from salary_calc.model.breakdown import SalaryBreakdown
from salary_calc.policy.schedule import STANDARD_SCHEDULE, WorkSchedule
from salary_calc.utils.numbers import parse_finite, round_half_up


def convert(
    hourly_rate: Any,
    hours_per_day: float = 8,
    days_per_week: float = 5,
    weeks_per_year: float = 52,
    *,
    mode: ScheduleMode = ScheduleMode.CUSTOM,
    schedule: WorkSchedule = STANDARD_SCHEDULE,
) -> SalaryBreakdown | None:
    """Convert *hourly_rate* into daily / weekly / biweekly / monthly / yearly.

    Returns ``None`` when *hourly_rate* does not parse as a finite number,
    or when any derived amount overflows to infinity.
    In ``FIXED`` mode the schedule arguments are ignored and *schedule*
    supplies the constants.
    """
    rate = parse_finite(hourly_rate)
    if rate is None:
        return None

    if mode == ScheduleMode.FIXED:
        return _convert_fixed(rate, schedule)

    weekly = rate * hours_per_day * days_per_week
    return _finite_or_none(
        hourly=rate,
        daily=rate * hours_per_day,
        weekly=weekly,
        biweekly=weekly * 2,
        monthly=weekly * weeks_per_year / 12,
        yearly=weekly * weeks_per_year,
    )


def _finite_or_none(**amounts: float) -> SalaryBreakdown | None:
    if not all(math.isfinite(a) for a in amounts.values()):
        return None
    return SalaryBreakdown(**amounts)


def _convert_fixed(rate: float, schedule: WorkSchedule) -> SalaryBreakdown | None:
    hours_per_week = schedule.hours_per_week
    monthly = rate * schedule.hours_per_month
    if not math.isfinite(monthly):
        return None
    return _finite_or_none(
        hourly=rate,
        daily=rate * schedule.hours_per_day,
        weekly=rate * hours_per_week,
        biweekly=rate * hours_per_week * 2,
        monthly=float(round_half_up(monthly)),
        yearly=rate * schedule.hours_per_year,
    )


def hourly_from_yearly(
    yearly_salary: float,
    *,
    schedule: WorkSchedule = STANDARD_SCHEDULE,
) -> float:
    """Hourly rate equivalent of a yearly salary on the standard schedule."""
    return yearly_salary / schedule.hours_per_year
