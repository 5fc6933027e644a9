"""Content Generator — rate + unit tag → PageContent.

Figures come from the ``FIXED`` converter mode.  The copy always describes
the standard schedule (8-hour day, 40-hour week, 52 weeks, 173.33 hours a
month, 2,080 hours a year), whatever schedule a visitor later enters in the
interactive calculator.
"""

from __future__ import annotations

from typing import Any

from salary_calc.content.formatting import (
    display_rate,
    format_currency,
    format_thousands,
)
from salary_calc.core.converter import convert
from salary_calc.model import ScheduleMode, UnitTag
from salary_calc.model.breakdown import SalaryBreakdown
from salary_calc.model.page import PageContent, Section
from salary_calc.policy.schedule import STANDARD_SCHEDULE, WorkSchedule
from salary_calc.utils.numbers import parse_finite

DEFAULT_SITE_NAME = "SalaryCalc"


def _hours(value: float) -> str:
    """``2080 -> "2,080"``, ``173.33 -> "173.33"``."""
    if float(value).is_integer():
        return f"{value:,.0f}"
    return f"{value:,}"


def _sections(rate: str, salaries: SalaryBreakdown, s: WorkSchedule) -> dict[str, Section]:
    per_week = _hours(s.hours_per_week)
    return {
        "yearly": Section(
            title=f"How much is ${rate} an hour annually?",
            content=(
                f"If you're earning ${rate} per hour, your annual income amounts to "
                f"{format_currency(salaries.yearly)}. This calculation is based on working "
                f"{per_week} hours per week for {_hours(s.weeks_per_year)} weeks a year "
                f"({_hours(s.hours_per_year)} hours total). Knowing your yearly salary helps "
                f"you set savings goals, plan for taxes, and budget effectively for the year ahead."
            ),
        ),
        "monthly": Section(
            title=f"How much is ${rate} an hour monthly?",
            content=(
                f"At ${rate} per hour, your monthly income will total approximately "
                f"{format_currency(salaries.monthly)}. This calculation assumes an average of "
                f"{_hours(s.hours_per_month)} working hours per month ({per_week} hours × "
                f"{_hours(s.weeks_per_year)} weeks ÷ 12 months). Your actual monthly pay may "
                f"vary slightly based on the number of working days in each month."
            ),
        ),
        "biweekly": Section(
            title=f"How much is ${rate} an hour bi-weekly?",
            content=(
                f"When earning ${rate} per hour, your bi-weekly paycheck totals "
                f"{format_currency(salaries.biweekly)}. This is calculated by multiplying your "
                f"hourly wage by {_hours(s.hours_per_week * 2)} hours (two {per_week}-hour work "
                f"weeks). Bi-weekly pay periods are common for many employers and help with "
                f"consistent budgeting."
            ),
        ),
        "weekly": Section(
            title=f"How much is ${rate} an hour weekly?",
            content=(
                f"At ${rate} per hour, your weekly paycheck totals "
                f"{format_currency(salaries.weekly)}. This is based on a standard {per_week}-hour "
                f"work week. Understanding your weekly income helps you manage week-to-week "
                f"expenses and short-term savings goals."
            ),
        ),
        "daily": Section(
            title=f"How much is ${rate} an hour daily?",
            content=(
                f"If you earn ${rate} per hour, your daily income is "
                f"{format_currency(salaries.daily)}. This assumes a standard "
                f"{_hours(s.hours_per_day)}-hour workday. Your daily wage is useful for "
                f"calculating the value of overtime, time off, or comparing different work "
                f"arrangements."
            ),
        ),
    }


def generate(
    hourly_rate: Any,
    unit: UnitTag = UnitTag.HOURLY,
    *,
    site_name: str = DEFAULT_SITE_NAME,
) -> PageContent | None:
    """Build the landing-page copy for *hourly_rate*.

    Returns ``None`` when the rate does not convert.
    """
    rate = parse_finite(hourly_rate)
    salaries = convert(rate, mode=ScheduleMode.FIXED, schedule=STANDARD_SCHEDULE)
    if rate is None or salaries is None:
        return None

    shown = display_rate(rate)
    unit = UnitTag(unit)

    if unit == UnitTag.YEARLY:
        h1 = f"{format_thousands(salaries.yearly)} a year is how much an hour?"
    else:
        h1 = f"At ${shown} an hour, what is your weekly, monthly, and yearly salary?"

    meta_description = (
        f"${shown}/hour equals {format_currency(salaries.yearly)} per year, "
        f"{format_currency(salaries.monthly)} per month, "
        f"{format_currency(salaries.weekly)} per week. "
        f"Use our free salary calculator to convert hourly wages."
    )
    intro = (
        f"Break down your income of ${shown} into its daily, weekly, bi-weekly, monthly "
        f"and yearly salary equivalents. Whether you're planning your finances or "
        f"evaluating job offers, our Salary Calculator has you covered."
    )

    return PageContent(
        unit=unit,
        display_rate=shown,
        title=f"{h1} | {site_name}",
        meta_description=meta_description,
        h1=h1,
        intro=intro,
        sections=_sections(shown, salaries, STANDARD_SCHEDULE),
    )
