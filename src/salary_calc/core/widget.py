"""Interactive calculator adapter.

The browser widget recomputes on every input change by calling this logic
(through ``GET /api/convert``) rather than carrying its own copy of the
conversion formula.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from salary_calc.content.formatting import format_whole_dollars
from salary_calc.core.converter import convert
from salary_calc.core.slugs import page_path
from salary_calc.model import ScheduleMode
from salary_calc.model.breakdown import PERIODS, SalaryBreakdown
from salary_calc.policy.schedule import STANDARD_SCHEDULE, WorkSchedule
from salary_calc.utils.numbers import parse_finite, round_half_up


@dataclass(frozen=True, slots=True)
class WidgetResult:
    """What the widget shows after one recalculation."""

    schedule: WorkSchedule
    breakdown: SalaryBreakdown
    display: dict[str, str] = field(default_factory=dict)
    detail_url: str = ""


def _or_default(raw: Any, default: float) -> float:
    # Empty, unparsable and zero inputs all mean "use the default".
    value = parse_finite(raw)
    return value if value else default


def recalculate(
    rate: Any,
    hours_per_day: Any = None,
    days_per_week: Any = None,
    weeks_per_year: Any = None,
    *,
    defaults: WorkSchedule = STANDARD_SCHEDULE,
) -> WidgetResult:
    """Recompute the widget figures from raw form values.

    Never fails: an unusable or overflowing rate counts as 0 and unusable
    schedule fields fall back to *defaults*.
    """
    hourly = _or_default(rate, 0.0)
    schedule = WorkSchedule(
        hours_per_day=_or_default(hours_per_day, defaults.hours_per_day),
        days_per_week=_or_default(days_per_week, defaults.days_per_week),
        weeks_per_year=_or_default(weeks_per_year, defaults.weeks_per_year),
        hours_per_month=defaults.hours_per_month,
    )
    breakdown = convert(
        hourly,
        schedule.hours_per_day,
        schedule.days_per_week,
        schedule.weeks_per_year,
        mode=ScheduleMode.CUSTOM,
    )
    if breakdown is None:
        # Amounts overflowed; show the widget as if no rate was entered.
        hourly = 0.0
        breakdown = SalaryBreakdown(0.0, 0.0, 0.0, 0.0, 0.0, 0.0)

    return WidgetResult(
        schedule=schedule,
        breakdown=breakdown,
        display={p: format_whole_dollars(breakdown.amount(p)) for p in PERIODS},
        detail_url=page_path(round_half_up(hourly)),
    )
