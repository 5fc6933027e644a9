"""Work-schedule constants — single source of truth for hour conventions.

The converter, the slug interpreter and the page copy all read these values
instead of hard-coding 8 / 40 / 52 / 2080 / 173.33 locally.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WorkSchedule:
    """A full-time schedule used to turn an hourly rate into period amounts."""

    hours_per_day: float = 8
    days_per_week: float = 5
    weeks_per_year: float = 52
    # Average monthly hours as quoted on the pages (40 × 52 ÷ 12, truncated).
    hours_per_month: float = 173.33

    @property
    def hours_per_week(self) -> float:
        return self.hours_per_day * self.days_per_week

    @property
    def hours_per_year(self) -> float:
        return self.hours_per_week * self.weeks_per_year


STANDARD_SCHEDULE = WorkSchedule()
