"""Immutable calculator configuration, built once and injected at startup."""

from __future__ import annotations

from dataclasses import dataclass

from salary_calc.policy.catalog import POPULAR_RATES, RATE_CATALOG
from salary_calc.policy.schedule import STANDARD_SCHEDULE, WorkSchedule

__all__ = [
    "CalculatorConfig",
    "DEFAULT_CONFIG",
    "POPULAR_RATES",
    "RATE_CATALOG",
    "STANDARD_SCHEDULE",
    "WorkSchedule",
]


@dataclass(frozen=True, slots=True)
class CalculatorConfig:
    """Everything the request path needs that is not derived per request."""

    schedule: WorkSchedule = STANDARD_SCHEDULE
    catalog: tuple[float, ...] = RATE_CATALOG
    popular_rates: tuple[float, ...] = POPULAR_RATES
    related_limit: int = 10


DEFAULT_CONFIG = CalculatorConfig()
