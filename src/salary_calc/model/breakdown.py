"""SalaryBreakdown — the derived period amounts for one hourly rate."""

from __future__ import annotations

from dataclasses import dataclass

PERIODS: tuple[str, ...] = ("daily", "weekly", "biweekly", "monthly", "yearly")


@dataclass(frozen=True, slots=True)
class SalaryBreakdown:
    """Immutable conversion result.

    Every amount is derived from ``hourly`` and the schedule used by the
    converter; nothing here is stored between requests.
    """

    hourly: float
    daily: float
    weekly: float
    biweekly: float
    monthly: float
    yearly: float

    def amount(self, period: str) -> float:
        if period not in PERIODS:
            raise KeyError(f"Unknown period: {period}")
        return getattr(self, period)

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "hourly": self.hourly,
            "daily": self.daily,
            "weekly": self.weekly,
            "biweekly": self.biweekly,
            "monthly": self.monthly,
            "yearly": self.yearly,
        }
