"""Tests for core.converter — one converter, two schedule modes."""

from __future__ import annotations

import pytest

from salary_calc.core.converter import convert, hourly_from_yearly
from salary_calc.model import ScheduleMode
from salary_calc.policy.schedule import WorkSchedule


class TestCustomSchedule:
    """CUSTOM mode multiplies through the caller's schedule."""

    def test_standard_schedule_amounts(self) -> None:
        result = convert(30)
        assert result is not None
        assert result.hourly == 30
        assert result.daily == 240
        assert result.weekly == 1200
        assert result.biweekly == 2400
        assert result.monthly == pytest.approx(5200)
        assert result.yearly == 62400

    def test_non_standard_schedule(self) -> None:
        result = convert(20, 10, 4, 50)
        assert result is not None
        assert result.daily == 200
        assert result.weekly == 800
        assert result.biweekly == 1600
        assert result.monthly == pytest.approx(800 * 50 / 12)
        assert result.yearly == 40000

    def test_default_mode_is_custom(self) -> None:
        assert convert(20, 10, 4, 50) == convert(20, 10, 4, 50, mode=ScheduleMode.CUSTOM)

    def test_zero_rate(self) -> None:
        result = convert(0)
        assert result is not None
        assert result.yearly == 0


class TestFixedSchedule:
    """FIXED mode uses 2080 h/year and a whole-dollar 173.33 h monthly figure."""

    @pytest.mark.parametrize("rate", [10, 13.5, 20.5, 38.4615, 150])
    def test_yearly_is_2080_hours(self, rate: float) -> None:
        result = convert(rate, mode=ScheduleMode.FIXED)
        assert result is not None
        assert result.yearly == pytest.approx(rate * 2080)

    @pytest.mark.parametrize("rate", [10, 13.5, 20.5, 38.4615, 150])
    def test_weekly_is_five_days(self, rate: float) -> None:
        result = convert(rate, mode=ScheduleMode.FIXED)
        assert result is not None
        assert result.weekly == pytest.approx(result.daily * 5)

    def test_monthly_rounds_to_whole_dollars(self) -> None:
        # 30 × 173.33 = 5199.9
        result = convert(30, mode=ScheduleMode.FIXED)
        assert result is not None
        assert result.monthly == 5200

    def test_monthly_rounds_half_up(self) -> None:
        schedule = WorkSchedule(hours_per_month=0.5)
        result = convert(5, mode=ScheduleMode.FIXED, schedule=schedule)
        assert result is not None
        assert result.monthly == 3

    def test_ignores_schedule_arguments(self) -> None:
        result = convert(20, 10, 4, 50, mode=ScheduleMode.FIXED)
        assert result is not None
        assert result.yearly == 41600

    def test_modes_diverge_for_custom_schedule(self) -> None:
        fixed = convert(20, 6, 4, 48, mode=ScheduleMode.FIXED)
        custom = convert(20, 6, 4, 48, mode=ScheduleMode.CUSTOM)
        assert fixed is not None and custom is not None
        assert fixed.yearly != custom.yearly


class TestInvalidInput:
    """Unparsable input yields None and never raises."""

    @pytest.mark.parametrize(
        "value", ["not-a-number", "", "   ", "nan", "inf", "-inf", None, True, [30]]
    )
    def test_returns_none(self, value) -> None:
        assert convert(value) is None
        assert convert(value, mode=ScheduleMode.FIXED) is None

    def test_numeric_string_accepted(self) -> None:
        result = convert(" 25 ")
        assert result is not None
        assert result.yearly == 52000


class TestHourlyFromYearly:
    def test_52000_is_25(self) -> None:
        assert hourly_from_yearly(52000) == 25

    def test_80k(self) -> None:
        assert hourly_from_yearly(80000) == pytest.approx(38.4615, abs=1e-4)


class TestOverflow:
    """Finite input whose amounts overflow yields None instead of raising."""

    @pytest.mark.parametrize("mode", [ScheduleMode.FIXED, ScheduleMode.CUSTOM])
    def test_huge_rate(self, mode: ScheduleMode) -> None:
        assert convert(1e307, mode=mode) is None
        assert convert("1e308", mode=mode) is None

    def test_huge_schedule(self) -> None:
        assert convert(30, 1e308, 1e308) is None

    def test_large_but_representable_rate(self) -> None:
        result = convert(1e300, mode=ScheduleMode.FIXED)
        assert result is not None
        assert result.yearly == pytest.approx(2.08e303)
