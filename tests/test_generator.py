"""Tests for content.generator — landing-page copy."""

from __future__ import annotations

import pytest

from salary_calc.content.generator import generate
from salary_calc.core.slugs import parse_slug
from salary_calc.model import UnitTag


@pytest.fixture
def hourly_page():
    page = generate(30)
    assert page is not None
    return page


class TestHourlyPage:

    def test_h1(self, hourly_page) -> None:
        assert hourly_page.h1 == "At $30 an hour, what is your weekly, monthly, and yearly salary?"

    def test_title_has_site_name(self, hourly_page) -> None:
        assert hourly_page.title == f"{hourly_page.h1} | SalaryCalc"

    def test_meta_description(self, hourly_page) -> None:
        assert hourly_page.meta_description.startswith(
            "$30/hour equals $62,400 per year, $5,200 per month, $1,200 per week."
        )

    def test_intro_mentions_rate(self, hourly_page) -> None:
        assert "income of $30 into" in hourly_page.intro

    def test_section_order(self, hourly_page) -> None:
        assert list(hourly_page.sections) == ["yearly", "monthly", "biweekly", "weekly", "daily"]

    def test_unit(self, hourly_page) -> None:
        assert hourly_page.unit == UnitTag.HOURLY
        assert hourly_page.display_rate == "30"


class TestSectionCopy:
    """Copy quotes the standard schedule verbatim."""

    def test_yearly(self, hourly_page) -> None:
        section = hourly_page.sections["yearly"]
        assert section.title == "How much is $30 an hour annually?"
        assert "$62,400" in section.content
        assert "40 hours per week for 52 weeks a year (2,080 hours total)" in section.content

    def test_monthly(self, hourly_page) -> None:
        content = hourly_page.sections["monthly"].content
        assert "approximately $5,200" in content
        assert "173.33 working hours per month (40 hours × 52 weeks ÷ 12 months)" in content

    def test_biweekly(self, hourly_page) -> None:
        content = hourly_page.sections["biweekly"].content
        assert "$2,400" in content
        assert "80 hours (two 40-hour work weeks)" in content

    def test_weekly(self, hourly_page) -> None:
        content = hourly_page.sections["weekly"].content
        assert "$1,200" in content
        assert "standard 40-hour work week" in content

    def test_daily(self, hourly_page) -> None:
        content = hourly_page.sections["daily"].content
        assert "$240" in content
        assert "standard 8-hour workday" in content


class TestYearlyPage:

    def test_50000_dollars_per_year(self) -> None:
        match = parse_slug("50000-dollars-per-year")
        assert match is not None
        page = generate(match.hourly_rate, match.unit)
        assert page is not None
        assert "50k" in page.h1
        assert page.h1 == "$50k a year is how much an hour?"
        assert page.title == "$50k a year is how much an hour? | SalaryCalc"
        assert page.meta_description.startswith("$24.04/hour equals $50,000 per year")

    def test_80k(self) -> None:
        page = generate(80000 / 2080, UnitTag.YEARLY)
        assert page is not None
        assert page.h1 == "$80k a year is how much an hour?"

    def test_small_yearly_amount_not_abbreviated(self) -> None:
        page = generate(0.25, UnitTag.YEARLY)
        assert page is not None
        assert page.h1 == "$520 a year is how much an hour?"

    def test_unit_accepts_plain_string(self) -> None:
        page = generate(30, "yearly")
        assert page is not None
        assert page.unit == UnitTag.YEARLY


class TestGenerateEdgeCases:

    def test_invalid_rate(self) -> None:
        assert generate("abc") is None

    def test_fractional_rate_display(self) -> None:
        page = generate(13.5)
        assert page is not None
        assert page.h1.startswith("At $13.5 an hour")

    def test_custom_site_name(self) -> None:
        page = generate(30, site_name="PayCheck")
        assert page is not None
        assert page.title.endswith(" | PayCheck")

    def test_to_dict(self, hourly_page) -> None:
        d = hourly_page.to_dict()
        assert d["unit"] == "hourly"
        assert d["sections"]["daily"]["title"] == "How much is $30 an hour daily?"
