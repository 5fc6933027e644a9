"""Tests for content.formatting — money, rates and headline abbreviations."""

from __future__ import annotations

import pytest

from salary_calc.content.formatting import (
    display_rate,
    format_currency,
    format_thousands,
    format_whole_dollars,
)


class TestFormatCurrency:

    def test_whole_amount(self) -> None:
        assert format_currency(50000) == "$50,000"

    def test_cents(self) -> None:
        assert format_currency(38.46) == "$38.46"

    def test_none(self) -> None:
        assert format_currency(None) == "$0"

    def test_zero(self) -> None:
        assert format_currency(0) == "$0"

    def test_always_two_decimals_for_fractions(self) -> None:
        assert format_currency(1234567.5) == "$1,234,567.50"

    def test_float_noise_is_whole(self) -> None:
        assert format_currency(50000 / 2080 * 2080) == "$50,000"
        assert format_currency(49999.999999999) == "$50,000"

    def test_whole_float(self) -> None:
        assert format_currency(62400.0) == "$62,400"


class TestFormatWholeDollars:

    @pytest.mark.parametrize(
        "amount, expected",
        [(5199.9, "$5,200"), (2.5, "$3"), (62400, "$62,400"), (0, "$0"), (None, "$0")],
    )
    def test_rounds(self, amount, expected: str) -> None:
        assert format_whole_dollars(amount) == expected


class TestDisplayRate:

    def test_integer(self) -> None:
        assert display_rate(30.0) == "30"

    def test_two_places(self) -> None:
        assert display_rate(50000 / 2080) == "24.04"

    def test_trailing_zero_dropped(self) -> None:
        assert display_rate(24.1) == "24.1"


class TestFormatThousands:

    def test_50k(self) -> None:
        assert format_thousands(50000) == "$50k"

    def test_fractional_thousands(self) -> None:
        assert format_thousands(62400) == "$62.4k"

    def test_exactly_1000(self) -> None:
        assert format_thousands(1000) == "$1k"

    def test_below_1000_uses_currency(self) -> None:
        assert format_thousands(520) == "$520"
        assert format_thousands(999.5) == "$999.50"
