"""Display formatting for money and rates (en-US conventions)."""

from __future__ import annotations

from salary_calc.utils.numbers import is_whole, round_half_up


def format_currency(amount: float | None) -> str:
    """``50000 -> "$50,000"``, ``38.46 -> "$38.46"``, ``None -> "$0"``.

    Amounts that are whole once rounded to cents carry no decimals; anything
    else gets exactly two.
    """
    if amount is None:
        return "$0"
    cents = round(amount, 2)
    if is_whole(cents):
        return f"${cents:,.0f}"
    return f"${cents:,.2f}"


def format_whole_dollars(amount: float | None) -> str:
    """Calculator-widget format: rounded to whole dollars, grouped."""
    if amount is None:
        return "$0"
    return f"${round_half_up(amount):,}"


def _trim(number: float) -> str:
    return f"{number:.2f}".rstrip("0").rstrip(".")


def display_rate(rate: float) -> str:
    """Rate as shown in copy: ``30 -> "30"``, ``24.038 -> "24.04"``, ``24.1 -> "24.1"``."""
    if is_whole(rate):
        return f"{rate:.0f}"
    return _trim(rate)


def format_thousands(amount: float) -> str:
    """Headline form of a yearly amount: ``50000 -> "$50k"``, ``800 -> "$800"``."""
    if amount >= 1000:
        return f"${_trim(amount / 1000)}k"
    return format_currency(amount)
