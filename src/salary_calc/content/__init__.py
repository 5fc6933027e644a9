"""Page copy and display formatting."""

from salary_calc.content.formatting import (
    display_rate,
    format_currency,
    format_thousands,
    format_whole_dollars,
)
from salary_calc.content.generator import generate

__all__ = [
    "display_rate",
    "format_currency",
    "format_thousands",
    "format_whole_dollars",
    "generate",
]
