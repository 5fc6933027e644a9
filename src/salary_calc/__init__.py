"""salary_calc — hourly wage to salary conversion and landing-page copy."""

__all__ = [
    "__version__",
    "convert",
    "parse_slug",
    "generate",
    "find_related",
    "build_job_search_url",
    "format_currency",
]
__version__ = "0.1.0"

# Programmatic entrypoints; the web app and CLI are thin layers over these.
from salary_calc.core import (  # noqa: E402, F401
    build_job_search_url,
    convert,
    find_related,
    parse_slug,
)
from salary_calc.content import format_currency, generate  # noqa: E402, F401
