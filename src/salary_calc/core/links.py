"""Outbound link construction."""

from __future__ import annotations

from salary_calc.utils.numbers import round_half_up

DEFAULT_JOB_SEARCH_BASE_URL = "https://jooble.org"


def build_job_search_url(
    rate: float,
    base_url: str = DEFAULT_JOB_SEARCH_BASE_URL,
) -> str:
    """Job-search listing URL for jobs paying about *rate* per hour."""
    return f"{base_url.rstrip('/')}/jobs-{round_half_up(rate)}-per-hour"
