"""Tests for core.links."""

from __future__ import annotations

from salary_calc.core.links import build_job_search_url


def test_whole_rate() -> None:
    assert build_job_search_url(30) == "https://jooble.org/jobs-30-per-hour"


def test_rate_is_rounded() -> None:
    assert build_job_search_url(24.0385) == "https://jooble.org/jobs-24-per-hour"
    assert build_job_search_url(38.4615) == "https://jooble.org/jobs-38-per-hour"


def test_half_rounds_up() -> None:
    assert build_job_search_url(12.5) == "https://jooble.org/jobs-13-per-hour"


def test_custom_base_url() -> None:
    assert build_job_search_url(20, "https://jobs.example.com/") == "https://jobs.example.com/jobs-20-per-hour"
