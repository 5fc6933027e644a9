"""Enums shared across the converter, content and web layers."""

from __future__ import annotations

from enum import Enum


class UnitTag(str, Enum):
    """Which quantity the visitor originally asked about; drives the headline."""

    HOURLY = "hourly"
    YEARLY = "yearly"


class ScheduleMode(str, Enum):
    """How the Rate Converter derives period amounts."""

    FIXED = "fixed"      # standard 2080 h/year, 173.33 h/month constants
    CUSTOM = "custom"    # hours/day × days/week × weeks/year from the caller
