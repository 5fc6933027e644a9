"""Rate catalog — the hourly rates that get their own landing pages.

Used for related-rate cross-links and the home-page index only; it is not a
whitelist of accepted input rates.
"""

from __future__ import annotations

RATE_CATALOG: tuple[float, ...] = (
    10, 11, 12, 13, 13.5, 14, 15, 15.5, 16, 16.5, 17, 17.5, 18, 18.5, 19, 19.5,
    20, 20.5, 21, 21.5, 22, 22.5, 23, 23.5, 24, 24.5, 25, 26, 26.5, 27, 27.5, 28, 28.5, 29,
    30, 31, 32, 33, 34, 35, 36, 37, 38, 39,
    40, 41, 42, 43, 44, 45, 46, 47, 48, 49,
    50, 51, 52, 53, 54, 55, 56, 57, 58, 59,
    60, 61, 62, 63, 64, 65, 66, 67, 68, 69,
    70, 72, 74, 75, 76, 77, 78, 80, 83, 85, 90, 95, 100, 110, 115, 120, 130, 140, 150, 200,
)

POPULAR_RATES: tuple[float, ...] = (15, 18, 20, 22, 25, 28, 30, 35, 40, 45, 50)
