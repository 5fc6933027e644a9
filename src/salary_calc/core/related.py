"""Related-Rate Finder — nearby catalog rates for cross-linking."""

from __future__ import annotations

from typing import Sequence

from salary_calc.policy.catalog import RATE_CATALOG

# Catalog entries further than this from the page rate are never suggested.
MAX_DISTANCE = 10


def find_related(
    rate: float,
    catalog: Sequence[float] = RATE_CATALOG,
    max_results: int = 10,
) -> list[float]:
    """Return up to *max_results* catalog rates strictly within 10 of *rate*.

    *rate* itself is excluded.  Results are ordered by distance; equal
    distances keep catalog order (``sorted`` is stable).
    """
    nearby = [r for r in catalog if abs(r - rate) < MAX_DISTANCE and r != rate]
    nearby = sorted(nearby, key=lambda r: abs(r - rate))
    return nearby[:max(max_results, 0)]
