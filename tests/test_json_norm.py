"""Tests for utils.json_norm — stable JSON for CLI output."""

from __future__ import annotations

import json

from salary_calc.model import UnitTag
from salary_calc.utils.json_norm import stable_json_dumps


def test_sorted_keys_and_trailing_newline() -> None:
    out = stable_json_dumps({"b": 1, "a": 2})
    assert out.endswith("\n")
    assert out.index('"a"') < out.index('"b"')


def test_floats_rounded_and_enums_unwrapped() -> None:
    data = json.loads(stable_json_dumps({"rate": 80000 / 2080, "unit": UnitTag.YEARLY}))
    assert data == {"rate": 38.4615, "unit": "yearly"}


def test_non_finite_floats_stay_valid_json() -> None:
    out = stable_json_dumps({"x": float("inf"), "y": float("nan")})
    assert "Infinity" not in out
    assert json.loads(out) == {"x": "inf", "y": "nan"}
