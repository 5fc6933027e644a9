"""Centralized exit-code contract for all CLI commands.

Code  Meaning
----  -------
  0   Success — a result was produced
  1   No result — rate did not convert or slug did not match
  2   Error — usage error, runtime failure
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    NO_RESULT = 1
    ERROR = 2
