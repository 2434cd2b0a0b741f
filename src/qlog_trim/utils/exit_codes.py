"""Centralized exit-code contract for the CLI.

Code  Meaning
----  -------
  0   Success — run completed (zero matching files included)
  1   Violation — precondition failure (source == target, source not a dir)
  2   Error — usage error, I/O failure, invalid report
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
