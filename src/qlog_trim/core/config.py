"""Trim configuration dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

MAX_DEPTH_LIMIT = 65535  # unsigned 16-bit


@dataclass(frozen=True)
class TrimConfig:
    """Immutable run configuration, built once from the command line.

    ``max_depth`` is range-checked but the batch loop only ever visits the
    immediate children of ``source``.
    """

    source: Path
    target: Path
    max_depth: int = 1

    def __post_init__(self) -> None:
        if not 0 <= self.max_depth <= MAX_DEPTH_LIMIT:
            raise ValueError(
                f"max_depth must be between 0 and {MAX_DEPTH_LIMIT}, got {self.max_depth}"
            )
