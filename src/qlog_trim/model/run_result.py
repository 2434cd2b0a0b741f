"""TrimRunResult — the outcome of one batch run."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from qlog_trim import __version__
from qlog_trim.core.config import TrimConfig


@dataclass(slots=True)
class TrimRunResult:
    """Running tally built by ``core.runner`` as files are processed.

    ``processed`` only counts files whose transform completed.
    """

    config: TrimConfig

    # ── run metadata ────────────────────────────────────────────────
    run_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat(),
    )
    tool_version: str = __version__

    # ── tally ───────────────────────────────────────────────────────
    outputs: list[Path] = field(default_factory=list)

    @property
    def processed(self) -> int:
        return len(self.outputs)

    def record(self, output: Path) -> None:
        self.outputs.append(output)

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """Produce the report document matching ``trim_run.schema.json``."""
        return {
            "schema_version": "trim_run_v1",
            "run": {
                "run_id": self.run_id,
                "created_at": self.created_at,
                "tool_version": self.tool_version,
                "config": {
                    "source": self.config.source.as_posix(),
                    "target": self.config.target.as_posix(),
                    "max_depth": self.config.max_depth,
                },
            },
            "summary": {
                "processed": self.processed,
            },
            "outputs": [p.as_posix() for p in self.outputs],
        }
