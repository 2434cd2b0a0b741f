"""Tests for the run-report serialization (qlog_trim.utils.json_norm)."""

from __future__ import annotations

import json
from pathlib import Path

from qlog_trim.core.config import TrimConfig
from qlog_trim.model.run_result import TrimRunResult
from qlog_trim.utils.json_norm import stable_json_dumps


def _report(source: str = "logs", target: str = "trimmed") -> dict:
    result = TrimRunResult(config=TrimConfig(Path(source), Path(target)))
    result.record(Path(target) / "engine.log")
    return result.to_dict()


class TestReportDump:
    def test_sections_in_sorted_order(self):
        s = stable_json_dumps(_report())

        assert s.index('"outputs"') < s.index('"run"') < s.index('"schema_version"') < s.index('"summary"')
        assert s.index('"created_at"') < s.index('"run_id"') < s.index('"tool_version"')

    def test_ends_with_single_newline(self):
        s = stable_json_dumps(_report())

        assert s.endswith("}\n")
        assert not s.endswith("\n\n")

    def test_non_ascii_paths_kept_verbatim(self):
        s = stable_json_dumps(_report(source="Protokolle/Größe", target="ausgabe/日志"))

        assert "Protokolle/Größe" in s
        assert "ausgabe/日志/engine.log" in s
        assert "\\u" not in s

    def test_round_trips_to_same_document(self):
        doc = _report()

        assert json.loads(stable_json_dumps(doc)) == doc

    def test_two_space_indent(self):
        lines = stable_json_dumps(_report()).splitlines()

        assert lines[1].startswith('  "outputs"')
