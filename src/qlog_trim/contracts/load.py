"""Load and validate JSON instances against the bundled schemas.

Usage::

    from qlog_trim.contracts.load import validate_instance

    validate_instance(result.to_dict(), "trim_run.schema.json")
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any

import jsonschema

SCHEMA_DIR = "data/schemas"


def _schema_text(name: str) -> str:
    """Read a bundled schema.

    Priority:
    1. ``src/qlog_trim/data/schemas/`` relative to this file
    2. pip-installed package data via importlib.resources, read while the
       extracted file still exists
    """
    canonical = Path(__file__).resolve().parents[1] / SCHEMA_DIR / name
    if canonical.exists():
        return canonical.read_text(encoding="utf-8")

    with resources.as_file(resources.files("qlog_trim") / SCHEMA_DIR / name) as p:
        return p.read_text(encoding="utf-8")


def load_schema(name: str) -> dict[str, Any]:
    """Load a bundled JSON schema by filename."""
    return json.loads(_schema_text(name))


def validate_instance(instance: Any, schema_name: str) -> None:
    """Validate *instance* against the named schema.

    Raises ``jsonschema.ValidationError`` on failure.
    """
    schema = load_schema(schema_name)
    jsonschema.validate(instance=instance, schema=schema)
