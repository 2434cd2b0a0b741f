"""Canonical JSON serialization for run reports.

Keys are sorted, non-ASCII text is written as-is and the document ends
with a newline.
"""

from __future__ import annotations

import json
from typing import Any


def stable_json_dumps(obj: Any, *, indent: int | None = 2) -> str:
    return json.dumps(obj, indent=indent, sort_keys=True, ensure_ascii=False) + "\n"
