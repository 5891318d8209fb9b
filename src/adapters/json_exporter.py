"""JSON export of CMS payloads.

Why JSON:
- Lets content editors snapshot what the storefront would render.
- Keeps fixtures for tests/offline work in the exact shape the CMS returns.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def dump_payload(payload: Any) -> str:
    """Stable UTF-8 JSON text for a payload."""

    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def export_payload_json(*, payload: Any, output_path: Path) -> Path:
    """Write `payload` to `output_path` as UTF-8 JSON with a stable format."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dump_payload(payload), encoding="utf-8")
    return output_path
