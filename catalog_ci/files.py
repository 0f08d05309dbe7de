"""Small filesystem and JSON helpers shared by the CI utilities."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def load_json(path: str | Path) -> Any:
    """Read a UTF-8 JSON document; decoding errors propagate to the caller."""
    with open(path, "r", encoding="utf-8") as fh:
        return json.load(fh)


def save_json(path: str | Path, data: Any) -> None:
    """Write JSON to disk using UTF-8 and deterministic formatting."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def one_line(msg: str | None) -> str:
    """Return the first line of a commit message."""
    if not msg:
        return ""
    return msg.splitlines()[0].strip()


__all__ = ["load_json", "save_json", "one_line"]
