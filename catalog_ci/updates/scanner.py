"""Discover and load metadata.json declarations under the repositories tree."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import List

from catalog_ci.files import load_json

from .config import DECLARATION_FILENAME
from .models import Declaration, DeclarationError


def _raise(exc: OSError) -> None:
    raise exc


def find_declaration_files(root: str | Path, filename: str = DECLARATION_FILENAME) -> List[Path]:
    """Return every `filename` below `root`; OSError on an unreadable tree is fatal."""
    root_path = Path(root)
    if not root_path.is_dir():
        raise FileNotFoundError(f"declaration root {root_path} is not a directory")

    found: List[Path] = []
    for current, dirs, files in os.walk(root_path, onerror=_raise):
        dirs.sort()
        for name in sorted(files):
            if name == filename:
                found.append(Path(current) / name)
    return found


def load_declaration(path: str | Path) -> Declaration:
    """Read one declaration file, converting every defect into DeclarationError."""
    try:
        data = load_json(path)
    except json.JSONDecodeError as exc:
        raise DeclarationError(f"invalid JSON in {path}: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise DeclarationError(f"cannot read {path}: {exc}") from exc
    try:
        return Declaration.from_dict(data)
    except DeclarationError as exc:
        raise DeclarationError(f"{path}: {exc}") from exc


__all__ = ["find_declaration_files", "load_declaration"]
