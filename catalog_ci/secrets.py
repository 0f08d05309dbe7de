"""Utilities for loading local (gitignored) credentials."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULT_SECRETS_FILENAME = "local_secrets.json"


def _default_secrets_path() -> Path:
    root = Path(__file__).resolve().parents[1]
    return root / DEFAULT_SECRETS_FILENAME


def load_local_secrets(path: Optional[str | Path] = None) -> Dict[str, Any]:
    """Load secrets from a JSON file; return {} when unavailable."""

    candidate = path or os.getenv("LOCAL_SECRETS_FILE") or _default_secrets_path()
    secrets_path = Path(candidate).expanduser()
    if not secrets_path.exists():
        return {}
    try:
        with secrets_path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def resolve_github_token(secrets: Optional[Dict[str, Any]] = None) -> Optional[str]:
    """Return GITHUB_TOKEN from the environment, else the first token in secrets."""

    token = os.getenv("GITHUB_TOKEN")
    if token:
        return token.strip() or None
    secrets = load_local_secrets() if secrets is None else secrets
    single = secrets.get("github_token")
    if isinstance(single, str) and single.strip():
        return single.strip()
    for candidate in secrets.get("github_tokens") or []:
        if isinstance(candidate, str) and candidate.strip():
            return candidate.strip()
    return None


__all__ = ["load_local_secrets", "resolve_github_token", "DEFAULT_SECRETS_FILENAME"]
