"""Environment variable parsing shared by the CLI settings modules."""

from __future__ import annotations

import os


def env_flag(name: str, default: bool = False) -> bool:
    """Interpret an environment variable such as DETAILED_OUTPUT=true as a bool."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


__all__ = ["env_flag"]
