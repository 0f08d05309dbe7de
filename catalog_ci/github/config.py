"""Central configuration constants for talking to the GitHub REST API."""

from __future__ import annotations

import os
from typing import Optional

from catalog_ci.secrets import load_local_secrets, resolve_github_token

_SECRETS = load_local_secrets()
GITHUB_TOKEN: Optional[str] = resolve_github_token(_SECRETS)
USER_AGENT = "catalog-ci/1.0"
BASE_URL = os.getenv("GITHUB_API_URL", "https://api.github.com").rstrip("/")
WEB_URL = "https://github.com"
PER_PAGE = 100
REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", "30"))
# Fixed spacing between API calls; <= 0 disables the gate.
REQUEST_INTERVAL_SEC = float(os.getenv("REQUEST_INTERVAL_SEC", "0.1"))

__all__ = [
    "GITHUB_TOKEN",
    "USER_AGENT",
    "BASE_URL",
    "WEB_URL",
    "PER_PAGE",
    "REQUEST_TIMEOUT",
    "REQUEST_INTERVAL_SEC",
]
