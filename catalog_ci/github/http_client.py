"""REST helpers for the GitHub API: one attempt per call, paced by a rate gate."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests

from .config import GITHUB_TOKEN, PER_PAGE, REQUEST_INTERVAL_SEC, REQUEST_TIMEOUT, USER_AGENT
from .ratelimit import RateGate

SESSION = requests.Session()
SESSION.headers.update(
    {
        "Accept": "application/vnd.github.v3+json",
        "User-Agent": USER_AGENT,
    }
)

REQUEST_GATE = RateGate(REQUEST_INTERVAL_SEC)

_warned_missing_token = False


class GitHubAPIError(RuntimeError):
    """Transport failure, non-success status, or undecodable body from GitHub."""

    def __init__(self, message: str, *, url: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


def log_http_error(resp: requests.Response, url: str) -> None:
    """Print a short, human-readable message when GitHub returns an error."""
    try:
        body = resp.json()
    except ValueError:
        body = {"text": (resp.text or "")[:300]}
    if not isinstance(body, dict):
        body = {"text": str(body)[:300]}
    msg = body.get("message") or body.get("error") or body.get("text")
    print(f"[error] HTTP {resp.status_code} for {url}\n  -> {msg}")


def set_auth_header(token: Optional[str]) -> None:
    """Set or clear the SESSION Authorization header."""
    if token:
        SESSION.headers["Authorization"] = f"token {token}"
    else:
        SESSION.headers.pop("Authorization", None)


def _ensure_auth_header() -> None:
    global _warned_missing_token
    if "Authorization" in SESSION.headers:
        return
    if GITHUB_TOKEN:
        set_auth_header(GITHUB_TOKEN)
    elif not _warned_missing_token:
        print("[warn] GITHUB_TOKEN is not set; requests are unauthenticated and heavily rate limited")
        _warned_missing_token = True


def github_request(method: str, url: str, **kwargs) -> requests.Response:
    """Perform a single REST call; raise GitHubAPIError unless it returns 2xx."""
    _ensure_auth_header()
    timeout = kwargs.pop("timeout", REQUEST_TIMEOUT)
    REQUEST_GATE.wait()
    try:
        resp = SESSION.request(method, url, timeout=timeout, **kwargs)
    except requests.RequestException as exc:
        raise GitHubAPIError(f"{method} {url} failed: {exc}", url=url) from exc

    if not 200 <= resp.status_code < 300:
        log_http_error(resp, url)
        raise GitHubAPIError(
            f"{method} {url} returned HTTP {resp.status_code}",
            url=url,
            status_code=resp.status_code,
        )
    return resp


def get_json(url: str, params: Optional[Dict[str, Any]] = None) -> Any:
    """GET a resource and return its decoded JSON body."""
    resp = github_request("GET", url, params=params)
    try:
        return resp.json()
    except ValueError as exc:
        raise GitHubAPIError(
            f"GET {url} returned a non-JSON body", url=url, status_code=resp.status_code
        ) from exc


def paged_get(url: str,
              params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    """Retrieve pages until the API returns a short or empty page."""
    results: List[Dict[str, Any]] = []
    page = 1
    while True:
        page_params = dict(params or {})
        page_params.update({"per_page": PER_PAGE, "page": page})
        batch = get_json(url, page_params)
        if not isinstance(batch, list) or not batch:
            break
        results.extend(batch)
        if len(batch) < PER_PAGE:
            break
        page += 1
    return results


__all__ = [
    "SESSION",
    "REQUEST_GATE",
    "GitHubAPIError",
    "log_http_error",
    "set_auth_header",
    "github_request",
    "get_json",
    "paged_get",
]
