"""GitHub lookups for the update check: newest commit on a path and compare diffs."""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from catalog_ci.github.config import BASE_URL
from catalog_ci.github.http_client import GitHubAPIError, get_json

from .models import ChangeSummary, FileChange, LatestCommit


def _commit_date(commit_obj: Dict[str, Any]) -> Optional[str]:
    for role in ("committer", "author"):
        date = (commit_obj.get(role) or {}).get("date")
        if date:
            return date
    return None


def get_latest_commit(owner: str, repo: str, path: str = "") -> Optional[LatestCommit]:
    """Return the newest commit touching `path` (whole repo when empty), or None."""
    url = f"{BASE_URL}/repos/{owner}/{repo}/commits"
    params: Dict[str, Any] = {"per_page": 1}
    scope = (path or "").strip("/")
    if scope:
        params["path"] = scope
    try:
        payload = get_json(url, params)
    except GitHubAPIError as exc:
        print(f"[error] fetching commits for {owner}/{repo}: {exc}")
        return None

    if not isinstance(payload, list) or not payload or not isinstance(payload[0], dict):
        print(f"[error] no commits returned for {owner}/{repo} (path={path or '/'})")
        return None

    entry = payload[0]
    sha = entry.get("sha")
    if not sha:
        print(f"[error] commit without sha for {owner}/{repo}")
        return None
    commit_obj = entry.get("commit") or {}
    return LatestCommit(
        sha=sha,
        date=_commit_date(commit_obj),
        message=commit_obj.get("message") or "",
    )


def path_matches(filename: str, tracked_path: str) -> bool:
    """Loose relevance test: substring containment in either direction.

    One leading '/' is dropped from the tracked path first. Short tracked paths
    such as "app" match any file containing that text.
    """
    normalized = tracked_path[1:] if tracked_path.startswith("/") else tracked_path
    return normalized in filename or filename in normalized


def _file_change(entry: Dict[str, Any]) -> FileChange:
    return FileChange(
        filename=entry.get("filename") or "",
        status=entry.get("status") or "",
        additions=int(entry.get("additions") or 0),
        deletions=int(entry.get("deletions") or 0),
        patch=entry.get("patch"),
    )


def get_file_changes(owner: str,
                     repo: str,
                     base: str,
                     head: str,
                     tracked_paths: Sequence[str]) -> Optional[ChangeSummary]:
    """Compare base...head and keep only files overlapping the tracked paths.

    Returns None when the comparison cannot be fetched; callers treat that as
    "relevance unknown".
    """
    url = f"{BASE_URL}/repos/{owner}/{repo}/compare/{base}...{head}"
    try:
        payload = get_json(url)
    except GitHubAPIError as exc:
        print(f"[error] comparing {base}...{head} for {owner}/{repo}: {exc}")
        return None
    if not isinstance(payload, dict):
        print(f"[error] unexpected compare payload for {owner}/{repo}")
        return None

    files = payload.get("files")
    if files is None:
        files = []
    if not isinstance(files, list):
        print(f"[error] unexpected compare payload for {owner}/{repo}: files is not a list")
        return None

    try:
        relevant = [
            _file_change(entry)
            for entry in files
            if isinstance(entry, dict)
            and isinstance(entry.get("filename"), str)
            and entry["filename"]
            and any(path_matches(entry["filename"], tracked) for tracked in tracked_paths)
        ]
    except (TypeError, ValueError) as exc:
        print(f"[error] unexpected compare payload for {owner}/{repo}: {exc}")
        return None
    return ChangeSummary(
        total_changes=len(files),
        relevant_changes=len(relevant),
        files=tuple(relevant),
    )


__all__ = ["get_latest_commit", "path_matches", "get_file_changes"]
