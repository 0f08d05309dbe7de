"""Decide whether a declaration is stale.

Two tiers: a cheap sha comparison against the newest upstream commit, then a
compare call that only counts changes touching the tracked files. Upstream
repositories are large and declarations track a handful of files, so the sha
check alone would report near-constant updates.
"""

from __future__ import annotations

import posixpath
from typing import Callable, List, Optional, Sequence

from .models import ChangeSummary, CheckResult, Declaration, LatestCommit, Verdict
from .upstream import get_file_changes, get_latest_commit

LatestFetcher = Callable[[str, str, str], Optional[LatestCommit]]
ChangesFetcher = Callable[[str, str, str, str, Sequence[str]], Optional[ChangeSummary]]


def join_scope(scope: str, entry: str) -> str:
    """Join a declaration path scope and a file entry into a normalized POSIX path."""
    joined = posixpath.normpath(f"{scope or '/'}/{entry}".replace("\\", "/"))
    if joined.startswith("//"):
        joined = "/" + joined.lstrip("/")
    return joined


def tracked_paths(declaration: Declaration) -> List[str]:
    """Resolve declaration.files to scoped paths, dropping entries without a path."""
    paths: List[str] = []
    for entry in declaration.files:
        if isinstance(entry, str):
            source = entry
        elif isinstance(entry, dict) and isinstance(entry.get("source"), str):
            source = entry["source"]
        else:
            continue
        if not source.strip():
            continue
        paths.append(join_scope(declaration.path, source))
    return paths


def check_declaration(declaration: Declaration,
                      fetch_latest: Optional[LatestFetcher] = None,
                      fetch_changes: Optional[ChangesFetcher] = None) -> CheckResult:
    fetch_latest = fetch_latest or get_latest_commit
    fetch_changes = fetch_changes or get_file_changes
    latest = fetch_latest(declaration.owner, declaration.repo, declaration.path)
    if latest is None:
        return CheckResult(Verdict.ERROR, "could not fetch latest commit", declaration=declaration)

    if latest.sha == declaration.commit:
        return CheckResult(Verdict.UP_TO_DATE, "up to date", latest=latest, declaration=declaration)

    paths = tracked_paths(declaration)
    if not paths:
        # nothing finer-grained declared: any commit in scope counts
        return CheckResult(
            Verdict.UPDATE_AVAILABLE,
            "new commits in scope",
            latest=latest,
            declaration=declaration,
        )

    changes = fetch_changes(declaration.owner, declaration.repo, declaration.commit, latest.sha, paths)
    if changes is None or changes.relevant_changes == 0:
        return CheckResult(
            Verdict.UP_TO_DATE,
            "up to date (no relevant file changes)",
            latest=latest,
            changes=changes,
            declaration=declaration,
        )
    return CheckResult(
        Verdict.UPDATE_AVAILABLE,
        f"{changes.relevant_changes} tracked file(s) changed",
        latest=latest,
        changes=changes,
        declaration=declaration,
    )


__all__ = ["join_scope", "tracked_paths", "check_declaration"]
