"""Strip triage labels from a pull request once it has been merged."""

from __future__ import annotations

import os
import sys
from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import quote

from catalog_ci.files import load_json
from catalog_ci.github.config import BASE_URL
from catalog_ci.github.http_client import GitHubAPIError, github_request, paged_get, set_auth_header

# Labels applied while a contribution is under review; obsolete after merge.
LABELS_TO_REMOVE = [
    "review required",
    "missing metadata.json",
    "invalid metadata.json",
    "missing logo.png",
    "external contribution",
]


def read_event(path: str) -> Dict[str, Any]:
    """Load the Actions event payload; OSError/ValueError propagate."""
    data = load_json(path)
    if not isinstance(data, dict):
        raise ValueError("event payload is not a JSON object")
    return data


def merged_pr_number(event: Mapping[str, Any]) -> Optional[int]:
    """Return the PR number when the event describes a merged pull request."""
    pr = event.get("pull_request") or {}
    if not pr.get("merged"):
        return None
    number = pr.get("number")
    return number if isinstance(number, int) else None


def list_label_names(owner: str, repo: str, number: int) -> List[str]:
    url = f"{BASE_URL}/repos/{owner}/{repo}/issues/{number}/labels"
    return [label.get("name") for label in paged_get(url) if label.get("name")]


def remove_label(owner: str, repo: str, number: int, label: str) -> bool:
    url = f"{BASE_URL}/repos/{owner}/{repo}/issues/{number}/labels/{quote(label, safe='')}"
    try:
        github_request("DELETE", url)
    except GitHubAPIError as exc:
        print(f"[warn] could not remove \"{label}\" label: {exc}")
        return False
    print(f"  removed \"{label}\" label from merged PR #{number}")
    return True


def cleanup_merged_pr(env: Optional[Mapping[str, str]] = None) -> List[str]:
    """Remove LABELS_TO_REMOVE from the merged PR described by the Actions env."""
    env = os.environ if env is None else env
    if env.get("GITHUB_EVENT_NAME") != "pull_request":
        print("[info] not a pull request event, skipping cleanup")
        return []

    token = env.get("GITHUB_TOKEN")
    repository = env.get("GITHUB_REPOSITORY")
    if not token or not repository or "/" not in repository:
        print("[warn] missing required environment variables (GITHUB_TOKEN, GITHUB_REPOSITORY)")
        return []

    number: Optional[int] = None
    event_path = env.get("GITHUB_EVENT_PATH")
    if event_path:
        try:
            event = read_event(event_path)
        except (OSError, ValueError) as exc:
            print(f"[warn] could not read GitHub event data: {exc}")
            return []
        if not (event.get("pull_request") or {}).get("merged"):
            print("[info] PR was closed but not merged, skipping cleanup")
            return []
        number = merged_pr_number(event)

    if number is None:
        print("[warn] could not determine PR number")
        return []

    owner, repo = repository.split("/", 1)
    set_auth_header(token)

    try:
        current = list_label_names(owner, repo, number)
    except GitHubAPIError as exc:
        print(f"[error] failed to get labels: {exc}")
        return []
    print(f"Current labels on PR #{number}: {', '.join(current)}")

    removed: List[str] = []
    for label in LABELS_TO_REMOVE:
        if label not in current:
            print(f"  label \"{label}\" not found on PR #{number}")
            continue
        if remove_label(owner, repo, number, label):
            removed.append(label)

    print("PR label cleanup completed")
    return removed


def main() -> None:
    try:
        cleanup_merged_pr()
    except Exception as exc:
        print(f"[error] PR cleanup failed: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
