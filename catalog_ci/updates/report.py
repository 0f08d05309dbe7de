"""Console output for the update check."""

from __future__ import annotations

from catalog_ci.github.config import WEB_URL

from .config import UpdateCheckSettings
from .models import ChangeSummary, CheckResult, Declaration, LatestCommit, RunSummary, Verdict


def print_header(declaration: Declaration, *, include_path: bool = True) -> None:
    print(f"=== checking: {declaration.name} ({declaration.full_name}) ===")
    print(f"  repository: {WEB_URL}/{declaration.full_name}")
    print(f"  current commit: {declaration.commit}")
    if include_path:
        print(f"  path: {declaration.path or '/'}")


def print_latest(latest: LatestCommit) -> None:
    print(f"  latest commit: {latest.sha}")
    print(f"  latest commit date: {latest.date or 'unknown'}")
    print(f"  latest commit message: \"{latest.headline}\"")


def print_changes(changes: ChangeSummary) -> None:
    print(f"  total repository changes: {changes.total_changes} files")
    print(f"  relevant file changes: {changes.relevant_changes} files")
    if changes.files:
        print("  changed files:")
        for change in changes.files:
            print(f"    - {change.filename} ({change.status}) [+{change.additions}/-{change.deletions}]")


def compare_url(declaration: Declaration, latest: LatestCommit) -> str:
    return f"{WEB_URL}/{declaration.full_name}/compare/{declaration.commit}...{latest.sha}"


def print_result(result: CheckResult, settings: UpdateCheckSettings) -> None:
    """Print everything after the header for one declaration.

    Update blocks are always printed; with only_show_updates the header is
    printed here because the caller suppressed it.
    """
    quiet = settings.only_show_updates
    declaration = result.declaration

    if result.verdict is Verdict.ERROR:
        if not quiet:
            print(f"  [error] {result.reason}\n")
        return

    if result.verdict is Verdict.UP_TO_DATE:
        if not quiet:
            if result.latest:
                print_latest(result.latest)
            print(f"  [ok] {result.reason}\n")
        return

    if quiet and declaration is not None:
        print_header(declaration, include_path=False)
    if result.latest:
        print_latest(result.latest)
    print("  [update] UPDATE AVAILABLE")
    if declaration is not None and result.latest:
        print(f"  compare commits: {compare_url(declaration, result.latest)}")
    if settings.detailed_output and result.changes:
        print_changes(result.changes)
    print("")


def print_summary(summary: RunSummary) -> None:
    print("SUMMARY:")
    print(f"  total metadata files checked: {summary.checked}")
    print(f"  updates available: {summary.available}")
    print(f"  errors: {summary.errors}")
    print(f"  up to date: {summary.up_to_date}")
    if summary.available > 0:
        print(f"\n{summary.available} repositories have updates available!")
    else:
        print("\nAll repositories are up to date!")


__all__ = [
    "print_header",
    "print_latest",
    "print_changes",
    "compare_url",
    "print_result",
    "print_summary",
]
