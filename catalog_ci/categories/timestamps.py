"""Resolve a category file's last-updated time from git history.

Lookups run as an ordered list of strategies. The first one that yields a value
accepted by its predicate wins; when none does, the current time is used.
"""

from __future__ import annotations

import datetime as dt
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from .config import CATEGORY_FILE_PREFIX, RELEASES_DIRNAME
from .git import GitRunner, default_runner

ONE_YEAR_SEC = 365 * 24 * 60 * 60
ONE_HOUR_SEC = 60 * 60


def is_plausible(timestamp: int, now: int) -> bool:
    """Reject timestamps older than a year or more than an hour in the future."""
    return now - ONE_YEAR_SEC <= timestamp <= now + ONE_HOUR_SEC


def iso_utc(timestamp: int) -> str:
    return (
        dt.datetime.fromtimestamp(timestamp, dt.timezone.utc)
        .isoformat()
        .replace("+00:00", "Z")
    )


@dataclass(frozen=True)
class TimestampStrategy:
    label: str
    args: Sequence[str]
    accept: Callable[[int, int], bool] = is_plausible


def category_file_path(slug: str) -> str:
    return f"{RELEASES_DIRNAME}/{CATEGORY_FILE_PREFIX}{slug}.json"


def build_strategies(relative_path: str, file_exists: bool) -> List[TimestampStrategy]:
    strategies = [
        TimestampStrategy("log --follow", ["git", "log", "-1", "--format=%ct", "--follow", "--", relative_path]),
        TimestampStrategy("log", ["git", "log", "-1", "--format=%ct", "--", relative_path]),
        TimestampStrategy("log --all", ["git", "log", "-1", "--format=%ct", "--all", "--", relative_path]),
        TimestampStrategy("log -n 1", ["git", "log", "--format=%ct", "-n", "1", "--", relative_path]),
    ]
    if file_exists:
        # file present but untracked by the queries above: newest commit under releases/
        strategies.append(
            TimestampStrategy(
                "releases directory",
                ["git", "log", "-1", "--format=%ct", "--", f"{RELEASES_DIRNAME}/"],
                accept=lambda timestamp, now: True,
            )
        )
    return strategies


def run_strategy(strategy: TimestampStrategy, root: Path, runner: GitRunner) -> Optional[int]:
    """Run one lookup; None when git fails or prints nothing usable."""
    try:
        output = runner(list(strategy.args), root).strip()
    except (subprocess.CalledProcessError, OSError):
        return None
    if not output:
        return None
    try:
        return int(output.splitlines()[0].strip())
    except ValueError:
        return None


def resolve_last_updated(slug: str,
                         root: Path,
                         runner: GitRunner = default_runner,
                         now: Optional[int] = None,
                         verbose: bool = False) -> int:
    """Return the unix timestamp of the last commit touching the category file."""
    now = int(time.time()) if now is None else now
    relative_path = category_file_path(slug)
    file_exists = (root / relative_path).exists()

    for strategy in build_strategies(relative_path, file_exists):
        value = run_strategy(strategy, root, runner)
        if value is None:
            if verbose:
                print(f"    [{slug}] {strategy.label}: no result")
            continue
        if strategy.accept(value, now):
            if verbose:
                print(f"    [{slug}] {strategy.label}: {value} ({iso_utc(value)})")
            return value
        if verbose:
            print(f"    [{slug}] {strategy.label}: {value} ({iso_utc(value)}) failed sanity check")

    if verbose:
        print(f"    [{slug}] no usable history, using current time")
    return now


__all__ = [
    "ONE_YEAR_SEC",
    "ONE_HOUR_SEC",
    "is_plausible",
    "iso_utc",
    "TimestampStrategy",
    "category_file_path",
    "build_strategies",
    "run_strategy",
    "resolve_last_updated",
]
