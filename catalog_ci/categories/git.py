"""Thin wrapper over the git command line for history lookups."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Sequence

GitRunner = Callable[[Sequence[str], Path], str]


def default_runner(args: Sequence[str], cwd: Path) -> str:
    """Run a git command and return stdout; CalledProcessError/OSError propagate."""
    completed = subprocess.run(
        list(args),
        cwd=str(cwd),
        check=True,
        text=True,
        capture_output=True,
    )
    return completed.stdout


def ensure_full_history(root: Path, runner: GitRunner = default_runner) -> bool:
    """Unshallow a CI checkout so per-file history is available; True if unshallowed."""
    try:
        shallow = runner(["git", "rev-parse", "--is-shallow-repository"], root).strip()
    except (subprocess.CalledProcessError, OSError) as exc:
        print(f"[warn] could not check shallow status: {exc}")
        return False
    if shallow != "true":
        return False

    print("[info] repository is shallow, fetching full history...")
    try:
        runner(["git", "fetch", "--unshallow"], root)
    except (subprocess.CalledProcessError, OSError) as exc:
        print(f"[warn] could not unshallow: {exc}")
        return False
    return True


__all__ = ["GitRunner", "default_runner", "ensure_full_history"]
