"""Convenience shim to strip triage labels from a merged pull request."""

from __future__ import annotations

from catalog_ci.labels.cleanup import main as cleanup_main


if __name__ == "__main__":
    cleanup_main()
