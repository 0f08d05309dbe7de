"""Convenience shim to run the metadata update check."""

from __future__ import annotations

import sys

from catalog_ci.updates.runner import main as check_updates_main


if __name__ == "__main__":
    check_updates_main(sys.argv[1:])
