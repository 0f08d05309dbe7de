"""Convenience shim to regenerate releases/categories.json."""

from __future__ import annotations

import sys

from catalog_ci.categories.generator import main as generate_main


if __name__ == "__main__":
    generate_main(sys.argv[1:])
