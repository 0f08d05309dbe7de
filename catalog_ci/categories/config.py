"""Configuration helpers for categories.json generation."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from catalog_ci.env import env_flag

RELEASES_DIRNAME = "releases"
CATEGORY_FILE_PREFIX = "category-"
INDEX_FILENAME = "categories.json"
DEFAULT_CATALOG_ROOT = "."


@dataclass(frozen=True)
class CategorySettings:
    """Resolved runtime settings for the categories generator."""

    root: Path
    verbose: bool

    @property
    def releases_dir(self) -> Path:
        return self.root / RELEASES_DIRNAME

    @property
    def output_path(self) -> Path:
        return self.releases_dir / INDEX_FILENAME


def build_arg_parser() -> argparse.ArgumentParser:
    """Return the CLI parser used by the categories entry point."""

    parser = argparse.ArgumentParser(
        description="Regenerate releases/categories.json with git-derived timestamps.",
    )
    parser.add_argument("--root", default=os.getenv("CATALOG_ROOT", DEFAULT_CATALOG_ROOT))
    parser.add_argument("--verbose", action="store_true", default=env_flag("CATEGORIES_VERBOSE"))
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments; accepts argv overrides for testing."""

    return build_arg_parser().parse_args(argv)


def resolve_settings(args: Optional[argparse.Namespace] = None) -> CategorySettings:
    args = args or parse_args([])
    return CategorySettings(root=Path(args.root), verbose=bool(args.verbose))


__all__ = [
    "RELEASES_DIRNAME",
    "CATEGORY_FILE_PREFIX",
    "INDEX_FILENAME",
    "DEFAULT_CATALOG_ROOT",
    "CategorySettings",
    "build_arg_parser",
    "parse_args",
    "resolve_settings",
]
