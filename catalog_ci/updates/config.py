"""Configuration helpers for the metadata update check."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from catalog_ci.env import env_flag

DECLARATION_FILENAME = "metadata.json"
DEFAULT_REPOSITORIES_DIR = "./repositories"


@dataclass(frozen=True)
class UpdateCheckSettings:
    """Resolved runtime settings for the update check."""

    repositories_dir: Path
    declaration_filename: str
    detailed_output: bool
    only_show_updates: bool


def build_arg_parser() -> argparse.ArgumentParser:
    """Return the CLI parser used by the update-check entry point."""

    parser = argparse.ArgumentParser(
        description="Report catalog metadata.json entries whose tracked upstream files changed.",
    )
    parser.add_argument(
        "--repositories-dir",
        default=os.getenv("REPOSITORIES_DIR", DEFAULT_REPOSITORIES_DIR),
    )
    parser.add_argument("--declaration-filename", default=DECLARATION_FILENAME)
    parser.add_argument(
        "--detailed",
        action="store_true",
        default=env_flag("DETAILED_OUTPUT"),
        help="print per-file change details for updates (env: DETAILED_OUTPUT)",
    )
    parser.add_argument(
        "--only-updates",
        action="store_true",
        default=env_flag("ONLY_SHOW_UPDATES"),
        help="hide up-to-date entries (env: ONLY_SHOW_UPDATES)",
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments; accepts argv overrides for testing."""

    parser = build_arg_parser()
    return parser.parse_args(argv)


def resolve_settings(args: Optional[argparse.Namespace] = None) -> UpdateCheckSettings:
    """Return immutable settings from parsed arguments."""

    args = args or parse_args([])
    return UpdateCheckSettings(
        repositories_dir=Path(args.repositories_dir),
        declaration_filename=args.declaration_filename,
        detailed_output=bool(args.detailed),
        only_show_updates=bool(args.only_updates),
    )


__all__ = [
    "DECLARATION_FILENAME",
    "DEFAULT_REPOSITORIES_DIR",
    "UpdateCheckSettings",
    "build_arg_parser",
    "parse_args",
    "resolve_settings",
]
