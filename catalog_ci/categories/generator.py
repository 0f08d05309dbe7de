"""Build releases/categories.json from the per-category release files."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from catalog_ci.files import load_json, save_json

from .config import (
    CATEGORY_FILE_PREFIX,
    INDEX_FILENAME,
    RELEASES_DIRNAME,
    parse_args,
    resolve_settings,
)
from .git import GitRunner, default_runner, ensure_full_history
from .timestamps import iso_utc, resolve_last_updated


@dataclass(frozen=True)
class CategoryFile:
    name: str
    slug: str
    count: int
    filename: str


@dataclass(frozen=True)
class CategoryEntry:
    name: str
    slug: str
    count: int
    last_updated: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "slug": self.slug,
            "count": self.count,
            "lastUpdated": self.last_updated,
        }


def slug_from_filename(filename: str) -> str:
    return filename[len(CATEGORY_FILE_PREFIX):-len(".json")]


def read_category_files(releases_dir: Path) -> List[CategoryFile]:
    """Read category-<slug>.json files; invalid ones are skipped with a warning."""
    print(f"Reading category files from: {releases_dir}")
    if not releases_dir.is_dir():
        print(f"[warn] releases directory {releases_dir} does not exist")
        return []

    filenames = sorted(
        entry.name
        for entry in releases_dir.iterdir()
        if entry.is_file()
        and entry.name.startswith(CATEGORY_FILE_PREFIX)
        and entry.name.endswith(".json")
        and entry.name != INDEX_FILENAME
    )
    print(f"  found {len(filenames)} category files")

    categories: List[CategoryFile] = []
    for filename in filenames:
        try:
            data = load_json(releases_dir / filename)
            name = data["category"]
            count = int(data["count"])
        except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError) as exc:
            print(f"[warn] could not read {filename}: {exc}")
            continue
        print(f"  read category '{name}' ({count} apps) from {filename}")
        categories.append(CategoryFile(str(name), slug_from_filename(filename), count, filename))
    return categories


def build_index(entries: Iterable[CategoryEntry]) -> Dict[str, Any]:
    """Assemble the categories.json document, sorted by name case-insensitively."""
    ordered = sorted(entries, key=lambda entry: (entry.name.casefold(), entry.name))
    return {
        "totalCategories": len(ordered),
        "totalApps": sum(entry.count for entry in ordered),
        "categories": [entry.to_dict() for entry in ordered],
    }


def generate(root: Path,
             runner: GitRunner = default_runner,
             now: Optional[int] = None,
             verbose: bool = False) -> Optional[Dict[str, Any]]:
    """Resolve timestamps for every category file; None when there are none."""
    categories = read_category_files(root / RELEASES_DIRNAME)
    if not categories:
        print("[info] no category files found; generate the category files first.")
        return None

    ensure_full_history(root, runner)
    print("\nResolving category timestamps...")
    entries = []
    for category in categories:
        last_updated = resolve_last_updated(category.slug, root, runner, now=now, verbose=verbose)
        entries.append(CategoryEntry(category.name, category.slug, category.count, last_updated))
    return build_index(entries)


def print_summary(index: Dict[str, Any]) -> None:
    print("\nSummary:")
    print(f"  total categories: {index['totalCategories']}")
    print(f"  total apps: {index['totalApps']}")
    print("\nCategory timestamps:")
    for category in index["categories"]:
        print(f"  {category['name']}: {iso_utc(category['lastUpdated'])}")


def main(argv: Optional[List[str]] = None, runner: GitRunner = default_runner) -> None:
    """CLI entry point; exits 1 only when categories.json cannot be written."""
    settings = resolve_settings(parse_args(argv))
    print("Generating categories.json with timestamps...")

    index = generate(settings.root, runner, verbose=settings.verbose)
    if index is None:
        return

    try:
        save_json(settings.output_path, index)
    except OSError as exc:
        print(f"[error] failed to write {settings.output_path}: {exc}")
        sys.exit(1)

    print(f"\nGenerated {INDEX_FILENAME} with {index['totalCategories']} categories")
    print_summary(index)


if __name__ == "__main__":
    main(sys.argv[1:])
