"""Regenerate the categories.json index with git-derived timestamps."""

from .generator import build_index, generate, main, read_category_files
from .timestamps import resolve_last_updated

__all__ = ["build_index", "generate", "main", "read_category_files", "resolve_last_updated"]
