"""Detect catalog declarations whose tracked upstream files have changed."""

from .checker import check_declaration, tracked_paths
from .runner import main, process_declaration_file, run

__all__ = ["check_declaration", "tracked_paths", "main", "process_declaration_file", "run"]
