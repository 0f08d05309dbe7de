"""Pull request label housekeeping."""

from .cleanup import LABELS_TO_REMOVE, cleanup_merged_pr, main

__all__ = ["LABELS_TO_REMOVE", "cleanup_merged_pr", "main"]
