"""Records exchanged by the update check: declarations, revisions, verdicts."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from catalog_ci.files import one_line

FileEntry = Union[str, Dict[str, Any]]


class DeclarationError(ValueError):
    """A metadata.json file is unreadable as a declaration."""


@dataclass(frozen=True)
class Declaration:
    """One tracked upstream repository, as recorded in metadata.json."""

    name: str
    owner: str
    repo: str
    commit: str
    path: str = ""
    files: Tuple[FileEntry, ...] = ()

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    @classmethod
    def from_dict(cls, data: Any) -> "Declaration":
        """Validate a decoded metadata.json document."""
        if not isinstance(data, dict):
            raise DeclarationError(f"expected a JSON object, got {type(data).__name__}")

        required = {}
        for key in ("owner", "repo", "commit"):
            value = data.get(key)
            if not isinstance(value, str) or not value.strip():
                raise DeclarationError(f"missing or empty '{key}'")
            required[key] = value.strip()

        path = data.get("path") or ""
        if not isinstance(path, str):
            raise DeclarationError("'path' must be a string")

        files = data.get("files")
        entries = tuple(files) if isinstance(files, list) else ()
        name = data.get("name") or f"{required['owner']}/{required['repo']}"
        return cls(
            name=str(name),
            owner=required["owner"],
            repo=required["repo"],
            commit=required["commit"],
            path=path,
            files=entries,
        )


@dataclass(frozen=True)
class LatestCommit:
    sha: str
    date: Optional[str]
    message: str

    @property
    def headline(self) -> str:
        return one_line(self.message)


@dataclass(frozen=True)
class FileChange:
    filename: str
    status: str
    additions: int = 0
    deletions: int = 0
    patch: Optional[str] = None


@dataclass(frozen=True)
class ChangeSummary:
    """Compare result narrowed to the files a declaration tracks."""

    total_changes: int
    relevant_changes: int
    files: Tuple[FileChange, ...] = ()


class Verdict(Enum):
    UP_TO_DATE = "up-to-date"
    UPDATE_AVAILABLE = "update-available"
    ERROR = "error"


@dataclass(frozen=True)
class CheckResult:
    verdict: Verdict
    reason: str = ""
    latest: Optional[LatestCommit] = None
    changes: Optional[ChangeSummary] = None
    declaration: Optional[Declaration] = None


@dataclass(frozen=True)
class RunSummary:
    """Immutable run counters; up_to_date is derived so the totals always agree."""

    checked: int = 0
    available: int = 0
    errors: int = 0

    @property
    def up_to_date(self) -> int:
        return self.checked - self.available - self.errors

    def add(self, verdict: Verdict) -> "RunSummary":
        return replace(
            self,
            checked=self.checked + 1,
            available=self.available + (verdict is Verdict.UPDATE_AVAILABLE),
            errors=self.errors + (verdict is Verdict.ERROR),
        )

    @classmethod
    def tally(cls, verdicts: Iterable[Verdict]) -> "RunSummary":
        summary = cls()
        for verdict in verdicts:
            summary = summary.add(verdict)
        return summary


__all__ = [
    "FileEntry",
    "DeclarationError",
    "Declaration",
    "LatestCommit",
    "FileChange",
    "ChangeSummary",
    "Verdict",
    "CheckResult",
    "RunSummary",
]
