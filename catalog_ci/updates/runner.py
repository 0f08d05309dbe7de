"""Entry point for the metadata update check."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

from .checker import check_declaration
from .config import UpdateCheckSettings, parse_args, resolve_settings
from .models import CheckResult, DeclarationError, RunSummary, Verdict
from .report import print_header, print_result, print_summary
from .scanner import find_declaration_files, load_declaration


def process_declaration_file(path: Path, settings: UpdateCheckSettings) -> CheckResult:
    """Load, check and report one metadata.json file."""
    try:
        declaration = load_declaration(path)
    except DeclarationError as exc:
        print(f"[error] processing {path}: {exc}\n")
        return CheckResult(Verdict.ERROR, str(exc))

    if not settings.only_show_updates:
        print_header(declaration)
    result = check_declaration(declaration)
    print_result(result, settings)
    return result


def run(settings: UpdateCheckSettings) -> RunSummary:
    """Check every declaration under the configured root and print the summary."""
    print("Starting metadata update check...\n")

    try:
        paths = find_declaration_files(settings.repositories_dir, settings.declaration_filename)
    except OSError as exc:
        print(f"[error] cannot scan {settings.repositories_dir}: {exc}")
        sys.exit(1)

    print(f"Found {len(paths)} metadata files\n")
    verdicts: List[Verdict] = []
    for path in paths:
        try:
            result = process_declaration_file(path, settings)
        except Exception as exc:
            print(f"[error] processing {path}: {exc}\n")
            result = CheckResult(Verdict.ERROR, str(exc))
        verdicts.append(result.verdict)

    summary = RunSummary.tally(verdicts)
    print_summary(summary)
    return summary


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point; exits non-zero only when the declaration tree cannot be scanned."""
    run(resolve_settings(parse_args(argv)))


if __name__ == "__main__":
    main(sys.argv[1:])
