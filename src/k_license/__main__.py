"""CLI entry-point for k_license.

Usage:
    python -m k_license add [--path DIR] [--templates DIR] [-e DIR,DIR ...]
    python -m k_license add --confirm [--year YYYY]
    python -m k_license add --check [--json]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from k_license import __version__
from k_license.api import add_headers
from k_license.core.classify import DEFAULT_EXCLUDE_DIRS
from k_license.core.config import DEFAULT_TEMPLATES_DIR
from k_license.errors import LicenseToolError
from k_license.model.report import ScanReport
from k_license.utils.exit_codes import ExitCode
from k_license.utils.json_norm import stable_json_dump


def _comma_list(value: str) -> list[str]:
    """Split ``a,b,c`` into names; repeated flags accumulate."""
    return [part.strip() for part in value.split(",") if part.strip()]


def _print_human(report: ScanReport) -> None:
    """Print the run summary to stderr."""
    if report.confirm:
        print(f"Modified {report.count} files", file=sys.stderr)
        return

    print(
        'DRY RUN: No file changes will be made! To make file modifications, '
        'rerun the command with "--confirm" flag',
        file=sys.stderr,
    )
    if report.count == 0:
        print(
            "All files have appropriate License Headers. No changes required.",
            file=sys.stderr,
        )
        return
    print(f"{report.count} files will be modified to add License Headers", file=sys.stderr)
    print("Listing files to be modified:", file=sys.stderr)
    for path in report.paths:
        print(path.as_posix(), file=sys.stderr)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="k-license",
        description="Tool for adding license headers.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    sub = p.add_subparsers(dest="command")

    # ── add subcommand ──────────────────────────────────────────────
    add_p = sub.add_parser(
        "add",
        help="Add headers to files.",
    )
    add_p.add_argument(
        "--templates",
        type=Path,
        default=DEFAULT_TEMPLATES_DIR,
        help="Directory containing license templates (boilerplate.<type>.txt).",
    )
    add_p.add_argument(
        "-e",
        "--exclude",
        type=_comma_list,
        action="extend",
        default=None,
        metavar="DIRS",
        help=(
            "Comma-separated directory names to exclude; may be repeated. "
            f"Default: {','.join(DEFAULT_EXCLUDE_DIRS)}"
        ),
    )
    add_p.add_argument(
        "--path",
        type=Path,
        default=Path("."),
        help="Root directory to scan. Defaults to the current directory.",
    )
    mode = add_p.add_mutually_exclusive_group()
    mode.add_argument(
        "--confirm",
        action="store_true",
        default=False,
        help="Actually add license boilerplate to files.",
    )
    mode.add_argument(
        "--check",
        action="store_true",
        default=False,
        help="Dry run that exits 1 when any file is missing a header.",
    )
    add_p.add_argument(
        "--year",
        default=None,
        help="Year substituted for YEAR in templates. Defaults to the current year.",
    )
    add_p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print the full scan report JSON to stdout.",
    )
    add_p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Verbose output.",
    )
    return p


def _handle_add(args: argparse.Namespace) -> int:
    """Dispatch ``k-license add``."""
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )

    target: Path = args.path
    if not target.exists():
        print(f"error: path does not exist: {target}", file=sys.stderr)
        return ExitCode.ERROR

    try:
        report, report_dict = add_headers(
            target,
            templates_dir=args.templates,
            exclude=args.exclude,
            confirm=args.confirm,
            year=args.year,
        )
    except LicenseToolError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return ExitCode.ERROR

    _print_human(report)

    # Optionally dump full JSON to stdout (pipe-friendly)
    if args.json_out:
        stable_json_dump(report_dict, sys.stdout)

    if args.check and report.count:
        return ExitCode.VIOLATION
    return ExitCode.SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (0 = ok, 1 = --check found files, 2 = error)."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "add":
        return _handle_add(args)

    parser.print_help(sys.stderr)
    return ExitCode.ERROR


if __name__ == "__main__":
    raise SystemExit(main())
