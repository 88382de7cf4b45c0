"""
k_license.api
=============

Programmatic entrypoint for using k_license without the CLI.

Goals:
  - No argparse / CLI dependencies
  - Stable, JSON-friendly output matching ``scan_report.schema.json``

Usage::

    from k_license.api import add_headers

    report, report_dict = add_headers(".", templates_dir="hack/boilerplate")
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Optional

from k_license.contracts.load import validate_instance
from k_license.core.classify import DEFAULT_EXCLUDE_DIRS
from k_license.core.config import DEFAULT_TEMPLATES_DIR, ScanConfig
from k_license.core.inspector import Detector
from k_license.core.runner import run_add
from k_license.model.report import ScanReport

REPORT_SCHEMA = "scan_report.schema.json"


def _to_path(p: str | Path) -> Path:
    return p if isinstance(p, Path) else Path(p)


def add_headers(
    root: str | Path = ".",
    *,
    templates_dir: str | Path = DEFAULT_TEMPLATES_DIR,
    exclude: Optional[Iterable[str]] = None,
    confirm: bool = False,
    year: Optional[str] = None,
    detector: Optional[Detector] = None,
) -> tuple[ScanReport, dict[str, Any]]:
    """Run the header pipeline programmatically.

    Parameters
    ----------
    root:
        File or directory to scan.
    templates_dir:
        Directory holding ``boilerplate.<type>.txt`` templates.
    exclude:
        Directory base names to prune.  Replaces the default list.
    confirm:
        If False (default) nothing is written; the report lists the files
        that would be modified.
    year:
        Value substituted for ``YEAR``.  Defaults to the current year.
    detector:
        Override the default substring detector.

    Returns
    -------
    ``(ScanReport, report_dict)``
        The report and its schema-validated JSON dict.

    Raises
    ------
    LicenseToolError
        On the first traversal, read, template or write failure.
    """
    config = ScanConfig(
        root=_to_path(root),
        exclude_dirs=frozenset(DEFAULT_EXCLUDE_DIRS if exclude is None else exclude),
        templates_dir=_to_path(templates_dir),
        confirm=confirm,
    )
    report = run_add(config, detector=detector, year=year)
    report_dict = report.to_dict()
    validate_instance(report_dict, REPORT_SCHEMA)
    return report, report_dict
