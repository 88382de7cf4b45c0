"""Runner — walks the tree, classifies each file and builds a ScanReport."""

from __future__ import annotations

import datetime
import logging
import os
from collections.abc import Callable, Collection
from pathlib import Path
from typing import Iterator

from k_license.core.classify import is_excluded_dir, is_in_scope
from k_license.core.config import ScanConfig
from k_license.core.injector import inject_header
from k_license.core.inspector import Detector, SubstringDetector, inspect_file
from k_license.core.templates import DEFAULT_CATALOG, TemplateCatalog
from k_license.errors import TraversalError
from k_license.model import Action
from k_license.model.report import FileVerdict, ScanReport

_logger = logging.getLogger(__name__)


def current_year() -> str:
    return str(datetime.date.today().year)


def _sorted_entries(directory: Path) -> list[os.DirEntry[str]]:
    try:
        with os.scandir(directory) as it:
            return sorted(it, key=lambda e: e.name)
    except OSError as exc:
        raise TraversalError(directory, exc.strerror or str(exc)) from exc


def iter_candidate_files(
    root: Path,
    exclude_dirs: Collection[str],
    *,
    on_excluded: Callable[[Path], None] | None = None,
) -> Iterator[Path]:
    """Yield every non-directory entry under *root*, depth-first in name order.

    A directory whose base name is in *exclude_dirs* is pruned with its
    whole subtree.  The root itself is never pruned and symlinked
    directories are not followed; symlinks (dangling ones included) are
    yielded like files, so reading them is left to the inspector.
    Listing failures raise ``TraversalError``.
    """
    if not root.is_dir():
        if not root.exists():
            raise TraversalError(root, "no such file or directory")
        yield root
        return
    yield from _walk(root, exclude_dirs, on_excluded)


def _walk(
    directory: Path,
    exclude_dirs: Collection[str],
    on_excluded: Callable[[Path], None] | None,
) -> Iterator[Path]:
    for entry in _sorted_entries(directory):
        path = directory / entry.name
        if entry.is_dir(follow_symlinks=False):
            if is_excluded_dir(entry.name, exclude_dirs):
                _logger.info("Skipping %s as it is part of the exclude list", path)
                if on_excluded is not None:
                    on_excluded(path)
                continue
            yield from _walk(path, exclude_dirs, on_excluded)
        else:
            yield path


def run_add(
    config: ScanConfig,
    *,
    detector: Detector | None = None,
    catalog: TemplateCatalog = DEFAULT_CATALOG,
    year: str | None = None,
) -> ScanReport:
    """Scan ``config.root`` and add (or, in dry-run mode, list) missing headers.

    This is the **only** entry point that wires classify → inspect → inject.
    The first error aborts the walk and propagates to the caller.
    """
    detector = detector or SubstringDetector(config.generated_markers)
    year = year or current_year()
    report = ScanReport(root=config.root, confirm=config.confirm)

    files = iter_candidate_files(
        config.root,
        config.exclude_dirs,
        on_excluded=report.note_excluded,
    )
    for path in files:
        if not is_in_scope(
            path,
            extensions=config.code_extensions,
            build_files=config.build_files,
        ):
            report.record(FileVerdict(path=path, in_scope=False))
            continue

        inspection = inspect_file(path, detector)
        if inspection.generated:
            _logger.info("Skipping %s since it is an autogenerated file", path)
            report.record(FileVerdict(path=path, in_scope=True, generated=True))
            continue
        if inspection.licensed:
            _logger.info("Skipping %s, license header already present", path)
            report.record(FileVerdict(path=path, in_scope=True, already_licensed=True))
            continue

        action = Action.WOULD_MODIFY
        if config.confirm:
            if inject_header(path, config.templates_dir, year, catalog=catalog):
                _logger.info("Modified %s", path)
                action = Action.MODIFIED
            else:
                action = Action.NONE
        report.record(FileVerdict(path=path, in_scope=True, action=action))

    return report
