"""Scan configuration dataclass."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from k_license.core.classify import (
    DEFAULT_BUILD_FILES,
    DEFAULT_CODE_EXTENSIONS,
    DEFAULT_EXCLUDE_DIRS,
)
from k_license.core.inspector import GENERATED_MARKERS

DEFAULT_TEMPLATES_DIR = Path("../../hack/boilerplate")


@dataclass(frozen=True)
class ScanConfig:
    """Immutable scan configuration.

    Built once from CLI input.  The classification lists default to the
    built-in values but are plain fields so tests can pass their own.
    """

    root: Path = field(default_factory=lambda: Path("."))
    exclude_dirs: frozenset[str] = frozenset(DEFAULT_EXCLUDE_DIRS)
    templates_dir: Path = DEFAULT_TEMPLATES_DIR
    confirm: bool = False
    code_extensions: frozenset[str] = DEFAULT_CODE_EXTENSIONS
    build_files: frozenset[str] = DEFAULT_BUILD_FILES
    generated_markers: tuple[str, ...] = GENERATED_MARKERS
