"""Classifier — decide which files need a header and which dirs to prune."""

from __future__ import annotations

import os
from collections.abc import Collection
from pathlib import Path

# Source files recognized by (lowercased) extension.
DEFAULT_CODE_EXTENSIONS: frozenset[str] = frozenset({
    ".go",
    ".c",
    ".h",
    ".ipynb",
    ".py",
    ".java",
    ".cpp",
    ".sh",
})

# Build files recognized by exact, case-sensitive base name.
DEFAULT_BUILD_FILES: frozenset[str] = frozenset({
    "Makefile",
    "Dockerfile",
})

# Directory base names pruned from the walk.  Entries containing a slash
# never equal a base name; they are kept for parity with existing configs.
DEFAULT_EXCLUDE_DIRS: tuple[str, ...] = (
    "external/bazel_tools",
    ".git",
    "node_modules",
    "_output",
    "third_party",
    "vendor",
    "verify/boilerplate/test",
)


def file_extension(path: Path | str) -> str:
    """Return the suffix from the last dot of the base name, dot included.

    Unlike ``os.path.splitext`` a leading dot counts, so ``.go`` has the
    extension ``.go``.
    """
    name = os.path.basename(os.fspath(path))
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def is_code_file(
    path: Path | str,
    extensions: Collection[str] = DEFAULT_CODE_EXTENSIONS,
) -> bool:
    return file_extension(path).lower() in extensions


def is_build_file(
    path: Path | str,
    build_files: Collection[str] = DEFAULT_BUILD_FILES,
) -> bool:
    return os.path.basename(os.fspath(path)) in build_files


def is_in_scope(
    path: Path | str,
    *,
    extensions: Collection[str] = DEFAULT_CODE_EXTENSIONS,
    build_files: Collection[str] = DEFAULT_BUILD_FILES,
) -> bool:
    """Return True if *path* is a code or build file that should carry a header."""
    return is_code_file(path, extensions) or is_build_file(path, build_files)


def is_excluded_dir(name: str, excluded: Collection[str]) -> bool:
    """Return True if the directory base *name* is in the *excluded* set.

    Only the base name is compared, never the full path.
    """
    return name in excluded
