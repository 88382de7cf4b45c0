"""Template resolver — ordered dispatch from file type to boilerplate name."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_TEMPLATE = "boilerplate.tf.txt"


@dataclass(frozen=True, slots=True)
class TemplateEntry:
    """*pattern* is matched as an exact base name or as a path suffix."""

    pattern: str
    template_name: str

    def matches(self, path: str) -> bool:
        return path.endswith(self.pattern) or os.path.basename(path) == self.pattern


@dataclass(frozen=True)
class TemplateCatalog:
    """Ordered (pattern, template) table; first match wins."""

    entries: tuple[TemplateEntry, ...]
    default: str = DEFAULT_TEMPLATE

    def resolve(self, path: Path | str) -> str:
        """Return the template file name for *path*.  Never fails."""
        p = os.fspath(path)
        for entry in self.entries:
            if entry.matches(p):
                return entry.template_name
        return self.default


# Order is part of the contract: shell, Makefile, Dockerfile, Python, Go.
DEFAULT_CATALOG = TemplateCatalog(
    entries=(
        TemplateEntry(".sh", "boilerplate.sh.txt"),
        TemplateEntry("Makefile", "boilerplate.Makefile.txt"),
        TemplateEntry("Dockerfile", "boilerplate.Dockerfile.txt"),
        TemplateEntry(".py", "boilerplate.py.txt"),
        TemplateEntry(".go", "boilerplate.go.txt"),
    ),
)


def resolve_template(path: Path | str, catalog: TemplateCatalog = DEFAULT_CATALOG) -> str:
    return catalog.resolve(path)
