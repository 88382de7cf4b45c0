"""FileVerdict and ScanReport — the per-file and aggregate run outputs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from . import Action

SCHEMA_VERSION = "scan_report_v1"


@dataclass(frozen=True, slots=True)
class FileVerdict:
    """Immutable outcome for one visited file."""

    path: Path
    in_scope: bool
    already_licensed: bool = False
    generated: bool = False
    action: Action = Action.NONE

    @property
    def eligible(self) -> bool:
        return self.in_scope and not self.generated and not self.already_licensed

    def to_dict(self) -> dict:
        return {
            "path": self.path.as_posix(),
            "in_scope": self.in_scope,
            "already_licensed": self.already_licensed,
            "generated": self.generated,
            "action": self.action.value,
        }


@dataclass
class ScanReport:
    """Aggregate built incrementally by the walker.

    Only the walker appends to it; once ``run_add`` returns the report is
    read-only by convention.
    """

    root: Path
    confirm: bool = False
    verdicts: list[FileVerdict] = field(default_factory=list)
    excluded_dirs: list[Path] = field(default_factory=list)

    def record(self, verdict: FileVerdict) -> None:
        self.verdicts.append(verdict)

    def note_excluded(self, path: Path) -> None:
        self.excluded_dirs.append(path)

    # ── derived views ───────────────────────────────────────────────

    @property
    def changes(self) -> list[FileVerdict]:
        """Verdicts for files that need (dry run) or received (confirm) a header."""
        return [v for v in self.verdicts if v.action is not Action.NONE]

    @property
    def paths(self) -> list[Path]:
        return [v.path for v in self.changes]

    @property
    def count(self) -> int:
        return len(self.changes)

    @property
    def in_scope(self) -> list[Path]:
        return [v.path for v in self.verdicts if v.in_scope]

    @property
    def generated(self) -> list[Path]:
        return [v.path for v in self.verdicts if v.generated]

    @property
    def licensed(self) -> list[Path]:
        return [v.path for v in self.verdicts if v.already_licensed]

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "schema_version": SCHEMA_VERSION,
            "root": self.root.as_posix(),
            "mode": "confirm" if self.confirm else "dry_run",
            "summary": {
                "files_scanned": len(self.verdicts),
                "files_in_scope": len(self.in_scope),
                "files_generated": len(self.generated),
                "files_licensed": len(self.licensed),
                "files_to_modify": self.count,
            },
            "changes": [p.as_posix() for p in self.paths],
            "excluded_dirs": [p.as_posix() for p in self.excluded_dirs],
            "verdicts": [v.to_dict() for v in self.verdicts],
        }
