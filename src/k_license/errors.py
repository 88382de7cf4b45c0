"""Exception hierarchy for the header pipeline.

Every failure is fatal to the current run: the walker never retries and
never continues past a file it could not read or write.  The CLI maps any
``LicenseToolError`` to ``ExitCode.ERROR``.
"""

from __future__ import annotations

from pathlib import Path


class LicenseToolError(RuntimeError):
    """Base class for all pipeline failures tied to a filesystem path."""

    action = "process"

    def __init__(self, path: Path | str, reason: str | None = None) -> None:
        self.path = Path(path)
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"cannot {self.action} {self.path.as_posix()}{detail}")


class TraversalError(LicenseToolError):
    """A directory under the scan root could not be listed."""

    action = "list directory"


class InspectionError(LicenseToolError):
    """A candidate file could not be read for inspection."""

    action = "inspect"


class TemplateReadError(LicenseToolError):
    """The resolved template file is missing or unreadable."""

    action = "read template"


class InjectionError(LicenseToolError):
    """Reading or rewriting the target file failed during injection."""

    action = "add header to"
