"""Centralized exit-code contract for the CLI.

Code  Meaning
----  -------
  0   Success — run completed (dry run or confirm), whatever was found
  1   Violation — ``--check`` dry run found files missing a header
  2   Error — usage error, missing path, unreadable/unwritable file or template
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
