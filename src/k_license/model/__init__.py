"""Enums shared across the pipeline and report layers."""

from __future__ import annotations

from enum import Enum


class Action(str, Enum):
    """What the run did (or would do) to a single file."""

    NONE = "none"
    WOULD_MODIFY = "would_modify"
    MODIFIED = "modified"
