"""Release lifecycle: validation, tagging, publishing and version bumping."""

from __future__ import annotations

from cutrel.release.errors import (
    CommandFailureError,
    ConfigWriteError,
    DirtyWorkingTreeError,
    InvalidVersionError,
    MissingChangelogEntryError,
    MissingParameterError,
    ReleaseError,
)
from cutrel.release.orchestrator import (
    ReleaseOrchestrator,
    ReleaseOutcome,
    ReleaseSettings,
    ReleaseStage,
    TagOutcome,
)
from cutrel.release.version import ReleaseVersion, parse_version

__all__ = [
    # errors
    "CommandFailureError",
    "ConfigWriteError",
    "DirtyWorkingTreeError",
    "InvalidVersionError",
    "MissingChangelogEntryError",
    "MissingParameterError",
    "ReleaseError",
    # orchestration
    "ReleaseOrchestrator",
    "ReleaseOutcome",
    "ReleaseSettings",
    "ReleaseStage",
    "TagOutcome",
    # versions
    "ReleaseVersion",
    "parse_version",
]
