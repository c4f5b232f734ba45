"""Error payloads for release operations.

Each error is a frozen dataclass returned inside ``Err``. All of them expose
``message`` and ``hint`` so the CLI can render any of them the same way;
``cutrel.output.errors`` maps each type to an exit code.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

__all__ = [
    "CommandFailureError",
    "ConfigWriteError",
    "DirtyWorkingTreeError",
    "InvalidVersionError",
    "MissingChangelogEntryError",
    "MissingParameterError",
    "ReleaseError",
]


@dataclass(frozen=True, slots=True)
class InvalidVersionError:
    version: str
    reason: str
    hint: str | None = None

    @property
    def message(self) -> str:
        return f"cannot release version '{self.version}': {self.reason}"


@dataclass(frozen=True, slots=True)
class MissingChangelogEntryError:
    version: str
    changelog: Path
    file_missing: bool = False

    @property
    def message(self) -> str:
        if self.file_missing:
            return f"changelog not found: {self.changelog}"
        return f"{self.changelog.name} has no '## [{self.version}]' section"

    @property
    def hint(self) -> str | None:
        name = self.changelog.name
        return f"Add a '## [{self.version}]' section to {name}, commit it, then retry."


@dataclass(frozen=True, slots=True)
class DirtyWorkingTreeError:
    """Uncommitted changes block the release.

    ``status`` is the raw ``git status --porcelain`` output.
    """

    status: str

    @property
    def message(self) -> str:
        return "working tree has uncommitted changes:\n" + self.status.rstrip()

    @property
    def hint(self) -> str | None:
        return "Commit or stash your changes, then retry."


@dataclass(frozen=True, slots=True)
class CommandFailureError:
    """An external command exited non-zero.

    Attributes:
        command: Command line as typed by an operator
        returncode: Exit code (-1 when the process could not start)
        output: Captured diagnostic output, possibly empty
        hint: What the operator should reconcile by hand, if anything
    """

    command: str
    returncode: int
    output: str = ""
    hint: str | None = None

    @property
    def message(self) -> str:
        msg = f"`{self.command}` failed (exit {self.returncode})"
        if self.output:
            msg += f"\n{self.output}"
        return msg


@dataclass(frozen=True, slots=True)
class ConfigWriteError:
    path: Path
    reason: str

    @property
    def message(self) -> str:
        return f"cannot update {self.path.name}: {self.reason}"

    @property
    def hint(self) -> str | None:
        return str(self.path)


@dataclass(frozen=True, slots=True)
class MissingParameterError:
    parameter: str
    usage: str | None = None

    @property
    def message(self) -> str:
        return f"missing required parameter: {self.parameter}"

    @property
    def hint(self) -> str | None:
        return self.usage


ReleaseError = (
    InvalidVersionError
    | MissingChangelogEntryError
    | DirtyWorkingTreeError
    | CommandFailureError
    | ConfigWriteError
    | MissingParameterError
)
