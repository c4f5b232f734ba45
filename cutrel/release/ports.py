"""Collaborators the release orchestrator depends on.

Production wiring uses ``PropertiesFile``, ``cutrel.git.Repository`` and
``CommandPublisher``; tests substitute in-memory fakes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from cutrel.core.result import Result
from cutrel.git.repository import GitError, GitStatus
from cutrel.platform.process import ProcessError
from cutrel.release.errors import ConfigWriteError


class ConfigStore(Protocol):
    """Persisted project version."""

    @property
    def path(self) -> Path: ...

    def read_version(self) -> Result[str, ConfigWriteError]: ...

    def check_writable(self, version: str) -> Result[None, ConfigWriteError]: ...

    def write_version(self, old: str, new: str) -> Result[None, ConfigWriteError]: ...


class VersionControl(Protocol):
    def status(self) -> Result[GitStatus, GitError]: ...

    def create_tag(
        self, name: str, *, message: str, commitish: str = "HEAD"
    ) -> Result[None, GitError]: ...

    def delete_tag(self, name: str) -> Result[None, GitError]: ...

    def push_tag(self, name: str, *, remote: str) -> Result[None, GitError]: ...

    def add(self, paths: list[Path]) -> Result[None, GitError]: ...

    def commit(self, message: str) -> Result[None, GitError]: ...

    def push(self, *, remote: str) -> Result[None, GitError]: ...


class Publisher(Protocol):
    """Publishes the current checkout as a release artifact."""

    @property
    def command(self) -> tuple[str, ...]: ...

    def publish(self) -> Result[None, ProcessError]: ...
