from __future__ import annotations

from pathlib import Path

from cutrel.core.result import Err, Ok, Result
from cutrel.platform.process import ProcessError
from cutrel.platform.process import run as run_process


class CommandPublisher:
    """Publisher that delegates to the build tool.

    The command streams to the terminal: Gradle prints signing and upload
    progress the operator wants to see, and it may prompt for a GPG
    passphrase.
    """

    def __init__(self, project_root: Path, command: tuple[str, ...]) -> None:
        self.project_root = project_root
        self._command = command

    @property
    def command(self) -> tuple[str, ...]:
        return self._command

    def publish(self) -> Result[None, ProcessError]:
        result = run_process(list(self._command), cwd=self.project_root, stream=True)
        if isinstance(result, Err):
            return result
        return Ok(None)
