"""Subprocess execution with Result-based error handling.

One entry point for every external command. Output is always captured;
``stream=True`` additionally echoes it to the terminal line by line, which
is what long-running interactive commands (the Gradle publish) need.

Usage:
    result = run(["git", "status", "--porcelain"], cwd=project_root)
    match result:
        case Ok(output):
            print(output.stdout)
        case Err(error):
            print(f"{error.command_line} failed (exit {error.returncode})")
"""

from __future__ import annotations

import shlex
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from cutrel.core.result import Err, Ok, Result

__all__ = ["CommandOutput", "ProcessError", "run"]


@dataclass(frozen=True, slots=True)
class CommandOutput:
    """Captured result of a finished command.

    When streamed, stderr is merged into stdout and ``stderr`` is empty.
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str = ""


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The command that was executed.
        returncode: Exit code, or -1 if the process could not start.
        stdout: Standard output (may be empty).
        stderr: Standard error (contains error details).
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    @property
    def command_line(self) -> str:
        return shlex.join(self.command)

    @property
    def output(self) -> str:
        """Best available diagnostic text."""
        return self.stderr.strip() or self.stdout.strip()


def run(
    cmd: list[str],
    cwd: Path,
    env: dict[str, str] | None = None,
    *,
    stream: bool = False,
) -> Result[CommandOutput, ProcessError]:
    """Execute a command and return its captured output or an error.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory for the command.
        env: Environment variables (uses current env if None).
        stream: Also echo output live to stdout while capturing it.

    Returns:
        Ok(CommandOutput) on exit code 0, Err(ProcessError) otherwise.
    """
    if stream:
        return _run_streaming(cmd, cwd, env, sink=sys.stdout)

    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            env=env,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, stdout="", stderr=str(e)))

    if proc.returncode != 0:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=proc.returncode,
                stdout=proc.stdout,
                stderr=proc.stderr,
            )
        )

    return Ok(
        CommandOutput(command=tuple(cmd), returncode=0, stdout=proc.stdout, stderr=proc.stderr)
    )


def _run_streaming(
    cmd: list[str],
    cwd: Path,
    env: dict[str, str] | None,
    *,
    sink: TextIO,
) -> Result[CommandOutput, ProcessError]:
    lines: list[str] = []
    try:
        with subprocess.Popen(
            cmd,
            cwd=str(cwd),
            env=env,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
        ) as proc:
            assert proc.stdout is not None
            for line in proc.stdout:
                lines.append(line)
                sink.write(line)
                sink.flush()
            returncode = proc.wait()
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, stdout="", stderr=str(e)))

    stdout = "".join(lines)
    if returncode != 0:
        return Err(
            ProcessError(command=tuple(cmd), returncode=returncode, stdout=stdout, stderr="")
        )
    return Ok(CommandOutput(command=tuple(cmd), returncode=0, stdout=stdout))
