"""Git repository client.

The Repository class wraps the handful of git commands a release needs.
All operations return Result types; nothing here raises for a failing
git command.

Usage:
    repo = Repository(Path("/path/to/project"))

    match repo.status():
        case Ok(status) if status.is_clean:
            print("Working tree clean")
        case Ok(status):
            print(status.raw)
        case Err(e):
            print(f"Error: {e.message}")
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from pathlib import Path

from cutrel.core.result import Err, Ok, Result
from cutrel.platform.process import run as run_process

__all__ = [
    "GitError",
    "GitStatus",
    "Repository",
]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: Full command line that failed
        message: Error message (git's stderr when available)
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


@dataclass(frozen=True, slots=True)
class GitStatus:
    """Working tree status.

    ``raw`` is the unmodified porcelain output, shown to the operator when
    the tree is dirty.
    """

    raw: str = ""

    @property
    def is_clean(self) -> bool:
        """True if the working tree has no changes."""
        return self.raw.strip() == ""


class Repository:
    """Git repository abstraction.

    Attributes:
        path: Path to the repository root
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def status(self) -> Result[GitStatus, GitError]:
        """Get working tree status via ``git status --porcelain``."""
        result = self._run(["status", "--porcelain"])
        if isinstance(result, Err):
            return result
        return Ok(GitStatus(raw=result.value))

    def create_tag(
        self, name: str, *, message: str, commitish: str = "HEAD"
    ) -> Result[None, GitError]:
        """Create an annotated tag locally."""
        result = self._run(["tag", "-a", name, "-m", message, commitish])
        return result if isinstance(result, Err) else Ok(None)

    def delete_tag(self, name: str) -> Result[None, GitError]:
        """Delete a local tag."""
        result = self._run(["tag", "-d", name])
        return result if isinstance(result, Err) else Ok(None)

    def push_tag(self, name: str, *, remote: str) -> Result[None, GitError]:
        result = self._run(["push", remote, f"refs/tags/{name}"])
        return result if isinstance(result, Err) else Ok(None)

    def add(self, paths: list[Path]) -> Result[None, GitError]:
        rels = [str(p.relative_to(self.path)) if p.is_absolute() else str(p) for p in paths]
        result = self._run(["add", "--", *rels])
        return result if isinstance(result, Err) else Ok(None)

    def commit(self, message: str) -> Result[None, GitError]:
        result = self._run(["commit", "-m", message])
        return result if isinstance(result, Err) else Ok(None)

    def push(self, *, remote: str) -> Result[None, GitError]:
        """Push the current branch to its counterpart on ``remote``."""
        result = self._run(["push", remote, "HEAD"])
        return result if isinstance(result, Err) else Ok(None)

    def _run(self, args: list[str]) -> Result[str, GitError]:
        """Run a git command in this repository, returning stdout."""
        cmd = ["git", "-C", str(self.path), *args]
        # No timeout: a signed tag may wait on a pinentry prompt.
        result = run_process(cmd, cwd=self.path)
        match result:
            case Err(e):
                return Err(
                    GitError(
                        command=shlex.join(["git", *args]),
                        message=e.output or f"git {args[0]} failed",
                        returncode=e.returncode,
                    )
                )
            case Ok(output):
                return Ok(output.stdout)
