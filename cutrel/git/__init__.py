"""Git operations.

Usage:
    from cutrel.git import Repository

    repo = Repository(Path("/path/to/project"))
    status = repo.status()
    if status.is_ok() and status.unwrap().is_clean:
        repo.create_tag("v1.0.0", message="Release 1.0.0")
"""

from cutrel.git.repository import (
    GitError,
    GitStatus,
    Repository,
)

__all__ = [
    "GitError",
    "GitStatus",
    "Repository",
]
