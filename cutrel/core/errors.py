"""Exit codes for CLI commands.

The numeric values are part of the CLI contract and should remain stable:
- 0: Success
- 1: User error (bad version, missing argument, missing changelog entry)
- 2: Environment error (dirty working tree, invalid cutrel.toml)
- 3: Release error (git or publish command failed)
- 5: I/O error (properties file could not be read or rewritten)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    RELEASE_ERROR = 3
    IO_ERROR = 5
