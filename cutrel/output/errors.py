"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cutrel.core.errors import ErrorCode
from cutrel.output.console import Style
from cutrel.release.errors import (
    CommandFailureError,
    ConfigWriteError,
    DirtyWorkingTreeError,
    InvalidVersionError,
    MissingChangelogEntryError,
    MissingParameterError,
    ReleaseError,
)

if TYPE_CHECKING:
    from cutrel.output.console import ConsoleProtocol

__all__ = ["print_release_error", "release_error_exit_code"]


def print_release_error(error: ReleaseError, console: ConsoleProtocol) -> None:
    """Print a release error and its hint, if any."""
    console.error(error.message)
    if error.hint:
        console.print(f"hint: {error.hint}", Style.DIM)


def release_error_exit_code(error: ReleaseError) -> int:
    match error:
        case InvalidVersionError() | MissingChangelogEntryError() | MissingParameterError():
            return int(ErrorCode.USER_ERROR)
        case DirtyWorkingTreeError():
            return int(ErrorCode.ENV_ERROR)
        case CommandFailureError():
            return int(ErrorCode.RELEASE_ERROR)
        case ConfigWriteError():
            return int(ErrorCode.IO_ERROR)
    # Fallback for exhaustiveness
    return int(ErrorCode.RELEASE_ERROR)
