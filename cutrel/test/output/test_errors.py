from __future__ import annotations

from pathlib import Path

import pytest

from cutrel.core.errors import ErrorCode
from cutrel.git.repository import GitStatus
from cutrel.output.console import MockConsole, Style
from cutrel.output.errors import print_release_error, release_error_exit_code
from cutrel.release.errors import (
    CommandFailureError,
    ConfigWriteError,
    DirtyWorkingTreeError,
    InvalidVersionError,
    MissingChangelogEntryError,
    MissingParameterError,
    ReleaseError,
)


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (InvalidVersionError(version="0.1.0-SNAPSHOT", reason="snapshot"), ErrorCode.USER_ERROR),
        (
            MissingChangelogEntryError(version="0.1.0", changelog=Path("CHANGELOG.md")),
            ErrorCode.USER_ERROR,
        ),
        (MissingParameterError(parameter="version"), ErrorCode.USER_ERROR),
        (DirtyWorkingTreeError(status=" M a\n"), ErrorCode.ENV_ERROR),
        (CommandFailureError(command="git push", returncode=1), ErrorCode.RELEASE_ERROR),
        (ConfigWriteError(path=Path("gradle.properties"), reason="x"), ErrorCode.IO_ERROR),
    ],
)
def test_exit_codes(error: ReleaseError, code: ErrorCode) -> None:
    assert release_error_exit_code(error) == int(code)


def test_print_error_with_hint() -> None:
    console = MockConsole()
    error = MissingChangelogEntryError(version="0.1.0", changelog=Path("/p/CHANGELOG.md"))

    print_release_error(error, console)

    assert console.outputs[0].style == Style.ERROR
    assert console.messages[0] == "error: CHANGELOG.md has no '## [0.1.0]' section"
    assert console.outputs[1].style == Style.DIM
    assert console.messages[1].startswith("hint: Add a '## [0.1.0]' section to CHANGELOG.md")


def test_print_error_without_hint() -> None:
    console = MockConsole()

    print_release_error(CommandFailureError(command="git push origin HEAD", returncode=1), console)

    assert console.messages == ["error: `git push origin HEAD` failed (exit 1)"]


def test_dirty_tree_message_lists_changes() -> None:
    status = GitStatus(raw=" M gradle.properties\n")
    error = DirtyWorkingTreeError(status=status.raw)

    assert error.message.endswith(" M gradle.properties")
    assert error.hint
