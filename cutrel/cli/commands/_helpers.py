"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import typer

from cutrel.core.result import Err, Result
from cutrel.output.errors import print_release_error, release_error_exit_code
from cutrel.release.errors import ReleaseError

if TYPE_CHECKING:
    from cutrel.cli.context import CLIContext


T = TypeVar("T")


def exit_on_error(result: Result[T, ReleaseError], ctx: CLIContext) -> None:
    """Print the error and exit with its code if result is Err, otherwise return."""
    if isinstance(result, Err):
        print_release_error(result.error, ctx.console)
        raise typer.Exit(code=release_error_exit_code(result.error))
