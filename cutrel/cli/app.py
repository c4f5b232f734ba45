from __future__ import annotations

import typer

from cutrel import __version__
from cutrel.cli.commands.release_cmd import release, show_version, tag_release

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


app.command()(release)
app.command("tag-release")(tag_release)
# Name of the equivalent Gradle task, kept for muscle memory.
app.command("tagRelease", hidden=True)(tag_release)
app.command("version")(show_version)


def _print_version(value: bool) -> None:
    # Eager, so `cutrel --version` works without a subcommand.
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        is_eager=True,
        callback=_print_version,
    ),
) -> None:
    """Cut releases of a Gradle project: tag, publish, bump to the next snapshot."""


def main() -> None:
    app()
