from __future__ import annotations

from pathlib import Path

import typer

from cutrel.cli.commands._helpers import exit_on_error
from cutrel.cli.context import CLIContext, build_context
from cutrel.core.result import Err
from cutrel.git.repository import Repository
from cutrel.output.console import Style
from cutrel.release.errors import InvalidVersionError
from cutrel.release.orchestrator import ReleaseOrchestrator, ReleaseSettings, ReleaseStage
from cutrel.release.properties import PropertiesFile
from cutrel.release.publisher import CommandPublisher
from cutrel.release.version import parse_version

_PROJECT_DIR_OPTION = typer.Option(
    None,
    "--project-dir",
    "-C",
    help="Project root (defaults to the current directory).",
)


def build_orchestrator(ctx: CLIContext, *, dry_run: bool) -> ReleaseOrchestrator:
    project = ctx.config.project
    release_config = ctx.config.release
    root = ctx.project_root
    return ReleaseOrchestrator(
        store=PropertiesFile(root / project.properties_file, key=project.version_key),
        vcs=Repository(root),
        publisher=CommandPublisher(root, release_config.publish_command),
        changelog=root / project.changelog,
        console=ctx.console,
        settings=ReleaseSettings.from_config(release_config),
        dry_run=dry_run,
    )


def release(
    project_dir: Path | None = _PROJECT_DIR_OPTION,
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Run all checks, print the remaining steps without executing them.",
    ),
) -> None:
    """Release the version in gradle.properties and bump to the next snapshot."""
    ctx = build_context(project_dir)
    if dry_run:
        ctx.console.warning("dry run: no tag, publish or commit will happen")

    orchestrator = build_orchestrator(ctx, dry_run=dry_run)
    result = orchestrator.release()
    if isinstance(result, Err) and orchestrator.stage not in (
        ReleaseStage.IDLE,
        ReleaseStage.VALIDATING,
    ):
        ctx.console.print(f"stopped after stage: {orchestrator.stage}", Style.DIM)
    exit_on_error(result, ctx)


def tag_release(
    version: str | None = typer.Argument(None, help="Version to tag, e.g. 0.3.0."),
    commitish: str = typer.Argument("HEAD", help="Commit to tag."),
    project_dir: Path | None = _PROJECT_DIR_OPTION,
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the git commands only."),
) -> None:
    """Create and push an annotated tag for VERSION at COMMITISH."""
    ctx = build_context(project_dir)
    if dry_run:
        ctx.console.warning(
            "dry run: COMMITISH is not resolved and nothing is validated; "
            "no tag is created or pushed"
        )
    orchestrator = build_orchestrator(ctx, dry_run=dry_run)
    exit_on_error(orchestrator.tag_release(version, commitish), ctx)


def show_version(project_dir: Path | None = _PROJECT_DIR_OPTION) -> None:
    """Show the persisted version and what a release would produce."""
    ctx = build_context(project_dir)
    project = ctx.config.project
    release_config = ctx.config.release

    store = PropertiesFile(ctx.project_root / project.properties_file, key=project.version_key)
    raw = store.read_version()
    if isinstance(raw, Err):
        exit_on_error(raw, ctx)
        return

    version = parse_version(raw.value)
    if version is None:
        exit_on_error(
            Err(InvalidVersionError(version=raw.value, reason="not a MAJOR.MINOR.PATCH version")),
            ctx,
        )
        return

    ctx.console.print(f"{project.version_key}: {version}", Style.BOLD)
    if version.suffix:
        ctx.console.print(
            f"{version.suffix} version, not releasable; "
            f"set {project.version_key}={version.major}.{version.minor}.{version.patch} to release",
            Style.DIM,
        )
        return

    ctx.console.print(f"tag: {version.to_tag(release_config.tag_prefix)}")
    ctx.console.print(f"next: {version.next_snapshot(release_config.snapshot_suffix)}")
