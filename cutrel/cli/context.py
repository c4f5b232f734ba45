from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from cutrel.core.config import Config, load_project_config
from cutrel.core.errors import ErrorCode
from cutrel.core.result import Err
from cutrel.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    project_root: Path
    config: Config
    console: ConsoleProtocol


def build_context(project_dir: Path | None = None) -> CLIContext:
    """Resolve the project root and load its cutrel.toml (if any)."""
    console = RichConsole()
    try:
        root = (project_dir or Path.cwd()).expanduser().resolve()
    except OSError as e:
        console.error(f"invalid project directory: {e}")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    if not root.is_dir():
        console.error(f"project directory not found: {root}")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    config_result = load_project_config(root)
    if isinstance(config_result, Err):
        console.error(config_result.error.message)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    return CLIContext(project_root=root, config=config_result.value, console=console)
