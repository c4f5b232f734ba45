"""Typed configuration loading for ``cutrel.toml``.

The file is optional. Every key has a default matching a stock Gradle
project that publishes with the vanniktech maven-publish plugin.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_str_list, get_table

__all__ = [
    "CONFIG_FILENAME",
    "Config",
    "ConfigError",
    "ProjectConfig",
    "ReleaseConfig",
    "load_config",
    "load_project_config",
]

CONFIG_FILENAME = "cutrel.toml"

DEFAULT_PROPERTIES_FILE = "gradle.properties"
DEFAULT_VERSION_KEY = "version"
DEFAULT_CHANGELOG = "CHANGELOG.md"

DEFAULT_SNAPSHOT_SUFFIX = "-SNAPSHOT"
DEFAULT_TAG_PREFIX = "v"
DEFAULT_REMOTE = "origin"
DEFAULT_PUBLISH_COMMAND = ("./gradlew", "publishAndReleaseToMavenCentral")
DEFAULT_COMMIT_MESSAGE = "Prepare next development version {version}"
DEFAULT_TAG_MESSAGE = "Release {version}"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when cutrel.toml cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ProjectConfig:
    """Files of the project being released, relative to its root."""

    properties_file: str = DEFAULT_PROPERTIES_FILE
    version_key: str = DEFAULT_VERSION_KEY
    changelog: str = DEFAULT_CHANGELOG


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """How a release is tagged, published and followed up.

    ``commit_message`` and ``tag_message`` are ``str.format`` templates
    receiving ``version``.
    """

    snapshot_suffix: str = DEFAULT_SNAPSHOT_SUFFIX
    tag_prefix: str = DEFAULT_TAG_PREFIX
    remote: str = DEFAULT_REMOTE
    publish_command: tuple[str, ...] = DEFAULT_PUBLISH_COMMAND
    commit_message: str = DEFAULT_COMMIT_MESSAGE
    tag_message: str = DEFAULT_TAG_MESSAGE


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    project: ProjectConfig = field(default_factory=ProjectConfig)
    release: ReleaseConfig = field(default_factory=ReleaseConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from parsed TOML.

        Raises:
            TypeError: If a key holds a value of the wrong type.
        """
        project: StrDict = get_table(data, "project") or {}
        release: StrDict = get_table(data, "release") or {}

        # An explicitly empty suffix would make every version releasable.
        return cls(
            project=ProjectConfig(
                properties_file=get_str(project, "properties_file") or DEFAULT_PROPERTIES_FILE,
                version_key=get_str(project, "version_key") or DEFAULT_VERSION_KEY,
                changelog=get_str(project, "changelog") or DEFAULT_CHANGELOG,
            ),
            release=ReleaseConfig(
                snapshot_suffix=get_str(release, "snapshot_suffix") or DEFAULT_SNAPSHOT_SUFFIX,
                tag_prefix=_get_raw_str(release, "tag_prefix", DEFAULT_TAG_PREFIX),
                remote=get_str(release, "remote") or DEFAULT_REMOTE,
                publish_command=get_str_list(release, "publish_command")
                or DEFAULT_PUBLISH_COMMAND,
                commit_message=get_str(release, "commit_message") or DEFAULT_COMMIT_MESSAGE,
                tag_message=get_str(release, "tag_message") or DEFAULT_TAG_MESSAGE,
            ),
        )


def _get_raw_str(table: Mapping[str, object], key: str, default: str) -> str:
    # tag_prefix may legitimately be "" (tags named after the bare version).
    value = table.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string")
    return value.strip()


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to cutrel.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_project_config(project_root: Path) -> Result[Config, ConfigError]:
    """Load ``cutrel.toml`` from a project root, or defaults when absent."""
    path = project_root / CONFIG_FILENAME
    if not path.exists():
        return Ok(Config())
    return load_config(path)
