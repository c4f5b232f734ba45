"""Tests for cutrel.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from cutrel.core.config import (
    CONFIG_FILENAME,
    DEFAULT_PUBLISH_COMMAND,
    Config,
    load_config,
    load_project_config,
)
from cutrel.core.result import Err, Ok


class TestConfigFromDict:
    def test_empty_dict_gives_defaults(self) -> None:
        config = Config.from_dict({})

        assert config == Config()
        assert config.project.properties_file == "gradle.properties"
        assert config.project.version_key == "version"
        assert config.project.changelog == "CHANGELOG.md"
        assert config.release.snapshot_suffix == "-SNAPSHOT"
        assert config.release.tag_prefix == "v"
        assert config.release.remote == "origin"
        assert config.release.publish_command == DEFAULT_PUBLISH_COMMAND

    def test_custom_values(self) -> None:
        config = Config.from_dict(
            {
                "project": {"properties_file": "lib/gradle.properties", "changelog": "NEWS.md"},
                "release": {
                    "remote": "upstream",
                    "publish_command": ["./gradlew", "publish"],
                    "tag_message": "{version}",
                },
            }
        )

        assert config.project.properties_file == "lib/gradle.properties"
        assert config.project.changelog == "NEWS.md"
        assert config.release.remote == "upstream"
        assert config.release.publish_command == ("./gradlew", "publish")
        assert config.release.tag_message == "{version}"
        assert config.release.commit_message == "Prepare next development version {version}"

    def test_blank_strings_fall_back_to_defaults(self) -> None:
        config = Config.from_dict({"release": {"snapshot_suffix": "  ", "remote": ""}})

        assert config.release.snapshot_suffix == "-SNAPSHOT"
        assert config.release.remote == "origin"

    def test_empty_tag_prefix_is_kept(self) -> None:
        config = Config.from_dict({"release": {"tag_prefix": ""}})
        assert config.release.tag_prefix == ""

    @pytest.mark.parametrize(
        "data",
        [
            {"project": "gradle.properties"},
            {"release": {"remote": 1}},
            {"release": {"publish_command": "./gradlew publish"}},
            {"release": {"publish_command": ["./gradlew", 3]}},
            {"release": {"tag_prefix": 1}},
        ],
    )
    def test_wrong_types_raise(self, data: dict[str, object]) -> None:
        with pytest.raises(TypeError):
            Config.from_dict(data)


class TestLoadConfig:
    def test_load_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text(
            '[release]\ntag_prefix = "release-"\npublish_command = ["make", "publish"]\n',
            encoding="utf-8",
        )

        result = load_config(path)

        assert isinstance(result, Ok)
        assert result.value.release.tag_prefix == "release-"
        assert result.value.release.publish_command == ("make", "publish")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("[release\n", encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert "Invalid TOML syntax" in result.error.message
        assert result.error.path == path

    def test_invalid_structure(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("[release]\nremote = 42\n", encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert "Invalid config structure" in result.error.message

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / CONFIG_FILENAME)

        assert isinstance(result, Err)
        assert "not found" in result.error.message


class TestLoadProjectConfig:
    def test_absent_file_gives_defaults(self, tmp_path: Path) -> None:
        result = load_project_config(tmp_path)

        assert isinstance(result, Ok)
        assert result.value == Config()

    def test_present_file_is_loaded(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text('[project]\nversion_key = "libVersion"\n')

        result = load_project_config(tmp_path)

        assert isinstance(result, Ok)
        assert result.value.project.version_key == "libVersion"
