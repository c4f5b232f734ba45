from __future__ import annotations

import pytest

from cutrel.core.result import Err, Ok
from cutrel.release.version import ReleaseVersion, parse_version, releasable_version


def test_parse_plain_version() -> None:
    assert parse_version("0.2.0") == ReleaseVersion(0, 2, 0)
    assert parse_version(" 10.0.3 ") == ReleaseVersion(10, 0, 3)


def test_parse_keeps_suffix() -> None:
    v = parse_version("1.2.3-SNAPSHOT")
    assert v == ReleaseVersion(1, 2, 3, "-SNAPSHOT")
    assert str(v) == "1.2.3-SNAPSHOT"


@pytest.mark.parametrize("text", ["", "1.2", "v1.2.3", "01.2.3", "1.2.3.4", "1.2.x"])
def test_parse_rejects_malformed(text: str) -> None:
    assert parse_version(text) is None


def test_next_snapshot_bumps_patch_only() -> None:
    assert str(ReleaseVersion(0, 2, 0).next_snapshot("-SNAPSHOT")) == "0.2.1-SNAPSHOT"
    assert str(ReleaseVersion(1, 9, 9).next_snapshot("-SNAPSHOT")) == "1.9.10-SNAPSHOT"


def test_to_tag() -> None:
    assert ReleaseVersion(0, 1, 0).to_tag() == "v0.1.0"
    assert ReleaseVersion(0, 1, 0).to_tag("") == "0.1.0"


def test_releasable_version_accepts_release() -> None:
    result = releasable_version("0.1.0", snapshot_marker="-SNAPSHOT")
    assert isinstance(result, Ok)
    assert result.value == ReleaseVersion(0, 1, 0)


@pytest.mark.parametrize("text", ["1.0.0-rc.1", "0.2.0-beta", "0.2.0-SNAPSHOT.1"])
def test_releasable_version_rejects_prerelease(text: str) -> None:
    result = releasable_version(text, snapshot_marker="-SNAPSHOT")

    assert isinstance(result, Err)
    assert "pre-release" in result.error.message
    assert result.error.hint is not None
    assert text.split("-")[0] in result.error.hint


def test_releasable_version_rejects_snapshot() -> None:
    result = releasable_version("0.1.0-SNAPSHOT", snapshot_marker="-SNAPSHOT")
    assert isinstance(result, Err)
    assert "-SNAPSHOT" in result.error.message
    assert result.error.version == "0.1.0-SNAPSHOT"
