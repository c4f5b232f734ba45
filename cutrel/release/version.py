from __future__ import annotations

import re
from dataclasses import dataclass

from cutrel.core.result import Err, Ok, Result
from cutrel.release.errors import InvalidVersionError

__all__ = ["ReleaseVersion", "parse_version", "releasable_version"]


_VERSION_RE = re.compile(r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)(-[0-9A-Za-z.-]+)?$")


@dataclass(frozen=True, slots=True)
class ReleaseVersion:
    major: int
    minor: int
    patch: int
    suffix: str = ""

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}{self.suffix}"

    def to_tag(self, prefix: str = "v") -> str:
        return f"{prefix}{self}"

    def next_snapshot(self, marker: str) -> ReleaseVersion:
        """Next development version: patch + 1 with the snapshot marker."""
        return ReleaseVersion(self.major, self.minor, self.patch + 1, marker)


def parse_version(text: str) -> ReleaseVersion | None:
    m = _VERSION_RE.match(text.strip())
    if m is None:
        return None
    return ReleaseVersion(int(m.group(1)), int(m.group(2)), int(m.group(3)), m.group(4) or "")


def releasable_version(
    text: str, *, snapshot_marker: str
) -> Result[ReleaseVersion, InvalidVersionError]:
    """Parse ``text`` and reject anything but a plain ``MAJOR.MINOR.PATCH``."""
    if text.strip().endswith(snapshot_marker):
        return Err(
            InvalidVersionError(
                version=text,
                reason=f"{snapshot_marker} versions cannot be released",
                hint=f"Set the release version (without {snapshot_marker}) first.",
            )
        )
    version = parse_version(text)
    if version is None:
        return Err(
            InvalidVersionError(
                version=text,
                reason="not a MAJOR.MINOR.PATCH version",
                hint="Expected e.g. 0.2.0",
            )
        )
    if version.suffix:
        # The next snapshot bumps the patch, which would skip the final release.
        base = ReleaseVersion(version.major, version.minor, version.patch)
        return Err(
            InvalidVersionError(
                version=text,
                reason=f"pre-release suffix '{version.suffix}' cannot be released",
                hint=f"Set the release version to {base} first.",
            )
        )
    return Ok(version)
