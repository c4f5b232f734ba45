from __future__ import annotations

from pathlib import Path

from cutrel.core.result import Err, Ok, Result
from cutrel.release.errors import MissingChangelogEntryError


def section_heading(version: str) -> str:
    return f"## [{version}]"


def ensure_changelog_entry(
    *, changelog: Path, version: str
) -> Result[None, MissingChangelogEntryError]:
    """Check that ``changelog`` exists and mentions ``## [<version>]``.

    The heading is matched as a literal substring, so a dated heading such as
    ``## [0.2.0] - 2026-01-05`` satisfies the check.
    """
    try:
        text = changelog.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return Err(
            MissingChangelogEntryError(version=version, changelog=changelog, file_missing=True)
        )

    if section_heading(version) not in text:
        return Err(MissingChangelogEntryError(version=version, changelog=changelog))
    return Ok(None)
