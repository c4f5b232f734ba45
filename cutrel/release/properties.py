"""Version storage in a Java ``.properties`` file (``gradle.properties``).

Reading follows the properties format loosely: ``key=value``,
``key = value`` and ``key: value`` are accepted, ``#`` and ``!`` start
comments. Writing is stricter: only a line consisting of exactly
``key=<old>`` is substituted, so an unexpected layout is reported instead
of silently rewritten. ``check_writable`` runs the same match without
writing, letting a release fail before anything is tagged.
"""

from __future__ import annotations

import re
from pathlib import Path

from cutrel.core.result import Err, Ok, Result
from cutrel.platform.files import atomic_write_text
from cutrel.release.errors import ConfigWriteError

__all__ = ["PropertiesFile", "read_property"]


def read_property(text: str, key: str) -> str | None:
    """Return the value of ``key`` in properties ``text``, or None."""
    pattern = re.compile(rf"^\s*{re.escape(key)}\s*[=:]\s*(.*?)\s*$")
    for line in text.splitlines():
        stripped = line.lstrip()
        if not stripped or stripped[0] in "#!":
            continue
        m = pattern.match(line)
        if m is not None:
            return m.group(1)
    return None


class PropertiesFile:
    """ConfigStore backed by a properties file.

    Attributes:
        path: Location of the properties file
        key: Property holding the project version
    """

    def __init__(self, path: Path, *, key: str = "version") -> None:
        self.path = path
        self.key = key

    def read_version(self) -> Result[str, ConfigWriteError]:
        text = self._read()
        if isinstance(text, Err):
            return text
        value = read_property(text.value, self.key)
        if not value:
            return Err(ConfigWriteError(path=self.path, reason=f"no '{self.key}' property"))
        return Ok(value)

    def check_writable(self, version: str) -> Result[None, ConfigWriteError]:
        """Check that ``write_version(version, ...)`` would find its line."""
        text = self._read()
        if isinstance(text, Err):
            return text
        if self._line_pattern(version).search(text.value) is None:
            return Err(self._not_found(version))
        return Ok(None)

    def write_version(self, old: str, new: str) -> Result[None, ConfigWriteError]:
        """Replace the line ``key=old`` with ``key=new``."""
        text = self._read()
        if isinstance(text, Err):
            return text

        # A lambda keeps backslashes in ``new`` literal.
        updated, count = self._line_pattern(old).subn(
            lambda _: f"{self.key}={new}", text.value, count=1
        )
        if count == 0:
            return Err(self._not_found(old))

        try:
            atomic_write_text(self.path, updated)
        except OSError as e:
            return Err(ConfigWriteError(path=self.path, reason=f"write failed: {e}"))
        return Ok(None)

    def _line_pattern(self, value: str) -> re.Pattern[str]:
        # Whole line only: ``punit.version=`` or ``#version=`` must not match.
        return re.compile(rf"^{re.escape(self.key)}={re.escape(value)}(?=\r?$)", re.MULTILINE)

    def _not_found(self, value: str) -> ConfigWriteError:
        return ConfigWriteError(
            path=self.path, reason=f"no line reading exactly '{self.key}={value}'"
        )

    def _read(self) -> Result[str, ConfigWriteError]:
        try:
            # newline="" keeps CRLF intact for the literal substitution.
            with self.path.open("r", encoding="utf-8", newline="") as handle:
                return Ok(handle.read())
        except FileNotFoundError:
            return Err(ConfigWriteError(path=self.path, reason="file not found"))
        except (OSError, UnicodeDecodeError) as e:
            return Err(ConfigWriteError(path=self.path, reason=f"read failed: {e}"))
