"""Tests for cutrel.output.console module."""

from __future__ import annotations

import pytest

from cutrel.output.console import MockConsole, RichConsole, Style


class TestStyle:
    def test_str_conversion(self) -> None:
        assert str(Style.SUCCESS) == "success"
        assert str(Style.DIM) == "dim"
        assert str(Style.HEADER) == "header"


class TestMockConsole:
    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs[0].message == "hello"
        assert console.outputs[0].style == Style.DEFAULT

    def test_level_methods_prefix_messages(self) -> None:
        console = MockConsole()
        console.success("released")
        console.error("failed")
        console.warning("careful")
        console.info("note")

        assert console.messages == [
            "OK released",
            "error: failed",
            "warning: careful",
            "info: note",
        ]
        assert console.has_error()
        assert console.has_warning()

    def test_command_is_shell_quoted(self) -> None:
        console = MockConsole()
        console.command(["git", "tag", "-a", "v0.1.0", "-m", "Release 0.1.0"])

        assert console.messages == ["$ git tag -a v0.1.0 -m 'Release 0.1.0'"]
        assert console.outputs[0].style == Style.DIM

    def test_find_and_text(self) -> None:
        console = MockConsole()
        console.header("Publish")
        console.print("done")

        assert [o.style for o in console.find("Publish")] == [Style.HEADER]
        assert console.text == "Publish\ndone"


class TestRichConsole:
    def test_bracketed_text_is_not_markup(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.error("CHANGELOG.md has no '## [0.1.0]' section")
        console.print("## [0.1.0]", Style.DIM)

        out = capsys.readouterr().out
        assert "## [0.1.0]' section" in out
        assert "## [0.1.0]\n" in out

    def test_command_echo(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole().command(["./gradlew", "publish"])

        assert "$ ./gradlew publish" in capsys.readouterr().out
