"""Tests for relgit.output.console module."""

from __future__ import annotations

import pytest

from relgit.output.console import ConsoleProtocol, MockConsole, RichConsole, Style


class TestStyle:
    def test_str_conversion(self) -> None:
        assert str(Style.WARNING) == "warning"
        assert str(Style.DEBUG) == "debug"


class TestMockConsole:
    """Test MockConsole for testing purposes."""

    def test_prefixes(self) -> None:
        console = MockConsole()
        console.success("tagged 1.0.0")
        console.error("push failed")
        console.warning("nothing to commit")
        console.info("dry run")
        assert console.messages == [
            "OK tagged 1.0.0",
            "error: push failed",
            "warning: nothing to commit",
            "info: dry run",
        ]

    def test_debug_requires_verbose(self) -> None:
        quiet = MockConsole()
        quiet.debug("$ git status")
        assert quiet.outputs == []

        loud = MockConsole(verbose=True)
        loud.debug("$ git status")
        assert loud.outputs[0].style == Style.DEBUG

    def test_helpers(self) -> None:
        console = MockConsole()
        console.header("Changelog")
        console.newline()
        console.warning("w")

        assert console.text == "Changelog\n\nwarning: w"
        assert console.has_warning()
        assert not console.has_error()
        assert console.count(Style.HEADER) == 1
        assert len(console.find("Change")) == 1

        console.clear()
        assert console.outputs == []

    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = MockConsole()
        assert console.verbose is False


class TestRichConsole:
    def test_brackets_are_printed_literally(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()
        console.print('git log --pretty=format:"* %s (%h)" [REV_RANGE]', Style.DIM)
        assert "[REV_RANGE]" in capsys.readouterr().out

    def test_warning_prefix(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole().warning("Could not stage [a].txt")
        out = capsys.readouterr().out
        assert "warning:" in out
        assert "[a].txt" in out

    def test_debug_hidden_unless_verbose(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole().debug("$ git status")
        assert capsys.readouterr().out == ""

        RichConsole(verbose=True).debug("$ git status")
        assert "$ git status" in capsys.readouterr().out
