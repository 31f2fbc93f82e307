"""Tests for the CLI output system.

Covers:
- OutputFormat resolution (auto -> rich/plain based on TTY)
- NO_COLOR / TERM=dumb color disabling
- stdout vs stderr discipline
- Quiet and verbose modes
- print_fields and print_table in each format
- Global instance management
"""

from __future__ import annotations

import json

import pytest

from credent import output as output_module
from credent.output import (
    OutputFormat,
    OutputManager,
    _should_disable_color,
    get_output,
    reset_output,
    set_output,
)


@pytest.fixture(autouse=True)
def _reset_global_output():
    """Ensure the global output instance is reset between tests."""
    reset_output()
    yield
    reset_output()


@pytest.fixture()
def non_tty(monkeypatch):
    """Patch stdout.isatty() to return False."""
    monkeypatch.setattr("credent.output._is_tty", lambda: False)


@pytest.fixture()
def tty(monkeypatch):
    """Patch stdout.isatty() to return True."""
    monkeypatch.setattr("credent.output._is_tty", lambda: True)


@pytest.fixture()
def plain(non_tty, monkeypatch) -> OutputManager:
    monkeypatch.delenv("NO_COLOR", raising=False)
    return OutputManager(format=OutputFormat.PLAIN, no_color=True)


class TestFormatResolution:
    def test_auto_resolves_to_plain_when_not_tty(self, non_tty):
        assert OutputManager().format == OutputFormat.PLAIN

    def test_auto_resolves_to_rich_when_tty(self, tty, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("TERM", raising=False)
        assert OutputManager().format == OutputFormat.RICH

    def test_auto_resolves_to_plain_when_tty_but_no_color(self, tty, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        assert OutputManager().format == OutputFormat.PLAIN

    def test_explicit_json_stays_json(self, non_tty):
        assert OutputManager(format=OutputFormat.JSON).format == OutputFormat.JSON


class TestColorDetection:
    def test_no_color_env_disables_color(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "")
        assert _should_disable_color() is True

    def test_term_dumb_disables_color(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("TERM", "dumb")
        assert _should_disable_color() is True

    def test_normal_term_keeps_color(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("TERM", "xterm-256color")
        assert _should_disable_color() is False


class TestStreams:
    def test_print_data_goes_to_stdout(self, capsys, plain):
        plain.print_data("hello")
        captured = capsys.readouterr()
        assert captured.out == "hello\n"
        assert captured.err == ""

    def test_note_goes_to_stderr(self, capsys, plain):
        plain.note("stored")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "Note: stored\n"

    def test_error_goes_to_stderr(self, capsys, plain):
        plain.error("boom")
        assert capsys.readouterr().err == "Error: boom\n"


class TestQuietAndVerbose:
    def test_quiet_suppresses_info_and_note(self, capsys, non_tty):
        out = OutputManager(format=OutputFormat.PLAIN, no_color=True, quiet=True)
        out.info("x")
        out.note("y")
        assert capsys.readouterr().err == ""

    def test_quiet_does_not_suppress_error(self, capsys, non_tty):
        out = OutputManager(format=OutputFormat.PLAIN, no_color=True, quiet=True)
        out.error("bad")
        assert "bad" in capsys.readouterr().err

    def test_debug_hidden_by_default(self, capsys, plain):
        plain.debug("hidden")
        assert capsys.readouterr().err == ""

    def test_debug_shown_with_verbose(self, capsys, non_tty):
        out = OutputManager(format=OutputFormat.PLAIN, no_color=True, verbose=True)
        out.debug("path")
        assert capsys.readouterr().err == "[debug] path\n"
        assert out.is_verbose


class TestPrintFields:
    def test_plain_aligns_labels(self, capsys, plain):
        plain.print_fields([("a", "1"), ("long", "2")])
        assert capsys.readouterr().out == "  a    : 1\n  long : 2\n"

    def test_json(self, capsys, non_tty):
        out = OutputManager(format=OutputFormat.JSON)
        out.print_fields([("credentials", "me:******")])
        assert json.loads(capsys.readouterr().out) == {"credentials": "me:******"}

    def test_heading_plain(self, capsys, plain):
        plain.print_heading("[default]")
        assert capsys.readouterr().out == "[default]\n"

    def test_heading_omitted_in_json(self, capsys, non_tty):
        OutputManager(format=OutputFormat.JSON).print_heading("[default]")
        assert capsys.readouterr().out == ""


class TestPrintTable:
    def test_plain_is_tab_separated(self, capsys, plain):
        plain.print_table(["profile", "username"], [["default", "me"]])
        assert capsys.readouterr().out == "profile\tusername\ndefault\tme\n"

    def test_json_records(self, capsys, non_tty):
        out = OutputManager(format=OutputFormat.JSON)
        out.print_table(["profile", "username"], [["default", "me"]])
        assert json.loads(capsys.readouterr().out) == [
            {"profile": "default", "username": "me"}
        ]


class TestGlobalInstance:
    def test_get_output_creates_default(self, non_tty):
        assert isinstance(get_output(), OutputManager)

    def test_set_output_installs_instance(self, non_tty):
        out = OutputManager(format=OutputFormat.JSON)
        set_output(out)
        assert get_output() is out

    def test_reset_output(self, non_tty):
        set_output(OutputManager())
        reset_output()
        assert output_module._output is None

    def test_convenience_functions_delegate(self, capsys, plain):
        set_output(plain)
        output_module.note("via global")
        output_module.print_heading("[default]")
        captured = capsys.readouterr()
        assert captured.out == "[default]\n"
        assert captured.err == "Note: via global\n"
