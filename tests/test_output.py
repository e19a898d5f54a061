"""Tests for the output formatting system.

Covers:
- OutputFormat resolution (auto -> rich/plain based on TTY)
- NO_COLOR / TERM=dumb color disabling
- stdout vs stderr discipline
- Quiet and verbose modes
- emit_header and format_response in JSON and plain modes
- Global instance management
"""

from __future__ import annotations

import json

import pytest

from httpauth import output as output_module
from httpauth.output import (
    OutputFormat,
    OutputManager,
    _should_disable_color,
    get_output,
    reset_output,
    set_output,
)


@pytest.fixture()
def non_tty(monkeypatch):
    monkeypatch.setattr("httpauth.output._is_tty", lambda: False)


@pytest.fixture()
def tty(monkeypatch):
    monkeypatch.setattr("httpauth.output._is_tty", lambda: True)


class TestOutputFormatResolution:
    def test_auto_resolves_to_plain_when_not_tty(self, non_tty):
        assert OutputManager(format=OutputFormat.AUTO).format == OutputFormat.PLAIN

    def test_auto_resolves_to_rich_when_tty(self, tty, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("TERM", raising=False)
        assert OutputManager(format=OutputFormat.AUTO).format == OutputFormat.RICH

    def test_no_color_flag_forces_plain(self, tty, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        assert OutputManager(format=OutputFormat.AUTO, no_color=True).format == OutputFormat.PLAIN

    def test_explicit_json_stays_json(self, non_tty):
        assert OutputManager(format=OutputFormat.JSON).format == OutputFormat.JSON


class TestColorDisabling:
    def test_no_color_env_any_value(self, monkeypatch):
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


class TestStdoutStderrDiscipline:
    def test_print_data_goes_to_stdout(self, capfd, non_tty):
        OutputManager(format=OutputFormat.PLAIN, no_color=True).print_data("Basic YTpi")
        captured = capfd.readouterr()
        assert captured.out == "Basic YTpi\n"
        assert captured.err == ""

    @pytest.mark.parametrize("method", ["info", "success", "error"])
    def test_diagnostics_go_to_stderr(self, capfd, non_tty, method):
        mgr = OutputManager(format=OutputFormat.PLAIN, no_color=True)
        getattr(mgr, method)("diagnostic text")
        captured = capfd.readouterr()
        assert captured.out == ""
        assert "diagnostic text" in captured.err

    def test_error_prefix(self, capfd, non_tty):
        OutputManager(format=OutputFormat.PLAIN, no_color=True).error("bad header")
        assert capfd.readouterr().err == "Error: bad header\n"


class TestQuietAndVerbose:
    def test_quiet_suppresses_info_and_success(self, capfd, non_tty):
        mgr = OutputManager(format=OutputFormat.PLAIN, no_color=True, quiet=True)
        mgr.info("hidden")
        mgr.success("hidden")
        assert capfd.readouterr().err == ""

    def test_quiet_keeps_errors(self, capfd, non_tty):
        mgr = OutputManager(format=OutputFormat.PLAIN, no_color=True, quiet=True)
        mgr.error("broken")
        assert "broken" in capfd.readouterr().err

    def test_debug_only_when_verbose(self, capfd, non_tty):
        OutputManager(format=OutputFormat.PLAIN, no_color=True).debug("quiet debug")
        assert capfd.readouterr().err == ""
        OutputManager(format=OutputFormat.PLAIN, no_color=True, verbose=True).debug("loud debug")
        assert "[debug] loud debug" in capfd.readouterr().err


class TestEmitHeader:
    def test_plain_value_only(self, capfd, non_tty):
        OutputManager(format=OutputFormat.PLAIN, no_color=True).emit_header(
            "Authorization", "Basic YTpi"
        )
        assert capfd.readouterr().out == "Basic YTpi\n"

    def test_plain_full_line(self, capfd, non_tty):
        OutputManager(format=OutputFormat.PLAIN, no_color=True).emit_header(
            "Authorization", "Basic YTpi", full_line=True
        )
        assert capfd.readouterr().out == "Authorization: Basic YTpi\n"

    def test_json_ignores_full_line(self, capfd, non_tty):
        OutputManager(format=OutputFormat.JSON, no_color=True).emit_header(
            "WWW-Authenticate", 'Basic realm="a"', full_line=True
        )
        assert json.loads(capfd.readouterr().out) == {
            "header": "WWW-Authenticate",
            "value": 'Basic realm="a"',
        }


class TestFormatResponse:
    def test_json_dict(self, capfd, non_tty):
        mgr = OutputManager(format=OutputFormat.JSON, no_color=True)
        mgr.format_response({"username": "nori", "password": "***"})
        assert json.loads(capfd.readouterr().out) == {"username": "nori", "password": "***"}

    def test_plain_dict_is_tab_separated(self, capfd, non_tty):
        mgr = OutputManager(format=OutputFormat.PLAIN, no_color=True)
        mgr.format_response({"username": "nori", "password": "***"})
        assert capfd.readouterr().out == "username\tnori\npassword\t***\n"

    def test_plain_string(self, capfd, non_tty):
        OutputManager(format=OutputFormat.PLAIN, no_color=True).format_response("Basic YTpi")
        assert capfd.readouterr().out == "Basic YTpi\n"


class TestGlobalInstance:
    def test_get_output_creates_default(self):
        reset_output()
        assert isinstance(get_output(), OutputManager)

    def test_set_output_installs_instance(self, capfd, non_tty):
        mgr = OutputManager(format=OutputFormat.PLAIN, no_color=True)
        set_output(mgr)
        assert get_output() is mgr
        output_module.print_data("via module")
        assert capfd.readouterr().out == "via module\n"
