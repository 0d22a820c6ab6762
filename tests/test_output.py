"""Tests for the output formatting system.

Covers:
- NO_COLOR / TERM=dumb color disabling
- stdout vs stderr discipline
- Quiet mode suppression rules
- Verbose mode debug output
- Document printing on TTY and non-TTY stdout
- Global instance management
"""

from __future__ import annotations

import pytest

from specsync import output as output_module
from specsync.output import (
    OutputManager,
    _should_disable_color,
    get_output,
    reset_output,
    set_output,
)


@pytest.fixture()
def non_tty(monkeypatch):
    """Patch stdout.isatty() to return False."""
    monkeypatch.setattr("specsync.output._is_tty", lambda: False)


# ------------------------------------------------------------------ #
# Colour control
# ------------------------------------------------------------------ #


class TestColorControl:
    def test_no_color_env_disables(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "")
        assert _should_disable_color() is True

    def test_term_dumb_disables(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("TERM", "dumb")
        assert _should_disable_color() is True

    def test_enabled_by_default(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("TERM", "xterm-256color")
        assert _should_disable_color() is False


# ------------------------------------------------------------------ #
# Diagnostics
# ------------------------------------------------------------------ #


class TestDiagnostics:
    def test_info_goes_to_stderr(self, capsys):
        OutputManager(no_color=True).info("hello")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "hello\n"

    def test_success_has_check_mark(self, capsys):
        OutputManager(no_color=True).success("done")
        assert capsys.readouterr().err == "✓ done\n"

    def test_quiet_suppresses_info_and_success(self, capsys):
        mgr = OutputManager(no_color=True, quiet=True)
        mgr.info("hidden")
        mgr.success("hidden")
        assert capsys.readouterr().err == ""

    def test_quiet_keeps_warning_and_error(self, capsys):
        mgr = OutputManager(no_color=True, quiet=True)
        mgr.warning("careful")
        mgr.error("broken")
        err = capsys.readouterr().err
        assert "Warning: careful" in err
        assert "Error: broken" in err

    def test_debug_only_when_verbose(self, capsys):
        OutputManager(no_color=True).debug("invisible")
        assert capsys.readouterr().err == ""
        OutputManager(no_color=True, verbose=True).debug("visible")
        assert capsys.readouterr().err == "[debug] visible\n"

    def test_rich_error_markup(self, capsys, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("TERM", raising=False)
        OutputManager().error("broken")
        assert "Error: broken" in capsys.readouterr().err


# ------------------------------------------------------------------ #
# Document output
# ------------------------------------------------------------------ #


class TestPrintDocument:
    def test_non_tty_writes_verbatim(self, non_tty, capsys):
        text = '{\n  "a": 1\n}\n'
        OutputManager(no_color=True).print_document(text)
        captured = capsys.readouterr()
        assert captured.out == text
        assert captured.err == ""

    def test_tty_highlights(self, monkeypatch, capsys):
        monkeypatch.setattr("specsync.output._is_tty", lambda: True)
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("TERM", raising=False)
        OutputManager().print_document('{\n  "a": 1\n}\n')
        out = capsys.readouterr().out
        assert '"a"' in out


# ------------------------------------------------------------------ #
# Global instance
# ------------------------------------------------------------------ #


class TestGlobalInstance:
    def test_lazy_default(self):
        reset_output()
        assert output_module._output is None
        mgr = get_output()
        assert isinstance(mgr, OutputManager)
        assert get_output() is mgr

    def test_set_and_reset(self):
        mgr = OutputManager(quiet=True)
        set_output(mgr)
        assert get_output() is mgr
        assert get_output().is_quiet
        reset_output()
        assert output_module._output is None

    def test_convenience_functions_delegate(self, capsys):
        set_output(OutputManager(no_color=True, verbose=True))
        output_module.info("i")
        output_module.warning("w")
        output_module.debug("d")
        err = capsys.readouterr().err
        assert "i\n" in err
        assert "Warning: w" in err
        assert "[debug] d" in err
