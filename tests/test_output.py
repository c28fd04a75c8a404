"""Tests for helpreg.output — output formatting utilities."""

import io

from helpreg.lib.log_lib import init_output
from helpreg.output import (
    print_error, print_ok, print_warn,
    get_output, Hint, register_hint, register_hints, trace,
)


def test_print_ok_format(capsys):
    """print_ok should output '[OK] message' format."""
    print_ok("it works")
    captured = capsys.readouterr()
    assert "[OK] it works" in captured.out


def test_print_warn_format(capsys):
    """print_warn should output '[WARN] message' format."""
    print_warn("careful")
    captured = capsys.readouterr()
    assert "[WARN] careful" in captured.out


def test_print_error_goes_to_stderr(capsys):
    """print_error routes through OutputManager.error() to stderr."""
    init_output(verbosity=0)
    print_error("broken")
    captured = capsys.readouterr()
    assert "ERROR: broken" in captured.err
    assert captured.out == ""


def test_print_error_to_buffer():
    """print_error honours the manager's output file."""
    buf = io.StringIO()
    init_output(verbosity=0, file=buf)
    print_error("broken")
    assert "ERROR: broken" in buf.getvalue()


def test_print_ok_suppressed_at_errors_only(capsys):
    """-QQQ suppresses user-facing print_* output."""
    init_output(verbosity=-3)
    print_ok("hidden")
    print_warn("hidden")
    assert capsys.readouterr().out == ""


def test_print_ok_shown_at_minus_two(capsys):
    """-QQ still shows print_* output."""
    init_output(verbosity=-2)
    print_ok("still here")
    assert "still here" in capsys.readouterr().out


def test_print_error_silent_at_hard_wall(capsys):
    """-QQQQ silences errors too."""
    init_output(verbosity=-4)
    print_error("nothing")
    captured = capsys.readouterr()
    assert captured.err == ""


def test_reexports():
    """output re-exports the log_lib API."""
    assert callable(get_output)
    assert callable(register_hint)
    assert callable(register_hints)
    assert callable(trace)
    assert Hint.__name__ == "Hint"
