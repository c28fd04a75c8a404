"""Output formatting utilities for helpreg commands.

Consistent message formatting for the CLI. Print functions respect the
quiet axis at extreme levels (-QQQ, -QQQQ).

Also re-exports the log_lib public API for convenience imports.
"""

from helpreg.lib.log_lib import (                     # noqa: F401
    OutputManager, init_output, get_output,
    Hint, register_hint, register_hints, get_hint,
    trace,
)


def _should_print():
    """Check if user-facing print_*() calls should display.

    These behave like level -2 (WARNING) messages: suppressed at -3
    (errors only) and -4 (hard wall).
    """
    return get_output().verbosity >= -2


def print_ok(msg):
    """Print a success message."""
    if _should_print():
        print(f"  [OK] {msg}")


def print_warn(msg):
    """Print a warning message."""
    if _should_print():
        print(f"  [WARN] {msg}")


def print_error(msg):
    """Print an error message to stderr via OutputManager.error()."""
    get_output().error(f"  ERROR: {msg}")
