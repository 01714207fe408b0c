"""Output helpers for x86-64-level.

stdout carries only the result (the level number). Everything else goes
through the THAC0 OutputManager on stderr.

Also re-exports the log_lib public API for convenience imports.
"""

from x86_64_level.lib.log_lib import (                     # noqa: F401
    OutputManager, init_output, get_output,
    Hint, register_hint, register_hints, get_hint,
    trace,
)
from x86_64_level.lib.log_lib.levels import WARNING


def _should_print():
    """True unless verbosity is at -3 (errors only) or below.

    Results are effectively level -2 messages.
    """
    return get_output().verbosity >= WARNING


def print_result(value):
    """Print a result value on stdout."""
    if _should_print():
        print(value)


def print_error(msg):
    """Print an error message on stderr.

    Routes through OutputManager.error() (level -3), so it is shown at
    every verbosity except the hard wall (-QQQQ).
    """
    get_output().error(f"ERROR: {msg}")


def print_hint(hint_id, context='error', **kwargs):
    get_output().hint(hint_id, context, **kwargs)