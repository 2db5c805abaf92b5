"""CLI entry point and execution wrapper.

Shared by the console script and ``python -m greeter`` so both report errors,
exit codes, and tracebacks identically.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from greeter import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)

if TYPE_CHECKING:
    from greeter.composition import AppServices


def _report_failure(exc: BaseException) -> int:
    """Print ``exc`` as a summary or full traceback and return its exit code."""
    verbose = bool(lib_cli_exit_tools.config.traceback)
    apply_traceback_preferences(verbose)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _run_cli(argv: Sequence[str] | None, *, services_factory: Callable[[], AppServices]) -> int:
    """Run the ``greeter`` group with ``services_factory`` as Click's ``obj``.

    Click usage errors keep Click's own message and code. Everything else,
    ``SystemExit`` raised by commands included, goes through
    :func:`_report_failure`.
    """
    from .root import cli

    args = list(argv) if argv is not None else sys.argv[1:]

    try:
        cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except (SystemExit, KeyboardInterrupt, Exception) as exc:
        return _report_failure(exc)
    return 0


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI and return its exit code.

    Args:
        argv: Arguments without the program name. None uses ``sys.argv``.
        restore_traceback: Restore the traceback flags that were active
            before the run.
        services_factory: Returns the wired AppServices. Callers outside the
            adapters layer pass ``build_production``.

    Returns:
        Exit code of the command.

    Raises:
        ValueError: If ``services_factory`` is missing.

    Example:
        >>> from greeter.composition import build_production
        >>> main(["hello", "John"], services_factory=build_production)  # doctest: +SKIP
        Hello, John!
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    previous_state = snapshot_traceback_state()
    try:
        return _run_cli(argv, services_factory=services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(previous_state)
        # Shutting down from a worker thread would stop logging for the whole process.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
