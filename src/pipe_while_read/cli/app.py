"""CLI application entry point for pipe-while-read.

This module is the **sole error boundary** for the entire application.
It catches :class:`~pipe_while_read.exceptions.PipeWhileReadError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages on stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — the loop itself is
  :class:`~pipe_while_read.core.dispatcher.LineDispatcher`.
* This module is the only place that translates between the domain world
  and the OS process exit code.  A relayed child status is returned
  unchanged; only internal failures use :mod:`exit_codes`.
"""

from __future__ import annotations

import argparse
import io
import os
import sys

from pipe_while_read.cli import exit_codes
from pipe_while_read.cli.console import console, escape
from pipe_while_read.core.models import InvocationSpec
from pipe_while_read.exceptions import PipeWhileReadError
from pipe_while_read.version import __version__

_EPILOG = """\
exit status:
  The exit status of the LAST command run, or 0 if none ran (dry run,
  empty input).  Earlier failures are reported on stderr but do not
  affect the final status: a failing line followed by a succeeding one
  exits 0.  Exits 1 if the command cannot be started or stdin is not
  valid UTF-8.  With --fail-fast the run stops at the first failure and
  exits with that command's status (1 if it was killed by a signal).

notes:
  Options must come before COMMAND; everything after it is passed to
  the command verbatim.  If pipe-while-read itself is killed, a child
  that is still running may or may not be terminated with it.
"""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``pipe-while-read [-n] [-0] [--fail-fast] [-v | -q] COMMAND [ARG ...]``
    * ``pipe-while-read --version``
    """
    parser = argparse.ArgumentParser(
        prog="pipe-while-read",
        description="Read stdin line-by-line and run a command with each line appended.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Show commands without executing.",
    )
    parser.add_argument(
        "-0",
        "--null",
        action="store_true",
        help="Input records are terminated by NUL, not newline (like xargs -0).",
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop at the first command that exits unsuccessfully.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print each command to stderr before running it, and totals at the end.",
    )
    verbosity.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Do not report commands that exit unsuccessfully.",
    )
    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        metavar="COMMAND",
        help="Command to run plus its fixed args; each line is appended as the last arg.",
    )
    return parser


def _resolve_spec(
    parser: argparse.ArgumentParser,
    args: argparse.Namespace,
) -> InvocationSpec:
    """Turn parsed arguments into an :class:`InvocationSpec`."""
    command: list[str] = list(args.command)
    if command and command[0] == "--":
        command = command[1:]
    if not command:
        parser.error("the following arguments are required: COMMAND")

    return InvocationSpec(
        executable=command[0],
        fixed_args=tuple(command[1:]),
        dry_run=args.dry_run,
        verbose=args.verbose,
        quiet=args.quiet,
        fail_fast=args.fail_fast,
        null_data=args.null,
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_dispatch(spec: InvocationSpec) -> int:
    """Run the dispatch loop over this process's stdin.

    Flow:
    1. Wire the subprocess runner and stderr reporter into the dispatcher.
    2. Feed raw stdin lines to the dispatcher.
    3. Return the last recorded child status, or success.
    """
    from pipe_while_read.core.dispatcher import LineDispatcher
    from pipe_while_read.infra.subprocess_runner import SubprocessRunner

    source = sys.stdin.buffer if sys.stdin is not None else io.BytesIO()

    dispatcher = LineDispatcher(
        spec,
        SubprocessRunner(),
        stdout=sys.stdout,
        reporter=console.plain,
    )
    summary = dispatcher.run(source)
    return summary.exit_code


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the pipe-while-read CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    spec = _resolve_spec(parser, args)
    return _handle_dispatch(spec)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except PipeWhileReadError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except BrokenPipeError:
        # stdout reader went away (e.g. ``| head``); silence the final flush.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(exit_codes.GENERAL_ERROR)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
