"""Domain models for pipe-while-read.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and formatting.  They carry zero I/O and
zero dependencies on external packages.
"""

from __future__ import annotations

import signal as _signal
from dataclasses import dataclass

from pipe_while_read.exceptions import InvalidInvocationError
from pipe_while_read.utils import DRY_RUN_PREFIX, NEWLINE_DELIMITER, NUL_DELIMITER


# ---------------------------------------------------------------------------
# Invocation spec
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class InvocationSpec:
    """The command template resolved from the command line.

    Fixed for the lifetime of a run; every input line is applied to the
    same spec.
    """

    executable: str
    """Executable name or path, resolved by the OS at spawn time."""

    fixed_args: tuple[str, ...] = ()
    """Arguments placed between the executable and the input line."""

    dry_run: bool = False
    """Describe commands on stdout instead of running them."""

    verbose: bool = False
    """Echo each command to stderr before running it."""

    quiet: bool = False
    """Suppress diagnostics for non-success child statuses."""

    fail_fast: bool = False
    """Stop reading input after the first non-success child."""

    null_data: bool = False
    """Input records are NUL-terminated instead of newline-terminated."""

    def __post_init__(self) -> None:
        if not self.executable:
            raise InvalidInvocationError(
                "No command given.",
                hint="Pass the command to run, e.g. pipe-while-read echo Got:",
            )

    @property
    def delimiter(self) -> bytes:
        return NUL_DELIMITER if self.null_data else NEWLINE_DELIMITER

    def argv_for(self, line: str) -> tuple[str, ...]:
        """Return the full argument vector for *line*.

        The line is always a single, literal final argument.
        """
        return (self.executable, *self.fixed_args, line)

    def describe(self, line: str) -> str:
        """Return the dry-run description of the command for *line*."""
        parts = [DRY_RUN_PREFIX, self.executable]
        if self.fixed_args:
            parts.append(" ".join(self.fixed_args))
        parts.append(line)
        return " ".join(parts)


# ---------------------------------------------------------------------------
# Child outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandResult:
    """How a spawned child terminated.

    Exactly one of :attr:`returncode` and :attr:`signal` is set.
    """

    returncode: int | None
    """Exit code for a normal exit, ``None`` when killed by a signal."""

    signal: int | None = None
    """Number of the terminating signal, if any."""

    @property
    def success(self) -> bool:
        return self.returncode == 0

    def describe(self) -> str:
        """Human-readable status, e.g. ``exit status: 3``."""
        if self.returncode is not None:
            return f"exit status: {self.returncode}"
        if self.signal is not None:
            try:
                name = _signal.Signals(self.signal).name
            except ValueError:
                return f"signal: {self.signal}"
            return f"signal: {self.signal} ({name})"
        return "unknown status"


# ---------------------------------------------------------------------------
# Run summary
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DispatchSummary:
    """Outcome of a whole dispatch loop."""

    last_status: int | None
    """Exit code of the last child that produced one, if any."""

    lines_read: int = 0
    commands_run: int = 0
    failures: int = 0

    stopped_early: bool = False
    """``True`` when ``--fail-fast`` ended the loop before end of input."""

    @property
    def succeeded(self) -> int:
        return self.commands_run - self.failures

    @property
    def exit_code(self) -> int:
        """Process exit code: the last status, or ``0`` when never set.

        A fail-fast stop never reports success: when the failing child
        left no code (signal death), the result is ``1``.
        """
        if self.stopped_early and not self.last_status:
            return 1
        return 0 if self.last_status is None else self.last_status
