"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from pipe_while_read.core.models import CommandResult


class CommandRunner(Protocol):
    """Contract for process-spawning backends.

    Any object that implements :meth:`run` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def run(self, argv: Sequence[str]) -> CommandResult:
        """Run *argv* to completion and report how it terminated.

        ``argv[0]`` is the executable.  The child must not read the
        dispatcher's standard input, and its own output streams must be
        shared with the dispatcher's.

        Raises
        ------
        CommandLaunchError
            When the executable cannot be found or started.
        """
        ...  # pragma: no cover


class Reporter(Protocol):
    """Sink for one-line diagnostics destined for standard error."""

    def __call__(self, message: str) -> None:
        ...  # pragma: no cover
