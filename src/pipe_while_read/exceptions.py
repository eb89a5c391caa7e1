"""Custom exception hierarchy for pipe-while-read.

All exceptions that cross layer boundaries must inherit from
:class:`PipeWhileReadError`.  Raw ``OSError`` and ``UnicodeDecodeError``
instances must NEVER propagate beyond the layer that produced them —
they must be caught and re-raised as a typed subclass defined here.

Hierarchy
---------
PipeWhileReadError
├── InvalidInvocationError
├── InputDecodeError
├── CommandLaunchError
└── EnvironmentError
"""

from __future__ import annotations


class PipeWhileReadError(Exception):
    """Base exception for all pipe-while-read errors.

    Every fatal condition maps to a subclass of this exception so that
    the CLI error boundary can render a clean message and exit with
    :data:`~pipe_while_read.cli.exit_codes.GENERAL_ERROR`.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Invocation ------------------------------------------------------------

class InvalidInvocationError(PipeWhileReadError):
    """Raised when the resolved command cannot form a valid invocation."""


# --- Input -----------------------------------------------------------------

class InputDecodeError(PipeWhileReadError):
    """Raised when a line read from standard input is not valid text."""


# --- Process launch --------------------------------------------------------

class CommandLaunchError(PipeWhileReadError):
    """Raised when the target executable cannot be found or started."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(PipeWhileReadError):
    """Raised when an optional runtime dependency is not available."""
