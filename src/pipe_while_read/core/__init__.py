"""Core / service layer — the per-line dispatch loop and its models.

Rules
-----
* No ``print()`` calls; output goes through injected streams.
* No process spawning — that belongs to ``infra``.
* No imports from ``cli`` or ``infra``.
"""

from pipe_while_read.core.dispatcher import LineDispatcher, iter_lines
from pipe_while_read.core.models import CommandResult, DispatchSummary, InvocationSpec
from pipe_while_read.core.protocols import CommandRunner, Reporter

__all__: list[str] = [
    "CommandResult",
    "CommandRunner",
    "DispatchSummary",
    "InvocationSpec",
    "LineDispatcher",
    "Reporter",
    "iter_lines",
]
