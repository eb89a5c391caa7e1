"""Infrastructure layer — external system integration.

This layer wraps all interaction with the operating system's process
machinery.  Every raw ``OSError`` must be caught here and re-raised as
a :class:`~pipe_while_read.exceptions.PipeWhileReadError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from pipe_while_read.infra.subprocess_runner import SubprocessRunner

__all__: list[str] = [
    "SubprocessRunner",
]
