"""``subprocess`` backed implementation of :class:`~pipe_while_read.core.protocols.CommandRunner`.

This module is the **only** place in the codebase that spawns child
processes.  Launch failures are caught here and re-raised as
:class:`~pipe_while_read.exceptions.CommandLaunchError`.

Rules
-----
* No shell — the argument vector is passed to the OS as-is.
* Child stdin is the null device; stdout/stderr are inherited, never
  captured.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Sequence

from pipe_while_read.core.models import CommandResult
from pipe_while_read.exceptions import CommandLaunchError


class SubprocessRunner:
    """Concrete :class:`CommandRunner` built on :func:`subprocess.run`.

    This class satisfies the :class:`~pipe_while_read.core.protocols.CommandRunner`
    protocol structurally — no explicit inheritance required.
    """

    @staticmethod
    def _flush_parent_streams() -> None:
        """Flush our own buffered output so it precedes the child's."""
        for stream in (sys.stdout, sys.stderr):
            if stream is not None:
                stream.flush()

    @staticmethod
    def _to_result(returncode: int) -> CommandResult:
        """Map a :attr:`subprocess.CompletedProcess.returncode`.

        On POSIX a negative value ``-N`` means the child was killed by
        signal ``N``.
        """
        if returncode < 0:
            return CommandResult(returncode=None, signal=-returncode)
        return CommandResult(returncode=returncode)

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def run(self, argv: Sequence[str]) -> CommandResult:
        """Run *argv* and block until the child exits.

        Raises
        ------
        CommandLaunchError
            When the executable is missing, not executable, or the OS
            refuses to start it.
        """
        executable = argv[0]
        self._flush_parent_streams()

        try:
            completed = subprocess.run(
                list(argv),
                stdin=subprocess.DEVNULL,
                check=False,
            )
        except FileNotFoundError as exc:
            raise CommandLaunchError(
                f"command not found: {executable}",
                hint="Check the spelling or that the program is on your PATH.",
            ) from exc
        except PermissionError as exc:
            raise CommandLaunchError(
                f"permission denied: {executable}",
                hint="Make sure the file is executable (chmod +x).",
            ) from exc
        except OSError as exc:
            raise CommandLaunchError(
                f"failed to start {executable}: {exc.strerror or exc}",
            ) from exc

        return self._to_result(completed.returncode)
