"""Shared pytest fixtures and configuration for the pipe-while-read test suite.

Guidelines
----------
* Core tests use a mocked :class:`CommandRunner` — no processes spawned.
* Infra and end-to-end tests spawn only the running Python interpreter
  or POSIX utilities guarded by ``skipif``.
* Tests must not depend on the terminal state.
"""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parent.parent / "src"


@pytest.fixture()
def run_cli() -> Callable[..., subprocess.CompletedProcess[bytes]]:
    """Run ``python -m pipe_while_read`` with *args* and *stdin* bytes."""

    def _run(*args: str, stdin: bytes = b"") -> subprocess.CompletedProcess[bytes]:
        env = dict(os.environ)
        env["PYTHONPATH"] = os.pathsep.join(
            filter(None, [str(SRC_DIR), env.get("PYTHONPATH")])
        )
        env["NO_COLOR"] = "1"
        return subprocess.run(
            [sys.executable, "-m", "pipe_while_read", *args],
            input=stdin,
            capture_output=True,
            env=env,
            timeout=60,
            check=False,
        )

    return _run
