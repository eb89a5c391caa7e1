"""Allow ``python -m pipe_while_read`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m pipe_while_read`` behaves identically to the
``pipe-while-read`` console script.
"""

from __future__ import annotations

from pipe_while_read.cli.app import cli

if __name__ == "__main__":
    cli()
