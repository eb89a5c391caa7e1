"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path that does not relay a child's
status uses a well-known, tested value rather than magic integers
scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — no child status was recorded, or the last one was 0."""

GENERAL_ERROR: int = 1
"""A known PipeWhileReadError was caught (decode or launch failure)."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""
