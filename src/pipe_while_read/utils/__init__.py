"""Shared utilities — constants and helpers importable by any layer.

Rules
-----
* No business logic.
* No I/O.
"""

from __future__ import annotations

DEFAULT_ENCODING: str = "utf-8"
"""Encoding used to decode standard-input lines (strict)."""

DRY_RUN_PREFIX: str = "[DRY RUN]"
"""Leading marker of every dry-run description line."""

NEWLINE_DELIMITER: bytes = b"\n"
"""Default input record terminator."""

NUL_DELIMITER: bytes = b"\0"
"""Record terminator for ``--null`` input (as produced by ``find -print0``)."""

READ_CHUNK_SIZE: int = 64 * 1024
"""Bytes requested per read when splitting on a non-newline delimiter."""
