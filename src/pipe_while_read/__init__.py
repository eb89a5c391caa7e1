"""pipe-while-read — run a command once for every line of standard input.

Each input line is appended as the final argument of a fixed command.
Commands run one at a time; the last exit status becomes the tool's own.
"""

from pipe_while_read.version import __version__

__all__: list[str] = ["__version__"]
