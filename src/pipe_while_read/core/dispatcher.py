"""Core line dispatcher — one command per input line.

The dispatcher reads raw records from a binary source, decodes them, and
for each one either describes the command (dry run) or hands the
argument vector to a :class:`~pipe_while_read.core.protocols.CommandRunner`.

Guarantees
----------
* Strictly sequential: the next line is read only after the previous
  child has exited.
* Only the last exit code is kept; earlier statuses are not aggregated.
* Only :class:`~pipe_while_read.exceptions.PipeWhileReadError`
  subclasses escape.
"""

from __future__ import annotations

from collections.abc import Iterator
from functools import partial
from typing import BinaryIO, TextIO

from pipe_while_read.core.models import DispatchSummary, InvocationSpec
from pipe_while_read.core.protocols import CommandRunner, Reporter
from pipe_while_read.exceptions import InputDecodeError
from pipe_while_read.utils import DEFAULT_ENCODING, NEWLINE_DELIMITER, READ_CHUNK_SIZE


def _iter_records(source: BinaryIO, delimiter: bytes) -> Iterator[bytes]:
    """Yield raw records from *source*, each still ending in *delimiter*.

    The final record is yielded without a delimiter when the input does
    not end with one.
    """
    if delimiter == NEWLINE_DELIMITER:
        yield from source
        return

    # read1 returns what is available instead of waiting for a full chunk.
    read = getattr(source, "read1", source.read)
    pending = b""
    for chunk in iter(partial(read, READ_CHUNK_SIZE), b""):
        pending += chunk
        *records, pending = pending.split(delimiter)
        for record in records:
            yield record + delimiter
    if pending:
        yield pending


def iter_lines(
    source: BinaryIO,
    *,
    delimiter: bytes = NEWLINE_DELIMITER,
    encoding: str = DEFAULT_ENCODING,
) -> Iterator[str]:
    """Yield decoded records from *source* with their terminator removed.

    With the default newline delimiter both ``\\n`` and ``\\r\\n`` are
    stripped and a lone ``\\r`` is part of the line.  Any other
    *delimiter* is stripped on its own.

    Raises
    ------
    InputDecodeError
        On the first record that is not valid *encoding* text.
    """
    for lineno, raw in enumerate(_iter_records(source, delimiter), start=1):
        if raw.endswith(delimiter):
            raw = raw[: -len(delimiter)]
            if delimiter == NEWLINE_DELIMITER and raw.endswith(b"\r"):
                raw = raw[:-1]
        try:
            yield raw.decode(encoding)
        except UnicodeDecodeError as exc:
            raise InputDecodeError(
                f"stdin line {lineno} is not valid {encoding}: {exc.reason}",
                hint=f"Convert the input to {encoding} first, e.g. with iconv.",
            ) from exc


class LineDispatcher:
    """Runs (or describes) the spec's command once per input line.

    Parameters
    ----------
    spec:
        The resolved command template.
    runner:
        Any object satisfying the :class:`CommandRunner` protocol.
    stdout:
        Stream receiving dry-run descriptions.
    reporter:
        Callable receiving one-line diagnostics for standard error.
    """

    def __init__(
        self,
        spec: InvocationSpec,
        runner: CommandRunner,
        *,
        stdout: TextIO,
        reporter: Reporter,
    ) -> None:
        self._spec = spec
        self._runner = runner
        self._stdout = stdout
        self._report = reporter

    def run(self, source: BinaryIO) -> DispatchSummary:
        """Consume *source* and return the run summary.

        Input is read to exhaustion unless ``fail_fast`` stops the loop
        at the first non-success child.

        Raises
        ------
        InputDecodeError
            When a line cannot be decoded; no further lines are handled.
        CommandLaunchError
            When the executable cannot be started; no further lines are
            handled.
        """
        spec = self._spec
        last_status: int | None = None
        lines_read = commands_run = failures = 0
        stopped_early = False

        for line in iter_lines(source, delimiter=spec.delimiter):
            lines_read += 1

            if spec.dry_run:
                self._stdout.write(spec.describe(line) + "\n")
                continue

            argv = spec.argv_for(line)
            if spec.verbose:
                self._report("+ " + " ".join(argv))

            result = self._runner.run(argv)
            commands_run += 1

            # A signal death has no code; keep whatever came before.
            if result.returncode is not None:
                last_status = result.returncode

            if not result.success:
                failures += 1
                if not spec.quiet:
                    self._report(f"command exited with {result.describe()}")
                if spec.fail_fast:
                    self._report("stopping after first failure (--fail-fast)")
                    stopped_early = True
                    break

        if spec.dry_run:
            self._stdout.flush()

        summary = DispatchSummary(
            last_status=last_status,
            lines_read=lines_read,
            commands_run=commands_run,
            failures=failures,
            stopped_early=stopped_early,
        )
        if spec.verbose and not spec.dry_run:
            self._report_totals(summary)
        return summary

    def _report_totals(self, summary: DispatchSummary) -> None:
        if summary.commands_run == 0:
            self._report("No input lines to process")
            return
        self._report(
            f"Completed: {summary.succeeded} succeeded, {summary.failures} failed"
        )
