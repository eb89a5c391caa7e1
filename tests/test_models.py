"""Tests for domain models (core/models.py).

All models are frozen dataclasses — these tests verify immutability,
argv construction, dry-run descriptions and status rendering.
"""

from __future__ import annotations

import signal

import pytest

from pipe_while_read.core.models import CommandResult, DispatchSummary, InvocationSpec
from pipe_while_read.exceptions import InvalidInvocationError


# ---------------------------------------------------------------------------
# InvocationSpec
# ---------------------------------------------------------------------------

class TestInvocationSpec:
    def test_defaults(self) -> None:
        spec = InvocationSpec(executable="echo")
        assert spec.fixed_args == ()
        assert spec.dry_run is False
        assert spec.verbose is False
        assert spec.quiet is False
        assert spec.fail_fast is False
        assert spec.null_data is False

    def test_frozen(self) -> None:
        spec = InvocationSpec(executable="echo")
        with pytest.raises(AttributeError):
            spec.dry_run = True  # type: ignore[misc]

    def test_empty_executable_rejected(self) -> None:
        with pytest.raises(InvalidInvocationError, match="No command"):
            InvocationSpec(executable="")

    def test_argv_appends_line_last(self) -> None:
        spec = InvocationSpec(executable="printf", fixed_args=("X:%s\n",))
        assert spec.argv_for("one") == ("printf", "X:%s\n", "one")

    def test_argv_keeps_line_whole(self) -> None:
        spec = InvocationSpec(executable="echo")
        assert spec.argv_for("--flag with  spaces") == ("echo", "--flag with  spaces")

    def test_describe_with_fixed_args(self) -> None:
        spec = InvocationSpec(executable="echo", fixed_args=("Got:",))
        assert spec.describe("foo") == "[DRY RUN] echo Got: foo"

    def test_describe_joins_fixed_args_with_single_space(self) -> None:
        spec = InvocationSpec(executable="cp", fixed_args=("-v", "-n"))
        assert spec.describe("a.txt") == "[DRY RUN] cp -v -n a.txt"

    def test_describe_without_fixed_args_has_no_double_space(self) -> None:
        spec = InvocationSpec(executable="ls")
        text = spec.describe("dir")
        assert text == "[DRY RUN] ls dir"
        assert "  " not in text


# ---------------------------------------------------------------------------
# CommandResult
# ---------------------------------------------------------------------------

class TestCommandResult:
    def test_zero_is_success(self) -> None:
        assert CommandResult(returncode=0).success is True

    def test_nonzero_is_failure(self) -> None:
        assert CommandResult(returncode=3).success is False

    def test_signal_is_failure(self) -> None:
        assert CommandResult(returncode=None, signal=9).success is False

    def test_describe_exit_status(self) -> None:
        assert CommandResult(returncode=3).describe() == "exit status: 3"

    def test_describe_signal_includes_name(self) -> None:
        result = CommandResult(returncode=None, signal=int(signal.SIGTERM))
        assert result.describe() == f"signal: {int(signal.SIGTERM)} (SIGTERM)"

    def test_describe_unknown_signal_number(self) -> None:
        assert CommandResult(returncode=None, signal=999).describe() == "signal: 999"


# ---------------------------------------------------------------------------
# DispatchSummary
# ---------------------------------------------------------------------------

class TestDispatchSummary:
    def test_unset_status_exits_zero(self) -> None:
        assert DispatchSummary(last_status=None).exit_code == 0

    def test_last_status_is_exit_code(self) -> None:
        assert DispatchSummary(last_status=7).exit_code == 7

    def test_succeeded_count(self) -> None:
        summary = DispatchSummary(last_status=0, commands_run=5, failures=2)
        assert summary.succeeded == 3

    @pytest.mark.parametrize("last_status", [None, 0])
    def test_fail_fast_stop_never_exits_zero(self, last_status: int | None) -> None:
        summary = DispatchSummary(last_status=last_status, stopped_early=True)
        assert summary.exit_code == 1

    def test_fail_fast_stop_keeps_child_code(self) -> None:
        assert DispatchSummary(last_status=4, stopped_early=True).exit_code == 4


class TestDelimiter:
    def test_newline_by_default(self) -> None:
        assert InvocationSpec(executable="echo").delimiter == b"\n"

    def test_nul_with_null_data(self) -> None:
        assert InvocationSpec(executable="echo", null_data=True).delimiter == b"\0"
