"""Tests for the command contract.

Commands keep only their latest status message, compose syntax errors
from their synopsis, and read dataset blocks with a single error report
per block.
"""

import io
from typing import TextIO

import pytest

from graphcore.command import Command, CommandResult, ReturnType
from graphcore.status import StatusKind, StatusMessage


class _EchoCommand(Command):
    """A configurable command for exercising the base class."""

    name = "echo"

    def __init__(self, return_type: ReturnType, *, stdout: TextIO | None = None) -> None:
        super().__init__(stdout=stdout)
        self._return_type = return_type
        self.reports: list[StatusMessage] = []

    @property
    def return_type(self) -> ReturnType:
        return self._return_type

    def report(self, kind: StatusKind, text: str = "") -> StatusMessage:
        status = super().report(kind, text)
        self.reports.append(status)
        return status

    def execute(self, args: list[str], stdin: TextIO) -> list[str] | None:
        if args == ["fail"]:
            self.syntax_error()
            return None
        if args == ["silent"]:
            return None
        self.success("echoed")
        return args


class _ArcReader(_EchoCommand):
    """Reads a width-2 block and returns its rows."""

    name = "read-arcs"

    def execute(self, args: list[str], stdin: TextIO) -> list[tuple[int, ...]]:
        dataset = self.read_dataset(stdin, 2)
        return dataset.rows if dataset.ok else []


class TestContract:
    """Verify the default descriptive properties."""

    def test_synopsis_defaults_to_name(self) -> None:
        """Without an override, the synopsis is the name."""
        assert _EchoCommand(ReturnType.NONE).synopsis == "echo"

    def test_help_text_default(self) -> None:
        """Without an override, help names the command."""
        assert _EchoCommand(ReturnType.NONE).help_text == "Help text for echo."

    def test_return_type_is_required(self) -> None:
        """A subclass that omits return_type cannot be instantiated."""

        class _Incomplete(Command):
            def execute(self, args: list[str], stdin: TextIO) -> None:
                return None

        with pytest.raises(TypeError):
            _Incomplete()  # type: ignore[abstract]


class TestStatusReporting:
    """Verify the latest-message-only status field."""

    def test_no_status_before_any_report(self) -> None:
        """A fresh command has no status."""
        assert _EchoCommand(ReturnType.NONE).status is None

    def test_report_overwrites(self) -> None:
        """Only the most recent report is retained."""
        cmd = _EchoCommand(ReturnType.NONE)
        cmd.error("first")
        cmd.success("second")
        assert cmd.status == StatusMessage(StatusKind.SUCCESS, "second")

    def test_helpers_use_their_kinds(self) -> None:
        """Each helper reports its own kind."""
        cmd = _EchoCommand(ReturnType.NONE)
        assert cmd.success().kind is StatusKind.SUCCESS
        assert cmd.failure().kind is StatusKind.FAILURE
        assert cmd.error().kind is StatusKind.ERROR
        assert cmd.none().kind is StatusKind.NONE


class TestRun:
    """Verify run() returns status alongside data."""

    def test_run_returns_status_and_data(self) -> None:
        """The result pairs the latest status with the returned data."""
        cmd = _EchoCommand(ReturnType.OTHER)
        result = cmd.run(["a", "b"], io.StringIO())
        assert result == CommandResult(
            status=StatusMessage(StatusKind.SUCCESS, "echoed"), data=["a", "b"]
        )

    def test_run_without_report_is_none(self) -> None:
        """A command that reports nothing ends with NONE."""
        cmd = _EchoCommand(ReturnType.NONE)
        result = cmd.run(["silent"], io.StringIO())
        assert result.status.kind is StatusKind.NONE

    def test_run_clears_previous_status(self) -> None:
        """A stale status from an earlier run is not carried over."""
        cmd = _EchoCommand(ReturnType.NONE)
        cmd.run(["x"], io.StringIO())
        result = cmd.run(["silent"], io.StringIO())
        assert result.status.kind is StatusKind.NONE


class TestSyntaxError:
    """Verify syntax error composition and emission."""

    def test_syntax_error_quotes_synopsis(self) -> None:
        """The failure message embeds the synopsis."""
        cmd = _EchoCommand(ReturnType.NONE, stdout=io.StringIO())
        status = cmd.syntax_error()
        assert str(status) == "FAILED! Syntax: echo"
        assert cmd.status == status

    def test_other_command_emits_immediately(self) -> None:
        """OTHER commands both record and print the failure."""
        out = io.StringIO()
        cmd = _EchoCommand(ReturnType.OTHER, stdout=out)
        cmd.run(["fail"], io.StringIO())
        assert cmd.status is not None
        assert cmd.status.kind is StatusKind.FAILURE
        assert out.getvalue() == "FAILED! Syntax: echo\n"

    @pytest.mark.parametrize(
        "return_type", [ReturnType.NODE_LIST, ReturnType.ARC_LIST, ReturnType.NONE]
    )
    def test_other_return_types_do_not_emit(self, return_type: ReturnType) -> None:
        """List and NONE commands only record the failure."""
        out = io.StringIO()
        cmd = _EchoCommand(return_type, stdout=out)
        cmd.run(["fail"], io.StringIO())
        assert cmd.status is not None
        assert cmd.status.kind is StatusKind.FAILURE
        assert out.getvalue() == ""


class TestReadDataset:
    """Verify dataset reading through a command."""

    def test_good_block_reports_success(self) -> None:
        """A clean block leaves an OK status."""
        cmd = _ArcReader(ReturnType.ARC_LIST)
        result = cmd.run([], io.StringIO("1 2\n3 4\n\n"))
        assert result.data == [(1, 2), (3, 4)]
        assert result.status.kind is StatusKind.SUCCESS

    def test_bad_block_reports_one_error(self) -> None:
        """Two bad lines still produce exactly one ERROR report."""
        cmd = _ArcReader(ReturnType.ARC_LIST)
        result = cmd.run([], io.StringIO("1 2 3\n4\n\n"))
        errors = [r for r in cmd.reports if r.kind is StatusKind.ERROR]
        assert len(errors) == 1
        assert result.status == StatusMessage(
            StatusKind.ERROR, "error reading data set (line 1)"
        )

    def test_bad_block_consumes_whole_block(self) -> None:
        """Both lines of the failed block are consumed."""
        stdin = io.StringIO("1 2 3\n\nnext\n")
        _ArcReader(ReturnType.ARC_LIST).run([], stdin)
        assert stdin.readline() == "next\n"
