"""The command contract — what every shell command must provide.

A command is an object, not a function, because it carries state
between calls: the **latest status message**.  The shell (or any
other host) runs a command, then asks it how things went.

Every command supplies:

- ``name`` — the word the user types.
- ``synopsis`` — one line of usage, e.g. ``help [command]``.
- ``help_text`` — a longer description.
- ``return_type`` — what shape of result it yields (see ``ReturnType``).
- ``execute(args, stdin)`` — do the work and return the data.

The base class supplies the shared behaviour: reporting status,
composing syntax errors, and reading dataset blocks from the input
stream.

Return types matter for output.  An ``OTHER`` command talks directly
to the human, so it writes its output (including syntax errors) to
its output stream as it goes.  The list and ``NONE`` commands hand
their results to the host, which decides what to print.
"""

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, TextIO

from graphcore.dataset import Dataset, read_dataset
from graphcore.status import StatusKind, StatusMessage


class ReturnType(Enum):
    """What shape of result a command yields to its caller."""

    NONE = "none"
    ARC_LIST = "arc_list"
    NODE_LIST = "node_list"
    OTHER = "other"


@dataclass(frozen=True)
class CommandResult:
    """The status a command ended with, alongside the data it produced.

    Attributes:
        status: The command's latest status message.
        data: Node IDs for NODE_LIST, arc pairs for ARC_LIST, else None.

    """

    status: StatusMessage
    data: Any = None


class Command(ABC):
    """Abstract base for every shell command."""

    name: str = "command"

    def __init__(self, *, stdout: TextIO | None = None) -> None:
        """Create a command.

        Args:
            stdout: Where output meant for the user is written.
                    Defaults to ``sys.stdout`` at write time.

        """
        self._stdout = stdout
        self._status: StatusMessage | None = None

    @property
    def synopsis(self) -> str:
        """Return one line describing the command and its parameters."""
        return self.name

    @property
    def help_text(self) -> str:
        """Return text describing what the command does."""
        return f"Help text for {self.name}."

    @property
    @abstractmethod
    def return_type(self) -> ReturnType:
        """Return the shape of result this command yields."""

    @abstractmethod
    def execute(self, args: list[str], stdin: TextIO) -> Any:
        """Run the command.

        Args:
            args: The words following the command name.
            stdin: The stream dataset blocks are read from.

        Returns:
            The command's data, according to its return type.

        """

    @property
    def status(self) -> StatusMessage | None:
        """Return the most recent status message, or None before any report."""
        return self._status

    def run(self, args: list[str], stdin: TextIO) -> CommandResult:
        """Execute the command and return its status with its data."""
        self._status = None
        data = self.execute(args, stdin)
        status = self._status if self._status is not None else self.none()
        return CommandResult(status=status, data=data)

    # -- Status reporting ----------------------------------------------------

    def report(self, kind: StatusKind, text: str = "") -> StatusMessage:
        """Replace the latest status message and return it."""
        self._status = StatusMessage(kind=kind, text=text)
        return self._status

    def success(self, text: str = "") -> StatusMessage:
        """Report success."""
        return self.report(StatusKind.SUCCESS, text)

    def failure(self, text: str = "") -> StatusMessage:
        """Report a failure (the command was used wrongly)."""
        return self.report(StatusKind.FAILURE, text)

    def error(self, text: str = "") -> StatusMessage:
        """Report an error (the command ran but its input was bad)."""
        return self.report(StatusKind.ERROR, text)

    def none(self, text: str = "") -> StatusMessage:
        """Report that there was nothing to report."""
        return self.report(StatusKind.NONE, text)

    def syntax_error(self) -> StatusMessage:
        """Report a usage error quoting the synopsis.

        ``OTHER`` commands also show it to the user straight away,
        since nobody else will print their status.
        """
        status = self.failure(f"Syntax: {self.synopsis}")
        if self.return_type is ReturnType.OTHER:
            self.emit(str(status))
        return status

    def emit(self, text: str) -> None:
        """Write a line of output meant for the user."""
        out = self._stdout if self._stdout is not None else sys.stdout
        print(text, file=out)

    # -- Input -------------------------------------------------------------

    def read_dataset(self, stdin: TextIO, expected_width: int) -> Dataset:
        """Read a block of node-ID records and report the outcome.

        A failed block produces exactly one ``ERROR!`` status naming
        the first bad line, however many lines were bad.

        Args:
            stdin: The stream to read from.
            expected_width: Fields per record (1 for nodes, 2 for arcs).

        Returns:
            The dataset; discard its rows when ``ok`` is False.

        """
        self.success()
        dataset = read_dataset(stdin, expected_width)
        if dataset.error is not None:
            self.error(f"error reading data set (line {dataset.error.lineno})")
        return dataset
