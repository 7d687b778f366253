"""The shell — turns a command line into a command run and its output.

The shell sits between the user-facing loop (``repl``, or the web UI)
and the command registry.  For each line it:

1. splits off the command name (the first word) from its arguments,
2. looks the name up in the registry,
3. runs the command, letting it read dataset blocks from ``stdin``,
4. returns the text the host should show.

What gets shown depends on the command's return type:

- ``NONE`` — the status line, e.g. ``OK. 3 arcs added``.
- ``NODE_LIST`` / ``ARC_LIST`` — the status line, then one row per
  line (``1, 2``), then an empty line closing the block.
- ``OTHER`` — nothing; the command has already written its output.

Design choices:
    - **Returns strings, not prints.**  The shell stays testable and
      the host decides where the text goes.
    - **Nothing is fatal.**  Unknown commands and commands that blow
      up become status lines; the session carries on.
    - **Everything is logged** to the shell's ``Logger``.
"""

from typing import TextIO

from graphcore.command import Command, CommandResult, ReturnType
from graphcore.logging import Logger
from graphcore.registry import CommandRegistry
from graphcore.status import StatusKind, StatusMessage

_LIST_TYPES = (ReturnType.NODE_LIST, ReturnType.ARC_LIST)


class Shell:
    """Command interpreter over a ``CommandRegistry``."""

    def __init__(
        self,
        registry: CommandRegistry,
        *,
        stdin: TextIO,
        logger: Logger | None = None,
    ) -> None:
        """Create a shell.

        Args:
            registry: The commands this shell can run.
            stdin: The stream commands read dataset blocks from.
            logger: Where dispatch and errors are logged.

        """
        self._registry = registry
        self._stdin = stdin
        self._logger = logger if logger is not None else Logger()
        self._last_status: StatusMessage | None = None

    @property
    def registry(self) -> CommandRegistry:
        """Return the shell's command registry."""
        return self._registry

    @property
    def logger(self) -> Logger:
        """Return the shell's log."""
        return self._logger

    @property
    def last_status(self) -> StatusMessage | None:
        """Return the status of the most recent command line."""
        return self._last_status

    @property
    def quitting(self) -> bool:
        """Return True once a command has asked the shell to stop."""
        return self._registry.quitting

    def execute(self, line: str) -> str:
        """Run one command line and return the text to show.

        Args:
            line: The raw command line, e.g. ``"add-arcs"``.

        Returns:
            The output to display; empty for blank lines and ``OTHER``
            commands.

        """
        words = line.split()
        if not words:
            return ""
        name, args = words[0], words[1:]

        command = self._registry.find(name)
        if command is None:
            self._logger.warning(f"unknown command '{name}'", source="shell")
            self._last_status = StatusMessage(StatusKind.FAILURE, f"unknown command '{name}'")
            return str(self._last_status)

        self._logger.info(line.strip(), source="shell")
        result = self._run(command, args)
        self._last_status = result.status
        if not result.status.ok:
            self._logger.error(str(result.status), source=command.name)
        elif isinstance(result.data, list):
            self._logger.debug(f"{len(result.data)} rows returned", source=command.name)
        return self.format_result(command, result)

    def _run(self, command: Command, args: list[str]) -> CommandResult:
        try:
            return command.run(args, self._stdin)
        except Exception as e:  # noqa: BLE001
            status = command.error(f"{type(e).__name__}: {e}")
            if command.return_type is ReturnType.OTHER:
                command.emit(str(status))
            return CommandResult(status=status)

    @staticmethod
    def format_result(command: Command, result: CommandResult) -> str:
        """Render *result* the way *command*'s return type calls for."""
        if command.return_type is ReturnType.OTHER:
            return ""
        status = str(result.status)
        if command.return_type not in _LIST_TYPES or result.data is None:
            return status
        lines = [status]
        for item in result.data:
            row = item if isinstance(item, tuple) else (item,)
            lines.append(", ".join(str(value) for value in row))
        lines.append("")
        return "\n".join(lines)
