"""Command registry — the shell's table of commands.

The registry owns every registered command for its whole lifetime:
commands are created when they are registered and released when the
registry is closed.  Lookup is by exact, case-sensitive name.  The
table is small (a handful of commands), so a linear scan over a list
is all it needs, and the list keeps registration order for ``help``.

The registry also carries the shell's **quit flag**.  Quitting is not
an error — it is a user-requested transition that the host loop
checks after every command.
"""

from types import TracebackType
from typing import Self

from graphcore.command import Command


class CommandRegistry:
    """Owns the shell's commands and its quit flag."""

    def __init__(self) -> None:
        """Create an empty registry."""
        self._commands: list[Command] = []
        self._quitting = False

    def __enter__(self) -> Self:
        """Return the registry itself."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Release every command on leaving the ``with`` block."""
        self.close()

    def register(self, command: Command) -> None:
        """Take ownership of *command*.

        Raises:
            ValueError: If a command with the same name is already registered.

        """
        if self.find(command.name) is not None:
            msg = f"Command '{command.name}' already registered"
            raise ValueError(msg)
        self._commands.append(command)

    def find(self, name: str) -> Command | None:
        """Return the command called *name*, or None if there is none."""
        for command in self._commands:
            if command.name == name:
                return command
        return None

    @property
    def commands(self) -> list[Command]:
        """Return all commands in registration order."""
        return list(self._commands)

    @property
    def names(self) -> list[str]:
        """Return all command names in registration order."""
        return [c.name for c in self._commands]

    def request_quit(self) -> None:
        """Ask the host loop to stop after the current command."""
        self._quitting = True

    @property
    def quitting(self) -> bool:
        """Return True once termination has been requested."""
        return self._quitting

    def close(self) -> None:
        """Release all registered commands."""
        self._commands.clear()
