"""Built-in commands that make the shell usable on its own.

These are small on purpose: they exist to load node and arc sets into
a ``Graph``, list them back, and drive the shell itself (help, quit,
log).  Each one is a ``Command`` subclass, so they double as worked
examples of the command contract:

- ``help`` and ``log`` are ``OTHER`` commands — they write straight to
  the user.
- ``list-nodes`` / ``list-arcs`` return data for the host to print.
- ``add-nodes`` / ``add-arcs`` / ``clear`` / ``quit`` return nothing;
  their status line is the whole story.
"""

from typing import TextIO

from graphcore.command import Command, ReturnType
from graphcore.graph import Graph
from graphcore.logging import Logger, LogLevel
from graphcore.registry import CommandRegistry


class HelpCommand(Command):
    """List commands, or describe one."""

    name = "help"

    def __init__(self, registry: CommandRegistry, *, stdout: TextIO | None = None) -> None:
        """Create a help command that describes *registry*'s commands."""
        super().__init__(stdout=stdout)
        self._registry = registry

    @property
    def synopsis(self) -> str:
        """Return the usage line."""
        return "help [command]"

    @property
    def help_text(self) -> str:
        """Return the description."""
        return "Without arguments, list all commands. With a command name, describe it."

    @property
    def return_type(self) -> ReturnType:
        """Help text is for people."""
        return ReturnType.OTHER

    def execute(self, args: list[str], stdin: TextIO) -> None:
        """Show the command list or one command's help."""
        if len(args) > 1:
            self.syntax_error()
            return
        if not args:
            for command in self._registry.commands:
                self.emit(command.synopsis)
            self.success()
            return
        command = self._registry.find(args[0])
        if command is None:
            self.emit(str(self.failure(f"unknown command '{args[0]}'")))
            return
        self.emit(command.synopsis)
        self.emit(command.help_text)
        self.success()


class QuitCommand(Command):
    """Ask the shell to stop."""

    name = "quit"

    def __init__(self, registry: CommandRegistry, *, stdout: TextIO | None = None) -> None:
        """Create a quit command bound to *registry*'s quit flag."""
        super().__init__(stdout=stdout)
        self._registry = registry

    @property
    def help_text(self) -> str:
        """Return the description."""
        return "Quit the shell."

    @property
    def return_type(self) -> ReturnType:
        """Quit returns nothing."""
        return ReturnType.NONE

    def execute(self, args: list[str], stdin: TextIO) -> None:
        """Set the quit flag."""
        if args:
            self.syntax_error()
            return
        self._registry.request_quit()
        self.success("bye")


class _GraphCommand(Command):
    """Base for commands that operate on a shared ``Graph``."""

    def __init__(self, graph: Graph, *, stdout: TextIO | None = None) -> None:
        super().__init__(stdout=stdout)
        self._graph = graph


class AddNodesCommand(_GraphCommand):
    """Read a block of node IDs and add them to the graph."""

    name = "add-nodes"

    @property
    def help_text(self) -> str:
        """Return the description."""
        return (
            "Read node IDs from input, one per line, until a blank line, "
            "and add them to the graph."
        )

    @property
    def return_type(self) -> ReturnType:
        """Adding returns nothing."""
        return ReturnType.NONE

    def execute(self, args: list[str], stdin: TextIO) -> None:
        """Load the block; leave the graph untouched if any line is bad."""
        if args:
            self.syntax_error()
            return
        dataset = self.read_dataset(stdin, 1)
        if not dataset.ok:
            return
        added = self._graph.add_nodes(row[0] for row in dataset.rows)
        self.success(f"{added} nodes added")


class AddArcsCommand(_GraphCommand):
    """Read a block of arcs and add them to the graph."""

    name = "add-arcs"

    @property
    def help_text(self) -> str:
        """Return the description."""
        return (
            "Read arcs from input, one 'tail head' pair per line, until a "
            "blank line, and add them (and their nodes) to the graph."
        )

    @property
    def return_type(self) -> ReturnType:
        """Adding returns nothing."""
        return ReturnType.NONE

    def execute(self, args: list[str], stdin: TextIO) -> None:
        """Load the block; leave the graph untouched if any line is bad."""
        if args:
            self.syntax_error()
            return
        dataset = self.read_dataset(stdin, 2)
        if not dataset.ok:
            return
        added = self._graph.add_arcs((row[0], row[1]) for row in dataset.rows)
        self.success(f"{added} arcs added")


class ListNodesCommand(_GraphCommand):
    """Yield every node in the graph."""

    name = "list-nodes"

    @property
    def help_text(self) -> str:
        """Return the description."""
        return "List all nodes in ascending order."

    @property
    def return_type(self) -> ReturnType:
        """A list of node IDs."""
        return ReturnType.NODE_LIST

    def execute(self, args: list[str], stdin: TextIO) -> list[int] | None:
        """Return the node IDs."""
        if args:
            self.syntax_error()
            return None
        self.success()
        return self._graph.nodes()


class ListArcsCommand(_GraphCommand):
    """Yield every arc in the graph."""

    name = "list-arcs"

    @property
    def help_text(self) -> str:
        """Return the description."""
        return "List all arcs in ascending order."

    @property
    def return_type(self) -> ReturnType:
        """A list of arcs."""
        return ReturnType.ARC_LIST

    def execute(self, args: list[str], stdin: TextIO) -> list[tuple[int, int]] | None:
        """Return the arcs."""
        if args:
            self.syntax_error()
            return None
        self.success()
        return self._graph.arcs()


class ClearCommand(_GraphCommand):
    """Empty the graph."""

    name = "clear"

    @property
    def help_text(self) -> str:
        """Return the description."""
        return "Remove all nodes and arcs."

    @property
    def return_type(self) -> ReturnType:
        """Clearing returns nothing."""
        return ReturnType.NONE

    def execute(self, args: list[str], stdin: TextIO) -> None:
        """Remove everything from the graph."""
        if args:
            self.syntax_error()
            return
        self._graph.clear()
        self.success("graph cleared")


class LogCommand(Command):
    """Show the shell log."""

    name = "log"

    def __init__(self, logger: Logger, *, stdout: TextIO | None = None) -> None:
        """Create a log command that shows *logger*'s entries."""
        super().__init__(stdout=stdout)
        self._logger = logger

    @property
    def synopsis(self) -> str:
        """Return the usage line."""
        levels = "|".join(level.name.lower() for level in LogLevel)
        return f"log [{levels}]"

    @property
    def help_text(self) -> str:
        """Return the description."""
        return "Show the shell log, optionally only entries at or above a level."

    @property
    def return_type(self) -> ReturnType:
        """The log is for people."""
        return ReturnType.OTHER

    def execute(self, args: list[str], stdin: TextIO) -> None:
        """Print matching log entries."""
        if len(args) > 1:
            self.syntax_error()
            return
        min_level: LogLevel | None = None
        if args:
            try:
                min_level = LogLevel[args[0].upper()]
            except KeyError:
                self.syntax_error()
                return
        for entry in self._logger.filter(min_level=min_level):
            self.emit(str(entry))
        self.success()


def default_registry(
    graph: Graph,
    logger: Logger,
    *,
    stdout: TextIO | None = None,
) -> CommandRegistry:
    """Build a registry holding every built-in command.

    Args:
        graph: The graph the node and arc commands operate on.
        logger: The log shown by the ``log`` command.
        stdout: Where ``OTHER`` commands write their output.

    """
    registry = CommandRegistry()
    registry.register(HelpCommand(registry, stdout=stdout))
    registry.register(QuitCommand(registry, stdout=stdout))
    registry.register(AddNodesCommand(graph, stdout=stdout))
    registry.register(AddArcsCommand(graph, stdout=stdout))
    registry.register(ListNodesCommand(graph, stdout=stdout))
    registry.register(ListArcsCommand(graph, stdout=stdout))
    registry.register(ClearCommand(graph, stdout=stdout))
    registry.register(LogCommand(logger, stdout=stdout))
    return registry
