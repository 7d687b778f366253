"""Interactive REPL (Read-Eval-Print Loop) for the graphcore shell.

The REPL is the thin I/O wrapper around ``Shell``:

    1. **Read** — show a prompt and read one command line.
    2. **Eval** — pass it to ``shell.execute()``.
    3. **Print** — write the result.
    4. **Loop** — until end of input or a ``quit`` command.

Commands and their dataset blocks come from the **same stream**, which
is what lets you pipe a whole session into the shell::

    printf 'add-arcs\\n1 2\\n2 3\\n\\nlist-arcs\\n' | graphcore

After ``add-arcs`` has consumed its block (up to the blank line), the
next line read here is ``list-arcs``.

The prompt is only shown when input is a terminal, so piped sessions
produce clean, parseable output.
"""

import sys
from typing import TextIO

from graphcore.builtins import default_registry
from graphcore.graph import Graph
from graphcore.logging import Logger
from graphcore.shell import Shell

PROMPT = "graphcore> "

_BANNER_WIDTH = 38


def format_banner(command_names: list[str]) -> str:
    """Format the start-up banner listing the available commands."""
    border = "=" * _BANNER_WIDTH
    header = f"  {border}\n            graphcore v0.1.0\n   An interactive graph shell\n  {border}\n"
    body = "Commands: " + ", ".join(command_names)
    footer = "\nType 'help' for usage, 'quit' to leave."
    return header + body + footer


def build_prompt(stdin: TextIO) -> str:
    """Return the prompt for *stdin*: ``PROMPT`` on a terminal, else empty."""
    try:
        interactive = stdin.isatty()
    except ValueError:
        interactive = False
    return PROMPT if interactive else ""


def run(stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Run the shell until end of input or ``quit``.

    Args:
        stdin: Command and dataset input (default ``sys.stdin``).
        stdout: Where output goes (default ``sys.stdout``).

    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    logger = Logger()
    registry = default_registry(Graph(), logger, stdout=stdout)
    shell = Shell(registry, stdin=stdin, logger=logger)
    prompt = build_prompt(stdin)

    if prompt:
        print(format_banner(registry.names), file=stdout)  # noqa: T201

    with registry:
        try:
            while not shell.quitting:
                stdout.write(prompt)
                stdout.flush()
                line = stdin.readline()
                if not line:
                    if prompt:
                        print(file=stdout)  # noqa: T201
                    break
                result = shell.execute(line)
                if result:
                    print(result, file=stdout)  # noqa: T201
        except KeyboardInterrupt:
            print("\nInterrupted.", file=stdout)  # noqa: T201
