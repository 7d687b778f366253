"""Allow ``python -m graphcore``."""

from graphcore.repl import run

run()
