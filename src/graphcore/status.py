"""Status messages — the outcome protocol every command reports through.

After each command the shell shows exactly one status line.  The line
starts with one of four fixed prefixes that external tools parse, so
the vocabulary is a wire-level contract and must not change:

======== ===========
Kind     Prefix
======== ===========
SUCCESS  ``OK.``
FAILURE  ``FAILED!``
ERROR    ``ERROR!``
NONE     ``NONE.``
======== ===========

FAILURE means the command was used wrongly (bad syntax, unknown name);
ERROR means the command ran but its input was bad; NONE means there
was nothing to report.
"""

from dataclasses import dataclass
from enum import StrEnum


class StatusKind(StrEnum):
    """The four outcome kinds, valued by their wire prefix."""

    SUCCESS = "OK."
    FAILURE = "FAILED!"
    ERROR = "ERROR!"
    NONE = "NONE."


@dataclass(frozen=True)
class StatusMessage:
    """One reported outcome: a kind plus a free-text explanation.

    Attributes:
        kind: Which of the four outcomes this is.
        text: Human-readable explanation (may be empty).

    """

    kind: StatusKind
    text: str = ""

    @property
    def ok(self) -> bool:
        """Return True for SUCCESS and NONE, False for FAILURE and ERROR."""
        return self.kind in (StatusKind.SUCCESS, StatusKind.NONE)

    def __str__(self) -> str:
        """Format as ``<prefix> <text>``, e.g. ``OK. 3 arcs added``."""
        return f"{self.kind} {self.text}".rstrip()
