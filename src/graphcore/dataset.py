"""Dataset reader — a block of fixed-width records from a text stream.

Commands that load nodes or arcs read a **dataset block**: consecutive
lines of the same width, terminated by a blank line or end of stream.

    1 2
    2 3
    3 1
    <blank>

The reader is a small state machine over lines:

1. Read one record.
2. Malformed line (bad token, separator-only, too long) or wrong
   width → remember the error if it is the first of the block, mark
   the block failed, and **keep going**.
3. Empty record → end of block, stop.
4. Otherwise keep the row (only while the block is still good).

Why keep going after an error?  The input stream is shared with the
shell: if the reader stopped at the first bad line, the rest of the
block would be read back as commands.  Draining to the blank line
keeps the stream framed on the next command.

Only the *first* error is kept for reporting so that a badly pasted
block of a thousand lines produces one message, not a thousand.  A
stream failure (not EOF) is the exception — nothing more can be read,
so it ends the block immediately.
"""

from dataclasses import dataclass, field
from typing import TextIO

from graphcore.records import MAX_LINE_LENGTH, RecordError, StreamReadError, read_record


class WidthError(RecordError):
    """Raise when a record has the wrong number of fields."""


@dataclass(frozen=True)
class DatasetError:
    """The first error seen in a dataset block.

    Attributes:
        lineno: 1-based line number within the block.
        reason: Description of what was wrong with the line.

    """

    lineno: int
    reason: str


@dataclass
class Dataset:
    """The outcome of reading one dataset block.

    ``rows`` holds the records accepted before the first error.  When
    ``ok`` is False the caller should discard ``rows`` entirely.
    """

    rows: list[tuple[int, ...]] = field(default_factory=list)
    ok: bool = True
    error: DatasetError | None = None
    error_count: int = 0

    def record_error(self, lineno: int, exc: RecordError) -> None:
        """Count an error on *lineno*, keeping only the first for reporting."""
        if self.error is None:
            self.error = DatasetError(lineno=lineno, reason=str(exc))
        self.error_count += 1
        self.ok = False


def read_dataset(
    stream: TextIO,
    expected_width: int,
    *,
    node_ids: bool = True,
    max_line_length: int = MAX_LINE_LENGTH,
) -> Dataset:
    """Read records from *stream* until a blank line or end of stream.

    Args:
        stream: The input stream, positioned at the first data line.
        expected_width: Fields per record (1 for nodes, 2 for arcs).
        node_ids: If True, every field must be a nonzero node ID.
        max_line_length: Longest accepted line, terminator excluded.

    Returns:
        A ``Dataset`` with the accepted rows and the block's status.

    """
    dataset = Dataset()
    lineno = 0
    while True:
        lineno += 1
        try:
            record = read_record(stream, node_ids=node_ids, max_line_length=max_line_length)
        except StreamReadError as e:
            dataset.record_error(lineno, e)
            return dataset
        except RecordError as e:
            dataset.record_error(lineno, e)
            continue

        if not record:
            return dataset

        if len(record) != expected_width:
            msg = f"expected {expected_width} fields, got {len(record)}"
            dataset.record_error(lineno, WidthError(msg))
            continue

        if dataset.ok:
            dataset.rows.append(tuple(record))
