"""Record reader — one line of a text stream into a list of integers.

A **record** is the parsed form of a single input line: the ordered
unsigned integers it contains.  Reading a record follows a strict
protocol so that dataset loading can detect malformed input per line:

1. Read exactly one line (at most ``MAX_LINE_LENGTH`` characters,
   not counting the terminator).
2. End-of-stream with nothing read → an empty record.
3. Strip one trailing ``"\\n"`` and split the rest into tokens.
4. A non-empty line made only of separators is an error.
5. Every token must validate, or the whole record fails.

An empty record therefore means "blank line or end of stream" — the
end of a dataset block.  Every failure raises a ``RecordError``
subclass; callers that need to keep the stream framed simply catch it
and carry on with the next line.
"""

from typing import TextIO

from graphcore.tokens import is_valid_node_id, is_valid_uint, parse_uint, split_tokens

# Longest accepted line, in characters, excluding the line terminator.
MAX_LINE_LENGTH = 1024


class RecordError(ValueError):
    """Raise when a line cannot be parsed as a record."""


class InvalidTokenError(RecordError):
    """Raise when a token is not an acceptable unsigned integer."""

    def __init__(self, token: str, *, node_ids: bool = False) -> None:
        """Create an error naming the offending token."""
        kind = "node ID" if node_ids else "unsigned integer"
        super().__init__(f"invalid {kind}: {token!r}")
        self.token = token


class LineTooLongError(RecordError):
    """Raise when a line exceeds the maximum accepted length."""


class StreamReadError(RecordError):
    """Raise when the underlying stream fails for a reason other than EOF."""


def _drain_line(stream: TextIO, chunk_size: int) -> None:
    """Consume the rest of the current line so the stream stays framed."""
    while True:
        chunk = stream.readline(chunk_size)
        if not chunk or chunk.endswith("\n"):
            return


def _read_line(stream: TextIO, max_line_length: int) -> str:
    try:
        raw = stream.readline(max_line_length + 1)
        if len(raw) > max_line_length and not raw.endswith("\n"):
            _drain_line(stream, max_line_length + 1)
            msg = f"line longer than {max_line_length} characters"
            raise LineTooLongError(msg)
    except (OSError, UnicodeDecodeError) as e:
        msg = f"error reading input: {e}"
        raise StreamReadError(msg) from e
    return raw


def read_record(
    stream: TextIO,
    *,
    node_ids: bool = False,
    max_line_length: int = MAX_LINE_LENGTH,
) -> list[int]:
    """Read and validate one record from *stream*.

    Args:
        stream: A text stream positioned at the start of a line.
        node_ids: If True, every value must be a nonzero node ID.
        max_line_length: Longest accepted line, terminator excluded.

    Returns:
        The parsed integers.  An empty list means the line was blank
        or the stream is exhausted.

    Raises:
        LineTooLongError: If the line is longer than *max_line_length*.
        StreamReadError: If reading from the stream fails.
        InvalidTokenError: If any token fails validation.
        RecordError: If the line consists only of separators.

    """
    line = _read_line(stream, max_line_length)
    if line.endswith("\n"):
        line = line[:-1]

    tokens = split_tokens(line)
    if line and not tokens:
        msg = "line contains only separators"
        raise RecordError(msg)

    validate = is_valid_node_id if node_ids else is_valid_uint
    record: list[int] = []
    for token in tokens:
        if not validate(token):
            raise InvalidTokenError(token, node_ids=node_ids)
        record.append(parse_uint(token))
    return record


def read_uint_record(stream: TextIO) -> list[int]:
    """Read one record of unsigned integers (zero allowed)."""
    return read_record(stream)


def read_node_id_record(stream: TextIO) -> list[int]:
    """Read one record of node IDs (zero rejected)."""
    return read_record(stream, node_ids=True)
