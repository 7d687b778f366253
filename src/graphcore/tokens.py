"""Token splitting and unsigned-integer validation.

Every dataset line is broken into **tokens** before anything else looks
at it.  A token is a contiguous run of characters that are not
delimiters; runs of delimiters (spaces, tabs, commas, newlines) count
as a single separator, so ``"1,,2"`` and ``"1 ,\t2"`` both yield
``["1", "2"]``.

Validation is deliberately stricter than ``int()``:

- Only ASCII digits ``0-9`` — no sign, no whitespace, no ``0x``
  prefixes, no underscores, no Unicode digits like ``"٣"``.
- The value must fit in an unsigned 32-bit integer.
- A **node ID** must additionally be nonzero (zero means "unset").
"""

import re

# Characters that separate tokens on a dataset line.
DELIMITERS = " \n\t,"

# Largest value an unsigned 32-bit record field can hold.
UINT32_MAX = 2**32 - 1
_UINT32_DIGITS = len(str(UINT32_MAX))

_DIGITS = re.compile(r"[0-9]+")


def split_tokens(line: str, delimiters: str = DELIMITERS) -> list[str]:
    """Split *line* into non-empty tokens separated by *delimiters*.

    Args:
        line: The raw text of one line.
        delimiters: Every character in this string acts as a separator.

    Returns:
        The tokens in order of appearance.  An empty or all-delimiter
        line yields an empty list.

    """
    tokens: list[str] = []
    start: int | None = None
    for i, ch in enumerate(line):
        if ch in delimiters:
            if start is not None:
                tokens.append(line[start:i])
                start = None
        elif start is None:
            start = i
    if start is not None:
        tokens.append(line[start:])
    return tokens


def is_valid_uint(token: str) -> bool:
    """Return True if *token* is a decimal unsigned 32-bit integer."""
    if _DIGITS.fullmatch(token) is None:
        return False
    significant = token.lstrip("0") or "0"
    if len(significant) > _UINT32_DIGITS:
        return False
    return int(significant, 10) <= UINT32_MAX


def is_valid_node_id(token: str) -> bool:
    """Return True if *token* is a valid unsigned integer other than zero."""
    return is_valid_uint(token) and token.lstrip("0") != ""


def parse_uint(token: str) -> int:
    """Convert a validated token to an int.

    Leading zeros are read as decimal (``"010"`` is ten).

    Raises:
        ValueError: If *token* is not a valid unsigned 32-bit integer.

    """
    if not is_valid_uint(token):
        msg = f"Not an unsigned 32-bit integer: {token!r}"
        raise ValueError(msg)
    return int(token.lstrip("0") or "0", 10)
