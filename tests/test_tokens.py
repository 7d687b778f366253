"""Tests for token splitting and unsigned-integer validation.

Every dataset line is split into tokens on spaces, tabs, commas and
newlines, then each token is checked to be a plain decimal number that
fits in 32 bits.  Node IDs must also be nonzero.
"""

import pytest

from graphcore.tokens import (
    DELIMITERS,
    UINT32_MAX,
    is_valid_node_id,
    is_valid_uint,
    parse_uint,
    split_tokens,
)


class TestSplitTokens:
    """Verify splitting a line into tokens."""

    def test_splits_on_spaces(self) -> None:
        """Space-separated words become tokens."""
        assert split_tokens("1 2 3") == ["1", "2", "3"]

    def test_repeated_commas_are_one_separator(self) -> None:
        """A run of commas separates just two tokens."""
        assert split_tokens("1,,2") == ["1", "2"]

    def test_mixed_delimiters(self) -> None:
        """Tabs, commas and spaces can be mixed freely."""
        assert split_tokens(" 7,\t8 ,9\n") == ["7", "8", "9"]

    @pytest.mark.parametrize("line", ["", " ", ",,,", "\t \n", " , \t"])
    def test_delimiter_only_lines_yield_nothing(self, line: str) -> None:
        """Empty or all-delimiter lines produce zero tokens."""
        assert split_tokens(line) == []

    def test_no_token_contains_a_delimiter(self) -> None:
        """Tokens never include delimiter characters."""
        tokens = split_tokens("ab, c\td ,e")
        assert tokens == ["ab", "c", "d", "e"]
        assert all(ch not in DELIMITERS for token in tokens for ch in token)

    def test_custom_delimiters(self) -> None:
        """The delimiter set can be overridden."""
        assert split_tokens("1;2 3", delimiters=";") == ["1", "2 3"]

    def test_join_then_split_reproduces_tokens(self) -> None:
        """Joining valid tokens with spaces and splitting gives them back."""
        tokens = ["0", "42", "007", str(UINT32_MAX)]
        assert split_tokens(" ".join(tokens)) == tokens


class TestIsValidUint:
    """Verify the unsigned-integer validator."""

    @pytest.mark.parametrize("token", ["0", "1", "42", "007", str(UINT32_MAX)])
    def test_digit_tokens_are_valid(self, token: str) -> None:
        """Tokens made only of digits are accepted."""
        assert is_valid_uint(token)

    @pytest.mark.parametrize(
        "token",
        ["", "-1", "+1", "1.0", "0x10", "1e3", " 1", "1 ", "12a", "1_000", "٣", "²"],
    )
    def test_non_digit_tokens_are_invalid(self, token: str) -> None:
        """Signs, prefixes, whitespace and non-ASCII digits are rejected."""
        assert not is_valid_uint(token)

    def test_value_beyond_32_bits_is_invalid(self) -> None:
        """Values that overflow 32 bits fail validation rather than wrap."""
        assert not is_valid_uint(str(UINT32_MAX + 1))
        assert not is_valid_uint("99999999999999999999")

    def test_huge_digit_string_is_invalid(self) -> None:
        """Thousands of digits are rejected, not handed to int()."""
        assert not is_valid_uint("9" * 5000)
        assert not is_valid_node_id("9" * 5000)

    def test_many_leading_zeros_are_valid(self) -> None:
        """Leading zeros do not count towards the 32-bit limit."""
        token = "0" * 5000 + "42"
        assert is_valid_uint(token)
        assert is_valid_node_id(token)
        assert parse_uint(token) == 42


class TestIsValidNodeId:
    """Verify the node ID validator."""

    def test_zero_is_a_uint_but_not_a_node_id(self) -> None:
        """Zero is reserved, so it is never a node ID."""
        assert is_valid_uint("0")
        assert not is_valid_node_id("0")

    def test_zero_with_leading_zeros_is_not_a_node_id(self) -> None:
        """``000`` is still zero."""
        assert not is_valid_node_id("000")
        assert not is_valid_node_id("0" * 5000)

    def test_positive_values_are_node_ids(self) -> None:
        """Any nonzero 32-bit value is a node ID."""
        assert is_valid_node_id("1")
        assert is_valid_node_id(str(UINT32_MAX))

    def test_invalid_uint_is_not_a_node_id(self) -> None:
        """A token that is not a uint cannot be a node ID."""
        assert not is_valid_node_id("-5")


class TestParseUint:
    """Verify conversion of tokens to integers."""

    def test_parses_decimal(self) -> None:
        """Digits convert to their decimal value."""
        assert parse_uint("1234") == 1234

    def test_leading_zeros_are_decimal(self) -> None:
        """``010`` is ten, not an octal eight."""
        assert parse_uint("010") == 10

    def test_rejects_invalid_token(self) -> None:
        """Tokens the validator rejects raise ValueError."""
        with pytest.raises(ValueError, match="unsigned 32-bit"):
            parse_uint("0x1F")
