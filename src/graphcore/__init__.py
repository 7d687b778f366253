"""graphcore — an interactive shell for loading and listing graph datasets.

Re-exports the core so callers can write::

    from graphcore import Command, CommandRegistry, read_dataset
"""

from graphcore.command import Command, CommandResult, ReturnType
from graphcore.dataset import Dataset, DatasetError, WidthError, read_dataset
from graphcore.records import (
    InvalidTokenError,
    LineTooLongError,
    RecordError,
    StreamReadError,
    read_node_id_record,
    read_record,
    read_uint_record,
)
from graphcore.registry import CommandRegistry
from graphcore.status import StatusKind, StatusMessage
from graphcore.tokens import is_valid_node_id, is_valid_uint, parse_uint, split_tokens

__all__ = [
    "Command",
    "CommandRegistry",
    "CommandResult",
    "Dataset",
    "DatasetError",
    "InvalidTokenError",
    "LineTooLongError",
    "RecordError",
    "ReturnType",
    "StatusKind",
    "StatusMessage",
    "StreamReadError",
    "WidthError",
    "is_valid_node_id",
    "is_valid_uint",
    "parse_uint",
    "read_dataset",
    "read_node_id_record",
    "read_record",
    "read_uint_record",
    "split_tokens",
]
