"""Morse symbol table and codec."""

from .codec import EncodeConfig, WordSeparator, decode, encode  # noqa: F401
from .errors import (  # noqa: F401
    ConflictingOptionsError,
    EncodeOnlyOptionError,
    InputNotFoundError,
    InputReadError,
    InvalidArgumentsError,
    MissingInputError,
    MorseError,
    OutputWriteError,
)
from .table import char_for, code_for  # noqa: F401
