"""Structured error types for the Morse converter.

The codec itself never raises; these cover the command-line layer. Each
class also inherits the matching built-in so code catching ``ValueError``
or ``OSError`` keeps working.

Hierarchy::

    MorseError (Exception)
    +-- InvalidArgumentsError    — bad usage
    |   +-- MissingInputError       — no input text, file or pipe
    |   +-- ConflictingOptionsError — mutually exclusive flags combined
    |       +-- EncodeOnlyOptionError — encode-only flag used to decode
    +-- InputNotFoundError       — input file cannot be opened
    +-- InputReadError           — file / stdin read failure
    +-- OutputWriteError         — output file cannot be written

``label`` is the prefix shown to the user on stderr.
"""

from __future__ import annotations


class MorseError(Exception):
    """Base class for all Morse converter errors."""

    label = "Error"


class InvalidArgumentsError(MorseError, ValueError):
    """Command-line arguments are incomplete or unusable."""


class MissingInputError(InvalidArgumentsError):
    """No input text, input file or piped stdin was supplied."""


class ConflictingOptionsError(InvalidArgumentsError):
    """Options that cannot be combined were given together."""


class EncodeOnlyOptionError(ConflictingOptionsError):
    """An encode-only option was combined with decode."""

    label = "Warning"


class InputNotFoundError(MorseError, FileNotFoundError):
    """The input file does not exist or cannot be opened."""

    label = "Input Error"


class InputReadError(MorseError, OSError):
    """The input could be opened but not read completely."""

    label = "Input Error"


class OutputWriteError(MorseError, OSError):
    """The output file could not be written."""

    label = "Output Error"
