"""
Fixed Morse symbol table.

One canonical ordered tuple of (character, code) pairs is the single source
of truth. Two lookup dicts are derived from it at import time:

  _CODE_BY_CHAR  — character -> code, used by encode (includes space -> "/")
  _CHAR_BY_CODE  — code -> character, used by decode (letters, digits and
                   punctuation only; "/" is a word-separator token in the
                   decode grammar and is never looked up here)
"""

from __future__ import annotations

from types import MappingProxyType

WORD_SLASH = "/"

MORSE_TABLE: tuple[tuple[str, str], ...] = (
    # Letters
    ("A", ".-"), ("B", "-..."), ("C", "-.-."), ("D", "-.."),
    ("E", "."), ("F", "..-."), ("G", "--."), ("H", "...."),
    ("I", ".."), ("J", ".---"), ("K", "-.-"), ("L", ".-.."),
    ("M", "--"), ("N", "-."), ("O", "---"), ("P", ".--."),
    ("Q", "--.-"), ("R", ".-."), ("S", "..."), ("T", "-"),
    ("U", "..-"), ("V", "...-"), ("W", ".--"), ("X", "-..-"),
    ("Y", "-.--"), ("Z", "--.."),
    # Digits
    ("0", "-----"), ("1", ".----"), ("2", "..---"), ("3", "...--"),
    ("4", "....-"), ("5", "....."), ("6", "-...."), ("7", "--..."),
    ("8", "---.."), ("9", "----."),
    # Punctuation
    (".", ".-.-.-"), (",", "--..--"), (":", "---..."), (";", "-.-.-."),
    ("?", "..--.."), ("!", "-.-.--"),
    # Math symbols
    ("=", "-...-"), ("-", "-....-"), ("+", ".-.-."),
    # Format symbols
    ("_", "..--.-"), ("(", "-.--."), (")", "-.--.-"), ("/", "-..-."),
    ("@", ".--.-."),
    # Space
    (" ", WORD_SLASH),
)

_CODE_BY_CHAR = MappingProxyType(dict(MORSE_TABLE))
_CHAR_BY_CODE = MappingProxyType(
    {code: char for char, code in MORSE_TABLE if code != WORD_SLASH}
)

SUPPORTED_CHARACTERS = frozenset(_CODE_BY_CHAR)


def code_for(char: str) -> str | None:
    """Return the Morse code for *char* (case-insensitive), or None."""
    return _CODE_BY_CHAR.get(char.upper())


def char_for(code: str) -> str | None:
    """Return the uppercase character whose code is exactly *code*, or None."""
    return _CHAR_BY_CODE.get(code)
