"""
Text <-> Morse codec.

Encoded grammar:
  letter separator:  single space
  word separator:    three spaces, or " / " with WordSeparator.SLASH
  unsupported char:  "*"

Decoding accepts both word separators and silently drops any code that is
not in the symbol table.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .table import WORD_SLASH, char_for, code_for

UNSUPPORTED_MARKER = "*"
LETTER_SEPARATOR = " "

# Letter buffer capacity; table codes are at most 6 symbols
MAX_CODE_LENGTH = 19

_IGNORED = frozenset("\r\n")


class WordSeparator(enum.Enum):
    TRIPLE_SPACE = "   "
    SLASH = " / "


@dataclass(frozen=True)
class EncodeConfig:
    """Options for :func:`encode`."""
    word_separator: WordSeparator = WordSeparator.TRIPLE_SPACE


def encode(text: str, config: EncodeConfig | None = None) -> str:
    """Encode *text* to Morse code. Never raises for any string input."""
    if config is None:
        config = EncodeConfig()

    parts: list[str] = []
    last_was_space = False
    first_token = True

    for ch in text:
        if ch in _IGNORED:
            continue

        if ch == " ":
            if not last_was_space and not first_token:
                parts.append(config.word_separator.value)
            last_was_space = True
            continue

        if not first_token and not last_was_space:
            parts.append(LETTER_SEPARATOR)

        code = code_for(ch)
        parts.append(code if code is not None else UNSUPPORTED_MARKER)

        last_was_space = False
        first_token = False

    return "".join(parts)


def decode(code: str) -> str:
    """Decode Morse *code* to uppercase text. Never raises for any string input.

    Only the 1st and 3rd consecutive spaces act: the 1st ends a letter, the
    3rd emits a word space and restarts the count. A "/" always ends the
    pending letter and emits a word space.
    """
    out: list[str] = []
    letter: list[str] = []
    spaces = 0

    def flush() -> None:
        if letter:
            char = char_for("".join(letter))
            if char is not None:
                out.append(char)
            letter.clear()

    for ch in code:
        if ch in _IGNORED:
            continue

        if ch == " ":
            spaces += 1
            if spaces == 1:
                flush()
            elif spaces == 3:
                out.append(" ")
                spaces = 0
        elif ch == WORD_SLASH:
            flush()
            out.append(" ")
            spaces = 0
        else:
            spaces = 0
            if len(letter) < MAX_CODE_LENGTH:
                letter.append(ch)

    flush()
    return "".join(out)
