"""
Command-line interface.

Reads input from a literal argument, a file, or piped stdin, runs it through
the codec and prints the result (or writes it to --out). Every failure is a
``MorseError`` reported once on stderr with a non-zero exit status.
"""

from __future__ import annotations

import argparse
import json
import os
import sys

from colorama import Fore, Style, just_fix_windows_console

from . import __author__, __email__, __program__
from .core.codec import EncodeConfig, WordSeparator, decode, encode
from .core.config import apply_config_defaults, load_config, save_config
from .core.errors import (
    ConflictingOptionsError,
    EncodeOnlyOptionError,
    InputNotFoundError,
    InputReadError,
    MissingInputError,
    MorseError,
    OutputWriteError,
)

_NOTES = """\
notes:
  - If neither INPUT_TEXT nor INPUT_FILE is given, input is read from stdin
  - Cannot specify both encode (-e) and decode (-d) options
  - Input and output files can be given as relative or absolute paths
  - Newlines and carriage returns are ignored in input
  - Letters are separated by single spaces, words by triple spaces
  - Unsupported characters are represented as '*' in Morse code output

examples:
  morse -e "HELLO WORLD"                       Encode 'HELLO WORLD'
  morse "HELLO WORLD"                          Same as above (encode is default)
  morse -d ".... . .-.. .-.. --- / .-- --- .-. .-.. -.."
                                               Decode Morse code
  cat file.txt | morse -e                      Encode content from a pipe
  morse -e input.txt                           Encode content of input.txt
  morse -d input.morse -o output.txt           Decode and write to output.txt
  morse -e --slash-wordspacer "HELLO WORLD"    Use ' / ' between words

supported characters:
  - Letters: A-Z (case insensitive)
  - Numbers: 0-9
  - Symbols: Space, ., ,, :, ;, ?, !, =, -, +, _, (, ), /, @
"""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="morse",
        description="Convert text to Morse code and back.",
        epilog=_NOTES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "input",
        nargs="?",
        metavar="INPUT_TEXT|INPUT_FILE",
        help="Text to convert, or path to a readable file. "
             "Omit to read from stdin.",
    )
    parser.add_argument(
        "-e", "--encode",
        action="store_true",
        help="Encode text to Morse code (default if not specified)",
    )
    parser.add_argument(
        "-d", "--decode",
        action="store_true",
        help="Decode Morse code to text",
    )
    parser.add_argument(
        "-o", "--out",
        metavar="FILE",
        help="Write output to FILE instead of stdout",
    )
    parser.add_argument(
        "--slash-wordspacer",
        action="store_true",
        help="Use ' / ' between words (encode only)",
    )
    parser.add_argument(
        "--programmer-info",
        action="store_true",
        help="Display information about the programmer as JSON",
    )
    parser.add_argument(
        "--save-config",
        action="store_true",
        help="Save --slash-wordspacer / --no-color as defaults and exit",
    )
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_false",
        help="Disable coloured output",
    )
    return parser


def _print_status(msg: str, error: bool = False) -> None:
    stream = sys.stderr if error else sys.stdout
    print(msg, file=stream)


def _paint(text: str, color: str, stream, enabled: bool) -> str:
    if enabled and stream.isatty():
        return f"{color}{Style.BRIGHT}{text}{Style.RESET_ALL}"
    return text


def _programmer_info() -> str:
    return json.dumps(
        {"name": __author__, "program": __program__, "email": __email__},
        indent=2,
    )


def _strip_trailing_newline(data: str) -> str:
    return data[:-1] if data.endswith("\n") else data


def _read_file(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = f.read()
    except FileNotFoundError as exc:
        raise InputNotFoundError(f"Could not open file '{path}'") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(f"Could not read file '{path}': {exc}") from exc
    return _strip_trailing_newline(data)


def _read_stdin() -> str:
    try:
        data = sys.stdin.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(f"Could not read from stdin: {exc}") from exc
    return _strip_trailing_newline(data)


def _stdin_is_piped() -> bool:
    try:
        return not sys.stdin.isatty()
    except (AttributeError, ValueError):
        return False


def _resolve_input(arg: str | None) -> str:
    """Pick the input source: readable file, literal text, then piped stdin."""
    if arg is not None:
        if os.path.isfile(arg) and os.access(arg, os.R_OK):
            return _read_file(arg)
        return arg
    if _stdin_is_piped():
        return _read_stdin()
    raise MissingInputError("No input text provided.")


def _write_output(path: str, content: str) -> None:
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as exc:
        raise OutputWriteError(
            f"Could not open file '{path}' for writing: {exc.strerror or exc}"
        ) from exc


def _check_options(args: argparse.Namespace, explicit_slash: bool) -> None:
    if args.encode and args.decode:
        raise ConflictingOptionsError(
            "Cannot specify both encode (-e) and decode (-d) options"
        )
    if args.decode and explicit_slash:
        raise EncodeOnlyOptionError(
            "--slash-wordspacer can only be used with encode operation"
        )


def _convert(args: argparse.Namespace) -> tuple[str, str]:
    text = _resolve_input(args.input)

    if args.decode:
        return "Decoded", decode(text)

    separator = (
        WordSeparator.SLASH if args.slash_wordspacer else WordSeparator.TRIPLE_SPACE
    )
    return "Encoded", encode(text, EncodeConfig(word_separator=separator))


def run_cli(argv: list[str] | None = None) -> None:
    """Run the CLI interface."""
    just_fix_windows_console()
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.programmer_info:
        print(_programmer_info())
        return

    # Saved preferences fill unset flags; the conflict check sees only argv
    explicit_slash = args.slash_wordspacer
    apply_config_defaults(args, load_config())

    try:
        _check_options(args, explicit_slash)

        if args.save_config:
            path = save_config(
                {"slash_wordspacer": args.slash_wordspacer, "color": args.color}
            )
            _print_status(f"Preferences saved to {path}")
            return

        label, result = _convert(args)
        if args.out:
            _write_output(args.out, result)
            return
    except MorseError as exc:
        prefix = _paint(f"{exc.label}:", Fore.RED, sys.stderr, args.color)
        _print_status(f"{prefix} {exc}", error=True)
        if isinstance(exc, MissingInputError):
            parser.print_help(sys.stderr)
        sys.exit(1)

    prefix = _paint(f"{label}:", Fore.GREEN, sys.stdout, args.color)
    print(f"{prefix} {result}")


def main() -> None:
    run_cli()
