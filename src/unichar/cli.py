"""Command-line interface for unichar."""

from __future__ import annotations

import argparse
import sys
import tomllib
import unicodedata
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TextIO

from unichar.char import Character, decompose
from unichar.chartype import CharType
from unichar.display import (
    TARGET_CHAR_DISPLAY_WIDTH,
    Stylize,
    ansi_stylize,
    dump_chars,
    dump_widths,
    format_char,
    plain_stylize,
)
from unichar.errors import GraphemeError

CONFIG_NAME = "unichar.toml"
NORMALIZATION_FORMS = ("NFC", "NFD", "NFKC", "NFKD")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    text: str | None
    input_file: Path | None
    char_mode: bool
    find: str | None
    summary: bool
    color: bool
    width: int
    normalize: str
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="unichar",
        description="Inspect the grapheme clusters of a string",
    )
    p.add_argument("text", nargs="?", help="Text to inspect (default: read stdin)")
    p.add_argument("-f", "--file", metavar="FILE", help="Read the text from FILE")
    p.add_argument(
        "-c",
        "--char",
        action="store_true",
        help="Treat the input as a single character and show its details",
    )
    p.add_argument("--find", metavar="CHAR", help="Report where CHAR first occurs")
    p.add_argument(
        "--summary",
        action="store_true",
        default=None,
        help="Print per-type counts and whitespace locations",
    )
    p.add_argument(
        "--color",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Colourise output with ANSI escapes",
    )
    p.add_argument(
        "--width",
        type=int,
        default=None,
        metavar="CELLS",
        help=f"Display cells for the quoted character (default: {TARGET_CHAR_DISPLAY_WIDTH})",
    )
    p.add_argument(
        "--normalize",
        choices=NORMALIZATION_FORMS,
        default=None,
        help="Normalisation form used by --find (default: NFC)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument("--debug", action="store_true", help="Dump a width report to stderr")
    return p


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else search_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace, search_dir: Path | None = None) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, search_dir if search_dir is not None else Path("."))

    cfg_display = config.get("display")
    if not isinstance(cfg_display, dict):
        cfg_display = {}
    cfg_find = config.get("find")
    if not isinstance(cfg_find, dict):
        cfg_find = {}

    # Colour: config < CLI
    color = False
    if isinstance(cfg_display.get("color"), bool):
        color = cfg_display["color"]
    if args.color is not None:
        color = args.color

    # Summary: config < CLI
    summary = False
    if isinstance(cfg_display.get("summary"), bool):
        summary = cfg_display["summary"]
    if args.summary is not None:
        summary = args.summary

    # Width: config < CLI
    width = TARGET_CHAR_DISPLAY_WIDTH
    cfg_width = cfg_display.get("width")
    if isinstance(cfg_width, int) and not isinstance(cfg_width, bool):
        width = cfg_width
    if args.width is not None:
        width = args.width
    if width < 1:
        raise argparse.ArgumentTypeError(f"invalid width (expected a positive integer): {width}")

    # Normalisation form: config < CLI
    normalize = "NFC"
    cfg_form = cfg_find.get("normalize")
    if cfg_form is not None:
        if cfg_form not in NORMALIZATION_FORMS:
            raise argparse.ArgumentTypeError(f"invalid normalization form in config: {cfg_form}")
        normalize = cfg_form
    if args.normalize is not None:
        normalize = args.normalize

    input_file = Path(args.file) if args.file else None
    if input_file is not None and args.text is not None:
        raise argparse.ArgumentTypeError("give either TEXT or --file, not both")

    return CliOptions(
        text=args.text,
        input_file=input_file,
        char_mode=args.char,
        find=args.find,
        summary=summary,
        color=color,
        width=width,
        normalize=normalize,
        debug=args.debug,
    )


def read_input(options: CliOptions, stdin: TextIO | None = None) -> str:
    """Return the text to inspect from TEXT, --file, or stdin."""
    if options.text is not None:
        return options.text
    if options.input_file is not None:
        return options.input_file.read_text(encoding="utf-8")
    return (stdin if stdin is not None else sys.stdin).read()


def strip_terminator(text: str) -> str:
    """Drop one trailing LF, CR or CRLF from *text*."""
    for terminator in ("\r\n", "\n", "\r"):
        if text.endswith(terminator):
            return text[: -len(terminator)]
    return text


# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------


def describe_char(char: Character, stylize: Stylize, out: TextIO) -> None:
    """Print raw value, display form, code points and numeric value of *char*."""
    code_points = " ".join(f"U+{cp:04X}" for cp in char.code_points)
    out.write(f"raw:\t{char.get_raw_string()}\n")
    out.write(f"char:\t{format_char(char, stylize)}\n")
    out.write(f"display:\t{char.to_string()}\n")
    out.write(f"code points:\t{code_points}\n")
    out.write(f"numeric value:\t{char.get_numeric_value()}\n")


def find_char(chars: list[Character], needle: str, form: str = "NFC") -> Character | None:
    """Return the first character equal to *needle* under normalisation *form*."""
    target = unicodedata.normalize(form, needle)
    for char in chars:
        if unicodedata.normalize(form, char.value) == target:
            return char
    return None


def report_found(char: Character, needle: str, out: TextIO) -> None:
    p = char.position
    out.write(f"--- Found the character '{needle}' ---\n")
    out.write(f"Value: {char.value}\n")
    out.write(f"Is it uppercase? {char.is_upper_case()}\n")
    out.write(f"Index in string: {p.index}\n")
    out.write(f"Line number: {p.line}\n")
    out.write(f"Column number: {p.column}\n")


def report_summary(chars: list[Character], out: TextIO) -> None:
    """Print per-type counts, then the location of whitespace and newlines."""
    counts: dict[CharType, int] = {}
    for char in chars:
        counts[char.type] = counts.get(char.type, 0) + 1

    out.write(f"characters: {len(chars)}\n")
    if chars:
        out.write(f"max width: {chars[0].max_width}\n")
    for char_type, n in counts.items():
        out.write(f"  {char_type.value:<12} {n}\n")

    for char in chars:
        p = char.position
        if char.is_whitespace():
            out.write(f"whitespace {char.to_string()} at line {p.line}, column {p.column}\n")
        elif char.is_newline():
            out.write(f"newline {char.to_string()} at line {p.line}, column {p.column}\n")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except tomllib.TOMLDecodeError as exc:
        print(f"error: invalid config: {exc}", file=sys.stderr)
        return 2

    try:
        text = read_input(options)
    except OSError as exc:
        print(f"error: cannot read {options.input_file}: {exc.strerror}", file=sys.stderr)
        return 1

    if options.debug:
        dump_widths(text)

    stylize = ansi_stylize if options.color else plain_stylize
    out = sys.stdout

    if options.char_mode:
        # Files and piped input end with a line terminator
        if options.text is None:
            text = strip_terminator(text)
        try:
            char = Character(text)
        except GraphemeError as exc:
            print(exc.format(), file=sys.stderr)
            return 1
        describe_char(char, stylize, out)
        return 0

    chars = decompose(text)

    if options.find is not None:
        found = find_char(chars, options.find, options.normalize)
        if found is None:
            print(f"error: character {options.find!r} not found", file=sys.stderr)
            return 1
        report_found(found, options.find, out)
        return 0

    dump_chars(chars, stylize=stylize, width=options.width, file=out)
    if options.summary:
        report_summary(chars, out)
    return 0
