"""
Repnum CLI

Displays a number in various base representations:

    $ repnum 42
    [dec]	42	=	[hex]	2a	[oct]	52	[bin]	101010

    $ repnum -b 16 ff
    [dec]	255	=	[hex]	ff	[oct]	377	[bin]	11111111
"""

# Standard library -----------------------------------------------------------------------------------------------------
import argparse
import sys
from dataclasses import dataclass
from typing import NoReturn, Sequence

# Local ----------------------------------------------------------------------------------------------------------------
from .binary import BUFFER_SIZE, to_binary
from .numeric import AUTO_BASE
from .pack import PROG_NAME, version_banner
from .validators import ensure_number, validate_base

# Constants ------------------------------------------------------------------------------------------------------------

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class NumInfo:
    """
    The number to display and the base it was read in.

    base is the forced base from -b/--base, or 0 when it was auto-detected.
    """
    num: int
    base: int = AUTO_BASE


class RepnumArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit code 1 instead of 2."""

    def error(self, message: str) -> NoReturn:
        self.exit(EXIT_FAILURE, f"{self.prog}: {message}\n")


# Methods --------------------------------------------------------------------------------------------------------------

def build_parser(prog: str = PROG_NAME) -> RepnumArgumentParser:
    parser = RepnumArgumentParser(
        prog=prog,
        description="Displays a number in various base representations.",
    )
    parser.add_argument("number", nargs="?", help="number to display")
    parser.add_argument(
        "-b", "--base", metavar="BASE",
        help="force a base. Possible values are 2 through 36.",
    )
    parser.add_argument(
        "-v", "--version", action="version", version=version_banner(prog),
        help="output version then exit.",
    )
    return parser


def parse_opts(parser: argparse.ArgumentParser, argv: Sequence[str] | None = None) -> NumInfo | None:
    """
    Parse argv into a NumInfo.

    Returns None when no number was given. Option errors exit through the parser,
    number and base errors raise ValueError or OverflowError.
    """
    args, extras = parser.parse_known_args(argv)
    if extras:
        extra = extras[0]
        kind = "Unrecognized option" if extra.startswith("-") else "Unexpected argument"
        parser.error(f"{kind}: {extra}")

    base = AUTO_BASE
    if args.base is not None:
        base = validate_base(ensure_number(args.base, 10))

    if args.number is None:
        return None
    return NumInfo(num=ensure_number(args.number, base), base=base)


def fmt_report(info: NumInfo, binary: str) -> str:
    """Format the one-line report of info with its pre-rendered binary digits."""
    num = info.num
    return f"[dec]\t{num}\t=\t[hex]\t{num:x}\t[oct]\t{num:o}\t[bin]\t{binary}"


def main(argv: Sequence[str] | None = None) -> int:
    """
    Run repnum on argv (sys.argv[1:] by default) and return the exit code.

    Help and version exit with 0. Any parse failure, overflow, invalid base,
    unrecognized option or missing number exits with 1 and prints nothing to stdout.
    """
    parser = build_parser()
    try:
        return _run(parser, argv)
    except SystemExit as exc:
        return _exit_code(exc)


def run() -> NoReturn:
    """Console script entry point."""
    sys.exit(main())


# Private methods ------------------------------------------------------------------------------------------------------

def _run(parser: RepnumArgumentParser, argv: Sequence[str] | None) -> int:
    try:
        info = parse_opts(parser, argv)
    except (ValueError, OverflowError) as exc:
        _fail(parser, exc)

    if info is None:
        parser.print_help()
        return EXIT_FAILURE

    binary = to_binary(info.num, BUFFER_SIZE)
    if binary is None:
        _fail(parser, f"{info.num} is a too large number.")

    print(fmt_report(info, binary))
    return EXIT_SUCCESS


def _fail(parser: argparse.ArgumentParser, message: object) -> NoReturn:
    parser.exit(EXIT_FAILURE, f"{parser.prog}: {message}\n")


def _exit_code(exc: SystemExit) -> int:
    if exc.code is None:
        return EXIT_SUCCESS
    if isinstance(exc.code, int):
        return exc.code
    return EXIT_FAILURE
