#!/usr/bin/env python3
"""Command line interface: convert a binary file into a C header"""

import argparse
import contextlib
import os
import re
import sys

from conf import settings
from deps.converter import convert
from deps.emitter import emit_header
from deps.errors import Bin2hError, InputOpenFailure, OutputCreateFailure
from deps.formatter import validate_column_size
from deps.logs import logger
from deps.names import derive_name
from models import ConversionRequest


def _unsigned(value: str) -> int:
    """Parse an unsigned integer, a leading 0 means octal and 0x hexadecimal"""
    try:
        if re.fullmatch(r"0[0-7]+", value):
            number = int(value, 8)
        else:
            number = int(value, 0)
    except ValueError as ex:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from ex
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value!r}")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=settings.program_name,
        description="Convert a binary file into a C header embedding its bytes.",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"Version: {settings.program_version}",
        help="Display the program version",
    )
    parser.add_argument("-i", "--input", help="The input filename")
    parser.add_argument("-o", "--output", help="The output filename")
    parser.add_argument(
        "-S", "--symbol-name", help="The symbol name of the output array"
    )
    parser.add_argument(
        "-C",
        "--column-size",
        type=_unsigned,
        default=settings.column_size,
        help=f"The column output size (default: {settings.column_size})",
    )
    parser.add_argument(
        "-s",
        "--skip",
        type=_unsigned,
        default=0,
        help="Skip n bytes from the beginning of the file",
    )
    parser.add_argument(
        "-c",
        "--count",
        type=_unsigned,
        default=0,
        help="Process n bytes from the input data (default: all)",
    )
    parser.add_argument(
        "positional_input", nargs="?", metavar="INPUT", help="The input filename"
    )
    return parser.parse_args(argv)


def resolve_names(args: argparse.Namespace) -> tuple[str | None, str, str]:
    """Return the input path (None for standard input), output path and symbol name"""
    input_path = args.input if args.input is not None else args.positional_input
    output_path = args.output
    symbol_name = args.symbol_name

    if input_path is None:
        if not settings.stdin_available:
            raise InputOpenFailure("Ain't any input filename")
        if output_path is None:
            output_path = settings.stdin_output
        if symbol_name is None:
            symbol_name = settings.stdin_symbol
        return None, output_path, symbol_name
    if not input_path:
        raise InputOpenFailure("Couldn't open the input file: empty filename")

    basename = os.path.basename(input_path)
    if output_path is None:
        output_path = derive_name(basename, settings.strip_chars, settings.header_suffix)
    if symbol_name is None:
        symbol_name = derive_name(basename, settings.strip_chars, "")
    return input_path, output_path, symbol_name


def run(args: argparse.Namespace) -> int:
    """Convert the input to a header, returns the number of bytes embedded"""
    validate_column_size(args.column_size)
    input_path, output_path, symbol_name = resolve_names(args)

    with contextlib.ExitStack() as stack:
        if input_path is None:
            source = sys.stdin.buffer
        else:
            try:
                source = stack.enter_context(open(input_path, "rb"))
            except OSError as ex:
                raise InputOpenFailure(
                    f"Couldn't open the input file: {input_path} ({ex.strerror})"
                ) from ex

        request = ConversionRequest(
            source=source,
            skip=args.skip,
            count=args.count,
            column_size=args.column_size,
            seekable=input_path not in (None, settings.stdin_path),
        )
        result = convert(request)

    try:
        with open(output_path, "w", encoding="utf-8", newline="\n") as sink:
            emit_header(result, symbol_name, sink)
    except OSError as ex:
        raise OutputCreateFailure(
            f"Couldn't create/overwrite the output file: {output_path} ({ex.strerror})"
        ) from ex

    logger.info(
        "Wrote %d bytes as %s to %s", result.total_bytes, symbol_name, output_path
    )
    return result.total_bytes


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        run(args)
    except Bin2hError as ex:
        print(f"error: {ex}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
