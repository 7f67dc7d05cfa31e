"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys

from .conversion import convert_decimal_file_to_binary, extract_masked_bytes_from_decimals
from .gui import run_gui

DEFAULT_MASK = "000000FF"
DEFAULT_INPUT = "../../data/entropy_output.data"
DEFAULT_BINARY = "../../data/u32_output.bin"
DEFAULT_OUTPUT = "../../data/masked_output.bin"
SAMPLES_PER_DECIMATION = 1_000_000


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="autoheuristic",
        description="Explore entropy samples and assess selected value ranges.",
    )
    parser.add_argument("--mask", default=DEFAULT_MASK, help="hex mask for byte extraction")
    parser.add_argument("--input", default=DEFAULT_INPUT, help="decimal sample file")
    parser.add_argument("--binary", default=DEFAULT_BINARY, help="32-bit binary output")
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help="masked byte output")
    parser.add_argument(
        "--convert", action="store_true", help="convert the decimal input to 32-bit binary"
    )
    parser.add_argument(
        "--extract", action="store_true", help="write the masked bytes of each sample"
    )
    parser.add_argument("--no-gui", action="store_true", help="do not open the viewer")
    return parser


def main(argv=None) -> int:
    """Run the command line; returns the exit status."""
    args = _parser().parse_args(argv)

    total = 0
    try:
        if args.convert:
            total = convert_decimal_file_to_binary(args.input, args.binary)
        print(f"Total Amount of Samples: {total}")
        print(f"Decimation Upper Bound: {total // SAMPLES_PER_DECIMATION}")
        if args.extract:
            extract_masked_bytes_from_decimals(args.input, args.output, args.mask)
    except OSError as exc:
        print(f"Error: failed to open input or output file: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.no_gui:
        return 0
    return run_gui(args.output, args.input)


if __name__ == "__main__":
    sys.exit(main())