"""Conversion of sample files between decimal text and binary forms."""

from __future__ import annotations

import logging
import re
import subprocess
from os import PathLike
from typing import Union

from .masking import masked_bytes, parse_hex_mask

logger = logging.getLogger(__name__)

PathType = Union[str, "PathLike[str]"]

_UNSIGNED = re.compile(r"\s*([+-]?)([0-9]+)")
_LOW_BYTE_MASK = 0x000000FF


def _parse_unsigned(text: str, bits: int) -> int:
    """Parse a leading decimal number the way strtoul does, wrapping negatives."""
    match = _UNSIGNED.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    magnitude = int(match.group(2))
    limit = 1 << bits
    if magnitude >= limit:
        raise ValueError(f"out of range: {text!r}")
    if match.group(1) == "-":
        return (-magnitude) % limit
    return magnitude


def _lines(handle):
    for line in handle:
        yield line.rstrip("\n")


def convert_decimal_file_to_binary(input_path: PathType, output_path: PathType) -> int:
    """Write each decimal line of the input as a little-endian 32-bit word.

    Lines that cannot be parsed are logged and skipped. Returns the number
    of samples written.
    """
    count = 0
    with open(input_path, encoding="utf-8") as src, open(output_path, "wb") as dst:
        for line in _lines(src):
            try:
                value = _parse_unsigned(line, 32)
            except ValueError:
                logger.warning("Error parsing line: %s", line)
                continue
            dst.write(value.to_bytes(4, "little"))
            count += 1
    logger.info("Binary output written to %s", output_path)
    return count


def extract_masked_bytes_from_decimals(
    input_path: PathType, output_path: PathType, hex_mask: str
) -> int:
    """Write the bytes selected by ``hex_mask`` from each decimal line.

    Each line is read as a 64-bit unsigned value. Lines that cannot be parsed
    are logged and skipped. Returns the number of values processed.
    """
    mask = parse_hex_mask(hex_mask)
    count = 0
    with open(input_path, encoding="utf-8") as src, open(output_path, "wb") as dst:
        for line in _lines(src):
            try:
                value = _parse_unsigned(line, 64)
            except ValueError:
                logger.warning("Error parsing line: %s", line)
                continue
            dst.write(masked_bytes(value, mask))
            count += 1
    logger.info("Masked output written to %s", output_path)
    return count


def convert_and_mask_little_endian_binary(
    input_path: PathType, output_path: PathType, hex_mask: str
) -> None:
    """Mask little-endian 32-bit words and write them out.

    With the mask ``0xFF`` only the low byte of each word is written;
    otherwise each masked word is written as big-endian 32 bits. A trailing
    partial word is ignored.
    """
    mask = parse_hex_mask(hex_mask)
    with open(input_path, "rb") as src, open(output_path, "wb") as dst:
        while len(chunk := src.read(4)) == 4:
            masked = int.from_bytes(chunk, "little") & mask & 0xFFFFFFFF
            if mask == _LOW_BYTE_MASK:
                dst.write(bytes([masked]))
            else:
                dst.write(masked.to_bytes(4, "big"))
    logger.info("Masked binary output written to %s", output_path)


def exec_command(cmd: str) -> str:
    """Run ``cmd`` through the shell and return what it wrote to stdout."""
    completed = subprocess.run(
        cmd, shell=True, stdout=subprocess.PIPE, text=True, check=False
    )
    return completed.stdout