"""Hex mask parsing and byte selection by mask."""

from __future__ import annotations

import re

MAX_MASK_DIGITS = 16

_HEX_PREFIX = re.compile(r"\s*(?:0[xX])?([0-9a-fA-F]+)")


def parse_hex_mask(hex_str: str) -> int:
    """Parse a hexadecimal mask of at most 16 digits.

    An optional ``0x`` prefix is accepted and parsing stops at the first
    character that is not a hex digit. A string without any hex digits
    yields a mask of zero.
    """
    if len(hex_str) > MAX_MASK_DIGITS:
        raise ValueError("Mask exceeds 64 bits (max 16 hex digits).")
    match = _HEX_PREFIX.match(hex_str)
    if match is None:
        return 0
    return int(match.group(1), 16)


def masked_bytes(value: int, mask: int) -> bytes:
    """Return the bytes of ``value`` selected by ``mask``, most significant first.

    Only the eight low-order bytes are considered; a byte is emitted for each
    byte position where the mask is non-zero.
    """
    mask &= 0xFFFFFFFFFFFFFFFF
    value &= mask
    value_bytes = value.to_bytes(8, "big")
    mask_bytes = mask.to_bytes(8, "big")
    return bytes(v for v, m in zip(value_bytes, mask_bytes) if m)