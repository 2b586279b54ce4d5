"""
Hex and integer helpers shared by the codec and the RPC builder.
"""

from __future__ import annotations

import re
from typing import Union

from eth_abi import encode

from ethtx.constants import UINT256_MAX
from ethtx.errors import ValidationError

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]*")


def strip_leading_zeroes(hex_string: str) -> str:
    """
    Strip leading zero nibbles from a 0x-prefixed hex string.

    A zero value keeps a single digit, so the result is never ``"0x"``.

    Example:
        >>> strip_leading_zeroes("0x000000520c")
        '0x520c'
        >>> strip_leading_zeroes("0x00")
        '0x0'
    """
    digits = hex_string[2:] if hex_string.startswith(("0x", "0X")) else hex_string
    digits = digits.lstrip("0")
    return "0x" + (digits or "0")


def to_hex_quantity(value: int) -> str:
    """
    Render an integer as a JSON-RPC quantity via its uint256 ABI encoding.

    Args:
        value: Non-negative integer below 2**256

    Returns:
        Lowercase 0x-prefixed hex without leading zeroes

    Raises:
        ValidationError: If value does not fit uint256
    """
    if value < 0 or value > UINT256_MAX:
        raise ValidationError("quantity must fit in uint256", details={"value": value})
    return strip_leading_zeroes(encode(["uint256"], [value]).hex())


def to_hex_data(data: bytes) -> str:
    """0x-prefixed lowercase hex of a byte string; empty data renders ``"0x"``."""
    return "0x" + bytes(data).hex()


def big_endian_to_int(data: bytes) -> int:
    return int.from_bytes(data, "big") if data else 0


def hex_to_bytes(value: Union[str, bytes, bytearray]) -> bytes:
    """
    Accept raw bytes or a (0x-prefixed) hex string.

    Raises:
        ValidationError: If the value is neither bytes nor a string, or the
            string holds anything besides an even number of hex digits
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if not isinstance(value, str):
        raise ValidationError(
            "expected bytes or a hex string", details={"type": type(value).__name__}
        )
    text = value[2:] if value.startswith(("0x", "0X")) else value
    # bytes.fromhex skips whitespace between digit pairs
    if len(text) % 2 or not _HEX_DIGITS.fullmatch(text):
        raise ValidationError("value is not valid hex", details={"value": value})
    return bytes.fromhex(text)
