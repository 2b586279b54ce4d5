"""
ethtx utilities.

This module provides hex helpers and logging setup for the library.
"""

from ethtx.utils.helpers import (
    big_endian_to_int,
    hex_to_bytes,
    strip_leading_zeroes,
    to_hex_data,
    to_hex_quantity,
)
from ethtx.utils.logging import (
    configure_logging,
    disable_logging,
    enable_debug,
    get_logger,
    set_level,
)

__all__ = [
    # Hex helpers
    "big_endian_to_int",
    "hex_to_bytes",
    "strip_leading_zeroes",
    "to_hex_data",
    "to_hex_quantity",
    # Logging
    "get_logger",
    "configure_logging",
    "set_level",
    "disable_logging",
    "enable_debug",
]
