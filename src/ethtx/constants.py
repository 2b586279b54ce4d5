"""Constants for ethtx.

This module defines the constant values used across the library,
including encoding lengths, signature offsets and option defaults.
"""

# Encoding Constants
ADDRESS_LENGTH = 20
WORD_LENGTH = 32
UINT256_MAX = 2**256 - 1

# Field counts of the legacy RLP list
SIGNED_FIELD_COUNT = 9

# Recovery id offsets (v values)
LEGACY_V_OFFSET = 27  # pre-EIP-155: v = 27 + recovery id
ALT_V_OFFSET = 31  # 31/32 variant seen on some signers
EIP155_V_OFFSET = 35  # EIP-155: v = chain_id * 2 + 35 + recovery id

# Option defaults
DEFAULT_GAS_PRICE = 5_000_000_000  # 5 gwei
DEFAULT_GAS_LIMIT = 21_000  # plain value transfer
DEFAULT_CALL_ON_BLOCK = "pending"

# Environment variable read by utils.logging.configure_logging
LOG_LEVEL_ENV = "ETHTX_LOG_LEVEL"

__all__ = [
    "ADDRESS_LENGTH",
    "WORD_LENGTH",
    "UINT256_MAX",
    "SIGNED_FIELD_COUNT",
    "LEGACY_V_OFFSET",
    "ALT_V_OFFSET",
    "EIP155_V_OFFSET",
    "DEFAULT_GAS_PRICE",
    "DEFAULT_GAS_LIMIT",
    "DEFAULT_CALL_ON_BLOCK",
    "LOG_LEVEL_ENV",
]
