"""
ethtx exception hierarchy.

    EthTxError
    ├── ValidationError
    └── TransactionError
        ├── MissingValueError
        ├── MalformedEncodingError
        ├── InvalidSignatureError
        └── RecoveryFailureError
"""

from ethtx.errors.base import EthTxError, ValidationError
from ethtx.errors.transaction import (
    InvalidSignatureError,
    MalformedEncodingError,
    MissingValueError,
    RecoveryFailureError,
    TransactionError,
)

__all__ = [
    "EthTxError",
    "ValidationError",
    "TransactionError",
    "MissingValueError",
    "MalformedEncodingError",
    "InvalidSignatureError",
    "RecoveryFailureError",
]
