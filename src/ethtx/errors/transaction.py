"""
Transaction codec and signature exceptions.

These are raised by encoding, decoding and sender recovery. All of them
are deterministic functions of the input, so none is worth retrying.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ethtx.errors.base import EthTxError


class TransactionError(EthTxError):
    """Base exception for transaction encoding and recovery failures."""

    code = "TRANSACTION_ERROR"


class MissingValueError(TransactionError):
    """
    Raised when a transaction without a value is encoded.

    Example:
        >>> raise MissingValueError()
    """

    code = "MISSING_VALUE"

    def __init__(self, *, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("Transaction value must be set before encoding", details=details)


class MalformedEncodingError(TransactionError):
    """
    Raised when raw bytes do not describe a signed legacy transaction.

    Example:
        >>> raise MalformedEncodingError("expected 9 fields", field_count=6)
    """

    code = "MALFORMED_ENCODING"

    def __init__(
        self,
        reason: str,
        *,
        field_count: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = dict(details) if details else {}
        if field_count is not None:
            details["field_count"] = field_count

        super().__init__(f"Malformed transaction encoding: {reason}", details=details)
        self.reason = reason
        self.field_count = field_count


class InvalidSignatureError(TransactionError):
    """
    Raised when r or s is zero, so no signer can be recovered.

    Example:
        >>> raise InvalidSignatureError(r=0, s=5)
    """

    code = "INVALID_SIGNATURE"

    def __init__(
        self,
        *,
        r: int,
        s: int,
        reason: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = dict(details) if details else {}
        details["r"] = r
        details["s"] = s

        message = "Invalid transaction signature"
        if reason:
            message += f" ({reason})"

        super().__init__(message, details=details)
        self.r = r
        self.s = s
        self.reason = reason


class RecoveryFailureError(TransactionError):
    """
    Raised when the curve recovery rejects the hash/signature pair.

    Example:
        >>> raise RecoveryFailureError("signature v out of range", v=36)
    """

    code = "RECOVERY_FAILURE"

    def __init__(
        self,
        reason: str,
        *,
        v: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = dict(details) if details else {}
        if v is not None:
            details["v"] = v

        super().__init__(f"Public key recovery failed: {reason}", details=details)
        self.reason = reason
        self.v = v
