"""
Root of the ethtx exception hierarchy.

Every failure the library reports is an :class:`EthTxError`. A subclass
stands for one failure kind and names it with a ``code`` class attribute;
the offending values travel in ``details`` so callers can log or serialize
them without parsing the message.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Optional


class EthTxError(Exception):
    """
    Base exception for all ethtx errors.

    Attributes:
        code: Failure kind, fixed per subclass (e.g. "MALFORMED_ENCODING")
        message: Human-readable description
        details: Offending input values, keyed by name

    Example:
        >>> try:
        ...     Transaction.decode("0xc0")
        ... except EthTxError as err:
        ...     err.code, err.details
        ('MALFORMED_ENCODING', {'field_count': 0})
    """

    code: ClassVar[str] = "ETHTX_ERROR"

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = dict(details) if details else {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, details={self.details!r})"

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form for structured logs and API responses."""
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(EthTxError):
    """
    Raised when a transaction field or option fails input validation.

    Example:
        >>> raise ValidationError("nonce must be non-negative", field="nonce")
    """

    code = "INVALID_INPUT"

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = dict(details) if details else {}
        if field:
            details["field"] = field

        super().__init__(message, details=details)
        self.field = field
