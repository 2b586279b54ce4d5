"""
Sender recovery for legacy transactions.

``v`` has been written three ways over the protocol's history:

- 27/28: plain recovery id plus 27 (pre-EIP-155)
- 31..34: the same with an offset of 31, used by some signers
- chain_id * 2 + 35/36: EIP-155 replay-protected

:func:`recover_public_key` undoes whichever applies, rebuilds the signing
preimage hash with the same chain id, and hands both to ``eth_keys``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from eth_keys import keys
from eth_keys.datatypes import PublicKey
from eth_keys.exceptions import BadSignature
from eth_keys.exceptions import ValidationError as KeyValidationError

from ethtx.constants import (
    ALT_V_OFFSET,
    EIP155_V_OFFSET,
    LEGACY_V_OFFSET,
    WORD_LENGTH,
)
from ethtx.errors import InvalidSignatureError, RecoveryFailureError, TransactionError
from ethtx.types.address import NormalAddress
from ethtx.utils.logging import get_logger

if TYPE_CHECKING:
    from ethtx.types.transaction import Transaction

_logger = get_logger(__name__)


def marshal_signature(v: int, r: int, s: int) -> bytes:
    """
    Pack a recoverable signature in the ``r || s || v`` layout eth_keys reads.

    Args:
        v: Normalized recovery id (one byte)
        r: Signature r (32 bytes)
        s: Signature s (32 bytes)

    Returns:
        65-byte signature

    Raises:
        RecoveryFailureError: If a component does not fit its width
    """
    try:
        packed = (
            r.to_bytes(WORD_LENGTH, "big")
            + s.to_bytes(WORD_LENGTH, "big")
            + v.to_bytes(1, "big")
        )
    except OverflowError:
        raise RecoveryFailureError("signature component out of range", v=v)
    return packed


def _v_offset(v: int) -> int:
    if EIP155_V_OFFSET <= v <= EIP155_V_OFFSET + 3:
        return EIP155_V_OFFSET
    if ALT_V_OFFSET <= v <= ALT_V_OFFSET + 3:
        return ALT_V_OFFSET
    if LEGACY_V_OFFSET <= v <= LEGACY_V_OFFSET + 3:
        return LEGACY_V_OFFSET
    return 0


def resolve_signature_chain_id(tx: "Transaction") -> Optional[int]:
    """Explicit chain id when set and non-zero, else the one inferred from v."""
    if tx.chain_id:
        return tx.chain_id
    return tx.inferred_chain_id


def normalize_v(v: int, chain_id: Optional[int]) -> int:
    """
    Reduce a wire ``v`` to the recovery id (0 or 1 for a valid signature).

    Args:
        v: v as found on the transaction
        chain_id: Chain id resolved for this transaction, if any

    Returns:
        Normalized v; values other than 0/1 are rejected at recovery
    """
    offset = _v_offset(v)
    if chain_id is not None:
        # EIP-155 values for chains above 1 sit beyond the 35..38 bucket
        chain_offset = EIP155_V_OFFSET if offset == 0 and v > EIP155_V_OFFSET + 3 else offset
        if v >= chain_offset + 2 * chain_id:
            return v - chain_offset - 2 * chain_id
    if offset > v:
        offset = 0
    return v - offset


def recover_public_key(tx: "Transaction") -> PublicKey:
    """
    Recover the public key that signed ``tx``.

    Args:
        tx: Signed transaction

    Returns:
        eth_keys PublicKey (``bytes(key)`` is the raw 64-byte key)

    Raises:
        InvalidSignatureError: If r or s is zero
        RecoveryFailureError: If the curve recovery rejects the signature
        MissingValueError: If tx.value is None (the preimage cannot be built)
    """
    if not tx.is_signed:
        raise InvalidSignatureError(r=tx.r, s=tx.s, reason="transaction is unsigned")
    if tx.r == 0 or tx.s == 0:
        raise InvalidSignatureError(r=tx.r, s=tx.s, reason="r and s must both be non-zero")

    chain_id = resolve_signature_chain_id(tx)
    normalized_v = normalize_v(tx.v, chain_id)
    signature_bytes = marshal_signature(normalized_v, tx.r, tx.s)
    msg_hash = tx.signing_hash(chain_id)

    try:
        signature = keys.Signature(signature_bytes=signature_bytes)
        return signature.recover_public_key_from_msg_hash(msg_hash)
    except (BadSignature, KeyValidationError) as e:
        _logger.debug(
            "Public key recovery rejected",
            extra={"v": tx.v, "normalized_v": normalized_v, "chain_id": chain_id},
        )
        raise RecoveryFailureError(str(e) or e.__class__.__name__, v=normalized_v)


def recover_sender(tx: "Transaction") -> Optional[NormalAddress]:
    """
    Address of the key that signed ``tx``.

    Returns:
        The sender, or None when the transaction is unsigned or any step
        of recovery fails
    """
    if not tx.is_signed:
        return None
    try:
        public_key = recover_public_key(tx)
    except TransactionError as e:
        _logger.debug("Sender not recoverable", extra={"code": e.code})
        return None
    return NormalAddress(public_key.to_canonical_address())
