"""
RLP codec for legacy transactions.

Wire layout (field order is fixed):

    signed:           [nonce, gasPrice, gasLimit, to, value, data, v, r, s]
    EIP-155 preimage: [nonce, gasPrice, gasLimit, to, value, data, chainId, 0, 0]
    legacy preimage:  [nonce, gasPrice, gasLimit, to, value, data]

Preimages are only hashed, never decoded; :func:`decode_transaction`
accepts the signed 9-field form exclusively.
"""

from __future__ import annotations

from typing import List, Optional, Union

import rlp
from rlp.exceptions import DecodingError

from ethtx.constants import ADDRESS_LENGTH, SIGNED_FIELD_COUNT
from ethtx.errors import MalformedEncodingError, MissingValueError, ValidationError
from ethtx.types.address import Address
from ethtx.types.transaction import Transaction
from ethtx.utils.helpers import big_endian_to_int, hex_to_bytes
from ethtx.utils.logging import get_logger

_logger = get_logger(__name__)


def _base_fields(tx: Transaction) -> List[Union[int, bytes]]:
    if tx.value is None:
        raise MissingValueError(details={"nonce": tx.nonce})
    return [tx.nonce, tx.gas_price, tx.gas_limit, tx.to.raw, tx.value, tx.data]


def encode_transaction(
    tx: Transaction,
    for_signature: bool = False,
    chain_id: Optional[int] = None,
) -> bytes:
    """
    RLP-encode a transaction.

    Args:
        tx: Transaction to encode
        for_signature: Encode the signing preimage instead of the signed form
        chain_id: Chain id for the preimage; falls back to ``tx.chain_id``.
            Ignored for the signed form.

    Returns:
        RLP bytes

    Raises:
        MissingValueError: If ``tx.value`` is None
    """
    fields = _base_fields(tx)

    if for_signature:
        resolved = chain_id if chain_id is not None else tx.chain_id
        if resolved is not None:
            fields.extend([resolved, 0, 0])
    else:
        fields.extend([tx.v, tx.r, tx.s])

    return rlp.encode(fields)


def decode_transaction(raw: Union[bytes, str]) -> Transaction:
    """
    Decode a signed legacy transaction.

    Args:
        raw: RLP bytes or their 0x-prefixed hex

    Returns:
        Transaction with ``chain_id`` unset (it is inferred from ``v``)

    Raises:
        MalformedEncodingError: If the input is not a 9-field RLP list, holds
            a nested list in a scalar position, or has a ``to`` that is
            neither empty nor 20 bytes
    """
    try:
        payload = hex_to_bytes(raw)
    except ValidationError as e:
        raise MalformedEncodingError(e.message)

    try:
        items = rlp.decode(payload)
    except DecodingError as e:
        _logger.debug("RLP decoding failed", extra={"error": str(e), "size": len(payload)})
        raise MalformedEncodingError("invalid RLP")

    if not isinstance(items, list):
        raise MalformedEncodingError("expected an RLP list")
    if len(items) != SIGNED_FIELD_COUNT:
        _logger.debug("Rejected transaction field count", extra={"field_count": len(items)})
        raise MalformedEncodingError(
            f"expected {SIGNED_FIELD_COUNT} fields, got {len(items)}",
            field_count=len(items),
        )
    for index, item in enumerate(items):
        if not isinstance(item, bytes):
            raise MalformedEncodingError(f"field {index} must be a byte string")

    nonce, gas_price, gas_limit, to_bytes, value, data, v, r, s = items

    if len(to_bytes) not in (0, ADDRESS_LENGTH):
        raise MalformedEncodingError(
            f"to must be empty or {ADDRESS_LENGTH} bytes, got {len(to_bytes)}"
        )

    try:
        return Transaction(
            nonce=big_endian_to_int(nonce),
            gas_price=big_endian_to_int(gas_price),
            gas_limit=big_endian_to_int(gas_limit),
            to=Address.from_bytes(to_bytes),
            value=big_endian_to_int(value),
            data=data,
            v=big_endian_to_int(v),
            r=big_endian_to_int(r),
            s=big_endian_to_int(s),
        )
    except ValidationError as e:
        # integer fields wider than 32 bytes
        raise MalformedEncodingError(e.message, details=dict(e.details))
