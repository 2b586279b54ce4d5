"""
Wire codec and signature recovery for legacy transactions.
"""

from ethtx.protocol.codec import decode_transaction, encode_transaction
from ethtx.protocol.signature import (
    marshal_signature,
    normalize_v,
    recover_public_key,
    recover_sender,
    resolve_signature_chain_id,
)

__all__ = [
    "encode_transaction",
    "decode_transaction",
    "marshal_signature",
    "normalize_v",
    "recover_public_key",
    "recover_sender",
    "resolve_signature_chain_id",
]
