"""
Legacy Ethereum transaction model.

A ``Transaction`` holds the nine wire fields of a pre-typed-envelope
transaction plus the EIP-1559 fee fields (carried, not yet encoded) and an
optional explicit chain id.

Lifecycle:
    Unsigned (r == s == 0, v = intended chain id)
        -> Signed (r, s != 0, v = recovery id, possibly EIP-155 folded)

Values are frozen; overrides return a new transaction.

Example:
    >>> tx = Transaction(
    ...     nonce=9,
    ...     to=NormalAddress.from_hex("0x3535353535353535353535353535353535353535"),
    ...     gas_price=20_000_000_000,
    ...     gas_limit=21_000,
    ...     value=10**18,
    ...     chain_id=1,
    ... )
    >>> tx.is_signed
    False
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from web3 import Web3

from ethtx.config import Network, resolve_chain_id
from ethtx.constants import EIP155_V_OFFSET, LEGACY_V_OFFSET, UINT256_MAX
from ethtx.errors import TransactionError, ValidationError
from ethtx.types.address import Address, NormalAddress
from ethtx.types.options import TransactionOptions

if TYPE_CHECKING:
    from eth_keys.datatypes import PublicKey

_INT_FIELDS = (
    "nonce",
    "gas_price",
    "gas_limit",
    "max_priority_fee_per_gas",
    "max_fee_per_gas",
    "v",
    "r",
    "s",
)


def _validate_uint256(value: object, field: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field} must be an integer", field=field)
    if value < 0:
        raise ValidationError(f"{field} must be non-negative", field=field)
    if value > UINT256_MAX:
        raise ValidationError(f"{field} exceeds uint256", field=field)


@dataclass(frozen=True)
class Transaction:
    """
    Legacy transaction.

    Attributes:
        nonce: Sender's transaction counter
        to: Destination account or contract deployment
        gas_price: Price per gas unit in wei
        gas_limit: Maximum gas the transaction may use
        max_priority_fee_per_gas: EIP-1559 tip (not encoded)
        max_fee_per_gas: EIP-1559 fee cap (not encoded)
        value: Wei transferred; must be set before encoding
        data: Call data or init code
        v: Recovery id, or the intended chain id while unsigned
        r: Signature r
        s: Signature s
        chain_id: Explicit replay-protection chain id
    """

    nonce: int
    to: Address
    gas_price: int = 0
    gas_limit: int = 0
    max_priority_fee_per_gas: int = 0
    max_fee_per_gas: int = 0
    value: Optional[int] = None
    data: bytes = b""
    v: int = 1
    r: int = 0
    s: int = 0
    chain_id: Optional[int] = None

    def __post_init__(self) -> None:
        for name in _INT_FIELDS:
            _validate_uint256(getattr(self, name), name)
        if self.value is not None:
            _validate_uint256(self.value, "value")
        if not isinstance(self.to, Address):
            raise ValidationError("to must be an Address", field="to")
        if not isinstance(self.data, (bytes, bytearray)):
            raise ValidationError("data must be bytes", field="data")
        object.__setattr__(self, "data", bytes(self.data))
        object.__setattr__(self, "chain_id", resolve_chain_id(self.chain_id))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_options(
        cls,
        to: Address,
        data: bytes = b"",
        options: Optional[TransactionOptions] = None,
    ) -> "Transaction":
        """
        Build an unsigned nonce-0 transaction from merged options.

        The gas price is the amount of a ``manual`` policy, else 5 gwei. The
        gas limit is the amount of a ``manual`` or ``limited`` policy, else
        21000; with no node to estimate against, a ``limited`` cap is taken
        as the limit itself.
        """
        merged = TransactionOptions.default_options().merge(options)
        return cls(
            nonce=0,
            to=to,
            gas_price=merged.gas_price.resolve(),
            gas_limit=merged.gas_limit.resolve(),
            value=merged.value,
            data=data,
        )

    @classmethod
    def decode(cls, raw: Union[bytes, str]) -> "Transaction":
        """Decode a signed transaction. See :func:`ethtx.protocol.codec.decode_transaction`."""
        from ethtx.protocol.codec import decode_transaction

        return decode_transaction(raw)

    def merged_with_options(self, options: TransactionOptions) -> "Transaction":
        """
        Return a copy with gas price, gas limit, value and destination
        overlaid from ``options``. Fields the options leave unset are kept.
        """
        changes: dict = {}
        if options.gas_price is not None:
            changes["gas_price"] = options.gas_price.resolve()
        if options.gas_limit is not None:
            changes["gas_limit"] = options.gas_limit.resolve()
        if options.value is not None:
            changes["value"] = options.value
        if options.to is not None:
            changes["to"] = options.to
        return dataclasses.replace(self, **changes)

    def with_chain_id(self, chain_id: Union[int, Network, None]) -> "Transaction":
        """
        Return a copy whose explicit chain id is overridden.

        This is the only way the stored chain id changes after construction;
        pass None to clear it.
        """
        return dataclasses.replace(self, chain_id=resolve_chain_id(chain_id))

    # ------------------------------------------------------------------
    # Derived attributes
    # ------------------------------------------------------------------

    @property
    def is_signed(self) -> bool:
        return not (self.r == 0 and self.s == 0)

    @property
    def inferred_chain_id(self) -> Optional[int]:
        """
        Chain id implied by ``v``.

        Unsigned transactions carry the intended chain id in ``v``.
        Unprotected signatures (v of 27/28 or anything below 35) imply none.
        """
        if not self.is_signed:
            return self.v
        if self.v in (LEGACY_V_OFFSET, LEGACY_V_OFFSET + 1) or self.v < EIP155_V_OFFSET:
            return None
        return ((self.v - 1) // 2) - 17

    @property
    def hash(self) -> bytes:
        """
        Keccak-256 of the final encoding.

        Raises:
            MissingValueError: If value is not set
        """
        return bytes(Web3.keccak(self.encode()))

    def signing_hash(self, chain_id: Optional[int] = None) -> bytes:
        """Keccak-256 of the signing preimage (see :meth:`encode`)."""
        return bytes(Web3.keccak(self.encode(for_signature=True, chain_id=chain_id)))

    @property
    def sender(self) -> Optional[NormalAddress]:
        """Recovered sender, or None when unsigned or unrecoverable."""
        from ethtx.protocol.signature import recover_sender

        return recover_sender(self)

    @property
    def transaction_id(self) -> Optional[str]:
        """
        Lowercase 0x hex of :attr:`hash`.

        None when the sender cannot be recovered or value is missing.
        """
        if self.sender is None:
            return None
        try:
            return "0x" + self.hash.hex()
        except TransactionError:
            return None

    # ------------------------------------------------------------------
    # Codec / recovery
    # ------------------------------------------------------------------

    def encode(self, for_signature: bool = False, chain_id: Optional[int] = None) -> bytes:
        """RLP-encode. See :func:`ethtx.protocol.codec.encode_transaction`."""
        from ethtx.protocol.codec import encode_transaction

        return encode_transaction(self, for_signature=for_signature, chain_id=chain_id)

    def recover_public_key(self) -> "PublicKey":
        """See :func:`ethtx.protocol.signature.recover_public_key`."""
        from ethtx.protocol.signature import recover_public_key

        return recover_public_key(self)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def describe(self) -> str:
        """Multi-line summary of every field plus derived chain id, sender and hash."""
        sender = self.sender
        try:
            tx_hash: Optional[str] = "0x" + self.hash.hex()
        except TransactionError:
            tx_hash = None

        lines = [
            "Transaction",
            f"Nonce: {self.nonce}",
            f"Gas price: {self.gas_price}",
            f"Gas limit: {self.gas_limit}",
            f"Max priority fee per gas: {self.max_priority_fee_per_gas}",
            f"Max fee per gas: {self.max_fee_per_gas}",
            f"To: {self.to}",
            f"Value: {self.value}",
            f"Data: 0x{self.data.hex()}",
            f"v: {self.v}",
            f"r: {self.r}",
            f"s: {self.s}",
            f"Intrinsic chainID: {self.chain_id}",
            f"Inferred chainID: {self.inferred_chain_id}",
            f"Sender: {sender.checksum if sender else None}",
            f"Hash: {tx_hash}",
        ]
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.describe()
