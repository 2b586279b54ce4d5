"""
Transaction destination types.

A legacy transaction either targets an account (``NormalAddress``) or
deploys a contract (``ContractDeployment``). The two are distinct types so
a deployment always encodes as an empty byte string, never as the zero
address.
"""

from __future__ import annotations

from typing import Union

from web3 import Web3

from ethtx.constants import ADDRESS_LENGTH
from ethtx.errors import ValidationError
from ethtx.utils.helpers import hex_to_bytes


class Address:
    """Base class of transaction destinations."""

    __slots__ = ()

    @property
    def raw(self) -> bytes:
        raise NotImplementedError

    @property
    def is_contract_deployment(self) -> bool:
        return False

    @staticmethod
    def from_bytes(data: bytes) -> "Address":
        """
        Build a destination from its wire form.

        Args:
            data: Empty bytes for a deployment, 20 bytes for an account

        Raises:
            ValidationError: If data has any other length
        """
        if len(data) == 0:
            return CONTRACT_DEPLOYMENT
        return NormalAddress(data)


class NormalAddress(Address):
    """
    A 20-byte account address.

    Example:
        >>> to = NormalAddress.from_hex("0x3535353535353535353535353535353535353535")
        >>> to.hex
        '0x3535353535353535353535353535353535353535'
    """

    __slots__ = ("_raw",)

    def __init__(self, raw: Union[bytes, bytearray]) -> None:
        if not isinstance(raw, (bytes, bytearray)) or len(raw) != ADDRESS_LENGTH:
            raise ValidationError(
                f"address must be exactly {ADDRESS_LENGTH} bytes",
                field="to",
                details={"length": len(raw) if isinstance(raw, (bytes, bytearray)) else None},
            )
        self._raw = bytes(raw)

    @classmethod
    def from_hex(cls, address: str) -> "NormalAddress":
        """
        Parse a 0x-prefixed address, checksummed or not.

        Raises:
            ValidationError: If address is not a valid Ethereum address
        """
        if not isinstance(address, str) or not Web3.is_address(address):
            raise ValidationError("address must be a valid Ethereum address", field="to")
        return cls(hex_to_bytes(address))

    @property
    def raw(self) -> bytes:
        return self._raw

    @property
    def hex(self) -> str:
        """Lowercase 0x-prefixed form."""
        return "0x" + self._raw.hex()

    @property
    def checksum(self) -> str:
        """EIP-55 checksummed form."""
        return Web3.to_checksum_address(self.hex)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NormalAddress) and other._raw == self._raw

    def __hash__(self) -> int:
        return hash(self._raw)

    def __repr__(self) -> str:
        return f"NormalAddress({self.checksum!r})"

    def __str__(self) -> str:
        return self.hex


class ContractDeployment(Address):
    """Destination of a contract-creation transaction (encoded as empty bytes)."""

    __slots__ = ()

    @property
    def raw(self) -> bytes:
        return b""

    @property
    def is_contract_deployment(self) -> bool:
        return True

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ContractDeployment)

    def __hash__(self) -> int:
        return hash(ContractDeployment)

    def __repr__(self) -> str:
        return "ContractDeployment()"

    def __str__(self) -> str:
        return "contract deployment"


CONTRACT_DEPLOYMENT = ContractDeployment()
