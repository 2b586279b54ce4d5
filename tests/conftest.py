"""
Shared fixtures for ethtx tests.
"""

import dataclasses
from typing import Callable, Optional

import pytest
from eth_keys import keys

from ethtx import CONTRACT_DEPLOYMENT, NormalAddress, Transaction


# =============================================================================
# Test Constants
# =============================================================================

# Private key from the EIP-155 example (DO NOT USE IN PRODUCTION)
EIP155_PRIVATE_KEY = "0x" + "46" * 32
OTHER_PRIVATE_KEY = "0x" + "11" * 32

EIP155_TO = "0x" + "35" * 20

# RLP signing preimage of the EIP-155 example transaction (chain id 1)
EIP155_SIGNING_DATA = (
    "ec098504a817c800825208943535353535353535353535353535353535353535"
    "880de0b6b3a764000080018080"
)


def sign_transaction(tx: Transaction, private_key: str, chain_id: Optional[int] = None) -> Transaction:
    """Sign the preimage with eth_keys and fold the recovery id into v."""
    key = keys.PrivateKey(bytes.fromhex(private_key[2:]))
    signature = key.sign_msg_hash(tx.signing_hash(chain_id))
    resolved = chain_id if chain_id is not None else tx.chain_id
    if resolved is None:
        v = signature.v + 27
    else:
        v = signature.v + 35 + 2 * resolved
    return dataclasses.replace(tx, v=v, r=signature.r, s=signature.s)


def address_of(private_key: str) -> NormalAddress:
    key = keys.PrivateKey(bytes.fromhex(private_key[2:]))
    return NormalAddress(key.public_key.to_canonical_address())


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def signer() -> Callable[..., Transaction]:
    """Sign a transaction with eth_keys, applying EIP-155 when it has a chain id."""
    return sign_transaction


@pytest.fixture
def eip155_unsigned() -> Transaction:
    """The EIP-155 example transaction before signing."""
    return Transaction(
        nonce=9,
        to=NormalAddress.from_hex(EIP155_TO),
        gas_price=20_000_000_000,
        gas_limit=21_000,
        value=10**18,
        data=b"",
        chain_id=1,
    )


@pytest.fixture
def eip155_signed(eip155_unsigned: Transaction) -> Transaction:
    """The EIP-155 example transaction signed with its published key."""
    return sign_transaction(eip155_unsigned, EIP155_PRIVATE_KEY)


@pytest.fixture
def eip155_sender() -> NormalAddress:
    """Address of the EIP-155 example key."""
    return address_of(EIP155_PRIVATE_KEY)


@pytest.fixture
def legacy_signed() -> Transaction:
    """Unprotected (pre-EIP-155) signed transfer: v is 27 or 28."""
    tx = Transaction(
        nonce=3,
        to=NormalAddress.from_hex("0x" + "ab" * 20),
        gas_price=1_000_000_000,
        gas_limit=50_000,
        value=12345,
        data=b"\x01\x02\x03",
    )
    return sign_transaction(tx, OTHER_PRIVATE_KEY)


@pytest.fixture
def deployment_signed() -> Transaction:
    """Signed contract deployment on chain 5."""
    tx = Transaction(
        nonce=0,
        to=CONTRACT_DEPLOYMENT,
        gas_price=2_000_000_000,
        gas_limit=1_000_000,
        value=0,
        data=bytes.fromhex("6080604052348015600f57600080fd5b50"),
    )
    return sign_transaction(tx, OTHER_PRIVATE_KEY, chain_id=5)


@pytest.fixture
def eip155_key() -> str:
    """Private key of the EIP-155 example."""
    return EIP155_PRIVATE_KEY


@pytest.fixture
def other_key() -> str:
    """A second private key for transactions not tied to the EIP-155 vector."""
    return OTHER_PRIVATE_KEY


@pytest.fixture
def eip155_signing_data() -> bytes:
    """Published RLP preimage of the EIP-155 example."""
    return bytes.fromhex(EIP155_SIGNING_DATA)


@pytest.fixture
def key_address() -> Callable[[str], NormalAddress]:
    """Derive the address of a private key."""
    return address_of
