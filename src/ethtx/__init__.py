"""
ethtx - legacy Ethereum transactions.

Build, RLP-encode, hash and decode pre-typed-envelope transactions, and
recover their sender from the embedded v/r/s signature.

Modules:
- `types`: Transaction, Address variants and TransactionOptions
- `protocol`: RLP codec and signature recovery
- `builders`: JSON-RPC parameter projection
- `errors`: exception hierarchy
- `utils`: hex helpers and logging

Example:
    >>> from ethtx import Transaction
    >>> tx = Transaction.decode(raw_hex)
    >>> tx.sender.checksum
    '0x...'
    >>> tx.transaction_id
    '0x...'
"""

from ethtx.builders import (
    CallParameters,
    RpcMethod,
    build_raw_transaction_params,
    build_request_params,
    to_call_parameters,
)
from ethtx.config import NETWORKS, Network, NetworkConfig, get_network_config
from ethtx.constants import DEFAULT_GAS_LIMIT, DEFAULT_GAS_PRICE
from ethtx.errors import (
    EthTxError,
    InvalidSignatureError,
    MalformedEncodingError,
    MissingValueError,
    RecoveryFailureError,
    TransactionError,
    ValidationError,
)
from ethtx.protocol import decode_transaction, encode_transaction, recover_public_key, recover_sender
from ethtx.types import (
    CONTRACT_DEPLOYMENT,
    Address,
    ContractDeployment,
    GasLimitPolicy,
    GasPricePolicy,
    NormalAddress,
    Transaction,
    TransactionOptions,
)

__version__ = "0.1.0"

__all__ = [
    # Model
    "Transaction",
    "Address",
    "NormalAddress",
    "ContractDeployment",
    "CONTRACT_DEPLOYMENT",
    "TransactionOptions",
    "GasPricePolicy",
    "GasLimitPolicy",
    # Codec / recovery
    "encode_transaction",
    "decode_transaction",
    "recover_public_key",
    "recover_sender",
    # RPC
    "CallParameters",
    "RpcMethod",
    "to_call_parameters",
    "build_request_params",
    "build_raw_transaction_params",
    # Config
    "Network",
    "NetworkConfig",
    "NETWORKS",
    "get_network_config",
    "DEFAULT_GAS_PRICE",
    "DEFAULT_GAS_LIMIT",
    # Errors
    "EthTxError",
    "ValidationError",
    "TransactionError",
    "MissingValueError",
    "MalformedEncodingError",
    "InvalidSignatureError",
    "RecoveryFailureError",
]
