"""
RPC Parameter Builder - projects a transaction into JSON-RPC call fields.

Produces the transaction object used by ``eth_call``, ``eth_estimateGas``
and ``eth_sendTransaction``, and the single-argument parameter list of
``eth_sendRawTransaction``. Request framing (id, jsonrpc version, transport)
belongs to the caller.

Quantities follow the JSON-RPC convention: lowercase 0x hex without
leading zeroes, where zero is ``"0x0"``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from ethtx.errors import InvalidSignatureError
from ethtx.types.address import Address
from ethtx.types.options import TransactionOptions
from ethtx.types.transaction import Transaction
from ethtx.utils.helpers import to_hex_data, to_hex_quantity


class RpcMethod(str, Enum):
    """JSON-RPC methods that carry a transaction."""

    CALL = "eth_call"
    ESTIMATE_GAS = "eth_estimateGas"
    SEND_TRANSACTION = "eth_sendTransaction"
    SEND_RAW_TRANSACTION = "eth_sendRawTransaction"

    @property
    def required_params(self) -> int:
        """Parameter count including the block argument, where one is taken."""
        if self in (RpcMethod.CALL, RpcMethod.ESTIMATE_GAS):
            return 2
        return 1


@dataclass
class CallParameters:
    """
    Transaction object for JSON-RPC.

    Attributes:
        to: Destination (None for contract deployment)
        from_: Sender override
        gas: Gas limit quantity
        gas_price: Gas price quantity
        value: Value quantity
        data: Payload hex ("0x" when empty)
    """

    to: Optional[str] = None
    from_: Optional[str] = None
    gas: Optional[str] = None
    gas_price: Optional[str] = None
    value: Optional[str] = None
    data: str = "0x"

    def to_dict(self) -> Dict[str, str]:
        """JSON-RPC field names; absent fields are dropped."""
        fields = {
            "from": self.from_,
            "to": self.to,
            "gas": self.gas,
            "gasPrice": self.gas_price,
            "value": self.value,
            "data": self.data,
        }
        return {k: v for k, v in fields.items() if v is not None}


def to_call_parameters(tx: Transaction, from_address: Optional[Address] = None) -> CallParameters:
    """
    Build the JSON-RPC transaction object for ``tx``.

    Args:
        tx: Transaction to project
        from_address: Optional sender to report

    Returns:
        CallParameters with every field the transaction defines
    """
    return CallParameters(
        to=None if tx.to.is_contract_deployment else tx.to.hex,
        from_=from_address.hex if from_address is not None else None,
        gas=to_hex_quantity(tx.gas_limit),
        gas_price=to_hex_quantity(tx.gas_price),
        value=to_hex_quantity(tx.value) if tx.value is not None else None,
        data=to_hex_data(tx.data),
    )


def build_request_params(
    method: RpcMethod,
    tx: Transaction,
    options: Optional[TransactionOptions] = None,
) -> List[Any]:
    """
    Build the ``params`` array for a transaction-carrying call.

    The gas field is left out for ``eth_estimateGas`` and whenever the
    options do not pin a gas limit, so the node estimates it.

    Args:
        method: Target method (not eth_sendRawTransaction)
        tx: Transaction to project
        options: Caller options (sender, gas limit, block)

    Returns:
        Parameter list

    Raises:
        ValueError: If method is eth_sendRawTransaction
    """
    if method == RpcMethod.SEND_RAW_TRANSACTION:
        raise ValueError("use build_raw_transaction_params for eth_sendRawTransaction")

    from_address = options.from_address if options is not None else None
    params = to_call_parameters(tx, from_address=from_address)

    if method == RpcMethod.ESTIMATE_GAS or options is None or options.gas_limit is None:
        params.gas = None

    result: List[Any] = [params.to_dict()]
    on_block = options.call_on_block if options is not None else None
    if method.required_params == 2 and on_block is not None:
        result.append(on_block if isinstance(on_block, str) else to_hex_quantity(on_block))
    return result


def build_raw_transaction_params(tx: Transaction) -> List[str]:
    """
    Build the ``params`` array for ``eth_sendRawTransaction``.

    Raises:
        InvalidSignatureError: If no sender can be recovered from tx
        MissingValueError: If tx.value is None
    """
    if tx.sender is None:
        raise InvalidSignatureError(r=tx.r, s=tx.s, reason="sender is not recoverable")
    return ["0x" + tx.encode().hex()]
