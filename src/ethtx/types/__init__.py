"""
ethtx data types.

- ``Address``: transaction destination (account or contract deployment)
- ``TransactionOptions``: caller overrides layered over defaults
- ``Transaction``: the legacy transaction model
"""

from ethtx.types.address import CONTRACT_DEPLOYMENT, Address, ContractDeployment, NormalAddress
from ethtx.types.options import GasLimitPolicy, GasPricePolicy, TransactionOptions
from ethtx.types.transaction import Transaction

__all__ = [
    "Address",
    "NormalAddress",
    "ContractDeployment",
    "CONTRACT_DEPLOYMENT",
    "GasPricePolicy",
    "GasLimitPolicy",
    "TransactionOptions",
    "Transaction",
]
