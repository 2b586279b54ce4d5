"""
Transaction Options

Caller-supplied overrides for gas, value and destination, layered over
protocol defaults. The merge result is what ``Transaction.from_options``
and ``Transaction.merged_with_options`` consume.
"""

from __future__ import annotations

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ethtx.constants import (
    DEFAULT_CALL_ON_BLOCK,
    DEFAULT_GAS_LIMIT,
    DEFAULT_GAS_PRICE,
    UINT256_MAX,
)
from ethtx.types.address import Address

BlockTag = Literal["latest", "pending", "earliest"]
"""Named block for calls and gas estimation."""


# ============================================================================
# Gas Policies
# ============================================================================

class GasPricePolicy(BaseModel):
    """
    How the gas price is chosen.

    ``automatic`` defers to the default (5 gwei); ``manual`` pins an amount.
    """

    model_config = ConfigDict(frozen=True)

    mode: Literal["automatic", "manual"] = Field(
        default="automatic",
        description="Gas price selection mode",
    )
    amount: Optional[int] = Field(
        default=None,
        ge=0,
        le=UINT256_MAX,
        description="Gas price in wei (manual mode only)",
    )

    @model_validator(mode="after")
    def _check_amount(self) -> "GasPricePolicy":
        if self.mode == "manual" and self.amount is None:
            raise ValueError("manual gas price requires an amount")
        if self.mode == "automatic" and self.amount is not None:
            raise ValueError("automatic gas price takes no amount")
        return self

    @classmethod
    def automatic(cls) -> "GasPricePolicy":
        return cls()

    @classmethod
    def manual(cls, amount: int) -> "GasPricePolicy":
        return cls(mode="manual", amount=amount)

    def resolve(self) -> int:
        """Gas price this policy produces when no node is consulted."""
        if self.amount is not None:
            return self.amount
        return DEFAULT_GAS_PRICE


class GasLimitPolicy(BaseModel):
    """
    How the gas limit is chosen.

    ``limited`` caps an estimate at ``amount``; without a node to estimate
    against it resolves to the cap itself.
    """

    model_config = ConfigDict(frozen=True)

    mode: Literal["automatic", "manual", "limited"] = Field(
        default="automatic",
        description="Gas limit selection mode",
    )
    amount: Optional[int] = Field(
        default=None,
        ge=0,
        le=UINT256_MAX,
        description="Gas limit (manual and limited modes)",
    )

    @model_validator(mode="after")
    def _check_amount(self) -> "GasLimitPolicy":
        if self.mode != "automatic" and self.amount is None:
            raise ValueError(f"{self.mode} gas limit requires an amount")
        if self.mode == "automatic" and self.amount is not None:
            raise ValueError("automatic gas limit takes no amount")
        return self

    @classmethod
    def automatic(cls) -> "GasLimitPolicy":
        return cls()

    @classmethod
    def manual(cls, amount: int) -> "GasLimitPolicy":
        return cls(mode="manual", amount=amount)

    @classmethod
    def limited(cls, amount: int) -> "GasLimitPolicy":
        return cls(mode="limited", amount=amount)

    def resolve(self) -> int:
        if self.amount is not None:
            return self.amount
        return DEFAULT_GAS_LIMIT


# ============================================================================
# Transaction Options
# ============================================================================

class TransactionOptions(BaseModel):
    """
    Overrides applied to a transaction before it is signed or sent.

    Every field is optional; ``None`` means "not specified" and never
    overrides anything during :meth:`merge`.

    Example:
        >>> opts = TransactionOptions.default_options().merge(
        ...     TransactionOptions(gas_price=GasPricePolicy.manual(20_000_000_000))
        ... )
        >>> opts.gas_price.resolve()
        20000000000
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    to: Optional[Address] = Field(
        default=None,
        description="Destination override",
    )
    from_address: Optional[Address] = Field(
        default=None,
        description="Sender reported to the node for calls and estimates",
    )
    gas_price: Optional[GasPricePolicy] = Field(
        default=None,
        description="Gas price policy",
    )
    gas_limit: Optional[GasLimitPolicy] = Field(
        default=None,
        description="Gas limit policy",
    )
    value: Optional[int] = Field(
        default=None,
        ge=0,
        le=UINT256_MAX,
        description="Value in wei",
    )
    call_on_block: Optional[Union[BlockTag, int]] = Field(
        default=None,
        description="Block used for eth_call / eth_estimateGas",
    )

    @model_validator(mode="after")
    def _check_from(self) -> "TransactionOptions":
        if self.from_address is not None and self.from_address.is_contract_deployment:
            raise ValueError("from_address must be an account address")
        if isinstance(self.call_on_block, int) and self.call_on_block < 0:
            raise ValueError("call_on_block must be non-negative")
        return self

    @classmethod
    def default_options(cls) -> "TransactionOptions":
        """Protocol defaults: automatic gas price and limit, calls on the pending block."""
        return cls(
            gas_price=GasPricePolicy.automatic(),
            gas_limit=GasLimitPolicy.automatic(),
            call_on_block=DEFAULT_CALL_ON_BLOCK,
        )

    def merge(self, other: Optional["TransactionOptions"]) -> "TransactionOptions":
        """
        Layer ``other`` over these options.

        Args:
            other: Overrides; fields left as None keep the current value

        Returns:
            New TransactionOptions
        """
        if other is None:
            return self
        update: dict[str, Any] = {}
        for name in type(other).model_fields:
            value = getattr(other, name)
            if value is not None:
                update[name] = value
        return self.model_copy(update=update)
