from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .errors import ValidationError

__all__ = ["Network", "NetworkConfig", "NETWORKS", "get_network_config", "resolve_chain_id"]


class Network(str, Enum):
    MAINNET = "mainnet"
    SEPOLIA = "sepolia"
    BASE = "base"
    BASE_SEPOLIA = "base-sepolia"


@dataclass
class NetworkConfig:
    name: Network
    chain_id: int


NETWORKS: dict[Network, NetworkConfig] = {
    Network.MAINNET: NetworkConfig(name=Network.MAINNET, chain_id=1),
    Network.SEPOLIA: NetworkConfig(name=Network.SEPOLIA, chain_id=11155111),
    Network.BASE: NetworkConfig(name=Network.BASE, chain_id=8453),
    Network.BASE_SEPOLIA: NetworkConfig(name=Network.BASE_SEPOLIA, chain_id=84532),
}


def get_network_config(network: Union[Network, str]) -> NetworkConfig:
    try:
        return NETWORKS[Network(network)]
    except ValueError:
        raise ValidationError(f"Unknown network: {network}", field="network")


def resolve_chain_id(chain: Union[int, Network, None]) -> Optional[int]:
    """Turn an int, a Network or None into a chain id.

    Raises:
        ValidationError: If the chain id is negative or not an integer
    """
    if chain is None:
        return None
    if isinstance(chain, Network):
        return NETWORKS[chain].chain_id
    if isinstance(chain, bool) or not isinstance(chain, int):
        raise ValidationError("chain_id must be an integer or Network", field="chain_id")
    if chain < 0:
        raise ValidationError("chain_id must be non-negative", field="chain_id")
    return chain
