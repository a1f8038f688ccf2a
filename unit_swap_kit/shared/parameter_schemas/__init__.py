__all__ = [
    "TokenMetadata",
    "SetUnitMetaParameters",
    "NetworkConfig",
    "CustomNetworkConfig",
]

from .network_schema import CustomNetworkConfig, NetworkConfig
from .token_schema import TokenMetadata
from .unit_schema import SetUnitMetaParameters
