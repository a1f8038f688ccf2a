"""Built-in network configurations and the custom network registry."""

from typing import Dict, Mapping, Optional

from .parameter_schemas import CustomNetworkConfig, NetworkConfig


def _network(id: str, name: str, chain_id: int, unit: str) -> NetworkConfig:
    return NetworkConfig(id=id, name=name, chain_id=chain_id, unit=unit)


STATIC_NETWORKS: Dict[str, NetworkConfig] = {
    network.id: network
    for network in (
        _network("ETH", "Ethereum", 1, "ETH"),
        _network("Ropsten", "Ropsten", 3, "ETH"),
        _network("Kovan", "Kovan", 42, "ETH"),
        _network("Rinkeby", "Rinkeby", 4, "ETH"),
        _network("ETC", "Ethereum Classic", 61, "ETC"),
        _network("UBQ", "Ubiq", 8, "UBQ"),
        _network("EXP", "Expanse", 2, "EXP"),
        _network("POA", "POA Network", 99, "POA"),
        _network("TOMO", "TomoChain", 88, "TOMO"),
        _network("ELLA", "Ellaism", 64, "ELLA"),
        _network("MUSIC", "Musicoin", 7762959, "MUSIC"),
        _network("ETSC", "Ethereum Social", 28, "ETSC"),
        _network("EGEM", "EtherGem", 1987, "EGEM"),
        _network("CLO", "Callisto", 820, "CLO"),
        _network("RSK_TESTNET", "RSK Testnet", 31, "SBTC"),
        _network("GO", "GoChain", 60, "GO"),
    )
}


def add_custom_network(
    networks: Mapping[str, CustomNetworkConfig], config: CustomNetworkConfig
) -> Dict[str, CustomNetworkConfig]:
    """Return a new registry with `config` added, replacing any network with the same id."""
    return {**networks, config.id: config}


def remove_custom_network(
    networks: Mapping[str, CustomNetworkConfig], network_id: str
) -> Dict[str, CustomNetworkConfig]:
    return {key: value for key, value in networks.items() if key != network_id}


def get_network_config(
    network_id: str,
    custom_networks: Optional[Mapping[str, CustomNetworkConfig]] = None,
) -> NetworkConfig:
    network = STATIC_NETWORKS.get(network_id)
    if network is None and custom_networks:
        network = custom_networks.get(network_id)
    if network is None:
        raise ValueError(f"Network {network_id} not supported")
    return network
