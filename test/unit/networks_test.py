import pytest
from pydantic import ValidationError

from unit_swap_kit.shared.networks import (
    STATIC_NETWORKS,
    add_custom_network,
    get_network_config,
    remove_custom_network,
)
from unit_swap_kit.shared.parameter_schemas import CustomNetworkConfig

FIRST_CUSTOM_NETWORK = CustomNetworkConfig(
    id="111", chain_id=111, name="First Custom Network", unit="customNetworkUnit"
)
SECOND_CUSTOM_NETWORK = FIRST_CUSTOM_NETWORK.model_copy(
    update={"id": "222", "chain_id": 222, "name": "Second Custom Network"}
)


def test_static_networks_name_their_unit():
    assert STATIC_NETWORKS["ETH"].unit == "ETH"
    assert STATIC_NETWORKS["Ropsten"].unit == "ETH"
    assert STATIC_NETWORKS["ETC"].unit == "ETC"
    assert all(network.decimal == 18 for network in STATIC_NETWORKS.values())


def test_add_custom_networks():
    first = add_custom_network({}, FIRST_CUSTOM_NETWORK)
    both = add_custom_network(first, SECOND_CUSTOM_NETWORK)

    assert first == {"111": FIRST_CUSTOM_NETWORK}
    assert both == {"111": FIRST_CUSTOM_NETWORK, "222": SECOND_CUSTOM_NETWORK}


def test_add_existing_id_replaces_it():
    renamed = FIRST_CUSTOM_NETWORK.model_copy(update={"name": "Renamed"})

    networks = add_custom_network({"111": FIRST_CUSTOM_NETWORK}, renamed)

    assert networks["111"].name == "Renamed"


def test_remove_custom_network():
    networks = {"111": FIRST_CUSTOM_NETWORK, "222": SECOND_CUSTOM_NETWORK}

    assert remove_custom_network(networks, "111") == {"222": SECOND_CUSTOM_NETWORK}
    assert networks == {"111": FIRST_CUSTOM_NETWORK, "222": SECOND_CUSTOM_NETWORK}


def test_get_network_config_finds_custom_network():
    custom = {"111": FIRST_CUSTOM_NETWORK}

    assert get_network_config("111", custom).unit == "customNetworkUnit"
    assert get_network_config("ETH", custom) is STATIC_NETWORKS["ETH"]


def test_get_network_config_unknown_raises():
    with pytest.raises(ValueError, match="Network nope not supported"):
        get_network_config("nope")


def test_custom_network_is_flagged_custom():
    assert FIRST_CUSTOM_NETWORK.is_custom is True

    with pytest.raises(ValidationError):
        CustomNetworkConfig(id="x", chain_id=1, name="x", unit="X", is_custom=False)
