from unittest.mock import MagicMock

import pytest

from wallet_deeplinks.errors import MissingNetworkIdError, NetworkNotFoundError
from wallet_deeplinks.networks import (
    CustomNetwork,
    NetworkSwitchGuard,
    custom_networks_from_settings,
    get_network_type_by_id,
)


@pytest.fixture
def network():
    n = MagicMock()
    n.chain_id = "1"
    return n


@pytest.fixture
def alerts():
    return MagicMock()


def test_same_network_is_a_no_op(network, alerts):
    guard = NetworkSwitchGuard(network, alerts)
    assert guard.ensure("1") is None
    network.set_provider_type.assert_not_called()
    network.set_active_network.assert_not_called()
    alerts.toast.assert_not_called()


def test_switch_to_other_builtin_network(network, alerts):
    guard = NetworkSwitchGuard(network, alerts)
    assert guard.ensure("5") == "Goerli Test Network"
    network.set_provider_type.assert_called_once_with("goerli")
    alerts.toast.assert_called_once()
    message, ms = alerts.toast.call_args.args
    assert "Goerli Test Network" in message
    assert ms == 5000


def test_hex_chain_id(network, alerts):
    NetworkSwitchGuard(network, alerts).ensure("0xaa36a7")
    network.set_provider_type.assert_called_once_with("sepolia")


def test_custom_network_wins(network, alerts):
    polygon = CustomNetwork(chain_id="137", nickname="Polygon", rpc_url="https://polygon-rpc.com")
    guard = NetworkSwitchGuard(network, alerts, [polygon])
    assert guard.ensure("137") == "Polygon"
    network.set_active_network.assert_called_once_with("https://polygon-rpc.com")
    network.set_provider_type.assert_not_called()
    assert "Polygon" in alerts.toast.call_args.args[0]


def test_unknown_chain_raises_not_found(network, alerts):
    with pytest.raises(NetworkNotFoundError) as exc:
        NetworkSwitchGuard(network, alerts).ensure("424242")
    assert exc.value.chain_id == "424242"
    network.set_provider_type.assert_not_called()
    alerts.toast.assert_not_called()


@pytest.mark.parametrize("chain_id", ["", "abc"])
def test_unusable_chain_id_is_missing(chain_id):
    with pytest.raises(MissingNetworkIdError):
        get_network_type_by_id(chain_id)


def test_no_chain_id_means_nothing_to_do(network, alerts):
    assert NetworkSwitchGuard(network, alerts).ensure(None) is None
    alerts.toast.assert_not_called()


def test_custom_networks_from_settings():
    settings = {"networks": {"custom": [{"chain_id": "0x89", "nickname": "Polygon", "rpc_url": "https://rpc"}]}}
    assert custom_networks_from_settings(settings) == [CustomNetwork("137", "Polygon", "https://rpc")]
