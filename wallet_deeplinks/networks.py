# wallet_deeplinks/networks.py
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from .backend import AlertPresenter, NetworkController
from .errors import MissingNetworkIdError, NetworkNotFoundError
from .messages import t

logger = logging.getLogger(__name__)

NETWORK_WARNING_MS = 5000


@dataclass(frozen=True)
class Network:
    network_type: str
    chain_id: str
    name: str


BUILTIN_NETWORKS: Dict[str, Network] = {
    n.network_type: n
    for n in (
        Network("mainnet", "1", "Ethereum Main Network"),
        Network("goerli", "5", "Goerli Test Network"),
        Network("sepolia", "11155111", "Sepolia Test Network"),
        Network("linea-goerli", "59140", "Linea Goerli Test Network"),
        Network("linea-mainnet", "59144", "Linea Main Network"),
    )
}


@dataclass(frozen=True)
class CustomNetwork:
    chain_id: str
    nickname: str
    rpc_url: str


def normalize_chain_id(chain_id: Optional[str]) -> str:
    """Decimal string for "1" or "0x1"; raises MissingNetworkIdError when there is no usable id."""
    raw = str(chain_id or "").strip()
    if not raw:
        raise MissingNetworkIdError()
    try:
        value = int(raw, 16) if raw.lower().startswith("0x") else int(raw, 10)
    except ValueError:
        raise MissingNetworkIdError()
    return str(value)


def get_network_type_by_id(chain_id: Optional[str]) -> str:
    wanted = normalize_chain_id(chain_id)
    for network in BUILTIN_NETWORKS.values():
        if network.chain_id == wanted:
            return network.network_type
    raise NetworkNotFoundError(str(chain_id))


def custom_networks_from_settings(settings: dict) -> List[CustomNetwork]:
    entries = settings.get("networks", {}).get("custom", []) or []
    return [
        CustomNetwork(
            chain_id=normalize_chain_id(e.get("chain_id")),
            nickname=e.get("nickname") or e.get("chain_id"),
            rpc_url=e.get("rpc_url", ""),
        )
        for e in entries
    ]


class NetworkSwitchGuard:
    """Make sure the active network matches a payment link before anything else runs."""

    def __init__(
        self,
        network: NetworkController,
        alerts: AlertPresenter,
        custom_networks: Iterable[CustomNetwork] = (),
        warning_ms: int = NETWORK_WARNING_MS,
    ):
        self.network = network
        self.alerts = alerts
        self.custom_networks = list(custom_networks)
        self.warning_ms = warning_ms

    def ensure(self, chain_id: Optional[str]) -> Optional[str]:
        """Switch to chain_id if needed. Returns the new network's name, None when nothing changed."""
        if chain_id is None:
            return None
        wanted = normalize_chain_id(chain_id)
        if wanted == normalize_chain_id(self.network.chain_id):
            return None

        custom = next((c for c in self.custom_networks if c.chain_id == wanted), None)
        if custom:
            self.network.set_active_network(custom.rpc_url)
            name = custom.nickname
        else:
            network_type = get_network_type_by_id(wanted)
            self.network.set_provider_type(network_type)
            name = BUILTIN_NETWORKS[network_type].name

        logger.info("switched network to %s (chain %s)", name, wanted)
        self.alerts.toast(t("send.warn_network_change") + name, self.warning_ms)
        return name
