# wallet_deeplinks/backend.py
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional


class Navigator(ABC):
    @abstractmethod
    def navigate(self, route: str, params: Optional[Dict[str, Any]] = None) -> None:
        raise NotImplementedError


class AlertPresenter(ABC):
    @abstractmethod
    def alert(self, title: str, message: str) -> None:
        """Blocking-style dialog with a single dismiss button."""
        raise NotImplementedError

    @abstractmethod
    def toast(self, message: str, autodismiss_ms: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def notify(self, title: str, description: str, status: str, duration_ms: int) -> None:
        raise NotImplementedError


class PairingClient(ABC):
    """SDK handshake with a companion app, keyed by channel id."""

    @abstractmethod
    async def bind_android_sdk(self) -> None:
        raise NotImplementedError

    @abstractmethod
    async def handle_deeplink(
        self,
        channel_id: str,
        origin: str,
        context: str,
        url: str,
        other_public_key: str,
    ) -> None:
        raise NotImplementedError


class SessionClient(ABC):
    """Pairing-session (WalletConnect style) transport."""

    @abstractmethod
    async def connect(self, uri: str, origin: str, redirect_url: str = "") -> None:
        raise NotImplementedError


class AppSwitcher(ABC):
    @abstractmethod
    def go_back(self) -> None:
        """Send the user back to the app that opened us."""
        raise NotImplementedError


class TransactionController(ABC):
    @abstractmethod
    def add_transaction(self, tx_params: Dict[str, str], origin: str, device_confirmed_on: str) -> Any:
        raise NotImplementedError


class NetworkController(ABC):
    @property
    @abstractmethod
    def chain_id(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def set_provider_type(self, network_type: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_active_network(self, rpc_url: str) -> None:
        raise NotImplementedError


class AccountsController(ABC):
    @property
    @abstractmethod
    def selected_address(self) -> str:
        raise NotImplementedError


class NameResolver(ABC):
    @abstractmethod
    async def resolve(self, name: str, chain_id: Optional[str]) -> Optional[str]:
        raise NotImplementedError


@dataclass
class WalletServices:
    navigator: Navigator
    alerts: AlertPresenter
    pairing: PairingClient
    sessions: SessionClient
    app_switcher: AppSwitcher
    transactions: TransactionController
    network: NetworkController
    accounts: AccountsController
    names: Optional[NameResolver] = None
