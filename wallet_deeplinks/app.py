# wallet_deeplinks/app.py
import logging
import sys
from typing import Dict, Optional

from PySide6.QtCore import QCoreApplication

from .backend import (
    AccountsController,
    AppSwitcher,
    NetworkController,
    PairingClient,
    SessionClient,
    TransactionController,
    WalletServices,
)
from .manager import DeeplinkManager, init
from .qt_bridge import QtAlertPresenter, QtNavigator
from .settings import load_settings

logger = logging.getLogger("wallet_deeplinks")


class LinkApp(QCoreApplication):
    def __init__(self, argv):
        super().__init__(argv)
        self.setApplicationName("Wallet Deeplinks")


# Stand-ins that only report what the router asked for.
class ConsolePairing(PairingClient):
    async def bind_android_sdk(self) -> None:
        logger.info("pairing: bind android sdk")

    async def handle_deeplink(self, channel_id, origin, context, url, other_public_key) -> None:
        logger.info("pairing: channel=%s context=%s pubkey=%s", channel_id, context, other_public_key)


class ConsoleSessions(SessionClient):
    async def connect(self, uri: str, origin: str, redirect_url: str = "") -> None:
        logger.info("session: connect %s (redirect=%s)", uri, redirect_url or "-")


class ConsoleAppSwitcher(AppSwitcher):
    def go_back(self) -> None:
        logger.info("app: back to previous app")


class ConsoleTransactions(TransactionController):
    def add_transaction(self, tx_params: Dict[str, str], origin: str, device_confirmed_on: str) -> None:
        logger.info("tx: %s origin=%s", tx_params, origin)


class ConsoleNetwork(NetworkController):
    def __init__(self, chain_id: str = "1"):
        self._chain_id = chain_id

    @property
    def chain_id(self) -> str:
        return self._chain_id

    def set_provider_type(self, network_type: str) -> None:
        logger.info("network: provider type -> %s", network_type)

    def set_active_network(self, rpc_url: str) -> None:
        logger.info("network: rpc -> %s", rpc_url)


class ConsoleAccounts(AccountsController):
    def __init__(self, address: str):
        self._address = address

    @property
    def selected_address(self) -> str:
        return self._address


def build_services(selected_address: str = "0x" + "0" * 40, parent=None) -> WalletServices:
    navigator = QtNavigator(parent)
    alerts = QtAlertPresenter(parent)
    navigator.signals.navigation_requested.connect(lambda route, params: print(f"[navigate] {route} {params}"))
    alerts.signals.alert_raised.connect(lambda title, msg: print(f"[alert] {title}: {msg}"))
    alerts.signals.toast_raised.connect(lambda msg, ms: print(f"[toast {ms}ms] {msg}"))
    alerts.signals.notification_raised.connect(
        lambda title, desc, status, ms: print(f"[{status}] {title}: {desc}")
    )
    return WalletServices(
        navigator=navigator,
        alerts=alerts,
        pairing=ConsolePairing(),
        sessions=ConsoleSessions(),
        app_switcher=ConsoleAppSwitcher(),
        transactions=ConsoleTransactions(),
        network=ConsoleNetwork(),
        accounts=ConsoleAccounts(selected_address),
    )


async def route_and_drain(manager: DeeplinkManager, url: str, origin: str = "cli") -> bool:
    handled = manager.route(url, origin=origin)
    await manager.scheduler.drain()
    return handled


def main(argv: Optional[list] = None):
    argv = sys.argv if argv is None else argv
    if len(argv) < 2:
        print("usage: wallet-deeplinks <url>")
        sys.exit(2)
    logging.basicConfig(level=logging.INFO, format="[%(name)s] %(message)s")

    settings = load_settings()
    app = LinkApp(argv)
    manager = init(build_services(parent=app), settings)

    from PySide6 import QtAsyncio
    handled = QtAsyncio.run(route_and_drain(manager, argv[1]), keep_running=False)
    if not handled:
        print(f"unsupported link: {argv[1]}")
    sys.exit(0 if handled else 1)


if __name__ == "__main__":
    main()
