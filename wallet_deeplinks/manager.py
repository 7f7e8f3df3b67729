# wallet_deeplinks/manager.py
import logging
from typing import Any, Callable, Dict, Optional

from .backend import WalletServices
from .errors import NotInitializedError, TokenConsumedError
from .ethereum.handler import EthereumURIHandler
from .networks import NetworkSwitchGuard, custom_networks_from_settings
from .pending import PendingDeeplinkStore
from .scheduler import Scheduler
from .settings import DEFAULTS
from .url_router import BrowserCallback, URLRouter

logger = logging.getLogger(__name__)


class InitToken:
    """Single-use permission to build a DeeplinkManager."""

    def __init__(self):
        self._consumed = False

    def consume(self) -> None:
        if self._consumed:
            raise TokenConsumedError("this InitToken already built a DeeplinkManager")
        self._consumed = True


class DeeplinkManager:
    """Everything a deeplink needs, built once at startup and passed around."""

    def __init__(
        self,
        token: InitToken,
        services: WalletServices,
        settings: Optional[Dict[str, Any]] = None,
        scheduler: Optional[Scheduler] = None,
    ):
        token.consume()
        settings = settings or DEFAULTS
        links = settings["links"]
        self.services = services
        self.scheduler = scheduler or Scheduler()
        self.pending = PendingDeeplinkStore()
        self.guard = NetworkSwitchGuard(
            services.network,
            services.alerts,
            custom_networks_from_settings(settings),
            warning_ms=settings.get("alerts", {}).get("network_warning_ms", 5000),
        )
        self.payments = EthereumURIHandler(services, self.guard)
        self.router = URLRouter(
            services,
            self.scheduler,
            self.payments,
            universal_host=links["universal_host"],
            store_link=links.get("store_link", ""),
            app_scheme=links.get("app_scheme", "metamask"),
        )

    def route(
        self,
        url: str,
        browser_callback: Optional[BrowserCallback] = None,
        origin: str = "",
        on_handled: Optional[Callable[[], None]] = None,
    ) -> bool:
        return self.router.route(url, browser_callback=browser_callback, origin=origin, on_handled=on_handled)

    def set_pending(self, url: str) -> None:
        self.pending.set(url)

    def get_pending(self) -> Optional[str]:
        return self.pending.get()

    def expire_pending(self) -> None:
        self.pending.expire()


# ---------- process-wide facade ----------
_token = InitToken()
_shared: Optional[DeeplinkManager] = None


def init(
    services: WalletServices,
    settings: Optional[Dict[str, Any]] = None,
    scheduler: Optional[Scheduler] = None,
) -> DeeplinkManager:
    """Build the shared manager. Later calls return the first one untouched."""
    global _shared
    if _shared is not None:
        return _shared
    _shared = DeeplinkManager(_token, services, settings, scheduler)
    logger.debug("DeeplinkManager initialized")
    return _shared


def shared() -> DeeplinkManager:
    if _shared is None:
        raise NotInitializedError("call init() first")
    return _shared


def route(url: str, **kwargs: Any) -> bool:
    return shared().route(url, **kwargs)


def set_pending(url: str) -> None:
    shared().set_pending(url)


def get_pending() -> Optional[str]:
    return shared().get_pending()


def expire_pending() -> None:
    shared().expire_pending()
