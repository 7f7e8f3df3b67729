# wallet_deeplinks/url_router.py
import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from . import routes
from .backend import WalletServices
from .errors import MalformedInput, MalformedQueryError, RewriteLoopError
from .ethereum.handler import EthereumURIHandler
from .messages import t
from .models.link import DeeplinkURL, PairingParams
from .protocols import Action, Protocol, rewrite_prefix
from .query import decode_query
from .scheduler import Scheduler

logger = logging.getLogger(__name__)

BrowserCallback = Callable[[str], None]

CONTEXT_UNIVERSAL = "deeplink_universal"
CONTEXT_SCHEME = "deeplink_scheme"


@dataclass(frozen=True)
class _Step:
    handled: bool
    next_url: Optional[str] = None   # set when the link was rewritten and must be routed again


class URLRouter:
    """Decides which flow owns an incoming link and hands it over."""

    MAX_REWRITES = 4

    def __init__(
        self,
        services: WalletServices,
        scheduler: Scheduler,
        payments: EthereumURIHandler,
        universal_host: str,
        store_link: str = "",
        app_scheme: str = "metamask",
    ):
        self.services = services
        self.scheduler = scheduler
        self.payments = payments
        self.universal_host = universal_host.lower()
        self.store_link = store_link
        self.app_scheme = app_scheme

    @property
    def link_base(self) -> str:
        return f"{Protocol.HTTPS.value}://{self.universal_host}"

    @property
    def supported(self) -> set:
        return {p.value for p in Protocol} | {self.app_scheme}

    def normalize(self, url: str) -> str:
        # legacy link generators put the full target url after /dapp/
        dapp = Protocol.DAPP.value
        return (
            url.replace(f"{dapp}/{Protocol.HTTPS.value}://", f"{dapp}/")
            .replace(f"{dapp}/{Protocol.HTTP.value}://", f"{dapp}/")
        )

    def route(
        self,
        url: str,
        browser_callback: Optional[BrowserCallback] = None,
        origin: str = "",
        on_handled: Optional[Callable[[], None]] = None,
    ) -> bool:
        """Route url. False only when its scheme is not one we know."""
        for _ in range(self.MAX_REWRITES + 1):
            step = self._route_once(url, browser_callback, origin, on_handled)
            if step.next_url is None:
                return step.handled
            logger.debug("rewrote %s -> %s", url, step.next_url)
            url = step.next_url
            # the caller has already been told
            on_handled = None
        raise RewriteLoopError(f"link keeps rewriting after {self.MAX_REWRITES} passes: {url}")

    def _route_once(self, url, browser_callback, origin, on_handled) -> _Step:
        try:
            link = DeeplinkURL.parse(self.normalize(url))
        except MalformedInput as e:
            self.services.alerts.alert(t("deeplink.invalid"), str(e))
            return _Step(False)

        try:
            params = decode_query(link.query)
        except MalformedQueryError as e:
            self.services.alerts.alert(t("deeplink.invalid"), str(e))
            params = PairingParams()

        logger.debug("route origin=%s scheme=%s url=%s", origin, link.scheme, url)

        if link.scheme not in self.supported:
            return _Step(False)
        if on_handled:
            on_handled()

        scheme = link.scheme
        if scheme in (Protocol.HTTP.value, Protocol.HTTPS.value):
            return self._route_web(link, params, browser_callback, origin)
        if scheme == Protocol.WC.value:
            self._connect_session(params.uri or link.href, params, origin)
        elif scheme == Protocol.ETHEREUM.value:
            self.scheduler.spawn(
                self.payments.handle(link.href, origin),
                "payment link",
                on_error=self._alert_failure,
            )
        elif scheme == Protocol.DAPP.value:
            self._open_in_browser(link.with_scheme(Protocol.HTTPS.value).href, browser_callback)
        else:
            self._route_app_scheme(link, params, origin)
        return _Step(True)

    # ---------- https universal links ----------
    def _route_web(self, link: DeeplinkURL, params: PairingParams, browser_callback, origin) -> _Step:
        if link.host != self.universal_host:
            self._open_in_browser(link.href, browser_callback)
            return _Step(True)

        action = Action.from_token(link.action_token)
        if action is Action.ANDROID_SDK:
            logger.debug("launched via android sdk universal link")
            self._bind_sdk()
        elif action is Action.CONNECT:
            self._connect_sdk(link, params, origin, CONTEXT_UNIVERSAL)
        elif action is Action.WC:
            # a bare /wc only brings the app to the foreground
            if params.uri:
                self._connect_session(params.uri, params, origin)
        elif action is Action.BUY_CRYPTO:
            self._buy_crypto()
        else:
            rewritten = self._rewrite(link, action)
            if rewritten is not None:
                return _Step(True, rewritten)
            self._route_unknown_action(link, browser_callback)
        return _Step(True)

    def _rewrite(self, link: DeeplinkURL, action: Action) -> Optional[str]:
        prefix = rewrite_prefix(action)
        marker = f"{link.scheme}://{link.netloc}/{action.value}/"
        if not prefix or not link.href.startswith(marker):
            return None
        return prefix + link.href[len(marker):]

    def _route_unknown_action(self, link: DeeplinkURL, browser_callback) -> None:
        # host is lower-cased, so compare on parsed parts rather than the raw href
        canonical = f"{link.scheme}://{link.host}{link.path}" + (f"?{link.query}" if link.query else "")
        is_root = link.path in ("", "/") and not link.query
        if is_root or canonical == self.store_link:
            # our own root or the store redirect, nothing to show
            return
        raw_base = f"{link.scheme}://{link.netloc}/"
        if link.scheme == Protocol.HTTPS.value and link.href.startswith(raw_base):
            # store redirects keep the base even when the app is installed
            target = link.href[len(raw_base):]
            self._open_in_browser(f"{Protocol.HTTPS.value}://{target}", browser_callback)
            return
        self._open_in_browser(link.href, browser_callback)

    # ---------- <app_scheme>:// links ----------
    def _route_app_scheme(self, link: DeeplinkURL, params: PairingParams, origin: str) -> None:
        url = link.raw
        prefix = f"{self.app_scheme}://"
        if url.startswith(prefix + Action.ANDROID_SDK.value):
            logger.debug("launched via android sdk deeplink")
            self._bind_sdk()
        elif url.startswith(prefix + Action.CONNECT.value):
            self._connect_sdk(link, params, origin, CONTEXT_SCHEME)
        elif url.startswith(prefix + Action.WC.value) or url.startswith(f"{prefix}/{Action.WC.value}"):
            self._connect_session(self._session_uri(url, params), params, origin)
        elif url.startswith(prefix + Action.BUY_CRYPTO.value):
            self._buy_crypto()

    def _session_uri(self, url: str, params: PairingParams) -> str:
        """metamask://wc:... and metamask:///wc:... both become wc:..."""
        if params.uri:
            return params.uri
        wc = Action.WC.value
        for form in (f"{self.app_scheme}:///{wc}", f"{self.app_scheme}://{wc}"):
            if url.startswith(form):
                return wc + url[len(form):]
        return url

    # ---------- leaf actions ----------
    def _bind_sdk(self) -> None:
        self.scheduler.spawn(self.services.pairing.bind_android_sdk(), "android sdk bind")

    def _connect_sdk(self, link: DeeplinkURL, params: PairingParams, origin: str, context: str) -> None:
        if params.redirect:
            self.services.app_switcher.go_back()
        elif params.channelId:
            self.scheduler.spawn(
                self.services.pairing.handle_deeplink(
                    channel_id=params.channelId,
                    origin=origin,
                    context=context,
                    url=link.raw,
                    other_public_key=params.pubkey,
                ),
                "sdk connect",
            )

    def _connect_session(self, uri: str, params: PairingParams, origin: str) -> None:
        self.scheduler.spawn(
            self.services.sessions.connect(uri, origin, redirect_url=params.redirect),
            "pairing session connect",
        )

    def _buy_crypto(self) -> None:
        self.services.navigator.navigate(routes.RAMP_BUY)

    def _open_in_browser(self, url: str, browser_callback: Optional[BrowserCallback]) -> None:
        # wait for running interactions/animations before switching screens
        self.scheduler.defer(self._browse, url, browser_callback)

    def _browse(self, url: str, browser_callback: Optional[BrowserCallback]) -> None:
        if browser_callback:
            browser_callback(url)
            return
        self.services.navigator.navigate(
            routes.BROWSER_HOME,
            {
                "screen": routes.BROWSER_VIEW,
                "params": {"newTabUrl": url, "timestamp": int(time.time() * 1000)},
            },
        )

    def _alert_failure(self, exc: BaseException) -> None:
        self.services.alerts.alert(t("deeplink.invalid"), str(exc))
