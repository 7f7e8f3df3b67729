# wallet_deeplinks/ethereum/handler.py
import logging
from typing import Any, Dict

from .. import routes
from ..backend import WalletServices
from ..errors import InvalidPaymentURI, MissingNetworkIdError, NetworkResolutionError
from ..messages import t
from ..models.payment import FunctionName, PaymentIntent
from ..networks import NetworkSwitchGuard
from .transactions import generate_approve_data, parse_approve_amount, resolve_address
from .uri import parse_payment_uri

logger = logging.getLogger(__name__)

DEVICE_CONFIRMED_ON = "metamask_mobile"
INVALID_RECIPIENT_MS = 5000


class EthereumURIHandler:
    def __init__(self, services: WalletServices, guard: NetworkSwitchGuard):
        self.services = services
        self.guard = guard

    async def handle(self, url: str, origin: str) -> None:
        try:
            intent = parse_payment_uri(url)
        except InvalidPaymentURI as e:
            self.services.alerts.alert(t("deeplink.invalid"), str(e))
            return

        try:
            # network first, the rest depends on it
            self.guard.ensure(intent.chain_id)

            if intent.function_name is FunctionName.TRANSFER:
                self._open_send(intent, "send-token")
            elif intent.function_name is FunctionName.APPROVE:
                await self.approve(intent, origin)
            elif intent.parameters.get("value"):
                self._open_send(intent, "send-eth")
            else:
                self.services.navigator.navigate(
                    routes.SEND_FLOW_VIEW,
                    {"screen": routes.SEND_TO, "params": {"txMeta": intent.as_tx_meta()}},
                )
        except NetworkResolutionError as e:
            if isinstance(e, MissingNetworkIdError):
                message = t("send.network_missing_id")
            else:
                message = t("send.network_not_found_description", chain_id=intent.chain_id)
            self.services.alerts.alert(t("send.network_not_found_title"), message)

    def _open_send(self, intent: PaymentIntent, action: str) -> None:
        self.services.navigator.navigate(
            routes.SEND_VIEW,
            {"screen": routes.SEND, "params": {"txMeta": intent.as_tx_meta(action)}},
        )

    async def approve(self, intent: PaymentIntent, origin: str) -> Dict[str, Any]:
        """Submit an ERC-20 approve for the link's token contract.

        A bad uint256 raises before anything is submitted. An unresolvable
        spender only notifies the user and goes back to the wallet; the
        transaction is still submitted.
        """
        amount = parse_approve_amount(intent.parameters.get("uint256"))
        spender = await resolve_address(
            intent.parameters.get("address", ""), intent.chain_id, self.services.names
        )
        if not spender:
            self.services.alerts.notify(
                t("transaction.invalid_recipient"),
                t("transaction.invalid_recipient_description"),
                "simple_notification_rejected",
                INVALID_RECIPIENT_MS,
            )
            self.services.navigator.navigate(routes.WALLET_VIEW)

        tx_params = {
            "to": intent.target_address,
            "from": self.services.accounts.selected_address,
            "value": "0x0",
            "data": generate_approve_data(spender, format(amount, "x")),
        }
        logger.debug("submitting approve tx to %s from origin %s", tx_params["to"], origin)
        self.services.transactions.add_transaction(
            tx_params, origin=origin, device_confirmed_on=DEVICE_CONFIRMED_ON
        )
        return tx_params
