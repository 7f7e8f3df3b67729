# wallet_deeplinks/protocols.py
from enum import Enum
from typing import Dict


class Protocol(str, Enum):
    HTTP = "http"
    HTTPS = "https"
    WC = "wc"
    ETHEREUM = "ethereum"
    DAPP = "dapp"


class Action(str, Enum):
    """First path segment of a universal link."""

    DAPP = "dapp"
    SEND = "send"
    APPROVE = "approve"
    PAYMENT = "payment"
    FOCUS = "focus"
    WC = "wc"
    CONNECT = "connect"
    ANDROID_SDK = "bind"
    BUY_CRYPTO = "buy-crypto"
    SELL_CRYPTO = "sell-crypto"
    NONE = ""

    @classmethod
    def from_token(cls, token: str) -> "Action":
        try:
            return cls(token or "")
        except ValueError:
            return cls.NONE


# Loop-back rewriting: https://<host>/<action>/rest -> PREFIXES[action] + rest
PREFIXES: Dict[Action, str] = {
    Action.DAPP: "https://",
    Action.SEND: "ethereum:",
    Action.APPROVE: "ethereum:",
}


def rewrite_prefix(action: Action) -> str:
    """Canonical scheme prefix for a rewritable action, or "" when there is none."""
    return PREFIXES.get(action, "")
