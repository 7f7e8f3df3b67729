# wallet_deeplinks/messages.py
from typing import Any

STRINGS = {
    "deeplink.invalid": "Invalid deeplink",
    "send.warn_network_change": "Network changed to ",
    "send.network_not_found_title": "Network not found",
    "send.network_not_found_description": "Network with chain id {chain_id} not found in your wallet. Please add the network first.",
    "send.network_missing_id": "Missing chain id.",
    "transaction.invalid_recipient": "Invalid recipient",
    "transaction.invalid_recipient_description": "Check the address and make sure it's valid",
}


def t(key: str, **kwargs: Any) -> str:
    text = STRINGS.get(key, key)
    return text.format(**kwargs) if kwargs else text
