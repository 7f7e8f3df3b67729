# wallet_deeplinks/ethereum/uri.py
"""Decoder for EIP-681 style payment links.

    ethereum:[prefix-]<target>[@<chain_id>][/<function_name>][?key=value&...]

The target is a 0x address token, or an ENS name when a prefix is present
and what follows it does not start with 0x.
"""
import re
import urllib.parse
from decimal import Decimal, InvalidOperation
from typing import Dict, Optional

from ..errors import InvalidPaymentURI
from ..models.payment import FunctionName, PaymentIntent

SCHEME = "ethereum:"
HEX_TARGET = r"(0x\w+)"
ENS_TARGET = r"([a-zA-Z0-9_.-]+\.eth)"


def _parse_params(query: str) -> Dict[str, str]:
    params: Dict[str, str] = {}
    for key, value in urllib.parse.parse_qsl(query, keep_blank_values=True):
        params.setdefault(key, value)
    return params


def _normalize_amount(raw: str) -> str:
    try:
        amount = Decimal(raw)
    except InvalidOperation:
        raise InvalidPaymentURI(f"Invalid amount: {raw!r}")
    if not amount.is_finite() or amount < 0:
        raise InvalidPaymentURI(f"Invalid amount: {raw!r}")
    if amount == amount.to_integral_value():
        # "1e18" -> "1000000000000000000"
        return str(int(amount))
    return format(amount.normalize(), "f")


def parse_payment_uri(uri: str) -> PaymentIntent:
    if not uri or not isinstance(uri, str):
        raise InvalidPaymentURI("uri must be a string")
    if not uri.startswith(SCHEME):
        raise InvalidPaymentURI("Not an Ethereum URI")

    rest = uri[len(SCHEME):]
    prefix: Optional[str] = None
    target_re = HEX_TARGET
    if rest[:2].lower() != "0x":
        cut = rest.find("-")
        if cut == -1:
            raise InvalidPaymentURI("Missing prefix")
        prefix = rest[:cut]
        if rest[cut + 1:cut + 3].lower() != "0x":
            target_re = ENS_TARGET

    prefix_re = re.escape(prefix) + "-" if prefix else ""
    m = re.match(r"^ethereum:" + prefix_re + target_re + r"(?:@(\w*))?(?:/(\w*))?", uri)
    if not m:
        raise InvalidPaymentURI("Could not parse the url")

    function_name = FunctionName.from_name(m.group(3) or None)
    params = _parse_params(uri.split("?", 1)[1]) if "?" in uri else {}

    amount_key = "uint256" if function_name is FunctionName.TRANSFER else "value"
    if params.get(amount_key):
        params[amount_key] = _normalize_amount(params[amount_key])

    return PaymentIntent(
        target_address=m.group(1),
        source=uri,
        chain_id=m.group(2) or None,
        function_name=function_name,
        parameters=params,
        prefix=prefix,
    )
