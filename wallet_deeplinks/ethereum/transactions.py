# wallet_deeplinks/ethereum/transactions.py
import re
from decimal import Decimal, InvalidOperation
from typing import Optional

from eth_utils import (
    encode_hex,
    function_signature_to_4byte_selector,
    is_hex_address,
    remove_0x_prefix,
    to_checksum_address,
)

from ..errors import InvalidAmountError

APPROVE_SELECTOR = encode_hex(function_signature_to_4byte_selector("approve(address,uint256)"))
ZERO_ADDRESS = "0x" + "0" * 40
ENS_RE = re.compile(r"^[a-zA-Z0-9_.-]+\.eth$")
UINT256_LIMIT = 2 ** 256


def parse_approve_amount(raw: Optional[str]) -> int:
    """uint256 parameter of an approve link; must be an integral number."""
    try:
        amount = Decimal(str(raw).strip()) if raw is not None else None
    except InvalidOperation:
        amount = None
    if amount is None or amount.is_nan():
        raise InvalidAmountError("The parameter uint256 should be a number")
    if not amount.is_finite() or amount != amount.to_integral_value():
        raise InvalidAmountError("The parameter uint256 should be an integer")
    if amount < 0:
        raise InvalidAmountError("The parameter uint256 should not be negative")
    if amount >= UINT256_LIMIT:
        raise InvalidAmountError("The parameter uint256 is out of range")
    return int(amount)


def generate_approve_data(spender: Optional[str], value_hex: str) -> str:
    # approve(address,uint256): selector + two 32 byte words
    spender_word = remove_0x_prefix(spender or ZERO_ADDRESS).lower().rjust(64, "0")
    value_word = remove_0x_prefix(value_hex).lower().rjust(64, "0")
    return APPROVE_SELECTOR + spender_word + value_word


def is_ens_name(name: str) -> bool:
    return bool(name) and bool(ENS_RE.match(name))


async def resolve_address(address: str, chain_id: Optional[str], name_resolver=None) -> Optional[str]:
    """Checksummed address for a hex address or ENS name, None if neither resolves."""
    if not address:
        return None
    if is_ens_name(address):
        if name_resolver is None:
            return None
        return await name_resolver.resolve(address, chain_id)
    if is_hex_address(address):
        return to_checksum_address(address)
    return None
