# wallet_deeplinks/models/payment.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class FunctionName(str, Enum):
    TRANSFER = "transfer"
    APPROVE = "approve"
    NONE = "none"

    @classmethod
    def from_name(cls, name: Optional[str]) -> "FunctionName":
        if name in (cls.TRANSFER.value, cls.APPROVE.value):
            return cls(name)
        return cls.NONE


@dataclass(frozen=True)
class PaymentIntent:
    target_address: str
    source: str                         # the raw ethereum: uri
    chain_id: Optional[str] = None
    function_name: FunctionName = FunctionName.NONE
    parameters: Dict[str, str] = field(default_factory=dict)
    prefix: Optional[str] = None        # EIP-681 "pay" etc.

    def as_tx_meta(self, action: Optional[str] = None) -> Dict[str, Any]:
        """Shape handed to the send screens."""
        meta: Dict[str, Any] = {
            "scheme": "ethereum",
            "target_address": self.target_address,
            "source": self.source,
        }
        if self.prefix:
            meta["prefix"] = self.prefix
        if self.chain_id:
            meta["chain_id"] = self.chain_id
        if self.function_name is not FunctionName.NONE:
            meta["function_name"] = self.function_name.value
        if self.parameters:
            meta["parameters"] = dict(self.parameters)
        if action:
            meta["action"] = action
        return meta
