# wallet_deeplinks/pending.py
from typing import Optional


class PendingDeeplinkStore:
    """One deeplink waiting for routing to become ready.

    Last write wins; nobody is told when it changes, callers poll get().
    """

    def __init__(self):
        self._url: Optional[str] = None

    def set(self, url: str) -> None:
        self._url = url

    def get(self) -> Optional[str]:
        return self._url

    def expire(self) -> None:
        self._url = None
