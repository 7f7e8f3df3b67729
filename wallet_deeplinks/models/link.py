# wallet_deeplinks/models/link.py
import urllib.parse
from dataclasses import dataclass, replace
from typing import Tuple

from ..errors import MalformedInput


@dataclass(frozen=True)
class DeeplinkURL:
    raw: str                  # text as handed to the router
    scheme: str               # token before the first ':' (case kept)
    host: str = ""            # lower-cased hostname
    netloc: str = ""
    path: str = ""
    query: str = ""           # without the leading '?'

    @classmethod
    def parse(cls, text: str) -> "DeeplinkURL":
        if not isinstance(text, str) or ":" not in text:
            raise MalformedInput(f"not a url: {text!r}")
        scheme = text.split(":", 1)[0]
        try:
            parts = urllib.parse.urlsplit(text)
            host = parts.hostname or ""
        except ValueError as e:
            raise MalformedInput(str(e)) from e
        return cls(
            raw=text,
            scheme=scheme,
            host=host,
            netloc=parts.netloc,
            path=parts.path,
            query=parts.query,
        )

    @property
    def href(self) -> str:
        return self.raw

    @property
    def segments(self) -> Tuple[str, ...]:
        return tuple(self.path.split("/"))

    @property
    def action_token(self) -> str:
        # "/connect/x" -> "connect"
        segs = self.segments
        return segs[1] if len(segs) > 1 else ""

    def with_scheme(self, scheme: str) -> "DeeplinkURL":
        rebuilt = urllib.parse.urlsplit(self.raw)._replace(scheme=scheme).geturl()
        return replace(self, raw=rebuilt, scheme=scheme)


@dataclass(frozen=True)
class PairingParams:
    uri: str = ""
    redirect: str = ""
    channelId: str = ""
    comm: str = ""
    pubkey: str = ""
