# wallet_deeplinks/query.py
import urllib.parse
from dataclasses import fields

from .errors import MalformedQueryError
from .models.link import PairingParams

PAIRING_KEYS = {f.name for f in fields(PairingParams)}


def decode_query(query: str) -> PairingParams:
    """Parse a raw query string into the pairing parameters we care about.

    Unknown keys are dropped and missing ones default to "". The first value
    wins when a key repeats.
    """
    query = (query or "").lstrip("?")
    if not query:
        return PairingParams()
    try:
        # bare keys like "?dark" are fine; bytes that do not decode are not
        pairs = urllib.parse.parse_qsl(query, keep_blank_values=True, errors="strict")
    except ValueError as e:
        raise MalformedQueryError(str(e)) from e
    found = {}
    for key, value in pairs:
        if key in PAIRING_KEYS and key not in found:
            found[key] = value
    return PairingParams(**found)
