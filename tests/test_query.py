import pytest

from wallet_deeplinks.errors import MalformedQueryError
from wallet_deeplinks.models.link import PairingParams
from wallet_deeplinks.query import decode_query


def test_empty_query_gives_defaults():
    assert decode_query("") == PairingParams()
    assert decode_query(None) == PairingParams()


def test_pairing_keys_are_picked_and_unknown_dropped():
    params = decode_query("?channelId=abc&pubkey=xyz&comm=socket&foo=bar")
    assert params.channelId == "abc"
    assert params.pubkey == "xyz"
    assert params.comm == "socket"
    assert params.uri == ""
    assert not hasattr(params, "foo")


def test_uri_param_is_percent_decoded():
    params = decode_query("uri=wc%3Aabc%402%3Frelay-protocol%3Dirn&redirect=https%3A%2F%2Fdapp.io")
    assert params.uri == "wc:abc@2?relay-protocol=irn"
    assert params.redirect == "https://dapp.io"


def test_first_value_wins():
    assert decode_query("channelId=one&channelId=two").channelId == "one"


@pytest.mark.parametrize("query", ["channelId=%ff", "uri=%C3%28&channelId=abc"])
def test_undecodable_query_raises(query):
    with pytest.raises(MalformedQueryError):
        decode_query(query)


@pytest.mark.parametrize("query", ["channelId=abc&pubkey=xyz&v2", "dark&channelId=abc", "a=1&&channelId=abc"])
def test_bare_keys_and_empty_pairs_are_tolerated(query):
    assert decode_query(query).channelId == "abc"
