import pytest

from wallet_deeplinks.errors import InvalidPaymentURI
from wallet_deeplinks.ethereum.uri import parse_payment_uri
from wallet_deeplinks.models.payment import FunctionName


def test_transfer_uri():
    intent = parse_payment_uri("ethereum:0xRECIPIENT@1/transfer?address=0xTOKEN&uint256=5")
    assert intent.target_address == "0xRECIPIENT"
    assert intent.chain_id == "1"
    assert intent.function_name is FunctionName.TRANSFER
    assert intent.parameters == {"address": "0xTOKEN", "uint256": "5"}
    assert intent.source.startswith("ethereum:0xRECIPIENT")


def test_plain_address_has_no_chain_or_function():
    intent = parse_payment_uri("ethereum:0xabc")
    assert intent.chain_id is None
    assert intent.function_name is FunctionName.NONE
    assert intent.parameters == {}


def test_scientific_value_is_expanded():
    intent = parse_payment_uri("ethereum:0xabc?value=2.014e18")
    assert intent.parameters["value"] == "2014000000000000000"


def test_unknown_function_degrades_to_none():
    intent = parse_payment_uri("ethereum:0xabc@5/mint?value=1")
    assert intent.function_name is FunctionName.NONE
    assert intent.chain_id == "5"


def test_prefixed_ens_target():
    intent = parse_payment_uri("ethereum:pay-vitalik.eth@1?value=1")
    assert intent.prefix == "pay"
    assert intent.target_address == "vitalik.eth"
    assert intent.chain_id == "1"


def test_approve_amount_is_left_raw():
    intent = parse_payment_uri("ethereum:0xTOKEN/approve?address=0xSPENDER&uint256=12.5")
    assert intent.function_name is FunctionName.APPROVE
    assert intent.parameters["uint256"] == "12.5"


def test_tx_meta_carries_action():
    meta = parse_payment_uri("ethereum:0xabc@1/transfer").as_tx_meta("send-token")
    assert meta["target_address"] == "0xabc"
    assert meta["chain_id"] == "1"
    assert meta["function_name"] == "transfer"
    assert meta["action"] == "send-token"


@pytest.mark.parametrize(
    "uri",
    [
        "",
        "bitcoin:1BoatSLRHtKNngkdXEeobR76b53LETtpyT",
        "ethereum:nodash",
        "ethereum:0xabc?value=-1",
        "ethereum:0xabc?value=lots",
    ],
)
def test_bad_uris_raise(uri):
    with pytest.raises(InvalidPaymentURI):
        parse_payment_uri(uri)
