import asyncio
import copy
from unittest.mock import AsyncMock, MagicMock

import pytest

from wallet_deeplinks.backend import WalletServices
from wallet_deeplinks.manager import DeeplinkManager, InitToken
from wallet_deeplinks.scheduler import Scheduler
from wallet_deeplinks.settings import DEFAULTS

SELECTED = "0x1111111111111111111111111111111111111111"
UNIVERSAL = "https://metamask.app.link"


@pytest.fixture
def loop():
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()


@pytest.fixture
def scheduler(loop):
    s = Scheduler(loop)
    yield s
    loop.run_until_complete(s.drain())


@pytest.fixture
def drain(loop, scheduler):
    def _drain():
        loop.run_until_complete(scheduler.drain())
    return _drain


@pytest.fixture
def services():
    pairing = MagicMock()
    pairing.bind_android_sdk = AsyncMock()
    pairing.handle_deeplink = AsyncMock()
    sessions = MagicMock()
    sessions.connect = AsyncMock()
    network = MagicMock()
    network.chain_id = "1"
    accounts = MagicMock()
    accounts.selected_address = SELECTED
    names = MagicMock()
    names.resolve = AsyncMock(return_value=None)
    return WalletServices(
        navigator=MagicMock(),
        alerts=MagicMock(),
        pairing=pairing,
        sessions=sessions,
        app_switcher=MagicMock(),
        transactions=MagicMock(),
        network=network,
        accounts=accounts,
        names=names,
    )


@pytest.fixture
def settings():
    return copy.deepcopy(DEFAULTS)


@pytest.fixture
def manager(services, settings, scheduler):
    return DeeplinkManager(InitToken(), services, settings, scheduler)
