import pytest

import wallet_deeplinks.manager as manager_mod
from wallet_deeplinks.errors import NotInitializedError, TokenConsumedError
from wallet_deeplinks.manager import DeeplinkManager, InitToken


@pytest.fixture
def fresh_facade(monkeypatch):
    monkeypatch.setattr(manager_mod, "_shared", None)
    monkeypatch.setattr(manager_mod, "_token", InitToken())


def test_token_builds_only_one_manager(services, settings, scheduler):
    token = InitToken()
    DeeplinkManager(token, services, settings, scheduler)
    with pytest.raises(TokenConsumedError):
        DeeplinkManager(token, services, settings, scheduler)


def test_facade_requires_init(fresh_facade):
    with pytest.raises(NotInitializedError):
        manager_mod.route("https://example.com")
    with pytest.raises(NotInitializedError):
        manager_mod.get_pending()


def test_init_is_idempotent(fresh_facade, services, settings, scheduler):
    first = manager_mod.init(services, settings, scheduler)
    second = manager_mod.init(services, settings, scheduler)
    assert first is second
    assert manager_mod.shared() is first


def test_facade_pending_slot(fresh_facade, services, settings, scheduler):
    manager_mod.init(services, settings, scheduler)
    manager_mod.set_pending("a")
    manager_mod.set_pending("b")
    assert manager_mod.get_pending() == "b"
    manager_mod.expire_pending()
    assert manager_mod.get_pending() is None


def test_facade_routes(fresh_facade, services, settings, scheduler, drain):
    manager_mod.init(services, settings, scheduler)
    assert manager_mod.route("metamask://buy-crypto") is True
    assert manager_mod.route("gopher://old.school") is False
    drain()
    services.navigator.navigate.assert_called_once()


def test_settings_drive_link_constants(services, settings, scheduler, drain):
    settings["links"]["universal_host"] = "wallet.example"
    settings["links"]["app_scheme"] = "mywallet"
    m = DeeplinkManager(InitToken(), services, settings, scheduler)
    assert m.route("https://wallet.example/buy-crypto") is True
    assert m.route("mywallet://buy-crypto") is True
    assert m.route("metamask://buy-crypto") is False
    drain()
    assert services.navigator.navigate.call_count == 2
