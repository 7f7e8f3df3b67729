import pytest

pytest.importorskip("PySide6.QtCore")

from wallet_deeplinks.app import build_services, route_and_drain
from wallet_deeplinks.manager import DeeplinkManager, InitToken


def test_console_wiring_routes_a_link(settings, scheduler, loop, capsys):
    services = build_services()
    manager = DeeplinkManager(InitToken(), services, settings, scheduler)
    assert loop.run_until_complete(route_and_drain(manager, "metamask://buy-crypto")) is True
    assert "[navigate] RampBuy" in capsys.readouterr().out


def test_console_wiring_reports_unsupported(settings, scheduler, loop):
    manager = DeeplinkManager(InitToken(), build_services(), settings, scheduler)
    assert loop.run_until_complete(route_and_drain(manager, "gopher://x")) is False


def test_usage_without_url(capsys):
    from wallet_deeplinks.app import main

    with pytest.raises(SystemExit) as exc:
        main(["wallet-deeplinks"])
    assert exc.value.code == 2
    assert "usage" in capsys.readouterr().out
