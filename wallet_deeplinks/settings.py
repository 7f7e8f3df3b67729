# wallet_deeplinks/settings.py
import copy
import json
from pathlib import Path
from typing import Any, Dict

DEFAULTS = {
    "links": {
        "universal_host": "metamask.app.link",
        # App Store redirect link, must never be opened in the browser
        "store_link": "https://metamask.app.link/skAH3BaF99",
        "app_scheme": "metamask",
    },
    # [{"chain_id": "137", "nickname": "Polygon", "rpc_url": "https://..."}]
    "networks": {"custom": []},
    "alerts": {"network_warning_ms": 5000},
}


def _config_path() -> Path:
    base = Path.home() / ".config" / "wallet-deeplinks"
    base.mkdir(parents=True, exist_ok=True)
    return base / "config.json"


def _merge(defaults: Dict[str, Any], data: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(defaults)
    for key, value in data.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_settings() -> Dict[str, Any]:
    p = _config_path()
    if not p.exists():
        p.write_text(json.dumps(DEFAULTS, indent=2))
        return copy.deepcopy(DEFAULTS)
    return _merge(DEFAULTS, json.loads(p.read_text()))


def save_settings(data: Dict[str, Any]) -> None:
    p = _config_path()
    p.write_text(json.dumps(data, indent=2))
