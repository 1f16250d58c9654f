"""CLI configuration helpers for catalog options."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict
from urllib.parse import urlparse

from pokebattle.data.catalogs import DEFAULT_CATALOG_URL, DEFAULT_TIMEOUT_SECONDS
from pokebattle.services.roster_loader import MAX_ID

CONFIG_ENV_VAR = "POKEBATTLE_CONFIG"


def default_config() -> Dict[str, Any]:
    return {
        "catalog_url": DEFAULT_CATALOG_URL,
        "timeout_seconds": DEFAULT_TIMEOUT_SECONDS,
        "max_id": MAX_ID,
        "offline": False,
    }


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "PokeBattle"
        return Path.home() / "PokeBattle"
    return Path.home() / ".config" / "pokebattle"


def get_default_config_path() -> Path:
    """Return the config path, honouring POKEBATTLE_CONFIG."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return get_user_data_dir() / "config.json"


def normalize_config(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Keep known keys with valid values; anything else falls back to defaults."""
    config = default_config()
    url = raw.get("catalog_url")
    if isinstance(url, str) and urlparse(url.strip()).scheme in ("http", "https"):
        config["catalog_url"] = url.strip()
    timeout = raw.get("timeout_seconds")
    if isinstance(timeout, (int, float)) and not isinstance(timeout, bool) and timeout > 0:
        config["timeout_seconds"] = float(timeout)
    max_id = raw.get("max_id")
    if isinstance(max_id, int) and not isinstance(max_id, bool) and max_id >= 1:
        config["max_id"] = max_id
    offline = raw.get("offline")
    if isinstance(offline, bool):
        config["offline"] = offline
    return config


def load_config(path: Path | None = None) -> Dict[str, Any]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return default_config()
    except (OSError, ValueError):
        return default_config()
    if not isinstance(raw, dict):
        return default_config()
    return normalize_config(raw)


def save_config(config: Dict[str, Any], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = normalize_config(config)
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
