from __future__ import annotations

import json
from pathlib import Path

from pokebattle.presentation.cli import config
from pokebattle.presentation.cli.config import default_config, load_config, save_config


def test_missing_config_returns_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path / "missing.json") == default_config()


def test_defaults_point_at_public_catalog() -> None:
    defaults = default_config()
    assert defaults["catalog_url"] == "https://pokeapi.co/api/v2/pokemon"
    assert defaults["max_id"] == 898
    assert defaults["timeout_seconds"] > 0
    assert defaults["offline"] is False


def test_invalid_json_returns_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{broken", encoding="utf-8")
    assert load_config(path) == default_config()


def test_invalid_values_fall_back_per_key(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    payload = {"catalog_url": "http://localhost:8000/pokemon", "timeout_seconds": -1, "max_id": True, "offline": "yes"}
    path.write_text(json.dumps(payload), encoding="utf-8")

    loaded = load_config(path)

    assert loaded["catalog_url"] == "http://localhost:8000/pokemon"
    assert loaded["timeout_seconds"] == default_config()["timeout_seconds"]
    assert loaded["max_id"] == 898
    assert loaded["offline"] is False


def test_catalog_url_without_http_scheme_falls_back(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    for url in ("pokeapi.co/api/v2/pokemon", "ftp://catalog.example/pokemon"):
        path.write_text(json.dumps({"catalog_url": url}), encoding="utf-8")

        assert load_config(path)["catalog_url"] == default_config()["catalog_url"]


def test_save_then_load_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"
    save_config({"max_id": 151, "offline": True, "timeout_seconds": 3, "unknown": "dropped"}, path)

    raw = json.loads(path.read_text(encoding="utf-8"))
    assert "unknown" not in raw
    loaded = load_config(path)
    assert loaded["max_id"] == 151
    assert loaded["offline"] is True
    assert loaded["timeout_seconds"] == 3.0


def test_env_var_overrides_config_path(monkeypatch, tmp_path: Path) -> None:
    target = tmp_path / "custom.json"
    monkeypatch.setenv(config.CONFIG_ENV_VAR, str(target))
    assert config.get_default_config_path() == target


def test_default_config_path_under_user_dir(monkeypatch) -> None:
    monkeypatch.delenv(config.CONFIG_ENV_VAR, raising=False)
    assert config.get_default_config_path().name == "config.json"
