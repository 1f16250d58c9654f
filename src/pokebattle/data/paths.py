"""Helpers for resolving data file locations."""
from __future__ import annotations

from pathlib import Path


def get_package_data_dir() -> Path:
    """Return the directory holding files shipped inside the package."""
    return Path(__file__).resolve().parent


def get_catalog_path(base_path: Path | str | None = None) -> Path:
    """Return the offline creature catalog file."""
    if base_path is not None:
        return Path(base_path)
    return get_package_data_dir() / "creatures.json"
