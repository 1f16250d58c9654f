"""Creature catalog implementations."""

from .base import CombatantCatalog, parse_catalog_record
from .http_catalog import DEFAULT_CATALOG_URL, DEFAULT_TIMEOUT_SECONDS, HttpCatalog
from .json_catalog import JsonCatalog

__all__ = [
    "CombatantCatalog",
    "DEFAULT_CATALOG_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    "HttpCatalog",
    "JsonCatalog",
    "parse_catalog_record",
]
