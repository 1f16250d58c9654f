"""Shared catalog contract and record parsing."""
from __future__ import annotations

from typing import Protocol

from pokebattle.data.errors import CatalogFormatError
from pokebattle.domain.battle_models import Combatant


class CombatantCatalog(Protocol):
    """Blocking lookup of a single creature record by numeric id."""

    def get_record(self, combatant_id: int) -> Combatant:
        ...


def parse_catalog_record(combatant_id: int, payload: object) -> Combatant:
    """
    Build a Combatant from a decoded catalog record.

    Accepts the remote shape (``name`` plus ``sprites.front_default``) and the
    flat offline shape (``name`` plus ``image``).
    """
    record = _require_mapping(payload, f"record {combatant_id}")
    name = _require_str(record.get("name"), f"record {combatant_id} name")
    if "image" in record:
        image = record["image"]
    else:
        sprites = _require_mapping(record.get("sprites"), f"record {combatant_id} sprites")
        image = sprites.get("front_default")
    image = _require_str(image, f"record {combatant_id} image")
    return Combatant(name=name, image=image, catalog_id=combatant_id)


def _require_mapping(value: object, context: str) -> dict[str, object]:
    if not isinstance(value, dict):
        raise CatalogFormatError(f"{context} must be an object/dict.")
    return value


def _require_str(value: object, context: str) -> str:
    if not isinstance(value, str) or not value:
        raise CatalogFormatError(f"{context} must be a non-empty string.")
    return value
