"""Offline creature catalog backed by a JSON file."""
from __future__ import annotations

from pathlib import Path
from typing import Dict

from pokebattle.data import paths
from pokebattle.data.catalogs.base import parse_catalog_record
from pokebattle.data.errors import CatalogFormatError, CatalogTransportError
from pokebattle.data.json_loader import load_json
from pokebattle.domain.battle_models import Combatant


class JsonCatalog:
    """Loads every record on first use and serves lookups from memory."""

    def __init__(self, path: Path | str | None = None) -> None:
        self._path = paths.get_catalog_path(path)
        self._records: Dict[int, Combatant] | None = None

    def _build(self, raw: dict[str, object]) -> Dict[int, Combatant]:
        records: Dict[int, Combatant] = {}
        for raw_id, payload in raw.items():
            try:
                combatant_id = int(raw_id)
            except ValueError as exc:
                raise CatalogFormatError(f"Catalog ids must be integers, got '{raw_id}'.") from exc
            records[combatant_id] = parse_catalog_record(combatant_id, payload)
        return records

    def _ensure_loaded(self) -> Dict[int, Combatant]:
        if self._records is None:
            raw = load_json(self._path)
            if not isinstance(raw, dict):
                raise CatalogFormatError(f"Expected top-level object in {self._path}")
            self._records = self._build(raw)
        return self._records

    def ids(self) -> list[int]:
        """Return every id present in the file, sorted."""
        return sorted(self._ensure_loaded())

    def get_record(self, combatant_id: int) -> Combatant:
        records = self._ensure_loaded()
        try:
            return records[combatant_id]
        except KeyError as exc:
            raise CatalogTransportError(f"No record {combatant_id} in {self._path}") from exc
