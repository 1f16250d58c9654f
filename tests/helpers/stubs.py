from __future__ import annotations

import threading
from typing import Dict, Iterable, List

from pokebattle.core.rng import RNG
from pokebattle.data.errors import CatalogTransportError
from pokebattle.domain.battle_models import Combatant


class ScriptedRNG(RNG):
    """RNG that replays a fixed list of integers, failing loudly when exhausted."""

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__(0)
        self._values: List[int] = list(values)
        self.calls: List[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        if not self._values:
            raise AssertionError("ScriptedRNG ran out of values.")
        value = self._values.pop(0)
        assert a <= value <= b, f"scripted value {value} outside [{a}, {b}]"
        return value

    @property
    def remaining(self) -> int:
        return len(self._values)


def make_combatant(catalog_id: int, name: str | None = None) -> Combatant:
    return Combatant(
        name=name or f"creature-{catalog_id}",
        image=f"https://img.example/{catalog_id}.png",
        catalog_id=catalog_id,
    )


class FakeCatalog:
    """In-memory catalog that records lookups and can fail chosen ids."""

    def __init__(self, failing_ids: Iterable[int] = ()) -> None:
        self.failing_ids = set(failing_ids)
        self.requested: List[int] = []
        self._lock = threading.Lock()
        self.records: Dict[int, Combatant] = {}

    def get_record(self, combatant_id: int) -> Combatant:
        with self._lock:
            self.requested.append(combatant_id)
        if combatant_id in self.failing_ids:
            raise CatalogTransportError(f"simulated outage for {combatant_id}")
        return self.records.get(combatant_id) or make_combatant(combatant_id)
