"""Roster loading: random creature selection backed by a catalog."""
from __future__ import annotations

import asyncio
import logging
from typing import Tuple

from pokebattle.core.rng import RNG
from pokebattle.data.catalogs import CombatantCatalog
from pokebattle.data.errors import CatalogError, CombatantLookupError
from pokebattle.domain.battle_models import Combatant

logger = logging.getLogger(__name__)

MAX_ID = 898


class RosterLoader:
    """
    Picks random catalog ids and fetches the matching combatants.

    The loader never touches battle state. It returns combatants (or raises
    CombatantLookupError) and leaves committing them to the caller.
    """

    def __init__(self, catalog: CombatantCatalog, rng: RNG, *, max_id: int = MAX_ID) -> None:
        if max_id < 1:
            raise ValueError("max_id must be at least 1.")
        self._catalog = catalog
        self._rng = rng
        self.max_id = max_id

    def pick_random_id(self) -> int:
        """Return a uniformly random id in [1, max_id]."""
        return self._rng.randint(1, self.max_id)

    async def fetch_combatant(self, combatant_id: int) -> Combatant:
        """Fetch one combatant. Blocking catalog calls run in a worker thread."""
        if not 1 <= combatant_id <= self.max_id:
            raise CombatantLookupError(combatant_id, f"id outside [1, {self.max_id}]")
        try:
            combatant = await asyncio.to_thread(self._catalog.get_record, combatant_id)
        except CatalogError as exc:
            logger.warning("Failed to fetch combatant with id %s: %s", combatant_id, exc)
            raise CombatantLookupError(combatant_id, str(exc)) from exc
        logger.debug("Fetched combatant %s (%s)", combatant_id, combatant.name)
        return combatant

    async def load_pair(self) -> Tuple[Combatant, Combatant]:
        """Fetch a player and an opponent concurrently; either failure fails both."""
        player_id = self.pick_random_id()
        opponent_id = self.pick_random_id()
        player, opponent = await asyncio.gather(
            self.fetch_combatant(player_id),
            self.fetch_combatant(opponent_id),
        )
        return player, opponent

    async def load_one(self) -> Combatant:
        """Fetch a single random combatant."""
        return await self.fetch_combatant(self.pick_random_id())
