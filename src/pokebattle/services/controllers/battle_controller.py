"""UI-agnostic battle controller that owns the session state."""
from __future__ import annotations

from typing import List

from pokebattle.core.rng import RNG
from pokebattle.domain.battle_models import BattleState, BattleView
from pokebattle.services.battle_service import BattleEvent, BattleService, RoundResult
from pokebattle.services.roster_loader import RosterLoader


class BattleController:
    """
    Owns the single BattleState of a session and sequences roster loads.

    Loader results are committed only after every lookup of an operation has
    succeeded, so a failed load leaves the previous state exactly as it was.
    CombatantLookupError propagates to the caller, who may retry.

    Non-responsibilities (handled by presentation layer):
    - Rendering names, images or health bars
    - Prompting for the continuation choice
    """

    def __init__(self, battle_service: BattleService, roster_loader: RosterLoader, rng: RNG) -> None:
        self._service = battle_service
        self._loader = roster_loader
        self._rng = rng
        self._state = battle_service.new_battle_state()

    @property
    def state(self) -> BattleState:
        return self._state

    def get_battle_view(self) -> BattleView:
        """Return structured view of current battle state for rendering."""
        return self._service.get_battle_view(self._state)

    async def load(self) -> List[BattleEvent]:
        """Fetch a fresh pair of combatants and start a battle with them."""
        player, opponent = await self._loader.load_pair()
        return self._service.start_battle(self._state, player, opponent)

    def resolve_round(self) -> RoundResult:
        """Roll one round of dice against the owned state."""
        return self._service.resolve_round(self._state, self._rng)

    async def continue_battle(self, keep_player: bool) -> List[BattleEvent]:
        """
        Start the next battle after a terminal round.

        keep_player=True keeps the current player and fetches one new opponent;
        keep_player=False fetches two new combatants.
        """
        self._service.require_continuation(self._state)
        if keep_player:
            opponent = await self._loader.load_one()
            return self._service.replace_opponent(self._state, opponent)
        return await self.load()
