"""Battle service handling dice combat between two combatants."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from pokebattle.core.rng import RNG
from pokebattle.core.types import BattleOutcome
from pokebattle.domain.battle_models import (
    INITIAL_HP,
    BattleCombatantView,
    BattleState,
    BattleView,
    Combatant,
)
from pokebattle.domain.dice import format_rolls, roll_die_sequence
from pokebattle.domain.health import health_band
from pokebattle.services.errors import InvalidOperationError, InvalidStateError

OUTCOME_PHRASES: Dict[BattleOutcome, str] = {
    "draw": "It's a draw!",
    "defeat": "Game Over!",
    "victory": "You Win!",
}


@dataclass(slots=True)
class BattleEvent:
    """Base battle event."""


@dataclass(slots=True)
class BattleStartedEvent(BattleEvent):
    player_name: str
    opponent_name: str


@dataclass(slots=True)
class OpponentReplacedEvent(BattleEvent):
    opponent_name: str


@dataclass(slots=True)
class RoundResolvedEvent(BattleEvent):
    round_number: int
    player_rolls: Tuple[int, ...]
    opponent_rolls: Tuple[int, ...]
    player_total: int
    opponent_total: int
    player_hp: int
    opponent_hp: int


@dataclass(slots=True)
class BattleResolvedEvent(BattleEvent):
    outcome: BattleOutcome


@dataclass(slots=True)
class RoundResult:
    """Updated state plus the outcome of the round that produced it."""

    state: BattleState
    outcome: BattleOutcome
    events: List[BattleEvent]


def classify_outcome(player_hp: int, opponent_hp: int) -> BattleOutcome:
    """Classify HP totals. A double knockout is a draw, not a win for either side."""
    if player_hp == 0 and opponent_hp == 0:
        return "draw"
    if player_hp == 0:
        return "defeat"
    if opponent_hp == 0:
        return "victory"
    return "ongoing"


class BattleService:
    """State transitions for a single player-versus-opponent battle."""

    # -----------------------
    # Battle Lifecycle
    # -----------------------
    def new_battle_state(self) -> BattleState:
        """Return a fresh state with full HP and no combatants."""
        return BattleState()

    def start_battle(self, battle_state: BattleState, player: Combatant, opponent: Combatant) -> List[BattleEvent]:
        """Install both combatants and reset the battle."""
        battle_state.player = player
        battle_state.opponent = opponent
        self._reset(battle_state)
        return [BattleStartedEvent(player_name=player.name, opponent_name=opponent.name)]

    def replace_opponent(self, battle_state: BattleState, opponent: Combatant) -> List[BattleEvent]:
        """Keep the player, install a new opponent and reset the battle."""
        if battle_state.player is None:
            raise InvalidOperationError("Cannot replace the opponent before a player is loaded.")
        battle_state.opponent = opponent
        self._reset(battle_state)
        return [OpponentReplacedEvent(opponent_name=opponent.name)]

    def require_continuation(self, battle_state: BattleState) -> None:
        """Raise unless the battle is over and waiting for a continuation choice."""
        if not battle_state.awaiting_continuation:
            raise InvalidOperationError("Continuation is only available after a battle has ended.")

    def get_battle_view(self, battle_state: BattleState) -> BattleView:
        """Return a structured snapshot for rendering."""
        return BattleView(
            player=self._to_view(battle_state.player, battle_state.player_hp),
            opponent=self._to_view(battle_state.opponent, battle_state.opponent_hp),
            phase=battle_state.phase,
            is_over=battle_state.is_over,
            round_message=battle_state.round_message,
            awaiting_continuation=battle_state.awaiting_continuation,
            round_number=battle_state.round_number,
        )

    # -----------------------
    # Rounds
    # -----------------------
    def resolve_round(self, battle_state: BattleState, rng: RNG) -> RoundResult:
        """
        Resolve one simultaneous exchange of dice.

        Each side's roll total is subtracted from the other side's HP, both
        computed from the HP values held before the round. The state is left
        untouched when the battle is loading or already over.
        """
        if battle_state.phase == "loading":
            raise InvalidOperationError("Cannot resolve a round before both combatants are loaded.")
        if battle_state.phase == "terminal":
            raise InvalidOperationError("Cannot resolve a round after the battle has ended.")

        player_rolls = roll_die_sequence(rng)
        opponent_rolls = roll_die_sequence(rng)
        player_total = sum(player_rolls)
        opponent_total = sum(opponent_rolls)

        battle_state.player_hp = max(battle_state.player_hp - opponent_total, 0)
        battle_state.opponent_hp = max(battle_state.opponent_hp - player_total, 0)
        battle_state.round_number += 1

        message = f"You rolled {format_rolls(player_rolls)}. Opponent rolled {format_rolls(opponent_rolls)}."
        outcome = classify_outcome(battle_state.player_hp, battle_state.opponent_hp)
        events: List[BattleEvent] = [
            RoundResolvedEvent(
                round_number=battle_state.round_number,
                player_rolls=player_rolls,
                opponent_rolls=opponent_rolls,
                player_total=player_total,
                opponent_total=opponent_total,
                player_hp=battle_state.player_hp,
                opponent_hp=battle_state.opponent_hp,
            )
        ]
        if outcome != "ongoing":
            message = f"{message} {OUTCOME_PHRASES[outcome]}"
            battle_state.awaiting_continuation = True
            events.append(BattleResolvedEvent(outcome=outcome))
        battle_state.round_message = message
        return RoundResult(state=battle_state, outcome=outcome, events=events)

    # -----------------------
    # Helpers
    # -----------------------
    def check_invariants(self, battle_state: BattleState) -> None:
        """Raise InvalidStateError if the state breaks an invariant."""
        for label, hp in (("player", battle_state.player_hp), ("opponent", battle_state.opponent_hp)):
            if not 0 <= hp <= INITIAL_HP:
                raise InvalidStateError(f"{label} HP {hp} outside [0, {INITIAL_HP}].")
        if battle_state.awaiting_continuation and not battle_state.is_over:
            raise InvalidStateError("Awaiting continuation while the battle is still running.")
        if battle_state.is_over and battle_state.phase != "loading" and not battle_state.awaiting_continuation:
            raise InvalidStateError("Battle is over but no continuation is pending.")

    def _reset(self, battle_state: BattleState) -> None:
        battle_state.player_hp = INITIAL_HP
        battle_state.opponent_hp = INITIAL_HP
        battle_state.round_message = ""
        battle_state.awaiting_continuation = False
        battle_state.round_number = 0

    def _to_view(self, combatant: Combatant | None, hp: int) -> BattleCombatantView | None:
        if combatant is None:
            return None
        return BattleCombatantView(
            name=combatant.name,
            image=combatant.image,
            catalog_id=combatant.catalog_id,
            current_hp=hp,
            max_hp=INITIAL_HP,
            health_band=health_band(hp),
        )
