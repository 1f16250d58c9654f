"""Battle domain models."""
from __future__ import annotations

from dataclasses import dataclass

from pokebattle.core.types import BattlePhase, HealthBand

INITIAL_HP = 100


@dataclass(slots=True, frozen=True)
class Combatant:
    """A creature fetched from the catalog. Replaced wholesale, never edited."""

    name: str
    image: str
    catalog_id: int


@dataclass(slots=True)
class BattleState:
    """Tracks the state of the current battle session."""

    player: Combatant | None = None
    opponent: Combatant | None = None
    player_hp: int = INITIAL_HP
    opponent_hp: int = INITIAL_HP
    round_message: str = ""
    awaiting_continuation: bool = False
    round_number: int = 0

    @property
    def is_over(self) -> bool:
        return self.player_hp == 0 or self.opponent_hp == 0

    @property
    def phase(self) -> BattlePhase:
        if self.player is None or self.opponent is None:
            return "loading"
        if self.is_over:
            return "terminal"
        return "in_progress"


@dataclass(slots=True, frozen=True)
class BattleCombatantView:
    """Read-only combatant snapshot for rendering."""

    name: str
    image: str
    catalog_id: int
    current_hp: int
    max_hp: int
    health_band: HealthBand

    @property
    def hp_display(self) -> str:
        return f"{self.current_hp}/{self.max_hp}"


@dataclass(slots=True, frozen=True)
class BattleView:
    """Presentation view for the current battle state."""

    player: BattleCombatantView | None
    opponent: BattleCombatantView | None
    phase: BattlePhase
    is_over: bool
    round_message: str
    awaiting_continuation: bool
    round_number: int
