"""Shared type aliases for the core and domain layers."""
from typing import Literal

BattleOutcome = Literal["ongoing", "victory", "defeat", "draw"]
BattlePhase = Literal["loading", "in_progress", "terminal"]
HealthBand = Literal["high", "medium-high", "medium", "low", "critical"]

__all__ = ["BattleOutcome", "BattlePhase", "HealthBand"]
