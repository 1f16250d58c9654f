"""Service layer exports."""

from .errors import InvalidOperationError, InvalidStateError
from .battle_service import (
    BattleEvent,
    BattleResolvedEvent,
    BattleService,
    BattleStartedEvent,
    OpponentReplacedEvent,
    RoundResolvedEvent,
    RoundResult,
    classify_outcome,
)
from .roster_loader import MAX_ID, RosterLoader
from .controllers import BattleController

__all__ = [
    "InvalidOperationError",
    "InvalidStateError",
    "BattleEvent",
    "BattleResolvedEvent",
    "BattleService",
    "BattleStartedEvent",
    "OpponentReplacedEvent",
    "RoundResolvedEvent",
    "RoundResult",
    "classify_outcome",
    "MAX_ID",
    "RosterLoader",
    "BattleController",
]
