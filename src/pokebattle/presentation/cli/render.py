"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
from typing import Iterable, Sequence

from pokebattle.domain.battle_models import BattleCombatantView, BattleView
from pokebattle.domain.health import band_color

DEBUG_ENV_VAR = "POKEBATTLE_DEBUG"
HEALTH_BAR_WIDTH = 20


def debug_enabled() -> bool:
    """Return True only when POKEBATTLE_DEBUG is explicitly set to '1'."""
    return os.getenv(DEBUG_ENV_VAR) == "1"


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def format_health_bar(current_hp: int, max_hp: int, width: int = HEALTH_BAR_WIDTH) -> str:
    """Return a fixed-width bar such as ``[#########-----------]``."""
    if max_hp <= 0:
        filled = 0
    else:
        filled = round(width * max(current_hp, 0) / max_hp)
    filled = min(filled, width)
    return "[" + "#" * filled + "-" * (width - filled) + "]"


def format_combatant_lines(combatant: BattleCombatantView) -> list[str]:
    lines = [
        combatant.name.title(),
        f"  Image: {combatant.image}",
        f"  HP {combatant.hp_display} {format_health_bar(combatant.current_hp, combatant.max_hp)}",
    ]
    if debug_enabled():
        lines.append(
            f"  (DEBUG id={combatant.catalog_id} band={combatant.health_band} "
            f"color={band_color(combatant.health_band)})"
        )
    return lines


def render_battle_view(view: BattleView) -> None:
    """Print both combatants with their health bars."""
    if view.player is None or view.opponent is None:
        print("Loading creatures...")
        return
    render_heading(f"Round {view.round_number}" if view.round_number else "Battle")
    for line in format_combatant_lines(view.player):
        print(line)
    print("        VS")
    for line in format_combatant_lines(view.opponent):
        print(line)
    if view.round_message:
        print()
        print(view.round_message)


def render_menu(title: str, options: Sequence[str]) -> None:
    """Display a menu section with numbered options."""
    render_heading(title)
    for idx, label in enumerate(options, start=1):
        print(f"{idx}. {label}")


def render_bullet_lines(lines: Iterable[str]) -> None:
    """Print bullet-prefixed lines."""
    for line in lines:
        print(f"- {line}")
