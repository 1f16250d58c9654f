"""Die sequence rules for a single attack roll."""
from __future__ import annotations

from typing import Sequence, Tuple

from pokebattle.core.rng import RNG

DIE_SIDES = 6
BONUS_TRIGGER = DIE_SIDES


def roll_die_sequence(rng: RNG) -> Tuple[int, ...]:
    """
    Roll one d6, plus exactly one bonus d6 when the first die shows a six.

    The bonus die never chains, whatever it shows.
    """
    first = rng.roll(DIE_SIDES)
    if first == BONUS_TRIGGER:
        return (first, rng.roll(DIE_SIDES))
    return (first,)


def format_rolls(rolls: Sequence[int]) -> str:
    """Render a die sequence as ``6+2 = 8``."""
    return f"{'+'.join(str(value) for value in rolls)} = {sum(rolls)}"
