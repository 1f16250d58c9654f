"""Health bar classification."""
from __future__ import annotations

from typing import Dict

from pokebattle.core.types import HealthBand

_BAND_COLORS: Dict[HealthBand, str] = {
    "high": "green",
    "medium-high": "yellowgreen",
    "medium": "yellow",
    "low": "orange",
    "critical": "red",
}


def health_band(hp: int) -> HealthBand:
    """Classify an HP value. Each threshold is exclusive, so 75 is not "high"."""
    if hp > 75:
        return "high"
    if hp > 50:
        return "medium-high"
    if hp > 25:
        return "medium"
    if hp > 10:
        return "low"
    return "critical"


def band_color(band: HealthBand) -> str:
    """Return the display color for a health band."""
    return _BAND_COLORS[band]
