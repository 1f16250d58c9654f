"""Dice-driven creature battle simulator."""

__version__ = "0.1.0"
