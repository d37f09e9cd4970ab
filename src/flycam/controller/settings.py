"""Tunables for the first-person controller."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FirstPersonSettings:
    """Per-channel speeds and pointer sensitivities.

    Speeds are in world units per second. Sensitivities are plain multipliers
    applied to raw pointer deltas before they are turned into radians.
    """

    speed_horizontal: float = 1.0
    speed_vertical: float = 1.0
    mouse_sensitivity_horizontal: float = 1.0
    mouse_sensitivity_vertical: float = 1.0


__all__ = ["FirstPersonSettings"]
