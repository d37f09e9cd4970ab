"""First-person controller: movement intents, settings and pose updates."""

from __future__ import annotations

from .actions import NO_ACTIONS, Actions, axis_value, resolve_direction
from .first_person import ControllerDebugFlags, FirstPerson
from .pose import CameraPose
from .settings import FirstPersonSettings

__all__ = [
    "Actions",
    "CameraPose",
    "ControllerDebugFlags",
    "FirstPerson",
    "FirstPersonSettings",
    "NO_ACTIONS",
    "axis_value",
    "resolve_direction",
]
