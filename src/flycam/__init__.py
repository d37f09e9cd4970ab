"""
flycam: a flying first-person camera controller.

Turns pressed-key state and pointer deltas into a camera pose (position, yaw,
pitch) each frame, and builds view/projection matrices from that pose.
"""

from __future__ import annotations

from flycam.camera import Camera, CameraPerspective, model_view_projection
from flycam.controller import (
    Actions,
    CameraPose,
    ControllerDebugFlags,
    FirstPerson,
    FirstPersonSettings,
)

__version__ = "0.1.0"

__all__ = [
    "Actions",
    "Camera",
    "CameraPerspective",
    "CameraPose",
    "ControllerDebugFlags",
    "FirstPerson",
    "FirstPersonSettings",
    "model_view_projection",
]
