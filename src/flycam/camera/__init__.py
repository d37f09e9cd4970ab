"""Camera value and matrix helpers consumed by the first-person controller."""

from __future__ import annotations

from .camera import Camera
from .ops import CameraPerspective, identity, model_view_projection

__all__ = [
    "Camera",
    "CameraPerspective",
    "identity",
    "model_view_projection",
]
