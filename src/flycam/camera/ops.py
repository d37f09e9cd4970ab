"""Projection and matrix composition helpers (free functions).

Matrices are row-major numpy arrays acting on column vectors, so a point is
transformed as ``matrix @ [x, y, z, 1]``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

import numpy as np

from flycam.precision import resolve_dtype


@dataclass(frozen=True)
class CameraPerspective:
    """Perspective frustum; ``fov`` is the vertical field of view in degrees."""

    fov: float = 90.0
    near_clip: float = 0.1
    far_clip: float = 1000.0
    aspect_ratio: float = 1.0

    def projection(self, dtype: Any = None) -> np.ndarray:
        """Return the 4x4 OpenGL-style projection matrix for this frustum."""
        t = resolve_dtype(dtype)
        far = float(self.far_clip)
        near = float(self.near_clip)
        f = 1.0 / math.tan(float(self.fov) * math.pi / 360.0)
        proj = np.zeros((4, 4), dtype=t)
        proj[0, 0] = f / float(self.aspect_ratio)
        proj[1, 1] = f
        proj[2, 2] = (far + near) / (near - far)
        proj[2, 3] = (2.0 * far * near) / (near - far)
        proj[3, 2] = -1.0
        return proj


def model_view_projection(model: np.ndarray, view: np.ndarray, projection: np.ndarray) -> np.ndarray:
    """Compose ``projection @ view @ model``."""
    return np.asarray(projection) @ np.asarray(view) @ np.asarray(model)


def identity(dtype: Any = None) -> np.ndarray:
    return np.eye(4, dtype=resolve_dtype(dtype))


__all__ = ["CameraPerspective", "identity", "model_view_projection"]
