"""World-space camera: position plus an orthonormal right/up/forward basis."""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from flycam.precision import as_vec3, resolve_dtype


class Camera:
    """Camera positioned in world space.

    Starts axis-aligned (``right=+X``, ``up=+Y``, ``forward=+Z``);
    :meth:`set_yaw_pitch` rotates the basis.
    """

    def __init__(self, position: Sequence[float], *, dtype: Any = None) -> None:
        self.dtype = resolve_dtype(dtype)
        self.position = as_vec3(position, self.dtype)
        self.right = np.array([1.0, 0.0, 0.0], dtype=self.dtype)
        self.up = np.array([0.0, 1.0, 0.0], dtype=self.dtype)
        self.forward = np.array([0.0, 0.0, 1.0], dtype=self.dtype)

    def set_yaw_pitch(self, yaw: float, pitch: float) -> None:
        """Orient the basis from yaw/pitch angles in radians."""
        t = self.dtype
        y_s, y_c = np.sin(t(yaw)), np.cos(t(yaw))
        p_s, p_c = np.sin(t(pitch)), np.cos(t(pitch))
        self.forward = np.array([y_s * p_c, p_s, y_c * p_c], dtype=t)
        self.up = np.array([y_s * -p_s, p_c, y_c * -p_s], dtype=t)
        self.right = np.cross(self.forward, self.up).astype(t)

    def orthogonal(self) -> np.ndarray:
        """Return the 4x4 world-to-view matrix (acts on column vectors)."""
        t = self.dtype
        view = np.zeros((4, 4), dtype=t)
        for row, axis in enumerate((self.right, self.up, self.forward)):
            view[row, :3] = axis
            view[row, 3] = -np.dot(axis, self.position)
        view[3, 3] = t(1)
        return view

    def __repr__(self) -> str:
        pos = ", ".join(f"{float(v):.3f}" for v in self.position)
        fwd = ", ".join(f"{float(v):.3f}" for v in self.forward)
        return f"Camera(position=({pos}), forward=({fwd}))"


__all__ = ["Camera"]
