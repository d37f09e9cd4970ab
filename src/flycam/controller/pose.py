"""Pose value produced by the controller for the view-matrix builder."""

from __future__ import annotations

from dataclasses import dataclass

from flycam.camera import Camera


@dataclass(frozen=True)
class CameraPose:
    """Position plus yaw/pitch (radians) for a single frame."""

    position: tuple[float, float, float]
    yaw: float
    pitch: float

    def to_camera(self, dtype=None) -> Camera:
        camera = Camera(self.position, dtype=dtype)
        camera.set_yaw_pitch(self.yaw, self.pitch)
        return camera


__all__ = ["CameraPose"]
