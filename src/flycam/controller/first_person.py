"""Flying first-person camera controller.

The host toggles :class:`Actions` on key edges, feeds pointer deltas through
:meth:`FirstPerson.apply_look_delta`, then calls :meth:`FirstPerson.update`
once per frame with the elapsed seconds. Yaw and pitch only change through
pointer look; position only changes through ``update``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Optional, Sequence

import numpy as np

from flycam.camera import Camera
from flycam.controller.actions import NO_ACTIONS, Actions, resolve_direction
from flycam.controller.pose import CameraPose
from flycam.controller.settings import FirstPersonSettings
from flycam.precision import as_vec3, resolve_dtype

logger = logging.getLogger(__name__)

# Pointer units per nominal turn, and the divisor applied to pi on top of it.
_UNITS_PER_TURN = 360
_LOOK_DIVISOR = 4


@dataclass(frozen=True)
class ControllerDebugFlags:
    """Per-channel INFO tracing toggles for a controller."""

    look: bool = False
    move: bool = False


class FirstPerson:
    """Models a flying first-person camera.

    ``dtype`` selects the arithmetic precision (``float32`` by default); all
    stored scalars and the position array use it.
    """

    def __init__(
        self,
        position: Sequence[float],
        settings: Optional[FirstPersonSettings] = None,
        *,
        dtype: Any = None,
        debug: Optional[ControllerDebugFlags] = None,
    ) -> None:
        self.dtype = resolve_dtype(dtype)
        self.settings = settings if settings is not None else FirstPersonSettings()
        self.yaw = self.dtype(0)
        self.pitch = self.dtype(0)
        self.position = as_vec3(position, self.dtype)
        self.velocity = self.dtype(1)
        self.actions = NO_ACTIONS
        self.debug = debug if debug is not None else ControllerDebugFlags()

    # ---- pose ----------------------------------------------------------------

    def movement_direction(self) -> tuple[Any, Any, Any]:
        """Local ``(strafe, vertical, forward)`` intent, each -1, 0 or 1."""
        dx, dy, dz = resolve_direction(self.actions)
        t = self.dtype
        return t(dx), t(dy), t(dz)

    def derive_pose(self, dt: float) -> CameraPose:
        """Pose after ``dt`` seconds of the current movement, without applying it.

        Negative ``dt`` is treated as zero. Diagonal movement is not
        normalized.
        """
        t = self.dtype
        dt = max(t(dt), t(0))
        dh = dt * t(self.velocity) * t(self.settings.speed_horizontal)
        dx, dy, dz = self.movement_direction()
        s, c = np.sin(self.yaw), np.cos(self.yaw)
        delta = np.array(
            [
                (s * dx - c * dz) * dh,
                dy * dt * t(self.settings.speed_vertical),
                (s * dz + c * dx) * dh,
            ],
            dtype=t,
        )
        moved = self.position + delta
        x, y, z = (float(v) for v in moved)
        return CameraPose(position=(x, y, z), yaw=float(self.yaw), pitch=float(self.pitch))

    def camera(self, dt: float) -> Camera:
        """Build the camera for the pose ``dt`` seconds ahead."""
        return self.derive_pose(dt).to_camera(self.dtype)

    def update(self, dt: float) -> None:
        """Advance the position by ``dt`` elapsed seconds."""
        pose = self.derive_pose(dt)
        self.position = as_vec3(pose.position, self.dtype)
        if self.debug.move and logger.isEnabledFor(logging.INFO):
            x, y, z = pose.position
            logger.info(
                "move dt=%.4f actions=%d position=(%.3f,%.3f,%.3f)",
                float(dt), int(self.actions), x, y, z,
            )

    # ---- pointer look ----------------------------------------------------------

    def apply_look_delta(self, relative_dx: float, relative_dy: float) -> None:
        """Turn the view by a relative pointer movement.

        Yaw wraps into ``[0, 2*pi)``; pitch saturates at +/- ``pi/2``.
        """
        t = self.dtype
        pi = t(math.pi)
        two_pi = t(2) * pi
        half_pi = pi / t(2)
        units = t(_UNITS_PER_TURN)
        divisor = t(_LOOK_DIVISOR)

        dx = t(relative_dx) * t(self.settings.mouse_sensitivity_horizontal)
        dy = t(relative_dy) * t(self.settings.mouse_sensitivity_vertical)

        yaw = t(np.mod(self.yaw - dx / units * pi / divisor, two_pi))
        if yaw >= two_pi:
            # tiny negative inputs can round up to exactly 2*pi
            yaw = t(0)
        pitch = t(np.clip(self.pitch + dy / units * pi / divisor, -half_pi, half_pi))

        self.yaw = yaw
        self.pitch = pitch
        if self.debug.look and logger.isEnabledFor(logging.INFO):
            logger.info(
                "look dx=%.3f dy=%.3f yaw=%.4f pitch=%.4f",
                float(relative_dx), float(relative_dy), float(yaw), float(pitch),
            )

    # ---- actions -----------------------------------------------------------------

    def enable_actions(self, actions: Actions) -> None:
        self.actions = Actions(self.actions | actions)

    def disable_action(self, action: Actions) -> None:
        self.actions = Actions(self.actions & ~Actions(action))


__all__ = ["ControllerDebugFlags", "FirstPerson"]
