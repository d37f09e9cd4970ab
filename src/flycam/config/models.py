"""Environment-driven configuration for flycam hosts.

The controller itself never reads the environment. Hosts call
:func:`load_controller_ctx` once at startup and build controllers from the
resulting :class:`ControllerCtx`.

Environment keys consulted:
- FLYCAM_SPEED_HORIZONTAL, FLYCAM_SPEED_VERTICAL
- FLYCAM_MOUSE_SENSITIVITY_HORIZONTAL, FLYCAM_MOUSE_SENSITIVITY_VERTICAL
- FLYCAM_SETTINGS (JSON object; keys override the individual variables)
- FLYCAM_PRECISION (float32|float64)
- FLYCAM_DEBUG (see ``logging_policy``)
"""

from __future__ import annotations

import json
import logging
import math
import os
from dataclasses import dataclass, field, fields
from typing import Mapping, Optional, Sequence

from flycam.config.logging_policy import DebugPolicy, load_debug_policy
from flycam.controller import ControllerDebugFlags, FirstPerson, FirstPersonSettings
from flycam.precision import resolve_dtype

logger = logging.getLogger(__name__)


_SETTINGS_ENV: dict[str, str] = {
    "speed_horizontal": "FLYCAM_SPEED_HORIZONTAL",
    "speed_vertical": "FLYCAM_SPEED_VERTICAL",
    "mouse_sensitivity_horizontal": "FLYCAM_MOUSE_SENSITIVITY_HORIZONTAL",
    "mouse_sensitivity_vertical": "FLYCAM_MOUSE_SENSITIVITY_VERTICAL",
}


# ---- Helpers -----------------------------------------------------------------

def _env_float(env: Mapping[str, str], name: str, default: float) -> float:
    v = env.get(name)
    if v is None or v.strip() == "":
        return float(default)
    try:
        return float(v)
    except ValueError:
        logger.warning("Invalid %s=%r; using %s", name, v, default)
        return float(default)


def _env_str(env: Mapping[str, str], name: str, default: Optional[str] = None) -> Optional[str]:
    v = env.get(name)
    if v is None:
        return default
    v = v.strip()
    return v if v != "" else default


def _cfg_float(value: object, default: float, name: str) -> float:
    if value is None:
        return float(default)
    if isinstance(value, bool):
        return float(int(value))
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            pass
    logger.warning("Invalid FLYCAM_SETTINGS %s=%r; using %s", name, value, default)
    return float(default)


def _load_json_config(env: Mapping[str, str], name: str) -> dict[str, object]:
    raw = env.get(name)
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except ValueError:
        logger.warning("Failed to parse %s; ignoring", name, exc_info=True)
        return {}
    if isinstance(data, dict):
        return data
    logger.warning("%s must be a JSON object; ignoring", name)
    return {}


def _require_positive(name: str, value: float) -> float:
    if not math.isfinite(value) or value <= 0.0:
        raise ValueError(f"{name} must be a finite positive number, got {value!r}")
    return value


# ---- Types -------------------------------------------------------------------

@dataclass(frozen=True)
class ControllerCtx:
    """Resolved controller context shared by a host's cameras."""

    settings: FirstPersonSettings = field(default_factory=FirstPersonSettings)
    precision: str = "float32"
    debug_policy: DebugPolicy = field(default_factory=lambda: load_debug_policy({}))

    def debug_flags(self) -> ControllerDebugFlags:
        toggles = self.debug_policy.logging
        return ControllerDebugFlags(look=toggles.log_look, move=toggles.log_move)

    def build_controller(self, position: Sequence[float]) -> FirstPerson:
        controller = FirstPerson(
            position,
            self.settings,
            dtype=self.precision,
            debug=self.debug_flags(),
        )
        if self.debug_policy.logging.log_camera and logger.isEnabledFor(logging.INFO):
            logger.info(
                "controller built precision=%s settings=%s position=%s",
                self.precision, self.settings, tuple(float(v) for v in controller.position),
            )
        return controller


# ---- Loaders -----------------------------------------------------------------

def load_settings(env: Optional[Mapping[str, str]] = None) -> FirstPersonSettings:
    """Load controller settings from environment (no side effects).

    Raises ``ValueError`` when a resolved value is not finite and positive.
    """

    env = os.environ if env is None else env
    defaults = FirstPersonSettings()
    bundle = _load_json_config(env, "FLYCAM_SETTINGS")

    unknown = set(bundle).difference(_SETTINGS_ENV)
    if unknown:
        logger.warning("Ignoring unknown FLYCAM_SETTINGS key(s): %s", ", ".join(sorted(unknown)))

    values: dict[str, float] = {}
    for spec in fields(FirstPersonSettings):
        name = spec.name
        value = _env_float(env, _SETTINGS_ENV[name], getattr(defaults, name))
        if name in bundle:
            value = _cfg_float(bundle[name], value, name)
        values[name] = _require_positive(name, value)
    return FirstPersonSettings(**values)


def load_controller_ctx(env: Optional[Mapping[str, str]] = None) -> ControllerCtx:
    """Build a :class:`ControllerCtx` by reading the environment once."""

    env = os.environ if env is None else env
    precision = _env_str(env, "FLYCAM_PRECISION", "float32") or "float32"
    precision = precision.lower()
    resolve_dtype(precision)

    ctx = ControllerCtx(
        settings=load_settings(env),
        precision=precision,
        debug_policy=load_debug_policy(env),
    )
    logger.debug("resolved controller ctx: %s", ctx)
    return ctx


__all__ = ["ControllerCtx", "load_controller_ctx", "load_settings"]
