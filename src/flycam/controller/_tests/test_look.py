from __future__ import annotations

import logging
import math

import numpy as np
import pytest

from flycam.controller import ControllerDebugFlags, FirstPerson, FirstPersonSettings

# one pointer unit in radians
_UNIT = (1.0 / 360.0) * math.pi / 4.0


def _bounds(dtype) -> tuple[float, float]:
    pi = dtype(math.pi)
    return dtype(2) * pi, pi / dtype(2)


def test_negative_dx_increases_yaw() -> None:
    cam = FirstPerson((0.0, 0.0, 0.0), dtype=np.float64)
    cam.apply_look_delta(-360.0, 0.0)
    assert cam.yaw == pytest.approx(math.pi / 4)
    assert cam.pitch == 0.0


def test_positive_dx_wraps_below_zero() -> None:
    cam = FirstPerson((0.0, 0.0, 0.0), dtype=np.float64)
    cam.apply_look_delta(360.0, 0.0)
    assert cam.yaw == pytest.approx(2 * math.pi - math.pi / 4)


def test_sensitivity_scales_deltas() -> None:
    settings = FirstPersonSettings(mouse_sensitivity_horizontal=2.0, mouse_sensitivity_vertical=0.5)
    cam = FirstPerson((0.0, 0.0, 0.0), settings, dtype=np.float64)

    cam.apply_look_delta(-180.0, 100.0)

    assert cam.yaw == pytest.approx(math.pi / 4)
    assert cam.pitch == pytest.approx(50.0 * _UNIT)


def test_quarter_turn_needs_1440_units() -> None:
    cam = FirstPerson((0.0, 0.0, 0.0), dtype=np.float64)
    cam.apply_look_delta(-1440.0, 0.0)
    assert cam.yaw == pytest.approx(math.pi)


@pytest.mark.parametrize("dtype", [np.float32, np.float64])
@pytest.mark.parametrize(
    "dx",
    [0.0, 1.0, -1.0, 1e-20, -1e-20, 2879.0, -2880.0, 123456.75, -98765.5, 1e9, -1e9],
)
def test_yaw_always_in_half_open_turn(dtype, dx: float) -> None:
    two_pi, _ = _bounds(dtype)
    cam = FirstPerson((0.0, 0.0, 0.0), dtype=dtype)
    for _ in range(3):
        cam.apply_look_delta(dx, 0.0)
        assert 0.0 <= cam.yaw < two_pi
        assert isinstance(cam.yaw, dtype)


def test_tiny_negative_yaw_folds_to_zero() -> None:
    cam = FirstPerson((0.0, 0.0, 0.0), dtype=np.float64)
    cam.apply_look_delta(1e-20, 0.0)
    assert cam.yaw == 0.0


@pytest.mark.parametrize("dtype", [np.float32, np.float64])
def test_pitch_saturates_at_poles(dtype) -> None:
    _, half_pi = _bounds(dtype)
    cam = FirstPerson((0.0, 0.0, 0.0), dtype=dtype)

    for _ in range(5):
        cam.apply_look_delta(0.0, 500.0)
        assert -half_pi <= cam.pitch <= half_pi
    assert cam.pitch == half_pi

    cam.apply_look_delta(0.0, 10.0)
    assert cam.pitch == half_pi

    cam.apply_look_delta(0.0, -1e7)
    assert cam.pitch == -half_pi


def test_pitch_moves_freely_inside_range() -> None:
    cam = FirstPerson((0.0, 0.0, 0.0), dtype=np.float64)
    cam.apply_look_delta(0.0, 100.0)
    cam.apply_look_delta(0.0, -30.0)
    assert cam.pitch == pytest.approx(70.0 * _UNIT)


def test_nan_delta_propagates() -> None:
    cam = FirstPerson((0.0, 0.0, 0.0), dtype=np.float64)
    cam.apply_look_delta(float("nan"), float("nan"))
    assert math.isnan(cam.yaw)
    assert math.isnan(cam.pitch)


def test_look_does_not_move_position() -> None:
    cam = FirstPerson((1.0, 2.0, 3.0))
    cam.apply_look_delta(400.0, -200.0)
    assert cam.position.tolist() == [1.0, 2.0, 3.0]


def test_look_logging_respects_debug_flag(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="flycam.controller.first_person")

    FirstPerson((0.0, 0.0, 0.0)).apply_look_delta(10.0, 10.0)
    assert not [r for r in caplog.records if r.getMessage().startswith("look ")]

    FirstPerson((0.0, 0.0, 0.0), debug=ControllerDebugFlags(look=True)).apply_look_delta(10.0, 10.0)
    assert [r for r in caplog.records if r.getMessage().startswith("look ")]
