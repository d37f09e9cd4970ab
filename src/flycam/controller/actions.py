"""Movement intents tracked as a fixed-width bitmask.

The host flips bits on every key edge; contradictory combinations are legal
and only get resolved when the controller reads a direction out of them.
"""

from __future__ import annotations

from enum import IntFlag


class Actions(IntFlag):
    """Active movement intents of a first-person controller."""

    MOVE_FORWARD = 0b00000001
    MOVE_BACKWARD = 0b00000010
    STRAFE_LEFT = 0b00000100
    STRAFE_RIGHT = 0b00001000
    FLY_UP = 0b00010000
    FLY_DOWN = 0b00100000
    MOVE_FASTER = 0b01000000


NO_ACTIONS = Actions(0)

# (positive, negative) pairs per local axis.
AXIS_PAIRS: dict[str, tuple[Actions, Actions]] = {
    "x": (Actions.STRAFE_LEFT, Actions.STRAFE_RIGHT),
    "y": (Actions.FLY_UP, Actions.FLY_DOWN),
    "z": (Actions.MOVE_FORWARD, Actions.MOVE_BACKWARD),
}


def axis_value(actions: Actions, positive: Actions, negative: Actions) -> int:
    """Resolve one opposing pair to -1, 0 or +1.

    Both members active cancel out to 0.
    """

    has_pos = positive in actions
    has_neg = negative in actions
    if has_pos and has_neg:
        return 0
    if has_pos:
        return 1
    if has_neg:
        return -1
    return 0


def resolve_direction(actions: Actions) -> tuple[int, int, int]:
    """Return the local ``(x, y, z)`` movement intent for ``actions``."""

    return (
        axis_value(actions, *AXIS_PAIRS["x"]),
        axis_value(actions, *AXIS_PAIRS["y"]),
        axis_value(actions, *AXIS_PAIRS["z"]),
    )


__all__ = ["AXIS_PAIRS", "Actions", "NO_ACTIONS", "axis_value", "resolve_direction"]
