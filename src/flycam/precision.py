"""Floating-point precision selection shared by the controller and camera."""

from __future__ import annotations

from typing import Any

import numpy as np

DEFAULT_DTYPE = np.float32

_SUPPORTED = {
    np.dtype(np.float32): np.float32,
    np.dtype(np.float64): np.float64,
}


def resolve_dtype(dtype: Any = None) -> type[np.floating]:
    """Return the numpy scalar type for ``dtype`` (``float32`` when ``None``).

    Accepts numpy scalar types, ``np.dtype`` instances and their string names.
    """

    if dtype is None:
        return DEFAULT_DTYPE
    try:
        key = np.dtype(dtype)
    except TypeError as exc:
        raise ValueError(f"unsupported precision {dtype!r}") from exc
    scalar = _SUPPORTED.get(key)
    if scalar is None:
        raise ValueError(f"unsupported precision {dtype!r}; expected float32 or float64")
    return scalar


def as_vec3(values: Any, dtype: type[np.floating]) -> np.ndarray:
    """Copy ``values`` into a fresh length-3 array of ``dtype``."""

    arr = np.array(values, dtype=dtype)
    if arr.shape != (3,):
        raise ValueError(f"expected 3 components, got shape {arr.shape}")
    return arr


__all__ = ["DEFAULT_DTYPE", "as_vec3", "resolve_dtype"]
