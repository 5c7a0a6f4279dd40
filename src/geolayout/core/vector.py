"""Vector and point helpers for the plane.

Points and vectors are plain float64 numpy arrays of shape (2,).
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from .angle import Angle, Rad, to_radians


def vec(x: float, y: float) -> NDArray[np.float64]:
    """Create a 2D vector."""
    return np.array([x, y], dtype=np.float64)


def point_at(x: float, y: float) -> NDArray[np.float64]:
    """Create a 2D point."""
    return np.array([x, y], dtype=np.float64)


def origin() -> NDArray[np.float64]:
    """The origin of the plane."""
    return np.zeros(2, dtype=np.float64)


unit_x = vec(1.0, 0.0)
unit_y = vec(0.0, 1.0)
unit_x.setflags(write=False)
unit_y.setflags(write=False)


def as_vector(value: Sequence[float] | NDArray[np.float64]) -> NDArray[np.float64]:
    """Coerce a sequence of two numbers to a vector."""
    arr = np.asarray(value, dtype=np.float64)
    if arr.shape != (2,):
        raise ValueError(f"Expected a 2D vector, got shape {arr.shape}")
    return arr


def normalized(v: NDArray[np.float64]) -> NDArray[np.float64]:
    """Return the unit vector in the direction of v.

    The zero vector has no direction; normalizing it yields nan components.
    """
    v = np.asarray(v, dtype=np.float64)
    return v / np.linalg.norm(v)


def from_direction(angle: Angle) -> NDArray[np.float64]:
    """Unit vector pointing at the given angle (counterclockwise from +x)."""
    theta = to_radians(angle)
    return vec(math.cos(theta), math.sin(theta))


def direction(v: NDArray[np.float64]) -> Rad:
    """Angle of v measured counterclockwise from the positive x-axis."""
    return Rad(math.atan2(v[1], v[0]))
