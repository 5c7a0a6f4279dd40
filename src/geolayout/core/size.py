"""Width, height and axis ranges derived from an object's envelope."""

from __future__ import annotations

from .protocols import Boundable
from .vector import unit_x, unit_y


def extent_x(obj: Boundable) -> tuple[float, float]:
    """(left, right) x-range of obj relative to its local origin."""
    return -obj.extent(-unit_x), obj.extent(unit_x)


def extent_y(obj: Boundable) -> tuple[float, float]:
    """(bottom, top) y-range of obj relative to its local origin."""
    return -obj.extent(-unit_y), obj.extent(unit_y)


def width(obj: Boundable) -> float:
    lo, hi = extent_x(obj)
    return float(hi - lo)


def height(obj: Boundable) -> float:
    lo, hi = extent_y(obj)
    return float(hi - lo)


def size(obj: Boundable) -> tuple[float, float]:
    """(width, height) of obj."""
    return width(obj), height(obj)
