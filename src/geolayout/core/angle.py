"""Angle units: turns, radians and degrees.

Every rotation-like constructor funnels its argument through
:func:`to_radians`, so callers may pass whichever unit reads best:

    rotation(Turn(0.25)) == rotation(Rad(TAU / 4)) == rotation(Deg(90))

A bare number is taken to be radians.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

TAU = 2 * math.pi


@dataclass(frozen=True)
class Turn:
    """Fraction of a full revolution."""

    value: float

    def to_radians(self) -> float:
        return self.value * TAU


@dataclass(frozen=True)
class Rad:
    """Angle in radians."""

    value: float

    def to_radians(self) -> float:
        return float(self.value)


@dataclass(frozen=True)
class Deg:
    """Angle in degrees."""

    value: float

    def to_radians(self) -> float:
        return math.radians(self.value)


Angle = Turn | Rad | Deg | float | int


def to_radians(angle: Angle) -> float:
    """Normalize any supported angle representation to radians."""
    if isinstance(angle, (Turn, Rad, Deg)):
        return angle.to_radians()
    return float(angle)


_ANGLE_PATTERN = re.compile(r"^\s*([-+]?[0-9]*\.?[0-9]+(?:[eE][-+]?[0-9]+)?)\s*([a-z]*)\s*$")

_UNITS = {
    "": Deg,
    "deg": Deg,
    "rad": Rad,
    "turn": Turn,
}


def parse_angle(value: float | int | str) -> Turn | Rad | Deg:
    """Parse an angle from configuration data.

    Numbers are degrees (matching the rotation fields of layout files).
    Strings may carry a unit suffix: ``"90deg"``, ``"1.5rad"``, ``"0.25turn"``.

    Raises:
        ValueError: If the string cannot be parsed or the unit is unknown
    """
    if isinstance(value, (int, float)):
        return Deg(float(value))

    match = _ANGLE_PATTERN.match(str(value))
    if match is None:
        raise ValueError(f"Cannot parse angle: {value!r}")

    number, unit = match.groups()
    if unit not in _UNITS:
        raise ValueError(f"Unknown angle unit '{unit}' in {value!r}")
    return _UNITS[unit](float(number))
