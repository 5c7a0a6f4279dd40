"""Apply named transformations directly to objects.

Each function builds the matching Transform2D and hands it to
:func:`transform`, which works on anything implementing
:class:`~geolayout.core.protocols.Transformable` as well as on raw points
(numpy arrays of shape (2,) or (N, 2)).

Arguments follow the pattern ``op(parameters..., obj)`` so that partial
application reads naturally, e.g. ``functools.partial(rotate, Deg(90))``.
"""

from __future__ import annotations

from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from .angle import Angle, Turn
from .size import height, width
from .transform import (
    Transform2D,
    reflection_about,
    reflection_x,
    reflection_y,
    rotation,
    rotation_about,
    scaling,
    scaling_x,
    scaling_y,
    shearing_x,
    shearing_y,
    translation,
    translation_x,
    translation_y,
)

T = TypeVar("T")


def transform(t: Transform2D, obj: T) -> T:
    """Apply t to obj."""
    if isinstance(obj, np.ndarray):
        if obj.ndim == 1:
            return t.apply_point(obj)
        return t.apply_points(obj)
    return obj.apply(t)


# Rotation


def rotate(angle: Angle, obj: T) -> T:
    """Rotate counterclockwise about the local origin.

    ``rotate(Turn(0.25), d)``, ``rotate(Rad(TAU / 4), d)`` and
    ``rotate(Deg(90), d)`` are the same quarter turn.
    """
    return transform(rotation(angle), obj)


def rotate_by(turns: float, obj: T) -> T:
    """Like rotate, but the angle is always a fraction of a turn."""
    return transform(rotation(Turn(turns)), obj)


def rotate_about(p: NDArray[np.float64], angle: Angle, obj: T) -> T:
    return transform(rotation_about(p, angle), obj)


# Scaling


def scale_x(c: float, obj: T) -> T:
    return transform(scaling_x(c), obj)


def scale_y(c: float, obj: T) -> T:
    return transform(scaling_y(c), obj)


def scale(c: float, obj: T) -> T:
    return transform(scaling(c), obj)


def scale_to_x(w: float, obj: T) -> T:
    """Scale horizontally so the width becomes w.

    obj must have a nonzero width (not e.g. a vrule).
    """
    return scale_x(w / width(obj), obj)


def scale_to_y(h: float, obj: T) -> T:
    """Scale vertically so the height becomes h.

    obj must have a nonzero height (not e.g. an hrule).
    """
    return scale_y(h / height(obj), obj)


def scale_u_to_x(w: float, obj: T) -> T:
    """Scale uniformly so the width becomes w."""
    return scale(w / width(obj), obj)


def scale_u_to_y(h: float, obj: T) -> T:
    """Scale uniformly so the height becomes h."""
    return scale(h / height(obj), obj)


# Translation


def translate(v: NDArray[np.float64], obj: T) -> T:
    return transform(translation(v), obj)


def translate_x(x: float, obj: T) -> T:
    return transform(translation_x(x), obj)


def translate_y(y: float, obj: T) -> T:
    return transform(translation_y(y), obj)


# Reflection


def reflect_x(obj: T) -> T:
    """Flip left to right."""
    return transform(reflection_x(), obj)


def reflect_y(obj: T) -> T:
    """Flip top to bottom."""
    return transform(reflection_y(), obj)


def reflect_about(p: NDArray[np.float64], v: NDArray[np.float64], obj: T) -> T:
    """Reflect in the line through p with direction v."""
    return transform(reflection_about(p, v), obj)


# Shears


def shear_x(d: float, obj: T) -> T:
    return transform(shearing_x(d), obj)


def shear_y(d: float, obj: T) -> T:
    return transform(shearing_y(d), obj)
