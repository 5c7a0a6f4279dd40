"""Anchor point system for moving an object's local origin within its bounds."""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from ..core.protocols import Layoutable
from ..core.size import extent_x, extent_y

L = TypeVar("L", bound=Layoutable)


class Anchor(Enum):
    """Named anchor points within an object's bounding box.

    Anchors are defined in normalized coordinates (0-1) where:
    - X: 0 = left, 1 = right
    - Y: 0 = bottom, 1 = top
    An axis given as None keeps the current origin coordinate on that axis.
    """
    # Corners
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"

    # Edge centers
    BOTTOM_CENTER = "bottom_center"
    TOP_CENTER = "top_center"
    LEFT_CENTER = "left_center"
    RIGHT_CENTER = "right_center"
    CENTER = "center"

    # Single-axis anchors
    LEFT = "left"
    RIGHT = "right"
    BOTTOM = "bottom"
    TOP = "top"
    CENTER_X = "center_x"
    CENTER_Y = "center_y"


# Mapping from anchor to normalized coordinates (x, y)
# X: 0=left, 1=right | Y: 0=bottom, 1=top | None = unchanged
ANCHOR_POSITIONS: dict[Anchor, tuple[float | None, float | None]] = {
    Anchor.BOTTOM_LEFT: (0.0, 0.0),
    Anchor.BOTTOM_RIGHT: (1.0, 0.0),
    Anchor.TOP_LEFT: (0.0, 1.0),
    Anchor.TOP_RIGHT: (1.0, 1.0),

    Anchor.BOTTOM_CENTER: (0.5, 0.0),
    Anchor.TOP_CENTER: (0.5, 1.0),
    Anchor.LEFT_CENTER: (0.0, 0.5),
    Anchor.RIGHT_CENTER: (1.0, 0.5),
    Anchor.CENTER: (0.5, 0.5),

    Anchor.LEFT: (0.0, None),
    Anchor.RIGHT: (1.0, None),
    Anchor.BOTTOM: (None, 0.0),
    Anchor.TOP: (None, 1.0),
    Anchor.CENTER_X: (0.5, None),
    Anchor.CENTER_Y: (None, 0.5),
}


def _lerp(lo: float, hi: float, t: float | None, keep: float) -> float:
    if t is None:
        return keep
    return lo + t * (hi - lo)


def resolve_anchor(anchor: Anchor | str, obj: Layoutable) -> NDArray[np.float64]:
    """Convert an anchor to a point on obj's bounding box.

    Args:
        anchor: The anchor point (enum or string name)
        obj: The object whose bounds are used

    Returns:
        Coordinates [x, y] in obj's local frame
    """
    if isinstance(anchor, str):
        anchor = Anchor(anchor)

    norm_x, norm_y = ANCHOR_POSITIONS[anchor]
    origin = obj.origin()
    left, right = extent_x(obj)
    bottom, top = extent_y(obj)

    return np.array([
        _lerp(origin[0] + left, origin[0] + right, norm_x, origin[0]),
        _lerp(origin[1] + bottom, origin[1] + top, norm_y, origin[1]),
    ], dtype=np.float64)


def align(anchor: Anchor | str, obj: L) -> L:
    """Move obj's local origin to the given anchor of its bounding box."""
    return obj.move_origin_to(resolve_anchor(anchor, obj))


def align_l(obj: L) -> L:
    return align(Anchor.LEFT, obj)


def align_r(obj: L) -> L:
    return align(Anchor.RIGHT, obj)


def align_t(obj: L) -> L:
    return align(Anchor.TOP, obj)


def align_b(obj: L) -> L:
    return align(Anchor.BOTTOM, obj)


def align_tl(obj: L) -> L:
    return align(Anchor.TOP_LEFT, obj)


def align_tr(obj: L) -> L:
    return align(Anchor.TOP_RIGHT, obj)


def align_bl(obj: L) -> L:
    return align(Anchor.BOTTOM_LEFT, obj)


def align_br(obj: L) -> L:
    return align(Anchor.BOTTOM_RIGHT, obj)


def center_x(obj: L) -> L:
    return align(Anchor.CENTER_X, obj)


def center_y(obj: L) -> L:
    return align(Anchor.CENTER_Y, obj)


def center_xy(obj: L) -> L:
    return align(Anchor.CENTER, obj)
