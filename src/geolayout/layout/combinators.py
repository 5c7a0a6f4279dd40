"""Combinators that place objects relative to each other using their envelopes.

Placement never uses absolute coordinates. ``beside(v, a, b)`` slides b
along v until its envelope just touches a's, and the row/column/padding
helpers are built from that single primitive:

    hcat([square(1), strut_x(5), square(1)])     # total width 7
    above(title, vcat_(CatOpts(sep=0.5), rows))  # title over spaced rows

The result of every binary combinator keeps the local origin of its first
argument.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import reduce
from typing import Callable, Sequence, TypeVar

import numpy as np
from numpy.typing import NDArray

from ..core.angle import Angle
from ..core.diagram import Diagram
from ..core.envelope import Envelope
from ..core.operations import scale_x, scale_y, scale, transform
from ..core.protocols import Layoutable
from ..core.transform import translation
from ..core.vector import as_vector, from_direction, normalized, unit_x, unit_y
from ..log import logger
from .anchors import align_bl

L = TypeVar("L", bound=Layoutable)


class CatMethod(Enum):
    """How CatOpts.sep is measured between successive objects."""

    # Gap of `sep` between touching envelopes
    SEPARATION = "separation"
    # Successive local origins exactly `sep` apart, envelopes ignored
    DISTANCE = "distance"


@dataclass(frozen=True)
class CatOpts:
    """Spacing options for cat/hcat_/vcat_.

    Attributes:
        sep: Separation distance (see method)
        method: How sep is measured
    """

    sep: float = 0.0
    method: CatMethod = CatMethod.SEPARATION


# Binary combinators --------------------------------------------------------


def juxtapose(v: NDArray[np.float64], a: L, b: L) -> L:
    """Move b along v so that its envelope touches a's. a is not included.

    b's local origin ends up on the line through a's origin in direction v,
    at distance ``a.extent(v) + b.extent(-v)``.
    """
    u = normalized(as_vector(v))
    target = a.origin() + u * (a.extent(u) + b.extent(-u))
    return transform(translation(target - b.origin()), b)


def beside(v: NDArray[np.float64], a: L, b: L) -> L:
    """Place b next to a in direction v, with touching envelopes.

    The result keeps a's local origin. beside is associative and has the
    empty diagram as a right identity. It is not a left identity: an empty
    a has zero extent, so b is still shifted by its own extent.
    """
    return a.combine(juxtapose(v, a, b))


def above(a: L, b: L) -> L:
    """Place a above b."""
    return beside(-unit_y, a, b)


def beside_right(a: L, b: L) -> L:
    """Place a to the left of b."""
    return beside(unit_x, a, b)


def at_angle(angle: Angle, a: L, b: L) -> L:
    """Place b next to a along the given angle."""
    return beside(from_direction(angle), a, b)


# n-ary combinators ---------------------------------------------------------


def cat(
    v: NDArray[np.float64],
    objs: Sequence[L],
    opts: CatOpts | None = None,
) -> L | Diagram:
    """Lay out objs one after another in direction v.

    The fold runs left to right; the first object keeps its position and
    every following one is placed relative to the running composite.
    An empty sequence yields an empty Diagram.
    """
    opts = opts or CatOpts()
    objs = list(objs)
    if not objs:
        return Diagram.empty()

    u = normalized(as_vector(v))
    logger.debug("cat of %d objects, method=%s, sep=%g", len(objs), opts.method.value, opts.sep)

    if opts.method is CatMethod.DISTANCE:
        first = objs[0]
        placed = [
            transform(translation(first.origin() + i * opts.sep * u - obj.origin()), obj)
            for i, obj in enumerate(objs[1:], start=1)
        ]
        return reduce(lambda acc, obj: acc.combine(obj), placed, first)

    gap = translation(opts.sep * u)

    def step(acc: L, obj: L) -> L:
        return acc.combine(transform(gap, juxtapose(u, acc, obj)))

    return reduce(step, objs[1:], objs[0])


def hcat(objs: Sequence[L]) -> L | Diagram:
    """Lay out objs in a row, left to right, with touching envelopes."""
    return hcat_(CatOpts(), objs)


def hcat_(opts: CatOpts, objs: Sequence[L]) -> L | Diagram:
    """hcat with explicit spacing options."""
    return cat(unit_x, objs, opts)


def vcat(objs: Sequence[L]) -> L | Diagram:
    """Lay out objs in a column, top to bottom, with touching envelopes."""
    return vcat_(CatOpts(), objs)


def vcat_(opts: CatOpts, objs: Sequence[L]) -> L | Diagram:
    """vcat with explicit spacing options."""
    return cat(-unit_y, objs, opts)


# Spacing and bounds --------------------------------------------------------


def strut(w: float, h: float) -> Diagram:
    """An invisible w x h rectangle centred on the local origin."""
    hx, hy = abs(w) / 2, abs(h) / 2
    corners = np.array([[-hx, -hy], [hx, -hy], [hx, hy], [-hx, hy]], dtype=np.float64)
    return Diagram(envelope=Envelope.from_points(corners))


def strut_x(d: float) -> Diagram:
    """Invisible object of width |d| and height 0."""
    return strut(d, 0.0)


def strut_y(d: float) -> Diagram:
    """Invisible object of height |d| and width 0."""
    return strut(0.0, d)


def pad_x(s: float, obj: L) -> L:
    """Scale obj's envelope horizontally by s about its local origin.

    The content is unchanged; 0 < s < 1 shrinks the envelope. An origin that
    is not centred horizontally pads unevenly (use center_x first if needed).
    """
    return obj.with_envelope(_about_origin(obj, scale_x, s))


def pad_y(s: float, obj: L) -> L:
    """Scale obj's envelope vertically by s about its local origin."""
    return obj.with_envelope(_about_origin(obj, scale_y, s))


def pad(s: float, obj: L) -> L:
    """Scale obj's envelope uniformly by s about its local origin."""
    return obj.with_envelope(_about_origin(obj, scale, s))


def _about_origin(obj: L, op: Callable[[float, L], L], s: float) -> L:
    o = obj.origin()
    moved = transform(translation(-o), obj)
    return transform(translation(o), op(s, moved))


def view(
    p: NDArray[np.float64],
    extent: tuple[float, float] | NDArray[np.float64],
    obj: L,
) -> L:
    """Set obj's envelope to the rectangle with lower-left corner p and size extent.

    Useful for choosing which part of an object is shown when rendered; the
    content itself is untouched.
    """
    w, h = as_vector(extent)
    window = align_bl(strut(w, h)).translate_to(as_vector(p))
    return obj.with_envelope(window)
