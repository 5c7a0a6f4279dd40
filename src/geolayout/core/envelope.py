"""Envelopes: direction-indexed support functions.

An envelope answers "how far does this object reach in direction w?" via its
support function ``h(w) = max(p . w for p in S)``. The support function is
positively homogeneous in w, which makes it exact under any affine map:

    h_{T(S)}(w) = h_S(L^T w) + b . w      for T(p) = L p + b

so transformed, merged and overridden envelopes never need to be
approximated by bounding boxes.

An envelope is stored flat, as the union of three kinds of parts:

- hull points, transformed directly,
- ellipses ``c + M . disk``, with support ``c . w + |M^T w|``,
- arbitrary support functions, each paired with the Transform2D applied
  to it so far.

Transforming maps every part and union concatenates parts, so neither ever
nests a support function inside another.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

import numpy as np
from numpy.typing import NDArray

from .transform import Transform2D, identity
from .vector import as_vector, normalized, unit_x, unit_y

SupportFunction = Callable[[NDArray[np.float64]], float]


def _frozen(values: NDArray[np.float64], shape: tuple[int, ...]) -> NDArray[np.float64]:
    values = np.array(values, dtype=np.float64).reshape(shape)
    values.setflags(write=False)
    return values


@dataclass(frozen=True, eq=False)
class Envelope:
    """Support function of a point set. With no parts it is the empty envelope.

    Attributes:
        points: Nx2 hull points
        centers: Kx2 ellipse centres
        shapes: Kx2x2 linear maps taking the unit disk to each ellipse
        supports: (support function, transform) pairs
    """

    points: NDArray[np.float64] = field(default_factory=lambda: np.empty((0, 2)))
    centers: NDArray[np.float64] = field(default_factory=lambda: np.empty((0, 2)))
    shapes: NDArray[np.float64] = field(default_factory=lambda: np.empty((0, 2, 2)))
    supports: tuple[tuple[SupportFunction, Transform2D], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", _frozen(self.points, (-1, 2)))
        object.__setattr__(self, "centers", _frozen(self.centers, (-1, 2)))
        object.__setattr__(self, "shapes", _frozen(self.shapes, (-1, 2, 2)))
        if len(self.centers) != len(self.shapes):
            raise ValueError(
                f"Envelope needs one shape per ellipse centre, got {len(self.centers)} and {len(self.shapes)}"
            )

    @classmethod
    def empty(cls) -> Envelope:
        return cls()

    @classmethod
    def from_points(cls, points: NDArray[np.float64]) -> Envelope:
        """Envelope of the convex hull of a set of points."""
        return cls(points=points)

    @classmethod
    def from_circle(cls, center: NDArray[np.float64], radius: float) -> Envelope:
        r = abs(float(radius))
        return cls(centers=as_vector(center), shapes=r * np.eye(2))

    @classmethod
    def from_support(cls, support: SupportFunction) -> Envelope:
        """Wrap a positively homogeneous support function."""
        return cls(supports=((support, identity()),))

    @property
    def is_empty(self) -> bool:
        return not len(self.points) and not len(self.centers) and not self.supports

    def transform(self, t: Transform2D) -> Envelope:
        if self.is_empty:
            return self
        return Envelope(
            t.apply_points(self.points) if len(self.points) else self.points,
            t.apply_points(self.centers) if len(self.centers) else self.centers,
            t.linear @ self.shapes,
            tuple((h, t @ g) for h, g in self.supports),
        )

    def union(self, other: Envelope) -> Envelope:
        """Envelope of both point sets; empty is the identity."""
        if self.is_empty:
            return other
        if other.is_empty:
            return self
        return Envelope(
            np.concatenate([self.points, other.points]),
            np.concatenate([self.centers, other.centers]),
            np.concatenate([self.shapes, other.shapes]),
            self.supports + other.supports,
        )

    def support(self, w: NDArray[np.float64]) -> float:
        """max(p . w) over the enveloped set. Must not be called when empty."""
        values = []
        if len(self.points):
            values.append(np.max(self.points @ w))
        if len(self.centers):
            reach = np.linalg.norm(np.einsum("kij,i->kj", self.shapes, w), axis=1)
            values.append(np.max(self.centers @ w + reach))
        for h, g in self.supports:
            values.append(h(g.linear.T @ w) + g.translation @ w)
        return float(max(values))

    def extent(self, v: NDArray[np.float64]) -> float:
        """Distance from the origin to the supporting line in direction v.

        Only the direction of v matters. The empty envelope reports 0.
        """
        if self.is_empty:
            return 0.0
        return self.support(normalized(v))

    def bounding_box(self) -> tuple[NDArray[np.float64], NDArray[np.float64]] | None:
        """Axis-aligned (lower_left, upper_right) corners, or None if empty."""
        if self.is_empty:
            return None
        h = self.support
        lower = np.array([-h(-unit_x), -h(-unit_y)], dtype=np.float64)
        upper = np.array([h(unit_x), h(unit_y)], dtype=np.float64)
        return lower, upper
