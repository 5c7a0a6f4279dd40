"""Capability protocols consumed by the transform wrappers and layout combinators.

Any class with the right methods satisfies these protocols; Diagram is the
implementation shipped with the package.
"""

from __future__ import annotations

from typing import Protocol, Self, runtime_checkable

import numpy as np
from numpy.typing import NDArray

from .transform import Transform2D


@runtime_checkable
class Transformable(Protocol):
    """Protocol for objects that can be mapped by a Transform2D."""

    def apply(self, t: Transform2D) -> Self:
        """Return a transformed copy."""
        ...


@runtime_checkable
class Boundable(Protocol):
    """Protocol for objects with an envelope and a local origin."""

    def extent(self, v: NDArray[np.float64]) -> float:
        """Distance from the local origin to the object's edge along v."""
        ...

    def origin(self) -> NDArray[np.float64]:
        """The local origin, used as the placement anchor."""
        ...

    def with_envelope(self, other: Boundable) -> Self:
        """Return a copy whose envelope is replaced by other's."""
        ...


@runtime_checkable
class Combinable(Protocol):
    """Protocol for objects with an associative merge."""

    def combine(self, other: Self) -> Self:
        """Overlay self on top of other."""
        ...


@runtime_checkable
class Layoutable(Transformable, Boundable, Combinable, Protocol):
    """Everything the layout combinators need."""

    def move_origin_to(self, p: NDArray[np.float64]) -> Self:
        """Move the local origin to p without moving the content visually."""
        ...
