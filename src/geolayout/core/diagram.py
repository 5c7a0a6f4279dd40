"""Diagram class: content plus envelope in a local frame."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from .envelope import Envelope
from .protocols import Boundable
from .transform import Transform2D, translation
from .vector import as_vector


@dataclass(frozen=True, eq=False)
class Primitive:
    """A single piece of visible content.

    Attributes:
        kind: Free-form label of the shape ("rect", "circle", ...)
        vertices: Nx2 array of vertex positions
        closed: Whether the last vertex connects back to the first
    """

    kind: str
    vertices: NDArray[np.float64]
    closed: bool = True

    def __post_init__(self) -> None:
        vertices = np.array(self.vertices, dtype=np.float64).reshape(-1, 2)
        vertices.setflags(write=False)
        object.__setattr__(self, "vertices", vertices)

    def apply(self, t: Transform2D) -> Primitive:
        return Primitive(self.kind, t.apply_points(self.vertices), self.closed)


@dataclass(frozen=True, eq=False)
class Diagram:
    """A transformable, boundable and combinable graphical object.

    The local origin is the origin of the diagram's own coordinate frame.
    Moving the origin therefore means translating the content the other way,
    and two diagrams combined with :meth:`combine` share one origin.

    Example:
        row = square(1).combine(circle(0.5).apply(translation_x(2)))
    """

    primitives: tuple[Primitive, ...] = ()
    envelope: Envelope = field(default_factory=Envelope.empty)

    @classmethod
    def empty(cls) -> Diagram:
        """The neutral element of :meth:`combine`."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.primitives and self.envelope.is_empty

    def apply(self, t: Transform2D) -> Diagram:
        return Diagram(
            tuple(p.apply(t) for p in self.primitives),
            self.envelope.transform(t),
        )

    def extent(self, v: NDArray[np.float64]) -> float:
        return self.envelope.extent(v)

    def origin(self) -> NDArray[np.float64]:
        return np.zeros(2, dtype=np.float64)

    def combine(self, other: Diagram) -> Diagram:
        """Overlay self on top of other (later primitives draw over earlier)."""
        return Diagram(
            other.primitives + self.primitives,
            self.envelope.union(other.envelope),
        )

    def with_envelope(self, other: Boundable) -> Diagram:
        """Keep this content but take the envelope of other."""
        if isinstance(other, Diagram):
            return Diagram(self.primitives, other.envelope)

        anchor = np.array(other.origin(), dtype=np.float64)

        def support(w: NDArray[np.float64]) -> float:
            return other.extent(w) * float(np.linalg.norm(w)) + float(anchor @ w)

        return Diagram(self.primitives, Envelope.from_support(support))

    def move_origin_to(self, p: NDArray[np.float64]) -> Diagram:
        return self.apply(translation(-as_vector(p)))

    def translate_to(self, p: NDArray[np.float64]) -> Diagram:
        """Translate so the local origin lands on p."""
        return self.apply(translation(as_vector(p)))

    def bounding_box(self) -> tuple[NDArray[np.float64], NDArray[np.float64]] | None:
        return self.envelope.bounding_box()

    def __repr__(self) -> str:
        kinds = ", ".join(p.kind for p in self.primitives)
        bounds = "empty" if self.envelope.is_empty else "bounded"
        return f"Diagram([{kinds}], {bounds})"
