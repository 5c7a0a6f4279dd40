"""Primitive shape generators."""

from dataclasses import dataclass

import numpy as np

from ..core.diagram import Diagram, Primitive
from ..core.envelope import Envelope
from .base import ShapeGenerator


@dataclass
class RectGenerator(ShapeGenerator):
    """Generates an axis-aligned rectangle.

    Attributes:
        width: Extent along the X axis
        height: Extent along the Y axis
    """

    width: float = 1.0
    height: float = 1.0

    def generate(self) -> Diagram:
        """Generate a rectangle centered at the origin."""
        hx, hy = self.width / 2, self.height / 2

        # CCW from bottom-left
        corners = np.array(
            [[-hx, -hy], [hx, -hy], [hx, hy], [-hx, hy]],
            dtype=np.float64,
        )
        return Diagram(
            (Primitive("rect", corners, closed=True),),
            Envelope.from_points(corners),
        )


@dataclass
class CircleGenerator(ShapeGenerator):
    """Generates a circle.

    The outline is sampled into line segments, but the envelope is the
    exact circle, so layout never sees the sampling.

    Attributes:
        radius: Radius of the circle
        segments: Number of outline segments
    """

    radius: float = 0.5
    segments: int = 64

    def generate(self) -> Diagram:
        theta = np.linspace(0.0, 2 * np.pi, self.segments, endpoint=False)
        outline = self.radius * np.column_stack([np.cos(theta), np.sin(theta)])
        return Diagram(
            (Primitive("circle", outline, closed=True),),
            Envelope.from_circle(np.zeros(2), self.radius),
        )


@dataclass
class RegularPolygonGenerator(ShapeGenerator):
    """Generates a regular polygon with a vertex pointing straight down.

    Attributes:
        sides: Number of sides (at least 3)
        radius: Distance from the center to each vertex
    """

    sides: int = 6
    radius: float = 0.5

    def generate(self) -> Diagram:
        if self.sides < 3:
            raise ValueError(f"A polygon needs at least 3 sides, got {self.sides}")

        # Start at -90 degrees so the shape rests on a vertex
        theta = -np.pi / 2 + 2 * np.pi * np.arange(self.sides) / self.sides
        vertices = self.radius * np.column_stack([np.cos(theta), np.sin(theta)])
        return Diagram(
            (Primitive("polygon", vertices, closed=True),),
            Envelope.from_points(vertices),
        )


@dataclass
class RuleGenerator(ShapeGenerator):
    """Generates a centred line segment with zero thickness.

    Attributes:
        length: Length of the rule
        vertical: Vertical (vrule) instead of horizontal (hrule)
    """

    length: float = 1.0
    vertical: bool = False

    def generate(self) -> Diagram:
        half = self.length / 2
        if self.vertical:
            ends = np.array([[0.0, -half], [0.0, half]], dtype=np.float64)
        else:
            ends = np.array([[-half, 0.0], [half, 0.0]], dtype=np.float64)
        return Diagram(
            (Primitive("vrule" if self.vertical else "hrule", ends, closed=False),),
            Envelope.from_points(ends),
        )


def rect(width: float, height: float) -> Diagram:
    return RectGenerator(width=width, height=height).generate()


def square(side: float) -> Diagram:
    return RectGenerator(width=side, height=side).generate()


def circle(radius: float) -> Diagram:
    return CircleGenerator(radius=radius).generate()


def regular_polygon(sides: int, radius: float) -> Diagram:
    return RegularPolygonGenerator(sides=sides, radius=radius).generate()


def hrule(length: float) -> Diagram:
    return RuleGenerator(length=length).generate()


def vrule(length: float) -> Diagram:
    return RuleGenerator(length=length, vertical=True).generate()


# Registry of available primitive generators
PRIMITIVE_REGISTRY: dict[str, type[ShapeGenerator]] = {
    "rect": RectGenerator,
    "circle": CircleGenerator,
    "polygon": RegularPolygonGenerator,
    "rule": RuleGenerator,
}
