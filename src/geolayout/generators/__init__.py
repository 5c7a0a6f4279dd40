"""Shape generators."""

from .base import Generator, ShapeGenerator
from .primitives import (
    PRIMITIVE_REGISTRY,
    CircleGenerator,
    RectGenerator,
    RegularPolygonGenerator,
    RuleGenerator,
    circle,
    hrule,
    rect,
    regular_polygon,
    square,
    vrule,
)

__all__ = [
    "Generator",
    "ShapeGenerator",
    "PRIMITIVE_REGISTRY",
    "CircleGenerator",
    "RectGenerator",
    "RegularPolygonGenerator",
    "RuleGenerator",
    "circle",
    "hrule",
    "rect",
    "regular_polygon",
    "square",
    "vrule",
]
