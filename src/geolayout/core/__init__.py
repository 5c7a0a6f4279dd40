"""Core transformation algebra and object model."""

from .angle import TAU, Deg, Rad, Turn, parse_angle, to_radians
from .diagram import Diagram, Primitive
from .envelope import Envelope
from .protocols import Boundable, Combinable, Layoutable, Transformable
from .transform import Transform2D, avg_scale, compose, conjugate, on_basis
from . import operations, size, transform, vector

__all__ = [
    "TAU",
    "Deg",
    "Rad",
    "Turn",
    "parse_angle",
    "to_radians",
    "Diagram",
    "Primitive",
    "Envelope",
    "Boundable",
    "Combinable",
    "Layoutable",
    "Transformable",
    "Transform2D",
    "avg_scale",
    "compose",
    "conjugate",
    "on_basis",
    "operations",
    "size",
    "transform",
    "vector",
]
