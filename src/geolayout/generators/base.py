"""Base classes and protocols for shape generators."""

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from ..core.diagram import Diagram


@runtime_checkable
class Generator(Protocol):
    """Protocol for shape generators.

    Any class with a generate() method returning a Diagram satisfies this protocol.
    """

    def generate(self) -> Diagram:
        """Generate and return a diagram."""
        ...


class ShapeGenerator(ABC):
    """Abstract base class for primitive shape generators.

    Generated shapes are centred on their local origin. Subclasses implement
    generate() to create specific geometry.
    """

    @abstractmethod
    def generate(self) -> Diagram:
        """Generate and return the shape.

        Returns:
            A Diagram holding the shape's outline and its envelope.
        """
        pass
