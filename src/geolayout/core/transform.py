"""Transform2D: invertible affine transformations of the plane."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Self

import numpy as np
from numpy.typing import NDArray

from .angle import Angle, Rad, to_radians
from .vector import as_vector, direction


def _frozen(matrix: NDArray[np.float64]) -> NDArray[np.float64]:
    matrix = np.array(matrix, dtype=np.float64)
    matrix.setflags(write=False)
    return matrix


@dataclass(frozen=True, eq=False)
class Transform2D:
    """An affine map of the plane together with its inverse.

    Both directions are stored as 3x3 homogeneous matrices, so a transform is
    invertible by construction and inverting never touches numpy.linalg.
    The one exception is scaling by zero, which callers must avoid.

    Composition uses ``@`` and matches function composition:
    ``(t1 @ t2).apply_point(p) == t1.apply_point(t2.apply_point(p))``.
    """

    matrix: NDArray[np.float64] = field(
        default_factory=lambda: np.eye(3, dtype=np.float64)
    )
    inverse_matrix: NDArray[np.float64] = field(
        default_factory=lambda: np.eye(3, dtype=np.float64)
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "matrix", _frozen(self.matrix))
        object.__setattr__(self, "inverse_matrix", _frozen(self.inverse_matrix))

    @classmethod
    def from_linear(
        cls,
        linear: NDArray[np.float64],
        linear_inverse: NDArray[np.float64],
    ) -> Self:
        """Build a transform with no translation from a 2x2 matrix and its inverse."""
        m = np.eye(3, dtype=np.float64)
        m[:2, :2] = linear
        m_inv = np.eye(3, dtype=np.float64)
        m_inv[:2, :2] = linear_inverse
        return cls(m, m_inv)

    @classmethod
    def from_matrix(cls, matrix: NDArray[np.float64]) -> Self:
        """Create a Transform2D from a 3x3 homogeneous matrix.

        The inverse is computed with numpy; a singular matrix raises
        numpy.linalg.LinAlgError.
        """
        matrix = np.asarray(matrix, dtype=np.float64)
        return cls(matrix, np.linalg.inv(matrix))

    def to_matrix(self) -> NDArray[np.float64]:
        """Return a writable copy of the 3x3 homogeneous matrix."""
        return self.matrix.copy()

    @property
    def linear(self) -> NDArray[np.float64]:
        """The 2x2 linear part."""
        return self.matrix[:2, :2]

    @property
    def translation(self) -> NDArray[np.float64]:
        """The translation vector."""
        return self.matrix[:2, 2]

    def inverse(self) -> Transform2D:
        return Transform2D(self.inverse_matrix, self.matrix)

    def apply_point(self, point: NDArray[np.float64]) -> NDArray[np.float64]:
        """Map a point (translation applies)."""
        p = np.asarray(point, dtype=np.float64)
        return self.linear @ p + self.translation

    def apply_vector(self, v: NDArray[np.float64]) -> NDArray[np.float64]:
        """Map a free vector (translation does not apply)."""
        return self.linear @ np.asarray(v, dtype=np.float64)

    def apply_points(self, points: NDArray[np.float64]) -> NDArray[np.float64]:
        """Map an (N, 2) array of points."""
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        return pts @ self.linear.T + self.translation

    def isclose(self, other: Transform2D, atol: float = 1e-9) -> bool:
        """Whether two transforms have the same matrix within tolerance."""
        return bool(np.allclose(self.matrix, other.matrix, atol=atol))

    @staticmethod
    def identity() -> Transform2D:
        """Create an identity transform."""
        return Transform2D()

    def __matmul__(self, other: Transform2D) -> Transform2D:
        """Compose: apply ``other`` first, then ``self``."""
        if not isinstance(other, Transform2D):
            return NotImplemented
        return Transform2D(
            self.matrix @ other.matrix,
            other.inverse_matrix @ self.inverse_matrix,
        )

    def __repr__(self) -> str:
        (a, c, e), (b, d, f) = self.matrix[:2].tolist()
        return f"Transform2D(a={a:g}, b={b:g}, c={c:g}, d={d:g}, e={e:g}, f={f:g})"


def identity() -> Transform2D:
    return Transform2D.identity()


def compose(*transforms: Transform2D) -> Transform2D:
    """Compose transforms right-to-left; ``compose(a, b, c) == a @ b @ c``."""
    result = Transform2D.identity()
    for t in transforms:
        result = result @ t
    return result


def conjugate(g: Transform2D, t: Transform2D) -> Transform2D:
    """Perform ``t`` as seen through the frame ``g`` maps into.

    Equals ``g.inverse() @ t @ g``: move into g's frame, apply t, move back.
    """
    return g.inverse() @ t @ g


# Rotation ------------------------------------------------------------------


def _rotation_matrix(theta: float) -> NDArray[np.float64]:
    cos_t, sin_t = math.cos(theta), math.sin(theta)
    return np.array([[cos_t, -sin_t], [sin_t, cos_t]], dtype=np.float64)


def rotation(angle: Angle) -> Transform2D:
    """Counterclockwise rotation about the origin."""
    theta = to_radians(angle)
    return Transform2D.from_linear(_rotation_matrix(theta), _rotation_matrix(-theta))


def rotation_about(p: NDArray[np.float64], angle: Angle) -> Transform2D:
    """Rotation about the point p instead of the origin."""
    return conjugate(translation(-as_vector(p)), rotation(angle))


# Scaling -------------------------------------------------------------------


def _reciprocal(c: float) -> np.float64:
    # Zero scale leaves an inf inverse rather than raising.
    with np.errstate(divide="ignore"):
        return np.float64(1.0) / np.float64(c)


def scaling_x(c: float) -> Transform2D:
    """Scale by c along the x-axis. c must be nonzero."""
    return Transform2D.from_linear(np.diag([c, 1.0]), np.diag([_reciprocal(c), 1.0]))


def scaling_y(c: float) -> Transform2D:
    """Scale by c along the y-axis. c must be nonzero."""
    return Transform2D.from_linear(np.diag([1.0, c]), np.diag([1.0, _reciprocal(c)]))


def scaling(c: float) -> Transform2D:
    """Uniform scaling about the origin. c must be nonzero."""
    inv = _reciprocal(c)
    return Transform2D.from_linear(np.diag([c, c]), np.diag([inv, inv]))


# Translation ---------------------------------------------------------------


def translation(v: NDArray[np.float64]) -> Transform2D:
    v = as_vector(v)
    m = np.eye(3, dtype=np.float64)
    m[:2, 2] = v
    m_inv = np.eye(3, dtype=np.float64)
    m_inv[:2, 2] = -v
    return Transform2D(m, m_inv)


def translation_x(x: float) -> Transform2D:
    return translation((x, 0.0))


def translation_y(y: float) -> Transform2D:
    return translation((0.0, y))


# Reflection ----------------------------------------------------------------


def reflection_x() -> Transform2D:
    """Flip left to right: (x, y) -> (-x, y)."""
    return scaling_x(-1.0)


def reflection_y() -> Transform2D:
    """Flip top to bottom: (x, y) -> (x, -y)."""
    return scaling_y(-1.0)


def reflection_about(p: NDArray[np.float64], v: NDArray[np.float64]) -> Transform2D:
    """Reflection in the line through point p with direction v."""
    to_axis = rotation(Rad(-direction(as_vector(v)).value)) @ translation(-as_vector(p))
    return conjugate(to_axis, reflection_y())


# Shears --------------------------------------------------------------------


def _shear_x_matrix(d: float) -> NDArray[np.float64]:
    return np.array([[1.0, d], [0.0, 1.0]], dtype=np.float64)


def shearing_x(d: float) -> Transform2D:
    """Shear that fixes y and sends (0, 1) to (d, 1)."""
    return Transform2D.from_linear(_shear_x_matrix(d), _shear_x_matrix(-d))


def shearing_y(d: float) -> Transform2D:
    """Shear that fixes x and sends (1, 0) to (1, d)."""
    return Transform2D.from_linear(_shear_x_matrix(d).T, _shear_x_matrix(-d).T)


# Utilities -----------------------------------------------------------------


def on_basis(
    t: Transform2D,
) -> tuple[tuple[NDArray[np.float64], NDArray[np.float64]], NDArray[np.float64]]:
    """Matrix form of t as its two basis-vector images plus the translation.

    Returns:
        ((image of (1, 0), image of (0, 1)), translation vector)
    """
    m = t.to_matrix()
    return (m[:2, 0], m[:2, 1]), m[:2, 2]


def avg_scale(t: Transform2D) -> float:
    """The "average" scale factor of t: sqrt(|det|) of its linear part.

    Satisfies ``avg_scale(scaling(k)) == |k|`` and
    ``avg_scale(t1 @ t2) == avg_scale(t1) * avg_scale(t2)``.
    Backends that cannot stroke under an arbitrary transform can multiply
    line widths by this value instead.
    """
    (x1, y1), (x2, y2) = on_basis(t)[0]
    return math.sqrt(abs(x1 * y2 - y1 * x2))
