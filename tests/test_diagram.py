"""Tests for envelopes, diagrams, sizes and the per-object operations."""

import numpy as np
import pytest

from geolayout.core.angle import Deg, Turn
from geolayout.core.diagram import Diagram, Primitive
from geolayout.core.envelope import Envelope
from geolayout.core.operations import (
    reflect_about,
    reflect_x,
    rotate,
    rotate_about,
    rotate_by,
    scale,
    scale_to_x,
    scale_to_y,
    scale_u_to_x,
    scale_u_to_y,
    scale_x,
    scale_y,
    shear_x,
    shear_y,
    translate,
    translate_x,
    translate_y,
)
from geolayout.core.protocols import Boundable, Combinable, Layoutable, Transformable
from geolayout.core.size import extent_x, extent_y, height, size, width
from geolayout.core.transform import translation
from geolayout.core.vector import point_at, unit_x, unit_y
from geolayout.generators import circle, hrule, rect, regular_polygon, square, vrule


def bbox(d):
    lower, upper = d.bounding_box()
    return np.concatenate([lower, upper])


def test_rect_size():
    assert size(rect(2, 5)) == pytest.approx((2.0, 5.0))
    assert extent_x(rect(2, 5)) == pytest.approx((-1.0, 1.0))
    assert extent_y(rect(2, 5)) == pytest.approx((-2.5, 2.5))


def test_circle_envelope_is_exact():
    c = circle(1)
    diagonal = np.array([1.0, 1.0])
    assert c.extent(diagonal) == pytest.approx(1.0)
    assert width(c) == pytest.approx(2.0)
    assert width(rotate(Deg(17), c)) == pytest.approx(2.0)


def test_rules_have_zero_thickness():
    assert size(hrule(3)) == pytest.approx((3.0, 0.0))
    assert size(vrule(3)) == pytest.approx((0.0, 3.0))


def test_regular_polygon():
    sq = regular_polygon(4, 1.0)
    assert size(sq) == pytest.approx((2.0, 2.0))
    with pytest.raises(ValueError):
        regular_polygon(2, 1.0)


def test_scale_to_x_only_changes_width():
    d = scale_to_x(10, rect(2, 5))
    assert width(d) == pytest.approx(10.0)
    assert height(d) == pytest.approx(5.0)


def test_scale_to_y_only_changes_height():
    d = scale_to_y(1, rect(2, 5))
    assert size(d) == pytest.approx((2.0, 1.0))


def test_uniform_scale_to_preserves_aspect():
    assert size(scale_u_to_x(4, rect(2, 5))) == pytest.approx((4.0, 10.0))
    assert size(scale_u_to_y(10, rect(2, 5))) == pytest.approx((4.0, 10.0))


def test_scale_to_zero_width_is_caller_error():
    with pytest.raises(ZeroDivisionError):
        scale_to_x(5, vrule(2))


def test_scaling_operations():
    assert size(scale_x(3, square(1))) == pytest.approx((3.0, 1.0))
    assert size(scale_y(3, square(1))) == pytest.approx((1.0, 3.0))
    assert size(scale(-2, square(1))) == pytest.approx((2.0, 2.0))


def test_rotate_rect_swaps_size():
    assert size(rotate(Deg(90), rect(2, 5))) == pytest.approx((5.0, 2.0))
    assert size(rotate_by(0.25, rect(2, 5))) == pytest.approx((5.0, 2.0))


def test_rotate_about_corner():
    d = rotate_about(point_at(1, 1), Turn(0.5), square(2))
    assert bbox(d) == pytest.approx([1.0, 1.0, 3.0, 3.0])


def test_translate_moves_content_away_from_origin():
    d = translate(np.array([3.0, 0.0]), circle(1))
    assert d.extent(unit_x) == pytest.approx(4.0)
    assert d.extent(-unit_x) == pytest.approx(-2.0)
    assert width(d) == pytest.approx(2.0)
    assert bbox(translate_x(1, square(2))) == pytest.approx([0.0, -1.0, 2.0, 1.0])
    assert bbox(translate_y(1, square(2))) == pytest.approx([-1.0, 0.0, 1.0, 2.0])


def test_shear_envelope_follows_vertices():
    assert width(shear_x(1, square(2))) == pytest.approx(4.0)
    assert height(shear_y(1, square(2))) == pytest.approx(4.0)


def test_reflections_of_diagram():
    d = translate_x(2, square(1))
    assert bbox(reflect_x(d)) == pytest.approx([-2.5, -0.5, -1.5, 0.5])
    flipped = reflect_about(point_at(0, 0), np.array([1.0, 1.0]), d)
    assert bbox(flipped) == pytest.approx([-0.5, 1.5, 0.5, 2.5])


def test_primitives_follow_transforms():
    d = translate_x(2, square(2))
    assert np.allclose(d.primitives[0].vertices[:, 0].min(), 1.0)
    assert np.allclose(d.primitives[0].vertices[:, 0].max(), 3.0)


def test_empty_diagram():
    e = Diagram.empty()
    assert e.is_empty
    assert e.bounding_box() is None
    assert e.extent(unit_x) == 0.0
    assert size(e) == (0.0, 0.0)


def test_combine_has_two_sided_identity():
    sq = translate_x(3, square(1))
    assert bbox(sq.combine(Diagram.empty())) == pytest.approx(bbox(sq))
    assert bbox(Diagram.empty().combine(sq)) == pytest.approx(bbox(sq))
    assert len(Diagram.empty().combine(sq).primitives) == 1


def test_combine_is_associative():
    a = square(1)
    b = translate_x(3, circle(1))
    c = translate_y(-4, rect(1, 2))
    left = a.combine(b).combine(c)
    right = a.combine(b.combine(c))
    assert bbox(left) == pytest.approx(bbox(right))
    assert [p.kind for p in left.primitives] == [p.kind for p in right.primitives]


def test_combine_draws_self_on_top():
    d = square(1).combine(circle(1))
    assert [p.kind for p in d.primitives] == ["circle", "rect"]


def test_with_envelope_keeps_content():
    c = circle(1)
    d = c.with_envelope(square(4))
    assert d.primitives is c.primitives
    assert size(d) == pytest.approx((4.0, 4.0))


class Disc:
    """Minimal boundable that is not a Diagram."""

    def extent(self, v):
        return 2.0

    def origin(self):
        return np.array([1.0, 0.0])

    def with_envelope(self, other):
        return self


def test_with_envelope_of_foreign_boundable():
    d = square(1).with_envelope(Disc())
    assert d.extent(unit_x) == pytest.approx(3.0)
    assert d.extent(-unit_x) == pytest.approx(1.0)
    assert d.extent(unit_y) == pytest.approx(2.0)


def test_move_origin_to():
    d = square(1).move_origin_to(point_at(0.5, 0.5))
    assert d.extent(unit_x) == pytest.approx(0.0)
    assert d.extent(-unit_x) == pytest.approx(1.0)
    assert d.extent(unit_y) == pytest.approx(0.0)


def test_translate_to():
    d = square(1).translate_to(point_at(2, 3))
    assert bbox(d) == pytest.approx([1.5, 2.5, 2.5, 3.5])


def test_envelope_union_and_transform():
    a = Envelope.from_points(np.array([[0.0, 0.0], [1.0, 0.0]]))
    b = Envelope.from_circle(np.array([0.0, 2.0]), 0.5)
    u = a.union(b)
    assert u.extent(unit_y) == pytest.approx(2.5)
    assert u.extent(unit_x) == pytest.approx(1.0)
    assert Envelope.empty().union(a) is a
    assert a.union(Envelope.empty()) is a

    moved = a.transform(translation((0.0, 5.0)))
    assert moved.extent(unit_y) == pytest.approx(5.0)
    assert Envelope.from_points(np.empty((0, 2))).is_empty


def test_primitive_vertices_are_read_only():
    p = Primitive("line", [[0, 0], [1, 1]], closed=False)
    assert p.vertices.shape == (2, 2)
    with pytest.raises(ValueError):
        p.vertices[0, 0] = 3.0


def test_diagram_satisfies_protocols():
    d = square(1)
    assert isinstance(d, Transformable)
    assert isinstance(d, Boundable)
    assert isinstance(d, Combinable)
    assert isinstance(d, Layoutable)


def test_generators_satisfy_protocol():
    from geolayout.generators import CircleGenerator, Generator, RectGenerator

    assert isinstance(RectGenerator(), Generator)
    assert isinstance(CircleGenerator(radius=2.0).generate(), Diagram)


def test_scaled_circle_envelope_is_an_ellipse():
    e = scale_x(2, circle(1))
    assert size(e) == pytest.approx((4.0, 2.0))
    assert e.extent(np.array([1.0, 1.0])) == pytest.approx(np.sqrt(2.5))


def test_many_successive_transforms():
    d = rect(2, 1)
    for _ in range(1500):
        d = rotate(Deg(1), d)
    assert bbox(d) == pytest.approx(bbox(rotate(Deg(1500), rect(2, 1))))


def test_many_transforms_of_custom_support():
    d = square(1).with_envelope(Disc())
    for _ in range(1200):
        d = translate_x(1, d)
    assert d.extent(unit_x) == pytest.approx(1203.0)
    assert d.extent(-unit_x) == pytest.approx(-1199.0)


def test_envelope_from_support():
    e = Envelope.from_support(lambda w: 2.0 * float(np.linalg.norm(w)))
    assert e.extent(unit_y) == pytest.approx(2.0)
    assert e.transform(translation((0.0, 1.0))).extent(unit_y) == pytest.approx(3.0)
    assert e.union(Envelope.from_points(np.array([[5.0, 0.0]]))).extent(unit_x) == pytest.approx(5.0)
