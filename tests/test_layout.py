"""Tests for the envelope-aware layout combinators and alignment."""

import numpy as np
import pytest

from geolayout.core.angle import Deg
from geolayout.core.diagram import Diagram
from geolayout.core.operations import translate, translate_y
from geolayout.core.size import height, width
from geolayout.core.vector import normalized, point_at, unit_x, unit_y
from geolayout.generators import circle, rect, square
from geolayout.layout import (
    Anchor,
    CatMethod,
    CatOpts,
    above,
    align,
    align_bl,
    align_l,
    at_angle,
    beside,
    beside_right,
    cat,
    center_xy,
    hcat,
    hcat_,
    juxtapose,
    pad,
    pad_x,
    pad_y,
    resolve_anchor,
    strut_x,
    strut_y,
    vcat,
    vcat_,
    view,
)


def bbox(d):
    lower, upper = d.bounding_box()
    return np.concatenate([lower, upper])


@pytest.mark.parametrize("v", [
    np.array([1.0, 0.0]),
    np.array([0.0, -1.0]),
    np.array([1.0, 1.0]),
    np.array([-2.0, 0.5]),
])
def test_juxtapose_touches_with_zero_gap(v):
    a = rect(2, 1)
    b = circle(0.5)
    u = normalized(v)
    moved = juxtapose(v, a, b)

    # b's near edge sits exactly on a's far edge along v
    assert -moved.extent(-u) == pytest.approx(a.extent(u))

    # Origins end up a.extent(v) + b.extent(-v) apart along v
    center = np.mean(moved.bounding_box(), axis=0)
    assert center @ u == pytest.approx(a.extent(u) + b.extent(-u))


def test_beside_right_of_two_squares():
    d = beside_right(square(1), square(1))
    assert bbox(d) == pytest.approx([-0.5, -0.5, 1.5, 0.5])


def test_above_stacks_downwards():
    d = above(square(1), rect(1, 2))
    assert bbox(d) == pytest.approx([-0.5, -2.5, 0.5, 0.5])


def test_at_angle():
    assert bbox(at_angle(Deg(0), square(1), square(1))) == pytest.approx(
        bbox(beside_right(square(1), square(1)))
    )
    assert bbox(at_angle(Deg(90), square(1), square(1))) == pytest.approx(
        [-0.5, -0.5, 0.5, 1.5]
    )


def test_beside_keeps_first_origin():
    d = beside_right(square(2), circle(1))
    assert d.extent(-unit_x) == pytest.approx(1.0)


def test_beside_preserves_perpendicular_offset():
    raised = translate_y(3, square(1))
    d = beside_right(square(1), raised)
    assert bbox(d) == pytest.approx([-0.5, -0.5, 1.5, 3.5])


def test_empty_is_right_identity_only():
    sq = square(1)
    assert bbox(beside_right(sq, Diagram.empty())) == pytest.approx(bbox(sq))
    assert bbox(above(sq, Diagram.empty())) == pytest.approx(bbox(sq))

    # On the left, the empty diagram still shifts the right operand
    shifted = beside_right(Diagram.empty(), sq)
    assert bbox(shifted) == pytest.approx([0.0, -0.5, 1.0, 0.5])


@pytest.mark.parametrize("combinator", [beside_right, above])
def test_binary_placement_is_associative(combinator):
    a, b, c = rect(1, 2), circle(0.7), rect(3, 1)
    left = combinator(combinator(a, b), c)
    right = combinator(a, combinator(b, c))
    assert bbox(left) == pytest.approx(bbox(right))


def test_beside_arbitrary_direction_is_associative():
    v = np.array([1.0, 2.0])
    a, b, c = rect(1, 2), circle(0.7), rect(3, 1)
    left = beside(v, beside(v, a, b), c)
    right = beside(v, a, beside(v, b, c))
    assert bbox(left) == pytest.approx(bbox(right))


def test_hcat_sums_widths():
    d = hcat([rect(1, 1), rect(2, 3), circle(1)])
    assert width(d) == pytest.approx(5.0)
    assert height(d) == pytest.approx(3.0)


def test_hcat_is_associative():
    a, b, c = rect(1, 4), circle(0.3), rect(2.5, 1)
    assert width(hcat([a, b, c])) == pytest.approx(width(hcat([hcat([a, b]), c])))
    assert width(hcat([a, b, c])) == pytest.approx(width(hcat([a, hcat([b, c])])))


def test_hcat_with_strut():
    """A strut reserves space between its neighbours."""
    d = hcat([square(1), strut_x(5), square(1)])
    assert width(d) == pytest.approx(7.0)
    assert len(d.primitives) == 2


def test_negative_strut_behaves_like_positive():
    assert width(hcat([square(1), strut_x(-5), square(1)])) == pytest.approx(7.0)
    assert height(strut_y(-3)) == pytest.approx(3.0)
    assert width(strut_y(3)) == pytest.approx(0.0)
    assert strut_y(3).primitives == ()


def test_vcat_keeps_first_on_top():
    d = vcat([square(1), square(1)])
    assert bbox(d) == pytest.approx([-0.5, -1.5, 0.5, 0.5])
    assert height(vcat([square(1), strut_y(2), rect(1, 3)])) == pytest.approx(6.0)


def test_cat_of_nothing_is_empty():
    assert hcat([]).is_empty
    assert vcat_(CatOpts(sep=2.0), []).is_empty


def test_cat_of_one_is_unchanged():
    sq = translate(np.array([1.0, 2.0]), square(1))
    assert bbox(hcat([sq])) == pytest.approx(bbox(sq))


def test_hcat_separation():
    d = hcat_(CatOpts(sep=1.0), [square(1), square(1), square(1)])
    assert width(d) == pytest.approx(5.0)


def test_vcat_separation():
    d = vcat_(CatOpts(sep=0.5), [square(1), circle(1)])
    assert height(d) == pytest.approx(3.5)


def test_hcat_distance_places_origins():
    opts = CatOpts(sep=3.0, method=CatMethod.DISTANCE)
    d = hcat_(opts, [square(1), circle(0.25), square(1)])
    assert bbox(d) == pytest.approx([-0.5, -0.5, 6.5, 0.5])


def test_distance_ignores_envelope_size():
    opts = CatOpts(sep=1.0, method=CatMethod.DISTANCE)
    d = hcat_(opts, [square(4), square(4)])
    # Overlapping squares, origins 1 apart
    assert width(d) == pytest.approx(5.0)


def test_cat_along_arbitrary_direction():
    d = cat(np.array([0.0, 1.0]), [square(1), square(1)])
    assert bbox(d) == pytest.approx([-0.5, -0.5, 0.5, 1.5])


def test_default_cat_opts():
    opts = CatOpts()
    assert opts.sep == 0.0
    assert opts.method is CatMethod.SEPARATION


def test_pad_x_circle():
    c = circle(1)
    padded = pad_x(1.2, c)
    assert width(padded) == pytest.approx(2.4)
    assert height(padded) == pytest.approx(2.0)
    assert np.array_equal(padded.primitives[0].vertices, c.primitives[0].vertices)


def test_pad_shrinks_below_one():
    assert width(pad_x(0.5, rect(4, 2))) == pytest.approx(2.0)
    assert height(pad_y(2.0, rect(4, 2))) == pytest.approx(4.0)
    assert bbox(pad(1.5, square(2))) == pytest.approx([-1.5, -1.5, 1.5, 1.5])


def test_pad_is_anchored_at_origin():
    d = pad_x(2.0, align_l(square(2)))
    assert bbox(d) == pytest.approx([0.0, -1.0, 4.0, 1.0])


def test_view_overrides_envelope_only():
    c = circle(1)
    d = view(point_at(0, 0), (4.0, 3.0), c)
    assert bbox(d) == pytest.approx([0.0, 0.0, 4.0, 3.0])
    assert d.primitives is c.primitives


def test_align_bottom_left():
    assert bbox(align_bl(rect(2, 4))) == pytest.approx([0.0, 0.0, 2.0, 4.0])
    assert bbox(align("bottom_left", rect(2, 4))) == pytest.approx([0.0, 0.0, 2.0, 4.0])


def test_align_single_axis_keeps_other():
    d = align_l(translate_y(1, square(2)))
    assert bbox(d) == pytest.approx([0.0, 0.0, 2.0, 2.0])


def test_center_xy():
    d = center_xy(translate(np.array([3.0, 3.0]), rect(2, 4)))
    assert bbox(d) == pytest.approx([-1.0, -2.0, 1.0, 2.0])


def test_resolve_anchor():
    assert resolve_anchor(Anchor.TOP_RIGHT, square(2)) == pytest.approx([1.0, 1.0])
    assert resolve_anchor("center", square(2)) == pytest.approx([0.0, 0.0])
    with pytest.raises(ValueError):
        resolve_anchor("nowhere", square(2))


def test_hcat_aligned_bottoms():
    d = hcat([align_bl(rect(1, 1)), align_bl(rect(1, 3))])
    assert bbox(d) == pytest.approx([0.0, 0.0, 2.0, 3.0])
    assert d.extent(-unit_y) == pytest.approx(0.0)
    assert d.extent(unit_y) == pytest.approx(3.0)


def test_long_rows_and_columns():
    assert width(hcat([square(1)] * 2000)) == pytest.approx(2000.0)
    assert height(vcat([circle(0.5)] * 1500)) == pytest.approx(1500.0)


def test_view_window_lands_on_corner():
    d = view(point_at(-3, 2), (2.0, 5.0), square(1))
    assert bbox(d) == pytest.approx([-3.0, 2.0, -1.0, 7.0])
