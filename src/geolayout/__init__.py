"""geolayout: 2D affine transformations and envelope-aware layout."""

from .core import (
    TAU,
    Deg,
    Diagram,
    Envelope,
    Rad,
    Transform2D,
    Turn,
    avg_scale,
    compose,
    conjugate,
    on_basis,
)
from .core.operations import (
    reflect_about,
    reflect_x,
    reflect_y,
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
    transform,
    translate,
    translate_x,
    translate_y,
)
from .core.size import height, size, width
from .core.transform import (
    identity,
    reflection_about,
    reflection_x,
    reflection_y,
    rotation,
    rotation_about,
    scaling,
    scaling_x,
    scaling_y,
    shearing_x,
    shearing_y,
    translation,
    translation_x,
    translation_y,
)
from .core.vector import direction, from_direction, point_at, unit_x, unit_y
from .generators import circle, hrule, rect, regular_polygon, square, vrule
from .layout import (
    Anchor,
    CatMethod,
    CatOpts,
    LayoutLoader,
    above,
    align,
    at_angle,
    beside,
    beside_right,
    cat,
    hcat,
    hcat_,
    pad,
    pad_x,
    pad_y,
    strut,
    strut_x,
    strut_y,
    vcat,
    vcat_,
    view,
)

__version__ = "0.1.0"
