"""Layout system: envelope-aware placement, spacing and alignment."""

from .anchors import (
    Anchor,
    align,
    align_b,
    align_bl,
    align_br,
    align_l,
    align_r,
    align_t,
    align_tl,
    align_tr,
    center_x,
    center_xy,
    center_y,
    resolve_anchor,
)
from .combinators import (
    CatMethod,
    CatOpts,
    above,
    at_angle,
    beside,
    beside_right,
    cat,
    hcat,
    hcat_,
    juxtapose,
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
from .loader import LayoutLoader

__all__ = [
    "Anchor",
    "align",
    "align_b",
    "align_bl",
    "align_br",
    "align_l",
    "align_r",
    "align_t",
    "align_tl",
    "align_tr",
    "center_x",
    "center_xy",
    "center_y",
    "resolve_anchor",
    "CatMethod",
    "CatOpts",
    "above",
    "at_angle",
    "beside",
    "beside_right",
    "cat",
    "hcat",
    "hcat_",
    "juxtapose",
    "pad",
    "pad_x",
    "pad_y",
    "strut",
    "strut_x",
    "strut_y",
    "vcat",
    "vcat_",
    "view",
    "LayoutLoader",
]
