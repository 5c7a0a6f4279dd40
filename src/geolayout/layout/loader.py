"""YAML loader for layout definitions."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import numpy as np
import yaml

from ..core import operations as ops
from ..core.angle import parse_angle
from ..core.diagram import Diagram
from ..core.vector import as_vector, from_direction
from ..generators.base import ShapeGenerator
from ..generators.primitives import PRIMITIVE_REGISTRY
from ..log import logger
from .anchors import align
from .combinators import CatMethod, CatOpts, beside, cat, pad, pad_x, pad_y, strut, strut_x, strut_y, view

# Transform ops that take a single scalar, in YAML key -> function form
_SCALAR_OPS: dict[str, Callable[[float, Diagram], Diagram]] = {
    "scale": ops.scale,
    "scale_x": ops.scale_x,
    "scale_y": ops.scale_y,
    "scale_to_x": ops.scale_to_x,
    "scale_to_y": ops.scale_to_y,
    "scale_u_to_x": ops.scale_u_to_x,
    "scale_u_to_y": ops.scale_u_to_y,
    "translate_x": ops.translate_x,
    "translate_y": ops.translate_y,
    "shear_x": ops.shear_x,
    "shear_y": ops.shear_y,
}

_CAT_KINDS = ("hcat", "vcat", "cat")


class LayoutLoader:
    """Loads layout definitions from YAML files.

    A layout is a tree of nodes. Each node is exactly one of:

        shape: rect|square|circle|polygon|hrule|vrule  # plus generator params
        strut: [w, h]  |  strut_x: d  |  strut_y: d
        hcat|vcat|cat:
          items: [node, ...]
          sep: 0.5                   # optional
          method: separation|distance
          direction: 45deg | [x, y]  # cat only
        beside:
          direction: 0.25turn | [x, y]
          items: [node, node]

    and may carry the modifiers, applied in this order:

        transform:                   # applied top to bottom
          - rotate: 90deg
          - scale_x: 2
          - translate: [1, 0]
          - reflect_about: {point: [0, 0], direction: [1, 1]}
        align: bottom_left
        pad_x: 1.2  |  pad_y: 1.2  |  pad: 1.1
        view: {corner: [0, 0], size: [4, 3]}

    Example:
        name: header
        vcat:
          sep: 0.25
          items:
            - shape: rect
              width: 4
              height: 1
            - hcat:
                items:
                  - shape: circle
                    radius: 0.5
                  - strut_x: 1
                  - shape: square
                    side: 1
    """

    def load(self, path: str | Path) -> Diagram:
        """Load a layout definition from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            Diagram described by the file
        """
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f)

        logger.debug("Loading layout from %s", path)
        return self._build(data)

    def load_string(self, yaml_string: str) -> Diagram:
        """Load a layout definition from a YAML string.

        Args:
            yaml_string: YAML content as a string

        Returns:
            Diagram described by the string
        """
        data = yaml.safe_load(yaml_string)
        return self._build(data)

    def _build(self, data: Any) -> Diagram:
        if not isinstance(data, dict):
            raise ValueError(f"Layout definition must be a mapping, got {type(data).__name__}")
        name = data.get("name", "layout")
        logger.debug("Building layout '%s'", name)
        return self._build_node(data)

    def _build_node(self, node: Any) -> Diagram:
        """Build a diagram from a single node definition, including modifiers."""
        if not isinstance(node, dict):
            raise ValueError(f"Layout node must be a mapping, got {node!r}")

        diagram = self._build_content(node)

        steps = node.get("transform", [])
        if not isinstance(steps, list):
            raise ValueError(f"'transform' must be a list of steps, got {steps!r}")
        for step in steps:
            diagram = self._apply_transform(step, diagram)

        if "align" in node:
            try:
                diagram = align(node["align"], diagram)
            except ValueError:
                raise ValueError(f"Unknown anchor: {node['align']!r}") from None

        if "pad_x" in node:
            diagram = pad_x(float(node["pad_x"]), diagram)
        if "pad_y" in node:
            diagram = pad_y(float(node["pad_y"]), diagram)
        if "pad" in node:
            diagram = pad(float(node["pad"]), diagram)

        if "view" in node:
            view_def = _mapping(node["view"], "view")
            if "size" not in view_def:
                raise ValueError("'view' needs a size")
            diagram = view(
                as_vector(view_def.get("corner", [0.0, 0.0])),
                as_vector(view_def["size"]),
                diagram,
            )

        return diagram

    def _build_content(self, node: dict[str, Any]) -> Diagram:
        if "shape" in node:
            return self._create_generator(node["shape"], node).generate()

        if "strut" in node:
            w, h = as_vector(node["strut"])
            return strut(w, h)
        if "strut_x" in node:
            return strut_x(float(node["strut_x"]))
        if "strut_y" in node:
            return strut_y(float(node["strut_y"]))

        for kind in _CAT_KINDS:
            if kind in node:
                return self._build_cat(kind, node[kind])

        if "beside" in node:
            beside_def = _mapping(node["beside"], "beside")
            items = _items(beside_def, "beside")
            if len(items) != 2:
                raise ValueError(f"'beside' needs exactly 2 items, got {len(items)}")
            if "direction" not in beside_def:
                raise ValueError("'beside' needs a direction")
            a, b = (self._build_node(item) for item in items)
            return beside(self._parse_direction(beside_def["direction"]), a, b)

        raise ValueError(f"Layout node has no content: {sorted(node)}")

    def _build_cat(self, kind: str, cat_def: Any) -> Diagram:
        cat_def = _mapping(cat_def, kind)
        items = [self._build_node(item) for item in _items(cat_def, kind)]

        method_name = cat_def.get("method", CatMethod.SEPARATION.value)
        try:
            method = CatMethod(method_name)
        except ValueError:
            raise ValueError(f"Unknown cat method: {method_name!r}") from None
        opts = CatOpts(sep=float(cat_def.get("sep", 0.0)), method=method)

        if kind == "hcat":
            direction = np.array([1.0, 0.0])
        elif kind == "vcat":
            direction = np.array([0.0, -1.0])
        else:
            if "direction" not in cat_def:
                raise ValueError("'cat' needs a direction")
            direction = self._parse_direction(cat_def["direction"])

        logger.debug("Building %s of %d items", kind, len(items))
        return cat(direction, items, opts)

    def _create_generator(self, shape: str, params: dict[str, Any]) -> ShapeGenerator:
        """Create a generator instance for a shape node.

        Args:
            shape: Shape name (rect, square, circle, ...)
            params: The node definition holding the shape parameters

        Returns:
            Generator instance configured from params
        """
        if shape == "rect":
            return PRIMITIVE_REGISTRY["rect"](
                width=float(params.get("width", 1.0)),
                height=float(params.get("height", 1.0)),
            )
        elif shape == "square":
            side = float(params.get("side", 1.0))
            return PRIMITIVE_REGISTRY["rect"](width=side, height=side)
        elif shape == "circle":
            return PRIMITIVE_REGISTRY["circle"](radius=float(params.get("radius", 0.5)))
        elif shape == "polygon":
            return PRIMITIVE_REGISTRY["polygon"](
                sides=int(params.get("sides", 6)),
                radius=float(params.get("radius", 0.5)),
            )
        elif shape in ("hrule", "vrule"):
            return PRIMITIVE_REGISTRY["rule"](
                length=float(params.get("length", 1.0)),
                vertical=shape == "vrule",
            )
        else:
            raise ValueError(f"Unknown shape type: {shape}")

    def _apply_transform(self, step: Any, diagram: Diagram) -> Diagram:
        """Apply one single-key transform step such as ``{rotate: 90deg}``."""
        if isinstance(step, str):
            step = {step: None}
        if not isinstance(step, dict) or len(step) != 1:
            raise ValueError(f"Transform step must be a single-key mapping, got {step!r}")

        (op, arg), = step.items()

        if op in _SCALAR_OPS:
            if not isinstance(arg, (int, float)) or isinstance(arg, bool):
                raise ValueError(f"Transform op '{op}' needs a number, got {arg!r}")
            return _SCALAR_OPS[op](float(arg), diagram)
        elif op == "rotate":
            return ops.rotate(parse_angle(arg), diagram)
        elif op == "rotate_about":
            arg = _mapping(arg, op)
            if "point" not in arg or "angle" not in arg:
                raise ValueError(f"'{op}' needs a point and an angle, got {arg!r}")
            return ops.rotate_about(as_vector(arg["point"]), parse_angle(arg["angle"]), diagram)
        elif op == "translate":
            return ops.translate(as_vector(arg), diagram)
        elif op == "reflect_x":
            return ops.reflect_x(diagram)
        elif op == "reflect_y":
            return ops.reflect_y(diagram)
        elif op == "reflect_about":
            arg = _mapping(arg, op)
            if "direction" not in arg:
                raise ValueError(f"'{op}' needs a direction, got {arg!r}")
            return ops.reflect_about(
                as_vector(arg.get("point", [0.0, 0.0])),
                as_vector(arg["direction"]),
                diagram,
            )
        else:
            raise ValueError(f"Unknown transform op: {op}")

    def _parse_direction(self, value: Any) -> np.ndarray:
        """A direction is either an angle or an explicit [x, y] vector."""
        if isinstance(value, (list, tuple)):
            return as_vector(value)
        return from_direction(parse_angle(value))


def _mapping(value: Any, key: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"'{key}' must be a mapping, got {value!r}")
    return value


def _items(definition: dict[str, Any], key: str) -> list[Any]:
    items = definition.get("items", [])
    if not isinstance(items, list):
        raise ValueError(f"'{key}' items must be a list, got {items!r}")
    return items
