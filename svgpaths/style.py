"""Presentation attributes of SVG elements and their inheritance state."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace

from svgpaths.colors import parse_color
from svgpaths.model import FillRule, LineCap, LineJoin, PaintType
from svgpaths.numbers import parse_coordinate_raw, parse_float, to_pixels
from svgpaths.transform import parse_transform
from svgpaths.xform import Transform, identity, premultiply

MAX_DASHES = 8
_ID_LENGTH = 63
_FIELD_LENGTH = 511
_SPACE = " \t\n\v\f\r"
_DASH_SEPARATORS = re.compile(r"[ \t\n\v\f\r,]+")


@dataclass
class Style:
    """The attribute state an element inherits from its ancestors."""

    id: str = ""
    xform: Transform = field(default_factory=identity)
    fill_color: int = 0
    stroke_color: int = 0
    opacity: float = 1.0
    fill_opacity: float = 1.0
    stroke_opacity: float = 1.0
    fill_gradient: str = ""
    stroke_gradient: str = ""
    stroke_width: float = 1.0
    stroke_dash_offset: float = 0.0
    stroke_dash_array: list[float] = field(default_factory=list)
    stroke_line_join: LineJoin = LineJoin.MITER
    stroke_line_cap: LineCap = LineCap.BUTT
    miter_limit: float = 4.0
    fill_rule: FillRule = FillRule.NONZERO
    font_size: float = 0.0
    stop_color: int = 0
    stop_opacity: float = 1.0
    stop_offset: float = 0.0
    has_fill: PaintType = PaintType.COLOR
    has_stroke: PaintType = PaintType.NONE
    visible: bool = True

    def copy(self) -> Style:
        """Return an independent copy, for pushing onto the style stack."""
        return replace(self, stroke_dash_array=list(self.stroke_dash_array))


def parse_opacity(text: str) -> float:
    """Parse an opacity, clamped to [0, 1]."""
    return min(max(parse_float(text), 0.0), 1.0)


def parse_miter_limit(text: str) -> float:
    """Parse a miter limit; negative values become 0."""
    return max(parse_float(text), 0.0)


def parse_line_cap(text: str) -> LineCap:
    """Parse a stroke-linecap keyword; unknown values give BUTT."""
    return {"round": LineCap.ROUND, "square": LineCap.SQUARE}.get(text, LineCap.BUTT)


def parse_line_join(text: str) -> LineJoin:
    """Parse a stroke-linejoin keyword; unknown values give MITER."""
    return {"round": LineJoin.ROUND, "bevel": LineJoin.BEVEL}.get(text, LineJoin.MITER)


def parse_fill_rule(text: str) -> FillRule:
    """Parse a fill-rule keyword; unknown values give NONZERO."""
    return FillRule.EVENODD if text == "evenodd" else FillRule.NONZERO


def parse_url(text: str) -> str:
    """Extract the id from ``url(#id)``, cut to 63 characters."""
    rest = text[4:]
    if rest.startswith("#"):
        rest = rest[1:]
    return rest.split(")", 1)[0][:_ID_LENGTH]


def parse_dash_array(text: str, dpi: float, font_size: float, length: float) -> list[float]:
    """Parse a stroke-dasharray into at most eight positive lengths.

    ``none`` and dash patterns of zero total length give an empty list.
    """
    if text.startswith("n"):
        return []
    dashes: list[float] = []
    for item in _DASH_SEPARATORS.split(text):
        if item and len(dashes) < MAX_DASHES:
            coord = parse_coordinate_raw(item[:_ID_LENGTH])
            dashes.append(abs(to_pixels(coord, dpi, font_size, 0.0, length)))
    if sum(dashes) <= 1e-6:
        return []
    return dashes


def _length(style: Style, value: str, dpi: float, length: float) -> float:
    return to_pixels(parse_coordinate_raw(value), dpi, style.font_size, 0.0, length)


def _paint(value: str) -> tuple[PaintType, str | None, int | None]:
    if value == "none":
        return PaintType.NONE, None, None
    if value.startswith("url("):
        return PaintType.UNDEF, parse_url(value), None
    return PaintType.COLOR, None, parse_color(value)


def apply_attribute(style: Style, name: str, value: str, dpi: float, length: float) -> bool:
    """Apply one presentation attribute to ``style``.

    ``length`` is the reference length for percentages. Returns False if
    the attribute is not a presentation attribute.
    """
    if name == "style":
        apply_style(style, value, dpi, length)
    elif name == "display":
        # One display:none hides the whole subtree; inline does not undo it.
        if value == "none":
            style.visible = False
    elif name == "fill":
        kind, gradient, color = _paint(value)
        style.has_fill = kind
        if gradient is not None:
            style.fill_gradient = gradient
        if color is not None:
            style.fill_color = color
    elif name == "stroke":
        kind, gradient, color = _paint(value)
        style.has_stroke = kind
        if gradient is not None:
            style.stroke_gradient = gradient
        if color is not None:
            style.stroke_color = color
    elif name == "opacity":
        style.opacity = parse_opacity(value)
    elif name == "fill-opacity":
        style.fill_opacity = parse_opacity(value)
    elif name == "stroke-opacity":
        style.stroke_opacity = parse_opacity(value)
    elif name == "stroke-width":
        style.stroke_width = _length(style, value, dpi, length)
    elif name == "stroke-dasharray":
        style.stroke_dash_array = parse_dash_array(value, dpi, style.font_size, length)
    elif name == "stroke-dashoffset":
        style.stroke_dash_offset = _length(style, value, dpi, length)
    elif name == "stroke-linecap":
        style.stroke_line_cap = parse_line_cap(value)
    elif name == "stroke-linejoin":
        style.stroke_line_join = parse_line_join(value)
    elif name == "stroke-miterlimit":
        style.miter_limit = parse_miter_limit(value)
    elif name == "fill-rule":
        style.fill_rule = parse_fill_rule(value)
    elif name == "font-size":
        style.font_size = _length(style, value, dpi, length)
    elif name == "transform":
        style.xform = premultiply(style.xform, parse_transform(value))
    elif name == "stop-color":
        style.stop_color = parse_color(value)
    elif name == "stop-opacity":
        style.stop_opacity = parse_opacity(value)
    elif name == "offset":
        style.stop_offset = _length(style, value, dpi, 1.0)
    elif name == "id":
        style.id = value[:_ID_LENGTH]
    else:
        return False
    return True


def apply_style(style: Style, text: str, dpi: float, length: float) -> None:
    """Apply a CSS-like ``name: value; ...`` declaration list to ``style``."""
    for declaration in text.split(";"):
        declaration = declaration.strip(_SPACE)
        if not declaration:
            continue
        if ":" in declaration:
            name, _, value = declaration.partition(":")
            name = name.rstrip(_SPACE + ":")
            value = value.lstrip(_SPACE + ":")
        else:
            name, value = declaration, ""
        apply_attribute(style, name[:_FIELD_LENGTH], value[:_FIELD_LENGTH], dpi, length)