"""SVG document parser producing shapes made of cubic Bézier paths."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence
from dataclasses import replace
from enum import IntEnum
from os import PathLike
from pathlib import Path as FilePath

from svgpaths.gradients import GradientData, resolve_gradient
from svgpaths.model import Bounds, Image, Paint, PaintType, Shape, SpreadType
from svgpaths.numbers import Coordinate, parse_coordinate_raw, parse_float, parse_units, scan_number, to_pixels
from svgpaths.pathdata import PathBuilder, next_path_item, parse_path_data
from svgpaths.style import Style, apply_attribute
from svgpaths.transform import parse_transform
from svgpaths.xform import (
    average_scale,
    curve_bounds,
    inverse,
    multiply,
    scaling,
    transform_point,
    translation,
)
from svgpaths.xml import StartTag, iter_tags

_KAPPA90 = 0.5522847493
_MAX_STYLES = 128
_ID_LENGTH = 63
_VIEWBOX_SEPARATORS = " \t\n\v\f\r%,"
_GRADIENT_COORDS = frozenset({"cx", "cy", "r", "fx", "fy", "x1", "y1", "x2", "y2"})
_SPREADS = {"pad": SpreadType.PAD, "reflect": SpreadType.REFLECT, "repeat": SpreadType.REPEAT}

Attributes = Iterable[tuple[str, str]]


class _Align(IntEnum):
    MIN = 0
    MID = 1
    MAX = 2


class _Fit(IntEnum):
    NONE = 0
    MEET = 1
    SLICE = 2


def _fdiv(a: float, b: float) -> float:
    if b:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _union(boxes: Iterable[Sequence[float]]) -> Bounds:
    boxes = list(boxes)
    if not boxes:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        min(b[0] for b in boxes),
        min(b[1] for b in boxes),
        max(b[2] for b in boxes),
        max(b[3] for b in boxes),
    )


def _local_bounds(shape: Shape, xform: Sequence[float]) -> Bounds:
    boxes = []
    for path in shape.paths:
        pts = [transform_point(xform, x, y) for x, y in path.points]
        boxes.extend(curve_bounds(seg) for seg in zip(pts[0:-1:3], pts[1::3], pts[2::3], pts[3::3]))
    return _union(boxes)


def _view_align(content: float, container: float, kind: _Align) -> float:
    if kind == _Align.MIN:
        return 0.0
    if kind == _Align.MAX:
        return container - content
    return (container - content) * 0.5


def _paint(kind: PaintType, color: int, opacity: float) -> Paint:
    if kind == PaintType.COLOR:
        return Paint(PaintType.COLOR, color | (int(opacity * 255) << 24))
    return Paint(kind)


class SvgParser:
    """Receives tags in document order and builds an :class:`Image`."""

    def __init__(self, dpi: float = 96.0) -> None:
        self.dpi = dpi
        self.image = Image()
        self.gradients: dict[str, GradientData] = {}
        self.view_minx = 0.0
        self.view_miny = 0.0
        self.view_width = 0.0
        self.view_height = 0.0
        self.align_x = _Align.MIN
        self.align_y = _Align.MIN
        self.align_type = _Fit.NONE
        self._styles = [Style()]
        self._last_gradient: GradientData | None = None
        self._in_defs = False
        self._shape_parsers: dict[str, Callable[[Attributes], None]] = {
            "path": self._parse_path,
            "rect": self._parse_rect,
            "circle": self._parse_circle,
            "ellipse": self._parse_ellipse,
            "line": self._parse_line,
            "polyline": lambda attrs: self._parse_poly(attrs, False),
            "polygon": lambda attrs: self._parse_poly(attrs, True),
        }

    @property
    def _style(self) -> Style:
        return self._styles[-1]

    @property
    def _view_length(self) -> float:
        return math.hypot(self.view_width, self.view_height) / math.sqrt(2.0)

    def _push(self) -> None:
        if len(self._styles) < _MAX_STYLES:
            self._styles.append(self._style.copy())

    def _pop(self) -> None:
        if len(self._styles) > 1:
            self._styles.pop()

    def _apply(self, name: str, value: str) -> bool:
        return apply_attribute(self._style, name, value, self.dpi, self._view_length)

    def _coord(self, value: str, orig: float, length: float) -> float:
        return to_pixels(parse_coordinate_raw(value), self.dpi, self._style.font_size, orig, length)

    def _builder(self) -> PathBuilder:
        return PathBuilder(xform=self._style.xform)

    def start_element(self, name: str, attrs: Attributes) -> None:
        """Handle an opening tag with its (name, value) attributes."""
        if self._in_defs:
            # Only gradients are taken from definitions.
            if name == "linearGradient":
                self._parse_gradient(attrs, PaintType.LINEAR_GRADIENT)
            elif name == "radialGradient":
                self._parse_gradient(attrs, PaintType.RADIAL_GRADIENT)
            elif name == "stop":
                self._parse_stop(attrs)
            return

        shape_parser = self._shape_parsers.get(name)
        if name == "g":
            self._push()
            for attr_name, value in attrs:
                self._apply(attr_name, value)
        elif shape_parser is not None:
            self._push()
            shape_parser(attrs)
            self._pop()
        elif name == "linearGradient":
            self._parse_gradient(attrs, PaintType.LINEAR_GRADIENT)
        elif name == "radialGradient":
            self._parse_gradient(attrs, PaintType.RADIAL_GRADIENT)
        elif name == "stop":
            self._parse_stop(attrs)
        elif name == "defs":
            self._in_defs = True
        elif name == "svg":
            self._parse_svg(attrs)

    def end_element(self, name: str) -> None:
        """Handle a closing tag."""
        if name == "g":
            self._pop()
        elif name == "defs":
            self._in_defs = False

    def finish(self, units: str) -> Image:
        """Resolve gradients, scale everything to ``units`` and return the image."""
        self._create_gradients()
        self._scale_to_viewbox(units)
        return self.image

    def _add_shape(self, builder: PathBuilder) -> None:
        if not builder.paths:
            return
        style = self._style
        scale = average_scale(style.xform)
        paths = list(builder.paths)
        shape = Shape(
            id=style.id,
            fill=_paint(style.has_fill, style.fill_color, style.fill_opacity),
            stroke=_paint(style.has_stroke, style.stroke_color, style.stroke_opacity),
            opacity=style.opacity,
            stroke_width=style.stroke_width * scale,
            stroke_dash_offset=style.stroke_dash_offset * scale,
            stroke_dash_array=[d * scale for d in style.stroke_dash_array],
            stroke_line_join=style.stroke_line_join,
            stroke_line_cap=style.stroke_line_cap,
            miter_limit=style.miter_limit,
            fill_rule=style.fill_rule,
            visible=style.visible,
            bounds=_union(p.bounds for p in paths),
            fill_gradient=style.fill_gradient,
            stroke_gradient=style.stroke_gradient,
            xform=style.xform,
            paths=paths,
        )
        self.image.shapes.append(shape)

    def _parse_path(self, attrs: Attributes) -> None:
        data = None
        for name, value in attrs:
            if name == "d":
                data = value
            else:
                self._apply(name, value)
        builder = self._builder()
        if data is not None:
            parse_path_data(data, builder)
        self._add_shape(builder)

    def _parse_rect(self, attrs: Attributes) -> None:
        x = y = w = h = 0.0
        rx = ry = -1.0
        for name, value in attrs:
            if self._apply(name, value):
                continue
            if name == "x":
                x = self._coord(value, self.view_minx, self.view_width)
            elif name == "y":
                y = self._coord(value, self.view_miny, self.view_height)
            elif name == "width":
                w = self._coord(value, 0.0, self.view_width)
            elif name == "height":
                h = self._coord(value, 0.0, self.view_height)
            elif name == "rx":
                rx = abs(self._coord(value, 0.0, self.view_width))
            elif name == "ry":
                ry = abs(self._coord(value, 0.0, self.view_height))

        if rx < 0.0 < ry:
            rx = ry
        if ry < 0.0 < rx:
            ry = rx
        rx = min(max(rx, 0.0), w / 2.0) if rx >= 0.0 or w / 2.0 < 0.0 else 0.0
        ry = min(max(ry, 0.0), h / 2.0) if ry >= 0.0 or h / 2.0 < 0.0 else 0.0

        if w == 0.0 or h == 0.0:
            return
        b = self._builder()
        if rx < 0.00001 or ry < 0.0001:
            b.move_to(x, y)
            b.line_to(x + w, y)
            b.line_to(x + w, y + h)
            b.line_to(x, y + h)
        else:
            k = 1 - _KAPPA90
            b.move_to(x + rx, y)
            b.line_to(x + w - rx, y)
            b.cubic_to(x + w - rx * k, y, x + w, y + ry * k, x + w, y + ry)
            b.line_to(x + w, y + h - ry)
            b.cubic_to(x + w, y + h - ry * k, x + w - rx * k, y + h, x + w - rx, y + h)
            b.line_to(x + rx, y + h)
            b.cubic_to(x + rx * k, y + h, x, y + h - ry * k, x, y + h - ry)
            b.line_to(x, y + ry)
            b.cubic_to(x, y + ry * k, x + rx * k, y, x + rx, y)
        b.commit(True)
        self._add_shape(b)

    def _ellipse_path(self, cx: float, cy: float, rx: float, ry: float) -> None:
        k = _KAPPA90
        b = self._builder()
        b.move_to(cx + rx, cy)
        b.cubic_to(cx + rx, cy + ry * k, cx + rx * k, cy + ry, cx, cy + ry)
        b.cubic_to(cx - rx * k, cy + ry, cx - rx, cy + ry * k, cx - rx, cy)
        b.cubic_to(cx - rx, cy - ry * k, cx - rx * k, cy - ry, cx, cy - ry)
        b.cubic_to(cx + rx * k, cy - ry, cx + rx, cy - ry * k, cx + rx, cy)
        b.commit(True)
        self._add_shape(b)

    def _parse_circle(self, attrs: Attributes) -> None:
        cx = cy = r = 0.0
        for name, value in attrs:
            if self._apply(name, value):
                continue
            if name == "cx":
                cx = self._coord(value, self.view_minx, self.view_width)
            elif name == "cy":
                cy = self._coord(value, self.view_miny, self.view_height)
            elif name == "r":
                r = abs(self._coord(value, 0.0, self._view_length))
        if r > 0.0:
            self._ellipse_path(cx, cy, r, r)

    def _parse_ellipse(self, attrs: Attributes) -> None:
        cx = cy = rx = ry = 0.0
        for name, value in attrs:
            if self._apply(name, value):
                continue
            if name == "cx":
                cx = self._coord(value, self.view_minx, self.view_width)
            elif name == "cy":
                cy = self._coord(value, self.view_miny, self.view_height)
            elif name == "rx":
                rx = abs(self._coord(value, 0.0, self.view_width))
            elif name == "ry":
                ry = abs(self._coord(value, 0.0, self.view_height))
        if rx > 0.0 and ry > 0.0:
            self._ellipse_path(cx, cy, rx, ry)

    def _parse_line(self, attrs: Attributes) -> None:
        x1 = y1 = x2 = y2 = 0.0
        for name, value in attrs:
            if self._apply(name, value):
                continue
            if name == "x1":
                x1 = self._coord(value, self.view_minx, self.view_width)
            elif name == "y1":
                y1 = self._coord(value, self.view_miny, self.view_height)
            elif name == "x2":
                x2 = self._coord(value, self.view_minx, self.view_width)
            elif name == "y2":
                y2 = self._coord(value, self.view_miny, self.view_height)
        b = self._builder()
        b.move_to(x1, y1)
        b.line_to(x2, y2)
        b.commit(False)
        self._add_shape(b)

    def _parse_poly(self, attrs: Attributes, closed: bool) -> None:
        points: list[tuple[float, float]] = []
        for name, value in attrs:
            if self._apply(name, value) or name != "points":
                continue
            args: list[float] = []
            pos = 0
            while pos < len(value):
                item, pos = next_path_item(value, pos)
                args.append(parse_float(item))
                if len(args) >= 2:
                    points.append((args[0], args[1]))
                    args = []
        b = self._builder()
        for index, (x, y) in enumerate(points):
            if index == 0:
                b.move_to(x, y)
            else:
                b.line_to(x, y)
        b.commit(closed)
        self._add_shape(b)

    def _parse_view_box(self, value: str) -> bool:
        numbers: list[float] = []
        pos = 0
        complete = True
        while True:
            token, pos = scan_number(value, pos)
            numbers.append(parse_float(token))
            if len(numbers) == 4:
                break
            while pos < len(value) and value[pos] in _VIEWBOX_SEPARATORS:
                pos += 1
            if pos >= len(value):
                complete = False
                break
        self.view_minx = numbers[0]
        if len(numbers) > 1:
            self.view_miny = numbers[1]
        if len(numbers) > 2:
            self.view_width = numbers[2]
        if len(numbers) > 3:
            self.view_height = numbers[3]
        return complete

    def _parse_aspect_ratio(self, value: str) -> None:
        if "none" in value:
            self.align_type = _Fit.NONE
            return
        for axis in ("x", "y"):
            for word, align in (("Min", _Align.MIN), ("Mid", _Align.MID), ("Max", _Align.MAX)):
                if axis + word in value:
                    if axis == "x":
                        self.align_x = align
                    else:
                        self.align_y = align
                    break
        self.align_type = _Fit.SLICE if "slice" in value else _Fit.MEET

    def _parse_svg(self, attrs: Attributes) -> None:
        for name, value in attrs:
            if self._apply(name, value):
                continue
            if name == "width":
                self.image.width = self._coord(value, 0.0, 0.0)
            elif name == "height":
                self.image.height = self._coord(value, 0.0, 0.0)
            elif name == "viewBox":
                if not self._parse_view_box(value):
                    return
            elif name == "preserveAspectRatio":
                self._parse_aspect_ratio(value)

    def _parse_gradient(self, attrs: Attributes, kind: PaintType) -> None:
        grad = GradientData(type=kind)
        for name, value in attrs:
            if name == "id":
                grad.id = value[:_ID_LENGTH]
            elif self._apply(name, value):
                continue
            elif name == "gradientUnits":
                grad.object_space = value == "objectBoundingBox"
            elif name == "gradientTransform":
                grad.xform = parse_transform(value)
            elif name in _GRADIENT_COORDS:
                grad = replace(grad, **{name: parse_coordinate_raw(value)})
            elif name == "spreadMethod":
                grad.spread = _SPREADS.get(value, grad.spread)
            elif name == "xlink:href":
                grad.ref = value[1:_ID_LENGTH]
        if grad.id:
            self.gradients[grad.id] = grad
        self._last_gradient = grad

    def _parse_stop(self, attrs: Attributes) -> None:
        style = self._style
        style.stop_offset = 0.0
        style.stop_color = 0
        style.stop_opacity = 1.0
        for name, value in attrs:
            self._apply(name, value)
        if self._last_gradient is not None:
            self._last_gradient.add_stop(style.stop_offset, style.stop_color, style.stop_opacity)

    def _resolve_paint(self, shape: Shape, paint: Paint, gradient_id: str) -> Paint:
        if paint.type != PaintType.UNDEF:
            return paint
        if gradient_id:
            local = _local_bounds(shape, inverse(shape.xform))
            view = (self.view_minx, self.view_miny, self.view_width, self.view_height)
            resolved = resolve_gradient(
                self.gradients, gradient_id, local, shape.xform, view, self.dpi, self._style.font_size
            )
            if resolved is not None:
                gradient, kind = resolved
                return Paint(kind, paint.color, gradient)
        return Paint(PaintType.NONE, paint.color)

    def _create_gradients(self) -> None:
        for shape in self.image.shapes:
            shape.fill = self._resolve_paint(shape, shape.fill, shape.fill_gradient)
            shape.stroke = self._resolve_paint(shape, shape.stroke, shape.stroke_gradient)

    def _scale_to_viewbox(self, units: str) -> None:
        image = self.image
        bounds = _union(shape.bounds for shape in image.shapes)

        if self.view_width == 0:
            if image.width > 0:
                self.view_width = image.width
            else:
                self.view_minx = bounds[0]
                self.view_width = bounds[2] - bounds[0]
        if self.view_height == 0:
            if image.height > 0:
                self.view_height = image.height
            else:
                self.view_miny = bounds[1]
                self.view_height = bounds[3] - bounds[1]
        if image.width == 0:
            image.width = self.view_width
        if image.height == 0:
            image.height = self.view_height

        tx = -self.view_minx
        ty = -self.view_miny
        sx = image.width / self.view_width if self.view_width > 0 else 0.0
        sy = image.height / self.view_height if self.view_height > 0 else 0.0
        unit_px = to_pixels(Coordinate(1.0, parse_units(units)), self.dpi, self._style.font_size, 0.0, 1.0)
        us = _fdiv(1.0, unit_px)

        if self.align_type != _Fit.NONE:
            sx = sy = min(sx, sy) if self.align_type == _Fit.MEET else max(sx, sy)
            tx += _fdiv(_view_align(self.view_width * sx, image.width, self.align_x), sx)
            ty += _fdiv(_view_align(self.view_height * sy, image.height, self.align_y), sy)

        sx *= us
        sy *= us
        avgs = (sx + sy) / 2.0

        def box(b: Sequence[float]) -> Bounds:
            return ((b[0] + tx) * sx, (b[1] + ty) * sy, (b[2] + tx) * sx, (b[3] + ty) * sy)

        for shape in image.shapes:
            shape.bounds = box(shape.bounds)
            for path in shape.paths:
                path.bounds = box(path.bounds)
                path.points = [((x + tx) * sx, (y + ty) * sy) for x, y in path.points]
            for paint in (shape.fill, shape.stroke):
                if paint.gradient is not None and paint.type in (
                    PaintType.LINEAR_GRADIENT,
                    PaintType.RADIAL_GRADIENT,
                ):
                    placed = multiply(multiply(paint.gradient.xform, translation(tx, ty)), scaling(sx, sy))
                    paint.gradient.xform = inverse(placed)
            shape.stroke_width *= avgs
            shape.stroke_dash_offset *= avgs
            shape.stroke_dash_array = [d * avgs for d in shape.stroke_dash_array]


def parse(text: str, units: str = "px", dpi: float = 96.0) -> Image:
    """Parse an SVG document held in ``text``."""
    parser = SvgParser(dpi)
    text = text.split("\0", 1)[0]
    for tag in iter_tags(text):
        if isinstance(tag, StartTag):
            parser.start_element(tag.name, tag.attrs)
        else:
            parser.end_element(tag.name)
    return parser.finish(units)


def parse_file(path: str | PathLike[str], units: str = "px", dpi: float = 96.0) -> Image:
    """Read and parse the SVG file at ``path``."""
    data = FilePath(path).read_bytes()
    return parse(data.decode("utf-8", errors="replace"), units, dpi)