"""Gradient definitions and their resolution into placed gradients."""

from __future__ import annotations

import bisect
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from svgpaths.model import Bounds, Gradient, GradientStop, PaintType, SpreadType
from svgpaths.numbers import Coordinate, Units, to_pixels
from svgpaths.xform import Transform, identity, multiply

_MAX_REF_DEPTH = 32


def _fdiv(a: float, b: float) -> float:
    """Divide like IEEE floats do: by zero gives an infinity or NaN."""
    if b:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


@dataclass
class GradientData:
    """A gradient element as written in the document, before placement."""

    id: str = ""
    ref: str = ""
    type: PaintType = PaintType.LINEAR_GRADIENT
    x1: Coordinate = Coordinate(0.0, Units.PERCENT)
    y1: Coordinate = Coordinate(0.0, Units.PERCENT)
    x2: Coordinate = Coordinate(100.0, Units.PERCENT)
    y2: Coordinate = Coordinate(0.0, Units.PERCENT)
    cx: Coordinate = Coordinate(50.0, Units.PERCENT)
    cy: Coordinate = Coordinate(50.0, Units.PERCENT)
    r: Coordinate = Coordinate(50.0, Units.PERCENT)
    fx: Coordinate = Coordinate(0.0)
    fy: Coordinate = Coordinate(0.0)
    spread: SpreadType = SpreadType.PAD
    object_space: bool = True
    xform: Transform = field(default_factory=identity)
    stops: list[GradientStop] = field(default_factory=list)

    def add_stop(self, offset: float, color: int, opacity: float) -> GradientStop:
        """Insert a stop, keeping stops ordered by offset; return it."""
        stop = GradientStop(color | (int(opacity * 255) << 24), offset)
        index = bisect.bisect_right([s.offset for s in self.stops], offset)
        self.stops.insert(index, stop)
        return stop


def _find_stops(gradients: Mapping[str, GradientData], data: GradientData) -> list[GradientStop]:
    ref = data
    for _ in range(_MAX_REF_DEPTH + 1):
        if ref.stops:
            return ref.stops
        following = gradients.get(ref.ref) if ref.ref else None
        if following is None or following is ref:
            return []
        ref = following
    return []


def resolve_gradient(
    gradients: Mapping[str, GradientData],
    gradient_id: str,
    local_bounds: Bounds,
    xform: Sequence[float],
    view: Sequence[float],
    dpi: float,
    font_size: float,
) -> tuple[Gradient, PaintType] | None:
    """Place the gradient named ``gradient_id`` for a shape.

    ``local_bounds`` is the shape's box in its own coordinates, ``xform`` its
    transform and ``view`` the (min x, min y, width, height) of the viewport.
    Stops are taken from the first gradient in the ``href`` chain that has
    any. Returns the gradient and its paint type, or None if it cannot be
    resolved.
    """
    if not gradient_id:
        return None
    data = gradients.get(gradient_id)
    if data is None:
        return None
    stops = _find_stops(gradients, data)
    if not stops:
        return None

    if data.object_space:
        ox, oy = local_bounds[0], local_bounds[1]
        sw = local_bounds[2] - local_bounds[0]
        sh = local_bounds[3] - local_bounds[1]
    else:
        ox, oy, sw, sh = view[0], view[1], view[2], view[3]
    sl = math.hypot(sw, sh) / math.sqrt(2.0)

    def px(coord: Coordinate, orig: float, length: float) -> float:
        return to_pixels(coord, dpi, font_size, orig, length)

    fx = fy = 0.0
    if data.type == PaintType.LINEAR_GRADIENT:
        x1 = px(data.x1, ox, sw)
        y1 = px(data.y1, oy, sh)
        x2 = px(data.x2, ox, sw)
        y2 = px(data.y2, oy, sh)
        dx, dy = x2 - x1, y2 - y1
        base: Transform = (dy, -dx, dx, dy, x1, y1)
    else:
        cx = px(data.cx, ox, sw)
        cy = px(data.cy, oy, sh)
        focus_x = px(data.fx, ox, sw)
        focus_y = px(data.fy, oy, sh)
        r = px(data.r, 0.0, sl)
        base = (r, 0.0, 0.0, r, cx, cy)
        fx = _fdiv(focus_x, r)
        fy = _fdiv(focus_y, r)

    placed = multiply(multiply(base, data.xform), xform)
    gradient = Gradient(
        xform=placed,
        spread=data.spread,
        fx=fx,
        fy=fy,
        stops=[GradientStop(s.color, s.offset) for s in stops],
    )
    return gradient, data.type