"""Building cubic Bézier paths and parsing SVG path data into them."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from svgpaths.model import Path, Point
from svgpaths.numbers import is_coordinate, parse_float, scan_number
from svgpaths.xform import Transform, curve_bounds, identity, transform_point, transform_vector

_SEPARATORS = " \t\n\v\f\r,"
_MAX_ARGS = 10
_ARGS_PER_COMMAND = {
    "v": 1, "V": 1, "h": 1, "H": 1,
    "m": 2, "M": 2, "l": 2, "L": 2, "t": 2, "T": 2,
    "q": 4, "Q": 4, "s": 4, "S": 4,
    "c": 6, "C": 6,
    "a": 7, "A": 7,
    "z": 0, "Z": 0,
}


@dataclass
class PathBuilder:
    """Collects points of the current sub-path and the sub-paths committed so far.

    Points are kept untransformed; ``xform`` is applied when a sub-path is
    committed. Committed paths are kept newest first.
    """

    xform: Transform = field(default_factory=identity)
    points: list[Point] = field(default_factory=list)
    paths: list[Path] = field(default_factory=list)

    def reset(self) -> None:
        """Discard the points of the current sub-path."""
        self.points.clear()

    def move_to(self, x: float, y: float) -> None:
        """Set the start point, replacing the last point if there is one."""
        if self.points:
            self.points[-1] = (x, y)
        else:
            self.points.append((x, y))

    def line_to(self, x: float, y: float) -> None:
        """Add a straight segment as a cubic with control points at the thirds."""
        if not self.points:
            return
        px, py = self.points[-1]
        dx, dy = x - px, y - py
        self.points.extend([
            (px + dx / 3.0, py + dy / 3.0),
            (x - dx / 3.0, y - dy / 3.0),
            (x, y),
        ])

    def cubic_to(self, cx1: float, cy1: float, cx2: float, cy2: float, x: float, y: float) -> None:
        """Add a cubic Bézier segment."""
        if self.points:
            self.points.extend([(cx1, cy1), (cx2, cy2), (x, y)])

    def commit(self, closed: bool) -> Path | None:
        """Turn the current points into a transformed path and store it.

        Returns the new path, or None if the points do not form one.
        """
        if len(self.points) < 4:
            return None
        if closed:
            self.line_to(*self.points[0])
        if len(self.points) % 3 != 1:
            return None
        pts = [transform_point(self.xform, x, y) for x, y in self.points]
        segments = zip(pts[0:-1:3], pts[1::3], pts[2::3], pts[3::3])
        boxes = [curve_bounds(segment) for segment in segments]
        bounds = (
            min(b[0] for b in boxes),
            min(b[1] for b in boxes),
            max(b[2] for b in boxes),
            max(b[3] for b in boxes),
        )
        path = Path(points=pts, closed=bool(closed), bounds=bounds)
        self.paths.insert(0, path)
        return path


def _skip_separators(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in _SEPARATORS:
        pos += 1
    return pos


def next_path_item(text: str, pos: int) -> tuple[str, int]:
    """Return the next number or command letter at ``pos`` and the position after it.

    An empty item means the end of the text was reached.
    """
    pos = _skip_separators(text, pos)
    if pos >= len(text):
        return "", pos
    ch = text[pos]
    if ch in "+-." or "0" <= ch <= "9":
        return scan_number(text, pos)
    return ch, pos + 1


def _next_arc_flag(text: str, pos: int) -> tuple[str, int]:
    pos = _skip_separators(text, pos)
    if pos < len(text) and text[pos] in "01":
        return text[pos], pos + 1
    return "", pos


def _vector_angle(ux: float, uy: float, vx: float, vy: float) -> float:
    denominator = math.hypot(ux, uy) * math.hypot(vx, vy)
    r = (ux * vx + uy * vy) / denominator if denominator else 1.0
    r = min(max(r, -1.0), 1.0)
    return (-1.0 if ux * vy < uy * vx else 1.0) * math.acos(r)


def arc_to(builder: PathBuilder, x: float, y: float, args: Sequence[float], relative: bool) -> Point:
    """Add an elliptical arc from (x, y) as cubic segments; return its end point.

    ``args`` are rx, ry, x-axis rotation in degrees, large-arc flag, sweep
    flag and the end point.
    """
    rx = abs(args[0])
    ry = abs(args[1])
    rotx = args[2] / 180.0 * math.pi
    large_arc = abs(args[3]) > 1e-6
    sweep = abs(args[4]) > 1e-6
    x1, y1 = x, y
    if relative:
        x2, y2 = x + args[5], y + args[6]
    else:
        x2, y2 = args[5], args[6]

    dx, dy = x1 - x2, y1 - y2
    if math.hypot(dx, dy) < 1e-6 or rx < 1e-6 or ry < 1e-6:
        builder.line_to(x2, y2)
        return x2, y2

    sinrx, cosrx = math.sin(rotx), math.cos(rotx)

    # Convert to center point parameterization.
    x1p = cosrx * dx / 2.0 + sinrx * dy / 2.0
    y1p = -sinrx * dx / 2.0 + cosrx * dy / 2.0
    d = x1p * x1p / (rx * rx) + y1p * y1p / (ry * ry)
    if d > 1:
        d = math.sqrt(d)
        rx *= d
        ry *= d

    s = 0.0
    sa = rx * rx * ry * ry - rx * rx * y1p * y1p - ry * ry * x1p * x1p
    sb = rx * rx * y1p * y1p + ry * ry * x1p * x1p
    sa = max(sa, 0.0)
    if sb > 0.0:
        s = math.sqrt(sa / sb)
    if large_arc == sweep:
        s = -s
    cxp = s * rx * y1p / ry
    cyp = s * -ry * x1p / rx

    cx = (x1 + x2) / 2.0 + cosrx * cxp - sinrx * cyp
    cy = (y1 + y2) / 2.0 + sinrx * cxp + cosrx * cyp

    ux, uy = (x1p - cxp) / rx, (y1p - cyp) / ry
    vx, vy = (-x1p - cxp) / rx, (-y1p - cyp) / ry
    a1 = _vector_angle(1.0, 0.0, ux, uy)
    da = _vector_angle(ux, uy, vx, vy)
    if not sweep and da > 0:
        da -= 2 * math.pi
    elif sweep and da < 0:
        da += 2 * math.pi

    t = (cosrx, sinrx, -sinrx, cosrx, cx, cy)

    # At most 90 degrees per segment.
    ndivs = int(abs(da) / (math.pi * 0.5) + 1.0)
    hda = (da / ndivs) / 2.0
    if -1e-3 < hda < 1e-3:
        hda *= 0.5
    else:
        hda = (1.0 - math.cos(hda)) / math.sin(hda)
    kappa = abs(4.0 / 3.0 * hda)
    if da < 0.0:
        kappa = -kappa

    previous: tuple[float, float, float, float] | None = None
    for i in range(ndivs + 1):
        a = a1 + da * (i / ndivs)
        ca, sa_ = math.cos(a), math.sin(a)
        px, py = transform_point(t, ca * rx, sa_ * ry)
        tanx, tany = transform_vector(t, -sa_ * rx * kappa, ca * ry * kappa)
        if previous is not None:
            ppx, ppy, ptanx, ptany = previous
            builder.cubic_to(ppx + ptanx, ppy + ptany, px - tanx, py - tany, px, py)
        previous = (px, py, tanx, tany)

    return x2, y2


@dataclass
class _Pen:
    x: float = 0.0
    y: float = 0.0
    ctrl_x: float = 0.0
    ctrl_y: float = 0.0

    def settle(self) -> None:
        self.ctrl_x, self.ctrl_y = self.x, self.y


def _quad_to(builder: PathBuilder, pen: _Pen, cx: float, cy: float, x2: float, y2: float) -> None:
    x1, y1 = pen.x, pen.y
    builder.cubic_to(
        x1 + 2.0 / 3.0 * (cx - x1), y1 + 2.0 / 3.0 * (cy - y1),
        x2 + 2.0 / 3.0 * (cx - x2), y2 + 2.0 / 3.0 * (cy - y2),
        x2, y2,
    )
    pen.ctrl_x, pen.ctrl_y = cx, cy
    pen.x, pen.y = x2, y2


def _execute(builder: PathBuilder, pen: _Pen, cmd: str, args: list[float]) -> None:
    relative = cmd.islower()
    op = cmd.upper()
    ox, oy = (pen.x, pen.y) if relative else (0.0, 0.0)
    if op == "L":
        pen.x, pen.y = ox + args[0], oy + args[1]
        builder.line_to(pen.x, pen.y)
        pen.settle()
    elif op == "H":
        pen.x = ox + args[0]
        builder.line_to(pen.x, pen.y)
        pen.settle()
    elif op == "V":
        pen.y = oy + args[0]
        builder.line_to(pen.x, pen.y)
        pen.settle()
    elif op == "C":
        cx2, cy2 = ox + args[2], oy + args[3]
        x2, y2 = ox + args[4], oy + args[5]
        builder.cubic_to(ox + args[0], oy + args[1], cx2, cy2, x2, y2)
        pen.ctrl_x, pen.ctrl_y, pen.x, pen.y = cx2, cy2, x2, y2
    elif op == "S":
        cx1, cy1 = 2 * pen.x - pen.ctrl_x, 2 * pen.y - pen.ctrl_y
        cx2, cy2 = ox + args[0], oy + args[1]
        x2, y2 = ox + args[2], oy + args[3]
        builder.cubic_to(cx1, cy1, cx2, cy2, x2, y2)
        pen.ctrl_x, pen.ctrl_y, pen.x, pen.y = cx2, cy2, x2, y2
    elif op == "Q":
        _quad_to(builder, pen, ox + args[0], oy + args[1], ox + args[2], oy + args[3])
    elif op == "T":
        cx, cy = 2 * pen.x - pen.ctrl_x, 2 * pen.y - pen.ctrl_y
        _quad_to(builder, pen, cx, cy, ox + args[0], oy + args[1])
    elif op == "A":
        pen.x, pen.y = arc_to(builder, pen.x, pen.y, args, relative)
        pen.settle()
    elif len(args) >= 2:
        pen.x, pen.y = args[-2], args[-1]
        pen.settle()


def parse_path_data(data: str, builder: PathBuilder) -> None:
    """Parse the ``d`` attribute of a path element into ``builder``'s paths."""
    builder.reset()
    pen = _Pen()
    cmd = ""
    args: list[float] = []
    required = 0
    started = False
    closed = False
    pos = 0
    while pos < len(data):
        item = ""
        if cmd in ("A", "a") and len(args) in (3, 4):
            item, pos = _next_arc_flag(data, pos)
        if not item:
            item, pos = next_path_item(data, pos)
        if not item:
            break

        if cmd and is_coordinate(item):
            if len(args) < _MAX_ARGS:
                args.append(parse_float(item))
            if len(args) >= required:
                if cmd in ("M", "m"):
                    ox, oy = (pen.x, pen.y) if cmd == "m" else (0.0, 0.0)
                    pen.x, pen.y = ox + args[0], oy + args[1]
                    builder.move_to(pen.x, pen.y)
                    # Further coordinate pairs after a moveto are linetos.
                    cmd = "l" if cmd == "m" else "L"
                    required = _ARGS_PER_COMMAND[cmd]
                    pen.settle()
                    started = True
                else:
                    _execute(builder, pen, cmd, args)
                args = []
            continue

        cmd = item[0]
        if cmd in ("M", "m"):
            if builder.points:
                builder.commit(closed)
            builder.reset()
            closed = False
            args = []
        elif not started:
            # Nothing but a moveto may come before the first point is set.
            cmd = ""
        if cmd in ("Z", "z"):
            closed = True
            if builder.points:
                pen.x, pen.y = builder.points[0]
                pen.settle()
                builder.commit(closed)
            builder.reset()
            builder.move_to(pen.x, pen.y)
            closed = False
            args = []
        required = _ARGS_PER_COMMAND.get(cmd, -1)
        if required == -1:
            cmd = ""
            required = 0

    if builder.points:
        builder.commit(closed)