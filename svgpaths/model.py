"""Data model for parsed SVG images: shapes made of cubic Bézier paths."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

Point = tuple[float, float]
Bounds = tuple[float, float, float, float]
Transform = tuple[float, float, float, float, float, float]

_IDENTITY: Transform = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)
_EMPTY_BOUNDS: Bounds = (0.0, 0.0, 0.0, 0.0)


class PaintType(IntEnum):
    """How a fill or stroke is painted."""

    UNDEF = -1
    NONE = 0
    COLOR = 1
    LINEAR_GRADIENT = 2
    RADIAL_GRADIENT = 3


class SpreadType(IntEnum):
    """What a gradient does outside its defined range."""

    PAD = 0
    REFLECT = 1
    REPEAT = 2


class LineJoin(IntEnum):
    """Stroke join style."""

    MITER = 0
    ROUND = 1
    BEVEL = 2


class LineCap(IntEnum):
    """Stroke end cap style."""

    BUTT = 0
    ROUND = 1
    SQUARE = 2


class FillRule(IntEnum):
    """Rule deciding which areas of a shape are inside."""

    NONZERO = 0
    EVENODD = 1


@dataclass
class GradientStop:
    """A colour (0xAABBGGRR) at an offset along a gradient."""

    color: int
    offset: float


@dataclass
class Gradient:
    """A resolved gradient with its inverse placement transform."""

    xform: Transform = _IDENTITY
    spread: SpreadType = SpreadType.PAD
    fx: float = 0.0
    fy: float = 0.0
    stops: list[GradientStop] = field(default_factory=list)


@dataclass
class Paint:
    """Fill or stroke paint: none, a flat colour or a gradient."""

    type: PaintType = PaintType.NONE
    color: int = 0
    gradient: Gradient | None = None


@dataclass
class Path:
    """A sub-path as a start point followed by cubic segments of three points each."""

    points: list[Point] = field(default_factory=list)
    closed: bool = False
    bounds: Bounds = _EMPTY_BOUNDS

    def copy(self) -> Path:
        """Return an independent duplicate of this path."""
        return Path(points=list(self.points), closed=self.closed, bounds=self.bounds)


@dataclass
class Shape:
    """A painted shape made of one or more paths."""

    id: str = ""
    fill: Paint = field(default_factory=Paint)
    stroke: Paint = field(default_factory=Paint)
    opacity: float = 1.0
    stroke_width: float = 1.0
    stroke_dash_offset: float = 0.0
    stroke_dash_array: list[float] = field(default_factory=list)
    stroke_line_join: LineJoin = LineJoin.MITER
    stroke_line_cap: LineCap = LineCap.BUTT
    miter_limit: float = 4.0
    fill_rule: FillRule = FillRule.NONZERO
    visible: bool = True
    bounds: Bounds = _EMPTY_BOUNDS
    fill_gradient: str = ""
    stroke_gradient: str = ""
    xform: Transform = _IDENTITY
    paths: list[Path] = field(default_factory=list)


@dataclass
class Image:
    """A parsed SVG image: its size and its shapes in document order."""

    width: float = 0.0
    height: float = 0.0
    shapes: list[Shape] = field(default_factory=list)