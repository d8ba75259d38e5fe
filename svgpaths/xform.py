"""2D affine transforms as six-tuples (a, b, c, d, e, f) and Bézier bounds."""

from __future__ import annotations

import math
from collections.abc import Sequence

Transform = tuple[float, float, float, float, float, float]
Point = tuple[float, float]
Bounds = tuple[float, float, float, float]

_EPSILON = 1e-12


def identity() -> Transform:
    """Return the identity transform."""
    return (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)


def translation(tx: float, ty: float) -> Transform:
    """Return a translation by (tx, ty)."""
    return (1.0, 0.0, 0.0, 1.0, tx, ty)


def scaling(sx: float, sy: float) -> Transform:
    """Return a scale by (sx, sy)."""
    return (sx, 0.0, 0.0, sy, 0.0, 0.0)


def skew_x(angle: float) -> Transform:
    """Return a horizontal skew by ``angle`` radians."""
    return (1.0, 0.0, math.tan(angle), 1.0, 0.0, 0.0)


def skew_y(angle: float) -> Transform:
    """Return a vertical skew by ``angle`` radians."""
    return (1.0, math.tan(angle), 0.0, 1.0, 0.0, 0.0)


def rotation(angle: float) -> Transform:
    """Return a rotation by ``angle`` radians."""
    cs, sn = math.cos(angle), math.sin(angle)
    return (cs, sn, -sn, cs, 0.0, 0.0)


def multiply(t: Sequence[float], s: Sequence[float]) -> Transform:
    """Return ``t`` followed by ``s``: points go through ``t`` first."""
    return (
        t[0] * s[0] + t[1] * s[2],
        t[0] * s[1] + t[1] * s[3],
        t[2] * s[0] + t[3] * s[2],
        t[2] * s[1] + t[3] * s[3],
        t[4] * s[0] + t[5] * s[2] + s[4],
        t[4] * s[1] + t[5] * s[3] + s[5],
    )


def premultiply(t: Sequence[float], s: Sequence[float]) -> Transform:
    """Return ``s`` followed by ``t``."""
    return multiply(s, t)


def inverse(t: Sequence[float]) -> Transform:
    """Return the inverse of ``t``, or the identity if ``t`` is singular."""
    det = t[0] * t[3] - t[2] * t[1]
    if -1e-6 < det < 1e-6:
        return identity()
    invdet = 1.0 / det
    return (
        t[3] * invdet,
        -t[1] * invdet,
        -t[2] * invdet,
        t[0] * invdet,
        (t[2] * t[5] - t[3] * t[4]) * invdet,
        (t[1] * t[4] - t[0] * t[5]) * invdet,
    )


def transform_point(t: Sequence[float], x: float, y: float) -> Point:
    """Apply ``t`` to the point (x, y)."""
    return (x * t[0] + y * t[2] + t[4], x * t[1] + y * t[3] + t[5])


def transform_vector(t: Sequence[float], x: float, y: float) -> Point:
    """Apply ``t`` to the vector (x, y), ignoring translation."""
    return (x * t[0] + y * t[2], x * t[1] + y * t[3])


def average_scale(t: Sequence[float]) -> float:
    """Return the mean of the scale factors along both axes."""
    sx = math.hypot(t[0], t[2])
    sy = math.hypot(t[1], t[3])
    return (sx + sy) * 0.5


def eval_bezier(t: float, p0: float, p1: float, p2: float, p3: float) -> float:
    """Evaluate one coordinate of a cubic Bézier at parameter ``t``."""
    it = 1.0 - t
    return it * it * it * p0 + 3.0 * it * it * t * p1 + 3.0 * it * t * t * p2 + t * t * t * p3


def _in_bounds(pt: Point, bounds: Sequence[float]) -> bool:
    return bounds[0] <= pt[0] <= bounds[2] and bounds[1] <= pt[1] <= bounds[3]


def _extrema(v0: float, v1: float, v2: float, v3: float) -> list[float]:
    a = -3.0 * v0 + 9.0 * v1 - 9.0 * v2 + 3.0 * v3
    b = 6.0 * v0 - 12.0 * v1 + 6.0 * v2
    c = 3.0 * v1 - 3.0 * v0
    if abs(a) < _EPSILON:
        candidates = [-c / b] if abs(b) > _EPSILON else []
    else:
        disc = b * b - 4.0 * c * a
        if disc <= _EPSILON:
            candidates = []
        else:
            root = math.sqrt(disc)
            candidates = [(-b + root) / (2.0 * a), (-b - root) / (2.0 * a)]
    return [t for t in candidates if _EPSILON < t < 1.0 - _EPSILON]


def curve_bounds(curve: Sequence[Point]) -> Bounds:
    """Return the tight bounding box of a cubic Bézier given as four points."""
    v0, v1, v2, v3 = curve
    bounds = [
        min(v0[0], v3[0]),
        min(v0[1], v3[1]),
        max(v0[0], v3[0]),
        max(v0[1], v3[1]),
    ]
    if _in_bounds(v1, bounds) and _in_bounds(v2, bounds):
        return tuple(bounds)
    for axis in (0, 1):
        for t in _extrema(v0[axis], v1[axis], v2[axis], v3[axis]):
            v = eval_bezier(t, v0[axis], v1[axis], v2[axis], v3[axis])
            bounds[axis] = min(bounds[axis], v)
            bounds[axis + 2] = max(bounds[axis + 2], v)
    return tuple(bounds)