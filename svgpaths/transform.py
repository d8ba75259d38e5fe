"""Parsing of the SVG ``transform`` attribute into an affine six-tuple."""

from __future__ import annotations

import math
from collections.abc import Callable

from svgpaths.numbers import parse_float, scan_number
from svgpaths.xform import (
    Transform,
    identity,
    multiply,
    premultiply,
    rotation,
    scaling,
    skew_x,
    skew_y,
    translation,
)


def _degrees(value: float) -> float:
    return value / 180.0 * math.pi


def _matrix(args: list[float]) -> Transform | None:
    if len(args) != 6:
        return None
    return (args[0], args[1], args[2], args[3], args[4], args[5])


def _translate(args: list[float]) -> Transform | None:
    if not args:
        return None
    ty = args[1] if len(args) > 1 else 0.0
    return translation(args[0], ty)


def _scale(args: list[float]) -> Transform | None:
    if not args:
        return None
    sy = args[1] if len(args) > 1 else args[0]
    return scaling(args[0], sy)


def _rotate(args: list[float]) -> Transform | None:
    if not args:
        return None
    turn = rotation(_degrees(args[0]))
    if len(args) == 1:
        return turn
    cx = args[1]
    cy = args[2] if len(args) > 2 else 0.0
    m = multiply(translation(-cx, -cy), turn)
    return multiply(m, translation(cx, cy))


def _skew_x(args: list[float]) -> Transform | None:
    return skew_x(_degrees(args[0])) if args else None


def _skew_y(args: list[float]) -> Transform | None:
    return skew_y(_degrees(args[0])) if args else None


_FUNCTIONS: tuple[tuple[str, int, Callable[[list[float]], Transform | None]], ...] = (
    ("matrix", 6, _matrix),
    ("translate", 2, _translate),
    ("scale", 2, _scale),
    ("rotate", 3, _rotate),
    ("skewX", 1, _skew_x),
    ("skewY", 1, _skew_y),
)


def _parse_args(text: str, start: int, max_args: int) -> tuple[list[float], int]:
    """Read the parenthesised numbers of a transform function at ``start``.

    Returns the numbers and how far to advance; an advance of 0 means the
    function had too many numbers and must be ignored.
    """
    open_paren = text.find("(", start)
    if open_paren < 0:
        return [], 1
    close_paren = text.find(")", open_paren)
    if close_paren < 0:
        return [], 1

    args: list[float] = []
    pos = open_paren
    while pos < close_paren:
        ch = text[pos]
        if ch in "+-." or "0" <= ch <= "9":
            if len(args) >= max_args:
                return [], 0
            token, pos = scan_number(text, pos)
            args.append(parse_float(token))
        else:
            pos += 1
    return args, close_paren - start


def parse_transform(text: str) -> Transform:
    """Parse a transform list such as ``"translate(10,20) rotate(45)"``.

    Unknown text and malformed functions are skipped.
    """
    xform = identity()
    pos = 0
    n = len(text)
    while pos < n:
        for keyword, max_args, build in _FUNCTIONS:
            if text.startswith(keyword, pos):
                break
        else:
            pos += 1
            continue

        args, advance = _parse_args(text, pos, max_args)
        if advance == 0:
            pos += 1
            continue
        pos += advance

        step = build(args)
        if step is not None:
            xform = premultiply(xform, step)
    return xform