"""Locale-independent number scanning and SVG length units."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum

_DIGITS = re.compile(r"[0-9]+")
_EXPONENT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_TOKEN_SIZE = 64


class Units(IntEnum):
    """Units a length or coordinate may be given in."""

    USER = 0
    PX = 1
    PT = 2
    PC = 3
    MM = 4
    CM = 5
    IN = 6
    PERCENT = 7
    EM = 8
    EX = 9


@dataclass(frozen=True)
class Coordinate:
    """A numeric value together with its units."""

    value: float
    units: Units = Units.USER


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def parse_float(text: str) -> float:
    """Parse a leading decimal number; return 0.0 if there is none."""
    pos = 0
    sign = 1.0
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1.0
        pos = 1

    result = 0.0
    has_number = False
    match = _DIGITS.match(text, pos)
    if match:
        result = float(int(match.group()))
        has_number = True
        pos = match.end()

    if text.startswith(".", pos):
        pos += 1
        match = _DIGITS.match(text, pos)
        if match:
            digits = match.group()
            result += int(digits) / 10 ** len(digits)
            has_number = True
            pos = match.end()

    if not has_number:
        return 0.0

    if text[pos:pos + 1] in ("e", "E"):
        match = _EXPONENT.match(text, pos + 1)
        if match:
            try:
                scale = 10.0 ** int(match.group(1))
            except OverflowError:
                scale = float("inf")
            result *= scale

    return result * sign


def scan_number(text: str, pos: int) -> tuple[str, int]:
    """Scan a number starting at ``pos``; return its text and the position after it.

    The returned text is cut to 63 characters, but scanning goes on to the
    end of the number.
    """
    last = _TOKEN_SIZE - 1
    chars: list[str] = []
    n = len(text)

    def take() -> None:
        nonlocal pos
        if len(chars) < last:
            chars.append(text[pos])
        pos += 1

    def take_digits() -> None:
        while pos < n and _is_digit(text[pos]):
            take()

    if pos < n and text[pos] in "+-":
        take()
    take_digits()
    if pos < n and text[pos] == ".":
        take()
        take_digits()
    if pos < n and text[pos] in "eE" and text[pos + 1:pos + 2] not in ("m", "x"):
        take()
        if pos < n and text[pos] in "+-":
            take()
        take_digits()
    return "".join(chars), pos


_UNIT_PREFIXES = (
    ("px", Units.PX),
    ("pt", Units.PT),
    ("pc", Units.PC),
    ("mm", Units.MM),
    ("cm", Units.CM),
    ("in", Units.IN),
    ("%", Units.PERCENT),
    ("em", Units.EM),
    ("ex", Units.EX),
)


def parse_units(text: str) -> Units:
    """Return the units named at the start of ``text``, or USER."""
    for prefix, units in _UNIT_PREFIXES:
        if text.startswith(prefix):
            return units
    return Units.USER


def is_coordinate(text: str) -> bool:
    """Tell whether ``text`` starts like a number."""
    rest = text[1:] if text[:1] in ("+", "-") else text
    return rest[:1] == "." or (rest[:1] != "" and _is_digit(rest[0]))


def parse_coordinate_raw(text: str) -> Coordinate:
    """Parse a number followed by optional units."""
    token, pos = scan_number(text, 0)
    return Coordinate(parse_float(token), parse_units(text[pos:]))


def to_pixels(coord: Coordinate, dpi: float, font_size: float, orig: float, length: float) -> float:
    """Convert ``coord`` to pixels; percentages are taken of ``length`` from ``orig``."""
    value = coord.value
    units = coord.units
    if units == Units.PT:
        return value / 72.0 * dpi
    if units == Units.PC:
        return value / 6.0 * dpi
    if units == Units.MM:
        return value / 25.4 * dpi
    if units == Units.CM:
        return value / 2.54 * dpi
    if units == Units.IN:
        return value * dpi
    if units == Units.EM:
        return value * font_size
    if units == Units.EX:
        return value * font_size * 0.52
    if units == Units.PERCENT:
        return orig + value / 100.0 * length
    return value