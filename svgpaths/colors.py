"""Parsing of SVG colour values into packed 0x00BBGGRR integers."""

from __future__ import annotations

import re

from svgpaths.numbers import parse_float

_SPACE = " \t\n\v\f\r"
_HEX = "0123456789abcdefABCDEF"
_RGB_INTEGERS = re.compile(
    r"rgb\(\s*([+-]?[0-9]+),\s*([+-]?[0-9]+),\s*([+-]?[0-9]+)"
)


def rgb(r: int, g: int, b: int) -> int:
    """Pack red, green and blue into one integer, red in the low byte."""
    return r | (g << 8) | (b << 16)


_GRAY = rgb(128, 128, 128)

_NAMED_COLORS = {
    "red": rgb(255, 0, 0),
    "green": rgb(0, 128, 0),
    "blue": rgb(0, 0, 255),
    "yellow": rgb(255, 255, 0),
    "cyan": rgb(0, 255, 255),
    "magenta": rgb(255, 0, 255),
    "black": rgb(0, 0, 0),
    "grey": rgb(128, 128, 128),
    "gray": rgb(128, 128, 128),
    "white": rgb(255, 255, 255),
}


def _scan_hex_fields(text: str, width: int) -> list[int] | None:
    """Read three hex fields of at most ``width`` digits after a leading '#'."""
    if not text.startswith("#"):
        return None
    pos = 1
    values: list[int] = []
    for _ in range(3):
        while pos < len(text) and text[pos] in _SPACE:
            pos += 1
        end = pos
        while end < len(text) and end - pos < width and text[end] in _HEX:
            end += 1
        if end == pos:
            return None
        values.append(int(text[pos:end], 16))
        pos = end
    return values


def parse_color_hex(text: str) -> int:
    """Parse '#rrggbb' or '#rgb'; return gray if neither fits."""
    fields = _scan_hex_fields(text, 2)
    if fields is not None:
        return rgb(*fields)
    fields = _scan_hex_fields(text, 1)
    if fields is not None:
        return rgb(*(v * 17 for v in fields))
    return _GRAY


def _clip(value: int) -> int:
    # Negative values wrap around as unsigned, so they clip to the maximum.
    return 255 if value < 0 or value > 255 else value


def _parse_percentages(text: str) -> list[int] | None:
    pos = 4
    n = len(text)
    values: list[float] = []
    for delimiter in ",,)":
        while pos < n and text[pos] in _SPACE:
            pos += 1
        if pos < n and text[pos] == "+":
            pos += 1
        if pos >= n:
            return None
        values.append(parse_float(text[pos:]))
        while pos < n and text[pos].isascii() and text[pos].isdigit():
            pos += 1
        if pos < n and text[pos] == ".":
            pos += 1
            if not (pos < n and text[pos].isascii() and text[pos].isdigit()):
                return None
            while pos < n and text[pos].isascii() and text[pos].isdigit():
                pos += 1
        if pos < n and text[pos] == "%":
            pos += 1
        else:
            return None
        while pos < n and text[pos] in _SPACE:
            pos += 1
        if pos < n and text[pos] == delimiter:
            pos += 1
        else:
            return None
    return [int(v * 2.55 + 0.5) for v in values]


def parse_color_rgb(text: str) -> int:
    """Parse 'rgb(r, g, b)' with integers or percentages; gray on error."""
    match = _RGB_INTEGERS.match(text)
    if match:
        channels = [int(group) for group in match.groups()]
    else:
        parsed = _parse_percentages(text)
        channels = parsed if parsed is not None else [128, 128, 128]
    r, g, b = (_clip(c) for c in channels)
    return rgb(r, g, b)


def parse_color_name(text: str) -> int:
    """Look up a colour keyword; return gray if it is unknown."""
    return _NAMED_COLORS.get(text, _GRAY)


def parse_color(text: str) -> int:
    """Parse any supported colour notation."""
    text = text.lstrip(" ")
    if text.startswith("#"):
        return parse_color_hex(text)
    if text.startswith("rgb("):
        return parse_color_rgb(text)
    return parse_color_name(text)