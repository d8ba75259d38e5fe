"""A minimal, forgiving tag scanner for SVG documents."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

_SPACE = " \t\n\v\f\r"
_MAX_ATTRIBUTES = 127


@dataclass(frozen=True)
class StartTag:
    """An opening tag with its attributes in document order."""

    name: str
    attrs: tuple[tuple[str, str], ...] = ()


@dataclass(frozen=True)
class EndTag:
    """A closing tag, or the closing half of a self-closing tag."""

    name: str


def _skip_space(s: str, pos: int) -> int:
    while pos < len(s) and s[pos] in _SPACE:
        pos += 1
    return pos


def _parse_element(s: str) -> list[StartTag | EndTag]:
    n = len(s)
    pos = _skip_space(s, 0)
    end = False
    if pos < n and s[pos] == "/":
        pos += 1
        end = True
    start = not end

    # Comments, declarations and processing instructions carry nothing.
    if pos >= n or s[pos] in "?!":
        return []

    name_start = pos
    while pos < n and s[pos] not in _SPACE:
        pos += 1
    name = s[name_start:pos]
    pos = min(pos + 1, n)

    attrs: list[tuple[str, str]] = []
    while not end and pos < n and len(attrs) < _MAX_ATTRIBUTES:
        pos = _skip_space(s, pos)
        if pos >= n:
            break
        if s[pos] == "/":
            end = True
            break
        attr_start = pos
        while pos < n and s[pos] not in _SPACE and s[pos] != "=":
            pos += 1
        attr_name = s[attr_start:pos]
        if pos < n:
            pos += 1
        while pos < n and s[pos] not in "\"'":
            pos += 1
        if pos >= n:
            break
        quote = s[pos]
        pos += 1
        value_start = pos
        while pos < n and s[pos] != quote:
            pos += 1
        attrs.append((attr_name, s[value_start:pos]))
        if pos < n:
            pos += 1

    tags: list[StartTag | EndTag] = []
    if start:
        tags.append(StartTag(name, tuple(attrs)))
    if end:
        tags.append(EndTag(name))
    return tags


def iter_tags(text: str) -> Iterator[StartTag | EndTag]:
    """Yield the start and end tags of ``text`` in order; text content is dropped."""
    pos = 0
    while True:
        lt = text.find("<", pos)
        if lt < 0:
            return
        gt = text.find(">", lt + 1)
        if gt < 0:
            return
        yield from _parse_element(text[lt + 1:gt])
        pos = gt + 1