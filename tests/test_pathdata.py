import math

import pytest

from svgpaths.pathdata import PathBuilder, arc_to, next_path_item, parse_path_data
from svgpaths.xform import translation


def _parse(data):
    builder = PathBuilder()
    parse_path_data(data, builder)
    return builder.paths


def _points(data):
    return [p for path in _parse(data) for p in path.points]


def _same_points(a, b):
    assert len(a) == len(b)
    for p, q in zip(a, b):
        assert p == pytest.approx(q, abs=1e-9)


def test_line_to_places_controls_evenly():
    builder = PathBuilder()
    builder.move_to(0.0, 0.0)
    builder.line_to(3.0, 6.0)
    pts = builder.points
    assert len(pts) == 4
    assert pts[-1] == (3.0, 6.0)
    deltas = [(b[0] - a[0], b[1] - a[1]) for a, b in zip(pts, pts[1:])]
    for d in deltas:
        assert d == pytest.approx(deltas[0])


def test_move_to_replaces_last_point():
    builder = PathBuilder()
    builder.move_to(1.0, 1.0)
    builder.move_to(2.0, 2.0)
    assert builder.points == [(2.0, 2.0)]


def test_segments_need_a_start_point():
    builder = PathBuilder()
    builder.line_to(1.0, 1.0)
    builder.cubic_to(1, 1, 2, 2, 3, 3)
    assert builder.points == []


def test_commit_too_short_gives_nothing():
    builder = PathBuilder()
    builder.move_to(0.0, 0.0)
    assert builder.commit(True) is None
    assert builder.paths == []


def test_commit_closed_adds_closing_segment():
    builder = PathBuilder()
    builder.move_to(0.0, 0.0)
    builder.line_to(4.0, 0.0)
    builder.line_to(4.0, 4.0)
    path = builder.commit(True)
    assert path.closed is True
    assert len(path.points) == 10
    assert path.points[-1] == path.points[0]


def test_commit_applies_transform():
    builder = PathBuilder(xform=translation(10.0, 5.0))
    builder.move_to(0.0, 0.0)
    builder.line_to(1.0, 0.0)
    path = builder.commit(False)
    assert path.points[0] == pytest.approx((10.0, 5.0))
    assert path.points[-1] == pytest.approx((11.0, 5.0))
    assert builder.points[0] == (0.0, 0.0)


def test_paths_are_kept_newest_first():
    paths = _parse("M0 0 L1 0 M5 5 L6 5")
    assert len(paths) == 2
    assert paths[0].points[0] == (5.0, 5.0)
    assert paths[1].points[0] == (0.0, 0.0)


def test_next_path_item():
    assert next_path_item("  ,M10", 0) == ("M", 4)
    assert next_path_item("  ,M10", 4) == ("10", 6)
    assert next_path_item("-1.5e2x", 0) == ("-1.5e2", 6)
    assert next_path_item("2em", 0) == ("2", 1)
    assert next_path_item("   ", 0) == ("", 3)


def test_closed_square():
    paths = _parse("M0 0 L10 0 L10 10 Z")
    assert len(paths) == 1
    assert paths[0].closed is True
    assert paths[0].points[-1] == (0.0, 0.0)
    assert paths[0].bounds == pytest.approx((0.0, 0.0, 10.0, 10.0))


def test_relative_commands():
    assert _points("m1 1 l2 0")[-1] == pytest.approx((3.0, 1.0))
    _same_points(_points("M1 1 h4 v4"), _points("M1 1 L5 1 L5 5"))


def test_implicit_lineto_after_moveto():
    _same_points(_points("M0 0 10 0 10 10"), _points("M0 0 L10 0 L10 10"))


def test_commands_before_moveto_are_ignored():
    _same_points(_points("L5 5 M0 0 L1 1"), _points("M0 0 L1 1"))


def test_horizontal_and_vertical_lines():
    _same_points(_points("M0 0 H5 V5"), _points("M0 0 L5 0 L5 5"))


def test_quadratic_matches_equivalent_cubic():
    _same_points(_points("M0 0 Q3 3 6 0"), _points("M0 0 C2 2 4 2 6 0"))


def test_smooth_quadratic_reflects_control():
    _same_points(_points("M0 0 Q3 3 6 0 T12 0"), _points("M0 0 Q3 3 6 0 Q9 -3 12 0"))


def test_smooth_cubic_reflects_control():
    _same_points(_points("M0 0 C1 1 2 1 3 0 S5 -1 6 0"), _points("M0 0 C1 1 2 1 3 0 C4 -1 5 -1 6 0"))


def test_arc_points_lie_on_circle():
    pts = _points("M0 0 A5 5 0 0 1 10 0")
    assert pts[-1] == pytest.approx((10.0, 0.0), abs=1e-9)
    for x, y in pts[::3]:
        assert math.hypot(x - 5.0, y) == pytest.approx(5.0)


def test_arc_sweep_mirrors():
    one = _points("M0 0 A5 5 0 0 1 10 0")
    zero = _points("M0 0 A5 5 0 0 0 10 0")
    _same_points(zero, [(x, -y) for x, y in one])


def test_arc_compact_flags():
    _same_points(_points("M0 0 A5 5 0 0110 0"), _points("M0 0 A5 5 0 0 1 10 0"))


def test_degenerate_arc_is_a_line():
    _same_points(_points("M0 0 A0 5 0 0 1 10 0"), _points("M0 0 L10 0"))


def test_arc_to_relative_returns_end():
    builder = PathBuilder()
    builder.move_to(1.0, 1.0)
    end = arc_to(builder, 1.0, 1.0, [2.0, 2.0, 0.0, 0.0, 1.0, 4.0, 0.0], True)
    assert end == (5.0, 1.0)
    assert builder.points[-1] == pytest.approx((5.0, 1.0), abs=1e-9)


def test_drawing_continues_after_close():
    paths = _parse("M0 0 L4 0 L4 4 Z L0 4")
    assert len(paths) == 2
    assert paths[0].points[0] == (0.0, 0.0)
    assert paths[0].points[-1] == (0.0, 4.0)


def test_unknown_command_is_skipped():
    _same_points(_points("M0 0 X5 5 L1 1"), _points("M0 0 L1 1"))