import pytest

from svgpaths.numbers import (
    Coordinate,
    Units,
    is_coordinate,
    parse_coordinate_raw,
    parse_float,
    parse_units,
    scan_number,
    to_pixels,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1.5", 1.5),
        ("+3", 3.0),
        ("-0.25", -0.25),
        (".5", 0.5),
        ("7.", 7.0),
        ("42px", 42.0),
    ],
)
def test_parse_float_plain(text, expected):
    assert parse_float(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", ["", "abc", "-", ".", "+.e5"])
def test_parse_float_without_digits_is_zero(text):
    assert parse_float(text) == 0.0


def test_parse_float_exponent():
    assert parse_float("-2.5e2") == pytest.approx(-250.0)
    assert parse_float("1E-3") == pytest.approx(0.001)


def test_parse_float_incomplete_exponent_ignored():
    assert parse_float("3e") == pytest.approx(3.0)
    assert parse_float("3em") == pytest.approx(3.0)


def test_scan_number_stops_at_units():
    assert scan_number("12.5px", 0) == ("12.5", 4)


def test_scan_number_from_offset():
    assert scan_number("M-3,4", 1) == ("-3", 3)


def test_scan_number_keeps_exponent():
    assert scan_number("1e-3 ", 0) == ("1e-3", 4)


def test_scan_number_leaves_em_and_ex():
    assert scan_number("1em", 0) == ("1", 1)
    assert scan_number("2ex", 0) == ("2", 1)


def test_scan_number_truncates_token_but_consumes_all():
    text = "1" * 100
    token, pos = scan_number(text, 0)
    assert len(token) == 63
    assert pos == len(text)


@pytest.mark.parametrize(
    "text, units",
    [
        ("px", Units.PX),
        ("pt", Units.PT),
        ("pc", Units.PC),
        ("mm", Units.MM),
        ("cm", Units.CM),
        ("in", Units.IN),
        ("%", Units.PERCENT),
        ("em", Units.EM),
        ("ex", Units.EX),
        ("", Units.USER),
        ("q", Units.USER),
    ],
)
def test_parse_units(text, units):
    assert parse_units(text) is units


@pytest.mark.parametrize("text", ["1", "-1", "+.5", ".5", "0e"])
def test_is_coordinate_true(text):
    assert is_coordinate(text) is True


@pytest.mark.parametrize("text", ["", "M", "-", "+x", "e5"])
def test_is_coordinate_false(text):
    assert is_coordinate(text) is False


def test_parse_coordinate_raw():
    assert parse_coordinate_raw("1em") == Coordinate(1.0, Units.EM)
    assert parse_coordinate_raw("12.5mm") == Coordinate(12.5, Units.MM)
    assert parse_coordinate_raw("30") == Coordinate(30.0, Units.USER)


@pytest.mark.parametrize(
    "coord",
    [
        Coordinate(1.0, Units.IN),
        Coordinate(72.0, Units.PT),
        Coordinate(6.0, Units.PC),
        Coordinate(25.4, Units.MM),
        Coordinate(2.54, Units.CM),
    ],
)
def test_physical_units_make_one_inch(coord):
    assert to_pixels(coord, 96.0, 0.0, 0.0, 0.0) == pytest.approx(96.0)


def test_user_and_px_are_unchanged():
    assert to_pixels(Coordinate(17.0, Units.USER), 96.0, 10.0, 5.0, 5.0) == 17.0
    assert to_pixels(Coordinate(17.0, Units.PX), 96.0, 10.0, 5.0, 5.0) == 17.0


def test_em_scales_with_font_size():
    assert to_pixels(Coordinate(2.0, Units.EM), 96.0, 12.0, 0.0, 0.0) == pytest.approx(24.0)


def test_ex_is_smaller_than_em():
    em = to_pixels(Coordinate(1.0, Units.EM), 96.0, 12.0, 0.0, 0.0)
    ex = to_pixels(Coordinate(1.0, Units.EX), 96.0, 12.0, 0.0, 0.0)
    assert 0.0 < ex < em


def test_percent_is_relative_to_origin_and_length():
    full = to_pixels(Coordinate(100.0, Units.PERCENT), 96.0, 0.0, 10.0, 200.0)
    zero = to_pixels(Coordinate(0.0, Units.PERCENT), 96.0, 0.0, 10.0, 200.0)
    assert zero == pytest.approx(10.0)
    assert full == pytest.approx(210.0)