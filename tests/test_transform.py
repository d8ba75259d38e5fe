import math

import pytest

from svgpaths import xform
from svgpaths.transform import parse_transform


def approx(t):
    return pytest.approx(t, abs=1e-9)


def test_empty_text_is_identity():
    assert parse_transform("") == xform.identity()


def test_translate_two_arguments():
    assert parse_transform("translate(10,20)") == approx(xform.translation(10, 20))


def test_translate_one_argument_defaults_y_to_zero():
    assert parse_transform("translate(5)") == approx(xform.translation(5, 0))


def test_scale_one_argument_is_uniform():
    assert parse_transform("scale(2)") == approx(xform.scaling(2, 2))


def test_scale_two_arguments():
    assert parse_transform("scale(2 3)") == approx(xform.scaling(2, 3))


def test_matrix_six_arguments():
    assert parse_transform("matrix(1 2 3 4 5 6)") == approx((1, 2, 3, 4, 5, 6))


def test_matrix_with_wrong_count_is_ignored():
    assert parse_transform("matrix(1 2 3 4 5)") == approx(xform.identity())


def test_too_many_arguments_are_ignored():
    assert parse_transform("translate(1,2,3)") == approx(xform.identity())


def test_rotate_degrees():
    assert parse_transform("rotate(90)") == approx(xform.rotation(math.pi / 2))


def test_rotate_about_point_keeps_the_point_fixed():
    t = parse_transform("rotate(90, 10, 20)")
    assert xform.transform_point(t, 10, 20) == approx((10, 20))


def test_skew_functions():
    assert parse_transform("skewX(45)") == approx(xform.skew_x(math.pi / 4))
    assert parse_transform("skewY(30)") == approx(xform.skew_y(math.pi / 6))


def test_list_applies_rightmost_first():
    expected = xform.multiply(xform.scaling(2, 2), xform.translation(10, 0))
    assert parse_transform("translate(10,0) scale(2)") == approx(expected)


def test_list_with_commas_between_functions():
    expected = xform.multiply(xform.rotation(math.pi / 2), xform.translation(3, 4))
    assert parse_transform("translate(3 4), rotate(90)") == approx(expected)


def test_unknown_text_is_skipped():
    assert parse_transform("bogus(1,2) translate(7 8)") == approx(xform.translation(7, 8))


def test_missing_parenthesis_is_ignored():
    assert parse_transform("translate 5 6") == approx(xform.identity())


def test_exponent_numbers():
    assert parse_transform("translate(1e1, -2.5E-1)") == approx(xform.translation(10, -0.25))