import pytest

from svgpaths.colors import (
    parse_color,
    parse_color_hex,
    parse_color_name,
    parse_color_rgb,
    rgb,
)

GRAY = rgb(128, 128, 128)


def test_rgb_puts_red_in_low_byte():
    assert rgb(1, 2, 3) == 0x030201


def test_rgb_channels_recoverable():
    value = rgb(17, 34, 51)
    assert (value & 0xFF, (value >> 8) & 0xFF, (value >> 16) & 0xFF) == (17, 34, 51)


def test_hex_six_digits():
    assert parse_color_hex("#ff0000") == rgb(255, 0, 0)
    assert parse_color_hex("#0a0b0c") == rgb(0x0A, 0x0B, 0x0C)


def test_hex_three_digits_expands():
    assert parse_color_hex("#abc") == rgb(0xAA, 0xBB, 0xCC)


def test_hex_short_and_long_agree():
    assert parse_color_hex("#f0a") == parse_color_hex("#ff00aa")


def test_hex_invalid_is_gray():
    assert parse_color_hex("#") == GRAY
    assert parse_color_hex("#zzz") == GRAY


def test_rgb_integers():
    assert parse_color_rgb("rgb(255, 0, 0)") == rgb(255, 0, 0)
    assert parse_color_rgb("rgb(10,20,30)") == rgb(10, 20, 30)


def test_rgb_integers_clipped():
    assert parse_color_rgb("rgb(300, 0, 1000)") == rgb(255, 0, 255)


def test_rgb_percentages():
    assert parse_color_rgb("rgb(100%, 0%, 100%)") == rgb(255, 0, 255)
    assert parse_color_rgb("rgb( 0% , 100.0% , 0%)") == rgb(0, 255, 0)


def test_rgb_percentage_without_fraction_digits_is_gray():
    assert parse_color_rgb("rgb(50.%, 0%, 0%)") == GRAY


def test_rgb_negative_percentage_is_gray():
    assert parse_color_rgb("rgb(-10%, 0%, 0%)") == GRAY


def test_rgb_missing_percent_sign_is_gray():
    assert parse_color_rgb("rgb(1.5, 2, 3)") == GRAY


def test_rgb_truncated_is_gray():
    assert parse_color_rgb("rgb(") == GRAY


@pytest.mark.parametrize(
    "name, expected",
    [
        ("red", rgb(255, 0, 0)),
        ("green", rgb(0, 128, 0)),
        ("blue", rgb(0, 0, 255)),
        ("black", rgb(0, 0, 0)),
        ("white", rgb(255, 255, 255)),
    ],
)
def test_named_colors(name, expected):
    assert parse_color_name(name) == expected


def test_grey_and_gray_agree():
    assert parse_color_name("grey") == parse_color_name("gray") == GRAY


def test_unknown_name_is_gray():
    assert parse_color_name("chartreuse") == GRAY
    assert parse_color_name("Red") == GRAY


def test_parse_color_dispatch():
    assert parse_color("#00ff00") == rgb(0, 255, 0)
    assert parse_color("rgb(0, 0, 255)") == rgb(0, 0, 255)
    assert parse_color("yellow") == rgb(255, 255, 0)


def test_parse_color_skips_leading_spaces():
    assert parse_color("   #0000ff") == rgb(0, 0, 255)
    assert parse_color("  cyan") == parse_color("cyan")


def test_parse_color_trailing_space_in_name_is_gray():
    assert parse_color("red ") == GRAY