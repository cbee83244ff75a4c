from fractions import Fraction

import pytest

from svgtrim.colors import Color, colors_equal, minify_color, parse_color
from svgtrim.errors import InvalidColorValue


class TestParseColor:
    def test_hex_forms(self):
        assert parse_color("#f00") == Color(255, 0, 0)
        assert parse_color("#FF0000").rgba == (255, 0, 0, 1)
        assert parse_color("#ff000080").alpha == Fraction(128, 255)
        assert parse_color("#f008").hex_alpha

    def test_functional_forms(self):
        assert parse_color("rgb(255, 0, 0)").rgba == (255, 0, 0, 1)
        assert parse_color("rgb(100%, 0%, 0%)").rgba == (255, 0, 0, 1)
        assert parse_color("rgba(0,0,0,0.5)").alpha == Fraction(1, 2)
        assert parse_color("rgb(0 128 255 / 25%)").rgba == (0, 128, 255, Fraction(1, 4))

    def test_named(self):
        assert parse_color("CornflowerBlue").rgba == (100, 149, 237, 1)

    @pytest.mark.parametrize("value", [
        "none", "currentColor", "url(#g)", "#12", "rgb(1.5,0,0)", "rgb(50%,0,0)",
        "rgb(256,0,0)", "rgba(0,0,0,2)", "hsl(0,100%,50%)",
    ])
    def test_rejects(self, value):
        with pytest.raises(InvalidColorValue):
            parse_color(value)


class TestMinifyColor:
    @pytest.mark.parametrize("value,expected", [
        ("#ff0000", "red"),
        ("#FFFFFF", "#fff"),
        ("white", "#fff"),
        ("#abcdef", "#abcdef"),
        ("rgb(255, 0, 0)", "red"),
        ("rgba(0,0,0,0.5)", "rgba(0,0,0,.5)"),
        ("#ff000080", "#ff000080"),
        ("#ff0000ff", "red"),
        ("#ffff0088", "#ff08"),
        ("black", "#000"),
        ("RED", "red"),
    ])
    def test_shortest_form(self, value, expected):
        assert minify_color(value) == expected

    def test_ties_prefer_hex_by_default(self):
        assert minify_color("#00ffff") == "#0ff"
        assert minify_color("#0000ff") == "#00f"

    def test_ties_can_prefer_names(self):
        assert minify_color("#00ffff", tie_break="name") == "aqua"

    @pytest.mark.parametrize("value", ["none", "currentColor", "url(#g)", "inherit"])
    def test_unknown_values_pass_through(self, value):
        assert minify_color(value) == value

    def test_output_decodes_to_same_color(self):
        for value in ("#123456", "rgb(10%, 20%, 30%)", "navy", "rgba(1,2,3,0.25)", "#aabbccdd"):
            assert colors_equal(minify_color(value), value)


def test_colors_equal():
    assert colors_equal("black", "#000")
    assert colors_equal("rgb(0,0,0)", "#000000")
    assert not colors_equal("#000", "#001")
    assert colors_equal("none", "NONE")
