from decimal import Decimal

import pytest

from svgtrim.numbers import (
    format_number,
    join_numbers,
    lengths_equal,
    minify_length,
    minify_length_list,
    minify_transform,
    needs_separator,
    parse_decimal,
    parse_length,
    round_decimal,
)


@pytest.mark.parametrize("value,expected", [
    ("0.5", ".5"),
    ("-0.5", "-.5"),
    ("10.000", "10"),
    ("3.14159", "3.14"),
    ("-0.001", "0"),
    ("100", "100"),
    ("1e2", "100"),
    ("007", "7"),
])
def test_format_number(value, expected):
    assert format_number(value, 2) == expected


def test_rounding_policy():
    assert format_number("0.125", 2) == ".12"
    assert format_number("0.125", 2, "half-up") == ".13"
    assert format_number(0.375, 2) == ".38"


def test_round_decimal_leaves_short_values_alone():
    value = Decimal("1.5")
    assert round_decimal(value, 3) is value


def test_needs_separator():
    assert needs_separator("1.5", ".5") is False
    assert needs_separator("1", ".5") is True
    assert needs_separator("1", "-2") is False
    assert needs_separator("1", "2") is True
    assert needs_separator("", "2") is False


def test_join_numbers_uses_fewest_separators():
    assert join_numbers([".5", ".5", "-1", "2"]) == ".5.5-1 2"
    assert join_numbers(["3"], previous="1") == " 3"


def test_parse_length():
    assert parse_length("12.5px") == (Decimal("12.5"), "px")
    assert parse_length(" 50% ") == (Decimal("50"), "%")
    assert parse_length("auto") is None
    assert parse_length("1 2") is None


def test_lengths_equal():
    assert lengths_equal("0", "0%")
    assert lengths_equal("1px", "1")
    assert lengths_equal("1.0", "1")
    assert not lengths_equal("1em", "1")
    assert not lengths_equal("1", "2")


def test_minify_length():
    assert minify_length("12.500px", 2) == "12.5px"
    assert minify_length("0.333333", 3) == ".333"
    assert minify_length("auto", 2) is None


def test_minify_length_list():
    assert minify_length_list("0, 0, 24.000, 24", 2) == "0 0 24 24"
    assert minify_length_list("5px 2.25px", 1) == "5px 2.2px"
    assert minify_length_list("none", 2) is None


def test_parse_decimal_refuses_extreme_exponents():
    assert parse_decimal("1e32") == Decimal("1e32")
    with pytest.raises(ValueError):
        parse_decimal("1e999999")
    with pytest.raises(ValueError):
        parse_decimal("1e-999999")


def test_small_lengths_never_round_to_zero():
    assert minify_length("0.004", 2) == ".004"
    assert minify_length("-0.004px", 2) == "-.004px"
    assert minify_length("0.0000", 2) == "0"
    assert minify_length_list("0 0 0.004 0.004", 2) == "0 0 .004 .004"


def test_minify_length_keeps_shorter_spelling():
    assert minify_length("1e-9", 2) == "1e-9"
    assert minify_length("1e999999", 2) is None


class TestMinifyTransform:
    def test_offsets_take_the_coordinate_precision(self):
        assert minify_transform("translate(10.123, 20.456)", 2) == "translate(10.12 20.46)"
        assert minify_transform("matrix(1,0,0,1,10.555,0)", 2) == "matrix(1 0 0 1 10.56 0)"
        assert minify_transform("rotate(45.00001 10.005 20)", 2) == "rotate(45.00001 10 20)"

    def test_factors_keep_three_more_places(self):
        assert minify_transform("scale(0.70710678)", 2) == "scale(.70711)"
        assert minify_transform("translate(1 2) , skewX(12.3456789)", 1) == "translate(1 2) skewX(12.3457)"

    def test_small_factor_is_not_zeroed(self):
        assert minify_transform("scale(0.0000001)", 2) == "scale(.0000001)"

    @pytest.mark.parametrize("text", [
        "",
        "translate(1px)",
        "perspective(1)",
        "translate(1 2 3)",
        "rotate(1 2)",
        "translate(1",
        "scale(1) junk",
    ])
    def test_rejects_non_transforms(self, text):
        assert minify_transform(text, 2) is None
