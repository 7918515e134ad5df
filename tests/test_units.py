import math
import pytest

from istatsim.core.units import to_number, format_fixed, format_plain


@pytest.mark.parametrize("raw, expected", [
    (70, 70.0),
    (2.5, 2.5),
    ("4900", 4900.0),
    ("  12.5 ", 12.5),
    ("", 0.0),
    ("1e3", 1000.0),
    (".5", 0.5),
    ("-3", -3.0),
    ("Infinity", math.inf),
])
def test_to_number_parses(raw, expected):
    assert to_number(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "12kg", "nan", "inf", "1_000", None])
def test_to_number_unparseable_is_nan(raw):
    assert math.isnan(to_number(raw))


def test_format_fixed_rounds_half_away_from_zero():
    # Python's own formatting would give '40' and '-2' here.
    assert format_fixed(40.5, 0) == "41"
    assert format_fixed(-2.5, 0) == "-3"
    assert format_fixed(32.5, 0) == "33"


def test_format_fixed_uses_exact_binary_value():
    # 1.005 is stored as 1.00499999...
    assert format_fixed(1.005, 2) == "1.00"
    assert format_fixed(7.4 - 0.1, 2) == "7.30"


def test_format_fixed_pads_decimals():
    assert format_fixed(12, 1) == "12.0"
    assert format_fixed(7.4, 2) == "7.40"
    assert format_fixed(138, 0) == "138"


def test_format_fixed_signs():
    assert format_fixed(-0.0, 1) == "0.0"
    assert format_fixed(-7.0, 1) == "-7.0"
    assert format_fixed(-0.04, 1) == "-0.0"


def test_format_non_finite():
    assert format_fixed(math.nan, 2) == "NaN"
    assert format_fixed(math.inf, 1) == "Infinity"
    assert format_fixed(-math.inf, 0) == "-Infinity"
    assert format_plain(math.nan) == "NaN"


def test_format_plain():
    assert format_plain(6.2) == "6.2"
    assert format_plain(138.0) == "138"
    assert format_plain(-0.0) == "0"


def test_format_fixed_none_decimals_is_plain():
    assert format_fixed(6.2, None) == "6.2"
