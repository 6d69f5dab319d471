import pytest

from songlist.utils.parsing import parse_float_or_default, parse_int_or_default


@pytest.mark.parametrize("text,expected", [
    ("2005", 2005),
    ("0", 0),
    ("+1988", 1988),
    ("4294967295", 4294967295),
])
def test_parse_int(text, expected):
    assert parse_int_or_default(text) == (expected, None)


@pytest.mark.parametrize("text", ["", "abc", "-1", " 2005", "2005 ", "20.05", "4294967296", "2_005"])
def test_parse_int_falls_back(text):
    value, warning = parse_int_or_default(text)
    assert value == 0
    assert warning


def test_parse_int_custom_default():
    assert parse_int_or_default("x", default=1970)[0] == 1970


@pytest.mark.parametrize("text,expected", [
    ("4.41", 4.41),
    ("3", 3.0),
    ("-1.5", -1.5),
    ("1e1", 10.0),
])
def test_parse_float(text, expected):
    value, warning = parse_float_or_default(text)
    assert value == pytest.approx(expected)
    assert warning is None


@pytest.mark.parametrize("text", ["", "four", " 4.41", "4.41\n", "4_41", "4,41"])
def test_parse_float_falls_back(text):
    value, warning = parse_float_or_default(text)
    assert value == 0.0
    assert "Failed to parse float" in warning
