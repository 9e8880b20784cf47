import pytest

from marketdesk.textutil import (
    format_float,
    parse_float,
    parse_int,
    split_fields,
    starts_with,
    str_equal,
)


def test_split_fields_record():
    assert split_fields("Admin:ivan:0011223344:secret", ":") == [
        "Admin",
        "ivan",
        "0011223344",
        "secret",
    ]


@pytest.mark.parametrize("text", ["", "a", "a::b", ":x:", "one:two:three"])
def test_split_fields_count_invariant(text):
    fields = split_fields(text, ":")
    assert len(fields) == text.count(":") + 1
    assert ":".join(fields) == text


def test_split_fields_keeps_empty_fields():
    assert split_fields("a::b", ":") == ["a", "", "b"]


def test_split_fields_rejects_long_delimiter():
    with pytest.raises(ValueError):
        split_fields("a::b", "::")


@pytest.mark.parametrize(
    "text, expected", [("42", 42), ("-7", -7), ("+15", 15), ("0", 0), ("007", 7)]
)
def test_parse_int_valid(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize("text", ["", "-", "+", "12a", "1.5", " 3", "--1", "+-2"])
def test_parse_int_invalid(text):
    with pytest.raises(ValueError):
        parse_int(text)


@pytest.mark.parametrize(
    "text, expected",
    [("3.5", 3.5), ("-2.25", -2.25), ("10", 10.0), (".5", 0.5), ("7.", 7.0)],
)
def test_parse_float_valid(text, expected):
    assert parse_float(text) == pytest.approx(expected)


@pytest.mark.parametrize(
    "text", ["", "-", ".", "-.", "1.2.3", "+1", "abc", "1e5", " 1", "1,5"]
)
def test_parse_float_invalid(text):
    with pytest.raises(ValueError):
        parse_float(text)


def test_format_float_default_precision():
    assert format_float(3.0) == "3.00"


def test_format_float_negative():
    assert format_float(-1.25) == "-1.25"


def test_format_float_explicit_precision():
    assert format_float(0.5, 3) == "0.500"


@pytest.mark.parametrize("value", [0.5, 12.25, -7.75, 100.0625, 0.0])
def test_format_float_round_trip(value):
    assert parse_float(format_float(value, 4)) == value


@pytest.mark.parametrize("precision", [0, 1, 2, 5])
def test_format_float_digit_count(precision):
    text = format_float(19.99, precision)
    whole, dot, fraction = text.partition(".")
    assert dot == "."
    assert len(fraction) == precision
    assert whole == "19"


@pytest.mark.parametrize("value", [2.3, 9.999, 0.123456, 47.1])
def test_format_float_truncates_never_rounds_up(value):
    assert parse_float(format_float(value)) <= value
    assert value - parse_float(format_float(value)) < 0.01


def test_format_float_rejects_infinity():
    with pytest.raises(ValueError):
        format_float(float("inf"))


def test_str_equal():
    assert str_equal("login", "login") is True
    assert str_equal("login", "logout") is False
    assert str_equal("log", "login") is False


def test_starts_with():
    assert starts_with("view-product 5", "view-product") is True
    assert starts_with("view", "view-product") is False
    assert starts_with("add-to-cart 1 2", "") is True