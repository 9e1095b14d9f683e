import pytest

from int_tools.codec import SignMarkers, can_parse, format_int, parse
from int_tools.errors import InvalidRadixError


@pytest.mark.parametrize(
    "text,radix,expected",
    [
        ("42", None, 42),
        ("+42", None, 42),
        ("-42", None, -42),
        ("0x1A", None, 26),
        ("0X1a", None, 26),
        ("-0x1A", None, -26),
        ("0x1A", 16, 26),
        ("ff", 16, 255),
        ("FF", 16, 255),
        ("101", 2, 5),
        ("zz", 36, 1295),
        ("  17  ", None, 17),
        ("0x", None, 0),
        ("007", 8, 7),
        ("- 5", None, -5),
        ("+ ", None, 0),
    ],
)
def test_parse_valid(text, radix, expected):
    assert parse(text, radix) == expected


@pytest.mark.parametrize(
    "text,radix",
    [
        ("", None),
        ("+", None),
        ("-", None),
        ("0x1A", 10),
        ("0x1A", 36),
        ("12a", None),
        ("2", 2),
        ("g", 16),
        ("1.5", None),
        ("1 2", None),
        ("+-1", None),
        ("1-", None),
        (" -5", None),
    ],
)
def test_parse_invalid_returns_none(text, radix):
    assert parse(text, radix) is None


@pytest.mark.parametrize("radix", [0, 1, 37, -10])
def test_parse_rejects_bad_radix(radix):
    with pytest.raises(InvalidRadixError):
        parse("1", radix)


def test_bad_radix_raises_even_for_unparseable_text():
    with pytest.raises(InvalidRadixError):
        parse("", 37)


def test_parse_custom_sign_markers():
    assert parse("~ff", 16, negative_sign="~") == -255
    assert parse("pos12", positive_sign="pos") == 12
    assert parse("neg12", negative_sign="neg") == -12
    # A partial marker is not a marker.
    assert parse("ne12", negative_sign="neg") is None


def test_parse_empty_positive_marker_still_reads_negative():
    assert parse("-5", positive_sign="") == -5


def test_parse_guards_32_bit_overflow():
    assert parse("2147483647") == 2**31 - 1
    assert parse("-2147483648") == -(2**31)
    assert parse("2147483648") is None
    assert parse("0x80000000") is None
    assert parse("-2147483649") is None


def test_can_parse():
    assert can_parse("0x1f")
    assert can_parse("z", 36)
    assert not can_parse("")
    assert not can_parse("z")
    with pytest.raises(InvalidRadixError):
        can_parse("1", 1)


@pytest.mark.parametrize(
    "value,radix,expected",
    [
        (255, 16, "ff"),
        (-255, 16, "-ff"),
        (5, 2, "101"),
        (1295, 36, "zz"),
        (-42, 10, "-42"),
        (2**31 - 1, 16, "7fffffff"),
        (-(2**31), 2, "-1" + "0" * 31),
    ],
)
def test_format_int(value, radix, expected):
    assert format_int(value, radix) == expected


@pytest.mark.parametrize("radix", range(2, 37))
def test_format_zero_is_always_zero(radix):
    assert format_int(0, radix) == "0"


def test_format_custom_negative_sign_skips_decimal():
    assert format_int(-255, 16, negative_sign="~") == "~ff"
    assert format_int(-255, 10, negative_sign="~") == "-255"


@pytest.mark.parametrize("radix", [1, 37])
def test_format_rejects_bad_radix(radix):
    with pytest.raises(InvalidRadixError):
        format_int(10, radix)


@pytest.mark.parametrize("radix", [2, 3, 8, 10, 16, 35, 36])
@pytest.mark.parametrize("value", [0, 1, -1, 35, -36, 123456, -(2**31), 2**31 - 1])
def test_format_then_parse_returns_value(value, radix):
    assert parse(format_int(value, radix), radix) == value


def test_sign_markers_round_trip():
    markers = SignMarkers(negative="neg:", positive="pos:")
    assert markers.format(-255, 16) == "neg:ff"
    assert markers.parse("neg:ff", 16) == -255
    assert markers.parse("pos:ff", 16) == 255
    assert markers.parse("-ff", 16) is None


def test_sign_markers_defaults():
    markers = SignMarkers()
    assert markers.negative == "-"
    assert markers.positive == "+"
    assert markers.parse("+0x10") == 16
