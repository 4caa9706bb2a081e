import numpy as np
import pytest

from number_range import (
    FloatingPoint,
    InvalidSign,
    NumberFormatError,
    SignedInteger,
    UnsignedInteger,
    number_type,
)


def test_number_type():
    assert isinstance(number_type(int), SignedInteger)
    assert isinstance(number_type(np.int8), SignedInteger)
    assert isinstance(number_type("uint16"), UnsignedInteger)
    assert isinstance(number_type(float), FloatingPoint)
    assert isinstance(number_type(np.float32), FloatingPoint)

    kind = number_type(np.uint8)
    assert number_type(kind) is kind
    assert repr(kind) == "UnsignedInteger(uint8)"


def test_signed():
    assert number_type(np.int32).signed
    assert number_type(np.float64).signed
    assert not number_type(np.uint32).signed


def test_parse_integer():
    kind = number_type(np.int8)
    assert kind.parse("127") == 127
    assert kind.parse("-128") == -128
    assert kind.parse("+3") == 3
    with pytest.raises(NumberFormatError):
        kind.parse("128")
    with pytest.raises(NumberFormatError):
        kind.parse("1.5")
    with pytest.raises(NumberFormatError):
        kind.parse("")
    with pytest.raises(NumberFormatError):
        kind.parse("0x10")


def test_parse_unsigned():
    kind = number_type(np.uint8)
    assert kind.parse("255") == 255
    with pytest.raises(InvalidSign):
        kind.parse("-1")
    with pytest.raises(InvalidSign):
        kind.parse("-0")
    with pytest.raises(NumberFormatError):
        kind.parse("256")


def test_parse_float():
    kind = number_type(np.float64)
    assert kind.parse("1.5") == 1.5
    assert kind.parse(".5") == 0.5
    assert kind.parse("5.") == 5.0
    assert kind.parse("-2e3") == -2000.0
    for text in ["inf", "nan", "1.2.3", "e5", ""]:
        with pytest.raises(NumberFormatError):
            kind.parse(text)
    with pytest.raises(NumberFormatError):
        number_type(np.float32).parse("1e40")


def test_format():
    kind = number_type(np.int64)
    assert kind.format(np.int64(-1234567)) == "-1234567"
    assert kind.format(1234567, group_sep=",") == "1,234,567"
    assert kind.format(1234567, group_sep=".") == "1.234.567"
    assert kind.format(999, group_sep="_") == "999"

    kind = number_type(np.float64)
    assert kind.format(1.5) == "1.5"
    assert kind.format(1234.5, decimal_sep=",") == "1234,5"
    assert kind.format(1234.5, group_sep=".", decimal_sep=",") == "1.234,5"


def test_cast():
    assert isinstance(number_type(np.uint16).cast(3), np.uint16)
    assert isinstance(number_type(float).cast(3), np.float64)


def test_expand_integer():
    kind = number_type(np.int64)
    assert list(kind.expand(1, 1, 5)) == [1, 2, 3, 4, 5]
    assert list(kind.expand(5, -2, 0)) == [5, 3, 1]
    assert list(kind.expand(1, 4, 10)) == [1, 5, 9]
    assert list(kind.expand(5, 1, 1)) == []


def test_expand_does_not_overflow():
    kind = number_type(np.uint8)
    assert list(kind.expand(254, 1, 255)) == [254, 255]
    kind = number_type(np.int8)
    assert list(kind.expand(-127, -1, -128)) == [-127, -128]


def test_expand_float():
    kind = number_type(np.float64)
    assert list(kind.expand(0, 0.25, 1)) == [0.0, 0.25, 0.5, 0.75, 1.0]
    assert list(kind.expand(1, -0.5, 0)) == [1.0, 0.5, 0.0]
    assert list(kind.expand(0, 0.3, 1)) == pytest.approx([0.0, 0.3, 0.6, 0.9])
