from decimal import Decimal

import pytest

from value_conversion.domain.numeric_base import DECODERS, ENCODERS, NumericBase, decode, encode
from value_conversion.errors import InvalidNumericLiteral, UnknownNumericBase


def test_numeric_base_from_str():
    assert NumericBase.from_str("hex") is NumericBase.HEX
    assert NumericBase.from_str("DEC") is NumericBase.DEC
    assert NumericBase.from_str("BN") is NumericBase.BN
    assert NumericBase.from_str("big-integer") is NumericBase.BN
    assert NumericBase.from_str(NumericBase.HEX) is NumericBase.HEX

    with pytest.raises(UnknownNumericBase):
        NumericBase.from_str("oct")
    with pytest.raises(UnknownNumericBase):
        NumericBase.from_str(16)


def test_decode_hex():
    assert decode("0x12a05f200", NumericBase.HEX) == Decimal(5_000_000_000)
    assert decode("ff", "hex") == Decimal(255)
    assert decode("0XFF", "hex") == Decimal(255)
    assert decode("-0x10", "hex") == Decimal(-16)
    assert decode("ff.8", "hex") == Decimal("255.5")
    assert decode("0x" + "f" * 64, "hex") == Decimal(2**256 - 1)


@pytest.mark.parametrize("literal", ["0xzz", "", "0x", "-", "1.2.3", "12 34", 1.5, None])
def test_decode_hex_rejects_malformed_literals(literal):
    with pytest.raises(InvalidNumericLiteral):
        decode(literal, NumericBase.HEX)


def test_decode_hex_reads_ints_as_hex_digits():
    assert decode(10, NumericBase.HEX) == Decimal(16)
    assert decode(-255, "hex") == Decimal(-597)


def test_decode_rejects_values_beyond_precision():
    with pytest.raises(InvalidNumericLiteral):
        decode("f" * 260, NumericBase.HEX)
    with pytest.raises(InvalidNumericLiteral):
        decode("0." + "1" * 260, NumericBase.HEX)
    with pytest.raises(InvalidNumericLiteral):
        decode("1" * 301, NumericBase.DEC)
    with pytest.raises(InvalidNumericLiteral):
        decode("1e300", NumericBase.DEC)
    with pytest.raises(InvalidNumericLiteral):
        decode(16 ** 260, NumericBase.BN)

    assert decode("9" * 300, NumericBase.DEC) == Decimal("9" * 300)


def test_decode_dec():
    assert decode("1.5", NumericBase.DEC) == Decimal("1.5")
    assert decode(" 42 ", NumericBase.DEC) == Decimal(42)
    assert decode(10, NumericBase.DEC) == Decimal(10)
    # Floats are read through their text, so no binary noise leaks in
    assert decode(0.1, NumericBase.DEC) == Decimal("0.1")
    assert decode(Decimal("-3.25"), NumericBase.DEC) == Decimal("-3.25")
    assert decode("+.5", NumericBase.DEC) == Decimal("0.5")
    assert decode("1.5e3", NumericBase.DEC) == Decimal(1500)


@pytest.mark.parametrize("literal", ["abc", "", "NaN", "Infinity", "1,5", "1_000", "\uff11\uff12", "0x10", True, None, [1]])
def test_decode_dec_rejects_non_numeric_input(literal):
    with pytest.raises(InvalidNumericLiteral):
        decode(literal, NumericBase.DEC)


def test_decode_big_integer():
    assert decode(255, NumericBase.BN) == Decimal(255)
    assert decode(b"\x01\x00", NumericBase.BN) == Decimal(256)
    assert decode(2**256, NumericBase.BN) == Decimal(2**256)

    with pytest.raises(InvalidNumericLiteral):
        decode("12", NumericBase.BN)
    with pytest.raises(InvalidNumericLiteral):
        decode(False, NumericBase.BN)


def test_encode_hex_keeps_integer_part_only():
    assert encode(Decimal(255), NumericBase.HEX) == "ff"
    assert encode(Decimal("255.9"), "hex") == "ff"
    assert encode(Decimal(-16), "hex") == "-10"
    assert encode(Decimal(0), "hex") == "0"
    assert encode(Decimal(5_000_000_000), "hex") == "12a05f200"


def test_encode_dec():
    assert encode(Decimal("5.000000000"), NumericBase.DEC) == "5"
    assert encode(Decimal("1E+2"), "dec") == "100"
    assert encode(Decimal("-0.50"), "dec") == "-0.5"
    assert encode(Decimal("-0"), "dec") == "0"
    # More than 20 fractional digits are rounded half-up to 20
    assert encode(Decimal("0.1234567890123456789012345"), "dec") == "0.1234567890123456789"
    assert encode(Decimal("0.000000000000000000005"), "dec") == "0.00000000000000000001"


def test_encode_big_integer_discards_fraction():
    assert encode(Decimal("255.7"), NumericBase.BN) == 255
    assert encode(Decimal(2**200), NumericBase.BN) == 2**200


def test_unknown_base_is_rejected():
    with pytest.raises(UnknownNumericBase):
        decode("1", "oct")
    with pytest.raises(UnknownNumericBase):
        encode(Decimal(1), "base64")


def test_codec_tables_are_read_only():
    assert set(DECODERS) == set(NumericBase)
    assert set(ENCODERS) == set(NumericBase)
    with pytest.raises(TypeError):
        DECODERS[NumericBase.HEX] = None
