"""Numeric base codec.

Parses values from their boundary encodings (hex text, decimal text, big integers) into
`Decimal` and serializes `Decimal` back into any of those encodings.
"""

from __future__ import annotations

import re
from decimal import Decimal, Inexact, InvalidOperation, ROUND_HALF_UP, localcontext
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping

from value_conversion.config import DECIMAL_PRECISION, DECIMAL_TEXT_MAX_PLACES, exact_context
from value_conversion.errors import InvalidNumericLiteral, UnknownNumericBase
from value_conversion.utils.decimal_tools import as_decimal, round_to_places, strip_trailing_zeros, truncate_to_integer

# Optional sign, optional 0x prefix, hex digits with an optional fractional part
_HEX_LITERAL = re.compile(r"^(?P<sign>-)?(?:0x)?(?P<integer>[0-9a-f]*)(?:\.(?P<fraction>[0-9a-f]*))?$", re.IGNORECASE)
# Optional sign, ASCII digits with an optional point, optional exponent
_DECIMAL_LITERAL = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?$", re.IGNORECASE)


class NumericBase(Enum):
    """Encoding of a value at the system boundary.

    Members:
        HEX: Base-16 text, optionally `0x`-prefixed.
        DEC: Base-10 text (or a Python number).
        BN: Arbitrary-size integer (Python `int`, or big-endian unsigned `bytes` on input).
    """

    HEX = "hex"
    DEC = "dec"
    BN = "BN"

    @classmethod
    def from_str(cls, name: str) -> NumericBase:
        """Get numeric base by name (case-insensitive).

        Args:
            name: One of 'hex', 'dec', 'BN' (also 'big-integer').

        Returns:
            NumericBase: The matching member.

        Raises:
            UnknownNumericBase: If $name matches no member.
        """
        if isinstance(name, NumericBase):
            return name

        # Raise: only strings name a numeric base
        if not isinstance(name, str):
            raise UnknownNumericBase(name)

        member = _NUMERIC_BASE_BY_NAME.get(name.strip().lower())
        if member is None:
            raise UnknownNumericBase(name)
        return member


_NUMERIC_BASE_BY_NAME = {
    "hex": NumericBase.HEX,
    "dec": NumericBase.DEC,
    "bn": NumericBase.BN,
    "big-integer": NumericBase.BN,
}


# region Decoders


def _require_precision(result: Decimal, value: Any, base: NumericBase) -> Decimal:
    # Raise: the integer part or the digit count would not fit the conversion context
    if result and (result.adjusted() >= DECIMAL_PRECISION or len(result.as_tuple().digits) > DECIMAL_PRECISION):
        raise InvalidNumericLiteral(value, base.value, f"more than {DECIMAL_PRECISION} significant digits")
    return result


def _decode_hex(value: Any) -> Decimal:
    # Numbers are read through their text, so the int 10 is sixteen
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)

    # Raise: hex input must be text (or an int read as hex digits)
    if not isinstance(value, str):
        raise InvalidNumericLiteral(value, NumericBase.HEX.value, "expected text")

    match = _HEX_LITERAL.match(value.strip())
    # Raise: reject anything but sign, prefix and hex digits
    if match is None:
        raise InvalidNumericLiteral(value, NumericBase.HEX.value)

    integer_digits = match.group("integer")
    fraction_digits = match.group("fraction") or ""
    # Raise: at least one digit is required ("0x" or "" is not a number)
    if not integer_digits and not fraction_digits:
        raise InvalidNumericLiteral(value, NumericBase.HEX.value, "no digits")

    result = _require_precision(Decimal(int(integer_digits or "0", 16)), value, NumericBase.HEX)
    try:
        with localcontext(exact_context()):
            if fraction_digits:
                # 1/16**n always terminates in base 10, so this division is exact when it fits
                result += Decimal(int(fraction_digits, 16)) / Decimal(16 ** len(fraction_digits))
            if match.group("sign"):
                result = -result
    except Inexact as e:
        raise InvalidNumericLiteral(value, NumericBase.HEX.value, f"more than {DECIMAL_PRECISION} significant digits") from e
    return strip_trailing_zeros(result)


def _decode_dec(value: Any) -> Decimal:
    # Raise: text must be a plain ASCII decimal literal ("1_000" and non-ASCII digits are not)
    if isinstance(value, str) and not _DECIMAL_LITERAL.match(value.strip()):
        raise InvalidNumericLiteral(value, NumericBase.DEC.value)

    try:
        result = as_decimal(value)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise InvalidNumericLiteral(value, NumericBase.DEC.value) from e

    # Raise: NaN and Infinity parse as Decimal but are not amounts
    if not result.is_finite():
        raise InvalidNumericLiteral(value, NumericBase.DEC.value, "not a finite number")
    return _require_precision(result, value, NumericBase.DEC)


def _decode_bn(value: Any) -> Decimal:
    if isinstance(value, (bytes, bytearray)):
        value = int.from_bytes(value, "big")

    # Raise: big-integer input must be an int or bytes
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidNumericLiteral(value, NumericBase.BN.value, "expected int or bytes")

    # Read back through the base-16 text, as the big-integer encoding is defined in base 16
    return _decode_hex(format(value, "x"))


# endregion

# region Encoders


def _encode_hex(value: Decimal) -> str:
    """Unprefixed lowercase base-16 text of the integer part of $value."""
    return format(int(truncate_to_integer(value)), "x")


def _encode_dec(value: Decimal) -> str:
    """Plain base-10 text with no exponent and no trailing fractional zeros."""
    if value.as_tuple().exponent < -DECIMAL_TEXT_MAX_PLACES:
        value = round_to_places(value, DECIMAL_TEXT_MAX_PLACES, ROUND_HALF_UP)
    return format(strip_trailing_zeros(value), "f")


def _encode_bn(value: Decimal) -> int:
    """Big integer of the integer part of $value; the fraction is discarded."""
    return int(_encode_hex(value), 16)


# endregion

DECODERS: Mapping[NumericBase, Callable[[Any], Decimal]] = MappingProxyType(
    {
        NumericBase.HEX: _decode_hex,
        NumericBase.DEC: _decode_dec,
        NumericBase.BN: _decode_bn,
    }
)

ENCODERS: Mapping[NumericBase, Callable[[Decimal], str | int]] = MappingProxyType(
    {
        NumericBase.HEX: _encode_hex,
        NumericBase.DEC: _encode_dec,
        NumericBase.BN: _encode_bn,
    }
)


def decode(value: Any, base: NumericBase | str) -> Decimal:
    """Parse $value from its $base encoding into a Decimal.

    Args:
        value: Text (hex/dec), number (dec; an int is read as hex digits for hex), or int/bytes (BN).
        base: Encoding of $value.

    Returns:
        Decimal: The parsed value.

    Raises:
        InvalidNumericLiteral: If $value is malformed for $base. Values needing more than
            $DECIMAL_PRECISION significant digits are malformed too.
        UnknownNumericBase: If $base is not a known numeric base.
    """
    return DECODERS[NumericBase.from_str(base)](value)


def encode(value: Decimal, base: NumericBase | str) -> str | int:
    """Serialize $value into the $base encoding.

    The `hex` and `BN` encodings carry only the integer part of $value.

    Args:
        value: Value to serialize.
        base: Target encoding.

    Returns:
        str for `hex` and `dec`, int for `BN`.

    Raises:
        UnknownNumericBase: If $base is not a known numeric base.
    """
    return ENCODERS[NumericBase.from_str(base)](value)
