"""Arithmetic on raw operands followed by a conversion.

Each operand is parsed in its own integer radix, the two are combined with the raw operator and
the result goes through `converter` with the remaining conversion options.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Any

from value_conversion.domain.conversion_request import ConversionRequest
from value_conversion.domain.numeric_base import NumericBase, decode
from value_conversion.engine.converter import converter
from value_conversion.errors import InvalidBase, InvalidNumericLiteral
from value_conversion.utils.decimal_tools import divide as divide_decimals, exact_arithmetic

# Largest radix with single-character digits (0-9, a-z)
MAX_RADIX = 36

_RADIX_PREFIXES = {16: "0x", 8: "0o", 2: "0b"}
_RADIX_LITERAL = re.compile(r"^(?P<integer>[0-9a-z]*)(?:\.(?P<fraction>[0-9a-z]*))?$")


def is_valid_base(base: Any) -> bool:
    """Check that $base is an integer radix usable for parsing (2..36)."""
    return isinstance(base, int) and not isinstance(base, bool) and 1 < base <= MAX_RADIX


def _require_valid_bases(**bases: Any) -> None:
    for base_name, base in bases.items():
        # Raise: both operand bases are checked before anything is parsed
        if not is_valid_base(base):
            raise InvalidBase(base_name, base)


def parse_in_radix(value: Any, base: int) -> Decimal:
    """Parse $value written in radix $base into a Decimal.

    Non-text operands are read through their string form, so the int 10 in base 16 is sixteen.
    Base 10 accepts any decimal literal; other bases accept an optional sign, the radix prefix
    (`0x`, `0o`, `0b`) where one exists, and digits with an optional fractional part.

    Args:
        value: Operand as text, int, float or Decimal.
        base: Radix between 2 and 36.

    Returns:
        Decimal: The parsed operand.

    Raises:
        InvalidBase: If $base is not a valid radix.
        InvalidNumericLiteral: If $value is not a number in radix $base.
    """
    _require_valid_bases(base=base)

    if base == 10:
        return decode(value, NumericBase.DEC)

    if isinstance(value, Decimal):
        text = format(value, "f")
    elif isinstance(value, (str, int, float)) and not isinstance(value, bool):
        text = str(value)
    else:
        raise InvalidNumericLiteral(value, base, "expected text or a number")

    body = text.strip().lower()
    negative = body.startswith("-")
    if body and body[0] in "+-":
        body = body[1:]

    prefix = _RADIX_PREFIXES.get(base)
    if prefix and body.startswith(prefix):
        body = body[len(prefix) :]

    match = _RADIX_LITERAL.match(body)
    # Raise: one optional point between digit runs, at least one digit
    if match is None or not body.strip("."):
        raise InvalidNumericLiteral(value, base)

    integer_digits = match.group("integer") or "0"
    fraction_digits = match.group("fraction") or ""
    try:
        integer_part = int(integer_digits, base)
        fraction_numerator = int(fraction_digits, base) if fraction_digits else 0
    except ValueError as e:
        raise InvalidNumericLiteral(value, base, f"digit out of range for base {base}") from e

    result = Decimal(integer_part)
    if fraction_numerator:
        result += divide_decimals(Decimal(fraction_numerator), Decimal(base ** len(fraction_digits)), "parse_in_radix")
    return -result if negative else result


def add(a: Any, b: Any, *, a_base: int | None = None, b_base: int | None = None, **options: Any) -> Decimal | str | int:
    """Add $a and $b, then convert the sum with $options.

    Args:
        a: First operand, written in radix $a_base.
        b: Second operand, written in radix $b_base.
        a_base: Radix of $a.
        b_base: Radix of $b.
        **options: Conversion options (see `ConversionRequest`).

    Raises:
        InvalidBase: If either base is not an integer radix between 2 and 36.
        PrecisionExceeded: If the sum needs more digits than the conversion precision.
    """
    _require_valid_bases(a_base=a_base, b_base=b_base)

    with exact_arithmetic("add"):
        value = parse_in_radix(a, a_base) + parse_in_radix(b, b_base)
    return converter(ConversionRequest(value=value, **options))


def subtract(a: Any, b: Any, *, a_base: int | None = None, b_base: int | None = None, **options: Any) -> Decimal | str | int:
    """Subtract $b from $a, then convert the difference with $options.

    Raises:
        InvalidBase: If either base is not an integer radix between 2 and 36.
    """
    _require_valid_bases(a_base=a_base, b_base=b_base)

    with exact_arithmetic("subtract"):
        value = parse_in_radix(a, a_base) - parse_in_radix(b, b_base)
    return converter(ConversionRequest(value=value, **options))


def multiply(a: Any, b: Any, *, multiplicand_base: int | None = None, multiplier_base: int | None = None, **options: Any) -> Decimal | str | int:
    """Multiply $a by $b, then convert the product with $options.

    Raises:
        InvalidBase: If either base is not an integer radix between 2 and 36.
    """
    _require_valid_bases(multiplicand_base=multiplicand_base, multiplier_base=multiplier_base)

    with exact_arithmetic("multiply"):
        value = parse_in_radix(a, multiplicand_base) * parse_in_radix(b, multiplier_base)
    return converter(ConversionRequest(value=value, **options))


def divide(a: Any, b: Any, *, dividend_base: int | None = None, divisor_base: int | None = None, **options: Any) -> Decimal | str | int:
    """Divide $a by $b, then convert the quotient with $options.

    The quotient keeps 20 fractional digits (rounded half-up) before conversion.

    Raises:
        InvalidBase: If either base is not an integer radix between 2 and 36.
        UndefinedDivision: If $b is zero.
    """
    _require_valid_bases(dividend_base=dividend_base, divisor_base=divisor_base)

    value = divide_decimals(parse_in_radix(a, dividend_base), parse_in_radix(b, divisor_base), "divide")
    return converter(ConversionRequest(value=value, **options))


def to_negative(value: Any, **options: Any) -> Decimal | str | int:
    """Negate $value by multiplying it by -1.

    $options must carry `multiplicand_base` (radix of $value) and `multiplier_base` (radix of -1),
    plus any conversion options.
    """
    return multiply(value, -1, **options)
