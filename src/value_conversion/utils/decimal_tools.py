from __future__ import annotations

from contextlib import contextmanager
from decimal import Decimal, Inexact, InvalidOperation, ROUND_DOWN, localcontext
from typing import Iterator, TypeAlias

from value_conversion.config import DIVISION_DECIMAL_PLACES, DIVISION_ROUNDING, conversion_context, exact_context
from value_conversion.errors import PrecisionExceeded, UndefinedDivision

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.

    Raises:
        InvalidOperation: If $value is not a numeric literal.
        TypeError: If $value is not a supported scalar type.
    """
    if isinstance(value, Decimal):
        return value

    # Raise: bool is an int subclass but never a meaningful amount
    if isinstance(value, bool) or not isinstance(value, (int, str, float)):
        raise TypeError(f"Cannot call `as_decimal` because $value has unsupported type '{type(value).__name__}'")

    return Decimal(str(value).strip())


def strip_trailing_zeros(value: Decimal) -> Decimal:
    """Drop trailing fractional zeros without switching integers to exponent form.

    `Decimal.normalize` turns `Decimal("100")` into `Decimal("1E+2")`; integral values are
    therefore quantized to a zero exponent instead.

    Examples:
        >>> strip_trailing_zeros(Decimal("5.000000000"))
        Decimal('5')
        >>> strip_trailing_zeros(Decimal("1.2300"))
        Decimal('1.23')
        >>> strip_trailing_zeros(Decimal("1E+2"))
        Decimal('100')
    """
    # Negative zero and zero with an exponent both collapse to plain zero
    if not value:
        return Decimal(0)

    try:
        with localcontext(conversion_context()):
            if value == value.to_integral_value():
                return value.quantize(Decimal(1))
            return value.normalize()
    except InvalidOperation as e:
        raise PrecisionExceeded("strip_trailing_zeros") from e


def round_to_places(value: Decimal, places: int, rounding: str) -> Decimal:
    """Round $value to $places fractional digits using $rounding.

    Args:
        value: Value to round.
        places: Number of fractional digits to keep (>= 0).
        rounding: One of the `decimal` rounding modes.

    Returns:
        Decimal: Rounded value without trailing fractional zeros.

    Raises:
        ValueError: If $places is not a non-negative integer.
        PrecisionExceeded: If the rounded value needs more digits than the conversion precision.
    """
    # Raise: $places must be a non-negative integer
    if isinstance(places, bool) or not isinstance(places, int) or places < 0:
        raise ValueError(f"Cannot call `round_to_places` because $places ({places!r}) is not a non-negative integer")

    try:
        with localcontext(conversion_context()):
            rounded = value.quantize(Decimal(1).scaleb(-places), rounding=rounding)
    except InvalidOperation as e:
        # quantize signals InvalidOperation when the coefficient would exceed the precision
        raise PrecisionExceeded("round_to_places") from e
    return strip_trailing_zeros(rounded)


def truncate_to_integer(value: Decimal) -> Decimal:
    """Drop the fractional part of $value, rounding toward zero."""
    return round_to_places(value, 0, ROUND_DOWN)


def divide(numerator: Decimal, denominator: Decimal, operation: str = "divide") -> Decimal:
    """Divide two decimals, keeping $DIVISION_DECIMAL_PLACES fractional digits.

    Args:
        numerator: Dividend.
        denominator: Divisor.
        operation: Name of the calling operation, used in the error message.

    Returns:
        Decimal: Quotient rounded with $DIVISION_ROUNDING.

    Raises:
        UndefinedDivision: If $denominator is zero.
    """
    # Raise: a zero divisor has no defined quotient
    if denominator == 0:
        raise UndefinedDivision(operation)

    with localcontext(conversion_context()):
        quotient = numerator / denominator
    return round_to_places(quotient, DIVISION_DECIMAL_PLACES, DIVISION_ROUNDING)


@contextmanager
def exact_arithmetic(operation: str) -> Iterator[None]:
    """Run Decimal arithmetic that must not be rounded.

    Inside the block the exact conversion context is active; a result that would need rounding
    is reported as `PrecisionExceeded` for $operation.

    Raises:
        PrecisionExceeded: If any result in the block is inexact.
    """
    try:
        with localcontext(exact_context()):
            yield
    except Inexact as e:
        raise PrecisionExceeded(operation) from e
