from __future__ import annotations

import logging
from decimal import Decimal, ROUND_DOWN, ROUND_HALF_DOWN
from typing import Any, Mapping

from value_conversion.domain.conversion_request import ConversionRequest
from value_conversion.domain.denomination import Denomination, denominate, normalize
from value_conversion.domain.numeric_base import NumericBase, decode, encode
from value_conversion.errors import MissingConversionRate
from value_conversion.utils.decimal_tools import divide, exact_arithmetic, round_to_places, strip_trailing_zeros

logger = logging.getLogger(__name__)

# Conversion rates are quoted per one unit of this denomination
WHOLE_UNIT = Denomination.ETH


def converter(request: ConversionRequest | Mapping[str, Any]) -> Decimal | str | int:
    """Convert a value between numeric bases, denominations and currencies.

    Steps run in a fixed order and each one is skipped when its field is None:

    1. decode $value from $from_numeric_base (otherwise $value is taken as a Decimal-like scalar)
    2. normalize from $from_denomination to base units
    3. if currencies differ, apply the conversion rate at the whole-unit (ETH) scale; when a
       $to_denomination follows, the value is brought back to base units first
    4. denominate into $to_denomination
    5. round half-down to $number_of_decimals
    6. truncate to $round_down fractional digits
    7. encode into $to_numeric_base

    Args:
        request: The conversion to perform, as a `ConversionRequest` or a mapping of its fields.

    Returns:
        Decimal when no $to_numeric_base is given, otherwise the encoded value (str or int).

    Raises:
        MissingConversionRate: If currencies differ and no $conversion_rate is given.
        InvalidNumericLiteral: If $value is malformed for its numeric base.
        UndefinedDivision: If an inverted $conversion_rate is zero.
        PrecisionExceeded: If a result needs more digits than the conversion precision.
    """
    request = ConversionRequest.from_mapping(request)
    logger.debug(f"Converting {request}")

    if request.from_numeric_base is not None:
        value = decode(request.value, request.from_numeric_base)
    else:
        value = decode(request.value, NumericBase.DEC)

    if request.from_denomination is not None:
        value = normalize(value, request.from_denomination)

    if request.converts_currency:
        value = _apply_conversion_rate(value, request)

    if request.to_denomination is not None:
        value = denominate(value, request.to_denomination)

    if request.number_of_decimals is not None:
        value = round_to_places(value, request.number_of_decimals, ROUND_HALF_DOWN)

    if request.round_down:
        value = round_to_places(value, request.round_down, ROUND_DOWN)

    if request.to_numeric_base is not None:
        return encode(value, request.to_numeric_base)
    return strip_trailing_zeros(value)


def _apply_conversion_rate(value: Decimal, request: ConversionRequest) -> Decimal:
    """Multiply base-unit $value by the rate, which is defined per whole unit."""
    # Raise: a currency change is meaningless without a rate
    if request.conversion_rate is None:
        raise MissingConversionRate(request.from_currency, request.to_currency)

    rate = request.conversion_rate
    if request.invert_conversion_rate:
        rate = divide(Decimal(1), rate, "converter")

    with exact_arithmetic("converter"):
        value = value / WHOLE_UNIT.scale * rate
        if request.to_denomination is not None:
            value = value * WHOLE_UNIT.scale
    return value
