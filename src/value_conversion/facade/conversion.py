from __future__ import annotations

import logging
from dataclasses import replace
from decimal import Decimal
from typing import Any

from value_conversion.domain.conversion_request import ConversionRequest
from value_conversion.domain.denomination import Denomination
from value_conversion.domain.numeric_base import NumericBase
from value_conversion.engine.converter import converter

logger = logging.getLogger(__name__)

# What a missing value becomes, per input encoding
_ZERO_BY_NUMERIC_BASE = {
    None: "0",
    NumericBase.HEX: "0",
    NumericBase.DEC: "0",
    NumericBase.BN: 0,
}


def conversion_util(
    value: Any,
    *,
    from_currency: str | None = None,
    to_currency: str | None = None,
    from_numeric_base: NumericBase | str | None = None,
    to_numeric_base: NumericBase | str | None = None,
    from_denomination: Denomination | str | None = None,
    to_denomination: Denomination | str | None = None,
    number_of_decimals: int | None = None,
    round_down: int | None = None,
    conversion_rate: Any = None,
    invert_conversion_rate: bool = False,
) -> Decimal | str | int:
    """Convert $value for display, never failing on a missing rate.

    Same as `converter`, except:
    - when currencies differ and $conversion_rate is missing (or zero), returns 0 instead of
      raising, so a screen can render while its rate is still loading;
    - a missing $value (None, blank text, 0) is treated as zero in the input encoding.

    Args:
        value: The value to convert.
        from_currency: Currency of $value.
        to_currency: Currency of the result; defaults to $from_currency.
        from_numeric_base: Encoding of $value ('hex', 'dec', 'BN').
        to_numeric_base: Encoding of the result.
        from_denomination: Denomination of $value.
        to_denomination: Denomination of the result.
        number_of_decimals: Round the result half-down to this many fractional digits.
        round_down: Truncate the result to this many fractional digits.
        conversion_rate: Units of $to_currency per whole unit of $from_currency.
        invert_conversion_rate: Use 1 / $conversion_rate instead.

    Returns:
        The converted value, or the int 0 for the missing-rate fallback.
    """
    request = ConversionRequest(
        value=value,
        from_currency=from_currency,
        to_currency=to_currency,
        from_numeric_base=from_numeric_base,
        to_numeric_base=to_numeric_base,
        from_denomination=from_denomination,
        to_denomination=to_denomination,
        number_of_decimals=number_of_decimals,
        round_down=round_down,
        conversion_rate=conversion_rate,
        invert_conversion_rate=invert_conversion_rate,
    )

    if request.converts_currency and not request.conversion_rate:
        logger.debug(f"No $conversion_rate for {request.from_currency} -> {request.to_currency}; returning 0")
        return 0

    # Decimal zero is a real value; any other falsy value (None, "", 0) means missing
    if not isinstance(request.value, Decimal) and (not request.value or (isinstance(request.value, str) and not request.value.strip())):
        request = replace(request, value=_ZERO_BY_NUMERIC_BASE[request.from_numeric_base])

    return converter(request)


def wei_hex_from_gwei_decimal(value: Any) -> str:
    """Convert a decimal GWEI amount into unprefixed hex WEI (e.g. "5" -> "12a05f200")."""
    return conversion_util(
        value,
        from_numeric_base=NumericBase.DEC,
        to_numeric_base=NumericBase.HEX,
        from_denomination=Denomination.GWEI,
        to_denomination=Denomination.WEI,
    )
