from __future__ import annotations

from dataclasses import replace
from decimal import Decimal
from typing import Any, Mapping

from value_conversion.domain.conversion_request import ConversionRequest
from value_conversion.engine.converter import converter

RequestLike = ConversionRequest | Mapping[str, Any]


def _converted_value(request: RequestLike) -> Decimal:
    # Compare numbers, not their encodings
    request = replace(ConversionRequest.from_mapping(request), to_numeric_base=None)
    return converter(request)


def conversion_greater_than(first: RequestLike, second: RequestLike) -> bool:
    """True if $first converts to a strictly greater value than $second."""
    return _converted_value(first) > _converted_value(second)


def conversion_less_than(first: RequestLike, second: RequestLike) -> bool:
    """True if $first converts to a strictly smaller value than $second."""
    return _converted_value(first) < _converted_value(second)


def conversion_gte(first: RequestLike, second: RequestLike) -> bool:
    """True if $first converts to a value greater than or equal to $second."""
    return _converted_value(first) >= _converted_value(second)


def conversion_lte(first: RequestLike, second: RequestLike) -> bool:
    """True if $first converts to a value less than or equal to $second."""
    return _converted_value(first) <= _converted_value(second)


def conversion_max(first: RequestLike, second: RequestLike) -> Any:
    """Return the original, unconverted value of whichever request converts greater.

    The converted results decide the winner, but the returned value is the winner's input
    $value as given, in its own base and denomination. Ties return $second's value.
    """
    first = ConversionRequest.from_mapping(first)
    second = ConversionRequest.from_mapping(second)
    return first.value if conversion_greater_than(first, second) else second.value
