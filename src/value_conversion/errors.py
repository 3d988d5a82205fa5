"""Errors raised by the conversion layer.

Every error derives from `ConversionError`, itself a `ValueError`, so callers can catch the whole
family or a single kind. Each error keeps the offending input as attributes.
"""

from __future__ import annotations

from typing import Any


class ConversionError(ValueError):
    """Base class for all conversion failures."""


class InvalidNumericLiteral(ConversionError):
    """Raised when a value cannot be parsed in the requested numeric base."""

    def __init__(self, literal: Any, base: Any, reason: str | None = None):
        self.literal = literal
        self.base = base
        self.reason = reason

        message = f"Cannot parse $literal ({literal!r}) as a number in base '{base}'"
        if reason:
            message += f" - {reason}"

        super().__init__(message)


class UnknownDenomination(ConversionError):
    """Raised when a denomination name is not one of the 33 known denominations."""

    def __init__(self, name: Any):
        self.name = name
        super().__init__(f"Unknown denomination $name ({name!r})")


class UnknownNumericBase(ConversionError):
    """Raised when a numeric base name is not 'hex', 'dec' or 'BN'."""

    def __init__(self, name: Any):
        self.name = name
        super().__init__(f"Unknown numeric base $name ({name!r}); expected one of 'hex', 'dec', 'BN'")


class UnknownUnit(ConversionError):
    """Raised when a unit name matches none of the known unit aliases."""

    def __init__(self, name: Any):
        self.name = name
        super().__init__(f"Unknown unit $name ({name!r})")


class InvalidBase(ConversionError):
    """Raised when an arithmetic operand base is not an integer radix between 2 and 36."""

    def __init__(self, base_name: str, base: Any):
        self.base_name = base_name
        self.base = base
        super().__init__(f"Must specify valid ${base_name}, but provided value is: {base!r}")


class MissingConversionRate(ConversionError):
    """Raised when currencies differ and no conversion rate was supplied."""

    def __init__(self, from_currency: str | None, to_currency: str | None):
        self.from_currency = from_currency
        self.to_currency = to_currency
        super().__init__(f"Converting from {from_currency} to {to_currency} requires a $conversion_rate, but one was not provided")


class UndefinedDivision(ConversionError):
    """Raised when a division has a zero divisor."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Cannot call `{operation}` because the divisor is zero")


class PrecisionExceeded(ConversionError):
    """Raised when a result needs more significant digits than the conversion context carries."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Cannot call `{operation}` because the result does not fit in the conversion precision")
