from __future__ import annotations

from decimal import Context, Inexact, ROUND_HALF_UP, MAX_EMAX, MIN_EMIN

# Significant digits kept by every intermediate result. 2**256 has 78 digits; scaled by the
# largest denomination (10**32) and carrying 20 fractional digits it still fits with room for
# the product of two such values.
DECIMAL_PRECISION = 300

# General division (rate inversion, `divide`) keeps this many fractional digits
DIVISION_DECIMAL_PLACES = 20
DIVISION_ROUNDING = ROUND_HALF_UP

# Fractional digits kept when re-denominating into GWEI and larger denominations
DENOMINATED_DECIMAL_PLACES = 9
DENOMINATION_ROUNDING = ROUND_HALF_UP

# Decimal text output never carries more fractional digits than this
DECIMAL_TEXT_MAX_PLACES = 20


def conversion_context() -> Context:
    """Create the private decimal context used for all conversion arithmetic.

    A fresh context is returned on every call so callers can use it with `decimal.localcontext`
    without sharing mutable state between threads. Traps stay at their defaults, so invalid
    operations and division by zero raise instead of producing NaN or Infinity.

    Returns:
        Context: Context with $DECIMAL_PRECISION significant digits.
    """
    return Context(prec=DECIMAL_PRECISION, rounding=ROUND_HALF_UP, Emax=MAX_EMAX, Emin=MIN_EMIN)


def exact_context() -> Context:
    """Create a conversion context that raises `decimal.Inexact` instead of rounding.

    Used where results must be exact (sums, products, shifts by a power of ten), so that a
    result longer than $DECIMAL_PRECISION digits fails loudly rather than being rounded.

    Returns:
        Context: `conversion_context()` with the `Inexact` trap enabled.
    """
    context = conversion_context()
    context.traps[Inexact] = True
    return context
