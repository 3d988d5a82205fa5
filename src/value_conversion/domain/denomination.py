"""Denomination registry.

The 33 denominations are powers of ten of the base unit (WEI), grouped in 11 tiers that each
appear at x1, x10 and x100. `normalize` scales a value up to base units; `denominate` scales a
base-unit value down into a denomination and applies that denomination's rounding steps.
"""

from __future__ import annotations

from decimal import Decimal, localcontext
from enum import Enum
from functools import partial
from types import MappingProxyType
from typing import Callable, Mapping

from bidict import frozenbidict

from value_conversion.config import DENOMINATED_DECIMAL_PLACES, DENOMINATION_ROUNDING, conversion_context
from value_conversion.errors import UnknownDenomination
from value_conversion.utils.decimal_tools import round_to_places, strip_trailing_zeros


class Denomination(Enum):
    """Named power-of-ten multiple of the base unit.

    Declaration order is the canonical ordering: member at index $i has scale 10**i.
    """

    WEI = "WEI"
    WEI10 = "WEI10"
    WEI100 = "WEI100"
    KWEI = "KWEI"
    KWEI10 = "KWEI10"
    KWEI100 = "KWEI100"
    MWEI = "MWEI"
    MWEI10 = "MWEI10"
    MWEI100 = "MWEI100"
    GWEI = "GWEI"
    GWEI10 = "GWEI10"
    GWEI100 = "GWEI100"
    MICRO = "MICRO"
    MICRO10 = "MICRO10"
    MICRO100 = "MICRO100"
    MILLI = "MILLI"
    MILLI10 = "MILLI10"
    MILLI100 = "MILLI100"
    ETH = "ETH"
    ETH10 = "ETH10"
    ETH100 = "ETH100"
    KILO = "KILO"
    KILO10 = "KILO10"
    KILO100 = "KILO100"
    MEGA = "MEGA"
    MEGA10 = "MEGA10"
    MEGA100 = "MEGA100"
    GIGA = "GIGA"
    GIGA10 = "GIGA10"
    GIGA100 = "GIGA100"
    TERA = "TERA"
    TERA10 = "TERA10"
    TERA100 = "TERA100"

    @property
    def index(self) -> int:
        """Position in the canonical ordering (0 for WEI, 32 for TERA100)."""
        return DENOMINATIONS_BY_INDEX.inverse[self]

    @property
    def scale(self) -> Decimal:
        """Number of base units in one unit of this denomination."""
        return DENOMINATION_SCALES[self]

    @property
    def tier(self) -> Denomination:
        """The x1 member of this denomination's tier (e.g. GWEI for GWEI100)."""
        return DENOMINATIONS_BY_INDEX[self.index - self.index % 3]

    @classmethod
    def from_str(cls, name: str) -> Denomination:
        """Get denomination by its canonical name (case-insensitive).

        Args:
            name: Canonical name such as "GWEI" or "eth100". A `Denomination` is returned as is.

        Returns:
            Denomination: The matching member.

        Raises:
            UnknownDenomination: If $name is not a canonical denomination name.
        """
        if isinstance(name, Denomination):
            return name

        # Raise: only strings name a denomination
        if not isinstance(name, str):
            raise UnknownDenomination(name)

        try:
            return cls(name.strip().upper())
        except ValueError as e:
            raise UnknownDenomination(name) from e


# Index -> denomination, used by UI stepper controls; `.inverse` maps back
DENOMINATIONS_BY_INDEX: frozenbidict[int, Denomination] = frozenbidict(enumerate(Denomination))

DENOMINATION_SCALES: Mapping[Denomination, Decimal] = MappingProxyType({denomination: Decimal(10**index) for index, denomination in DENOMINATIONS_BY_INDEX.items()})

# Tiers whose denominated values are whole numbers
_INTEGER_TIERS = frozenset({Denomination.WEI, Denomination.KWEI, Denomination.MWEI})

# The x1 forms of these tiers round to an integer before the 9-digit rounding, so they keep no
# fraction while their x10/x100 siblings keep 9 digits
_INTEGER_FIRST = frozenset({Denomination.GWEI, Denomination.MICRO, Denomination.MILLI})


def _rounding_steps(denomination: Denomination) -> tuple[int, ...]:
    if denomination.tier in _INTEGER_TIERS:
        return (0,)
    if denomination in _INTEGER_FIRST:
        return (0, DENOMINATED_DECIMAL_PLACES)
    return (DENOMINATED_DECIMAL_PLACES,)


# Fractional digits kept by each successive rounding in `denominate`
ROUNDING_STEPS: Mapping[Denomination, tuple[int, ...]] = MappingProxyType({denomination: _rounding_steps(denomination) for denomination in Denomination})


def normalize(value: Decimal, denomination: Denomination | str) -> Decimal:
    """Scale $value expressed in $denomination up to base units.

    Multiplying by a power of ten is exact, so no rounding happens.

    Args:
        value: Amount in $denomination.
        denomination: Denomination of $value.

    Returns:
        Decimal: Amount in base units.

    Raises:
        UnknownDenomination: If $denomination is not known.
    """
    denomination = Denomination.from_str(denomination)
    with localcontext(conversion_context()):
        scaled = value.scaleb(denomination.index)
    return strip_trailing_zeros(scaled)


def denominate(value: Decimal, denomination: Denomination | str) -> Decimal:
    """Scale base-unit $value down into $denomination and round it.

    WEI, KWEI and MWEI tiers round to whole numbers. GWEI, MICRO and MILLI (x1 forms) round to a
    whole number and then to 9 digits. Every other denomination keeps 9 fractional digits.
    All roundings are half-up.

    Args:
        value: Amount in base units.
        denomination: Target denomination.

    Returns:
        Decimal: Rounded amount in $denomination.

    Raises:
        UnknownDenomination: If $denomination is not known.
    """
    denomination = Denomination.from_str(denomination)
    with localcontext(conversion_context()):
        result = value.scaleb(-denomination.index)

    for places in ROUNDING_STEPS[denomination]:
        result = round_to_places(result, places, DENOMINATION_ROUNDING)
    return result


NORMALIZERS: Mapping[Denomination, Callable[[Decimal], Decimal]] = MappingProxyType({denomination: partial(normalize, denomination=denomination) for denomination in Denomination})

DENOMINATORS: Mapping[Denomination, Callable[[Decimal], Decimal]] = MappingProxyType({denomination: partial(denominate, denomination=denomination) for denomination in Denomination})


def denomination_from_index(index: int) -> Denomination:
    """Get the denomination at $index of the canonical ordering.

    Raises:
        UnknownDenomination: If $index is outside 0..32.
    """
    try:
        return DENOMINATIONS_BY_INDEX[index]
    except (KeyError, TypeError) as e:
        raise UnknownDenomination(index) from e


def index_of_denomination(denomination: Denomination | str) -> int:
    """Get the canonical index of $denomination (0 for WEI, 32 for TERA100)."""
    return Denomination.from_str(denomination).index
