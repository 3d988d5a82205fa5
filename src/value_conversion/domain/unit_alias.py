from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from value_conversion.domain.denomination import Denomination
from value_conversion.errors import UnknownUnit

# Human-readable unit names per tier; every alias in a group resolves to the same denomination
UNIT_ALIASES: Mapping[Denomination, frozenset[str]] = MappingProxyType(
    {
        Denomination.WEI: frozenset({"wei"}),
        Denomination.KWEI: frozenset({"kwei", "babbage", "femtoether"}),
        Denomination.MWEI: frozenset({"mwei", "lovelace", "picoether"}),
        Denomination.GWEI: frozenset({"gwei", "shannon", "nanoether", "nano"}),
        Denomination.MICRO: frozenset({"micro", "microether", "szabo"}),
        Denomination.MILLI: frozenset({"milli", "milliether", "finney"}),
        Denomination.ETH: frozenset({"ether", "eth"}),
        Denomination.KILO: frozenset({"kether", "grand", "kilo", "kiloether"}),
        Denomination.MEGA: frozenset({"mether", "mega"}),
        Denomination.GIGA: frozenset({"gether", "giga"}),
        Denomination.TERA: frozenset({"tether", "tera"}),
    }
)


def resolve_unit(name: str) -> Denomination:
    """Resolve a human-readable unit name to its canonical denomination.

    Matching ignores case and surrounding whitespace.

    Args:
        name: Unit name or synonym, e.g. "shannon", "Ether", "grand".

    Returns:
        Denomination: The x1 denomination of the matching tier.

    Raises:
        UnknownUnit: If $name matches no alias.

    Examples:
        >>> resolve_unit("nanoether")
        <Denomination.GWEI: 'GWEI'>
        >>> resolve_unit("ETH")
        <Denomination.ETH: 'ETH'>
    """
    # Raise: only strings name a unit
    if not isinstance(name, str):
        raise UnknownUnit(name)

    key = name.strip().lower()
    for denomination, aliases in UNIT_ALIASES.items():
        if key in aliases:
            return denomination

    raise UnknownUnit(name)
