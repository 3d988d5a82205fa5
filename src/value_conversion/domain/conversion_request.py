from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping, Optional

from value_conversion.domain.denomination import Denomination
from value_conversion.domain.numeric_base import NumericBase, decode


@dataclass(frozen=True)
class ConversionRequest:
    """Everything `converter` needs to transform one value.

    Every field except $value is optional; the matching pipeline step is skipped when a field is None.
    Names of numeric bases and denominations are resolved to their enums on construction.

    Attributes:
        value (Any): Input value, encoded in $from_numeric_base when given, otherwise a Decimal-like scalar.
        from_numeric_base (Optional[NumericBase]): Encoding of $value.
        to_numeric_base (Optional[NumericBase]): Encoding of the result.
        from_denomination (Optional[Denomination]): Denomination of $value.
        to_denomination (Optional[Denomination]): Denomination of the result.
        from_currency (Optional[str]): Currency of $value.
        to_currency (Optional[str]): Currency of the result; defaults to $from_currency.
        conversion_rate (Optional[Decimal]): Units of $to_currency per whole unit of $from_currency.
        invert_conversion_rate (bool): Use 1 / $conversion_rate instead.
        number_of_decimals (Optional[int]): Round the result half-down to this many fractional digits.
        round_down (Optional[int]): Truncate the result to this many fractional digits (skipped when 0).
    """

    value: Any = None
    from_numeric_base: Optional[NumericBase] = None
    to_numeric_base: Optional[NumericBase] = None
    from_denomination: Optional[Denomination] = None
    to_denomination: Optional[Denomination] = None
    from_currency: Optional[str] = None
    to_currency: Optional[str] = None
    conversion_rate: Optional[Decimal] = None
    invert_conversion_rate: bool = False
    number_of_decimals: Optional[int] = None
    round_down: Optional[int] = None

    def __post_init__(self):
        """Resolve enum names, default $to_currency and validate rounding controls."""
        if self.from_numeric_base is not None:
            object.__setattr__(self, "from_numeric_base", NumericBase.from_str(self.from_numeric_base))
        if self.to_numeric_base is not None:
            object.__setattr__(self, "to_numeric_base", NumericBase.from_str(self.to_numeric_base))
        if self.from_denomination is not None:
            object.__setattr__(self, "from_denomination", Denomination.from_str(self.from_denomination))
        if self.to_denomination is not None:
            object.__setattr__(self, "to_denomination", Denomination.from_str(self.to_denomination))

        if self.to_currency is None:
            object.__setattr__(self, "to_currency", self.from_currency)

        # Rates arrive as numbers or decimal text; keep them exact
        if self.conversion_rate is not None:
            object.__setattr__(self, "conversion_rate", decode(self.conversion_rate, NumericBase.DEC))

        # Raise: rounding controls must be non-negative integers
        for field_name in ("number_of_decimals", "round_down"):
            places = getattr(self, field_name)
            if places is not None and (isinstance(places, bool) or not isinstance(places, int) or places < 0):
                raise ValueError(f"Cannot create `ConversionRequest` because ${field_name} ({places!r}) is not a non-negative integer")

    @property
    def converts_currency(self) -> bool:
        """True if the request changes currency and so needs a conversion rate."""
        return self.from_currency != self.to_currency

    @classmethod
    def from_mapping(cls, fields: Mapping[str, Any]) -> ConversionRequest:
        """Build a request from a mapping of field names to values.

        Raises:
            TypeError: If $fields contains a name that is not a request field.
        """
        if isinstance(fields, ConversionRequest):
            return fields
        return cls(**fields)
