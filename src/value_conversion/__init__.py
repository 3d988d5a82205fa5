__version__ = "0.0.1"

from value_conversion.domain.conversion_request import ConversionRequest
from value_conversion.domain.denomination import (
    DENOMINATION_SCALES,
    DENOMINATIONS_BY_INDEX,
    DENOMINATORS,
    NORMALIZERS,
    Denomination,
    denominate,
    denomination_from_index,
    index_of_denomination,
    normalize,
)
from value_conversion.domain.numeric_base import DECODERS, ENCODERS, NumericBase, decode, encode
from value_conversion.domain.unit_alias import UNIT_ALIASES, resolve_unit
from value_conversion.engine.converter import converter
from value_conversion.errors import (
    ConversionError,
    InvalidBase,
    InvalidNumericLiteral,
    MissingConversionRate,
    PrecisionExceeded,
    UndefinedDivision,
    UnknownDenomination,
    UnknownNumericBase,
    UnknownUnit,
)
from value_conversion.facade.arithmetic import add, divide, multiply, subtract, to_negative
from value_conversion.facade.comparison import (
    conversion_greater_than,
    conversion_gte,
    conversion_less_than,
    conversion_lte,
    conversion_max,
)
from value_conversion.facade.conversion import conversion_util, wei_hex_from_gwei_decimal

# Short names for the public operations
convert = conversion_util
negate = to_negative
compare_greater = conversion_greater_than
compare_less = conversion_less_than
compare_gte = conversion_gte
compare_lte = conversion_lte

__all__ = [
    "ConversionRequest",
    "Denomination",
    "NumericBase",
    # Operations
    "add",
    "compare_greater",
    "compare_gte",
    "compare_less",
    "compare_lte",
    "conversion_greater_than",
    "conversion_gte",
    "conversion_less_than",
    "conversion_lte",
    "conversion_max",
    "conversion_util",
    "convert",
    "converter",
    "decode",
    "denominate",
    "denomination_from_index",
    "divide",
    "encode",
    "index_of_denomination",
    "multiply",
    "negate",
    "normalize",
    "resolve_unit",
    "subtract",
    "to_negative",
    "wei_hex_from_gwei_decimal",
    # Tables
    "DECODERS",
    "DENOMINATIONS_BY_INDEX",
    "DENOMINATION_SCALES",
    "DENOMINATORS",
    "ENCODERS",
    "NORMALIZERS",
    "UNIT_ALIASES",
    # Errors
    "ConversionError",
    "InvalidBase",
    "InvalidNumericLiteral",
    "MissingConversionRate",
    "PrecisionExceeded",
    "UndefinedDivision",
    "UnknownDenomination",
    "UnknownNumericBase",
    "UnknownUnit",
]
