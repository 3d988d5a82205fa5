from decimal import Decimal

import pytest

from value_conversion.domain.denomination import (
    DENOMINATION_SCALES,
    DENOMINATIONS_BY_INDEX,
    DENOMINATORS,
    NORMALIZERS,
    ROUNDING_STEPS,
    Denomination,
    denominate,
    denomination_from_index,
    index_of_denomination,
    normalize,
)
from value_conversion.errors import UnknownDenomination


def test_registry_has_33_denominations_in_canonical_order():
    assert len(Denomination) == 33
    assert len(DENOMINATIONS_BY_INDEX) == 33
    assert DENOMINATIONS_BY_INDEX[0] is Denomination.WEI
    assert DENOMINATIONS_BY_INDEX[9] is Denomination.GWEI
    assert DENOMINATIONS_BY_INDEX[18] is Denomination.ETH
    assert DENOMINATIONS_BY_INDEX[32] is Denomination.TERA100
    assert DENOMINATIONS_BY_INDEX.inverse[Denomination.KILO10] == 22


def test_scales_are_strictly_increasing_powers_of_ten():
    scales = [DENOMINATIONS_BY_INDEX[index].scale for index in range(33)]
    assert all(smaller < larger for smaller, larger in zip(scales, scales[1:]))
    assert Denomination.WEI.scale == Decimal(1)
    assert Denomination.GWEI100.scale == Decimal(10**11)
    assert Denomination.ETH.scale == Decimal(10**18)
    assert DENOMINATION_SCALES[Denomination.TERA] == Decimal(10**30)


def test_tier_is_the_x1_member_of_the_group():
    assert Denomination.WEI.tier is Denomination.WEI
    assert Denomination.GWEI100.tier is Denomination.GWEI
    assert Denomination.ETH10.tier is Denomination.ETH
    assert Denomination.TERA100.tier is Denomination.TERA


def test_from_str():
    assert Denomination.from_str("GWEI") is Denomination.GWEI
    assert Denomination.from_str(" eth100 ") is Denomination.ETH100
    assert Denomination.from_str(Denomination.MILLI) is Denomination.MILLI

    with pytest.raises(UnknownDenomination):
        Denomination.from_str("ETHER")
    with pytest.raises(UnknownDenomination):
        Denomination.from_str(18)


def test_normalize_scales_up_exactly():
    assert normalize(Decimal("1.5"), Denomination.GWEI) == Decimal(1_500_000_000)
    assert normalize(Decimal("0.000000000000000001"), "ETH") == Decimal(1)
    assert normalize(Decimal(3), "KWEI10") == Decimal(30_000)
    assert normalize(Decimal(2**256), "TERA100") == Decimal(2**256 * 10**32)


def test_denominate_rounds_small_tiers_to_whole_numbers():
    assert denominate(Decimal("2.5"), Denomination.WEI) == Decimal(3)
    assert denominate(Decimal(1_500), Denomination.KWEI) == Decimal(2)
    assert denominate(Decimal(1_500), Denomination.KWEI10) == Decimal(0)
    assert denominate(Decimal(149_999_999), Denomination.MWEI100) == Decimal(1)


def test_denominate_keeps_nine_digits_from_gwei_upwards():
    assert denominate(Decimal(1_234_567_891), Denomination.GWEI100) == Decimal("0.012345679")
    assert denominate(Decimal(1_234_567_890_123_456_789), Denomination.ETH) == Decimal("1.23456789")
    assert denominate(Decimal(10**30), Denomination.TERA) == Decimal(1)


def test_denominate_x1_forms_of_gwei_micro_milli_drop_the_fraction():
    value = Decimal(1_500_000_000)
    assert denominate(value, Denomination.GWEI) == Decimal(2)
    assert denominate(value, Denomination.GWEI10) == Decimal("0.15")

    assert denominate(Decimal(1_499_999_999), Denomination.GWEI) == Decimal(1)
    assert denominate(Decimal(1_500_000_000_000), Denomination.MICRO) == Decimal(2)
    assert denominate(Decimal(1_500_000_000_000), Denomination.MICRO10) == Decimal("0.15")
    assert denominate(Decimal(1_250_000_000_000_000), Denomination.MILLI) == Decimal(1)
    assert denominate(Decimal(1_250_000_000_000_000), Denomination.MILLI100) == Decimal("0.0125")


def test_rounding_steps_table():
    assert ROUNDING_STEPS[Denomination.WEI] == (0,)
    assert ROUNDING_STEPS[Denomination.MWEI100] == (0,)
    assert ROUNDING_STEPS[Denomination.GWEI] == (0, 9)
    assert ROUNDING_STEPS[Denomination.GWEI10] == (9,)
    assert ROUNDING_STEPS[Denomination.MILLI] == (0, 9)
    assert ROUNDING_STEPS[Denomination.ETH] == (9,)


def test_unknown_denomination_is_rejected():
    with pytest.raises(UnknownDenomination):
        normalize(Decimal(1), "FOO")
    with pytest.raises(UnknownDenomination):
        denominate(Decimal(1), "wei1000")


def test_index_lookups():
    assert denomination_from_index(0) is Denomination.WEI
    assert denomination_from_index(32) is Denomination.TERA100
    assert index_of_denomination("ETH") == 18
    assert index_of_denomination(Denomination.GWEI10) == 10

    with pytest.raises(UnknownDenomination):
        denomination_from_index(33)


def test_function_tables():
    assert NORMALIZERS[Denomination.KWEI](Decimal(2)) == Decimal(2_000)
    assert DENOMINATORS[Denomination.KWEI](Decimal(2_000)) == Decimal(2)
    with pytest.raises(TypeError):
        NORMALIZERS[Denomination.WEI] = None
