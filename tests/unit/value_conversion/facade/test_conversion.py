import logging
from decimal import Decimal

from value_conversion.facade.conversion import conversion_util, wei_hex_from_gwei_decimal


def test_missing_rate_falls_back_to_zero():
    result = conversion_util(100, from_currency="ETH", to_currency="USD")
    assert result == 0
    assert isinstance(result, int)


def test_zero_rate_falls_back_to_zero():
    assert conversion_util(100, from_currency="ETH", to_currency="USD", conversion_rate=0) == 0


def test_fallback_is_logged_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="value_conversion"):
        conversion_util(100, from_currency="ETH", to_currency="USD")
    assert "returning 0" in caplog.text


def test_missing_value_is_zero():
    assert conversion_util(None) == Decimal(0)
    assert conversion_util("", from_numeric_base="hex", to_numeric_base="hex") == "0"
    assert conversion_util(None, from_numeric_base="BN", to_numeric_base="dec") == "0"
    assert conversion_util(0, from_numeric_base="hex", to_numeric_base="hex") == "0"
    assert conversion_util(0, from_numeric_base="dec", from_denomination="ETH", to_denomination="WEI") == Decimal(0)
    assert conversion_util(b"", from_numeric_base="BN", to_numeric_base="BN") == 0


def test_to_currency_defaults_to_from_currency():
    assert conversion_util("2", from_currency="ETH", from_numeric_base="dec", from_denomination="ETH", to_denomination="GWEI") == Decimal(2_000_000_000)


def test_eth_in_hex_wei_to_usd():
    result = conversion_util(
        "0xde0b6b3a7640000",
        from_numeric_base="hex",
        from_denomination="WEI",
        from_currency="ETH",
        to_currency="USD",
        conversion_rate=1800.5,
        number_of_decimals=2,
    )
    assert result == Decimal("1800.5")


def test_usd_to_eth_with_inverted_rate():
    result = conversion_util(
        "2000000000000000000000",
        from_numeric_base="dec",
        from_currency="USD",
        to_currency="ETH",
        conversion_rate=2000,
        invert_conversion_rate=True,
        to_denomination="ETH",
    )
    assert result == Decimal(1)


def test_round_down_is_honoured():
    assert conversion_util("1.987", from_numeric_base="dec", round_down=2) == Decimal("1.98")


def test_wei_hex_from_gwei_decimal():
    assert wei_hex_from_gwei_decimal("5") == "12a05f200"
    assert wei_hex_from_gwei_decimal("1.5") == "59682f00"
    assert wei_hex_from_gwei_decimal(None) == "0"
