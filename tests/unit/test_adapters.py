"""
Unit tests for the dev exchange rate, shipping, analytics
and security code adapters.
"""

import logging

import pytest

from shopkit.adapters.analytics_log import LoggingAnalyticsAdapter
from shopkit.adapters.exchange_rates import StaticExchangeRateAdapter
from shopkit.adapters.security_codes import RandomSecurityCodeAdapter
from shopkit.adapters.shipping_flat_rate import FlatRateShippingAdapter
from shopkit.components.checkout import CurrencyNotSupportedError, ShippingQuote


class TestStaticExchangeRateAdapter:
    def test_same_currency(self, rates: StaticExchangeRateAdapter) -> None:
        assert rates.get_exchange_rate("USD", "USD") == 1.0

    def test_from_usd(self, rates: StaticExchangeRateAdapter) -> None:
        assert rates.get_exchange_rate("USD", "EUR") == pytest.approx(0.92)

    def test_cross_rate(self) -> None:
        rates = StaticExchangeRateAdapter(usd_rates={"USD": 1.0, "AAA": 2.0, "BBB": 4.0})
        assert rates.get_exchange_rate("AAA", "BBB") == pytest.approx(2.0)

    @pytest.mark.parametrize(("src", "dst"), [("XYZ", "USD"), ("USD", "XYZ")])
    def test_unknown_currency(
        self, rates: StaticExchangeRateAdapter, src: str, dst: str
    ) -> None:
        with pytest.raises(CurrencyNotSupportedError) as exc_info:
            rates.get_exchange_rate(src, dst)
        assert exc_info.value.currency == "XYZ"


class TestFlatRateShippingAdapter:
    def test_known_destination(self, shipping: FlatRateShippingAdapter) -> None:
        assert shipping.get_shipping_quote("New York") == ShippingQuote(cost=10, estimated_days=2)

    def test_lookup_ignores_case_and_whitespace(self, shipping: FlatRateShippingAdapter) -> None:
        assert shipping.get_shipping_quote("  LONDON ") is not None

    def test_unknown_destination(self, shipping: FlatRateShippingAdapter) -> None:
        assert shipping.get_shipping_quote("Atlantis") is None


class TestLoggingAnalyticsAdapter:
    def test_records_and_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        analytics = LoggingAnalyticsAdapter()

        with caplog.at_level(logging.INFO, logger="shopkit.adapters.analytics_log"):
            analytics.track_page_view("/home")
            analytics.track_page_view("/cart")
            analytics.track_page_view("/home")

        assert analytics.page_views == ["/home", "/cart", "/home"]
        assert analytics.count("/home") == 2
        assert "Page view: /cart" in caplog.text


class TestRandomSecurityCodeAdapter:
    def test_codes_are_in_range(self) -> None:
        adapter = RandomSecurityCodeAdapter()
        for _ in range(50):
            assert 0 <= adapter.generate_code() < 1_000_000

    def test_custom_digits(self) -> None:
        adapter = RandomSecurityCodeAdapter(digits=1)
        assert {adapter.generate_code() for _ in range(200)} <= set(range(10))

    def test_rejects_non_positive_digits(self) -> None:
        with pytest.raises(ValueError):
            RandomSecurityCodeAdapter(digits=0)
