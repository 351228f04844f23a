"""
Checkout component ports.

External interfaces for currency conversion and shipping quotes.
Payment is the shared PaymentPort in shopkit.core.ports.payment.
"""

from __future__ import annotations

from typing import Protocol

from .models import ShippingQuote


class ExchangeRatePort(Protocol):
    """
    Port for exchange rate lookup.

    Implementations:
    - StaticExchangeRateAdapter: Fixed rate table (dev/test)
    """

    def get_exchange_rate(self, from_currency: str, to_currency: str) -> float:
        """
        Get the rate converting from_currency amounts into to_currency.

        Raises:
            CurrencyNotSupportedError: If either currency is unknown
        """
        ...


class ShippingQuotePort(Protocol):
    """
    Port for shipping quotes.

    Implementations:
    - FlatRateShippingAdapter: Destination table (dev/test)
    """

    def get_shipping_quote(self, destination: str) -> ShippingQuote | None:
        """
        Quote shipping to a destination.

        Returns:
            ShippingQuote, or None when shipping there is unavailable
        """
        ...


class CurrencyNotSupportedError(Exception):
    """Exchange rate requested for an unknown currency."""

    def __init__(self, currency: str) -> None:
        self.currency = currency
        super().__init__(f"Currency not supported: {currency}")
