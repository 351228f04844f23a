"""
Static exchange rate adapter (dev).

Implements ExchangeRatePort from a fixed table of rates against USD.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from shopkit.components.checkout.ports import CurrencyNotSupportedError

logger = logging.getLogger(__name__)

# Units of currency per 1 USD
DEFAULT_USD_RATES: dict[str, float] = {
    "USD": 1.0,
    "EUR": 0.92,
    "GBP": 0.79,
    "AUD": 1.52,
    "CAD": 1.36,
    "JPY": 149.5,
}


@dataclass
class StaticExchangeRateAdapter:
    """Exchange rates from an in-memory USD rate table."""

    usd_rates: dict[str, float] = field(default_factory=lambda: dict(DEFAULT_USD_RATES))

    def get_exchange_rate(self, from_currency: str, to_currency: str) -> float:
        """
        Cross rate from_currency -> to_currency via USD.

        Raises:
            CurrencyNotSupportedError: If either code is not in the table
        """
        for code in (from_currency, to_currency):
            if code not in self.usd_rates:
                raise CurrencyNotSupportedError(code)

        rate = self.usd_rates[to_currency] / self.usd_rates[from_currency]
        logger.debug("Exchange rate %s->%s = %s", from_currency, to_currency, rate)
        return rate
