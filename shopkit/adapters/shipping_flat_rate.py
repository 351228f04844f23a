"""
Flat-rate shipping adapter (dev).

Implements ShippingQuotePort from a destination table.
Destinations not in the table are unavailable (None).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shopkit.components.checkout.models import ShippingQuote

DEFAULT_QUOTES: dict[str, ShippingQuote] = {
    "new york": ShippingQuote(cost=10, estimated_days=2),
    "london": ShippingQuote(cost=25, estimated_days=5),
    "sydney": ShippingQuote(cost=40, estimated_days=9),
}


@dataclass
class FlatRateShippingAdapter:
    quotes: dict[str, ShippingQuote] = field(default_factory=lambda: dict(DEFAULT_QUOTES))

    def get_shipping_quote(self, destination: str) -> ShippingQuote | None:
        # Lookup is case-insensitive
        return self.quotes.get(destination.strip().lower())
