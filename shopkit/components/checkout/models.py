"""
Checkout component models.

Orders, shipping quotes and order submission results.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

PAYMENT_ERROR = "payment_error"
SHIPPING_UNAVAILABLE = "Shipping Unavailable"


@dataclass(frozen=True)
class Order:
    """Order being checked out."""

    total_amount: float


@dataclass(frozen=True)
class ShippingQuote:
    """Quote returned by a shipping provider."""

    cost: float
    estimated_days: int


@dataclass(frozen=True)
class OrderResult:
    """Outcome of submitting an order for payment."""

    success: bool
    error: str | None = None

    @classmethod
    def ok(cls) -> OrderResult:
        return cls(success=True)

    @classmethod
    def payment_failed(cls) -> OrderResult:
        return cls(success=False, error=PAYMENT_ERROR)

    def as_dict(self) -> dict[str, Any]:
        """{"success": True} or {"success": False, "error": ...}."""
        if self.error is None:
            return {"success": self.success}
        return {"success": self.success, "error": self.error}


@dataclass(frozen=True)
class CheckoutConfig:
    """Checkout configuration from rules."""

    base_currency: str = "USD"
