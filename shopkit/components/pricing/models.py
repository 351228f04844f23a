"""
Pricing component models.

Coupon catalog, discount results and pricing configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shopkit.domain.values import ValidationError, is_finite_number

# --- Messages ---

INVALID_PRICE = "Invalid price"
INVALID_DISCOUNT_CODE = "Invalid discount code"


# --- Coupons ---


@dataclass(frozen=True)
class Coupon:
    """Discount code and its fractional rate (0 < discount < 1)."""

    code: str
    discount: float

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or not self.code:
            raise ValueError("Coupon code must be a non-empty string")
        if not is_finite_number(self.discount) or not 0 < self.discount < 1:
            raise ValueError(f"Coupon {self.code} discount must be between 0 and 1")


DEFAULT_COUPONS: tuple[Coupon, ...] = (
    Coupon(code="SAVE20", discount=0.2),
    Coupon(code="SAVE10", discount=0.1),
)


# --- Output Models ---


@dataclass(frozen=True)
class DiscountOutput:
    """Outcome of applying a discount code to a price."""

    ok: bool
    price: float | None = None
    rate: float = 0.0
    error: ValidationError | None = None


# --- Configuration ---


@dataclass(frozen=True)
class PricingConfig:
    """Pricing configuration from rules."""

    coupons: tuple[Coupon, ...] = DEFAULT_COUPONS
    holiday_month: int = 12
    holiday_day: int = 25
    holiday_rate: float = 0.2
    base_currency: str = "USD"
    # Derived lookup table, code -> rate
    rates: dict[str, float] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        rates = {c.code: c.discount for c in self.coupons}
        if len(rates) != len(self.coupons):
            raise ValueError("Coupon codes must be unique")
        object.__setattr__(self, "rates", rates)
