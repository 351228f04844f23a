"""
Pricing component.

Pure functions for coupon discounts and the date-based holiday discount.

Key behaviors:
- Unknown discount codes leave the price unchanged
- Invalid input yields "Invalid ..." sentinels from calculate_discount,
  and a tagged DiscountOutput from apply_discount
- get_discount reads time only through the injected clock
"""

from __future__ import annotations

from shopkit.core.ports.clock import ClockPort
from shopkit.domain.values import ValidationError, is_finite_number
from shopkit.rules.models import Rules

from .models import (
    INVALID_DISCOUNT_CODE,
    INVALID_PRICE,
    Coupon,
    DiscountOutput,
    PricingConfig,
)

# --- Pure Functions ---


def get_coupons(config: PricingConfig | None = None) -> list[Coupon]:
    """Return the coupon catalog."""
    config = config or PricingConfig()
    return list(config.coupons)


def apply_discount(
    price: object,
    discount_code: object,
    config: PricingConfig | None = None,
) -> DiscountOutput:
    """
    Apply a discount code to a price.

    Args:
        price: Non-negative finite number
        discount_code: Coupon code; unknown codes apply no discount
        config: Optional pricing config

    Returns:
        DiscountOutput; ok=False with an error for invalid input
    """
    config = config or PricingConfig()

    if not is_finite_number(price) or price < 0:  # type: ignore[operator]
        return DiscountOutput(
            ok=False,
            error=ValidationError("invalid_price", INVALID_PRICE, "price"),
        )

    if not isinstance(discount_code, str):
        return DiscountOutput(
            ok=False,
            error=ValidationError(
                "invalid_discount_code", INVALID_DISCOUNT_CODE, "discount_code"
            ),
        )

    rate = config.rates.get(discount_code, 0.0)
    return DiscountOutput(
        ok=True,
        price=price * (1 - rate),  # type: ignore[operator]
        rate=rate,
    )


def calculate_discount(
    price: object,
    discount_code: object,
    config: PricingConfig | None = None,
) -> float | str:
    """
    Discounted price, or an "Invalid ..." message for bad input.

    Callers detect failure by matching "invalid" in the returned string.
    """
    result = apply_discount(price, discount_code, config)
    if result.error is not None:
        return result.error.message
    assert result.price is not None
    return result.price


def get_discount(clock: ClockPort, config: PricingConfig | None = None) -> float:
    """
    Holiday discount rate for the current local date.

    Returns holiday_rate on the configured month/day (25 December by
    default), any time of day, else 0.
    """
    config = config or PricingConfig()
    today = clock.now()

    if today.month == config.holiday_month and today.day == config.holiday_day:
        return config.holiday_rate
    return 0


# --- Configuration Loader ---


def load_config_from_rules(rules: Rules) -> PricingConfig:
    """
    Load PricingConfig from rules.yaml.

    Args:
        rules: Validated rules

    Returns:
        PricingConfig instance
    """
    pricing = rules.pricing
    return PricingConfig(
        coupons=tuple(Coupon(code=c.code, discount=c.discount) for c in pricing.coupons),
        holiday_month=pricing.holiday_discount.month,
        holiday_day=pricing.holiday_discount.day,
        holiday_rate=pricing.holiday_discount.rate,
        base_currency=pricing.base_currency,
    )
