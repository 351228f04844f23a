"""
Pricing component.

Public API for coupons, coupon discounts and the holiday discount.
"""

from .component import (
    apply_discount,
    calculate_discount,
    get_coupons,
    get_discount,
    load_config_from_rules,
)
from .models import (
    DEFAULT_COUPONS,
    INVALID_DISCOUNT_CODE,
    INVALID_PRICE,
    Coupon,
    DiscountOutput,
    PricingConfig,
)

__all__ = [
    # Functions
    "apply_discount",
    "calculate_discount",
    "get_coupons",
    "get_discount",
    "load_config_from_rules",
    # Models
    "Coupon",
    "DiscountOutput",
    "PricingConfig",
    "DEFAULT_COUPONS",
    "INVALID_DISCOUNT_CODE",
    "INVALID_PRICE",
]
