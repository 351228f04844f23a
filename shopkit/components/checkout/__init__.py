"""
Checkout component.

Public API for currency conversion, shipping info and order submission.
"""

from shopkit.core.ports.payment import ChargeResult, CreditCard, PaymentPort

from .component import (
    format_amount,
    get_price_in_currency,
    get_shipping_info,
    load_config_from_rules,
    submit_order,
)
from .models import (
    PAYMENT_ERROR,
    SHIPPING_UNAVAILABLE,
    CheckoutConfig,
    Order,
    OrderResult,
    ShippingQuote,
)
from .ports import CurrencyNotSupportedError, ExchangeRatePort, ShippingQuotePort

__all__ = [
    # Functions
    "format_amount",
    "get_price_in_currency",
    "get_shipping_info",
    "load_config_from_rules",
    "submit_order",
    # Models
    "ChargeResult",
    "CheckoutConfig",
    "CreditCard",
    "Order",
    "OrderResult",
    "ShippingQuote",
    "PAYMENT_ERROR",
    "SHIPPING_UNAVAILABLE",
    # Ports
    "CurrencyNotSupportedError",
    "ExchangeRatePort",
    "PaymentPort",
    "ShippingQuotePort",
]
