"""
Checkout component.

Orchestrates currency conversion, shipping quotes and payment through
injected ports, translating collaborator results into domain outcomes.

Key behaviors:
- No caching and no retries; each call hits its collaborator once
- Collaborator exceptions propagate to the caller
- Only a failed charge status is mapped to a domain error
"""

from __future__ import annotations

import logging

from shopkit.core.ports.payment import CreditCard, PaymentPort
from shopkit.rules.models import Rules

from .models import (
    SHIPPING_UNAVAILABLE,
    CheckoutConfig,
    Order,
    OrderResult,
)
from .ports import ExchangeRatePort, ShippingQuotePort

logger = logging.getLogger(__name__)


def get_price_in_currency(
    price: float,
    currency: str,
    rates: ExchangeRatePort,
    config: CheckoutConfig | None = None,
) -> float:
    """
    Convert a base-currency price into the target currency.

    Args:
        price: Price in the base currency
        currency: Target currency code
        rates: Exchange rate port
        config: Optional checkout config (base currency)

    Returns:
        price multiplied by the base -> currency rate
    """
    config = config or CheckoutConfig()
    rate = rates.get_exchange_rate(config.base_currency, currency)
    return price * rate


def format_amount(amount: float) -> str:
    """Render whole amounts without a decimal part (10.0 -> "10")."""
    if isinstance(amount, float) and amount.is_integer():
        return str(int(amount))
    return str(amount)


def get_shipping_info(destination: str, shipping: ShippingQuotePort) -> str:
    """
    Describe shipping to a destination.

    Returns:
        "Shipping Cost: $<cost> (<days> days)", or "Shipping Unavailable"
        when the provider has no quote
    """
    quote = shipping.get_shipping_quote(destination)
    if not quote:
        logger.debug("No shipping quote for destination=%s", destination)
        return SHIPPING_UNAVAILABLE

    return f"Shipping Cost: ${format_amount(quote.cost)} ({quote.estimated_days} days)"


async def submit_order(
    order: Order,
    credit_card: CreditCard,
    payment: PaymentPort,
) -> OrderResult:
    """
    Charge the card for the order total.

    Args:
        order: Order to pay for
        credit_card: Card to charge
        payment: Payment port

    Returns:
        OrderResult.ok() when the charge succeeds, otherwise
        OrderResult(success=False, error="payment_error")
    """
    result = await payment.charge(credit_card, order.total_amount)

    if result.status != "success":
        logger.warning(
            "Payment failed: amount=%s, reason=%s", order.total_amount, result.reason
        )
        return OrderResult.payment_failed()

    logger.debug("Payment succeeded: transaction_id=%s", result.transaction_id)
    return OrderResult.ok()


def load_config_from_rules(rules: Rules) -> CheckoutConfig:
    """Load CheckoutConfig from rules.yaml."""
    return CheckoutConfig(base_currency=rules.pricing.base_currency)
