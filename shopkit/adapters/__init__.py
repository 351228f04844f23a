# shopkit: Adapters
# Dev/test implementations of the ports

from shopkit.adapters.analytics_log import LoggingAnalyticsAdapter
from shopkit.adapters.clock import FixedClock, SystemClock
from shopkit.adapters.dev_email import DevEmailAdapter, SentEmail
from shopkit.adapters.exchange_rates import StaticExchangeRateAdapter
from shopkit.adapters.payment_stub import ChargeRecord, PaymentStubAdapter
from shopkit.adapters.security_codes import RandomSecurityCodeAdapter
from shopkit.adapters.shipping_flat_rate import FlatRateShippingAdapter

__all__ = [
    "ChargeRecord",
    "DevEmailAdapter",
    "FixedClock",
    "FlatRateShippingAdapter",
    "LoggingAnalyticsAdapter",
    "PaymentStubAdapter",
    "RandomSecurityCodeAdapter",
    "SentEmail",
    "StaticExchangeRateAdapter",
    "SystemClock",
]
