# shopkit: Ports (Protocol Interfaces)
# Abstract interfaces for adapters; no implementations here

from shopkit.core.ports.clock import ClockPort
from shopkit.core.ports.email import (
    WELCOME_MESSAGE,
    EmailError,
    EmailPort,
    EmailResult,
    EmailSendError,
    EmailStatus,
)
from shopkit.core.ports.payment import (
    ChargeResult,
    ChargeStatus,
    CreditCard,
    PaymentError,
    PaymentPort,
)

__all__ = [
    # Clock
    "ClockPort",
    # Email
    "EmailError",
    "EmailPort",
    "EmailResult",
    "EmailSendError",
    "EmailStatus",
    "WELCOME_MESSAGE",
    # Payment
    "ChargeResult",
    "ChargeStatus",
    "CreditCard",
    "PaymentError",
    "PaymentPort",
]
