"""
Payment port interface.

External interface for charging a credit card for an order total.

Key requirements:
- Asynchronous charge call
- Outcome reported as a status string, never a partial charge
- Transport/provider faults raise PaymentError
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol

# --- Types ---

ChargeStatus = Literal["success", "failed"]


# --- Models ---


@dataclass(frozen=True)
class CreditCard:
    """Card details passed through to the payment provider."""

    credit_card_number: str


@dataclass(frozen=True)
class ChargeResult:
    """
    Result of a charge attempt.

    Attributes:
        status: "success" or "failed"
        transaction_id: Provider reference, when one was issued
        reason: Optional decline reason
    """

    status: ChargeStatus
    transaction_id: str | None = None
    reason: str | None = None

    @property
    def is_success(self) -> bool:
        return self.status == "success"


# --- Port Interface ---


class PaymentPort(Protocol):
    """
    Port for charging payments.

    Implementations:
    - PaymentStubAdapter: Succeeds unless the card is declined (dev/test)
    """

    async def charge(self, credit_card: CreditCard, amount: float) -> ChargeResult:
        """
        Charge the card for the given amount.

        Args:
            credit_card: Card to charge
            amount: Amount in the store's base currency

        Returns:
            ChargeResult with "success" or "failed" status
        """
        ...


# --- Error Types ---


class PaymentError(Exception):
    """Payment provider could not process the request."""

    pass
