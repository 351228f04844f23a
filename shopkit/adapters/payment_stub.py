"""
Payment stub adapter (dev).

Stub implementation of PaymentPort that approves every charge
unless the card is on the decline list or a failure is forced.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from uuid import uuid4

from shopkit.core.ports.payment import ChargeResult, CreditCard, PaymentError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChargeRecord:
    """A charge seen by the stub, kept for test assertions."""

    credit_card: CreditCard
    amount: float
    result: ChargeResult


@dataclass
class PaymentStubAdapter:
    """
    Stub payment adapter.

    Satisfies the PaymentPort protocol.
    """

    declined_cards: set[str] = field(default_factory=set)
    charges: list[ChargeRecord] = field(default_factory=list)

    # Force every charge to fail (or raise) for testing purposes
    _force_status: str | None = None
    _raise_error: bool = False

    async def charge(self, credit_card: CreditCard, amount: float) -> ChargeResult:
        """
        Charge a card (never contacts a real provider).

        Args:
            credit_card: Card to charge
            amount: Amount to charge

        Returns:
            ChargeResult, "failed" for declined cards or non-positive amounts

        Raises:
            PaymentError: If the stub is set to simulate a provider outage
        """
        if self._raise_error:
            raise PaymentError("Payment provider unavailable (stub)")

        result = self._decide(credit_card, amount)

        logger.debug(
            f"PaymentStubAdapter.charge: "
            f"amount={amount}, status={result.status}"
        )

        self.charges.append(ChargeRecord(credit_card, amount, result))
        return result

    def _decide(self, credit_card: CreditCard, amount: float) -> ChargeResult:
        if self._force_status == "failed":
            return ChargeResult(status="failed", reason="forced")

        if credit_card.credit_card_number in self.declined_cards:
            return ChargeResult(status="failed", reason="card_declined")

        if amount <= 0:
            return ChargeResult(status="failed", reason="invalid_amount")

        return ChargeResult(status="success", transaction_id=f"stub-{uuid4().hex[:12]}")

    # --- Testing Helpers ---

    def decline_card(self, credit_card_number: str) -> None:
        self.declined_cards.add(credit_card_number)

    def fail_all(self) -> None:
        """Make every subsequent charge fail."""
        self._force_status = "failed"

    def simulate_outage(self, enabled: bool = True) -> None:
        """Make every subsequent charge raise PaymentError."""
        self._raise_error = enabled

    def clear_overrides(self) -> None:
        self._force_status = None
        self._raise_error = False
        self.declined_cards.clear()
