"""
Unit tests for the payment stub adapter.
"""

import pytest

from shopkit.adapters.payment_stub import PaymentStubAdapter
from shopkit.core.ports.payment import CreditCard, PaymentError, PaymentPort

CARD = CreditCard(credit_card_number="4111111111111111")


class TestPaymentStubAdapter:
    def test_satisfies_payment_port_protocol(self) -> None:
        adapter: PaymentPort = PaymentStubAdapter()
        assert isinstance(adapter, PaymentStubAdapter)

    @pytest.mark.asyncio
    async def test_approves_by_default(self) -> None:
        result = await PaymentStubAdapter().charge(CARD, 10)

        assert result.status == "success"
        assert result.is_success is True
        assert result.transaction_id is not None
        assert result.transaction_id.startswith("stub-")

    @pytest.mark.asyncio
    async def test_records_charges(self) -> None:
        adapter = PaymentStubAdapter()

        result = await adapter.charge(CARD, 10)

        assert len(adapter.charges) == 1
        record = adapter.charges[0]
        assert (record.credit_card, record.amount, record.result) == (CARD, 10, result)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", [0, -5])
    async def test_non_positive_amount_fails(self, amount: float) -> None:
        result = await PaymentStubAdapter().charge(CARD, amount)

        assert result.status == "failed"
        assert result.reason == "invalid_amount"


class TestPaymentStubOverrides:
    @pytest.mark.asyncio
    async def test_declined_card(self) -> None:
        adapter = PaymentStubAdapter()
        adapter.decline_card(CARD.credit_card_number)

        result = await adapter.charge(CARD, 10)

        assert result.status == "failed"
        assert result.reason == "card_declined"

    @pytest.mark.asyncio
    async def test_fail_all(self) -> None:
        adapter = PaymentStubAdapter()
        adapter.fail_all()

        assert (await adapter.charge(CARD, 10)).status == "failed"

    @pytest.mark.asyncio
    async def test_outage_raises_without_recording(self) -> None:
        adapter = PaymentStubAdapter()
        adapter.simulate_outage()

        with pytest.raises(PaymentError):
            await adapter.charge(CARD, 10)

        assert adapter.charges == []

    @pytest.mark.asyncio
    async def test_clear_overrides(self) -> None:
        adapter = PaymentStubAdapter()
        adapter.decline_card(CARD.credit_card_number)
        adapter.fail_all()
        adapter.simulate_outage()

        adapter.clear_overrides()

        assert (await adapter.charge(CARD, 10)).status == "success"
