"""
Unit tests for the accounts component.

Tests:
- sign_up rejects invalid addresses without sending anything
- sign_up sends exactly one welcome email
- login emails the generated security code (spied, not replaced)
"""

import re
from unittest.mock import AsyncMock, patch

import pytest

from shopkit.adapters.dev_email import DevEmailAdapter
from shopkit.adapters.security_codes import RandomSecurityCodeAdapter
from shopkit.components.accounts import is_valid_email, login, sign_up
from shopkit.core.ports.email import EmailSendError

EMAIL = "test@example.com"


@pytest.fixture
def email_port() -> AsyncMock:
    """Email port double with an awaitable send_email."""
    return AsyncMock()


class TestIsValidEmail:
    @pytest.mark.parametrize("email", [EMAIL, "a.b+c@mail.example.org"])
    def test_valid(self, email: str) -> None:
        assert is_valid_email(email) is True

    @pytest.mark.parametrize(
        "email", ["invalid_email", "no-tld@example", "@example.com", "a b@c.com", "", None]
    )
    def test_invalid(self, email: object) -> None:
        assert is_valid_email(email) is False


class TestSignUp:
    @pytest.mark.asyncio
    async def test_invalid_email_returns_false(self, email_port: AsyncMock) -> None:
        result = await sign_up("invalid_email", email_port)

        assert result is False
        email_port.send_email.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_valid_email_returns_true(self, email_port: AsyncMock) -> None:
        assert await sign_up(EMAIL, email_port) is True

    @pytest.mark.asyncio
    async def test_sends_welcome_email(self, email_port: AsyncMock) -> None:
        await sign_up(EMAIL, email_port)

        email_port.send_email.assert_awaited_once()
        args = email_port.send_email.await_args.args

        assert args[0] == EMAIL
        assert re.search("welcome", args[1], re.IGNORECASE)

    @pytest.mark.asyncio
    async def test_with_dev_adapter(self, mailer: DevEmailAdapter) -> None:
        await sign_up(EMAIL, mailer)

        assert mailer.email_count == 1
        last = mailer.get_last_email()
        assert last is not None
        assert last.recipient == EMAIL

    @pytest.mark.asyncio
    async def test_send_failure_propagates(self, mailer: DevEmailAdapter) -> None:
        mailer.failing_recipients.add(EMAIL)

        with pytest.raises(EmailSendError):
            await sign_up(EMAIL, mailer)


class TestLogin:
    @pytest.mark.asyncio
    async def test_sends_email_with_the_code(self, email_port: AsyncMock) -> None:
        security = RandomSecurityCodeAdapter()
        generated: list[int] = []
        original = security.generate_code

        def record() -> int:
            code = original()
            generated.append(code)
            return code

        with patch.object(security, "generate_code", side_effect=record) as spy:
            await login(EMAIL, security, email_port)

        spy.assert_called_once()
        email_port.send_email.assert_awaited_once_with(EMAIL, str(generated[0]))

    @pytest.mark.asyncio
    async def test_code_is_stringified(self, email_port: AsyncMock) -> None:
        security = RandomSecurityCodeAdapter()

        with patch.object(security, "generate_code", return_value=4321):
            await login(EMAIL, security, email_port)

        email_port.send_email.assert_awaited_once_with(EMAIL, "4321")

    @pytest.mark.asyncio
    async def test_returns_nothing(self, email_port: AsyncMock) -> None:
        assert await login(EMAIL, RandomSecurityCodeAdapter(), email_port) is None
