"""
Accounts component.

Sign-up and passwordless login flows over the email and security ports.

Key behaviors:
- sign_up validates the address before any side effect
- sign_up dispatches exactly one welcome email per valid address
- login sends the generated code to the given address
"""

from __future__ import annotations

import logging
import re

from shopkit.core.ports.email import WELCOME_MESSAGE, EmailPort

from .ports import SecurityCodePort

logger = logging.getLogger(__name__)

# local@domain.tld, no whitespace
EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(email: object) -> bool:
    """Basic email format check."""
    return isinstance(email, str) and EMAIL_REGEX.match(email) is not None


async def sign_up(email: str, mailer: EmailPort) -> bool:
    """
    Register an email address and send a welcome email.

    Args:
        email: Address to register
        mailer: Email port

    Returns:
        False for an invalid address (nothing sent), True otherwise
    """
    if not is_valid_email(email):
        logger.debug("Sign-up rejected, invalid email")
        return False

    await mailer.send_email(email, WELCOME_MESSAGE)
    return True


async def login(email: str, security: SecurityCodePort, mailer: EmailPort) -> None:
    """Generate a one-time code and email it to the user."""
    code = security.generate_code()
    await mailer.send_email(email, str(code))
