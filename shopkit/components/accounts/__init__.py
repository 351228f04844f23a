"""
Accounts component.

Public API for sign-up and login.
"""

from shopkit.core.ports.email import WELCOME_MESSAGE, EmailPort

from .component import EMAIL_REGEX, is_valid_email, login, sign_up
from .ports import SecurityCodePort

__all__ = [
    # Functions
    "is_valid_email",
    "login",
    "sign_up",
    # Constants
    "EMAIL_REGEX",
    "WELCOME_MESSAGE",
    # Ports
    "EmailPort",
    "SecurityCodePort",
]
