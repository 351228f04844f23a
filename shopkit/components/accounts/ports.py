"""
Accounts component ports.

Email dispatch is the shared EmailPort in shopkit.core.ports.email.
"""

from __future__ import annotations

from typing import Protocol


class SecurityCodePort(Protocol):
    """
    One-time security code generator.

    Implementations:
    - RandomSecurityCodeAdapter: 6-digit codes from the secrets module
    """

    def generate_code(self) -> int:
        """Return a fresh one-time code."""
        ...
