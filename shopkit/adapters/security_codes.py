"""
Random security code adapter.

Implements SecurityCodePort with codes from the secrets module.
"""

from __future__ import annotations

import secrets

CODE_DIGITS = 6


class RandomSecurityCodeAdapter:
    def __init__(self, digits: int = CODE_DIGITS) -> None:
        if digits < 1:
            raise ValueError("digits must be positive")
        self._upper = 10**digits

    def generate_code(self) -> int:
        """Return a code in [0, 10**digits)."""
        return secrets.randbelow(self._upper)
