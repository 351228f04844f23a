"""
Email port interface.

Protocol-based interface for dispatching transactional emails
(welcome messages, one-time security codes).

Key requirements:
- Asynchronous send; fire-and-forget from the caller's perspective
- Recipient plus a single plain-text message body
- Provider failures surface as EmailError subclasses

Implementation strategies:
1. DevEmailAdapter: Logs emails and keeps them in memory (dev/test)
2. SMTP / provider API adapters (not shipped)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from typing import Protocol


class EmailStatus(Enum):
    """Email send result status."""

    SENT = "sent"
    FAILED = "failed"
    SKIPPED = "skipped"  # Dev adapter or dry-run


@dataclass
class EmailResult:
    """Result of an email send attempt."""

    status: EmailStatus
    recipient: str = ""
    message_id: str | None = None
    error: str | None = None
    sent_at: datetime | None = None

    @classmethod
    def success(cls, recipient: str, message_id: str | None = None) -> EmailResult:
        """Create a successful send result."""
        return cls(
            status=EmailStatus.SENT,
            recipient=recipient,
            message_id=message_id,
            sent_at=datetime.now(UTC),
        )

    @classmethod
    def skipped(
        cls, recipient: str, message_id: str | None = None, reason: str = "Dev mode"
    ) -> EmailResult:
        """Create a skipped result (dev adapter)."""
        return cls(
            status=EmailStatus.SKIPPED,
            recipient=recipient,
            message_id=message_id,
            error=reason,
        )

    @classmethod
    def failed(cls, recipient: str, error: str) -> EmailResult:
        """Create a failed result."""
        return cls(status=EmailStatus.FAILED, recipient=recipient, error=error)


class EmailPort(Protocol):
    """
    Email sending interface.

    Implementations:
    - DevEmailAdapter: Logs to console and stores in memory
    """

    async def send_email(self, recipient: str, message: str) -> EmailResult:
        """
        Send a plain-text email.

        Args:
            recipient: Email address of recipient
            message: Message body

        Returns:
            EmailResult with send outcome

        Raises:
            EmailSendError: If the provider rejects the message
        """
        ...


# --- Error Types ---


class EmailError(Exception):
    """Base exception for email-related errors."""

    pass


class EmailSendError(EmailError):
    """Failed to send email."""

    def __init__(self, recipient: str, error: str) -> None:
        self.recipient = recipient
        self.error = error
        super().__init__(f"Failed to send email to {recipient}: {error}")


# --- Constants ---

WELCOME_MESSAGE = "Welcome aboard! Your account is ready."
