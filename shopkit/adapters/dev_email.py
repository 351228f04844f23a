"""
Dev Email Adapter.

Logs emails to console instead of sending.
Used for local development and testing.

Key behaviors:
- Logs email details at a configurable level
- Returns SKIPPED status (not SENT)
- Stores emails in memory for test assertions
- Can be told to fail for a recipient, raising EmailSendError
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import uuid4

from shopkit.core.ports.email import EmailResult, EmailSendError

logger = logging.getLogger(__name__)


@dataclass
class SentEmail:
    """Record of a logged email for test assertions."""

    id: str
    recipient: str
    message: str
    logged_at: datetime


@dataclass
class DevEmailAdapter:
    """
    Dev email adapter that logs instead of sending.

    Implements EmailPort protocol.
    """

    # In-memory storage for test assertions
    sent_emails: list[SentEmail] = field(default_factory=list)

    # Configuration
    log_level: int = logging.INFO
    log_body: bool = True
    body_preview_length: int = 100
    failing_recipients: set[str] = field(default_factory=set)

    async def send_email(self, recipient: str, message: str) -> EmailResult:
        """
        Log an email instead of sending.

        Args:
            recipient: Email address of recipient
            message: Message body

        Returns:
            EmailResult with SKIPPED status

        Raises:
            EmailSendError: If the recipient is configured to fail
        """
        if recipient in self.failing_recipients:
            raise EmailSendError(recipient, "Recipient rejected by dev adapter")

        message_id = f"dev-{uuid4().hex[:12]}"

        self.sent_emails.append(
            SentEmail(
                id=message_id,
                recipient=recipient,
                message=message,
                logged_at=datetime.now(UTC),
            )
        )

        self._log_email(recipient=recipient, message=message, message_id=message_id)

        return EmailResult.skipped(
            recipient,
            message_id=message_id,
            reason="Dev mode - email logged, not sent",
        )

    def _log_email(self, recipient: str, message: str, message_id: str) -> None:
        """Log email details."""
        parts = [f"EMAIL (dev): To={recipient}"]

        if self.log_body and message:
            preview = message[: self.body_preview_length]
            if len(message) > self.body_preview_length:
                preview += "..."
            parts.append(f"Body={preview}")

        parts.append(f"MessageID={message_id}")

        logger.log(self.log_level, ", ".join(parts))

    # --- Test Helper Methods ---

    def get_last_email(self) -> SentEmail | None:
        """Get the most recently logged email."""
        return self.sent_emails[-1] if self.sent_emails else None

    def get_emails_to(self, recipient: str) -> list[SentEmail]:
        """Get all emails logged to a specific recipient."""
        return [e for e in self.sent_emails if e.recipient == recipient]

    def clear(self) -> None:
        """Clear all stored emails (for test isolation)."""
        self.sent_emails.clear()

    @property
    def email_count(self) -> int:
        return len(self.sent_emails)
