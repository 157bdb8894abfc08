"""In-memory email sender adapter."""

from uuid import uuid4

from app.application.dtos.email import OutboundEmail
from app.application.ports.email_sender import EmailSender


class InMemoryEmailSender(EmailSender):
    """Records messages instead of delivering them (local development)."""

    def __init__(self) -> None:
        """Initialize empty outbox."""
        self._outbox: list[OutboundEmail] = []

    async def send(self, email: OutboundEmail) -> str:
        """
        Record a message.

        Args:
            email: Message to record

        Returns:
            Generated message identifier
        """
        self._outbox.append(email)
        return str(uuid4())

    @property
    def outbox(self) -> list[OutboundEmail]:
        """Copy of every recorded message, oldest first."""
        return self._outbox.copy()
