"""Resend email sender adapter."""

import asyncio

import resend
from resend.exceptions import ResendError

from app.application.dtos.email import OutboundEmail
from app.application.errors import NotificationFailure
from app.application.ports.email_sender import EmailSender
from app.infrastructure.logging.logger import log_upstream_failure


class ResendEmailSender(EmailSender):
    """Email sender implementation using the official Resend SDK."""

    def __init__(self, api_key: str) -> None:
        """
        Initialize Resend sender.

        Args:
            api_key: Resend API key (RESEND_API_KEY)
        """
        if not api_key:
            raise ValueError("Resend API key is required")
        self._api_key = api_key

    def _send_sync(self, params: dict) -> dict:
        # The SDK reads its key from module state; every sender in a process
        # uses the single RESEND_API_KEY, so concurrent sends set the same value
        resend.api_key = self._api_key
        return resend.Emails.send(params)

    async def send(self, email: OutboundEmail) -> str:
        """
        Send one email through Resend.

        Args:
            email: Message to deliver

        Returns:
            Resend message identifier

        Raises:
            NotificationFailure: If Resend rejects the message or the transport fails
        """
        params = {
            "from": email.sender,
            "to": [email.recipient],
            "subject": email.subject,
            "html": email.html,
        }
        try:
            sent = await asyncio.to_thread(self._send_sync, params)
        except ResendError as e:
            # The SDK wraps transport errors in ResendError too
            log_upstream_failure("resend", "emails.send", e)
            raise NotificationFailure("Failed to send email") from e
        return sent.get("id", "")
