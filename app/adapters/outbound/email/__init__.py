"""Email sender adapters."""

from app.adapters.outbound.email.in_memory_email_sender import InMemoryEmailSender
from app.adapters.outbound.email.resend_email_sender import ResendEmailSender

__all__ = [
    "InMemoryEmailSender",
    "ResendEmailSender",
]
