"""Email DTOs."""

from app.application.dtos.base import DTO


class OutboundEmail(DTO):
    """A single transactional email."""

    sender: str
    recipient: str
    subject: str
    html: str
