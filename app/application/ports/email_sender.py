"""Email sender port."""

from abc import ABC, abstractmethod

from app.application.dtos.email import OutboundEmail


class EmailSender(ABC):
    """Port interface for transactional email delivery."""

    @abstractmethod
    async def send(self, email: OutboundEmail) -> str:
        """
        Send exactly one email.

        Args:
            email: Message to deliver

        Returns:
            Provider message identifier

        Raises:
            NotificationFailure: If the send is rejected or errors
        """
        pass
