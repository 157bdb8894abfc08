"""Lead repository port."""

from abc import ABC, abstractmethod

from app.application.dtos.lead import LeadSubmission


class LeadRepository(ABC):
    """Port interface for lead repository (insert-only)."""

    @abstractmethod
    async def insert(self, submission: LeadSubmission) -> str:
        """
        Insert exactly one lead record with status "new" and source "website".

        Args:
            submission: Validated submission

        Returns:
            Identifier assigned to the new record by the storage service

        Raises:
            PersistenceFailure: If the insert is rejected or errors
        """
        pass
