"""In-memory lead repository adapter."""

from uuid import uuid4

from app.application.dtos.lead import LeadRecord, LeadSubmission
from app.application.ports.lead_repository import LeadRepository


class InMemoryLeadRepository(LeadRepository):
    """In-memory implementation of lead repository for local development."""

    def __init__(self) -> None:
        """Initialize in-memory repository."""
        self._storage: list[LeadRecord] = []

    async def insert(self, submission: LeadSubmission) -> str:
        """
        Append a new record; identical submissions produce separate records.

        Args:
            submission: Validated submission

        Returns:
            Generated record identifier
        """
        lead_id = str(uuid4())
        self._storage.append(LeadRecord.from_submission(lead_id, submission))
        return lead_id

    @property
    def records(self) -> list[LeadRecord]:
        """Copy of every inserted record, oldest first."""
        return self._storage.copy()
