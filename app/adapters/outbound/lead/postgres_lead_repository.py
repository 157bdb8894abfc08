"""Postgres-backed lead repository adapter."""

from uuid import uuid4

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.dtos.lead import LeadSubmission, lead_row
from app.application.errors import PersistenceFailure
from app.application.ports.lead_repository import LeadRepository
from app.infrastructure.db import get_db_session
from app.infrastructure.logging.logger import log_upstream_failure

from .models import LeadModel


class PostgresLeadRepository(LeadRepository):
    """Postgres implementation of lead repository (direct connection)."""

    def __init__(self, database_url: str) -> None:
        """
        Initialize Postgres repository.

        Args:
            database_url: SQLAlchemy database URL
        """
        self._database_url = database_url

    async def insert(self, submission: LeadSubmission) -> str:
        """
        Insert one lead row.

        Args:
            submission: Validated submission

        Returns:
            Generated record identifier

        Raises:
            PersistenceFailure: If the insert fails
        """
        lead_id = str(uuid4())
        db: Session = get_db_session(self._database_url)
        try:
            db.add(LeadModel(id=lead_id, **lead_row(submission)))
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            log_upstream_failure("postgres", "insert lead", e)
            raise PersistenceFailure("Failed to save lead to database") from e
        finally:
            db.close()
        return lead_id
