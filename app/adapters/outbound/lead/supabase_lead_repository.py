"""Supabase-backed lead repository adapter."""

from typing import Optional

import httpx
from postgrest.exceptions import APIError
from supabase import AsyncClient, acreate_client

from app.application.dtos.lead import LeadSubmission, lead_row
from app.application.errors import PersistenceFailure
from app.application.ports.lead_repository import LeadRepository
from app.infrastructure.logging.logger import log_upstream_failure


class SupabaseLeadRepository(LeadRepository):
    """Lead repository that inserts through the Supabase REST API."""

    def __init__(
        self,
        url: str,
        key: str,
        table: str = "leads",
        client: Optional[AsyncClient] = None,
    ) -> None:
        """
        Initialize Supabase repository.

        Args:
            url: Supabase project URL (SUPABASE_URL)
            key: Supabase API key (SUPABASE_ANON_KEY)
            table: Leads table name
            client: Pre-built async client owned by the caller; when omitted a
                client is created for each insert and closed afterwards
        """
        self._url = url
        self._key = key
        self._table = table
        self._client = client

    async def insert(self, submission: LeadSubmission) -> str:
        """
        Insert one lead row and return the id Supabase assigned to it.

        Args:
            submission: Validated submission

        Returns:
            Record identifier

        Raises:
            PersistenceFailure: If the insert is rejected, the transport fails,
                or no row comes back
        """
        client = self._client or await acreate_client(self._url, self._key)
        try:
            response = await client.table(self._table).insert(lead_row(submission)).execute()
        except (APIError, httpx.HTTPError) as e:
            log_upstream_failure("supabase", f"insert into {self._table}", e)
            raise PersistenceFailure("Failed to save lead to database") from e
        finally:
            if client is not self._client:
                # Built for this insert; release its connection pool
                await client.postgrest.aclose()

        if not response.data or "id" not in response.data[0]:
            log_upstream_failure(
                "supabase",
                f"insert into {self._table}",
                ValueError("insert returned no row"),
            )
            raise PersistenceFailure("Failed to save lead to database")

        return str(response.data[0]["id"])
