"""Lead repository adapters."""

from app.adapters.outbound.lead.lead_repository import InMemoryLeadRepository
from app.adapters.outbound.lead.postgres_lead_repository import PostgresLeadRepository
from app.adapters.outbound.lead.supabase_lead_repository import SupabaseLeadRepository

__all__ = [
    "InMemoryLeadRepository",
    "PostgresLeadRepository",
    "SupabaseLeadRepository",
]
