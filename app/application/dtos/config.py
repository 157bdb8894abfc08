"""Per-request configuration resolved from the environment."""

from typing import Optional

from app.application.dtos.base import DTO


class ChatConfig(DTO):
    """Settings the chat pipeline needs for one request."""

    api_key: str
    model: str
    base_url: str
    timeout_seconds: float


class LeadConfig(DTO):
    """Settings the lead-submission pipeline needs for one request."""

    repository: str
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None
    leads_table: str = "leads"
    database_url: Optional[str] = None
    email_sender: str
    resend_api_key: Optional[str] = None
    admin_email: str
    email_from: str
