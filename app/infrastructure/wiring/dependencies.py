"""Dependency injection factory functions."""

from app.adapters.outbound.email import InMemoryEmailSender, ResendEmailSender
from app.adapters.outbound.lead import (
    InMemoryLeadRepository,
    PostgresLeadRepository,
    SupabaseLeadRepository,
)
from app.adapters.outbound.llm.gemini_llm_client import GeminiLLMClient
from app.application.dtos.config import ChatConfig, LeadConfig
from app.application.ports.email_sender import EmailSender
from app.application.ports.lead_repository import LeadRepository
from app.application.ports.llm_client import LLMClient


def create_llm_client(config: ChatConfig) -> LLMClient:
    """
    Factory function to create the LLM client.

    Args:
        config: Resolved chat configuration

    Returns:
        LLMClient instance
    """
    return GeminiLLMClient(config)


def create_lead_repository(
    config: LeadConfig, in_memory: InMemoryLeadRepository
) -> LeadRepository:
    """
    Factory function to create lead repository.

    Args:
        config: Resolved lead configuration
        in_memory: Shared repository returned when LEAD_REPOSITORY=in_memory

    Returns:
        LeadRepository instance
    """
    if config.repository == "supabase":
        return SupabaseLeadRepository(
            url=config.supabase_url, key=config.supabase_key, table=config.leads_table
        )
    if config.repository == "postgres":
        return PostgresLeadRepository(config.database_url)
    return in_memory


def create_email_sender(config: LeadConfig, in_memory: InMemoryEmailSender) -> EmailSender:
    """
    Factory function to create email sender.

    Args:
        config: Resolved lead configuration
        in_memory: Shared sender returned when EMAIL_SENDER=in_memory

    Returns:
        EmailSender instance
    """
    if config.email_sender == "resend":
        return ResendEmailSender(config.resend_api_key)
    return in_memory
