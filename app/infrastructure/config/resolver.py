"""Resolve per-request pipeline configuration from settings."""

from typing import Callable, Optional

from app.application.dtos.config import ChatConfig, LeadConfig
from app.application.errors import ConfigurationMissing
from app.infrastructure.config.settings import (
    DEFAULT_ADMIN_EMAIL,
    DEFAULT_EMAIL_FROM,
    DEFAULT_GEMINI_MODEL,
    Settings,
    load_settings,
)


def _require(value: str, env_name: str) -> str:
    if not value:
        raise ConfigurationMissing(f"{env_name} is missing from the server environment.")
    return value


def resolve_chat_config(settings: Settings) -> ChatConfig:
    """
    Build chat configuration, failing fast on a missing API key.

    Args:
        settings: Current settings

    Returns:
        ChatConfig instance

    Raises:
        ConfigurationMissing: If GEMINI_API_KEY (or API_KEY) is not set
    """
    return ChatConfig(
        api_key=_require(settings.gemini_api_key, "GEMINI_API_KEY"),
        model=settings.gemini_model or DEFAULT_GEMINI_MODEL,
        base_url=settings.gemini_base_url,
        timeout_seconds=settings.gemini_timeout_seconds,
    )


def resolve_lead_config(settings: Settings) -> LeadConfig:
    """
    Build lead-submission configuration.

    Storage credentials are checked before the email key. Which values are
    required depends on the selected adapters; the defaults (Supabase and
    Resend) need SUPABASE_URL, SUPABASE_ANON_KEY and RESEND_API_KEY.

    Args:
        settings: Current settings

    Returns:
        LeadConfig instance

    Raises:
        ConfigurationMissing: If a value required by the selected adapters is not set
    """
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None
    database_url: Optional[str] = None
    resend_api_key: Optional[str] = None

    if settings.lead_repository == "supabase":
        supabase_url = _require(settings.supabase_url, "SUPABASE_URL")
        supabase_key = _require(settings.supabase_anon_key, "SUPABASE_ANON_KEY")
    elif settings.lead_repository == "postgres":
        database_url = _require(settings.database_url, "DATABASE_URL")
    elif settings.lead_repository != "in_memory":
        raise ConfigurationMissing(
            f"LEAD_REPOSITORY has unsupported value {settings.lead_repository!r}."
        )

    if settings.email_sender == "resend":
        resend_api_key = _require(settings.resend_api_key, "RESEND_API_KEY")
    elif settings.email_sender != "in_memory":
        raise ConfigurationMissing(
            f"EMAIL_SENDER has unsupported value {settings.email_sender!r}."
        )

    return LeadConfig(
        repository=settings.lead_repository,
        supabase_url=supabase_url,
        supabase_key=supabase_key,
        leads_table=settings.supabase_leads_table,
        database_url=database_url,
        email_sender=settings.email_sender,
        resend_api_key=resend_api_key,
        # Blank optional values fall back to their defaults
        admin_email=settings.admin_email or DEFAULT_ADMIN_EMAIL,
        email_from=settings.resend_from or DEFAULT_EMAIL_FROM,
    )


def chat_config_resolver(
    settings_loader: Callable[[], Settings] = load_settings,
) -> Callable[[], ChatConfig]:
    """Return a resolver that reads fresh settings on every call."""
    return lambda: resolve_chat_config(settings_loader())


def lead_config_resolver(
    settings_loader: Callable[[], Settings] = load_settings,
) -> Callable[[], LeadConfig]:
    """Return a resolver that reads fresh settings on every call."""
    return lambda: resolve_lead_config(settings_loader())
