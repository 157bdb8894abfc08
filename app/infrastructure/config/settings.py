"""Application settings."""

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

GEMINI_OPENAI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"
DEFAULT_GEMINI_MODEL = "gemini-3-flash-preview"
DEFAULT_ADMIN_EMAIL = "formconverts@gmail.com"
DEFAULT_EMAIL_FROM = "FORM Creative <onboarding@resend.dev>"


class Settings(BaseSettings):
    """Application configuration settings."""

    debug_mode: bool = False
    log_level: str = "INFO"
    gemini_api_key: str = ""
    api_key: str = ""  # Legacy name, used when GEMINI_API_KEY is blank
    gemini_model: str = DEFAULT_GEMINI_MODEL
    gemini_base_url: str = GEMINI_OPENAI_BASE_URL
    gemini_timeout_seconds: float = 30.0
    lead_repository: str = "supabase"  # supabase, postgres or in_memory
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_leads_table: str = "leads"
    database_url: str = ""  # Required when lead_repository=postgres
    email_sender: str = "resend"  # resend or in_memory
    resend_api_key: str = ""
    admin_email: str = DEFAULT_ADMIN_EMAIL
    resend_from: str = DEFAULT_EMAIL_FROM

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
        extra="ignore",
        populate_by_name=True,
    )

    @model_validator(mode="after")
    def _fall_back_to_api_key(self) -> "Settings":
        if not self.gemini_api_key.strip():
            self.gemini_api_key = self.api_key.strip()
        return self


def load_settings() -> Settings:
    """
    Read settings from the current process environment.

    A new instance is built on every call so each request sees the
    environment as it is at request time.

    Returns:
        Settings instance
    """
    return Settings()
