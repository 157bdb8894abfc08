"""Dependency injection container."""

from app.adapters.outbound.email import InMemoryEmailSender
from app.adapters.outbound.lead import InMemoryLeadRepository
from app.application.dtos.config import LeadConfig
from app.application.ports.email_sender import EmailSender
from app.application.ports.lead_repository import LeadRepository
from app.application.use_cases.chat_use_case import ChatUseCase
from app.application.use_cases.submit_lead_use_case import SubmitLeadUseCase
from app.infrastructure.config.resolver import chat_config_resolver, lead_config_resolver
from app.infrastructure.logging.logger import log_stage
from app.infrastructure.wiring.dependencies import (
    create_email_sender,
    create_lead_repository,
    create_llm_client,
)


class Container:
    """Dependency injection container."""

    def __init__(self) -> None:
        """Initialize container with dependencies."""
        # Local-development doubles, shared across requests
        self._in_memory_leads = InMemoryLeadRepository()
        self._in_memory_outbox = InMemoryEmailSender()

        # Use cases (configuration is resolved per request inside execute)
        self._chat_use_case = ChatUseCase(
            chat_config_resolver(),
            create_llm_client,
            logger=log_stage,
        )
        self._submit_lead_use_case = SubmitLeadUseCase(
            lead_config_resolver(),
            self._lead_repository_for,
            self._email_sender_for,
            logger=log_stage,
        )

    def _lead_repository_for(self, config: LeadConfig) -> LeadRepository:
        return create_lead_repository(config, self._in_memory_leads)

    def _email_sender_for(self, config: LeadConfig) -> EmailSender:
        return create_email_sender(config, self._in_memory_outbox)

    @property
    def chat_use_case(self) -> ChatUseCase:
        """Get chat use case."""
        return self._chat_use_case

    @property
    def submit_lead_use_case(self) -> SubmitLeadUseCase:
        """Get submit lead use case."""
        return self._submit_lead_use_case


# Global container instance
container = Container()


def get_chat_use_case() -> ChatUseCase:
    """FastAPI dependency returning the chat use case."""
    return container.chat_use_case


def get_submit_lead_use_case() -> SubmitLeadUseCase:
    """FastAPI dependency returning the submit lead use case."""
    return container.submit_lead_use_case
