"""Submit lead use case."""

from datetime import datetime, timezone
from typing import Any, Callable, Optional

from app.application.dtos.config import LeadConfig
from app.application.dtos.lead import SubmitResult
from app.application.dtos.payload import InboundPayload
from app.application.errors import NotificationFailure
from app.application.ports.email_sender import EmailSender
from app.application.ports.lead_repository import LeadRepository
from app.application.use_cases.lead_emails import admin_notification, client_acknowledgment
from app.application.use_cases.request_parsing import normalize_payload, validate_lead_submission


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SubmitLeadUseCase:
    """Use case for booking-form submissions: persist the lead, then notify."""

    def __init__(
        self,
        resolve_config: Callable[[], LeadConfig],
        lead_repository_factory: Callable[[LeadConfig], LeadRepository],
        email_sender_factory: Callable[[LeadConfig], EmailSender],
        logger: Optional[Callable[..., None]] = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """
        Initialize submit lead use case.

        Args:
            resolve_config: Reads the lead configuration for the current request
            lead_repository_factory: Builds the lead repository from configuration
            email_sender_factory: Builds the email sender from configuration
            logger: Optional logger function (request_id, pipeline, stage, **kwargs)
            clock: Source of the submission timestamp
        """
        self._resolve_config = resolve_config
        self._lead_repository_factory = lead_repository_factory
        self._email_sender_factory = email_sender_factory
        self._logger = logger
        self._clock = clock

    def _log(self, request_id: str, stage: str, **kwargs: Any) -> None:
        if self._logger:
            self._logger(request_id, "submit_lead", stage, **kwargs)

    async def execute(
        self, payload: InboundPayload, request_id: Optional[str] = None
    ) -> SubmitResult:
        """
        Execute the lead-submission pipeline.

        Stages run strictly in order and the first failure ends the request.
        A lead that was inserted stays inserted even if an email fails
        afterwards; the caller still receives the failure.

        Args:
            payload: Inbound request body
            request_id: Optional request identifier for logging

        Returns:
            Result carrying the new lead's identifier

        Raises:
            InvalidPayload, MissingField: Bad client input (nothing upstream is called)
            ConfigurationMissing: A required credential is not set
            PersistenceFailure: The insert failed (no email is sent)
            NotificationFailure: An email send failed
        """
        request_id = request_id or "unknown"

        submission = validate_lead_submission(
            normalize_payload(payload, "Invalid form payload")
        )
        self._log(request_id, "validated")

        config = self._resolve_config()
        lead_repository = self._lead_repository_factory(config)
        email_sender = self._email_sender_factory(config)

        lead_id = await lead_repository.insert(submission)
        self._log(request_id, "lead_inserted", lead_id=lead_id, repository=config.repository)

        admin_email = admin_notification(
            submission,
            sender=config.email_from,
            admin_email=config.admin_email,
            submitted_at=self._clock(),
        )
        try:
            await email_sender.send(admin_email)
        except NotificationFailure as exc:
            self._log(request_id, "admin_email_failed", lead_id=lead_id)
            raise NotificationFailure("Failed to send admin notification email") from exc
        self._log(request_id, "admin_email_sent", lead_id=lead_id)

        try:
            await email_sender.send(client_acknowledgment(submission, sender=config.email_from))
        except NotificationFailure as exc:
            self._log(request_id, "confirmation_email_failed", lead_id=lead_id)
            raise NotificationFailure("Failed to send confirmation email") from exc
        self._log(request_id, "confirmation_email_sent", lead_id=lead_id)

        return SubmitResult(lead_id=lead_id)
