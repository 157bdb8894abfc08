"""Payload normalization and field validation shared by both pipelines."""

import json
from typing import Any

from app.application.dtos.chat import ChatRequest
from app.application.dtos.lead import LeadSubmission
from app.application.dtos.payload import InboundPayload, RawPayload, StructuredPayload
from app.application.errors import InvalidPayload, MissingField

# Wire field name -> LeadSubmission attribute
LEAD_FIELDS = {
    "name": "name",
    "email": "email",
    "phone": "phone",
    "businessName": "business_name",
    "message": "message",
}


def normalize_payload(payload: InboundPayload, invalid_message: str) -> dict[str, Any]:
    """
    Resolve an inbound payload to a JSON object.

    Args:
        payload: Raw JSON text or an already-decoded value
        invalid_message: Detail used when the decoded value is not an object

    Returns:
        The decoded object, unchanged (field checks happen in the validators)

    Raises:
        InvalidPayload: If the text is not valid JSON or the value is not an object
    """
    if isinstance(payload, RawPayload):
        try:
            data = json.loads(payload.body)
        except (ValueError, TypeError) as exc:
            # UnicodeDecodeError is a ValueError
            raise InvalidPayload("Invalid JSON payload") from exc
    elif isinstance(payload, StructuredPayload):
        data = payload.data
    else:
        raise InvalidPayload(invalid_message)

    if not isinstance(data, dict):
        raise InvalidPayload(invalid_message)
    return data


def _trimmed(data: dict[str, Any], field: str) -> str:
    """Return the trimmed string value of a field, or '' if absent or not a string."""
    value = data.get(field)
    if not isinstance(value, str):
        return ""
    return value.strip()


def validate_chat_request(data: dict[str, Any]) -> ChatRequest:
    """
    Build a chat request from a decoded payload.

    Raises:
        MissingField: If the message is absent or blank
    """
    message = _trimmed(data, "message")
    if not message:
        raise MissingField("Message is required")
    return ChatRequest(message=message)


def validate_lead_submission(data: dict[str, Any]) -> LeadSubmission:
    """
    Build a lead submission from a decoded payload.

    All five fields are trimmed independently; a field that is absent,
    not a string, or blank after trimming fails the whole submission.

    Raises:
        MissingField: If any required field is absent or blank
    """
    values = {attr: _trimmed(data, field) for field, attr in LEAD_FIELDS.items()}
    if not all(values.values()):
        raise MissingField("Missing required fields")
    return LeadSubmission(**values)
