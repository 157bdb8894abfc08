"""Run a pipeline and map its outcome to an HTTP status and JSON body.

Every deployment target goes through these functions, so status codes and
body shapes are identical regardless of how the request arrived.
"""

import logging
from typing import Any

from app.adapters.inbound.schemas import ErrorResponse, SubmitFormResponse
from app.application.dtos.payload import InboundPayload
from app.application.errors import PipelineError
from app.application.use_cases.chat_use_case import ChatUseCase
from app.application.use_cases.submit_lead_use_case import SubmitLeadUseCase
from app.infrastructure.logging.logger import log_request, logger

CHAT_ERROR = "Failed to generate response"
SUBMIT_FORM_ERROR = "Failed to process form submission"
METHOD_NOT_ALLOWED: dict[str, str] = {"error": "Method not allowed"}

Outcome = tuple[int, dict[str, Any]]


def present_error(error: Exception, message: str, request_id: str, component: str) -> Outcome:
    """
    Map a pipeline failure to a status code and error body.

    Known pipeline errors keep their status and detail; anything else is a
    500 whose detail does not reveal the exception text.

    Args:
        error: Raised exception
        message: Endpoint-level error message
        request_id: Request identifier
        component: Pipeline name for logging

    Returns:
        (status_code, body)
    """
    if isinstance(error, PipelineError):
        log_request(
            request_id,
            component,
            level=logging.WARNING if error.status_code < 500 else logging.ERROR,
            status_code=error.status_code,
            error_type=type(error).__name__,
            details=error.detail,
        )
        status_code, details = error.status_code, error.detail
    else:
        logger.exception("Unhandled error in %s (request_id=%s)", component, request_id)
        status_code, details = 500, "Unknown error"

    return status_code, ErrorResponse(error=message, details=details).model_dump()


async def handle_chat(
    use_case: ChatUseCase, payload: InboundPayload, request_id: str
) -> Outcome:
    """Run the chat pipeline for one request."""
    try:
        response = await use_case.execute(payload, request_id=request_id)
    except Exception as e:
        return present_error(e, CHAT_ERROR, request_id, "chat")
    return 200, {"reply": response.reply}


async def handle_submit_form(
    use_case: SubmitLeadUseCase, payload: InboundPayload, request_id: str
) -> Outcome:
    """Run the lead-submission pipeline for one request."""
    try:
        result = await use_case.execute(payload, request_id=request_id)
    except Exception as e:
        return present_error(e, SUBMIT_FORM_ERROR, request_id, "submit_lead")
    return 200, SubmitFormResponse(lead_id=result.lead_id).model_dump(by_alias=True)
