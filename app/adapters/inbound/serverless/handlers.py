"""Serverless function handlers (AWS Lambda / Netlify Functions event shape)."""

import asyncio
import base64
import binascii
import json
from typing import Any, Awaitable, Callable, Optional
from uuid import uuid4

from app.adapters.inbound.presenter import (
    METHOD_NOT_ALLOWED,
    Outcome,
    handle_chat,
    handle_submit_form,
)
from app.application.dtos.payload import InboundPayload, RawPayload, StructuredPayload
from app.infrastructure.logging.logger import log_request
from app.infrastructure.wiring.container import container


def _response(status_code: int, body: dict[str, Any]) -> dict[str, Any]:
    headers = {"Content-Type": "application/json"}
    if status_code == 405:
        headers["Allow"] = "POST"
    return {
        "statusCode": status_code,
        "headers": headers,
        "body": json.dumps(body),
    }


def _method(event: dict[str, Any]) -> str:
    """Read the HTTP method from a REST (v1) or HTTP API (v2) style event."""
    method = event.get("httpMethod")
    if not method:
        http = (event.get("requestContext") or {}).get("http") or {}
        method = http.get("method") or ""
    return str(method).upper()


def payload_from_event(event: dict[str, Any]) -> InboundPayload:
    """
    Decide once whether the event body still needs JSON parsing.

    Args:
        event: Function invocation event

    Returns:
        RawPayload for text bodies, StructuredPayload for pre-parsed ones
    """
    body = event.get("body")
    if not isinstance(body, (str, bytes)):
        return StructuredPayload(body)
    if event.get("isBase64Encoded"):
        try:
            return RawPayload(base64.b64decode(body, validate=True))
        except binascii.Error:
            return RawPayload(body)
    return RawPayload(body)


def _invoke(
    event: dict[str, Any],
    endpoint: str,
    run: Callable[[InboundPayload, str], Awaitable[Outcome]],
) -> dict[str, Any]:
    request_id = str(uuid4())
    method = _method(event)
    log_request(request_id, "serverless", endpoint=endpoint, method=method)

    if method != "POST":
        return _response(405, METHOD_NOT_ALLOWED)

    status_code, body = asyncio.run(run(payload_from_event(event), request_id))

    log_request(request_id, "serverless", endpoint=endpoint, status_code=status_code)
    return _response(status_code, body)


def chat_handler(event: dict[str, Any], context: Optional[Any] = None) -> dict[str, Any]:
    """Function entrypoint for POST /api/chat."""
    return _invoke(
        event,
        "/api/chat",
        lambda payload, request_id: handle_chat(container.chat_use_case, payload, request_id),
    )


def submit_form_handler(event: dict[str, Any], context: Optional[Any] = None) -> dict[str, Any]:
    """Function entrypoint for POST /api/submit-form."""
    return _invoke(
        event,
        "/api/submit-form",
        lambda payload, request_id: handle_submit_form(
            container.submit_lead_use_case, payload, request_id
        ),
    )
