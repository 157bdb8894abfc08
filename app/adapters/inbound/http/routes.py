"""HTTP routes."""

from uuid import uuid4

from fastapi import APIRouter, Depends, FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.adapters.inbound.presenter import (
    METHOD_NOT_ALLOWED,
    handle_chat,
    handle_submit_form,
)
from app.adapters.inbound.schemas import ErrorResponse, SubmitFormResponse
from app.application.dtos.chat import ChatResponse
from app.application.dtos.payload import RawPayload
from app.application.use_cases.chat_use_case import ChatUseCase
from app.application.use_cases.submit_lead_use_case import SubmitLeadUseCase
from app.infrastructure.logging.logger import log_request
from app.infrastructure.wiring.container import get_chat_use_case, get_submit_lead_use_case

router = APIRouter()

API_PATHS = frozenset({"/api/chat", "/api/submit-form"})

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_405_METHOD_NOT_ALLOWED: {"description": "Method not allowed"},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    status.HTTP_502_BAD_GATEWAY: {"model": ErrorResponse},
}


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> dict[str, str]:
    """
    Health check endpoint for liveness/readiness.

    Returns:
        Health status
    """
    return {"status": "ok"}


@router.post("/api/chat", response_model=ChatResponse, responses=_ERROR_RESPONSES)
async def chat(
    request: Request,
    use_case: ChatUseCase = Depends(get_chat_use_case),
) -> JSONResponse:
    """
    Proxy a visitor message to the studio assistant.

    The raw body is handed to the pipeline unparsed so malformed JSON is
    reported as a 400 with the same body shape as every other failure.

    Args:
        request: Incoming request (body: {"message": string})
        use_case: Chat use case

    Returns:
        {"reply": string} or an error body
    """
    request_id = str(uuid4())
    body = await request.body()
    log_request(request_id, "http", endpoint="/api/chat", body_length=len(body))

    status_code, content = await handle_chat(use_case, RawPayload(body), request_id)

    log_request(request_id, "http", endpoint="/api/chat", status_code=status_code)
    return JSONResponse(status_code=status_code, content=content)


@router.post("/api/submit-form", response_model=SubmitFormResponse, responses=_ERROR_RESPONSES)
async def submit_form(
    request: Request,
    use_case: SubmitLeadUseCase = Depends(get_submit_lead_use_case),
) -> JSONResponse:
    """
    Capture a booking-form lead, store it, and send both notification emails.

    Args:
        request: Incoming request (body: name, email, phone, businessName, message)
        use_case: Submit lead use case

    Returns:
        {"success": true, "message": string, "leadId": string} or an error body
    """
    request_id = str(uuid4())
    body = await request.body()
    log_request(request_id, "http", endpoint="/api/submit-form", body_length=len(body))

    status_code, content = await handle_submit_form(use_case, RawPayload(body), request_id)

    log_request(request_id, "http", endpoint="/api/submit-form", status_code=status_code)
    return JSONResponse(status_code=status_code, content=content)


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """
    Answer every non-POST method on the API paths with the JSON 405 body.

    Other HTTP errors keep FastAPI's default handling.
    """
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED and request.url.path in API_PATHS:
        return JSONResponse(
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            content=METHOD_NOT_ALLOWED,
            headers={"Allow": "POST"},
        )
    return await http_exception_handler(request, exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the API's HTTP exception handlers on an application."""
    app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)
