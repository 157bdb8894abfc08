"""Chat DTOs."""

from pydantic import ConfigDict

from app.application.dtos.base import DTO


class ChatRequest(DTO):
    """Chat request DTO (message is already trimmed and non-empty)."""

    message: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "What does a brand identity kit include?",
            }
        }
    )


class ChatResponse(DTO):
    """Chat response DTO."""

    reply: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "reply": "Our identity kits start at $1,500 and include...",
            }
        }
    )
