"""Chat use case."""

from typing import Any, Callable, Optional

from app.application.dtos.chat import ChatResponse
from app.application.dtos.config import ChatConfig
from app.application.dtos.payload import InboundPayload
from app.application.ports.llm_client import LLMClient
from app.application.use_cases.request_parsing import normalize_payload, validate_chat_request
from app.application.use_cases.studio_messages import StudioMessages


class ChatUseCase:
    """Use case proxying a visitor's chat message to the studio assistant."""

    def __init__(
        self,
        resolve_config: Callable[[], ChatConfig],
        llm_client_factory: Callable[[ChatConfig], LLMClient],
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize chat use case.

        Args:
            resolve_config: Reads the chat configuration for the current request
            llm_client_factory: Builds an LLM client from resolved configuration
            logger: Optional logger function (request_id, pipeline, stage, **kwargs)
        """
        self._resolve_config = resolve_config
        self._llm_client_factory = llm_client_factory
        self._logger = logger

    def _log(self, request_id: str, stage: str, **kwargs: Any) -> None:
        if self._logger:
            self._logger(request_id, "chat", stage, **kwargs)

    async def execute(
        self, payload: InboundPayload, request_id: Optional[str] = None
    ) -> ChatResponse:
        """
        Execute the chat pipeline.

        Args:
            payload: Inbound request body
            request_id: Optional request identifier for logging

        Returns:
            Chat response DTO

        Raises:
            InvalidPayload, MissingField: Bad client input (nothing upstream is called)
            ConfigurationMissing: GEMINI_API_KEY is not set
            UpstreamServiceFailure: The completion call failed
        """
        request_id = request_id or "unknown"

        request = validate_chat_request(normalize_payload(payload, "Invalid chat payload"))
        self._log(request_id, "validated", message_length=len(request.message))

        config = self._resolve_config()
        llm_client = self._llm_client_factory(config)

        reply = await llm_client.generate_reply(
            system_prompt=StudioMessages.SYSTEM_INSTRUCTION,
            user_message=request.message,
        )
        if not reply:
            self._log(request_id, "empty_completion", model=config.model)
            reply = StudioMessages.FALLBACK_REPLY

        self._log(request_id, "replied", model=config.model, reply_length=len(reply))
        return ChatResponse(reply=reply)
