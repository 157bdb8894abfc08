"""Gemini LLM client adapter (OpenAI-compatible endpoint)."""

from openai import AsyncOpenAI, OpenAIError

from app.application.dtos.config import ChatConfig
from app.application.errors import UpstreamServiceFailure
from app.application.ports.llm_client import LLMClient
from app.infrastructure.logging.logger import log_upstream_failure

TEMPERATURE = 0.7


class GeminiLLMClient(LLMClient):
    """Gemini client implementation using the official OpenAI SDK.

    Each instance serves a single completion and closes its SDK client
    afterwards.
    """

    def __init__(self, config: ChatConfig) -> None:
        """
        Initialize Gemini LLM client.

        Args:
            config: Resolved chat configuration (API key, model, base URL, timeout)
        """
        if not config.api_key:
            raise ValueError("Gemini API key is required")

        self._model = config.model
        self._client = AsyncOpenAI(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout_seconds,
            max_retries=0,  # Single attempt per request
        )

    async def generate_reply(self, system_prompt: str, user_message: str) -> str:
        """
        Generate a reply using the Gemini chat completions API.

        Args:
            system_prompt: System instruction (assistant persona)
            user_message: User message

        Returns:
            Completion text, or an empty string when the model returned none

        Raises:
            UpstreamServiceFailure: If the API call or its transport fails
        """
        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_message},
        ]

        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=messages,
                temperature=TEMPERATURE,
            )
        except OpenAIError as e:
            log_upstream_failure("gemini", "chat.completions.create", e)
            raise UpstreamServiceFailure("Failed to generate response") from e
        finally:
            # Built per request; release its connection pool
            await self._client.close()

        if not response.choices or response.choices[0].message.content is None:
            return ""
        return response.choices[0].message.content.strip()
