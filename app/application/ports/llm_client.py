"""LLM client port interface."""

from abc import ABC, abstractmethod


class LLMClient(ABC):
    """Port interface for LLM client."""

    @abstractmethod
    async def generate_reply(self, system_prompt: str, user_message: str) -> str:
        """
        Generate a single completion for a user message.

        Args:
            system_prompt: Fixed system instruction (assistant persona)
            user_message: Trimmed, non-empty user message

        Returns:
            Completion text, or an empty string when the model returned nothing

        Raises:
            UpstreamServiceFailure: If the call or its transport fails
        """
        pass
