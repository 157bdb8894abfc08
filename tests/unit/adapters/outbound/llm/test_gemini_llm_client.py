"""Unit tests for GeminiLLMClient."""

from unittest.mock import AsyncMock, Mock, patch

import httpx
import pytest
from openai import APIConnectionError, OpenAIError

from app.adapters.outbound.llm.gemini_llm_client import GeminiLLMClient
from app.application.dtos.config import ChatConfig
from app.application.errors import UpstreamServiceFailure
from app.application.ports.llm_client import LLMClient
from tests.unit.fakes import CHAT_CONFIG


def make_response(content):
    mock_choice = Mock()
    mock_choice.message.content = content
    mock_response = Mock()
    mock_response.choices = [mock_choice]
    return mock_response


@pytest.fixture
def mock_openai_class():
    """Patch the SDK client class used by the adapter."""
    with patch("app.adapters.outbound.llm.gemini_llm_client.AsyncOpenAI") as mock_class:
        mock_instance = Mock()
        mock_instance.chat.completions.create = AsyncMock()
        mock_instance.close = AsyncMock()
        mock_class.return_value = mock_instance
        yield mock_class


@pytest.fixture
def gemini_client(mock_openai_class):
    """Create GeminiLLMClient with the SDK patched out."""
    return GeminiLLMClient(CHAT_CONFIG)


def create_mock(gemini_client):
    return gemini_client._client.chat.completions.create


def test_gemini_client_implements_llm_client_port(gemini_client):
    """Test that GeminiLLMClient implements LLMClient port."""
    assert isinstance(gemini_client, LLMClient)


def test_gemini_client_configures_sdk_from_config(mock_openai_class):
    """Test that key, base URL, timeout and single-attempt policy come from config."""
    GeminiLLMClient(CHAT_CONFIG)

    mock_openai_class.assert_called_once_with(
        api_key="test-gemini-key",
        base_url="https://example.invalid/v1/",
        timeout=5,
        max_retries=0,
    )


def test_gemini_client_requires_api_key(mock_openai_class):
    """Test that an empty key is refused at construction."""
    config = ChatConfig(api_key="", model="m", base_url="https://x/", timeout_seconds=1)
    with pytest.raises(ValueError, match="Gemini API key is required"):
        GeminiLLMClient(config)


@pytest.mark.asyncio
async def test_generate_reply_sends_persona_and_message(gemini_client):
    """Test the request shape: system persona, user message, model, temperature."""
    create_mock(gemini_client).return_value = make_response("  Welcome to FORM.  ")

    reply = await gemini_client.generate_reply(
        system_prompt="You are the studio assistant.",
        user_message="What do you offer?",
    )

    assert reply == "Welcome to FORM."
    call_args = create_mock(gemini_client).call_args
    assert call_args.kwargs["model"] == "gemini-test"
    assert call_args.kwargs["temperature"] == 0.7
    assert call_args.kwargs["messages"] == [
        {"role": "system", "content": "You are the studio assistant."},
        {"role": "user", "content": "What do you offer?"},
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize("content", [None, ""])
async def test_generate_reply_returns_empty_string_for_empty_completion(gemini_client, content):
    """Test that missing content is reported as an empty reply, not an error."""
    create_mock(gemini_client).return_value = make_response(content)

    assert await gemini_client.generate_reply("s", "u") == ""


@pytest.mark.asyncio
async def test_generate_reply_handles_no_choices(gemini_client):
    """Test an empty choices list."""
    response = Mock()
    response.choices = []
    create_mock(gemini_client).return_value = response

    assert await gemini_client.generate_reply("s", "u") == ""


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [
        OpenAIError("quota exceeded for project 1234"),
        APIConnectionError(request=httpx.Request("POST", "https://example.invalid")),
    ],
)
async def test_generate_reply_wraps_sdk_errors(gemini_client, error):
    """Test that provider errors become a uniform UpstreamServiceFailure."""
    create_mock(gemini_client).side_effect = error

    with pytest.raises(UpstreamServiceFailure) as exc_info:
        await gemini_client.generate_reply("s", "u")

    assert exc_info.value.detail == "Failed to generate response"
    assert exc_info.value.status_code == 502
    assert "1234" not in exc_info.value.detail


@pytest.mark.asyncio
async def test_generate_reply_closes_sdk_client(gemini_client):
    """Test that the per-request SDK client is closed after a completion."""
    create_mock(gemini_client).return_value = make_response("Hello.")

    await gemini_client.generate_reply("s", "u")

    gemini_client._client.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_generate_reply_closes_sdk_client_on_error(gemini_client):
    """Test that the SDK client is closed when the completion fails."""
    create_mock(gemini_client).side_effect = OpenAIError("service unavailable")

    with pytest.raises(UpstreamServiceFailure):
        await gemini_client.generate_reply("s", "u")

    gemini_client._client.close.assert_awaited_once()
