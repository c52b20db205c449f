"""
Unit tests for LLM provider error translation.
"""
import groq
import httpx
import openai
import pytest
from google.api_core import exceptions as google_exceptions
from unittest.mock import AsyncMock, MagicMock

from app.core.exceptions import UpstreamServiceError
from app.core.providers.llm_provider import (
    ContextLengthExceededError,
    LLMMessage,
    is_context_length_error,
)
from app.core.providers.gemini_provider import GeminiProvider
from app.core.providers.groq_provider import GroqProvider
from app.core.providers.openai_provider import OpenAIProvider
from app.models import LLMRole


REQUEST = httpx.Request("POST", "https://openrouter.ai/api/v1/chat/completions")
MESSAGES = [
    LLMMessage(role=LLMRole.SYSTEM, content="Answer in JSON."),
    LLMMessage(role=LLMRole.USER, content="Summarize."),
]


@pytest.fixture
def provider():
    provider = OpenAIProvider(api_key="test-key", model_name="gpt-3.5-turbo")
    provider.client = MagicMock()
    provider.client.chat.completions.create = AsyncMock()
    return provider


def make_completion(content):
    completion = MagicMock()
    completion.choices[0].message.content = content
    completion.usage.prompt_tokens = 10
    completion.usage.completion_tokens = 5
    completion.usage.total_tokens = 15
    return completion


def test_context_length_error_detected_by_code():
    error = MagicMock()
    error.code = "context_length_exceeded"
    assert is_context_length_error(error)


def test_context_length_error_detected_by_message():
    assert is_context_length_error(Exception("This model's maximum context length is 4097 tokens"))
    assert not is_context_length_error(Exception("Rate limit exceeded"))


@pytest.mark.asyncio
async def test_generate_text_json_mode(provider):
    provider.client.chat.completions.create.return_value = make_completion('{"briefSummary": "x"}')

    response = await provider.generate_text(MESSAGES, temperature=0.3, max_tokens=2000, json_mode=True)

    assert response.content == '{"briefSummary": "x"}'
    assert response.usage == {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15}
    kwargs = provider.client.chat.completions.create.call_args.kwargs
    assert kwargs["response_format"] == {"type": "json_object"}
    assert kwargs["max_tokens"] == 2000
    assert kwargs["messages"][0] == {"role": "system", "content": "Answer in JSON."}


@pytest.mark.asyncio
async def test_generate_text_without_json_mode(provider):
    provider.client.chat.completions.create.return_value = make_completion("plain")

    await provider.generate_text(MESSAGES)

    kwargs = provider.client.chat.completions.create.call_args.kwargs
    assert "response_format" not in kwargs
    assert "max_tokens" not in kwargs


@pytest.mark.asyncio
async def test_context_length_rejection_is_tagged(provider):
    provider.client.chat.completions.create.side_effect = openai.BadRequestError(
        "This model's maximum context length is 16385 tokens.",
        response=httpx.Response(400, request=REQUEST),
        body={"code": "context_length_exceeded"},
    )

    with pytest.raises(ContextLengthExceededError):
        await provider.generate_text(MESSAGES)


@pytest.mark.asyncio
async def test_other_api_errors_keep_status(provider):
    provider.client.chat.completions.create.side_effect = openai.RateLimitError(
        "Rate limit exceeded",
        response=httpx.Response(429, request=REQUEST),
        body=None,
    )

    with pytest.raises(UpstreamServiceError) as exc_info:
        await provider.generate_text(MESSAGES)

    assert exc_info.value.status_code == 429
    assert exc_info.value.detail == "Rate limit exceeded"


def test_context_length_error_detected_by_body_code():
    error = groq.BadRequestError(
        "Please reduce the length of the messages or completion.",
        response=httpx.Response(400, request=REQUEST),
        body={"error": {"code": "context_length_exceeded"}},
    )
    assert is_context_length_error(error)


# Groq


@pytest.fixture
def groq_provider():
    provider = GroqProvider(api_key="test-key")
    provider.client = MagicMock()
    provider.client.chat.completions.create = AsyncMock()
    return provider


@pytest.mark.asyncio
async def test_groq_json_mode(groq_provider):
    groq_provider.client.chat.completions.create.return_value = make_completion("{}")

    response = await groq_provider.generate_text(MESSAGES, temperature=0.3, json_mode=True)

    assert response.content == "{}"
    assert response.model == "llama-3.1-8b-instant"
    kwargs = groq_provider.client.chat.completions.create.call_args.kwargs
    assert kwargs["response_format"] == {"type": "json_object"}
    assert kwargs["temperature"] == 0.3


@pytest.mark.asyncio
async def test_groq_without_json_mode(groq_provider):
    groq_provider.client.chat.completions.create.return_value = make_completion("plain")

    await groq_provider.generate_text(MESSAGES)

    assert "response_format" not in groq_provider.client.chat.completions.create.call_args.kwargs


@pytest.mark.asyncio
async def test_groq_context_length_rejection_is_tagged(groq_provider):
    groq_provider.client.chat.completions.create.side_effect = groq.BadRequestError(
        "Please reduce the length of the messages or completion.",
        response=httpx.Response(400, request=REQUEST),
        body={"error": {"code": "context_length_exceeded"}},
    )

    with pytest.raises(ContextLengthExceededError):
        await groq_provider.generate_text(MESSAGES)


@pytest.mark.asyncio
async def test_groq_other_api_errors_keep_status(groq_provider):
    groq_provider.client.chat.completions.create.side_effect = groq.RateLimitError(
        "Rate limit reached",
        response=httpx.Response(429, request=REQUEST),
        body=None,
    )

    with pytest.raises(UpstreamServiceError) as exc_info:
        await groq_provider.generate_text(MESSAGES)

    assert exc_info.value.status_code == 429
    assert exc_info.value.detail == "Rate limit reached"


# Gemini


@pytest.fixture
def gemini_provider():
    provider = GeminiProvider(api_key="test-key")
    provider._model = MagicMock()
    provider._model.generate_content_async = AsyncMock()
    return provider


def make_gemini_response(text):
    response = MagicMock()
    response.text = text
    response.usage_metadata.prompt_token_count = 10
    response.usage_metadata.candidates_token_count = 5
    response.usage_metadata.total_token_count = 15
    return response


@pytest.mark.asyncio
async def test_gemini_json_mode(gemini_provider):
    gemini_provider._model.generate_content_async.return_value = make_gemini_response("{}")

    response = await gemini_provider.generate_text(
        MESSAGES, temperature=0.3, max_tokens=2000, json_mode=True
    )

    assert response.content == "{}"
    assert response.usage == {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15}
    call = gemini_provider._model.generate_content_async.call_args
    prompt = call.args[0]
    assert prompt.startswith("System Instructions: Answer in JSON.")
    assert "User: Summarize." in prompt
    config = call.kwargs["generation_config"]
    assert config.response_mime_type == "application/json"
    assert config.max_output_tokens == 2000


@pytest.mark.asyncio
async def test_gemini_without_json_mode(gemini_provider):
    gemini_provider._model.generate_content_async.return_value = make_gemini_response("plain")

    await gemini_provider.generate_text(MESSAGES)

    config = gemini_provider._model.generate_content_async.call_args.kwargs["generation_config"]
    assert config.response_mime_type is None


@pytest.mark.asyncio
async def test_gemini_context_length_rejection_is_tagged(gemini_provider):
    gemini_provider._model.generate_content_async.side_effect = google_exceptions.InvalidArgument(
        "The input token count (2000000) exceeds the maximum number of tokens allowed (1048576)."
    )

    with pytest.raises(ContextLengthExceededError):
        await gemini_provider.generate_text(MESSAGES)


@pytest.mark.asyncio
async def test_gemini_other_api_errors_keep_status(gemini_provider):
    gemini_provider._model.generate_content_async.side_effect = google_exceptions.ResourceExhausted(
        "Quota exceeded for model"
    )

    with pytest.raises(UpstreamServiceError) as exc_info:
        await gemini_provider.generate_text(MESSAGES)

    assert exc_info.value.status_code == 429
    assert "Quota exceeded for model" in exc_info.value.detail
