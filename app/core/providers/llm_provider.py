"""
Abstract base class for LLM providers.

This module defines a vendor-neutral interface for interacting with
Large Language Models. Concrete implementations (OpenAI-compatible, Groq,
Gemini) must implement this interface.
"""
from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.models.enums import LLMRole


# Fragments vendors use when a prompt does not fit the model's context window.
CONTEXT_LENGTH_MARKERS = (
    "context_length_exceeded",
    "maximum context length",
    "context window",
    "exceeds the maximum number of tokens",
    "too long",
)


class ContextLengthExceededError(Exception):
    """Raised by a provider when the request exceeds the model's context length."""


def is_context_length_error(exc: Exception) -> bool:
    """Whether a vendor SDK error reports a context-length violation."""
    if getattr(exc, "code", None) == "context_length_exceeded":
        return True
    body = getattr(exc, "body", None)
    if isinstance(body, dict):
        error = body.get("error", body)
        if isinstance(error, dict) and error.get("code") == "context_length_exceeded":
            return True
    message = str(exc).lower()
    return any(marker in message for marker in CONTEXT_LENGTH_MARKERS)


class LLMMessage(BaseModel):
    """Vendor-neutral message format for LLM conversations."""

    role: LLMRole
    content: str

    model_config = ConfigDict(frozen=True)


class LLMResponse(BaseModel):
    """Standardized response from an LLM provider."""

    content: str
    model: str
    usage: Optional[dict[str, int]] = None

    model_config = ConfigDict(frozen=True)


class LLMProvider(ABC):
    """
    Abstract interface for LLM providers.

    Implementations translate vendor failures at this boundary:
    a context-length violation becomes ContextLengthExceededError, any other
    API failure becomes UpstreamServiceError.

    Example:
        provider = OpenAIProvider(api_key="...", model_name="gpt-3.5-turbo")
        response = await provider.generate_text(
            [
                LLMMessage(role=LLMRole.SYSTEM, content="Answer in JSON."),
                LLMMessage(role=LLMRole.USER, content="Hello!"),
            ],
            json_mode=True,
        )
        print(response.content)
    """

    @abstractmethod
    async def generate_text(
        self,
        messages: list[LLMMessage],
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        json_mode: bool = False,
    ) -> LLMResponse:
        """
        Generate text completion from messages.

        Args:
            messages: List of conversation messages.
            temperature: Sampling temperature (0.0-1.0).
            max_tokens: Maximum tokens to generate (None for model default).
            json_mode: Ask the model to return a single JSON object.

        Returns:
            LLMResponse containing generated content and metadata.

        Raises:
            ContextLengthExceededError: The prompt does not fit the model.
            UpstreamServiceError: Any other provider failure.
        """
        ...
