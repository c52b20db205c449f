"""
Groq (Llama) implementation of LLMProvider.

This module provides a vendor-specific implementation for the Groq API
(fast Llama inference) while conforming to the LLMProvider interface.
"""
from typing import Optional

from groq import APIError, AsyncGroq
from loguru import logger

from app.core.exceptions import UpstreamServiceError
from app.core.providers.llm_provider import (
    ContextLengthExceededError,
    LLMMessage,
    LLMProvider,
    LLMResponse,
    is_context_length_error,
)


class GroqProvider(LLMProvider):
    """
    Groq implementation of LLMProvider.

    Uses the Groq SDK for fast Llama model inference.
    """

    def __init__(self, api_key: str, model_name: str = "llama-3.1-8b-instant"):
        self.client = AsyncGroq(api_key=api_key)
        self.model_name = model_name

    async def generate_text(
        self,
        messages: list[LLMMessage],
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        json_mode: bool = False,
    ) -> LLMResponse:
        """Generate text completion using Groq."""
        # Groq message format is OpenAI compatible
        groq_messages = [
            {"role": msg.role.value, "content": msg.content}
            for msg in messages
        ]

        extra = {}
        if json_mode:
            extra["response_format"] = {"type": "json_object"}

        logger.debug(f"Sending request to Groq ({self.model_name})")
        try:
            response = await self.client.chat.completions.create(
                model=self.model_name,
                messages=groq_messages,
                temperature=temperature,
                max_tokens=max_tokens,
                **extra,
            )
        except APIError as e:
            if is_context_length_error(e):
                raise ContextLengthExceededError(e.message) from e
            raise UpstreamServiceError(
                detail=e.message, status_code=getattr(e, "status_code", None)
            ) from e

        usage = None
        if response.usage:
            usage = {
                "prompt_tokens": response.usage.prompt_tokens,
                "completion_tokens": response.usage.completion_tokens,
                "total_tokens": response.usage.total_tokens,
            }
            logger.debug(f"Groq token usage: {usage}")

        return LLMResponse(
            content=response.choices[0].message.content or "",
            model=self.model_name,
            usage=usage,
        )
