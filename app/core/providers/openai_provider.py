"""
OpenAI-compatible implementation of LLMProvider.

Works against api.openai.com or any OpenAI-compatible gateway; the default
configuration points at OpenRouter.
"""
from typing import Optional

from loguru import logger
from openai import APIError, AsyncOpenAI

from app.core.exceptions import UpstreamServiceError
from app.core.providers.llm_provider import (
    ContextLengthExceededError,
    LLMMessage,
    LLMProvider,
    LLMResponse,
    is_context_length_error,
)


class OpenAIProvider(LLMProvider):
    """
    OpenAI chat-completions implementation of LLMProvider.

    Example:
        provider = OpenAIProvider(
            api_key="your-api-key",
            model_name="gpt-3.5-turbo",
            base_url="https://openrouter.ai/api/v1",
        )
        response = await provider.generate_text(messages, json_mode=True)
    """

    def __init__(
        self,
        api_key: str,
        model_name: str = "gpt-3.5-turbo",
        base_url: Optional[str] = None,
        app_url: Optional[str] = None,
        app_title: Optional[str] = None,
    ):
        """
        Initialize the OpenAI-compatible provider.

        Args:
            api_key: API key for the endpoint.
            model_name: Model to use (e.g., "gpt-3.5-turbo").
            base_url: Alternative endpoint such as OpenRouter.
            app_url: Sent as HTTP-Referer (used by OpenRouter for attribution).
            app_title: Sent as X-Title (shown on openrouter.ai).
        """
        headers = {}
        if app_url:
            headers["HTTP-Referer"] = app_url
        if app_title:
            headers["X-Title"] = app_title

        self.client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            default_headers=headers or None,
        )
        self.model_name = model_name

    async def generate_text(
        self,
        messages: list[LLMMessage],
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        json_mode: bool = False,
    ) -> LLMResponse:
        """Generate text completion using the chat-completions API."""
        openai_messages = [
            {"role": msg.role.value, "content": msg.content}
            for msg in messages
        ]

        kwargs = {
            "model": self.model_name,
            "messages": openai_messages,
            "temperature": temperature,
        }
        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        logger.debug(f"Sending request to OpenAI-compatible API ({self.model_name})")
        try:
            response = await self.client.chat.completions.create(**kwargs)
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
            logger.debug(f"OpenAI token usage: {usage}")

        return LLMResponse(
            content=response.choices[0].message.content or "",
            model=self.model_name,
            usage=usage,
        )
