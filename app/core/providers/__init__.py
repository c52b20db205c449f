"""
Provider abstraction layer for model-agnostic AI integration.
"""
from app.core.providers.llm_provider import (
    LLMProvider,
    LLMMessage,
    LLMResponse,
    ContextLengthExceededError,
)
from app.models.enums import LLMProviderType

__all__ = [
    "LLMProvider",
    "LLMMessage",
    "LLMResponse",
    "ContextLengthExceededError",
    "LLMProviderType",
]
