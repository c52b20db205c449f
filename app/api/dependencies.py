"""
Dependency injection factories for FastAPI.

This module provides factory functions for creating service instances
with proper dependency injection. The LLM provider is selected from config;
the shared HTTP client is created at startup and read from app state.
"""
from functools import lru_cache

import httpx
from fastapi import Depends, Request

from app.core.config import settings

# Provider interface
from app.core.providers.llm_provider import LLMProvider

# Provider type enum
from app.models.enums import LLMProviderType

# Concrete providers
from app.core.providers.openai_provider import OpenAIProvider
from app.core.providers.groq_provider import GroqProvider
from app.core.providers.gemini_provider import GeminiProvider

# Services
from app.services.proxy import ProxyService
from app.services.metadata import MetadataService
from app.services.transcript import TranscriptService
from app.services.summarization import SummarizationService
from app.services.video_summary import VideoSummaryService


# =============================================================================
# PROVIDER FACTORIES
# =============================================================================

@lru_cache
def get_summary_llm_provider() -> LLMProvider:
    """
    Get LLM provider for summarization.

    Default: OpenAI-compatible endpoint (configured in settings.SUMMARY_LLM_PROVIDER)
    """
    provider_type = settings.SUMMARY_LLM_PROVIDER

    if provider_type == LLMProviderType.OPENAI:
        return OpenAIProvider(
            api_key=settings.OPENAI_API_KEY,
            model_name=settings.OPENAI_MODEL_NAME,
            base_url=settings.OPENAI_BASE_URL,
            app_url=settings.OPENAI_APP_URL,
            app_title=settings.PROJECT_NAME,
        )
    elif provider_type == LLMProviderType.GROQ:
        return GroqProvider(
            api_key=settings.GROQ_API_KEY,
            model_name=settings.GROQ_MODEL_NAME,
        )
    elif provider_type == LLMProviderType.GEMINI:
        return GeminiProvider(
            api_key=settings.GEMINI_API_KEY,
            model_name=settings.GEMINI_MODEL_NAME,
        )
    else:
        raise ValueError(f"Unknown LLM provider: {provider_type}")


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Get the HTTP client opened in the application lifespan."""
    return request.app.state.http_client


# =============================================================================
# SERVICE FACTORIES
# =============================================================================

@lru_cache
def get_proxy_service() -> ProxyService:
    """Get proxy service for caption requests."""
    return ProxyService(proxy_url=settings.TRANSCRIPT_PROXY_URL)


def get_metadata_service(
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> MetadataService:
    """Get YouTube Data API metadata service."""
    return MetadataService(api_key=settings.YOUTUBE_API_KEY, http_client=http_client)


def get_transcript_service(
    proxy_service: ProxyService = Depends(get_proxy_service),
) -> TranscriptService:
    """Get caption fetching service."""
    return TranscriptService(proxy_service=proxy_service)


def get_summarization_service(
    llm_provider: LLMProvider = Depends(get_summary_llm_provider),
) -> SummarizationService:
    """Get summary generation service."""
    return SummarizationService(llm_provider=llm_provider)


def get_video_summary_service(
    metadata_service: MetadataService = Depends(get_metadata_service),
    transcript_service: TranscriptService = Depends(get_transcript_service),
    summarization_service: SummarizationService = Depends(get_summarization_service),
) -> VideoSummaryService:
    """
    Get the per-request pipeline.

    Wires together:
    - MetadataService for the YouTube Data API
    - TranscriptService for captions
    - SummarizationService for the LLM call
    """
    return VideoSummaryService(
        metadata_service=metadata_service,
        transcript_service=transcript_service,
        summarization_service=summarization_service,
    )
