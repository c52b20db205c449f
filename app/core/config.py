"""
Application configuration using pydantic-settings.
"""
from typing import List, Optional, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.models.enums import LLMProviderType


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    PROJECT_NAME: str = "YouTube Video Summarizer"
    PORT: int = 5000
    BACKEND_CORS_ORIGINS: Union[List[str], str] = ["http://localhost:5173"]

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",")]
        return v

    # YouTube Data API
    YOUTUBE_API_KEY: str = ""

    # Summary LLM selection
    SUMMARY_LLM_PROVIDER: LLMProviderType = LLMProviderType.OPENAI

    # OpenAI-compatible API (OpenRouter by default)
    OPENAI_API_KEY: str = ""
    OPENAI_BASE_URL: str = "https://openrouter.ai/api/v1"
    OPENAI_MODEL_NAME: str = "gpt-3.5-turbo"
    OPENAI_APP_URL: str = "http://localhost:3000"

    # Groq API
    GROQ_API_KEY: str = ""
    GROQ_MODEL_NAME: str = "llama-3.1-8b-instant"

    # Gemini API
    GEMINI_API_KEY: str = ""
    GEMINI_MODEL_NAME: str = "gemini-2.5-flash"

    # Optional outbound proxy for caption requests
    TRANSCRIPT_PROXY_URL: Optional[str] = None

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    def missing_api_keys(self) -> List[str]:
        """Names of API keys the configured pipeline needs but which are empty."""
        required = ["YOUTUBE_API_KEY"]
        if self.SUMMARY_LLM_PROVIDER == LLMProviderType.OPENAI:
            required.append("OPENAI_API_KEY")
        elif self.SUMMARY_LLM_PROVIDER == LLMProviderType.GROQ:
            required.append("GROQ_API_KEY")
        elif self.SUMMARY_LLM_PROVIDER == LLMProviderType.GEMINI:
            required.append("GEMINI_API_KEY")
        return [name for name in required if not getattr(self, name)]


settings = Settings()
