"""
Enums for type-safe values across the application.
"""
from enum import Enum


class LLMRole(str, Enum):
    """Role for LLM provider messages (OpenAI/Gemini/Groq compatible)."""
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class LLMProviderType(str, Enum):
    """Supported LLM provider types for configuration."""
    OPENAI = "openai"
    GROQ = "groq"
    GEMINI = "gemini"


class SummaryLength(str, Enum):
    """How long the generated summary should be."""
    BRIEF = "brief"
    DETAILED = "detailed"


class PipelineStage(str, Enum):
    """Stages a summarize request passes through."""
    IDLE = "idle"
    VALIDATING = "validating"
    FETCHING_METADATA = "fetching_metadata"
    FETCHING_TRANSCRIPT = "fetching_transcript"
    SUMMARIZING = "summarizing"
    RESPONDING = "responding"
    ERROR = "error"
