from .youtube import ApiVideosResponse, ApiVideoItem, TranscriptSegment, VideoMetadata
from .api import (
    FocusAreas,
    SummaryOptions,
    SummarizeRequest,
    TimestampEntry,
    SummaryResult,
    SummarizeResponse,
)
from .enums import LLMRole, LLMProviderType, SummaryLength, PipelineStage
