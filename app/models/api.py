"""
Pydantic models for API request/response schemas.

Wire format is camelCase (`focusAreas`, `briefSummary`, ...); Python code uses
snake_case attribute names.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.models.enums import SummaryLength
from app.models.youtube import VideoMetadata


class CamelModel(BaseModel):
    """Base model accepting and emitting camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FocusAreas(CamelModel):
    """Optional sections to request from the model and to display."""

    key_points: bool = False
    timestamps: bool = False
    takeaways: bool = False


class SummaryOptions(CamelModel):
    """Per-request summary options supplied by the client."""

    length: SummaryLength = SummaryLength.BRIEF
    focus_areas: FocusAreas = Field(default_factory=FocusAreas)


class SummarizeRequest(CamelModel):
    """Request model for video summarization.

    `url` is optional here so that a missing URL is reported by the
    summarization pipeline as "URL is required" rather than a schema error.
    """

    url: Optional[str] = None
    options: Optional[SummaryOptions] = None


class TimestampEntry(CamelModel):
    """A moment in the video with a short description."""

    time: str = ""
    text: str = ""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="allow",
    )


class SummaryResult(CamelModel):
    """Structured summary produced by the language model."""

    brief_summary: str = ""
    detailed_summary: str = ""
    key_points: list[str] = Field(default_factory=list)
    timestamps: list[TimestampEntry] = Field(default_factory=list)
    main_takeaways: list[str] = Field(default_factory=list)

    # Model output is passed through: numbers become strings, unknown keys are kept.
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="allow",
    )


class SummarizeResponse(CamelModel):
    """Success envelope for `POST /api/summarize`."""

    success: bool = True
    metadata: VideoMetadata
    summary: SummaryResult

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)
