from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# --- Internal Parsing Models (YouTube Data API v3 `videos` response) ---

class ApiThumbnail(BaseModel):
    url: str

    model_config = ConfigDict(extra='ignore')

class ApiThumbnails(BaseModel):
    high: Optional[ApiThumbnail] = None
    default: Optional[ApiThumbnail] = None

    model_config = ConfigDict(extra='ignore')

class ApiSnippet(BaseModel):
    title: str = ""
    channel_title: str = Field(default="", alias="channelTitle")
    published_at: str = Field(default="", alias="publishedAt")
    thumbnails: ApiThumbnails = Field(default_factory=ApiThumbnails)

    model_config = ConfigDict(extra='ignore')

class ApiContentDetails(BaseModel):
    duration: str = ""

    model_config = ConfigDict(extra='ignore')

class ApiStatistics(BaseModel):
    view_count: Optional[str] = Field(default=None, alias="viewCount")

    model_config = ConfigDict(extra='ignore')

class ApiVideoItem(BaseModel):
    id: Optional[str] = None
    snippet: ApiSnippet = Field(default_factory=ApiSnippet)
    content_details: ApiContentDetails = Field(
        default_factory=ApiContentDetails, alias="contentDetails"
    )
    statistics: ApiStatistics = Field(default_factory=ApiStatistics)

    model_config = ConfigDict(extra='ignore')

class ApiVideosResponse(BaseModel):
    items: List[ApiVideoItem] = Field(default_factory=list)

    model_config = ConfigDict(extra='ignore')

# --- Core Data Models ---

class TranscriptSegment(BaseModel):
    text: str
    start: float
    duration: float

    model_config = ConfigDict(frozen=True)

class VideoMetadata(BaseModel):
    """Display metadata for one video, serialized with camelCase keys."""

    title: str
    channel_title: str
    published_at: str
    thumbnail: Optional[str] = None
    duration: str
    view_count: Optional[str] = None

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )
