"""
YouTube Data API client for video metadata.
"""
import httpx
from loguru import logger

from app.core.constants import YouTubeConfig
from app.core.exceptions import UpstreamServiceError, VideoNotFoundError
from app.models import ApiVideosResponse, VideoMetadata


def format_duration(iso_duration: str) -> str:
    """
    Render an ISO-8601 duration (``PT#H#M#S``) as a compact display string.

    This is literal token substitution, not a duration parser:
    ``PT3M33S`` -> ``3m 33s``, ``PT1H2M3S`` -> ``1h 2m 3s``, ``PT1H`` -> ``1h ``.
    """
    return (
        iso_duration.replace("PT", "", 1)
        .replace("H", "h ", 1)
        .replace("M", "m ", 1)
        .replace("S", "s", 1)
    )


class MetadataService:
    """
    Fetches title, channel, publish date, thumbnail, duration and view count
    for a single video from the YouTube Data API v3.
    """

    def __init__(self, api_key: str, http_client: httpx.AsyncClient):
        """
        Args:
            api_key: YouTube Data API key.
            http_client: Shared async HTTP client (default timeouts, no retries).
        """
        self.api_key = api_key
        self.http_client = http_client

    async def fetch_metadata(self, video_id: str) -> VideoMetadata:
        """
        Fetch and reshape metadata for one video.

        Raises:
            VideoNotFoundError: The API returned no items for the id.
            UpstreamServiceError: The API call failed.
        """
        params = {
            "part": YouTubeConfig.VIDEO_PARTS,
            "id": video_id,
            "key": self.api_key,
        }

        try:
            response = await self.http_client.get(YouTubeConfig.VIDEOS_API_URL, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"YouTube Data API returned {e.response.status_code} for {video_id}")
            raise UpstreamServiceError(
                detail=f"Failed to fetch video metadata (HTTP {e.response.status_code}).",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Error fetching video metadata for {video_id}: {e}")
            raise UpstreamServiceError(detail=f"Failed to fetch video metadata: {e}") from e

        data = ApiVideosResponse(**response.json())
        if not data.items:
            raise VideoNotFoundError(video_id)

        item = data.items[0]
        snippet = item.snippet
        thumbnail = snippet.thumbnails.high or snippet.thumbnails.default

        return VideoMetadata(
            title=snippet.title,
            channel_title=snippet.channel_title,
            published_at=snippet.published_at,
            thumbnail=thumbnail.url if thumbnail else None,
            duration=format_duration(item.content_details.duration),
            view_count=item.statistics.view_count,
        )
