"""
Caption fetching for a single YouTube video.
"""
import asyncio
from typing import List

from loguru import logger
from youtube_transcript_api import (
    CouldNotRetrieveTranscript,
    NoTranscriptFound,
    TranscriptsDisabled,
    YouTubeTranscriptApi,
)

from app.core.exceptions import NoTranscriptError, UpstreamServiceError
from app.models import TranscriptSegment
from app.services.proxy import ProxyService


def join_segments(segments: List[TranscriptSegment]) -> str:
    """Concatenate segment texts, in order, with single spaces."""
    return " ".join(seg.text for seg in segments)


class TranscriptService:
    """
    Fetches captions with youtube-transcript-api and flattens them into one
    text blob. Segment timings are not carried into the text.
    """

    def __init__(self, proxy_service: ProxyService):
        self.proxy_service = proxy_service

    def _fetch_segments_sync(self, video_id: str) -> List[TranscriptSegment]:
        """
        Blocking fetch of caption segments.

        Prioritizes Manual subtitles (any lang) > Automatic captions (any lang).
        """
        api = YouTubeTranscriptApi(proxy_config=self.proxy_service.get_proxy_config())
        transcript_list = api.list(video_id)

        chosen = None
        for t in transcript_list:
            if not t.is_generated:
                chosen = t
                break
        if chosen is None:
            for t in transcript_list:
                if t.is_generated:
                    chosen = t
                    break
        if chosen is None:
            return []

        logger.info(
            f"Video {video_id}: Using {'Automatic' if chosen.is_generated else 'Manual'} "
            f"transcript in '{chosen.language}'"
        )
        return [
            TranscriptSegment(text=item.text, start=item.start, duration=item.duration)
            for item in chosen.fetch()
        ]

    async def fetch_transcript(self, video_id: str) -> str:
        """
        Fetch the full transcript text of a video.

        The blocking library call runs in a worker thread.

        Raises:
            NoTranscriptError: Captions are disabled, missing or empty.
            UpstreamServiceError: The caption provider failed for another reason.
        """
        try:
            segments = await asyncio.to_thread(self._fetch_segments_sync, video_id)
        except (TranscriptsDisabled, NoTranscriptFound) as e:
            logger.warning(f"No transcript found/disabled for video {video_id}")
            raise NoTranscriptError(video_id) from e
        except CouldNotRetrieveTranscript as e:
            logger.error(f"Error fetching transcript for {video_id}: {e}")
            raise UpstreamServiceError(
                detail=f"Could not retrieve the transcript for video {video_id}."
            ) from e

        if not segments:
            raise NoTranscriptError(video_id)

        text = join_segments(segments)
        if not text.strip():
            raise NoTranscriptError(video_id)

        return text
