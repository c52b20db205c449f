"""
Orchestration of the summarize pipeline for one video.

Stages run strictly in sequence:
validating -> fetching_metadata -> fetching_transcript -> summarizing -> responding.
Any failure short-circuits the remaining stages.
"""
from typing import Optional

from loguru import logger

from app.core.constants import ErrorMessages
from app.core.exceptions import InvalidUrlError
from app.models import (
    PipelineStage,
    SummarizeRequest,
    SummarizeResponse,
    SummaryOptions,
)
from app.services.metadata import MetadataService
from app.services.summarization import SummarizationService
from app.services.transcript import TranscriptService
from app.services.url_parser import extract_video_id


class VideoSummaryService:
    """
    Request handler core: URL validation, metadata, transcript, summary.

    Metadata is fetched before the transcript, so a video that fails both
    reports the metadata error.
    """

    def __init__(
        self,
        metadata_service: MetadataService,
        transcript_service: TranscriptService,
        summarization_service: SummarizationService,
    ):
        """
        Initialize the VideoSummaryService.

        Args:
            metadata_service: YouTube Data API client.
            transcript_service: Caption fetcher.
            summarization_service: LLM summary generator.
        """
        self.metadata_service = metadata_service
        self.transcript_service = transcript_service
        self.summarization_service = summarization_service
        self.stage = PipelineStage.IDLE

    def _enter(self, stage: PipelineStage) -> None:
        self.stage = stage
        logger.debug(f"Pipeline stage: {stage.value}")

    async def summarize(self, request: SummarizeRequest) -> SummarizeResponse:
        """
        Run the full pipeline for one request.

        Args:
            request: URL and optional summary options.

        Returns:
            SummarizeResponse with metadata and summary.

        Raises:
            InvalidUrlError: URL missing or not a YouTube video URL.
            VideoNotFoundError: No such video.
            NoTranscriptError: Captions missing or empty.
            ContextTooLongError: Transcript too long for the model.
            UpstreamServiceError: Any provider failure.
        """
        try:
            self._enter(PipelineStage.VALIDATING)
            video_id = self._validate(request.url)

            self._enter(PipelineStage.FETCHING_METADATA)
            logger.info(f"Fetching metadata for video: {video_id}")
            metadata = await self.metadata_service.fetch_metadata(video_id)

            self._enter(PipelineStage.FETCHING_TRANSCRIPT)
            logger.info(f"Fetching transcript for video: {video_id}")
            transcript = await self.transcript_service.fetch_transcript(video_id)
            logger.info(f"Transcript length: {len(transcript)} characters")

            self._enter(PipelineStage.SUMMARIZING)
            logger.info("Generating summary...")
            summary = await self.summarization_service.generate_summary(
                transcript, request.options or SummaryOptions()
            )

            self._enter(PipelineStage.RESPONDING)
            return SummarizeResponse(metadata=metadata, summary=summary)
        except Exception as e:
            failed_stage = self.stage
            self._enter(PipelineStage.ERROR)
            logger.warning(f"Summarization failed during {failed_stage.value}: {e}")
            raise

    @staticmethod
    def _validate(url: Optional[str]) -> str:
        if not url:
            raise InvalidUrlError(ErrorMessages.URL_REQUIRED)

        video_id = extract_video_id(url)
        if not video_id:
            raise InvalidUrlError(ErrorMessages.INVALID_URL)
        return video_id
