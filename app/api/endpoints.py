"""
API endpoint for video summarization.
"""
import time

from fastapi import APIRouter, Depends
from loguru import logger

from app.api.dependencies import get_video_summary_service
from app.core.exceptions import ErrorResponse
from app.models import SummarizeRequest, SummarizeResponse
from app.services.video_summary import VideoSummaryService


router = APIRouter()


@router.post(
    "/summarize",
    response_model=SummarizeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def summarize_video(
    payload: SummarizeRequest,
    summary_service: VideoSummaryService = Depends(get_video_summary_service),
):
    """
    Summarizes a YouTube video from its captions.

    Args:
        payload: The request body containing the video URL and summary options.
        summary_service: The per-request summarization pipeline.

    Returns:
        SummarizeResponse: `{success, metadata, summary}`. Failures are turned
        into `{success: false, error}` by the registered exception handlers.
    """
    logger.info(f"Incoming request for URL: {payload.url}")

    start_time = time.perf_counter()
    result = await summary_service.summarize(payload)
    duration = time.perf_counter() - start_time
    logger.info(f"Summarization completed in {duration:.2f}s")
    return result
