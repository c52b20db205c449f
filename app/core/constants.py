"""
Application-wide constants and configuration limits.

Grouped into static classes for namespace management and discoverability.
"""


class SummaryConfig:
    """Configuration for the summary generation call."""
    MAX_INPUT_TOKENS = 12_000  # Leaves room for prompt and response
    CHARS_PER_TOKEN = 4  # Rough estimate: 1 token ~ 4 characters
    TRUNCATION_MARKER = "\n[Transcript was truncated due to length]"
    TEMPERATURE = 0.3
    MAX_OUTPUT_TOKENS = 2_000


class YouTubeConfig:
    """Configuration for the YouTube Data API and video identifiers."""
    VIDEOS_API_URL = "https://www.googleapis.com/youtube/v3/videos"
    VIDEO_PARTS = "snippet,contentDetails,statistics"
    VIDEO_ID_LENGTH = 11


class ErrorMessages:
    """User-facing error messages."""
    URL_REQUIRED = "URL is required"
    INVALID_URL = "Invalid YouTube URL. Please provide a valid YouTube video URL."
    VIDEO_NOT_FOUND = "Video not found"
    NO_TRANSCRIPT = (
        "This video does not have captions available. "
        "Please try a different video with captions enabled."
    )
    VIDEO_TOO_LONG = (
        "This video is too long to process. "
        "Please try a shorter video (under 30 minutes)."
    )
    UNEXPECTED = "An unexpected error occurred while processing your request"


class FormMessages:
    """Messages shown by the browser form before a request is sent."""
    URL_MISSING = "Please enter a YouTube URL"
    URL_INVALID = "Please enter a valid YouTube URL"
    REQUEST_FAILED = "Failed to generate summary. Please try again."
