"""
Extraction of YouTube video identifiers from user-supplied URLs.
"""
import re
from typing import Optional

from app.core.constants import YouTubeConfig

# Recognizes youtu.be/<id>, /v/<id>, /u/<x>/<id>, /embed/<id> and watch?v=<id>.
# Group 7 holds the candidate identifier.
VIDEO_URL_PATTERN = re.compile(
    r"^.*((youtu.be/)|(v/)|(/u/\w/)|(embed/)|(watch\?))\??v?=?([^#&?]*).*"
)


def extract_video_id(url: object) -> Optional[str]:
    """
    Extract the 11-character video identifier from a YouTube URL.

    Args:
        url: Untrusted input, normally a URL string.

    Returns:
        The identifier, or None when the input is not a recognized video URL.
    """
    if not isinstance(url, str):
        return None

    match = VIDEO_URL_PATTERN.match(url)
    if not match:
        return None

    candidate = match.group(7)
    if len(candidate) != YouTubeConfig.VIDEO_ID_LENGTH:
        return None
    return candidate
