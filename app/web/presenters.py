"""
Form validation and display helpers for the HTML front end.
"""
import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.core.constants import FormMessages
from app.models import (
    FocusAreas,
    SummarizeResponse,
    SummaryOptions,
    TimestampEntry,
)

# Stricter than the API parser: only watch?v= and youtu.be/ links.
# The same source is handed to the browser script, so it must stay valid JS.
FORM_URL_PATTERN_SOURCE = (
    r"^(https?://)?(www\.)?(youtube\.com/watch\?v=|youtu\.be/)([a-zA-Z0-9_-]{11})"
)
FORM_URL_PATTERN = re.compile(FORM_URL_PATTERN_SOURCE)


def validate_form_url(url: str) -> Optional[str]:
    """Return the form error for a URL, or None when it may be submitted."""
    if not url.strip():
        return FormMessages.URL_MISSING
    if not FORM_URL_PATTERN.match(url):
        return FormMessages.URL_INVALID
    return None


def default_form_options() -> SummaryOptions:
    """The form starts brief, with every focus area selected."""
    return SummaryOptions(
        focus_areas=FocusAreas(key_points=True, timestamps=True, takeaways=True)
    )


class FormState(BaseModel):
    """What the form shows: the last URL, options and any error."""

    url: str = ""
    options: SummaryOptions = Field(default_factory=default_form_options)
    error: Optional[str] = None


class SummaryView(BaseModel):
    """Display model for a finished summary."""

    title: str
    thumbnail: Optional[str] = None
    duration: str
    brief_summary: str
    detailed_summary: str
    key_points: list[str]
    timestamps: list[TimestampEntry]
    main_takeaways: list[str]

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_response(cls, response: SummarizeResponse) -> "SummaryView":
        summary = response.summary
        return cls(
            title=response.metadata.title,
            thumbnail=response.metadata.thumbnail,
            duration=response.metadata.duration,
            brief_summary=summary.brief_summary,
            detailed_summary=summary.detailed_summary,
            key_points=summary.key_points,
            timestamps=summary.timestamps,
            main_takeaways=summary.main_takeaways,
        )

    @property
    def is_empty(self) -> bool:
        return not (
            self.brief_summary
            or self.detailed_summary
            or self.key_points
            or self.timestamps
            or self.main_takeaways
        )

    def copy_blocks(self) -> dict[str, str]:
        """
        Clipboard text pieces; the browser joins the summary block for the
        active tab with the blocks of the selected focus areas, in this order.
        """
        header = f'Summary of "{self.title}":\n\n'
        return {
            "brief": f"{header}{self.brief_summary}\n\n",
            "detailed": f"{header}{self.detailed_summary}\n\n",
            "keyPoints": "Key Points:\n"
            + "\n".join(f"- {point}" for point in self.key_points)
            + "\n\n",
            "timestamps": "Timestamps:\n"
            + "\n".join(f"{ts.time} - {ts.text}" for ts in self.timestamps)
            + "\n\n",
            "takeaways": "Main Takeaways:\n"
            + "\n".join(f"- {takeaway}" for takeaway in self.main_takeaways),
        }
