"""
Summary generation for a single video transcript.

This module provides the SummarizationService class which sizes the
transcript to the model budget, builds the instruction prompt from the
user's options and asks the configured LLM provider for a structured JSON
summary.
"""
import json
import math

from loguru import logger
from pydantic import ValidationError

from app.core.constants import SummaryConfig
from app.core.exceptions import ContextTooLongError, MalformedResponseError
from app.core.prompts import SummarizationPrompts
from app.core.providers.llm_provider import (
    ContextLengthExceededError,
    LLMMessage,
    LLMProvider,
)
from app.models import LLMRole, SummaryLength, SummaryOptions, SummaryResult


def estimate_tokens(text: str) -> int:
    """Rough token estimate: one token per four characters, rounded up."""
    return math.ceil(len(text) / SummaryConfig.CHARS_PER_TOKEN)


def truncate_transcript(text: str) -> str:
    """
    Cut the transcript to the model input budget.

    Texts whose estimate exceeds MAX_INPUT_TOKENS are cut to
    MAX_INPUT_TOKENS * CHARS_PER_TOKEN characters and the truncation marker
    is appended. Shorter texts are returned unchanged.
    """
    if estimate_tokens(text) <= SummaryConfig.MAX_INPUT_TOKENS:
        return text

    chars_to_keep = SummaryConfig.MAX_INPUT_TOKENS * SummaryConfig.CHARS_PER_TOKEN
    return text[:chars_to_keep] + SummaryConfig.TRUNCATION_MARKER


def build_instructions(options: SummaryOptions) -> str:
    """Join the length clause and the enabled focus-area clauses in fixed order."""
    clauses = [
        SummarizationPrompts.LENGTH_BRIEF
        if options.length == SummaryLength.BRIEF
        else SummarizationPrompts.LENGTH_DETAILED
    ]
    focus = options.focus_areas
    if focus.key_points:
        clauses.append(SummarizationPrompts.KEY_POINTS)
    if focus.timestamps:
        clauses.append(SummarizationPrompts.TIMESTAMPS)
    if focus.takeaways:
        clauses.append(SummarizationPrompts.TAKEAWAYS)
    return " ".join(clauses)


def parse_summary(content: str) -> SummaryResult:
    """
    Parse the model output into a SummaryResult.

    Missing fields fall back to empty values; anything that is not a JSON
    object is rejected. No repair is attempted.
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise MalformedResponseError() from e

    if not isinstance(data, dict):
        raise MalformedResponseError()

    try:
        return SummaryResult.model_validate(data)
    except ValidationError as e:
        raise MalformedResponseError() from e


class SummarizationService:
    """
    Generates a structured summary of one transcript with a single LLM call.
    """

    def __init__(self, llm_provider: LLMProvider):
        """
        Initialize the summarization service.

        Args:
            llm_provider: LLM provider for text generation.
        """
        self.llm_provider = llm_provider

    def build_messages(self, transcript: str, options: SummaryOptions) -> list[LLMMessage]:
        """Build the system and user messages for the summary request."""
        processed = truncate_transcript(transcript)
        if processed is not transcript:
            logger.warning(
                f"Transcript truncated from ~{estimate_tokens(transcript)} tokens "
                f"to {SummaryConfig.MAX_INPUT_TOKENS}"
            )

        return [
            LLMMessage(role=LLMRole.SYSTEM, content=SummarizationPrompts.SYSTEM),
            LLMMessage(
                role=LLMRole.USER,
                content=SummarizationPrompts.USER_TEMPLATE.format(
                    instructions=build_instructions(options),
                    transcript=processed,
                ),
            ),
        ]

    async def generate_summary(
        self, transcript: str, options: SummaryOptions
    ) -> SummaryResult:
        """
        Summarize a transcript according to the user's options.

        Args:
            transcript: Full transcript text.
            options: Summary length and focus areas.

        Returns:
            The parsed SummaryResult.

        Raises:
            ContextTooLongError: The provider rejected the prompt as too long.
            MalformedResponseError: The model output is not a JSON object.
            UpstreamServiceError: Any other provider failure.
        """
        messages = self.build_messages(transcript, options)

        try:
            response = await self.llm_provider.generate_text(
                messages=messages,
                temperature=SummaryConfig.TEMPERATURE,
                max_tokens=SummaryConfig.MAX_OUTPUT_TOKENS,
                json_mode=True,
            )
        except ContextLengthExceededError as e:
            logger.warning(f"LLM rejected prompt as too long: {e}")
            raise ContextTooLongError() from e

        if response.usage:
            logger.info(f"Token usage: {response.usage}")

        return parse_summary(response.content)
