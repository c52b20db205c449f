"""
Centralized configuration for LLM Prompts.

This module contains the system instruction and the instruction clauses used
to build the summary request.
"""


class SummarizationPrompts:
    """Prompts for the video Summary Generator."""

    SYSTEM = (
        "You are a helpful assistant that summarizes YouTube video content. "
        "Format your response as JSON with the following structure: { "
        "briefSummary: string, detailedSummary: string, keyPoints: string[], "
        "timestamps: { time: string, text: string }[], mainTakeaways: string[] }"
    )

    LENGTH_BRIEF = "Summarize the following YouTube video transcript briefly."
    LENGTH_DETAILED = "Summarize the following YouTube video transcript in detail."

    KEY_POINTS = "Include key points."
    TIMESTAMPS = "Include important timestamps with descriptions."
    TAKEAWAYS = "Include main takeaways."

    USER_TEMPLATE = "{instructions}\n\nTranscript: {transcript}"
