"""
Prompt templates for transcript summarization.

Everything here is pure: the same inputs always give the same prompt.
"""

from typing import Union

from video_digest.models.schemas import (
    TOKEN_BUDGETS,
    SummaryLength,
    SummaryStyle,
    VideoMetadata,
)

STYLE_TEMPLATES = {
    SummaryStyle.TECHNICAL: (
        "Summarize the following YouTube video transcription with a focus on technical "
        "accuracy and key concepts. Extract and clarify the main ideas, methodologies, "
        "frameworks, formulas or processes discussed. Keep the precision of the source "
        "and avoid oversimplifying, while keeping the summary concise and structured. "
        "Where relevant, include terminology, definitions and key takeaways."
    ),
    SummaryStyle.FORMAL: (
        "Summarize the following YouTube video transcription in a professional and "
        "structured manner. Highlight the key arguments, main ideas and conclusions "
        "while staying clear and concise. Keep the summary objective and leave out "
        "filler words and unnecessary detail."
    ),
    SummaryStyle.CASUAL: (
        "Give me a quick and easy-to-understand summary of this YouTube video "
        "transcription. Keep it conversational and to the point, like you're explaining "
        "it to a friend. Focus on the main ideas and takeaways, and feel free to "
        "simplify complex points."
    ),
    SummaryStyle.BULLET_POINTS: (
        "Summarize this YouTube video transcription using bullet points. Focus on the "
        "key ideas, main arguments and any important conclusions. Keep each point "
        "concise and clear. The goal is a structured, easy-to-skim summary."
    ),
}

NEUTRAL_TEMPLATE = "Summarize and explain the content based on:"
NEUTRAL_CLOSING = "Provide a concise summary in 2-3 sentences, followed by a brief explanation."

data_template = """Title: {title}
Description: {description}
Transcription: {transcript}
Keep the summary within {max_tokens} words."""


def token_budget(length: Union[str, SummaryLength]) -> int:
    """
    Map a summary length to its word/token ceiling.

    Raises:
        ValueError: If the length is not one of short, medium or detailed
    """
    return TOKEN_BUDGETS[SummaryLength(length)]


def resolve_style(style: Union[str, SummaryStyle, None]):
    """Return the matching SummaryStyle, or None for unknown styles."""
    try:
        return SummaryStyle(style)
    except ValueError:
        return None


def build_summary_prompt(
    transcript: str,
    metadata: VideoMetadata,
    style: Union[str, SummaryStyle, None],
    max_tokens: int,
) -> str:
    """
    Build the summarization prompt for one video.

    Args:
        transcript: Full transcript text
        metadata: Scraped title and description
        style: Summary style; unknown values use the neutral template
        max_tokens: Approximate word ceiling the model is asked to respect

    Returns:
        Prompt string
    """
    data = data_template.format(
        title=metadata.title,
        description=metadata.description,
        transcript=transcript,
        max_tokens=max_tokens,
    )

    resolved = resolve_style(style)
    if resolved is None:
        return f"{NEUTRAL_TEMPLATE}\n\n{data}\n\n{NEUTRAL_CLOSING}"

    return f"{STYLE_TEMPLATES[resolved]}\n\n{data}"
