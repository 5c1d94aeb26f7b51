"""
Centralized error handling for the application.

Every pipeline stage raises its own ``StageError`` subclass. The orchestrator
turns any of them into a ``ProcessingFailed`` whose message is safe to show
to callers, while the specific cause is only written to the logs.
"""

import traceback
from typing import Optional

from video_digest.utils.logger import logging

GENERIC_FAILURE_MESSAGE = "Failed to process video"
INVALID_URL_MESSAGE = "Invalid YouTube URL"
INVALID_LENGTH_MESSAGE = "Invalid summary length"


class DigestError(Exception):
    """Base class for all video digest errors."""


class InvalidInputError(DigestError):
    """Raised when a request is rejected before any stage runs."""

    def __init__(self, message: str = INVALID_URL_MESSAGE, value: Optional[str] = None):
        self.message = message
        self.value = value
        super().__init__(message)


class StageError(DigestError):
    """Raised when one pipeline stage fails."""

    stage = "unknown"

    def __init__(self, target: str, cause: Optional[Exception] = None):
        self.target = target
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"{self.stage} failed for '{target}'{detail}")


class ExtractionFailed(StageError):
    """Raised when the audio track cannot be downloaded."""

    stage = "extraction"


class TranscriptionFailed(StageError):
    """Raised when the speech-to-text call fails or yields nothing."""

    stage = "transcription"


class MetadataFailed(StageError):
    """Raised when the video page cannot be fetched or has no title."""

    stage = "metadata"


class SummarizationFailed(StageError):
    """Raised when the text generation call fails."""

    stage = "summarization"


class ProcessingFailed(DigestError):
    """Uniform user-facing failure. The stage cause is chained, never shown."""

    def __init__(self, stage: str, message: str = GENERIC_FAILURE_MESSAGE):
        self.stage = stage
        self.message = message
        super().__init__(message)


def log_stage_failure(stage: str, url: str, error: Exception):
    """
    Log the specific cause of a failed pipeline stage for operators.

    Args:
        stage: Name of the stage that was running
        url: Video URL of the failed request
        error: The exception raised by the stage
    """
    cause = getattr(error, "cause", None) or error
    logging.error(f"Pipeline failed at stage '{stage}' for {url}: {error}")
    if cause is not error:
        logging.error(f"Underlying cause: {type(cause).__name__}: {cause}")
    logging.debug("".join(traceback.format_exception(type(error), error, error.__traceback__)))
