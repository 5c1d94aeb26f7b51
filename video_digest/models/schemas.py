"""
Data models for the video digest application.
"""
import uuid
from enum import Enum
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field
from video_digest.config import config

NO_DESCRIPTION = "No description available"


class SummaryStyle(str, Enum):
    """Tone of the generated summary."""
    TECHNICAL = "technical"
    FORMAL = "formal"
    CASUAL = "casual"
    BULLET_POINTS = "bullet-points"


class SummaryLength(str, Enum):
    """Size of the generated summary."""
    SHORT = "short"
    MEDIUM = "medium"
    DETAILED = "detailed"

    @property
    def token_budget(self) -> int:
        return TOKEN_BUDGETS[self]


TOKEN_BUDGETS = {
    SummaryLength.SHORT: 100,
    SummaryLength.MEDIUM: 250,
    SummaryLength.DETAILED: 500,
}


class DigestRequest(BaseModel):
    """A single request to digest one video.

    ``style`` and ``length`` stay plain strings here; the pipeline decides
    what to do with values it does not know.
    """
    url: str
    style: str = SummaryStyle.FORMAL.value
    length: str = SummaryLength.MEDIUM.value


class VideoMetadata(BaseModel):
    """Title and description scraped from the video page."""
    title: str
    description: str = NO_DESCRIPTION


class AudioArtifact(BaseModel):
    """Request-scoped audio file produced by extraction."""
    path: Path
    request_id: str = Field(default_factory=lambda: uuid.uuid4().hex)

    @property
    def exists(self) -> bool:
        return self.path.is_file()


class AudioDownloadConfig(BaseModel):
    """Configuration for audio download operations."""
    output_directory: str = str(config.DOWNLOADS_DIR)
    extension: str = "m4a"
    timeout: float = config.DOWNLOAD_TIMEOUT


class TranscriptionConfig(BaseModel):
    """Configuration for transcription operations."""
    model: str = config.TRANSCRIPTION_MODEL
    language: Optional[str] = None
    prompt: Optional[str] = None
    temperature: float = 0.0


class SummaryConfig(BaseModel):
    """Configuration for summarization operations."""
    model: str = config.SUMMARY_MODEL
    temperature: float = 0.0
    timeout: float = config.SUMMARY_TIMEOUT


class DigestResult(BaseModel):
    """Transcript, metadata and summary for one video."""
    transcription: str
    metadata: VideoMetadata
    summary: str
