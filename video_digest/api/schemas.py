from pydantic import BaseModel
from typing import Optional

from video_digest.models.schemas import DigestRequest, SummaryLength, SummaryStyle


class TranscribeRequest(BaseModel):
    """Model for requesting a video digest."""
    url: Optional[str] = None
    promptStyle: Optional[str] = SummaryStyle.FORMAL.value
    summaryLength: Optional[str] = SummaryLength.MEDIUM.value

    def to_digest_request(self) -> DigestRequest:
        return DigestRequest(
            url=self.url or "",
            style=self.promptStyle or SummaryStyle.FORMAL.value,
            length=self.summaryLength or SummaryLength.MEDIUM.value,
        )


class MetadataResponse(BaseModel):
    """Model for scraped video metadata."""
    title: str
    description: str


class TranscribeResponse(BaseModel):
    """Model for digest responses."""
    transcription: str
    metadata: MetadataResponse
    summary: str


class ErrorResponse(BaseModel):
    """Model for error responses."""
    error: str
