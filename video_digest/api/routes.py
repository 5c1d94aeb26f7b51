"""
API routes for the video digest application.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from video_digest.api.dependencies import get_pipeline
from video_digest.api.schemas import ErrorResponse, TranscribeRequest, TranscribeResponse
from video_digest.core.pipeline import VideoDigestPipeline

router = APIRouter(prefix="/api", tags=["transcribe"])

PipelineDep = Annotated[VideoDigestPipeline, Depends(get_pipeline)]


@router.post(
    "/transcribe",
    response_model=TranscribeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def transcribe_video(request: TranscribeRequest, pipeline: PipelineDep):
    """
    Transcribe and summarize a YouTube video by URL.

    - 400 when the URL is not a YouTube watch URL or the length is unknown
    - 500 when any processing stage fails
    """
    result = await pipeline.run(request.to_digest_request())
    return TranscribeResponse.model_validate(result.model_dump())
