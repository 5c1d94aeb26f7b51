"""
Pipeline orchestrating extraction, transcription, metadata retrieval and
summarization for a single video.

The extract -> transcribe branch and the metadata branch are started
together and joined before summarization. Whatever happens, the audio
artifact reserved for a request is cleaned up exactly once.
"""

import asyncio
import uuid
from enum import Enum
from typing import Callable, List, Optional

from video_digest.config import config
from video_digest.core.metadata import MetadataFetcher
from video_digest.core.prompts import build_summary_prompt, token_budget
from video_digest.core.summarizer import TranscriptSummarizer
from video_digest.core.transcriber import AudioTranscriber
from video_digest.core.youtube_downloader import AudioExtractor, remove_artifact
from video_digest.models.schemas import (
    AudioArtifact,
    DigestRequest,
    DigestResult,
    SummaryLength,
    VideoMetadata,
)
from video_digest.utils.error_handling import (
    INVALID_LENGTH_MESSAGE,
    INVALID_URL_MESSAGE,
    InvalidInputError,
    ProcessingFailed,
    log_stage_failure,
)
from video_digest.utils.logger import logging


class PipelineStage(str, Enum):
    """States of one pipeline invocation."""
    VALIDATING = "validating"
    EXTRACTING = "extracting"
    TRANSCRIBING = "transcribing"
    FETCHING_METADATA = "fetching_metadata"
    SUMMARIZING = "summarizing"
    DONE = "done"
    FAILED = "failed"


class PipelineRun:
    """Per-invocation state. Never shared between requests."""

    def __init__(self, request: DigestRequest):
        self.request = request
        self.request_id = uuid.uuid4().hex
        self.stage = PipelineStage.VALIDATING
        self.history: List[PipelineStage] = [PipelineStage.VALIDATING]

    def enter(self, stage: PipelineStage):
        self.stage = stage
        self.history.append(stage)
        logging.debug(f"[{self.request_id}] -> {stage.value}")


async def join(*branches):
    """
    Run branches concurrently and return their results in order.

    On the first failure the remaining branches are cancelled, and awaited,
    so no further upstream calls are made for a failed request and nothing
    is still running when the caller moves on to cleanup.
    """
    tasks = [asyncio.ensure_future(branch) for branch in branches]
    try:
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    except asyncio.CancelledError:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise

    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)

    for task in tasks:
        if task in done and task.exception() is not None:
            raise task.exception()
    return [task.result() for task in tasks]


class VideoDigestPipeline:
    """Turns a video URL into transcript, metadata and summary."""

    def __init__(
        self,
        extractor: AudioExtractor,
        transcriber: AudioTranscriber,
        metadata_fetcher: MetadataFetcher,
        summarizer: TranscriptSummarizer,
        cleanup: Callable[[Optional[AudioArtifact]], bool] = remove_artifact,
        url_marker: str = config.VIDEO_URL_MARKER,
    ):
        self.extractor = extractor
        self.transcriber = transcriber
        self.metadata_fetcher = metadata_fetcher
        self.summarizer = summarizer
        self.cleanup = cleanup
        self.url_marker = url_marker

    def validate(self, request: DigestRequest) -> SummaryLength:
        """
        Reject requests that must not reach any stage.

        Returns:
            The parsed summary length

        Raises:
            InvalidInputError: For a non-video URL or an unknown length
        """
        if not request.url or self.url_marker not in request.url:
            logging.warning(f"Invalid URL provided: {request.url!r}")
            raise InvalidInputError(INVALID_URL_MESSAGE, request.url)

        try:
            return SummaryLength(request.length)
        except ValueError:
            logging.warning(f"Invalid summary length provided: {request.length!r}")
            raise InvalidInputError(INVALID_LENGTH_MESSAGE, request.length)

    async def run(self, request: DigestRequest) -> DigestResult:
        """
        Process one request end to end.

        Raises:
            InvalidInputError: If validation fails (nothing else is invoked)
            ProcessingFailed: If any stage fails; the cause is chained
        """
        run = PipelineRun(request)
        logging.info(f"[{run.request_id}] Received digest request for {request.url}")
        length = self.validate(request)

        artifact = None
        try:
            artifact = self.extractor.allocate(run.request_id)
            transcript, metadata = await join(
                self._extract_and_transcribe(run, artifact),
                self._fetch_metadata(run),
            )

            run.enter(PipelineStage.SUMMARIZING)
            budget = token_budget(length)
            prompt = build_summary_prompt(transcript, metadata, request.style, budget)
            summary = await self.summarizer.summarize(prompt, budget)
        except Exception as e:
            stage = getattr(e, "stage", run.stage.value)
            run.enter(PipelineStage.FAILED)
            log_stage_failure(stage, request.url, e)
            raise ProcessingFailed(stage) from e
        finally:
            self.cleanup(artifact)

        run.enter(PipelineStage.DONE)
        logging.info(f"[{run.request_id}] Digest complete for {request.url}")
        return DigestResult(transcription=transcript, metadata=metadata, summary=summary)

    async def _extract_and_transcribe(self, run: PipelineRun, artifact: AudioArtifact) -> str:
        run.enter(PipelineStage.EXTRACTING)
        logging.info(f"[{run.request_id}] Extracting audio from URL...")
        await self.extractor.extract(run.request.url, artifact)

        run.enter(PipelineStage.TRANSCRIBING)
        logging.info(f"[{run.request_id}] Transcribing audio...")
        return await self.transcriber.transcribe(artifact)

    async def _fetch_metadata(self, run: PipelineRun) -> VideoMetadata:
        run.enter(PipelineStage.FETCHING_METADATA)
        logging.info(f"[{run.request_id}] Fetching video metadata...")
        return await self.metadata_fetcher.fetch(run.request.url)
