"""FastAPI dependency injection configuration."""

from functools import lru_cache

from video_digest.core.metadata import MetadataFetcher
from video_digest.core.pipeline import VideoDigestPipeline
from video_digest.core.summarizer import TranscriptSummarizer
from video_digest.core.transcriber import AudioTranscriber
from video_digest.core.youtube_downloader import AudioExtractor


@lru_cache(maxsize=1)
def get_pipeline() -> VideoDigestPipeline:
    """Returns the pipeline with its clients built from configuration."""
    return VideoDigestPipeline(
        extractor=AudioExtractor(),
        transcriber=AudioTranscriber(),
        metadata_fetcher=MetadataFetcher(),
        summarizer=TranscriptSummarizer(),
    )
