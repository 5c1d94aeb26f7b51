"""
Configuration for pytest tests.
"""

import os
from pathlib import Path

# Must be set before the application config is imported
TEST_DATA_DIR = Path(__file__).resolve().parent.parent / "test_data"
os.environ.setdefault("GROQ_API_KEY", "test_api_key")
os.environ["DATA_DIR"] = str(TEST_DATA_DIR)
os.environ["DOWNLOADS_DIR"] = str(TEST_DATA_DIR / "downloads")
os.environ["ENVIRONMENT"] = "development"

import pytest
from unittest.mock import AsyncMock, MagicMock

from video_digest.core.pipeline import VideoDigestPipeline
from video_digest.core.youtube_downloader import AudioExtractor, remove_artifact
from video_digest.models.schemas import AudioDownloadConfig, VideoMetadata


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Remove the test data directory after the session."""
    yield

    import shutil
    shutil.rmtree(TEST_DATA_DIR, ignore_errors=True)


@pytest.fixture(scope="session")
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://www.youtube.com/watch?v=abc123"


@pytest.fixture
def downloads_dir(tmp_path):
    """Return a per-test downloads directory."""
    path = tmp_path / "downloads"
    path.mkdir()
    return path


@pytest.fixture
def mocks(downloads_dir):
    """Test doubles for every external capability of the pipeline."""
    real_extractor = AudioExtractor(AudioDownloadConfig(output_directory=str(downloads_dir)))

    async def fake_extract(url, artifact):
        artifact.path.write_bytes(b"fake audio")
        return artifact

    extractor = MagicMock()
    extractor.allocate.side_effect = real_extractor.allocate
    extractor.extract = AsyncMock(side_effect=fake_extract)

    transcriber = MagicMock()
    transcriber.transcribe = AsyncMock(return_value="hello world")

    metadata_fetcher = MagicMock()
    metadata_fetcher.fetch = AsyncMock(return_value=VideoMetadata(title="T", description="D"))

    summarizer = MagicMock()
    summarizer.summarize = AsyncMock(return_value="A mocked summary.")

    cleanup = MagicMock(side_effect=remove_artifact)

    return MagicMock(
        extractor=extractor,
        transcriber=transcriber,
        metadata_fetcher=metadata_fetcher,
        summarizer=summarizer,
        cleanup=cleanup,
    )


@pytest.fixture
def pipeline(mocks):
    """Pipeline wired to the mocked capabilities."""
    return VideoDigestPipeline(
        extractor=mocks.extractor,
        transcriber=mocks.transcriber,
        metadata_fetcher=mocks.metadata_fetcher,
        summarizer=mocks.summarizer,
        cleanup=mocks.cleanup,
    )
