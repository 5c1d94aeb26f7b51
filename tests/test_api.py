"""
Tests for the FastAPI routes.
"""

import pytest
from fastapi.testclient import TestClient

from video_digest.api.app import app
from video_digest.api.dependencies import get_pipeline
from video_digest.utils.error_handling import MetadataFailed


@pytest.fixture
def client(pipeline):
    """Test client with the pipeline replaced by the mocked one."""
    app.dependency_overrides[get_pipeline] = lambda: pipeline
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["name"] == "Video Digest"


def test_transcribe(client, mocks, test_video_url):
    response = client.post("/api/transcribe", json={
        "url": test_video_url,
        "promptStyle": "bullet-points",
        "summaryLength": "short",
    })

    assert response.status_code == 200
    assert response.json() == {
        "transcription": "hello world",
        "metadata": {"title": "T", "description": "D"},
        "summary": "A mocked summary.",
    }
    assert mocks.summarizer.summarize.call_args.args[1] == 100
    assert "X-Process-Time" in response.headers


@pytest.mark.parametrize("body", [{"url": "not-a-video-url"}, {}, {"url": None}])
def test_transcribe_invalid_url(client, mocks, body):
    response = client.post("/api/transcribe", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid YouTube URL"}
    mocks.extractor.extract.assert_not_called()
    mocks.transcriber.transcribe.assert_not_called()
    mocks.metadata_fetcher.fetch.assert_not_called()
    mocks.summarizer.summarize.assert_not_called()


def test_transcribe_invalid_length(client, test_video_url):
    response = client.post("/api/transcribe", json={"url": test_video_url, "summaryLength": "epic"})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid summary length"}


def test_transcribe_stage_failure(client, mocks, test_video_url):
    """Stage causes are not leaked to the caller."""
    mocks.metadata_fetcher.fetch.side_effect = MetadataFailed(test_video_url, RuntimeError("secret detail"))

    response = client.post("/api/transcribe", json={"url": test_video_url})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to process video"}
    mocks.cleanup.assert_called_once()
