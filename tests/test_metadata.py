"""
Tests for the metadata fetcher module.
"""

import asyncio
import pytest
import requests
from unittest.mock import MagicMock

from video_digest.config import config
from video_digest.core.metadata import MetadataFetcher, parse_metadata
from video_digest.models.schemas import NO_DESCRIPTION
from video_digest.utils.error_handling import MetadataFailed

WATCH_PAGE = """
<html>
  <head>
    <title>Nuclear Fusion Explained - YouTube</title>
    <meta name="description" content="Everything about fusion.">
  </head>
  <body></body>
</html>
"""


@pytest.fixture
def mock_session():
    """Fixture to mock a requests session."""
    session = MagicMock()
    session.headers = {}
    session.get.return_value.text = WATCH_PAGE
    return session


def test_parse_metadata():
    metadata = parse_metadata(WATCH_PAGE)

    assert metadata.title == "Nuclear Fusion Explained"
    assert metadata.description == "Everything about fusion."


def test_parse_metadata_without_description():
    metadata = parse_metadata("<html><head><title>Only a title - YouTube</title></head></html>")

    assert metadata.title == "Only a title"
    assert metadata.description == NO_DESCRIPTION


def test_parse_metadata_without_title():
    with pytest.raises(ValueError):
        parse_metadata('<html><head><meta name="description" content="x"></head></html>')


def test_fetch(mock_session, test_video_url):
    fetcher = MetadataFetcher(session=mock_session, timeout=5)
    metadata = asyncio.run(fetcher.fetch(test_video_url))

    mock_session.get.assert_called_once_with(test_video_url, timeout=5)
    assert metadata.title == "Nuclear Fusion Explained"
    assert mock_session.headers == {}


def test_fetch_network_error(mock_session, test_video_url):
    mock_session.get.side_effect = requests.ConnectionError("unreachable")
    fetcher = MetadataFetcher(session=mock_session)

    with pytest.raises(MetadataFailed) as exc_info:
        asyncio.run(fetcher.fetch(test_video_url))

    assert exc_info.value.stage == "metadata"


def test_fetch_http_error(mock_session, test_video_url):
    mock_session.get.return_value.raise_for_status.side_effect = requests.HTTPError("404")
    fetcher = MetadataFetcher(session=mock_session)

    with pytest.raises(MetadataFailed):
        asyncio.run(fetcher.fetch(test_video_url))


def test_fetch_page_without_title(mock_session, test_video_url):
    """The title has no fallback."""
    mock_session.get.return_value.text = "<html><body>consent page</body></html>"
    fetcher = MetadataFetcher(session=mock_session)

    with pytest.raises(MetadataFailed):
        asyncio.run(fetcher.fetch(test_video_url))


def test_own_session_sends_configured_user_agent():
    """A fetcher that builds its own session replaces the requests default."""
    fetcher = MetadataFetcher()

    assert fetcher.session.headers["User-Agent"] == config.USER_AGENT
    assert "python-requests" not in fetcher.session.headers["User-Agent"]
