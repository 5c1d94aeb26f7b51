"""
Tests for the server launcher.
"""

from unittest.mock import patch

import run_api
from video_digest.config import config


def test_parser_defaults():
    args = run_api.build_parser().parse_args([])

    assert args.host == "0.0.0.0"
    assert args.port == config.PORT
    assert args.reload is False


def test_main_starts_uvicorn():
    with patch('run_api.uvicorn.run') as mock_run:
        run_api.main(["--port", "5050", "--reload"])

    mock_run.assert_called_once()
    assert mock_run.call_args.args[0] == "video_digest.api.app:app"
    assert mock_run.call_args.kwargs["port"] == 5050
    assert mock_run.call_args.kwargs["reload"] is True
    assert mock_run.call_args.kwargs["log_level"] == config.LOG_LEVEL.lower()
