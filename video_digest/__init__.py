"""
Video Digest Application.

This application takes a YouTube video URL, extracts and transcribes the audio,
scrapes the page metadata and generates a styled summary using LLM models.
"""

from video_digest.config import config

__version__ = config.APP_VERSION
