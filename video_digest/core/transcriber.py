"""
Module for transcribing audio files using Groq's API.
"""

import asyncio
import os
from typing import Optional

from groq import AsyncGroq

from video_digest.config import config
from video_digest.core.youtube_downloader import remove_artifact
from video_digest.models.schemas import AudioArtifact, TranscriptionConfig
from video_digest.utils.error_handling import TranscriptionFailed
from video_digest.utils.logger import logging


class AudioTranscriber:
    """Class to handle audio transcription operations."""

    def __init__(
        self,
        transcribe_config: Optional[TranscriptionConfig] = None,
        client: Optional[AsyncGroq] = None,
        api_key: Optional[str] = None,
    ):
        """
        Initialize the transcriber with a Groq client.

        Args:
            transcribe_config: Configuration for transcription
            client: Pre-built async Groq client (built from api_key if None)
            api_key: Groq API key (if None, will try to get from environment)
        """
        self.transcribe_config = transcribe_config or TranscriptionConfig()
        if client is None:
            api_key = api_key or os.getenv("GROQ_API_KEY")
            if not api_key:
                raise ValueError(
                    "Groq API key is required. Set it in .env file or pass directly."
                )
            client = AsyncGroq(api_key=api_key, timeout=config.TRANSCRIPTION_TIMEOUT)

        self.client = client

    async def transcribe(self, artifact: AudioArtifact) -> str:
        """
        Transcribe the audio of an artifact and delete the artifact afterwards.

        The artifact is only deleted when transcription succeeds; on failure it
        is left in place for the caller's cleanup.

        Args:
            artifact: Audio artifact produced by the extractor

        Returns:
            Transcript text

        Raises:
            TranscriptionFailed: On upstream errors or empty/malformed audio
        """
        target = str(artifact.path)
        try:
            audio_bytes = await asyncio.to_thread(artifact.path.read_bytes)
        except OSError as e:
            raise TranscriptionFailed(target, e) from e

        if not audio_bytes:
            raise TranscriptionFailed(target, ValueError("Audio file is empty"))

        logging.info(f"Transcribing audio file: {target}")

        options = {
            "model": self.transcribe_config.model,
            "temperature": self.transcribe_config.temperature,
        }
        if self.transcribe_config.language:
            options["language"] = self.transcribe_config.language
        if self.transcribe_config.prompt:
            options["prompt"] = self.transcribe_config.prompt

        try:
            transcription = await self.client.audio.transcriptions.create(
                file=(artifact.path.name, audio_bytes),
                **options,
            )
        except Exception as e:
            logging.error(f"Error transcribing audio: {str(e)}")
            raise TranscriptionFailed(target, e) from e

        text = (getattr(transcription, "text", None) or "").strip()
        if not text:
            raise TranscriptionFailed(target, ValueError("Transcription returned no text"))

        remove_artifact(artifact)
        logging.info(f"Transcription complete ({len(text)} characters).")

        return text
