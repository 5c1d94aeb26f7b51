"""
YouTube audio extraction module.
"""

import asyncio
import os
import uuid
from pathlib import Path
from typing import Optional

from pytubefix import YouTube

from video_digest.models.schemas import AudioArtifact, AudioDownloadConfig
from video_digest.utils.error_handling import ExtractionFailed
from video_digest.utils.logger import logging

# Container subtype of the audio-only stream -> file extension accepted by Whisper
AUDIO_EXTENSIONS = {"mp4": "m4a", "webm": "webm"}


class AudioExtractor:
    """Class to handle downloading the audio track of YouTube videos."""

    def __init__(self, config: Optional[AudioDownloadConfig] = None):
        """
        Initialize the extractor with configuration.

        Args:
            config: Configuration for download operations
        """
        self.config = config or AudioDownloadConfig()

    def allocate(self, request_id: Optional[str] = None) -> AudioArtifact:
        """
        Reserve a request-scoped path for an audio artifact.

        Nothing is written to disk. The file name embeds a fresh UUID so that
        concurrent requests never share a file.
        """
        request_id = request_id or uuid.uuid4().hex
        os.makedirs(self.config.output_directory, exist_ok=True)
        path = Path(self.config.output_directory) / f"{request_id}.{self.config.extension}"
        return AudioArtifact(path=path, request_id=request_id)

    async def extract(self, url: str, artifact: AudioArtifact) -> AudioArtifact:
        """
        Download the audio track of ``url`` into ``artifact``.

        The stream is picked first so the final file name is fixed on the
        event loop before any bytes are written. If the caller is cancelled
        mid-download, the worker thread is allowed to finish and its file is
        removed before the cancellation propagates.

        Args:
            url: YouTube video URL
            artifact: Artifact reserved with ``allocate``

        Returns:
            The same artifact, now backed by a file

        Raises:
            ExtractionFailed: On network errors, unsupported URLs or missing streams
        """
        try:
            audio_stream = await asyncio.to_thread(self._select_audio_stream, url)
            extension = AUDIO_EXTENSIONS.get(audio_stream.subtype, audio_stream.subtype)
            artifact.path = artifact.path.with_suffix(f".{extension}")

            download = asyncio.ensure_future(
                asyncio.to_thread(self._download_stream, audio_stream, artifact.path)
            )
            try:
                await asyncio.shield(download)
            except asyncio.CancelledError:
                # The thread cannot be interrupted; wait for it, then drop its file
                await asyncio.gather(download, return_exceptions=True)
                remove_artifact(artifact)
                raise
        except Exception as e:
            logging.error(f"Error downloading audio: {str(e)}")
            remove_artifact(artifact)
            raise ExtractionFailed(url, e) from e

        return artifact

    def _select_audio_stream(self, url: str):
        yt = YouTube(url)
        audio_stream = yt.streams.filter(only_audio=True).order_by('abr').last()
        if audio_stream is None:
            raise ValueError("No audio stream available")
        logging.info(f"Downloading audio: {yt.title}")
        return audio_stream

    def _download_stream(self, audio_stream, path: Path):
        downloaded = audio_stream.download(
            output_path=str(path.parent),
            filename=path.name,
            skip_existing=False,
            timeout=self.config.timeout,
        )

        # Some pytubefix versions adjust the file name; keep the reserved one
        if downloaded and Path(downloaded) != path:
            os.replace(downloaded, path)

        if not path.is_file():
            raise FileNotFoundError(f"Audio file was not written to {path}")
        logging.info(f"Audio saved to: {path}")


def remove_artifact(artifact: Optional[AudioArtifact]) -> bool:
    """
    Delete an artifact's file if it is still on disk.

    Returns:
        True if a file was deleted
    """
    if artifact is None:
        return False
    try:
        artifact.path.unlink()
    except FileNotFoundError:
        return False
    logging.debug(f"Removed audio artifact {artifact.path}")
    return True
