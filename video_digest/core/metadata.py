"""
Module for scraping video title and description from the watch page.
"""

import asyncio
from typing import Optional

import requests
from bs4 import BeautifulSoup

from video_digest.config import config
from video_digest.models.schemas import NO_DESCRIPTION, VideoMetadata
from video_digest.utils.error_handling import MetadataFailed
from video_digest.utils.logger import logging


class MetadataFetcher:
    """Class to fetch and parse video page metadata."""

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = config.METADATA_TIMEOUT):
        if session is None:
            session = requests.Session()
            session.headers["User-Agent"] = config.USER_AGENT
        self.session = session
        self.timeout = timeout

    async def fetch(self, url: str) -> VideoMetadata:
        """
        Fetch the page at ``url`` and extract title and description.

        Raises:
            MetadataFailed: On network errors or a page without a title
        """
        logging.info(f"Fetching video metadata for URL: {url}")
        try:
            html = await asyncio.to_thread(self._get, url)
        except requests.RequestException as e:
            logging.error(f"Error fetching video page: {str(e)}")
            raise MetadataFailed(url, e) from e

        try:
            metadata = parse_metadata(html)
        except ValueError as e:
            raise MetadataFailed(url, e) from e

        logging.info(f"Metadata fetched: {metadata.title!r}")
        return metadata

    def _get(self, url: str) -> str:
        response = self.session.get(url, timeout=self.timeout)
        response.raise_for_status()
        return response.text


def parse_metadata(html: str, title_suffix: str = config.TITLE_SUFFIX) -> VideoMetadata:
    """Extract title and description from a watch page.

    The description falls back to a placeholder; a missing title is an error.
    """
    soup = BeautifulSoup(html or "", "html.parser")

    title_tag = soup.find("title")
    title = title_tag.get_text() if title_tag else ""
    title = title.replace(title_suffix, "").strip()
    if not title:
        raise ValueError("Page has no title")

    description_tag = soup.find("meta", attrs={"name": "description"})
    description = (description_tag.get("content") or "").strip() if description_tag else ""

    return VideoMetadata(title=title, description=description or NO_DESCRIPTION)
