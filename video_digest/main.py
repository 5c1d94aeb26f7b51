"""
Command line entry point for the video digest application.
"""

import argparse
import asyncio
import json
import sys
from dotenv import load_dotenv

from video_digest.api.dependencies import get_pipeline
from video_digest.models.schemas import DigestRequest, DigestResult, SummaryLength, SummaryStyle
from video_digest.utils.error_handling import DigestError
from video_digest.utils.logger import logging


def digest_youtube_video(
    url: str,
    style: str = SummaryStyle.FORMAL.value,
    length: str = SummaryLength.MEDIUM.value,
) -> DigestResult:
    """
    Process a YouTube video: extract audio, transcribe, scrape metadata and summarize.

    Args:
        url: YouTube watch URL
        style: Summary style
        length: Summary length

    Returns:
        DigestResult object
    """
    request = DigestRequest(url=url, style=style, length=length)
    return asyncio.run(get_pipeline().run(request))


def main(argv=None):
    """Main function to run the application from command line."""
    parser = argparse.ArgumentParser(description="Video Digest")
    parser.add_argument("url", help="YouTube video URL")
    parser.add_argument("--style", default=SummaryStyle.FORMAL.value,
                        help="Summary style: technical, formal, casual or bullet-points")
    parser.add_argument("--length", default=SummaryLength.MEDIUM.value,
                        choices=[length.value for length in SummaryLength],
                        help="Summary length")

    args = parser.parse_args(argv)

    # Load environment variables
    load_dotenv()

    try:
        result = digest_youtube_video(args.url, args.style, args.length)
    except DigestError as e:
        logging.error(str(e))
        print(json.dumps({"error": str(e)}), file=sys.stderr)
        return 1

    print(json.dumps(result.model_dump(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
