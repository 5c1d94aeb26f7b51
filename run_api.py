"""
Server launcher for the video digest API.
"""

import argparse
import uvicorn
from dotenv import load_dotenv

from video_digest.config import config
from video_digest.utils.logger import logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Video Digest API")
    parser.add_argument("--host", default="0.0.0.0", help="Interface to listen on")
    parser.add_argument("--port", type=int, default=config.PORT, help="Port to listen on (PORT)")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    return parser


def main(argv=None):
    """Start uvicorn with the digest app."""
    load_dotenv()
    args = build_parser().parse_args(argv)

    config.initialize()
    logging.info(
        f"{config.APP_NAME} v{config.APP_VERSION} ({config.__name__}) "
        f"listening on {args.host}:{args.port}, downloads in {config.DOWNLOADS_DIR}"
    )

    uvicorn.run(
        "video_digest.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
