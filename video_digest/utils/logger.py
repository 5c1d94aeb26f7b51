import sys
import logging as pylogging

from video_digest.config import config


def setup_logging(name: str = "videodigest") -> pylogging.Logger:
    """
    Configure stdout and file logging from the application config.

    Returns:
        The application logger
    """
    config.LOG_DIR.mkdir(parents=True, exist_ok=True)
    pylogging.basicConfig(
        level=getattr(pylogging, config.LOG_LEVEL.upper(), pylogging.INFO),
        format=config.LOG_FORMAT,
        handlers=[
            pylogging.FileHandler(config.LOG_DIR / config.LOG_FILE),
            pylogging.StreamHandler(sys.stdout)
        ]
    )
    return pylogging.getLogger(name)


logging = setup_logging()
