"""
Configuration settings for the video digest application.
"""

import os
from pathlib import Path
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "Video Digest"
    APP_VERSION = "0.2.0"

    # Data directories
    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()
    DATA_DIR = Path(os.getenv("DATA_DIR", BASE_DIR / "data"))
    DOWNLOADS_DIR = Path(os.getenv("DOWNLOADS_DIR", DATA_DIR / "downloads"))

    # API keys
    GROQ_API_KEY = os.getenv("GROQ_API_KEY")

    # Default models
    TRANSCRIPTION_MODEL = os.getenv("TRANSCRIPTION_MODEL", "whisper-large-v3")
    SUMMARY_MODEL = os.getenv("SUMMARY_MODEL", "llama-3.3-70b-versatile")

    # Scraping
    VIDEO_URL_MARKER = "youtube.com/watch?v="
    TITLE_SUFFIX = " - YouTube"
    USER_AGENT = os.getenv("USER_AGENT", "Mozilla/5.0 (compatible; video-digest/0.2)")

    # Per-call timeouts in seconds
    DOWNLOAD_TIMEOUT = float(os.getenv("DOWNLOAD_TIMEOUT", "300"))
    TRANSCRIPTION_TIMEOUT = float(os.getenv("TRANSCRIPTION_TIMEOUT", "300"))
    METADATA_TIMEOUT = float(os.getenv("METADATA_TIMEOUT", "30"))
    SUMMARY_TIMEOUT = float(os.getenv("SUMMARY_TIMEOUT", "120"))

    PORT = int(os.getenv("PORT", "4000"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT = "[%(asctime)s] {%(name)s:%(lineno)d} %(levelname)s - %(message)s"
    LOG_DIR = Path(os.getenv("LOG_DIR", BASE_DIR / "logs"))
    LOG_FILE = "videodigest.log"

    # Create data directories if they don't exist
    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        cls.DOWNLOADS_DIR.mkdir(parents=True, exist_ok=True)

        # Validate required environment variables
        if not cls.GROQ_API_KEY:
            print("WARNING: GROQ_API_KEY environment variable not set.")
            print("Please set it in the .env file or environment variables.")


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
config.initialize()
