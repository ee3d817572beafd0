"""
Core configuration management for podfeed

This module handles all configuration loading and validation for the feed builders.
Supports environment variables with sensible defaults.
"""

import os
from typing import List
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def get_env_or_default(env_name: str, default: str) -> str:
    """Get environment variable value or return default."""
    value = os.environ.get(env_name)
    return value if value is not None else default


def get_env_bool_or_default(env_name: str, default: bool) -> bool:
    """Get environment variable boolean value or return default."""
    value = os.environ.get(env_name)
    if value is None:
        return default
    value = value.lower()
    if value in ['true', 'yes', '1', 't', 'y']:
        return True
    elif value in ['false', 'no', '0', 'f', 'n']:
        return False
    return default


def get_env_int_or_default(env_name: str, default: int) -> int:
    """Get environment variable integer value or return default."""
    value = os.environ.get(env_name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def get_env_float_or_default(env_name: str, default: float) -> float:
    """Get environment variable float value or return default."""
    value = os.environ.get(env_name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


# API credentials
YOUTUBE_API_KEY = get_env_or_default("YOUTUBE_API_KEY", "")
VIMEO_API_KEY = get_env_or_default("VIMEO_API_KEY", "")
# Twitch expects "CLIENT_ID:CLIENT_SECRET"
TWITCH_API_KEY = get_env_or_default("TWITCH_API_KEY", "")

# Logging Configuration
LOG_LEVEL = get_env_or_default("LOG_LEVEL", "INFO").strip().upper()
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = get_env_or_default("LOG_FILE", "podfeed.log")
LOG_MAX_BYTES = get_env_int_or_default("LOG_MAX_BYTES", 10485760)
LOG_BACKUP_COUNT = get_env_int_or_default("LOG_BACKUP_COUNT", 5)

# Builder Configuration
BUILDER_TIMEOUT = get_env_float_or_default("BUILDER_TIMEOUT", 30.0)
HTTP_TIMEOUT = get_env_float_or_default("HTTP_TIMEOUT", 15.0)
DEFAULT_PAGE_SIZE = get_env_int_or_default("DEFAULT_PAGE_SIZE", 50)
MAX_RETRY_COUNT = get_env_int_or_default("MAX_RETRY_COUNT", 3)
INITIAL_RETRY_DELAY = get_env_float_or_default("INITIAL_RETRY_DELAY", 1.0)

USER_AGENT = get_env_or_default(
    "DOWNLOAD_USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36",
)


# Main Configuration Dictionary
CONFIG = {
    "api": {
        "youtube": YOUTUBE_API_KEY,
        "vimeo": VIMEO_API_KEY,
        "twitch": TWITCH_API_KEY,
    },
    "builder": {
        "timeout": BUILDER_TIMEOUT,
        "http_timeout": HTTP_TIMEOUT,
        "page_size": DEFAULT_PAGE_SIZE,
        "max_retry_count": MAX_RETRY_COUNT,
        "initial_retry_delay": INITIAL_RETRY_DELAY,
        "user_agent": USER_AGENT,
    },
    "download": {
        "quiet": get_env_bool_or_default("DOWNLOAD_QUIET", True),
        "no_warnings": get_env_bool_or_default("DOWNLOAD_NO_WARNINGS", True),
        "socket_timeout": get_env_int_or_default("DOWNLOAD_SOCKET_TIMEOUT", 20),
        "http_headers": {
            "User-Agent": USER_AGENT,
        },
        "audio_format_high": get_env_or_default("AUDIO_FORMAT_HIGH", "bestaudio/best"),
        "audio_format_low": get_env_or_default("AUDIO_FORMAT_LOW", "worstaudio/worst"),
        "video_format_high": get_env_or_default(
            "VIDEO_FORMAT_HIGH",
            "best[ext=mp4]/best",
        ),
        "video_format_low": get_env_or_default(
            "VIDEO_FORMAT_LOW",
            "worst[ext=mp4]/worst",
        ),
    },
    "log": {
        "level": LOG_LEVEL,
        "format": LOG_FORMAT,
        "file": LOG_FILE,
        "max_bytes": LOG_MAX_BYTES,
        "backup_count": LOG_BACKUP_COUNT,
    },
    "app": {
        "name": "podfeed",
        "version": "1.0.0",
    },
}


def get_api_key(provider) -> str:
    """
    Get the configured API credential for a provider.

    Args:
        provider: Provider enum member or its string value

    Returns:
        str: The credential, or an empty string when none is configured
    """
    name = getattr(provider, "value", provider)
    return CONFIG["api"].get(str(name), "")


def validate_config() -> List[str]:
    """
    Validate configuration and return list of missing recommended settings.

    Returns:
        List[str]: List of configuration warnings
    """
    errors = []

    if not CONFIG["api"]["youtube"]:
        errors.append("YOUTUBE_API_KEY is required for YouTube feeds")
    if not CONFIG["api"]["vimeo"]:
        errors.append("VIMEO_API_KEY is required for Vimeo feeds")
    if not CONFIG["api"]["twitch"]:
        errors.append("TWITCH_API_KEY is required for Twitch feeds")
    elif ":" not in CONFIG["api"]["twitch"]:
        errors.append("TWITCH_API_KEY must be in CLIENT_ID:CLIENT_SECRET format")

    if CONFIG["builder"]["page_size"] <= 0:
        errors.append("DEFAULT_PAGE_SIZE must be a positive number")

    if str(CONFIG["log"]["level"]).strip().upper() not in LOG_LEVELS:
        errors.append(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")

    return errors
