"""
Common utilities and helpers for podfeed
"""

import asyncio
import re
import time
from datetime import datetime, timezone
from functools import wraps
from typing import Any, Callable, Optional, Tuple, Type

from ..core.logger import get_logger

logger = get_logger(__name__)

_TWITCH_DURATION_RE = re.compile(r'^(?:(\d+)h)?(?:(\d+)m)?(?:(\d+)s)?$')


def retry(
    max_retries: int = 3,
    initial_delay: float = 1.0,
    backoff_factor: float = 2.0,
    exceptions: Tuple[Type[BaseException], ...] = (Exception,),
):
    """
    Decorator for retrying functions with exponential backoff

    Args:
        max_retries: Maximum number of retry attempts
        initial_delay: Initial delay between retries in seconds
        backoff_factor: Factor to multiply delay by for each retry
        exceptions: Exception types that trigger a retry; others propagate at once
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def async_wrapper(*args, **kwargs) -> Any:
            delay = initial_delay
            for attempt in range(max_retries + 1):
                try:
                    return await func(*args, **kwargs)
                except exceptions as e:
                    if attempt == max_retries:
                        logger.error(f"Function {func.__name__} failed after {max_retries} retries: {e}")
                        raise

                    logger.warning(f"Function {func.__name__} failed (attempt {attempt + 1}/{max_retries + 1}): {e}")
                    logger.info(f"Retrying in {delay:.2f} seconds...")
                    await asyncio.sleep(delay)
                    delay *= backoff_factor

        @wraps(func)
        def sync_wrapper(*args, **kwargs) -> Any:
            delay = initial_delay
            for attempt in range(max_retries + 1):
                try:
                    return func(*args, **kwargs)
                except exceptions as e:
                    if attempt == max_retries:
                        logger.error(f"Function {func.__name__} failed after {max_retries} retries: {e}")
                        raise

                    logger.warning(f"Function {func.__name__} failed (attempt {attempt + 1}/{max_retries + 1}): {e}")
                    logger.info(f"Retrying in {delay:.2f} seconds...")
                    time.sleep(delay)
                    delay *= backoff_factor

        if asyncio.iscoroutinefunction(func):
            return async_wrapper
        else:
            return sync_wrapper

    return decorator


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an RFC 3339 timestamp as returned by the platform APIs

    Args:
        value: Timestamp such as "2023-01-02T03:04:05Z"

    Returns:
        datetime: Timezone-aware datetime, or None if missing or malformed
    """
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace('Z', '+00:00'))
    except ValueError:
        logger.debug(f"Ignoring malformed timestamp: {value}")
        return None


def from_unix(value: Optional[float]) -> Optional[datetime]:
    """Convert a unix timestamp to an aware UTC datetime"""
    if value is None:
        return None
    return datetime.fromtimestamp(value, tz=timezone.utc)


def parse_twitch_duration(value: Optional[str]) -> Optional[int]:
    """
    Parse a Twitch duration string into seconds

    Args:
        value: Duration such as "1h2m3s" or "45m10s"

    Returns:
        int: Total seconds, or None if missing or malformed
    """
    if not value:
        return None
    match = _TWITCH_DURATION_RE.match(value)
    if not match:
        return None
    hours, minutes, seconds = (int(group or 0) for group in match.groups())
    return hours * 3600 + minutes * 60 + seconds
