"""
Utilities and helpers for podfeed
"""

from .common import retry, parse_timestamp, from_unix, parse_twitch_duration

__all__ = ["retry", "parse_timestamp", "from_unix", "parse_twitch_duration"]
