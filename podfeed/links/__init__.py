"""
Link resolution for podfeed.

Turns a user supplied link into a resource descriptor (Info) naming the
platform, the kind of resource, and its platform-native identifier.

Supported Platforms (in host matching priority order):
    - Bilibili (space.bilibili.com): users, collections
    - YouTube (youtube.com): playlists, channels, users, handles
    - Vimeo (vimeo.com): groups, channels, users
    - SoundCloud (soundcloud.com): sets
    - Twitch (twitch.tv): users

Example:
    >>> from podfeed.links import parse_url
    >>>
    >>> info = parse_url("youtube.com/playlist?list=PL123")
    >>> info.provider, info.link_type, info.item_id
    (<Provider.YOUTUBE: 'youtube'>, <LinkType.PLAYLIST: 'playlist'>, 'PL123')
"""

from .base import Info, LinkParser, LinkType, Provider
from .router import PARSERS, get_parser, normalize_url, parse_url

__all__ = [
    "Info",
    "LinkParser",
    "LinkType",
    "Provider",
    "PARSERS",
    "get_parser",
    "normalize_url",
    "parse_url",
]
