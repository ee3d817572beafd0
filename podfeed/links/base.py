"""
Base types for link resolution

A link parser turns the path and query of a URL belonging to one platform
into a (link type, identifier) pair. Parsers are pure: no I/O, no shared state.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple
from urllib.parse import SplitResult, parse_qs

from ..core.exceptions import MissingQueryParamError


class Provider(str, Enum):
    """Supported video hosting platforms"""
    YOUTUBE = "youtube"
    VIMEO = "vimeo"
    SOUNDCLOUD = "soundcloud"
    TWITCH = "twitch"
    BILIBILI = "bilibili"


class LinkType(str, Enum):
    """Kind of resource a link points at"""
    PLAYLIST = "playlist"
    CHANNEL = "channel"
    USER = "user"
    GROUP = "group"
    HANDLE = "handle"


@dataclass(frozen=True)
class Info:
    """Resource descriptor resolved from a link"""
    provider: Provider
    link_type: LinkType
    item_id: str


class LinkParser(ABC):
    """
    Abstract base class for per-platform link parsers

    Subclasses declare the provider they resolve and the registrable domain
    they own, and implement parse() for that platform's path grammar.
    """

    provider: Provider
    domain: str

    def matches_host(self, hostname: str) -> bool:
        """
        Check whether a hostname belongs to this platform

        The hostname must equal the domain or be one of its subdomains,
        so look-alike hosts such as "evil-youtube.com" are rejected.
        """
        hostname = hostname.lower().rstrip('.')
        return hostname == self.domain or hostname.endswith('.' + self.domain)

    @abstractmethod
    def parse(self, parsed: SplitResult) -> Tuple[LinkType, str]:
        """
        Resolve a URL into a link type and platform-native identifier

        Args:
            parsed: URL already matched to this platform's domain

        Returns:
            Tuple[LinkType, str]: Link type and non-empty identifier

        Raises:
            LinkError: When the path or query has no recognized shape
        """
        pass


def split_path(parsed: SplitResult) -> List[str]:
    """Split the raw path on '/', keeping the leading empty segment"""
    return parsed.path.split('/')


def query_param(parsed: SplitResult, name: str) -> str:
    """Return the first non-empty value of a query parameter"""
    values = parse_qs(parsed.query).get(name)
    if not values or not values[0]:
        raise MissingQueryParamError(name)
    return values[0]
