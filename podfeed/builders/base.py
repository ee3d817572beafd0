"""
Base builder for podcast feeds

This module provides the feed data model and the base classes shared by the
provider specific builders: Builder turns a FeedConfig into a Feed, and
Downloader resolves playable media streams for episodes.
"""

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

import requests

from ..core.config import CONFIG
from ..core.exceptions import FeedBuildError
from ..core.logger import get_logger
from ..links import Info, LinkType, Provider, parse_url
from ..utils.common import retry

logger = get_logger(__name__)


class Format(str, Enum):
    """Episode media format"""
    AUDIO = "audio"
    VIDEO = "video"


class Quality(str, Enum):
    """Episode media quality"""
    HIGH = "high"
    LOW = "low"


@dataclass
class FeedConfig:
    """Configuration of a single feed"""
    id: str
    url: str
    page_size: int = field(default_factory=lambda: CONFIG['builder']['page_size'])
    format: Format = Format.AUDIO
    quality: Quality = Quality.HIGH
    resolve_streams: bool = False


@dataclass
class Episode:
    """A single feed item"""
    id: str
    title: str
    video_url: str
    description: Optional[str] = None
    duration: Optional[int] = None  # seconds
    pub_date: Optional[datetime] = None
    thumbnail: Optional[str] = None
    media_url: Optional[str] = None


@dataclass
class Feed:
    """A podcast feed built from a platform playlist, channel or user"""
    id: str
    item_id: str
    provider: Provider
    link_type: LinkType
    title: str
    item_url: str
    page_size: int
    format: Format
    quality: Quality
    description: Optional[str] = None
    author: Optional[str] = None
    cover_art: Optional[str] = None
    episodes: List[Episode] = field(default_factory=list)
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class Downloader(ABC):
    """Resolves playable media streams for episode pages"""

    @abstractmethod
    async def resolve_stream(self, url: str, format: Format, quality: Quality) -> str:
        """
        Resolve a direct media URL for an episode page

        Args:
            url: Episode page URL
            format: Audio or video
            quality: High or low quality

        Returns:
            str: Direct media URL

        Raises:
            FeedBuildError: If no stream could be resolved
        """
        pass


@retry(
    max_retries=CONFIG['builder']['max_retry_count'],
    initial_delay=CONFIG['builder']['initial_retry_delay'],
    exceptions=(requests.ConnectionError, requests.Timeout),
)
def get_json(url: str, params: Optional[Dict[str, Any]] = None,
             headers: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """
    GET a JSON document, retrying connection failures and timeouts

    Raises:
        requests.RequestException: On network errors or non-2xx answers
    """
    response = requests.get(
        url,
        params=params,
        headers=headers,
        timeout=CONFIG['builder']['http_timeout'],
    )
    response.raise_for_status()
    return response.json()


@retry(
    max_retries=CONFIG['builder']['max_retry_count'],
    initial_delay=CONFIG['builder']['initial_retry_delay'],
    exceptions=(requests.ConnectionError, requests.Timeout),
)
def post_json(url: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """POST with query parameters and decode the JSON answer"""
    response = requests.post(url, params=params, timeout=CONFIG['builder']['http_timeout'])
    response.raise_for_status()
    return response.json()


class Builder(ABC):
    """
    Abstract base class for feed builders

    Builders keep no mutable state after construction, so one instance can
    serve concurrent refreshes of many feeds.
    """

    provider: Provider

    @classmethod
    async def create(cls, key: str = "", downloader: Optional[Downloader] = None) -> "Builder":
        """
        Construct a builder, validating credentials where the provider needs them

        Raises:
            BuilderConstructionError: If the builder cannot be constructed
        """
        return cls()

    async def build(self, config: FeedConfig) -> Feed:
        """
        Build a feed from its configuration

        Args:
            config: Feed configuration

        Returns:
            Feed: Feed metadata with at most config.page_size episodes

        Raises:
            LinkError: If config.url cannot be resolved
            FeedBuildError: If the feed cannot be fetched
        """
        info = parse_url(config.url)
        if info.provider != self.provider:
            raise FeedBuildError(
                f"{self.provider.value} builder cannot build a {info.provider.value} feed: {config.url}"
            )

        logger.info(f"Building {info.provider.value} {info.link_type.value} feed {config.id} ({info.item_id})")
        feed = await self._build_feed(info, config)
        feed.episodes = feed.episodes[:config.page_size]
        logger.info(f"Built feed {config.id} with {len(feed.episodes)} episodes")
        return feed

    @abstractmethod
    async def _build_feed(self, info: Info, config: FeedConfig) -> Feed:
        """Fetch feed metadata and episodes for a resolved link"""
        pass

    async def _fetch_json(self, url: str, params: Optional[Dict[str, Any]] = None,
                          headers: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        try:
            return await asyncio.to_thread(get_json, url, params, headers)
        except requests.RequestException as e:
            raise FeedBuildError(f"{self.provider.value} request to {url} failed: {e}") from e

    def _new_feed(self, info: Info, config: FeedConfig, **fields) -> Feed:
        return Feed(
            id=config.id,
            item_id=info.item_id,
            provider=info.provider,
            link_type=info.link_type,
            page_size=config.page_size,
            format=config.format,
            quality=config.quality,
            **fields,
        )
