"""
YouTube feed builder

Uses the YouTube Data API v3 to resolve channels, users, handles and
playlists into an uploads playlist, pages through its items, and optionally
resolves a playable stream for each episode through the Downloader.
"""

import asyncio
from typing import Any, Dict, List, Optional

from .base import Builder, Downloader, Episode, Feed, FeedConfig
from ..core.exceptions import BuilderConstructionError, FeedBuildError
from ..core.logger import get_logger
from ..links import Info, LinkType, Provider
from ..utils.common import parse_timestamp

logger = get_logger(__name__)

API_URL = "https://www.googleapis.com/youtube/v3"
MAX_RESULTS = 50

_CHANNEL_LOOKUP = {
    LinkType.CHANNEL: "id",
    LinkType.USER: "forUsername",
    LinkType.HANDLE: "forHandle",
}


def _best_thumbnail(thumbnails: Optional[Dict[str, Any]]) -> Optional[str]:
    for size in ("maxres", "standard", "high", "medium", "default"):
        thumbnail = (thumbnails or {}).get(size)
        if thumbnail and thumbnail.get("url"):
            return thumbnail["url"]
    return None


def item_url(info: Info) -> str:
    """Canonical page URL of a YouTube resource"""
    if info.link_type == LinkType.PLAYLIST:
        return f"https://www.youtube.com/playlist?list={info.item_id}"
    if info.link_type == LinkType.HANDLE:
        return f"https://www.youtube.com/@{info.item_id}"
    return f"https://www.youtube.com/{info.link_type.value}/{info.item_id}"


class YouTubeBuilder(Builder):
    """Feed builder for YouTube playlists, channels, users and handles"""

    provider = Provider.YOUTUBE

    def __init__(self, key: str, downloader: Optional[Downloader] = None):
        self.key = key
        self.downloader = downloader

    @classmethod
    async def create(cls, key: str = "", downloader: Optional[Downloader] = None) -> "YouTubeBuilder":
        if not key:
            raise BuilderConstructionError("empty YouTube API key", provider=cls.provider)
        return cls(key, downloader)

    async def _api(self, resource: str, **params) -> Dict[str, Any]:
        params["key"] = self.key
        return await self._fetch_json(f"{API_URL}/{resource}", params=params)

    async def _build_feed(self, info: Info, config: FeedConfig) -> Feed:
        if info.link_type == LinkType.PLAYLIST:
            playlist_id = info.item_id
            snippet = await self._first_item("playlists", info, part="snippet", id=info.item_id)
            author = snippet.get("channelTitle")
        else:
            value = "@" + info.item_id if info.link_type == LinkType.HANDLE else info.item_id
            channel = await self._first_item("channels", info, full=True,
                                             part="snippet,contentDetails",
                                             **{_CHANNEL_LOOKUP[info.link_type]: value})
            snippet = channel.get("snippet", {})
            author = snippet.get("title")
            playlist_id = channel.get("contentDetails", {}).get("relatedPlaylists", {}).get("uploads")
            if not playlist_id:
                raise FeedBuildError(f"YouTube channel {info.item_id} has no uploads playlist")

        feed = self._new_feed(
            info,
            config,
            title=snippet.get("title") or info.item_id,
            description=snippet.get("description"),
            author=author,
            cover_art=_best_thumbnail(snippet.get("thumbnails")),
            item_url=item_url(info),
        )
        feed.episodes = await self._list_episodes(playlist_id, config.page_size)

        if config.resolve_streams:
            await self._resolve_streams(feed.episodes, config)

        return feed

    async def _first_item(self, resource: str, info: Info, full: bool = False, **params) -> Dict[str, Any]:
        data = await self._api(resource, **params)
        items = data.get("items") or []
        if not items:
            raise FeedBuildError(f"YouTube {info.link_type.value} {info.item_id} not found")
        return items[0] if full else items[0].get("snippet", {})

    async def _list_episodes(self, playlist_id: str, page_size: int) -> List[Episode]:
        episodes: List[Episode] = []
        page_token = None

        while len(episodes) < page_size:
            params = {
                "part": "snippet",
                "playlistId": playlist_id,
                "maxResults": min(MAX_RESULTS, page_size - len(episodes)),
            }
            if page_token:
                params["pageToken"] = page_token

            data = await self._api("playlistItems", **params)
            for item in data.get("items") or []:
                snippet = item.get("snippet", {})
                video_id = (snippet.get("resourceId") or {}).get("videoId")
                if not video_id:
                    continue
                episodes.append(Episode(
                    id=video_id,
                    title=snippet.get("title", video_id),
                    description=snippet.get("description"),
                    pub_date=parse_timestamp(snippet.get("publishedAt")),
                    thumbnail=_best_thumbnail(snippet.get("thumbnails")),
                    video_url=f"https://www.youtube.com/watch?v={video_id}",
                ))

            page_token = data.get("nextPageToken")
            if not page_token:
                break

        return episodes[:page_size]

    async def _resolve_streams(self, episodes: List[Episode], config: FeedConfig) -> None:
        if self.downloader is None:
            raise FeedBuildError("Stream resolution requested but no downloader configured")

        urls = await asyncio.gather(*(
            self.downloader.resolve_stream(episode.video_url, config.format, config.quality)
            for episode in episodes
        ))
        for episode, url in zip(episodes, urls):
            episode.media_url = url
