"""
Vimeo feed builder

Uses the Vimeo REST API. The access token is validated eagerly when the
builder is created, so a bad token fails at configuration time rather than
at the first refresh.
"""

import asyncio
from typing import Any, Dict, List, Optional

import requests

from .base import Builder, Downloader, Episode, Feed, FeedConfig, get_json
from ..core.exceptions import BuilderConstructionError
from ..core.logger import get_logger
from ..links import Info, LinkType, Provider
from ..utils.common import parse_timestamp

logger = get_logger(__name__)

API_URL = "https://api.vimeo.com"
MAX_PER_PAGE = 100

_COLLECTIONS = {
    LinkType.USER: "users",
    LinkType.CHANNEL: "channels",
    LinkType.GROUP: "groups",
}


def _picture(pictures: Optional[Dict[str, Any]]) -> Optional[str]:
    sizes = (pictures or {}).get("sizes") or []
    return sizes[-1].get("link") if sizes else None


class VimeoBuilder(Builder):
    """Feed builder for Vimeo users, channels and groups"""

    provider = Provider.VIMEO

    def __init__(self, key: str):
        self.headers = {
            "Authorization": f"bearer {key}",
            "Accept": "application/vnd.vimeo.*+json;version=3.4",
        }

    @classmethod
    async def create(cls, key: str = "", downloader: Optional[Downloader] = None) -> "VimeoBuilder":
        if not key:
            raise BuilderConstructionError("empty Vimeo access token", provider=cls.provider)

        builder = cls(key)
        try:
            await asyncio.to_thread(get_json, f"{API_URL}/me", None, builder.headers)
        except requests.RequestException as e:
            raise BuilderConstructionError(f"failed to validate Vimeo access token: {e}",
                                           provider=cls.provider) from e

        logger.debug("Vimeo access token validated")
        return builder

    async def _build_feed(self, info: Info, config: FeedConfig) -> Feed:
        base = f"{API_URL}/{_COLLECTIONS[info.link_type]}/{info.item_id}"
        meta = await self._fetch_json(base, headers=self.headers)

        if info.link_type == LinkType.USER:
            author = meta.get("name")
            description = meta.get("bio")
        else:
            author = (meta.get("user") or {}).get("name")
            description = meta.get("description")

        feed = self._new_feed(
            info,
            config,
            title=meta.get("name") or info.item_id,
            description=description,
            author=author,
            cover_art=_picture(meta.get("pictures")),
            item_url=meta.get("link") or f"https://vimeo.com/{info.item_id}",
        )
        feed.episodes = await self._list_episodes(f"{base}/videos", config.page_size)
        return feed

    async def _list_episodes(self, url: str, page_size: int) -> List[Episode]:
        episodes: List[Episode] = []
        page = 1

        while len(episodes) < page_size:
            params = {"per_page": min(MAX_PER_PAGE, page_size), "page": page}
            data = await self._fetch_json(url, params=params, headers=self.headers)

            for video in data.get("data") or []:
                video_id = (video.get("uri") or "").rsplit("/", 1)[-1]
                if not video_id:
                    continue
                episodes.append(Episode(
                    id=video_id,
                    title=video.get("name") or video_id,
                    description=video.get("description"),
                    duration=video.get("duration"),
                    pub_date=parse_timestamp(video.get("release_time") or video.get("created_time")),
                    thumbnail=_picture(video.get("pictures")),
                    video_url=video.get("link") or f"https://vimeo.com/{video_id}",
                ))

            if not (data.get("paging") or {}).get("next"):
                break
            page += 1

        return episodes[:page_size]
