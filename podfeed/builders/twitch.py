"""
Twitch feed builder

Uses the Helix API with an app access token obtained through the client
credentials flow. The API key must be given as "CLIENT_ID:CLIENT_SECRET".
"""

import asyncio
from typing import Optional

import requests

from .base import Builder, Downloader, Episode, Feed, FeedConfig, post_json
from ..core.exceptions import BuilderConstructionError, FeedBuildError
from ..core.logger import get_logger
from ..links import Info, Provider
from ..utils.common import parse_timestamp, parse_twitch_duration

logger = get_logger(__name__)

TOKEN_URL = "https://id.twitch.tv/oauth2/token"
API_URL = "https://api.twitch.tv/helix"
MAX_FIRST = 100


class TwitchBuilder(Builder):
    """Feed builder for Twitch user archives"""

    provider = Provider.TWITCH

    def __init__(self, client_id: str, access_token: str):
        self.headers = {
            "Client-ID": client_id,
            "Authorization": f"Bearer {access_token}",
        }

    @classmethod
    async def create(cls, key: str = "", downloader: Optional[Downloader] = None) -> "TwitchBuilder":
        parts = key.split(":")
        if len(parts) != 2 or not all(parts):
            raise BuilderConstructionError('invalid twitch key, need to be "CLIENT_ID:CLIENT_SECRET"',
                                           provider=cls.provider)

        client_id, client_secret = parts
        params = {
            "client_id": client_id,
            "client_secret": client_secret,
            "grant_type": "client_credentials",
        }
        try:
            token = await asyncio.to_thread(post_json, TOKEN_URL, params)
        except requests.RequestException as e:
            raise BuilderConstructionError(f"failed to get twitch app access token: {e}",
                                           provider=cls.provider) from e

        access_token = token.get("access_token")
        if not access_token:
            raise BuilderConstructionError("twitch token response has no access_token",
                                           provider=cls.provider)

        return cls(client_id, access_token)

    async def _build_feed(self, info: Info, config: FeedConfig) -> Feed:
        users = await self._fetch_json(f"{API_URL}/users", params={"login": info.item_id},
                                       headers=self.headers)
        if not users.get("data"):
            raise FeedBuildError(f"Twitch user {info.item_id} not found")
        user = users["data"][0]

        feed = self._new_feed(
            info,
            config,
            title=user.get("display_name") or info.item_id,
            description=user.get("description"),
            author=user.get("display_name"),
            cover_art=user.get("profile_image_url"),
            item_url=f"https://www.twitch.tv/{info.item_id}",
        )

        params = {
            "user_id": user["id"],
            "type": "archive",
            "first": min(MAX_FIRST, config.page_size),
        }
        videos = await self._fetch_json(f"{API_URL}/videos", params=params, headers=self.headers)

        for video in videos.get("data") or []:
            thumbnail = video.get("thumbnail_url") or None
            if thumbnail:
                thumbnail = thumbnail.replace("%{width}", "640").replace("%{height}", "360")
            feed.episodes.append(Episode(
                id=video["id"],
                title=video.get("title") or video["id"],
                description=video.get("description"),
                duration=parse_twitch_duration(video.get("duration")),
                pub_date=parse_timestamp(video.get("published_at") or video.get("created_at")),
                thumbnail=thumbnail,
                video_url=video.get("url") or f"https://www.twitch.tv/videos/{video['id']}",
            ))

        return feed
