"""
SoundCloud feed builder

SoundCloud sets are listed through yt-dlp; no credential is needed.
"""

from .base import Builder, Feed, FeedConfig
from .downloader import episodes_from_listing, extract_flat_listing
from ..links import Info, Provider, normalize_url


class SoundCloudBuilder(Builder):
    """Feed builder for SoundCloud sets"""

    provider = Provider.SOUNDCLOUD

    async def _build_feed(self, info: Info, config: FeedConfig) -> Feed:
        # The set name alone does not identify a set, the owner is part of the URL
        url = normalize_url(config.url)._replace(query="", fragment="").geturl()
        listing = await extract_flat_listing(url, config.page_size)

        feed = self._new_feed(
            info,
            config,
            title=listing.get("title") or info.item_id,
            description=listing.get("description"),
            author=listing.get("uploader"),
            cover_art=listing.get("thumbnail"),
            item_url=url,
        )
        feed.episodes = episodes_from_listing(listing)
        return feed
