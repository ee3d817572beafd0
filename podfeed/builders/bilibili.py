"""
Bilibili feed builder

User spaces and collections are listed through yt-dlp. Collections carry
the composite "{mid}:{sid}" identifier produced by the link parser.
"""

from .base import Builder, Feed, FeedConfig
from .downloader import episodes_from_listing, extract_flat_listing
from ..core.exceptions import FeedBuildError
from ..links import Info, LinkType, Provider


def listing_url(info: Info) -> str:
    """Page yt-dlp lists episodes from"""
    if info.link_type == LinkType.CHANNEL:
        mid, _, sid = info.item_id.partition(":")
        if not sid:
            raise FeedBuildError(f"Invalid bilibili collection id: {info.item_id}")
        return f"https://space.bilibili.com/{mid}/channel/collectiondetail?sid={sid}"
    return f"https://space.bilibili.com/{info.item_id}/video"


class BilibiliBuilder(Builder):
    """Feed builder for Bilibili user spaces and collections"""

    provider = Provider.BILIBILI

    async def _build_feed(self, info: Info, config: FeedConfig) -> Feed:
        url = listing_url(info)
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
