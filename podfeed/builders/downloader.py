"""
yt-dlp backed media resolution for podfeed

Provides the YtDlpDownloader used by the YouTube builder to resolve episode
streams, and the flat playlist extraction used by builders whose platforms
have no public API.
"""

import asyncio
from typing import Any, Dict, List, Optional

import yt_dlp
from yt_dlp.utils import DownloadError

from .base import Downloader, Episode, Format, Quality
from ..core.config import CONFIG
from ..core.exceptions import FeedBuildError
from ..core.logger import get_logger
from ..utils.common import from_unix

logger = get_logger(__name__)


def _base_options() -> Dict[str, Any]:
    return {
        'quiet': CONFIG['download']['quiet'],
        'no_warnings': CONFIG['download']['no_warnings'],
        'socket_timeout': CONFIG['download']['socket_timeout'],
        'http_headers': CONFIG['download']['http_headers'],
        'skip_download': True,
    }


def format_selector(format: Format, quality: Quality) -> str:
    """Map a feed format and quality onto a yt-dlp format selector"""
    return CONFIG['download'][f"{format.value}_format_{quality.value}"]


async def extract_flat_listing(url: str, limit: int) -> Dict[str, Any]:
    """
    List a playlist-like page without resolving each entry

    Args:
        url: Playlist, set, collection or user page URL
        limit: Maximum number of entries to list

    Returns:
        dict: yt-dlp info dict with a materialized 'entries' list

    Raises:
        FeedBuildError: If yt-dlp fails or returns nothing
    """
    ydl_opts = _base_options()
    ydl_opts.update({
        'extract_flat': 'in_playlist',
        'playlistend': limit,
    })

    def extract_info() -> Optional[Dict[str, Any]]:
        with yt_dlp.YoutubeDL(ydl_opts) as ydl:
            return ydl.extract_info(url, download=False)

    try:
        info = await asyncio.to_thread(extract_info)
    except DownloadError as e:
        raise FeedBuildError(f"Failed to list {url}: {e}") from e

    if not info:
        raise FeedBuildError(f"No playlist information returned for {url}")

    info['entries'] = [entry for entry in (info.get('entries') or []) if entry][:limit]
    logger.debug(f"Listed {len(info['entries'])} entries from {url}")
    return info


class YtDlpDownloader(Downloader):
    """Downloader that resolves direct stream URLs through yt-dlp"""

    async def resolve_stream(self, url: str, format: Format, quality: Quality) -> str:
        ydl_opts = _base_options()
        ydl_opts['format'] = format_selector(format, quality)

        def extract_info() -> Optional[Dict[str, Any]]:
            with yt_dlp.YoutubeDL(ydl_opts) as ydl:
                return ydl.extract_info(url, download=False)

        try:
            info = await asyncio.to_thread(extract_info)
        except DownloadError as e:
            raise FeedBuildError(f"Failed to resolve stream for {url}: {e}") from e

        stream_url = (info or {}).get('url')
        if not stream_url:
            # Merged formats report their parts instead of a single url
            for requested in (info or {}).get('requested_formats') or []:
                if requested.get('url'):
                    stream_url = requested['url']
                    break

        if not stream_url:
            raise FeedBuildError(f"No {format.value} stream found for {url}")

        logger.debug(f"Resolved {format.value}/{quality.value} stream for {url}")
        return stream_url


def episodes_from_listing(listing: Dict[str, Any]) -> List[Episode]:
    """Convert flat playlist entries into feed episodes"""
    episodes = []
    for entry in listing.get('entries') or []:
        entry_id = entry.get('id')
        video_url = entry.get('webpage_url') or entry.get('url')
        if not entry_id or not video_url:
            continue
        thumbnails = entry.get('thumbnails') or []
        episodes.append(Episode(
            id=str(entry_id),
            title=entry.get('title') or str(entry_id),
            description=entry.get('description'),
            duration=int(entry['duration']) if entry.get('duration') else None,
            pub_date=from_unix(entry.get('timestamp')),
            thumbnail=entry.get('thumbnail') or (thumbnails[-1].get('url') if thumbnails else None),
            video_url=video_url,
        ))
    return episodes
