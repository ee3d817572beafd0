"""
Feed builders for podfeed.

A builder turns a FeedConfig into a Feed for one provider. Builders are
created through new_builder(), which dispatches over the closed set of
providers and validates credentials where a provider needs them.

Exported Components:
    new_builder: coroutine
        Creates the builder for a provider, honoring a construction timeout.
    Builder: class
        Base class exposing `await builder.build(config)`.
    Downloader / YtDlpDownloader: class
        Stream resolution capability and its yt-dlp implementation.
    FeedConfig, Feed, Episode, Format, Quality:
        Feed data model.

Example:
    >>> from podfeed.builders import FeedConfig, YtDlpDownloader, new_builder
    >>>
    >>> builder = await new_builder("youtube", api_key, YtDlpDownloader())
    >>> feed = await builder.build(FeedConfig(id="talks", url="https://youtube.com/@someuser"))
    >>> print(feed.title, len(feed.episodes))
"""

from .base import Builder, Downloader, Episode, Feed, FeedConfig, Format, Quality
from .downloader import YtDlpDownloader
from .factory import BUILDERS, new_builder

__all__ = [
    "BUILDERS",
    "Builder",
    "Downloader",
    "Episode",
    "Feed",
    "FeedConfig",
    "Format",
    "Quality",
    "YtDlpDownloader",
    "new_builder",
]
