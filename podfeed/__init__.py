"""
podfeed - Turn video platform links into podcast feeds

Resolves links to YouTube, Vimeo, SoundCloud, Twitch and Bilibili into
resource descriptors, and builds podcast-style feeds from them through
provider specific builders.
"""

__version__ = "1.0.0"
__author__ = "podfeed Team"
__description__ = "Resolve video platform links and build podcast feeds"

from .core.exceptions import (
    BuilderConstructionError,
    FeedBuildError,
    LinkError,
    PodfeedError,
    UnsupportedProviderError,
)
from .links import Info, LinkType, Provider, parse_url
from .builders import Builder, Downloader, Feed, FeedConfig, YtDlpDownloader, new_builder

__all__ = [
    "Builder",
    "BuilderConstructionError",
    "Downloader",
    "Feed",
    "FeedBuildError",
    "FeedConfig",
    "Info",
    "LinkError",
    "LinkType",
    "PodfeedError",
    "Provider",
    "UnsupportedProviderError",
    "YtDlpDownloader",
    "new_builder",
    "parse_url",
    "__version__",
]
