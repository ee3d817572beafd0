"""
Builder factory

Maps every Provider onto its builder class. The table is checked on import,
so a provider without a builder fails loudly instead of at the first feed.
"""

import asyncio
from typing import Dict, Optional, Type, Union

from .base import Builder, Downloader
from .bilibili import BilibiliBuilder
from .soundcloud import SoundCloudBuilder
from .twitch import TwitchBuilder
from .vimeo import VimeoBuilder
from .youtube import YouTubeBuilder
from ..core.config import CONFIG
from ..core.exceptions import BuilderConstructionError, UnsupportedProviderError
from ..core.logger import get_logger
from ..links import Provider

logger = get_logger(__name__)

BUILDERS: Dict[Provider, Type[Builder]] = {
    Provider.YOUTUBE: YouTubeBuilder,
    Provider.VIMEO: VimeoBuilder,
    Provider.SOUNDCLOUD: SoundCloudBuilder,
    Provider.TWITCH: TwitchBuilder,
    Provider.BILIBILI: BilibiliBuilder,
}

_missing = set(Provider) - set(BUILDERS)
if _missing:
    raise RuntimeError(f"No builder registered for: {', '.join(sorted(p.value for p in _missing))}")


def _resolve_provider(provider: Union[Provider, str]) -> Provider:
    try:
        return Provider(provider)
    except ValueError:
        raise UnsupportedProviderError(provider) from None


async def new_builder(
    provider: Union[Provider, str],
    key: str = "",
    downloader: Optional[Downloader] = None,
    timeout: Optional[float] = None,
) -> Builder:
    """
    Create the feed builder for a provider

    Args:
        provider: Provider enum member or its string value
        key: Platform API credential, may be empty for providers that need none
        downloader: Stream resolver, used by the YouTube builder only
        timeout: Seconds allowed for construction, defaults to
            CONFIG['builder']['timeout']

    Returns:
        Builder: Provider specific builder

    Raises:
        UnsupportedProviderError: If provider is not a known Provider value
        BuilderConstructionError: If construction fails or times out
    """
    resolved = _resolve_provider(provider)
    builder_cls = BUILDERS[resolved]

    if timeout is None:
        timeout = CONFIG['builder']['timeout']

    logger.debug(f"Creating {resolved.value} builder")
    try:
        builder = await asyncio.wait_for(builder_cls.create(key=key, downloader=downloader), timeout)
    except asyncio.TimeoutError as e:
        raise BuilderConstructionError(
            f"{resolved.value} builder construction timed out after {timeout}s",
            provider=resolved,
        ) from e

    logger.info(f"Created {resolved.value} builder")
    return builder
