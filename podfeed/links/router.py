"""
Link routing for podfeed

Normalizes a raw link, matches its host against the registered platform
parsers in priority order, and delegates to the first match.
"""

import re
from typing import Optional, Sequence
from urllib.parse import SplitResult, urlsplit

from .base import Info, LinkParser, Provider
from .bilibili import BilibiliLinkParser
from .soundcloud import SoundCloudLinkParser
from .twitch import TwitchLinkParser
from .vimeo import VimeoLinkParser
from .youtube import YouTubeLinkParser
from ..core.exceptions import InvalidURLError, LinkError, UnsupportedHostError
from ..core.logger import get_logger

logger = get_logger(__name__)

_SCHEME_RE = re.compile(r'^https?://', re.IGNORECASE)
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")

# Priority order: the first parser whose domain matches the host wins.
PARSERS: Sequence[LinkParser] = (
    BilibiliLinkParser(),
    YouTubeLinkParser(),
    VimeoLinkParser(),
    SoundCloudLinkParser(),
    TwitchLinkParser(),
)


def _check_parsers(parsers: Sequence[LinkParser]) -> None:
    missing = set(Provider) - {parser.provider for parser in parsers}
    if missing:
        names = ", ".join(sorted(provider.value for provider in missing))
        raise RuntimeError(f"No link parser registered for: {names}")


_check_parsers(PARSERS)


def normalize_url(link: str) -> SplitResult:
    """
    Coerce a raw link into a structured URL

    Args:
        link: User supplied link, with or without a scheme

    Returns:
        SplitResult: Parsed URL

    Raises:
        InvalidURLError: If the link is empty, not a string, contains control
            characters or cannot be parsed
    """
    if not isinstance(link, str):
        raise InvalidURLError("link must be a string", link=link)

    normalized = link.strip()
    if not normalized:
        raise InvalidURLError("empty link", link=link)
    if _CONTROL_RE.search(normalized):
        raise InvalidURLError("link contains control characters", link=link)

    if not _SCHEME_RE.match(normalized):
        normalized = "https://" + normalized

    try:
        parsed = urlsplit(normalized)
    except ValueError as e:
        raise InvalidURLError(f"failed to parse url ({e})", link=link) from e

    if not parsed.hostname:
        raise InvalidURLError("url has no host", link=link)

    return parsed


def get_parser(parsed: SplitResult) -> Optional[LinkParser]:
    """Return the highest priority parser owning the URL's host"""
    for parser in PARSERS:
        if parser.matches_host(parsed.hostname):
            return parser
    return None


def parse_url(link: str) -> Info:
    """
    Resolve a link into a resource descriptor

    Args:
        link: User supplied link to a supported platform

    Returns:
        Info: Provider, link type and identifier

    Raises:
        LinkError: InvalidURLError, UnsupportedHostError, or a parser
            specific failure; the error carries the original link
    """
    parsed = normalize_url(link)

    parser = get_parser(parsed)
    if parser is None:
        raise UnsupportedHostError("unsupported url host", link=link, segment=parsed.hostname)

    try:
        link_type, item_id = parser.parse(parsed)
    except LinkError as e:
        if e.link is None:
            e.link = link
        raise

    info = Info(provider=parser.provider, link_type=link_type, item_id=item_id)
    logger.debug(f"Resolved {link} to {info.provider.value}/{info.link_type.value}/{info.item_id}")
    return info
