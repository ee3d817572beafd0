"""
Twitch link parser

    - https://www.twitch.tv/samueletienne
"""

from typing import Tuple
from urllib.parse import SplitResult

from .base import LinkParser, LinkType, Provider, split_path
from ..core.exceptions import MissingIdentifierError, UnsupportedLinkFormatError


class TwitchLinkParser(LinkParser):
    """Link parser for twitch.tv"""

    provider = Provider.TWITCH
    domain = "twitch.tv"

    def parse(self, parsed: SplitResult) -> Tuple[LinkType, str]:
        parts = split_path(parsed)
        if len(parts) != 2:
            raise UnsupportedLinkFormatError("invalid twitch user path", segment=parsed.path)

        if not parts[1]:
            raise MissingIdentifierError("invalid twitch user link, missing id")

        return LinkType.USER, parts[1]
