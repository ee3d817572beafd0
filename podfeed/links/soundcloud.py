"""
SoundCloud link parser

    - https://soundcloud.com/user/sets/example-set
"""

from typing import Tuple
from urllib.parse import SplitResult

from .base import LinkParser, LinkType, Provider, split_path
from ..core.exceptions import MissingIdentifierError, UnsupportedLinkFormatError


class SoundCloudLinkParser(LinkParser):
    """Link parser for soundcloud.com"""

    provider = Provider.SOUNDCLOUD
    domain = "soundcloud.com"

    def parse(self, parsed: SplitResult) -> Tuple[LinkType, str]:
        parts = split_path(parsed)
        if len(parts) <= 3:
            raise UnsupportedLinkFormatError("invalid soundcloud link path")

        if parts[2] != "sets":
            raise UnsupportedLinkFormatError("invalid soundcloud url, missing sets", segment=parts[2])

        if not parts[3]:
            raise MissingIdentifierError("invalid soundcloud set link, missing name", segment="sets")

        return LinkType.PLAYLIST, parts[3]
