"""
YouTube link parser

Recognized shapes, checked in this order:
    - https://www.youtube.com/playlist?list=PLCB9F975ECF01953C
    - https://www.youtube.com/watch?v=rbCbho7aLYw&list=PLMpEfaKcGjpWEgNtdnsvLX6LzQL0UC0EM
    - https://www.youtube.com/channel/UC5XPnUk8Vvv_pWslhwom6Og[/videos]
    - https://www.youtube.com/user/fxigr1
    - https://www.youtube.com/@username[/videos]
"""

from typing import Tuple
from urllib.parse import SplitResult

from .base import LinkParser, LinkType, Provider, query_param, split_path
from ..core.exceptions import MissingIdentifierError, UnsupportedLinkFormatError


class YouTubeLinkParser(LinkParser):
    """Link parser for youtube.com"""

    provider = Provider.YOUTUBE
    domain = "youtube.com"

    def parse(self, parsed: SplitResult) -> Tuple[LinkType, str]:
        parts = split_path(parsed)
        first = parts[1] if len(parts) > 1 else ""

        if first in ("playlist", "watch"):
            return LinkType.PLAYLIST, query_param(parsed, "list")

        if first == "channel":
            return LinkType.CHANNEL, self._second_segment(parts, "channel")

        if first == "user":
            return LinkType.USER, self._second_segment(parts, "user")

        if first.startswith("@"):
            handle = first[1:]
            if not handle:
                raise MissingIdentifierError("empty youtube handle", segment=first)
            return LinkType.HANDLE, handle

        raise UnsupportedLinkFormatError("unsupported youtube link format", segment=first or None)

    @staticmethod
    def _second_segment(parts, kind: str) -> str:
        if len(parts) <= 2 or not parts[2]:
            raise MissingIdentifierError(f"invalid youtube {kind} link, missing id", segment=kind)
        return parts[2]
