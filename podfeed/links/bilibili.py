"""
Bilibili link parser

Only user spaces are supported:
    - https://space.bilibili.com/{mid}
    - https://space.bilibili.com/{mid}/channel/collectiondetail?sid={sid}

Collections are identified by "{mid}:{sid}" since a sid is only unique
within its owner's space.
"""

from typing import Tuple
from urllib.parse import SplitResult

from .base import LinkParser, LinkType, Provider, query_param, split_path
from ..core.exceptions import MissingIdentifierError, UnsupportedLinkFormatError


class BilibiliLinkParser(LinkParser):
    """Link parser for space.bilibili.com"""

    provider = Provider.BILIBILI
    domain = "bilibili.com"

    def parse(self, parsed: SplitResult) -> Tuple[LinkType, str]:
        subdomain = (parsed.hostname or "").split(".")[0]
        if subdomain != "space":
            raise UnsupportedLinkFormatError("bilibili link must point at space.bilibili.com",
                                             segment=subdomain)

        parts = split_path(parsed)
        if len(parts) <= 1 or not parts[1]:
            raise MissingIdentifierError("invalid bilibili link path, missing user id")

        mid = parts[1]
        if len(parts) == 2:
            return LinkType.USER, mid

        if parts[2] == "channel":
            sid = query_param(parsed, "sid")
            return LinkType.CHANNEL, f"{mid}:{sid}"

        raise UnsupportedLinkFormatError("unsupported bilibili link format", segment=parts[2])
