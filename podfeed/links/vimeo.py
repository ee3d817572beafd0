"""
Vimeo link parser

    - https://vimeo.com/groups/{id}
    - https://vimeo.com/channels/{id}
    - https://vimeo.com/{user}
"""

from typing import Tuple
from urllib.parse import SplitResult

from .base import LinkParser, LinkType, Provider, split_path
from ..core.exceptions import MissingIdentifierError

_COLLECTIONS = {
    "groups": LinkType.GROUP,
    "channels": LinkType.CHANNEL,
}


class VimeoLinkParser(LinkParser):
    """Link parser for vimeo.com"""

    provider = Provider.VIMEO
    domain = "vimeo.com"

    def parse(self, parsed: SplitResult) -> Tuple[LinkType, str]:
        parts = split_path(parsed)
        if len(parts) <= 1:
            raise MissingIdentifierError("invalid vimeo link path")

        kind = _COLLECTIONS.get(parts[1])
        if kind is not None:
            if len(parts) <= 2 or not parts[2]:
                raise MissingIdentifierError(f"invalid vimeo {parts[1]} link, missing id",
                                             segment=parts[1])
            return kind, parts[2]

        if not parts[1]:
            raise MissingIdentifierError("invalid vimeo user link, missing id")
        return LinkType.USER, parts[1]
