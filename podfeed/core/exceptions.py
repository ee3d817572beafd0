"""
Exception hierarchy for podfeed

Link errors are deterministic failures over the given input and are never
retried. Construction errors may be transient (network, remote validation)
and are safe for a caller to retry with backoff.
"""

from typing import Optional


class PodfeedError(Exception):
    """Base class for all podfeed errors"""


class LinkError(PodfeedError, ValueError):
    """
    A link could not be resolved into a resource descriptor.

    Attributes:
        link: The link as supplied by the caller
        segment: The offending path segment or query parameter, if known
    """

    def __init__(self, message: str, link: Optional[str] = None, segment: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.link = link
        self.segment = segment

    def __str__(self) -> str:
        text = self.message
        if self.segment is not None:
            text = f"{text} (segment {self.segment!r})"
        if self.link is not None:
            text = f"{text}: {self.link}"
        return text


class InvalidURLError(LinkError):
    """The input cannot be parsed as a URL"""


class UnsupportedHostError(LinkError):
    """The URL host does not belong to any supported platform"""


class UnsupportedLinkFormatError(LinkError):
    """The host matched a platform, but the path has no recognized shape"""


class MissingIdentifierError(LinkError):
    """A recognized path shape is missing its identifier segment"""


class MissingQueryParamError(LinkError):
    """A recognized path shape is missing a required query parameter"""

    def __init__(self, param: str, link: Optional[str] = None):
        super().__init__(f"missing query parameter {param!r}", link=link)
        self.param = param


class UnsupportedProviderError(PodfeedError, ValueError):
    """No builder exists for the given provider value"""

    def __init__(self, provider):
        super().__init__(f"unsupported provider {provider!r}")
        self.provider = provider


class BuilderConstructionError(PodfeedError):
    """A builder could not be constructed (bad credential, network failure)"""

    def __init__(self, message: str, provider=None):
        super().__init__(message)
        self.provider = provider


class FeedBuildError(PodfeedError):
    """A feed could not be built from its configuration"""
