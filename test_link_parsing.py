import dataclasses

import pytest

from podfeed.core.exceptions import (
    InvalidURLError,
    LinkError,
    MissingIdentifierError,
    MissingQueryParamError,
    UnsupportedHostError,
    UnsupportedLinkFormatError,
)
from podfeed.links import Info, LinkType, PARSERS, Provider, normalize_url, parse_url
from podfeed.links.router import _check_parsers


@pytest.mark.parametrize("link, expected", [
    # YouTube
    ("youtube.com/playlist?list=PL123", (Provider.YOUTUBE, LinkType.PLAYLIST, "PL123")),
    ("https://www.youtube.com/playlist?list=PLCB9F975ECF01953C",
     (Provider.YOUTUBE, LinkType.PLAYLIST, "PLCB9F975ECF01953C")),
    ("https://www.youtube.com/watch?v=rbCbho7aLYw&list=PLMpEfaKcGjpWEgNtdnsvLX6LzQL0UC0EM",
     (Provider.YOUTUBE, LinkType.PLAYLIST, "PLMpEfaKcGjpWEgNtdnsvLX6LzQL0UC0EM")),
    ("https://www.youtube.com/channel/UC5XPnUk8Vvv_pWslhwom6Og",
     (Provider.YOUTUBE, LinkType.CHANNEL, "UC5XPnUk8Vvv_pWslhwom6Og")),
    ("https://www.youtube.com/channel/UCrlakW-ewUT8sOod6Wmzyow/videos",
     (Provider.YOUTUBE, LinkType.CHANNEL, "UCrlakW-ewUT8sOod6Wmzyow")),
    ("https://www.youtube.com/user/fxigr1", (Provider.YOUTUBE, LinkType.USER, "fxigr1")),
    ("https://www.youtube.com/@someuser", (Provider.YOUTUBE, LinkType.HANDLE, "someuser")),
    ("https://m.youtube.com/@someuser/videos", (Provider.YOUTUBE, LinkType.HANDLE, "someuser")),
    ("HTTPS://WWW.YOUTUBE.COM/@someuser", (Provider.YOUTUBE, LinkType.HANDLE, "someuser")),
    ("  http://youtube.com/user/fxigr1  ", (Provider.YOUTUBE, LinkType.USER, "fxigr1")),
    # Bilibili
    ("https://space.bilibili.com/123", (Provider.BILIBILI, LinkType.USER, "123")),
    ("https://space.bilibili.com/123/channel/collectiondetail?sid=456",
     (Provider.BILIBILI, LinkType.CHANNEL, "123:456")),
    ("space.bilibili.com/123/channel/collectiondetail?sid=456&ctype=0",
     (Provider.BILIBILI, LinkType.CHANNEL, "123:456")),
    # Vimeo
    ("https://vimeo.com/groups/abc", (Provider.VIMEO, LinkType.GROUP, "abc")),
    ("https://vimeo.com/channels/staffpicks", (Provider.VIMEO, LinkType.CHANNEL, "staffpicks")),
    ("https://vimeo.com/awhitelabelproduct", (Provider.VIMEO, LinkType.USER, "awhitelabelproduct")),
    # SoundCloud
    ("https://soundcloud.com/user/sets/example-set", (Provider.SOUNDCLOUD, LinkType.PLAYLIST, "example-set")),
    # Twitch
    ("https://www.twitch.tv/samueletienne", (Provider.TWITCH, LinkType.USER, "samueletienne")),
    ("twitch.tv/foo", (Provider.TWITCH, LinkType.USER, "foo")),
])
def test_parse_url(link, expected):
    provider, link_type, item_id = expected
    assert parse_url(link) == Info(provider=provider, link_type=link_type, item_id=item_id)


@pytest.mark.parametrize("link, error", [
    # YouTube
    ("https://www.youtube.com/watch?v=rbCbho7aLYw", MissingQueryParamError),
    ("https://www.youtube.com/playlist?list=", MissingQueryParamError),
    ("https://www.youtube.com/channel", MissingIdentifierError),
    ("https://www.youtube.com/channel/", MissingIdentifierError),
    ("https://www.youtube.com/user", MissingIdentifierError),
    ("https://www.youtube.com/user//videos", MissingIdentifierError),
    ("https://www.youtube.com/@", MissingIdentifierError),
    ("https://www.youtube.com/results?search_query=podcasts", UnsupportedLinkFormatError),
    ("https://www.youtube.com", UnsupportedLinkFormatError),
    ("https://www.youtube.com/channels/UC123", UnsupportedLinkFormatError),
    # Bilibili
    ("https://www.bilibili.com/video/BV1C62PBeEha", UnsupportedLinkFormatError),
    ("https://space.bilibili.com", MissingIdentifierError),
    ("https://space.bilibili.com/", MissingIdentifierError),
    ("https://space.bilibili.com/123/channel/collectiondetail", MissingQueryParamError),
    ("https://space.bilibili.com/123/favlist", UnsupportedLinkFormatError),
    # Vimeo
    ("https://vimeo.com", MissingIdentifierError),
    ("https://vimeo.com/", MissingIdentifierError),
    ("https://vimeo.com/groups", MissingIdentifierError),
    ("https://vimeo.com/channels/", MissingIdentifierError),
    # SoundCloud
    ("https://soundcloud.com/user/example-set", UnsupportedLinkFormatError),
    ("https://soundcloud.com/user/likes/example", UnsupportedLinkFormatError),
    ("https://soundcloud.com/user/sets/", MissingIdentifierError),
    # Twitch
    ("https://twitch.tv/foo/bar", UnsupportedLinkFormatError),
    ("https://twitch.tv", UnsupportedLinkFormatError),
    ("https://twitch.tv/", MissingIdentifierError),
])
def test_parse_url_errors(link, error):
    with pytest.raises(error) as excinfo:
        parse_url(link)

    assert excinfo.value.link == link
    assert link in str(excinfo.value)


@pytest.mark.parametrize("link", [
    "",
    "   ",
    "https://",
    "http://[::1",
])
def test_invalid_url(link):
    with pytest.raises(InvalidURLError):
        parse_url(link)


@pytest.mark.parametrize("link", [
    b"youtube.com/@someuser",
    123,
    None,
])
def test_non_string_link(link):
    with pytest.raises(InvalidURLError) as excinfo:
        parse_url(link)
    assert excinfo.value.message == "link must be a string"


@pytest.mark.parametrize("link", [
    "https://youtube.com/@some\tuser",
    "https://youtube.com/playlist?list=PL\n123",
    "vimeo.com/groups/ab\rc",
    "https://www.twitch.tv/\x00user",
    "https://soundcloud.com/artist/sets/\x7fset",
])
def test_control_characters_are_rejected(link):
    with pytest.raises(InvalidURLError) as excinfo:
        parse_url(link)
    assert excinfo.value.message == "link contains control characters"
    assert excinfo.value.link == link


def test_surrounding_whitespace_is_stripped():
    info = parse_url("\t https://www.youtube.com/@someuser \n")
    assert info.item_id == "someuser"


@pytest.mark.parametrize("link", [
    "hello world",
    "https://example.com/playlist?list=PL123",
    "https://evil-youtube.com/@someuser",
    "https://youtube.com.evil.net/@someuser",
    "https://notvimeo.com/groups/abc",
    "https://youtu.be/dQw4w9WgXcQ",
])
def test_unsupported_host(link):
    with pytest.raises(UnsupportedHostError) as excinfo:
        parse_url(link)
    assert excinfo.value.link == link


def test_missing_query_param_names_param():
    with pytest.raises(MissingQueryParamError) as excinfo:
        parse_url("https://space.bilibili.com/123/channel/collectiondetail")
    assert excinfo.value.param == "sid"


def test_link_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_url("https://twitch.tv/foo/bar")


@pytest.mark.parametrize("link", [
    "youtube.com/playlist?list=PL123",
    "https://vimeo.com/groups/abc",
    "https://twitch.tv/foo/bar",
    "nonsense",
])
def test_parse_url_is_pure(link):
    def outcome():
        try:
            return parse_url(link)
        except LinkError as e:
            return type(e), str(e)

    assert outcome() == outcome()


def test_info_is_immutable():
    info = parse_url("https://vimeo.com/groups/abc")
    with pytest.raises(dataclasses.FrozenInstanceError):
        info.item_id = "other"


def test_every_provider_and_link_type_pair_is_reachable():
    # One canonical link per descriptor shape the parsers can produce
    links = [
        "https://www.youtube.com/playlist?list=PL1",
        "https://www.youtube.com/channel/UC1",
        "https://www.youtube.com/user/u1",
        "https://www.youtube.com/@h1",
        "https://space.bilibili.com/1",
        "https://space.bilibili.com/1/channel/collectiondetail?sid=2",
        "https://vimeo.com/groups/g1",
        "https://vimeo.com/channels/c1",
        "https://vimeo.com/u1",
        "https://soundcloud.com/u1/sets/s1",
        "https://www.twitch.tv/u1",
    ]
    resolved = {(info.provider, info.link_type) for info in map(parse_url, links)}

    assert {provider for provider, _ in resolved} == set(Provider)
    assert len(resolved) == len(links)


def test_parsers_are_registered_in_priority_order():
    assert [parser.provider for parser in PARSERS] == [
        Provider.BILIBILI,
        Provider.YOUTUBE,
        Provider.VIMEO,
        Provider.SOUNDCLOUD,
        Provider.TWITCH,
    ]


def test_parser_registry_must_cover_every_provider():
    with pytest.raises(RuntimeError, match="twitch"):
        _check_parsers(PARSERS[:-1])


def test_normalize_url_adds_scheme():
    parsed = normalize_url("vimeo.com/groups/abc")
    assert parsed.scheme == "https"
    assert parsed.hostname == "vimeo.com"
    assert parsed.path == "/groups/abc"


def test_normalize_url_keeps_http_scheme():
    assert normalize_url("http://vimeo.com/abc").scheme == "http"
