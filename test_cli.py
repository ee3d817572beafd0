import json

from podfeed import cli
from podfeed.builders import Builder, Episode, FeedConfig
from podfeed.links import Provider


def test_parse_command(capsys):
    assert cli.main(["parse", "https://space.bilibili.com/123/channel/collectiondetail?sid=456"]) == 0

    output = json.loads(capsys.readouterr().out)
    assert output == {"provider": "bilibili", "link_type": "channel", "item_id": "123:456"}


def test_parse_command_rejects_unknown_host(capsys):
    assert cli.main(["parse", "https://example.com/watch?v=1"]) == 1
    assert "unsupported url host" in capsys.readouterr().err


class StubBuilder(Builder):
    provider = Provider.VIMEO

    def __init__(self):
        self.configs = []

    async def _build_feed(self, info, config: FeedConfig):
        self.configs.append(config)
        feed = self._new_feed(info, config, title="ABC Group", item_url="https://vimeo.com/groups/abc")
        feed.episodes = [Episode(id="1", title="First", video_url="https://vimeo.com/1")]
        return feed


def test_build_command(monkeypatch, capsys):
    builder = StubBuilder()
    created = []

    async def fake_new_builder(provider, key, downloader, timeout=None):
        created.append((provider, key))
        return builder

    monkeypatch.setattr(cli, "new_builder", fake_new_builder)
    monkeypatch.setattr(cli, "get_api_key", lambda provider: "vimeo-token")

    code = cli.main(["build", "vimeo.com/groups/abc", "--page-size", "5", "--format", "video"])

    assert code == 0
    assert created == [(Provider.VIMEO, "vimeo-token")]
    config = builder.configs[0]
    assert config.id == "abc"
    assert config.page_size == 5
    assert config.format.value == "video"

    output = json.loads(capsys.readouterr().out)
    assert output["title"] == "ABC Group"
    assert output["episodes"] == [{
        "id": "1",
        "title": "First",
        "video_url": "https://vimeo.com/1",
        "duration": None,
        "pub_date": None,
        "media_url": None,
    }]


def test_build_command_reports_link_errors(capsys):
    assert cli.main(["build", "https://twitch.tv/foo/bar"]) == 1
    assert "invalid twitch user path" in capsys.readouterr().err
