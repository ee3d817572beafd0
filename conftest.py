import pytest
import requests


class FakeResponse:
    def __init__(self, payload=None, status_code=200):
        self.payload = payload if payload is not None else {}
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error", response=self)

    def json(self):
        return self.payload


class FakeHTTP:
    """
    Routes fake GET/POST answers by URL suffix and records every call.

    A route answer may be a callable taking the request params, for routes
    shared by concurrent requests.
    """

    def __init__(self):
        self.routes = {}
        self.calls = []

    def route(self, suffix, *responses):
        self.routes[suffix] = list(responses)

    def _answer(self, method, url, params=None, headers=None, timeout=None):
        self.calls.append({"method": method, "url": url, "params": dict(params or {}),
                           "headers": dict(headers or {})})
        for suffix in sorted(self.routes, key=len, reverse=True):
            if url.endswith(suffix):
                responses = self.routes[suffix]
                response = responses.pop(0) if len(responses) > 1 else responses[0]
                if callable(response):
                    response = response(dict(params or {}))
                if isinstance(response, Exception):
                    raise response
                if isinstance(response, FakeResponse):
                    return response
                return FakeResponse(response)
        return FakeResponse({"error": "not found"}, status_code=404)

    def get(self, url, params=None, headers=None, timeout=None):
        return self._answer("GET", url, params, headers, timeout)

    def post(self, url, params=None, headers=None, timeout=None):
        return self._answer("POST", url, params, headers, timeout)

    def urls(self):
        return [call["url"] for call in self.calls]


class FakeYoutubeDL:
    """Stand-in for yt_dlp.YoutubeDL driven by a shared recorder"""

    recorder = None

    def __init__(self, opts):
        self.opts = opts

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def extract_info(self, url, download=False):
        self.recorder.calls.append({"url": url, "opts": self.opts, "download": download})
        if self.recorder.error is not None:
            raise self.recorder.error
        return self.recorder.result


class YtdlRecorder:
    def __init__(self):
        self.calls = []
        self.result = None
        self.error = None


@pytest.fixture
def fake_http(monkeypatch):
    http = FakeHTTP()
    monkeypatch.setattr(requests, "get", http.get)
    monkeypatch.setattr(requests, "post", http.post)
    return http


@pytest.fixture
def fake_ytdl(monkeypatch):
    import yt_dlp

    recorder = YtdlRecorder()
    fake_cls = type("PatchedYoutubeDL", (FakeYoutubeDL,), {"recorder": recorder})
    monkeypatch.setattr(yt_dlp, "YoutubeDL", fake_cls)
    return recorder
