"""Shared fixtures for torrentapi tests."""

import json

import pytest

from torrentapi.client import TorrentAPI
from torrentapi.config import ClientConfig
from torrentapi.errors import TransportError
from torrentapi.token import TokenManager
from torrentapi.transport import Transport

API_URL = "https://api.test/pubapi_v2.php"


class FakeTransport(Transport):
    """Transport returning queued bodies and recording requested URLs.

    Token requests are answered from ``tokens`` and everything else from
    ``responses``. Queued exceptions are raised instead of returned.
    """

    def __init__(self, responses=None, tokens=None):
        self.responses = list(responses or [])
        self.tokens = list(tokens or [])
        self.urls: list[str] = []
        self.closed = False

    def fetch(self, url: str) -> str:
        self.urls.append(url)
        queue = self.tokens if "get_token=get_token" in url else self.responses
        if not queue:
            raise TransportError(f"unexpected request: {url}")
        item = queue.pop(0)
        if isinstance(item, Exception):
            raise item
        if isinstance(item, str):
            return item
        return json.dumps(item)

    def close(self) -> None:
        self.closed = True

    @property
    def token_requests(self) -> list[str]:
        return [u for u in self.urls if "get_token=get_token" in u]

    @property
    def query_requests(self) -> list[str]:
        return [u for u in self.urls if "get_token=get_token" not in u]


class FakeClock:
    """Manually advanced clock."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def token_body(value: str) -> dict:
    return {"token": value}


def result_record(title: str = "Some.Show.S01E01.720p", **overrides) -> dict:
    record = {
        "title": title,
        "filename": f"{title}.mkv",
        "category": "TV HD Episodes",
        "download": "magnet:?xt=urn:btih:abc",
        "seeders": 10,
        "leechers": 2,
        "size": 1073741824,
        "pubdate": "2019-01-01 10:00:00 +0000",
        "ranked": 1,
        "info_page": "https://torrentapi.org/redirect_to_info.php?p=1",
        "episode_info": {
            "imdb": "tt0000001",
            "tvdb": "12345",
            "tvrage": "",
            "themoviedb": "99",
            "airdate": "2019-01-01",
            "seasonnum": "1",
            "epnum": "1",
            "title": "Pilot",
        },
    }
    record.update(overrides)
    return record


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def api(transport, clock):
    config = ClientConfig(base_url=API_URL)
    tokens = TokenManager(
        transport, config.api_url, expiration=config.token_expiration, clock=clock
    )
    return TorrentAPI(transport=transport, config=config, token_manager=tokens)
