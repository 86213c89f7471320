"""Data models for torrentapi."""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


@dataclass
class Token:
    """A short-lived API token and its expiry (epoch seconds)."""

    value: str = ""
    expires: float = 0.0

    def is_valid(self, now: float | None = None) -> bool:
        """Check if the token can still be used."""
        if not self.value:
            return False
        if now is None:
            now = time.time()
        return now < self.expires


@dataclass
class EpisodeInfo:
    """Contents of the "episode_info" key. Some of the fields may be empty."""

    imdb: str = ""
    tvdb: str = ""
    tvrage: str = ""
    themoviedb: str = ""
    airdate: str = ""
    seasonnum: str = ""
    epnum: str = ""
    title: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "EpisodeInfo":
        if not data:
            return cls()
        return cls(
            imdb=_str(data.get("imdb")),
            tvdb=_str(data.get("tvdb")),
            tvrage=_str(data.get("tvrage")),
            themoviedb=_str(data.get("themoviedb")),
            airdate=_str(data.get("airdate")),
            seasonnum=_str(data.get("seasonnum")),
            epnum=_str(data.get("epnum")),
            title=_str(data.get("title")),
        )


@dataclass
class TorrentResult:
    """A single torrent returned by the API. Some of the fields may be empty."""

    title: str = ""
    filename: str = ""
    category: str = ""
    download: str = ""
    seeders: int = 0
    leechers: int = 0
    size: int = 0  # bytes
    pubdate: str = ""
    ranked: int = 0
    info_page: str = ""
    episode_info: EpisodeInfo = field(default_factory=EpisodeInfo)

    @property
    def name(self) -> str:
        """Display name: filename with the title as fallback."""
        return self.filename or self.title

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TorrentResult":
        """Build a result from one wire record.

        Raises:
            TypeError, ValueError: If the record has the wrong shape.
        """
        if not isinstance(data, dict):
            raise TypeError(f"expected an object, got {type(data).__name__}")

        episode_info = data.get("episode_info")
        if episode_info is not None and not isinstance(episode_info, dict):
            raise TypeError("episode_info must be an object")

        return cls(
            title=_str(data.get("title")),
            filename=_str(data.get("filename")),
            category=_str(data.get("category")),
            download=_str(data.get("download")),
            seeders=int(data.get("seeders") or 0),
            leechers=int(data.get("leechers") or 0),
            size=int(data.get("size") or 0),
            pubdate=_str(data.get("pubdate")),
            ranked=int(data.get("ranked") or 0),
            info_page=_str(data.get("info_page")),
            episode_info=EpisodeInfo.from_dict(episode_info),
        )


@dataclass
class APIResponse:
    """Envelope of a search/list response."""

    torrent_results: Any = None
    error: str = ""
    error_code: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "APIResponse":
        return cls(
            torrent_results=data.get("torrent_results"),
            error=_str(data.get("error")),
            error_code=int(data.get("error_code") or 0),
        )


class ResponseKind(Enum):
    """Outcome of processing an envelope that is not a hard failure."""

    RESULTS = "results"
    EMPTY = "empty"
    EXPIRED_TOKEN = "expired_token"


@dataclass
class ProcessedResponse:
    """Tagged result of the response processor."""

    kind: ResponseKind
    results: list[TorrentResult] = field(default_factory=list)


def _str(value: Any) -> str:
    return "" if value is None else str(value)
