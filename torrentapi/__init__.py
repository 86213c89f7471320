"""Python client for the torrentapi.org search API."""

from .client import TorrentAPI
from .config import ClientConfig
from .errors import (
    DecodeError,
    ExpiredTokenError,
    RemoteAPIError,
    TorrentAPIError,
    TransportError,
    UnknownResponseError,
)
from .models import EpisodeInfo, Token, TorrentResult
from .query import Query
from .transport import RequestsTransport, Transport

__all__ = [
    "TorrentAPI",
    "ClientConfig",
    "Query",
    "Token",
    "TorrentResult",
    "EpisodeInfo",
    "Transport",
    "RequestsTransport",
    "TorrentAPIError",
    "TransportError",
    "DecodeError",
    "ExpiredTokenError",
    "RemoteAPIError",
    "UnknownResponseError",
]
