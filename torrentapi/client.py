"""API client for torrentapi.org."""

from __future__ import annotations

import threading

from .config.schema import ClientConfig
from .errors import ExpiredTokenError
from .log import get_logger
from .models import ProcessedResponse, ResponseKind, TorrentResult
from .query import Query
from .response import decode_envelope, process_response
from .token import TokenManager
from .transport import RequestsTransport, Transport


class TorrentAPI:
    """Client for the torrentapi search endpoint.

    Parameters are chained on the client and sent by a terminal call,
    :meth:`search` or :meth:`list`, which also clears them::

        api = TorrentAPI()
        results = api.search_string("ubuntu").limit(25).search()

    An instance keeps mutable query state and must be used by one owner at
    a time. Terminal calls are serialized with a lock, but setters are not.
    """

    def __init__(
        self,
        transport: Transport | None = None,
        config: ClientConfig | None = None,
        token_manager: TokenManager | None = None,
    ):
        self.config = config or ClientConfig()
        self.transport = transport or RequestsTransport(
            timeout=self.config.timeout, user_agent=self.config.user_agent
        )
        self.tokens = token_manager or TokenManager(
            self.transport,
            self.config.api_url,
            expiration=self.config.token_expiration,
            app_id=self.config.app_id,
        )
        self.query = Query()
        self._lock = threading.Lock()

    @classmethod
    def new(
        cls,
        config: ClientConfig | None = None,
        transport: Transport | None = None,
    ) -> TorrentAPI:
        """Create a client and fetch its first token right away."""
        api = cls(transport=transport, config=config)
        api.tokens.renew()
        return api

    def __enter__(self) -> TorrentAPI:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying transport."""
        self.transport.close()

    # Query parameters

    def search_string(self, query: str) -> TorrentAPI:
        self.query.search_string(query)
        return self

    def category(self, category: int) -> TorrentAPI:
        self.query.category(category)
        return self

    def search_tvdb(self, series_id: str) -> TorrentAPI:
        self.query.search_tvdb(series_id)
        return self

    def search_imdb(self, movie_id: str) -> TorrentAPI:
        self.query.search_imdb(movie_id)
        return self

    def search_themoviedb(self, movie_id: str) -> TorrentAPI:
        self.query.search_themoviedb(movie_id)
        return self

    def format(self, fmt: str) -> TorrentAPI:
        self.query.format(fmt)
        return self

    def limit(self, limit: int) -> TorrentAPI:
        self.query.limit(limit)
        return self

    def sort(self, sort: str) -> TorrentAPI:
        self.query.sort(sort)
        return self

    def ranked(self, ranked: bool) -> TorrentAPI:
        self.query.ranked(ranked)
        return self

    def min_seeders(self, count: int) -> TorrentAPI:
        self.query.min_seeders(count)
        return self

    def min_leechers(self, count: int) -> TorrentAPI:
        self.query.min_leechers(count)
        return self

    # Terminal calls

    def search(self) -> list[TorrentResult]:
        """Run the accumulated query as a search. Must end the chain."""
        return self._call("search")

    def list(self) -> list[TorrentResult]:
        """List the newest torrents. Must end the chain."""
        return self._call("list")

    def _url(self) -> str:
        url = f"{self.config.api_url}?token={self.tokens.token.value}"
        if self.config.app_id:
            url += f"&app_id={self.config.app_id}"
        return url + self.query.encode()

    def _fetch(self) -> ProcessedResponse:
        params = self.query.encode()
        body = self.transport.fetch(self._url())
        return process_response(decode_envelope(body, params), params)

    def _call(self, mode: str) -> list[TorrentResult]:
        log = get_logger()
        with self._lock:
            try:
                self.query.mode(mode)
                self.tokens.ensure()
                self.query.flush_categories()

                processed = self._fetch()
                if processed.kind is ResponseKind.EXPIRED_TOKEN:
                    log.info("Token expired, renewing and retrying once")
                    self.tokens.renew()
                    processed = self._fetch()
                    if processed.kind is ResponseKind.EXPIRED_TOKEN:
                        raise ExpiredTokenError()

                log.debug(
                    f"mode={mode}: {len(processed.results)} results "
                    f"({processed.kind.value})"
                )
                return processed.results
            finally:
                self.query.reset()
