"""HTTP transports used by the API client."""

from abc import ABC, abstractmethod

import requests

from .config.schema import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from .errors import TransportError
from .log import log_request_time


class Transport(ABC):
    """Abstract base class for fetching a URL."""

    @abstractmethod
    def fetch(self, url: str) -> str:
        """Fetch the URL and return the response body.

        Raises:
            TransportError: If the request fails.
        """
        ...

    def close(self) -> None:
        """Release any held resources."""


class RequestsTransport(Transport):
    """Blocking GET requests over a shared requests session."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        session: requests.Session | None = None,
    ):
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": user_agent})

    @log_request_time
    def fetch(self, url: str) -> str:
        try:
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise TransportError(f"Network error: {e}") from e
        return resp.text

    def close(self) -> None:
        self.session.close()
