"""Token acquisition and tracking."""

import json
import time
from collections.abc import Callable

from .config.schema import DEFAULT_TOKEN_EXPIRATION
from .errors import DecodeError
from .log import get_logger
from .models import Token
from .transport import Transport


class TokenManager:
    """Keeps a valid API token, renewing it on demand."""

    def __init__(
        self,
        transport: Transport,
        api_url: str,
        expiration: float = DEFAULT_TOKEN_EXPIRATION,
        app_id: str = "",
        clock: Callable[[], float] = time.time,
    ):
        self.transport = transport
        self.api_url = api_url
        self.expiration = expiration
        self.app_id = app_id
        self.clock = clock
        self.token = Token()

    @property
    def token_url(self) -> str:
        url = f"{self.api_url}?get_token=get_token"
        if self.app_id:
            url += f"&app_id={self.app_id}"
        return url

    def is_valid(self) -> bool:
        """Check if the current token is usable right now."""
        return self.token.is_valid(self.clock())

    def renew(self) -> Token:
        """Fetch a new token.

        Raises:
            TransportError: If the request fails.
            DecodeError: If the response has no usable token.
        """
        body = self.transport.fetch(self.token_url)
        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            raise DecodeError(f"invalid token response: {e}") from e

        value = data.get("token") if isinstance(data, dict) else None
        if not isinstance(value, str):
            raise DecodeError("invalid token response: missing token")

        self.token = Token(value=value, expires=self.clock() + self.expiration)
        get_logger().info(f"Token renewed, valid for {self.expiration:g}s")
        return self.token

    def ensure(self) -> Token:
        """Return the current token, renewing it first if needed."""
        if not self.is_valid():
            return self.renew()
        return self.token
