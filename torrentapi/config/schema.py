"""Configuration schema for the API client."""

from dataclasses import dataclass

API_URL_TEMPLATE = "https://torrentapi.org/pubapi_{version}.php"
DEFAULT_VERSION = "v2"

# The API advertises 15 minutes; expire a bit earlier to stay clear of clock skew.
DEFAULT_TOKEN_EXPIRATION = 890.0
DEFAULT_TIMEOUT = 15.0
DEFAULT_USER_AGENT = "torrentapi-python/0.1"


@dataclass
class ClientConfig:
    """Settings for a TorrentAPI instance."""

    version: str = DEFAULT_VERSION
    base_url: str = ""  # derived from version when empty
    app_id: str = ""  # not sent when empty
    token_expiration: float = DEFAULT_TOKEN_EXPIRATION  # seconds
    timeout: float = DEFAULT_TIMEOUT  # seconds
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self):
        if self.token_expiration <= 0:
            raise ValueError("token_expiration must be positive")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")

    @property
    def api_url(self) -> str:
        """Endpoint URL without query string."""
        if self.base_url:
            return self.base_url
        return API_URL_TEMPLATE.format(version=self.version or DEFAULT_VERSION)

    def to_dict(self) -> dict:
        """Convert to dictionary for YAML serialization."""
        return {
            "version": self.version,
            "base_url": self.base_url,
            "app_id": self.app_id,
            "token_expiration": self.token_expiration,
            "timeout": self.timeout,
            "user_agent": self.user_agent,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ClientConfig":
        """Create from dictionary (YAML deserialization).

        Raises:
            ValueError: If the data is not a mapping or a value is invalid.
        """
        if not isinstance(data, dict):
            raise ValueError(
                f"client settings must be a mapping, got {type(data).__name__}"
            )
        return cls(
            version=str(data.get("version") or DEFAULT_VERSION),
            base_url=str(data.get("base_url") or ""),
            app_id=str(data.get("app_id") or ""),
            token_expiration=_seconds(
                data, "token_expiration", DEFAULT_TOKEN_EXPIRATION
            ),
            timeout=_seconds(data, "timeout", DEFAULT_TIMEOUT),
            user_agent=str(data.get("user_agent") or DEFAULT_USER_AGENT),
        )


def _seconds(data: dict, key: str, default: float) -> float:
    value = data.get(key, default)
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{key}: expected a number, got {value!r}") from e
