"""Configuration file manager."""

from pathlib import Path

import yaml

from .schema import ClientConfig

CONFIG_DIR = Path.home() / ".config" / "torrentapi"
CONFIG_FILE = CONFIG_DIR / "config.yaml"


class ConfigManager:
    """Reads and writes the client configuration file."""

    def __init__(self, config_path: Path | None = None):
        self.config_path = config_path or CONFIG_FILE

    def _ensure_dir(self) -> None:
        """Ensure config directory exists."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

    def load(self) -> ClientConfig:
        """Load the configuration, falling back to defaults if missing."""
        if not self.config_path.exists():
            return ClientConfig()

        with open(self.config_path) as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"{self.config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"{self.config_path}: expected a mapping")

        client = data.get("client") or {}
        if not isinstance(client, dict):
            raise ValueError(f"{self.config_path}: 'client' must be a mapping")

        return ClientConfig.from_dict(client)

    def save(self, config: ClientConfig) -> None:
        """Save the configuration, keeping other top-level keys intact."""
        self._ensure_dir()

        if self.config_path.exists():
            with open(self.config_path) as f:
                data = yaml.safe_load(f) or {}
        else:
            data = {}

        if "version" not in data:
            data["version"] = 1
        data["client"] = config.to_dict()

        with open(self.config_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)
