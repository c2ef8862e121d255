"""Configuration management for Journalon."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

JOURNALON_HOME = Path(os.environ.get("JOURNALON_HOME", Path.home() / "journalon"))
CONFIG_FILE = JOURNALON_HOME / "config" / "journalon.conf"
DATA_DIR = JOURNALON_HOME / "data"

DEFAULT_STORE_URL = "https://hashkeep.magland.org"


@dataclass
class Config:
    """Journalon configuration."""

    store_url: str = DEFAULT_STORE_URL
    data_dir: str = ""
    request_timeout: float | None = None

    @property
    def data_path(self) -> Path:
        """Directory holding the local index files."""
        if self.data_dir:
            return Path(self.data_dir).expanduser()
        return DATA_DIR


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from an unquoted value."""
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from journalon.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "store_url":
                config.store_url = value.rstrip("/") or DEFAULT_STORE_URL
            case "data_dir":
                config.data_dir = value
            case "request_timeout":
                if not value:
                    config.request_timeout = None
                    continue
                try:
                    config.request_timeout = float(value)
                except ValueError:
                    logger.warning(f"Invalid REQUEST_TIMEOUT value: {value}")

    return config
