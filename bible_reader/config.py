"""Configuration management for bible-reader."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


CONFIG_DIR = Path.home() / ".config" / "bible-reader"
CONFIG_FILE = CONFIG_DIR / "config.json"

DEFAULT_API_BASE_URL = "https://bible-api.com"
DEFAULT_TRANSLATION = "kjv"
DEFAULT_TIMEOUT = 10.0

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """Application configuration. Read-only: never written back."""

    api_base_url: str = DEFAULT_API_BASE_URL
    translation: str = DEFAULT_TRANSLATION
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "WARNING"

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """Load config from file, or return defaults."""
        path = path or CONFIG_FILE
        if not path.exists():
            return cls()

        try:
            with open(path) as f:
                data = json.load(f)
            return cls(
                api_base_url=data.get("api_base_url", DEFAULT_API_BASE_URL),
                translation=data.get("translation", DEFAULT_TRANSLATION),
                timeout=float(data.get("timeout", DEFAULT_TIMEOUT)),
                log_level=str(data.get("log_level", "WARNING")).upper(),
            )
        except (json.JSONDecodeError, OSError, AttributeError, TypeError, ValueError) as exc:
            logger.warning("Ignoring unreadable config %s: %s", path, exc)
            return cls()


def get_config() -> Config:
    """Get the application config."""
    return Config.load()
