"""Runtime settings for hidden posts, resolved from the environment."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from appdirs import user_data_dir
from dotenv import find_dotenv, load_dotenv

# Locate the nearest .env starting from the CWD and moving up.
_DOTENV_PATH = find_dotenv(usecwd=True) or find_dotenv()
if _DOTENV_PATH:
    load_dotenv(_DOTENV_PATH)

logger = logging.getLogger(__name__)

_APP_NAME = "HiddenPosts"
_APP_AUTHOR = "Automattic"

DEFAULT_OPTION_KEY = "hidden-posts"
DEFAULT_LIMIT = 100
DEFAULT_STORAGE_DIR = Path(user_data_dir(_APP_NAME, _APP_AUTHOR))

_TRUTHY = {"1", "true", "yes", "y"}


def _truthy(env_value: str | None) -> bool:
    return str(env_value).lower() in _TRUTHY


@dataclass
class Settings:
    """Configuration for the hidden posts store with sensible defaults."""
    option_key: str = DEFAULT_OPTION_KEY
    limit: int = DEFAULT_LIMIT
    storage_dir: Path = DEFAULT_STORAGE_DIR
    no_persist: bool = False
    clear_on_start: bool = False

    def __post_init__(self) -> None:
        if not self.option_key:
            raise ValueError("option_key must be a non-empty string")
        if self.limit <= 0:
            raise ValueError("limit must be positive")
        self.storage_dir = Path(self.storage_dir).expanduser()

    @classmethod
    def from_env(cls, prefix: str = "HIDDEN_POSTS") -> "Settings":
        """Create settings from environment variables with given prefix."""
        settings = cls(
            option_key=os.getenv(f"{prefix}_OPTION_KEY", DEFAULT_OPTION_KEY),
            limit=int(os.getenv(f"{prefix}_LIMIT", DEFAULT_LIMIT)),
            storage_dir=Path(os.getenv(f"{prefix}_STORAGE_DIR", str(DEFAULT_STORAGE_DIR))),
            no_persist=_truthy(os.getenv(f"{prefix}_NO_PERSIST")),
            clear_on_start=_truthy(os.getenv(f"{prefix}_CLEAR")),
        )
        logger.debug("Resolved settings: %s", settings)
        return settings
