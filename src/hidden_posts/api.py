"""Application-level accessors built on the shared option store."""
from __future__ import annotations

from typing import List, Optional

from hidden_posts.config import Settings
from hidden_posts.core.store import HiddenPostsStore
from hidden_posts.platforms.storage import get_option_store, reset_option_store

_shared_hidden_store: Optional[HiddenPostsStore] = None


def get_hidden_store(settings: Settings | None = None) -> HiddenPostsStore:
    """Return the process-wide :class:`HiddenPostsStore`."""
    global _shared_hidden_store  # pylint: disable=global-statement
    if _shared_hidden_store is None:
        if settings is None:
            settings = Settings.from_env()
        _shared_hidden_store = HiddenPostsStore(
            get_option_store(settings),
            key=settings.option_key,
            limit=settings.limit,
        )
    return _shared_hidden_store


def get_hidden_posts() -> List[int]:
    """Get the IDs of all hidden posts, oldest first."""
    return get_hidden_store().get_all()


def reset() -> None:
    """Drop the shared store (and its option backend)."""
    global _shared_hidden_store  # pylint: disable=global-statement
    reset_option_store()
    _shared_hidden_store = None
