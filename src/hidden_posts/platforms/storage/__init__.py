"""Option storage backends package.

Provides a DiskCache-based persistent store and an in-memory store, both
conforming to :class:`hidden_posts.interfaces.option_store.OptionStore`.
"""

from __future__ import annotations

import logging
from typing import Optional

from hidden_posts.config import Settings
from hidden_posts.interfaces.option_store import OptionStore

from .disk_option_store import DiskOptionStore
from .in_memory_option_store import InMemoryOptionStore

__all__: list[str] = [
    "DiskOptionStore",
    "InMemoryOptionStore",
    "get_option_store",
    "reset_option_store",
]

logger = logging.getLogger(__name__)

# Module-level singleton ----------------------------------------------------

_shared_store: Optional[OptionStore] = None


def get_option_store(settings: Settings | None = None) -> OptionStore:  # noqa: D401
    """Return process-wide shared option store.

    The first call initialises a :class:`DiskOptionStore` in
    ``settings.storage_dir`` (see :meth:`Settings.from_env`).  Later calls
    return the same instance and ignore *settings*.

    Environment flags
    -----------------
    HIDDEN_POSTS_NO_PERSIST
        If set to ``1|true|yes``, returns an in-memory store that is not
        persisted.
    HIDDEN_POSTS_CLEAR
        If set, the persisted options are wiped at startup (before returning
        the instance).
    """
    global _shared_store  # pylint: disable=global-statement
    if _shared_store is not None:
        return _shared_store

    if settings is None:
        settings = Settings.from_env()

    if settings.no_persist:
        logger.info("Using non-persistent in-memory option store")
        _shared_store = InMemoryOptionStore()
        return _shared_store

    store = DiskOptionStore(directory=settings.storage_dir)
    logger.info("Using option store in %s", store.directory)

    if settings.clear_on_start:
        logger.info("Clearing option store in %s", store.directory)
        store.clear()

    _shared_store = store
    return _shared_store


def reset_option_store() -> None:
    """Close and forget the shared store so the next access rebuilds it."""
    global _shared_store  # pylint: disable=global-statement
    if _shared_store is not None:
        _shared_store.close()
    _shared_store = None
