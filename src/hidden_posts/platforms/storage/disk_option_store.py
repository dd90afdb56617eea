from __future__ import annotations

"""Disk-backed implementation of :class:`hidden_posts.interfaces.OptionStore`.

This class is a thin adapter around `diskcache.Cache` which adds

* conformance to our abstract `OptionStore` contract
* translation of backend failures into :class:`StorageUnavailableError`

`diskcache` serialises each value as a single row, so a ``set`` is atomic per
key, and :meth:`DiskOptionStore.transact` maps onto `Cache.transact()` which
holds an exclusive SQLite transaction for the whole read-modify-write cycle.

Example
-------
```python
from hidden_posts.platforms.storage import DiskOptionStore
with DiskOptionStore(directory="~/.hidden_posts") as options:
    options.set("hidden-posts", [12, 40])
```
"""

import atexit
import contextlib
import logging
import sqlite3
from pathlib import Path
from typing import Any, Iterator

from diskcache import Cache as _DiskCache
from diskcache import Timeout as _DiskTimeout

from hidden_posts.interfaces.option_store import OptionStore, StorageUnavailableError

__all__: list[str] = ["DiskOptionStore"]

logger = logging.getLogger(__name__)

_BACKEND_ERRORS = (sqlite3.Error, _DiskTimeout, OSError)


class DiskOptionStore(OptionStore):
    """Persistent option store based on *diskcache*.

    Parameters
    ----------
    directory:
        Directory where the store files live.  Will be created if missing.
    timeout:
        Seconds SQLite waits on a locked database before giving up.  A lock
        held longer surfaces as :class:`StorageUnavailableError` (default:
        ``60``).
    """

    def __init__(self, directory: str | Path = "options", *, timeout: float = 60) -> None:
        directory = Path(directory).expanduser().absolute()
        try:
            directory.mkdir(parents=True, exist_ok=True)
            # No byte limit and no culling: the options must never be evicted.
            self._cache = _DiskCache(
                str(directory),
                timeout=timeout,
                size_limit=2**63 - 1,
                cull_limit=0,
                eviction_policy="none",
            )
        except _BACKEND_ERRORS as exc:
            logger.exception("Unable to open option store in %s", directory)
            raise StorageUnavailableError(f"Cannot open option store in {directory}") from exc
        self.directory = directory
        # Ensure the store is closed on interpreter exit (best-effort)
        atexit.register(self.close)

    # ------------------------------------------------------------------
    # Slot API
    # ------------------------------------------------------------------

    def get(self, key: str, default: Any = None) -> Any:  # noqa: D401
        try:
            return self._cache.get(key, default=default)
        except _BACKEND_ERRORS as exc:
            logger.exception("Failed to read option %s", key)
            raise StorageUnavailableError(f"Cannot read option {key!r}") from exc

    def set(self, key: str, value: Any) -> None:  # noqa: D401
        try:
            self._cache.set(key, value)
        except _BACKEND_ERRORS as exc:
            logger.exception("Failed to write option %s", key)
            raise StorageUnavailableError(f"Cannot write option {key!r}") from exc

    @contextlib.contextmanager
    def transact(self) -> Iterator[None]:
        """Run the enclosed reads and writes in one exclusive transaction."""
        try:
            with self._cache.transact():
                yield
        except _BACKEND_ERRORS as exc:
            logger.exception("Option store transaction failed in %s", self.directory)
            raise StorageUnavailableError("Option store transaction failed") from exc

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def clear(self) -> None:
        """Remove every option from the store."""
        try:
            self._cache.clear()
        except _BACKEND_ERRORS as exc:
            logger.exception("Failed to clear option store in %s", self.directory)
            raise StorageUnavailableError("Cannot clear option store") from exc

    def close(self) -> None:  # noqa: D401
        """Flush to disk and close underlying resources."""
        if getattr(self, "_cache", None) is not None:  # pragma: no cover
            with contextlib.suppress(Exception):
                self._cache.close()
