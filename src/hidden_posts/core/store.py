"""Bounded, ordered set of hidden post IDs kept in a single option slot.

The IDs are kept oldest first.  Adding a new ID appends it; once the list
holds more than ``limit`` entries the oldest ones are dropped.  Nothing is
cached between calls: every operation re-reads and re-validates the stored
value.
"""
from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping
from typing import Any, Iterable, List

from hidden_posts.config import DEFAULT_LIMIT, DEFAULT_OPTION_KEY
from hidden_posts.interfaces.option_store import OptionStore

logger = logging.getLogger(__name__)

_LEADING_INT_RE = re.compile(r"\s*[+-]?(\d+)", re.ASCII)


def absint(value: Any) -> int:
    """Coerce *value* to a non-negative integer, returning 0 when it can't.

    Strings contribute their leading integer (``"12abc"`` -> 12), negative
    numbers are mapped to their absolute value and floats are truncated.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return abs(value)
    if isinstance(value, float):
        return abs(int(value)) if math.isfinite(value) else 0
    if isinstance(value, bytes):
        try:
            value = value.decode("ascii")
        except UnicodeDecodeError:
            return 0
    if isinstance(value, str):
        match = _LEADING_INT_RE.match(value)
        return int(match.group(1)) if match else 0
    return 0


def sanitize_ids(raw: Any) -> List[int]:
    """Turn a raw stored value into a clean, duplicate-free list of IDs."""
    if isinstance(raw, Mapping):
        items: Iterable[Any] = raw.values()
    elif isinstance(raw, (list, tuple)):
        items = raw
    else:
        if raw is not None:
            logger.warning("Ignoring malformed hidden posts value of type %s", type(raw).__name__)
        return []

    # dict preserves insertion order: first occurrence wins
    clean = dict.fromkeys(i for i in map(absint, items) if i)
    return list(clean)


def _require_post_id(post_id: Any) -> int:
    if isinstance(post_id, bool) or not isinstance(post_id, int) or post_id <= 0:
        raise ValueError(f"post_id must be a positive integer, got {post_id!r}")
    return post_id


class HiddenPostsStore:
    """Read and mutate the hidden post IDs held by an :class:`OptionStore`.

    Parameters
    ----------
    options:
        Backend holding the raw value.
    key:
        Name of the option slot.
    limit:
        Maximum number of IDs kept.  Lowering it is safe: the next ``add``
        trims the stored list down to the new size.
    """

    def __init__(
        self,
        options: OptionStore,
        *,
        key: str = DEFAULT_OPTION_KEY,
        limit: int = DEFAULT_LIMIT,
    ) -> None:
        if not key:
            raise ValueError("key must be a non-empty string")
        if limit <= 0:
            raise ValueError("limit must be positive")
        self._options = options
        self._key = key
        self._limit = limit

    @property
    def limit(self) -> int:
        return self._limit

    def get_all(self) -> List[int]:
        """Return the hidden post IDs, oldest first."""
        return sanitize_ids(self._options.get(self._key, []))

    def contains(self, post_id: int) -> bool:
        return post_id in self.get_all()

    def add(self, post_id: int) -> None:
        """Hide *post_id*; evict the oldest IDs if the limit is exceeded."""
        post_id = _require_post_id(post_id)
        with self._options.transact():
            posts = self.get_all()
            if post_id in posts:
                logger.debug("Post %d already hidden", post_id)
                return

            posts.append(post_id)
            while len(posts) > self._limit:
                evicted = posts.pop(0)
                logger.debug("Evicted post %d from hidden posts", evicted)

            self._save(posts)
        logger.debug("Hid post %d (%d hidden)", post_id, len(posts))

    def remove(self, post_id: int) -> None:
        """Unhide *post_id*; unknown IDs are ignored."""
        post_id = _require_post_id(post_id)
        with self._options.transact():
            posts = self.get_all()
            if post_id not in posts:
                logger.debug("Post %d is not hidden", post_id)
                return

            posts.remove(post_id)
            self._save(posts)
        logger.debug("Unhid post %d (%d hidden)", post_id, len(posts))

    def _save(self, posts: List[int]) -> None:
        self._options.set(self._key, [int(p) for p in posts])
