"""Exclude hidden posts from the primary public listing."""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from hidden_posts.interfaces.listing import ListingQuery, QueryContext

from .store import HiddenPostsStore

logger = logging.getLogger(__name__)

# Given ``is_single``, return True to leave the query untouched.
ShowPostsHook = Callable[[bool], bool]


def show_on_single(is_single: bool) -> bool:
    """Default policy: single-post views always show the post."""
    return is_single


def never_show(is_single: bool) -> bool:
    """Policy that filters single-post views as well."""
    return False


def merge_exclusions(existing: Optional[Sequence[int]], hidden: Sequence[int]) -> List[int]:
    """Union of *existing* and *hidden*, existing IDs first, no duplicates."""
    if not isinstance(existing, (list, tuple)):
        return list(hidden)
    return list(dict.fromkeys([*existing, *hidden]))


class HiddenPostsFilter:
    """Widen a listing query's exclusion list with the hidden post IDs.

    The filter only acts on the main query of a public (non-admin) request.
    Whether single-post views are filtered is decided by *show_posts*.
    """

    def __init__(self, store: HiddenPostsStore, *, show_posts: ShowPostsHook = show_on_single) -> None:
        self._store = store
        self._show_posts = show_posts

    def should_filter(self, context: QueryContext) -> bool:
        if context.is_admin or not context.is_main_query:
            return False
        return not self._show_posts(context.is_single)

    def apply(self, query: ListingQuery, context: QueryContext) -> None:
        if not self.should_filter(context):
            return

        hidden = self._store.get_all()
        merged = merge_exclusions(query.get_exclusion_list(), hidden)
        query.set_exclusion_list(merged)
        logger.debug("Excluding %d hidden posts from main query", len(hidden))

    __call__ = apply
