from .store import HiddenPostsStore, absint, sanitize_ids
from .query import PostQuery
from .query_filter import HiddenPostsFilter, merge_exclusions, never_show, show_on_single
from .admin import render_checkbox, save_post, set_hidden

__all__ = [
    "HiddenPostsStore",
    "absint",
    "sanitize_ids",
    "PostQuery",
    "HiddenPostsFilter",
    "merge_exclusions",
    "never_show",
    "show_on_single",
    "render_checkbox",
    "save_post",
    "set_hidden",
]
