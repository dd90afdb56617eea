"""Hide a limited number of posts from the main listing.

The IDs live in a single option slot and are excluded from the main
public query.  The list is capped so the exclusion stays cheap.
"""

from .config import Settings
from .core import HiddenPostsFilter, HiddenPostsStore, PostQuery
from .interfaces import OptionStore, QueryContext, StorageUnavailableError
from .api import get_hidden_posts, get_hidden_store

__all__ = [
    "Settings",
    "HiddenPostsFilter",
    "HiddenPostsStore",
    "PostQuery",
    "OptionStore",
    "QueryContext",
    "StorageUnavailableError",
    "get_hidden_posts",
    "get_hidden_store",
]
