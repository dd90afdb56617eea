from .option_store import OptionStore, StorageUnavailableError
from .listing import ListingQuery, QueryContext

__all__ = [
    "OptionStore",
    "StorageUnavailableError",
    "ListingQuery",
    "QueryContext",
]
