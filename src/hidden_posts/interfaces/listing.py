from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence


class ListingQuery(Protocol):
    """
    A protocol for a content-listing request that can exclude items.

    The host builds the query; the filter only reads and replaces the list of
    excluded IDs before the listing runs.
    """

    def get_exclusion_list(self) -> Optional[Sequence[int]]:
        """Return the IDs already excluded, or None when nothing is set."""
        ...

    def set_exclusion_list(self, ids: Sequence[int]) -> None:
        """Replace the excluded IDs."""
        ...


@dataclass(frozen=True)
class QueryContext:
    """Flags describing the request a listing query belongs to."""
    is_admin: bool = False
    is_main_query: bool = True
    is_single: bool = False
