from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

EXCLUDE_VAR = "post__not_in"


@dataclass
class PostQuery:
    """A listing query described by its query variables.

    Implements :class:`hidden_posts.interfaces.ListingQuery` on top of the
    ``post__not_in`` variable.
    """
    query_vars: Dict[str, Any] = field(default_factory=dict)

    def get(self, var: str, default: Any = None) -> Any:
        return self.query_vars.get(var, default)

    def set(self, var: str, value: Any) -> None:
        self.query_vars[var] = value

    def get_exclusion_list(self) -> Optional[Sequence[int]]:
        return self.get(EXCLUDE_VAR)

    def set_exclusion_list(self, ids: Sequence[int]) -> None:
        self.set(EXCLUDE_VAR, list(ids))

    @property
    def excluded(self) -> List[int]:
        return list(self.get_exclusion_list() or [])
