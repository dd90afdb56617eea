import copy
import threading
from typing import Any, ContextManager

from hidden_posts.interfaces.option_store import OptionStore


class InMemoryOptionStore(OptionStore):
    """Non-persistent option store.

    Values are deep-copied on the way in and out so callers never share
    mutable state with the store, matching the read-whole/write-whole
    behaviour of a persistent backend.
    """

    def __init__(self, initial: dict[str, Any] | None = None):
        self._data: dict[str, Any] = copy.deepcopy(initial) if initial else {}
        self._lock = threading.RLock()

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            if key not in self._data:
                return default
            return copy.deepcopy(self._data[key])

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._data[key] = copy.deepcopy(value)

    def transact(self) -> ContextManager[bool]:
        return self._lock

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def close(self) -> None:  # noqa: D401
        self.clear()


__all__: list[str] = ["InMemoryOptionStore"]
