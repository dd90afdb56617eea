from __future__ import annotations

"""Option store interface module.

Defines an abstract interface for the single named key-value slot that holds
the hidden post IDs.  The store knows nothing about the value it keeps; it is
read and written as a whole.

Design goals
============
1. Opaque slot – ``get`` returns whatever was last ``set`` (or *default*).
   Validation of the payload is the caller's job.
2. Whole-value writes – there are no partial updates, so a backend only has
   to guarantee single-key atomicity.
3. Optional transactions – backends that natively support an exclusive
   read-modify-write section expose it through :meth:`OptionStore.transact`.
   Backends without one inherit a no-op context.
"""

import contextlib
from abc import ABC, abstractmethod
from typing import Any, ContextManager


class StorageUnavailableError(RuntimeError):
    """Raised when the underlying storage cannot be read or written."""


class OptionStore(ABC):
    """Abstract base class for a named-option key-value store.

    A concrete implementation must guarantee:
        * ``set`` replaces the whole value stored under *key* in one step.
        * I/O failures surface as :class:`StorageUnavailableError`.
    """

    # ---------------------------------------------------------------------
    # Slot API – subclasses MUST implement these.
    # ---------------------------------------------------------------------

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under *key* or *default* when absent."""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store *value* under *key*, replacing any previous value."""

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    def transact(self) -> ContextManager[None]:
        """Return a context that makes a read-modify-write cycle exclusive.

        The default implementation provides no isolation at all.
        """
        return contextlib.nullcontext()

    # ------------------------------------------------------------------
    # Lifecycle management
    # ------------------------------------------------------------------

    @abstractmethod
    def close(self) -> None:
        """Flush pending writes and free underlying resources."""

    def __enter__(self) -> "OptionStore":
        return self

    def __exit__(self, exc_type, exc, tb):  # noqa: D401
        with contextlib.suppress(Exception):
            self.close()
        return False  # never suppress exceptions
