"""Store: the keyed entry table behind every client."""

import re
import threading
from enum import Enum
from typing import TypeVar

from .entries import Entry
from .errors import TransactionModeViolation, TypeMismatch

E = TypeVar("E", bound=Entry)


class Mode(Enum):
    """Whether commands may run directly or only through a transaction."""

    DIRECT = "direct"
    IN_TRANSACTION = "in_transaction"


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a KEYS glob. Only ``*`` is special; it matches any run of characters."""
    return re.compile(".*".join(re.escape(part) for part in pattern.split("*")), re.DOTALL)


class Store:
    """An in-memory table of typed entries.

    Each key holds exactly one ``Entry`` variant. Typed accessors raise
    ``TypeMismatch`` instead of handing out an entry of the wrong
    variant, so commands never mutate a key they do not own.

    Every method takes ``lock`` for its whole duration. The lock is
    reentrant: commands hold it across several Store calls, and a
    transaction holds it across a whole batch of commands.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Entry] = {}
        self._lock = threading.RLock()
        self._mode = Mode.DIRECT

    @property
    def lock(self) -> threading.RLock:
        """The store-wide lock. Acquire with ``with store.lock:``."""
        return self._lock

    @property
    def mode(self) -> Mode:
        with self._lock:
            return self._mode

    # -- Typed access --

    def get_typed(self, key: str, variant: type[E]) -> E | None:
        """Return the entry at ``key``, or None if absent.

        Raises:
            TypeMismatch: If ``key`` holds a different variant.
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if not isinstance(entry, variant):
                raise TypeMismatch(key, variant.kind, entry.kind)
            return entry

    def get_or_create_typed(self, key: str, variant: type[E]) -> E:
        """Return the entry at ``key``, inserting an empty one if absent."""
        with self._lock:
            entry = self.get_typed(key, variant)
            if entry is None:
                entry = variant()
                self._entries[key] = entry
            return entry

    def put(self, key: str, entry: Entry) -> None:
        """Replace whatever ``key`` holds with ``entry``."""
        with self._lock:
            self._entries[key] = entry

    # -- Key operations --

    def delete(self, key: str) -> bool:
        """Remove ``key``. Returns whether it existed."""
        with self._lock:
            return self._entries.pop(key, None) is not None

    def exists(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    def keys_matching(self, pattern: str) -> set[str]:
        """All keys fully matching the glob ``pattern``."""
        regex = compile_pattern(pattern)
        with self._lock:
            return {key for key in self._entries if regex.fullmatch(key)}

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.exists(key)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    # -- Mode guard --

    def ensure_direct(self) -> None:
        """Reject direct command use while a transaction is open.

        Raises:
            TransactionModeViolation: If the store is in transaction mode.
        """
        with self._lock:
            if self._mode is Mode.IN_TRANSACTION:
                raise TransactionModeViolation(
                    "Cannot run commands directly while a transaction is open. "
                    "Queue them on the transaction instead."
                )

    def _begin_transaction(self) -> None:
        with self._lock:
            if self._mode is Mode.IN_TRANSACTION:
                raise TransactionModeViolation("A transaction is already open on this store")
            self._mode = Mode.IN_TRANSACTION

    def _end_transaction(self) -> None:
        with self._lock:
            self._mode = Mode.DIRECT
