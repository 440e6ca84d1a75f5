"""Client: the method-per-command surface over a ``Store``."""

from __future__ import annotations

from typing import Any, Callable

from .commands import LAZY_SMEMBERS, Command, lookup
from .db import Store
from .transaction import Transaction
from .unsupported import stub_for_attribute


class Client:
    """Runs commands directly against a ``Store``.

    Every command takes the store lock for its whole duration and is
    rejected with ``TransactionModeViolation`` while a transaction is
    open on the store. Use ``multi()`` to queue commands instead.

    Commands fakekv does not implement are still reachable as
    attributes (``client.rpush``) and by name through
    ``execute_command``; both raise ``Unsupported``.
    """

    def __init__(self, store: Store | None = None, *, lazy_smembers: bool = False) -> None:
        self._store = store if store is not None else Store()
        self._overrides: dict[str, Command] = {}
        if lazy_smembers:
            self._overrides["SMEMBERS"] = LAZY_SMEMBERS

    @property
    def store(self) -> Store:
        """The underlying Store instance."""
        return self._store

    def _resolve(self, name: str) -> Command:
        cmd = self._overrides.get(name.upper())
        return cmd if cmd is not None else lookup(name)

    def execute_command(self, name: str, *args: Any) -> Any:
        """Run the command ``name`` with ``args`` and return its result.

        Raises:
            Unsupported: If ``name`` is not a supported command.
            TransactionModeViolation: If a transaction is open on the store.
        """
        cmd = self._resolve(name)
        with self._store.lock:
            self._store.ensure_direct()
            return cmd(self._store, *args)

    # -- Keys and strings --

    def set(self, key: str, value: str) -> str:
        return self.execute_command("SET", key, value)

    def get(self, key: str) -> str | None:
        return self.execute_command("GET", key)

    def setnx(self, key: str, value: str) -> int:
        """Set ``key`` only if it holds no string. Returns 1 if written."""
        return self.execute_command("SETNX", key, value)

    def delete(self, *keys: str) -> int:
        """DEL: remove ``keys``, returning how many existed."""
        return self.execute_command("DEL", *keys)

    def unlink(self, *keys: str) -> int:
        return self.execute_command("UNLINK", *keys)

    def exists(self, key: str) -> bool:
        return self.execute_command("EXISTS", key)

    def keys(self, pattern: str = "*") -> set[str]:
        return self.execute_command("KEYS", pattern)

    # -- Lists --

    def lpush(self, key: str, *values: str) -> int:
        """Push ``values`` onto the head in order. Returns the new length."""
        return self.execute_command("LPUSH", key, *values)

    def lpop(self, key: str) -> str | None:
        return self.execute_command("LPOP", key)

    def llen(self, key: str) -> int:
        return self.execute_command("LLEN", key)

    def lrange(self, key: str, start: int, end: int) -> list[str]:
        """Elements ``start`` through ``end`` inclusive (negative counts from the tail)."""
        return self.execute_command("LRANGE", key, start, end)

    # -- Hashes --

    def hset(self, key: str, field: str, value: str) -> int:
        return self.execute_command("HSET", key, field, value)

    def hget(self, key: str, field: str) -> str | None:
        return self.execute_command("HGET", key, field)

    def hdel(self, key: str, *fields: str) -> int:
        return self.execute_command("HDEL", key, *fields)

    def hincrby(self, key: str, field: str, amount: int = 1) -> int:
        """Add ``amount`` to an integer field, treating a missing field as 0."""
        return self.execute_command("HINCRBY", key, field, amount)

    def hgetall(self, key: str) -> dict[str, str]:
        return self.execute_command("HGETALL", key)

    # -- Sets --

    def sadd(self, key: str, *members: str) -> int:
        return self.execute_command("SADD", key, *members)

    def smembers(self, key: str) -> set[str]:
        return self.execute_command("SMEMBERS", key)

    def srem(self, key: str, *members: str) -> int:
        return self.execute_command("SREM", key, *members)

    # -- Transactions --

    def multi(self) -> Transaction:
        """Open a transaction on the store.

        Raises:
            TransactionModeViolation: If a transaction is already open.
        """
        return Transaction(self._store, self._resolve)

    def __getattr__(self, attr: str) -> Callable[..., Any]:
        return stub_for_attribute(self, attr)
