"""Commands protocol and client factory function."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from .db import Store

if TYPE_CHECKING:
    from .transaction import Transaction


@runtime_checkable
class Commands(Protocol):
    """Protocol for the supported command surface.

    Implementations: ``Client``.
    """

    def execute_command(self, name: str, *args: Any) -> Any: ...
    def set(self, key: str, value: str) -> str: ...
    def get(self, key: str) -> str | None: ...
    def setnx(self, key: str, value: str) -> int: ...
    def delete(self, *keys: str) -> int: ...
    def unlink(self, *keys: str) -> int: ...
    def exists(self, key: str) -> bool: ...
    def keys(self, pattern: str = "*") -> set[str]: ...
    def lpush(self, key: str, *values: str) -> int: ...
    def lpop(self, key: str) -> str | None: ...
    def llen(self, key: str) -> int: ...
    def lrange(self, key: str, start: int, end: int) -> list[str]: ...
    def hset(self, key: str, field: str, value: str) -> int: ...
    def hget(self, key: str, field: str) -> str | None: ...
    def hdel(self, key: str, *fields: str) -> int: ...
    def hincrby(self, key: str, field: str, amount: int = 1) -> int: ...
    def hgetall(self, key: str) -> dict[str, str]: ...
    def sadd(self, key: str, *members: str) -> int: ...
    def smembers(self, key: str) -> set[str]: ...
    def srem(self, key: str, *members: str) -> int: ...
    def multi(self) -> Transaction: ...


def client(
    *,
    store: Store | None = None,
    lazy_smembers: bool = False,
) -> Commands:
    """Create a client with sensible defaults.

    Args:
        store: An existing ``Store`` to share. Clients over the same
            store see the same keys and the same transaction mode.
            Defaults to a fresh, empty store.
        lazy_smembers: When True, SMEMBERS on an absent key leaves an
            empty set behind, as older fakes did. Defaults to False:
            reads never create keys.

    Returns:
        A ``Client`` instance.
    """
    if store is not None and not isinstance(store, Store):
        raise ValueError(f"store must be a Store, got {type(store).__name__}")
    if not isinstance(lazy_smembers, bool):
        raise ValueError(f"lazy_smembers must be a bool, got {lazy_smembers!r}")

    from .client import Client

    return Client(store, lazy_smembers=lazy_smembers)
