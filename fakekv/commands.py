"""Command handlers and the registry that names them.

Every handler takes the ``Store`` as its first argument and assumes
the caller holds ``store.lock`` for the whole call. The client and the
transaction engine are the only callers.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable

from .db import Store
from .entries import HashValue, ListValue, SetValue, StringValue
from .errors import NotAnInteger, Unsupported

logger = logging.getLogger(__name__)

Handler = Callable[..., Any]

INTEGER_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Command:
    """A registered command: its upper-case name and handler."""

    name: str
    handler: Handler

    def __call__(self, store: Store, *args: Any) -> Any:
        return self.handler(store, *args)


COMMANDS: dict[str, Command] = {}


def command(name: str) -> Callable[[Handler], Handler]:
    """Register ``fn`` as the handler for ``name``."""

    def decorator(fn: Handler) -> Handler:
        COMMANDS[name] = Command(name, fn)
        return fn

    return decorator


def lookup(name: str) -> Command:
    """Resolve a command by name (case-insensitive).

    Raises:
        Unsupported: If no handler is registered under ``name``.
    """
    cmd = COMMANDS.get(name.upper())
    if cmd is None:
        logger.debug("Rejected unsupported command %s", name.upper())
        raise Unsupported(name.upper())
    return cmd


def _check_str(*values: Any) -> None:
    for value in values:
        if not isinstance(value, str):
            raise TypeError(f"Expected str, got {type(value).__name__}")


# -- Keys and strings --


@command("SET")
def set_(store: Store, key: str, value: str) -> str:
    _check_str(key, value)
    store.put(key, StringValue(value))
    return "OK"


@command("GET")
def get(store: Store, key: str) -> str | None:
    _check_str(key)
    entry = store.get_typed(key, StringValue)
    return None if entry is None else entry.value


@command("SETNX")
def setnx(store: Store, key: str, value: str) -> int:
    _check_str(key, value)
    if store.get_typed(key, StringValue) is not None:
        return 0
    store.put(key, StringValue(value))
    return 1


@command("DEL")
def delete(store: Store, *keys: str) -> int:
    _check_str(*keys)
    return sum(1 for key in keys if store.delete(key))


@command("UNLINK")
def unlink(store: Store, *keys: str) -> int:
    return delete(store, *keys)


@command("EXISTS")
def exists(store: Store, key: str) -> bool:
    _check_str(key)
    return store.exists(key)


@command("KEYS")
def keys(store: Store, pattern: str) -> set[str]:
    _check_str(pattern)
    return store.keys_matching(pattern)


# -- Lists --


@command("LPUSH")
def lpush(store: Store, key: str, *values: str) -> int:
    _check_str(key, *values)
    entry = store.get_or_create_typed(key, ListValue)
    entry.items.extendleft(values)
    return len(entry)


@command("LPOP")
def lpop(store: Store, key: str) -> str | None:
    _check_str(key)
    entry = store.get_typed(key, ListValue)
    if entry is None or not entry.items:
        return None
    return entry.items.popleft()


@command("LLEN")
def llen(store: Store, key: str) -> int:
    _check_str(key)
    entry = store.get_typed(key, ListValue)
    return 0 if entry is None else len(entry)


@command("LRANGE")
def lrange(store: Store, key: str, start: int, end: int) -> list[str]:
    """Inclusive slice of the list; negative indices count from the tail."""
    _check_str(key)
    entry = store.get_typed(key, ListValue)
    if entry is None:
        return []
    size = len(entry)
    end += 1  # inclusive
    if start < 0:
        start += size
    if end < 1:
        end += size
    if start > end:
        return []
    start = max(0, start)
    end = max(0, min(size, end))
    return list(entry.items)[start:end]


# -- Hashes --


@command("HSET")
def hset(store: Store, key: str, field: str, value: str) -> int:
    _check_str(key, field, value)
    entry = store.get_or_create_typed(key, HashValue)
    created = field not in entry.fields
    entry.fields[field] = value
    return 1 if created else 0


@command("HGET")
def hget(store: Store, key: str, field: str) -> str | None:
    _check_str(key, field)
    entry = store.get_typed(key, HashValue)
    return None if entry is None else entry.fields.get(field)


@command("HDEL")
def hdel(store: Store, key: str, *fields: str) -> int:
    _check_str(key, *fields)
    entry = store.get_typed(key, HashValue)
    if entry is None:
        return 0
    return sum(1 for field in fields if entry.fields.pop(field, None) is not None)


@command("HINCRBY")
def hincrby(store: Store, key: str, field: str, amount: int) -> int:
    _check_str(key, field)
    if not isinstance(amount, int) or isinstance(amount, bool):
        raise TypeError(f"Expected int, got {type(amount).__name__}")
    entry = store.get_or_create_typed(key, HashValue)
    current = entry.fields.get(field)
    value = amount
    if current is not None:
        if not INTEGER_RE.fullmatch(current):
            raise NotAnInteger(key, field)
        value += int(current)
    entry.fields[field] = str(value)
    return value


@command("HGETALL")
def hgetall(store: Store, key: str) -> dict[str, str]:
    _check_str(key)
    entry = store.get_typed(key, HashValue)
    return {} if entry is None else dict(entry.fields)


# -- Sets --


@command("SADD")
def sadd(store: Store, key: str, *members: str) -> int:
    _check_str(key, *members)
    entry = store.get_or_create_typed(key, SetValue)
    before = len(entry.members)
    entry.members.update(members)
    return len(entry.members) - before


@command("SMEMBERS")
def smembers(store: Store, key: str) -> set[str]:
    _check_str(key)
    entry = store.get_typed(key, SetValue)
    return set() if entry is None else set(entry.members)


def smembers_creating(store: Store, key: str) -> set[str]:
    """SMEMBERS that leaves an empty set behind for an absent key."""
    _check_str(key)
    return set(store.get_or_create_typed(key, SetValue).members)


LAZY_SMEMBERS = Command("SMEMBERS", smembers_creating)


@command("SREM")
def srem(store: Store, key: str, *members: str) -> int:
    _check_str(key, *members)
    entry = store.get_typed(key, SetValue)
    if entry is None:
        return 0
    removed = 0
    for member in members:
        if member in entry.members:
            entry.members.remove(member)
            removed += 1
    return removed
