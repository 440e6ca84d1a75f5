"""Well-known commands that fakekv deliberately does not implement.

Clients expose each of these as an attribute (``client.rpush``) that
raises ``Unsupported`` naming the command, so a test that strays
outside the supported surface fails loudly instead of with an
``AttributeError``.
"""

import logging
from typing import Any, Callable, NoReturn

from .errors import Unsupported

logger = logging.getLogger(__name__)

KEYSPACE = (
    "TYPE", "RANDOMKEY", "RENAME", "RENAMENX", "MOVE", "DUMP", "RESTORE",
    "SCAN", "SORT", "TOUCH", "OBJECT", "COPY",
)
EXPIRY = (
    "EXPIRE", "EXPIREAT", "PEXPIRE", "PEXPIREAT", "TTL", "PTTL", "PERSIST",
)
STRINGS = (
    "GETSET", "GETDEL", "GETEX", "MGET", "MSET", "MSETNX", "SETEX", "PSETEX",
    "SETRANGE", "GETRANGE", "SUBSTR", "APPEND", "STRLEN", "INCR", "INCRBY",
    "INCRBYFLOAT", "DECR", "DECRBY", "SETBIT", "GETBIT", "BITCOUNT", "BITOP",
    "BITPOS",
)
LISTS = (
    "RPUSH", "RPOP", "LPUSHX", "RPUSHX", "LINDEX", "LSET", "LINSERT", "LREM",
    "LTRIM", "LPOS", "LMOVE", "RPOPLPUSH", "BLPOP", "BRPOP", "BRPOPLPUSH",
)
HASHES = (
    "HSETNX", "HMSET", "HMGET", "HLEN", "HKEYS", "HVALS", "HEXISTS",
    "HINCRBYFLOAT", "HSTRLEN", "HSCAN",
)
SETS = (
    "SISMEMBER", "SMISMEMBER", "SCARD", "SPOP", "SRANDMEMBER", "SMOVE",
    "SDIFF", "SDIFFSTORE", "SINTER", "SINTERSTORE", "SUNION", "SUNIONSTORE",
    "SSCAN",
)
SORTED_SETS = (
    "ZADD", "ZREM", "ZCARD", "ZCOUNT", "ZSCORE", "ZINCRBY", "ZRANK",
    "ZREVRANK", "ZRANGE", "ZREVRANGE", "ZRANGEBYSCORE", "ZREVRANGEBYSCORE",
    "ZREMRANGEBYRANK", "ZREMRANGEBYSCORE", "ZUNIONSTORE", "ZINTERSTORE",
    "ZRANGEBYLEX", "ZREVRANGEBYLEX", "ZLEXCOUNT", "ZREMRANGEBYLEX", "ZSCAN",
)
HYPERLOGLOG = ("PFADD", "PFCOUNT", "PFMERGE")
GEO = ("GEOADD", "GEODIST", "GEOHASH", "GEOPOS", "GEORADIUS", "GEORADIUSBYMEMBER")
PUBSUB = ("PUBLISH", "SUBSCRIBE", "UNSUBSCRIBE", "PSUBSCRIBE", "PUNSUBSCRIBE", "PUBSUB")
SCRIPTING = ("EVAL", "EVALSHA", "SCRIPT")
TRANSACTIONS = ("WATCH", "UNWATCH")
SERVER = (
    "AUTH", "PING", "ECHO", "SELECT", "SWAPDB", "DBSIZE", "FLUSHDB", "FLUSHALL",
    "INFO", "CONFIG", "SAVE", "BGSAVE", "BGREWRITEAOF", "LASTSAVE", "SHUTDOWN",
    "SLAVEOF", "REPLICAOF", "SYNC", "MONITOR", "DEBUG", "SLOWLOG", "TIME",
    "CLIENT", "CLUSTER", "WAIT", "MIGRATE", "QUIT",
)

UNSUPPORTED_COMMANDS: frozenset[str] = frozenset(
    KEYSPACE
    + EXPIRY
    + STRINGS
    + LISTS
    + HASHES
    + SETS
    + SORTED_SETS
    + HYPERLOGLOG
    + GEO
    + PUBSUB
    + SCRIPTING
    + TRANSACTIONS
    + SERVER
)


def stub(name: str) -> Callable[..., NoReturn]:
    """A callable that rejects every call with ``Unsupported(name)``."""

    def rejected(*args: Any, **kwargs: Any) -> NoReturn:
        logger.debug("Rejected unsupported command %s", name)
        raise Unsupported(name)

    rejected.__name__ = name.lower()
    return rejected


def stub_for_attribute(owner: object, attr: str) -> Callable[..., NoReturn]:
    """Resolve ``owner.attr`` for an unsupported command name.

    Raises:
        AttributeError: If ``attr`` is not a known unsupported command.
    """
    name = attr.upper()
    if attr.startswith("_") or name not in UNSUPPORTED_COMMANDS:
        raise AttributeError(
            f"{type(owner).__name__!r} object has no attribute {attr!r}"
        )
    return stub(name)
