"""Transaction: queued commands replayed atomically on ``exec()``."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Generic, TypeVar

from .commands import Command
from .db import Store
from .errors import ResultNotReady, TransactionExecutionFault, TransactionModeViolation
from .unsupported import stub_for_attribute

logger = logging.getLogger(__name__)

T = TypeVar("T")

_UNSET: Any = object()


class TxState(Enum):
    QUEUING = "queuing"
    COMMITTED = "committed"
    DISCARDED = "discarded"
    FAILED = "failed"


class Result(Generic[T]):
    """Deferred outcome of one queued command.

    ``get()`` raises ``ResultNotReady`` until the owning transaction
    has executed the command.
    """

    def __init__(self, command: str) -> None:
        self.command = command
        self._value: Any = _UNSET

    @property
    def ready(self) -> bool:
        return self._value is not _UNSET

    def get(self) -> T:
        if self._value is _UNSET:
            raise ResultNotReady(self.command)
        return self._value

    def _resolve(self, value: T) -> None:
        self._value = value

    def __repr__(self) -> str:
        if not self.ready:
            return f"<Result {self.command} pending>"
        return f"<Result {self.command} {self._value!r}>"


class Transaction:
    """A batch of commands executed atomically against a ``Store``.

    Opening a transaction switches the store into transaction mode;
    direct commands on any client sharing the store are rejected until
    ``exec()`` or ``discard()``. Command methods only record the
    command and its arguments and return a pending ``Result``.

    ``exec()`` holds the store lock for the whole batch, so other
    threads never observe a partially applied transaction.
    """

    def __init__(
        self,
        store: Store,
        resolve: Callable[[str], Command],
    ) -> None:
        self._store = store
        self._resolve = resolve
        self._queue: list[tuple[Command, tuple[Any, ...], Result[Any]]] = []
        store._begin_transaction()
        self._state = TxState.QUEUING
        logger.debug("Opened transaction on store %#x", id(store))

    @property
    def state(self) -> TxState:
        return self._state

    def __len__(self) -> int:
        return len(self._queue)

    # -- Queuing --

    def execute_command(self, name: str, *args: Any) -> Result[Any]:
        """Queue ``name`` with ``args``. Returns a pending ``Result``.

        Raises:
            Unsupported: If ``name`` is not a supported command.
            TransactionModeViolation: If the transaction is finished.
        """
        self._check_open()
        cmd = self._resolve(name)
        result: Result[Any] = Result(cmd.name)
        self._queue.append((cmd, args, result))
        return result

    def set(self, key: str, value: str) -> Result[str]:
        return self.execute_command("SET", key, value)

    def get(self, key: str) -> Result[str | None]:
        return self.execute_command("GET", key)

    def setnx(self, key: str, value: str) -> Result[int]:
        return self.execute_command("SETNX", key, value)

    def delete(self, *keys: str) -> Result[int]:
        return self.execute_command("DEL", *keys)

    def unlink(self, *keys: str) -> Result[int]:
        return self.execute_command("UNLINK", *keys)

    def exists(self, key: str) -> Result[bool]:
        return self.execute_command("EXISTS", key)

    def keys(self, pattern: str) -> Result[set[str]]:
        return self.execute_command("KEYS", pattern)

    def lpush(self, key: str, *values: str) -> Result[int]:
        return self.execute_command("LPUSH", key, *values)

    def lpop(self, key: str) -> Result[str | None]:
        return self.execute_command("LPOP", key)

    def llen(self, key: str) -> Result[int]:
        return self.execute_command("LLEN", key)

    def lrange(self, key: str, start: int, end: int) -> Result[list[str]]:
        return self.execute_command("LRANGE", key, start, end)

    def hset(self, key: str, field: str, value: str) -> Result[int]:
        return self.execute_command("HSET", key, field, value)

    def hget(self, key: str, field: str) -> Result[str | None]:
        return self.execute_command("HGET", key, field)

    def hdel(self, key: str, *fields: str) -> Result[int]:
        return self.execute_command("HDEL", key, *fields)

    def hincrby(self, key: str, field: str, amount: int = 1) -> Result[int]:
        return self.execute_command("HINCRBY", key, field, amount)

    def hgetall(self, key: str) -> Result[dict[str, str]]:
        return self.execute_command("HGETALL", key)

    def sadd(self, key: str, *members: str) -> Result[int]:
        return self.execute_command("SADD", key, *members)

    def smembers(self, key: str) -> Result[set[str]]:
        return self.execute_command("SMEMBERS", key)

    def srem(self, key: str, *members: str) -> Result[int]:
        return self.execute_command("SREM", key, *members)

    def __getattr__(self, attr: str) -> Callable[..., Any]:
        return stub_for_attribute(self, attr)

    # -- Exec / discard --

    def exec(self) -> list[Any]:
        """Run every queued command in order and return their results.

        Raises:
            TransactionExecutionFault: If a queued command fails. Commands
                queued before it keep their effects and results.
            TransactionModeViolation: If the transaction is finished.
        """
        results: list[Any] = []
        with self._store.lock:
            self._check_open()
            self._store._end_transaction()
            for index, (cmd, args, result) in enumerate(self._queue):
                try:
                    value = cmd(self._store, *args)
                except Exception as e:
                    self._state = TxState.FAILED
                    logger.error(
                        "Transaction command #%d (%s) failed: %s", index, cmd.name, e
                    )
                    raise TransactionExecutionFault(cmd.name, index) from e
                result._resolve(value)
                results.append(value)
            self._state = TxState.COMMITTED
        logger.debug("Executed transaction with %d commands", len(results))
        return results

    def discard(self) -> None:
        """Drop every queued command and leave transaction mode."""
        with self._store.lock:
            self._check_open()
            self._store._end_transaction()
            self._state = TxState.DISCARDED
            dropped = len(self._queue)
            self._queue.clear()
        logger.debug("Discarded transaction with %d commands", dropped)

    def _check_open(self) -> None:
        if self._state is not TxState.QUEUING:
            raise TransactionModeViolation(f"Transaction is already {self._state.value}")
