"""fakekv error types."""

from enum import Enum

WRONGTYPE_MESSAGE = "WRONGTYPE Operation against a key holding the wrong kind of value"


class ErrorKind(Enum):
    """Machine-readable tag carried by every ``FakeKVError``."""

    TYPE_MISMATCH = "type_mismatch"
    NOT_AN_INTEGER = "not_an_integer"
    TRANSACTION_MODE = "transaction_mode"
    RESULT_NOT_READY = "result_not_ready"
    UNSUPPORTED = "unsupported"
    EXECUTION_FAULT = "execution_fault"


class FakeKVError(Exception):
    """Base class for all fakekv errors.

    Subclasses set ``kind`` so callers can branch on the failure
    without parsing messages.
    """

    kind: ErrorKind


class TypeMismatch(FakeKVError):
    """Raised when a command targets a key holding another variant.

    Nothing is mutated when this is raised.

    Attributes:
        key: The key that was accessed.
        expected: Variant name the command needed (e.g. ``"list"``).
        actual: Variant name currently stored at the key.
    """

    kind = ErrorKind.TYPE_MISMATCH

    def __init__(self, key: str, expected: str, actual: str) -> None:
        self.key = key
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{WRONGTYPE_MESSAGE} (key {key!r} holds {actual}, expected {expected})"
        )


class NotAnInteger(FakeKVError):
    """Raised by HINCRBY when the stored field is not a base-10 integer."""

    kind = ErrorKind.NOT_AN_INTEGER

    def __init__(self, key: str, field: str) -> None:
        self.key = key
        self.field = field
        super().__init__("ERR hash value is not an integer")


class TransactionModeViolation(FakeKVError):
    """Raised on misuse of the transaction mode.

    Either a direct command was issued while a transaction is open on
    the same store, a second transaction was opened, or a finished
    transaction was used again.
    """

    kind = ErrorKind.TRANSACTION_MODE


class ResultNotReady(FakeKVError):
    """Raised when a transaction result is read before ``exec()``."""

    kind = ErrorKind.RESULT_NOT_READY

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(
            f"Result of {command} is not available until the transaction is executed"
        )


class Unsupported(FakeKVError, NotImplementedError):
    """Raised for commands fakekv does not implement.

    Attributes:
        command: Upper-case name of the rejected command.
    """

    kind = ErrorKind.UNSUPPORTED

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"The command {command} is not supported by fakekv")


class TransactionExecutionFault(FakeKVError):
    """Raised when a queued command fails during ``exec()``.

    This is a hard failure, never retried. The underlying error is
    available as ``__cause__``.

    Attributes:
        command: Name of the failing command.
        index: Position of the failing command in the queue.
    """

    kind = ErrorKind.EXECUTION_FAULT

    def __init__(self, command: str, index: int) -> None:
        self.command = command
        self.index = index
        super().__init__(
            f"An error occurred while executing a transaction "
            f"(command #{index}: {command})"
        )
