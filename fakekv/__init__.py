"""fakekv: in-process, type-checked stand-in for a Redis client."""

from .client import Client
from .commands import COMMANDS, Command
from .db import Mode, Store
from .entries import Entry, HashValue, ListValue, SetValue, StringValue
from .errors import (
    ErrorKind,
    FakeKVError,
    NotAnInteger,
    ResultNotReady,
    TransactionExecutionFault,
    TransactionModeViolation,
    TypeMismatch,
    Unsupported,
)
from .store import Commands, client
from .transaction import Result, Transaction, TxState
from .unsupported import UNSUPPORTED_COMMANDS

__all__ = [
    "COMMANDS",
    "Client",
    "Command",
    "Commands",
    "Entry",
    "ErrorKind",
    "FakeKVError",
    "HashValue",
    "ListValue",
    "Mode",
    "NotAnInteger",
    "Result",
    "ResultNotReady",
    "SetValue",
    "Store",
    "StringValue",
    "Transaction",
    "TransactionExecutionFault",
    "TransactionModeViolation",
    "TxState",
    "TypeMismatch",
    "UNSUPPORTED_COMMANDS",
    "Unsupported",
    "client",
]
