"""Entry variants: the typed values held per key."""

from collections import deque
from dataclasses import dataclass, field
from typing import ClassVar, Union


@dataclass(frozen=True)
class StringValue:
    """A plain string. Replaced wholesale on write."""

    kind: ClassVar[str] = "string"

    value: str = ""


@dataclass
class ListValue:
    """An ordered list; the head is ``items[0]``."""

    kind: ClassVar[str] = "list"

    items: deque[str] = field(default_factory=deque)

    def __len__(self) -> int:
        return len(self.items)


@dataclass
class HashValue:
    """A field -> value mapping."""

    kind: ClassVar[str] = "hash"

    fields: dict[str, str] = field(default_factory=dict)


@dataclass
class SetValue:
    """An unordered collection of unique members."""

    kind: ClassVar[str] = "set"

    members: set[str] = field(default_factory=set)


Entry = Union[StringValue, ListValue, HashValue, SetValue]
