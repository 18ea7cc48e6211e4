"""Value types for YAML-to-JSON conversion."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Iterator, Union


class _Null:
    """Singleton for the JSON ``null`` value."""

    _instance: "_Null | None" = None

    def __new__(cls) -> "_Null":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Null"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "null"


Null = _Null()


@dataclass(frozen=True, slots=True)
class VBool:
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower()


@dataclass(frozen=True, slots=True)
class VInt:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class VFloat:
    value: float

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True, slots=True)
class VString:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(slots=True)
class VMapping:
    entries: dict[str, "Value"] = field(default_factory=dict)

    def get(self, key: str, default: "Value | None" = None) -> "Value | None":
        return self.entries.get(key, default)

    def __getitem__(self, key: str) -> "Value":
        return self.entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __str__(self) -> str:
        return "{" + ", ".join(f"{json.dumps(k)}: {_inline(v)}" for k, v in self.entries.items()) + "}"


@dataclass(slots=True)
class VSequence:
    items: list["Value"] = field(default_factory=list)

    def __getitem__(self, index: int) -> "Value":
        return self.items[index]

    def __iter__(self) -> Iterator["Value"]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        return "[" + ", ".join(_inline(v) for v in self.items) + "]"


def _inline(value: "Value") -> str:
    if isinstance(value, VString):
        return json.dumps(value.value)
    return str(value)


Scalar = Union[VBool, VInt, VFloat, VString, _Null]
Value = Union[VBool, VInt, VFloat, VString, VMapping, VSequence, _Null]

SCALAR_TYPES = (VBool, VInt, VFloat, VString, _Null)
VALUE_TYPES = (VBool, VInt, VFloat, VString, VMapping, VSequence, _Null)
