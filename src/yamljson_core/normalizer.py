"""Normalizer: loosely-typed Python data → Value trees, and back."""

from __future__ import annotations

import numbers
from collections.abc import Mapping, Sequence, Set

from .values import (
    Null,
    SCALAR_TYPES,
    Value,
    VBool,
    VFloat,
    VInt,
    VMapping,
    VSequence,
    VString,
    _Null,
)


def normalize(obj: object) -> Value:
    """Convert *obj* into a Value tree.

    - Mappings → VMapping with string keys, source order kept
    - Lists, tuples, sets and other sequences → VSequence
    - None / bool / int / float / Decimal / str → the matching scalar
    - Existing Values are rebuilt, so normalizing twice changes nothing
    - Anything else → VString of ``str(obj)``

    Never raises. Cyclic input does not terminate.
    """
    if isinstance(obj, SCALAR_TYPES):
        return obj
    if isinstance(obj, VMapping):
        return VMapping({k: normalize(v) for k, v in obj.entries.items()})
    if isinstance(obj, VSequence):
        return VSequence([normalize(v) for v in obj.items])

    if obj is None:
        return Null
    # bool is an int subclass
    if isinstance(obj, bool):
        return VBool(obj)
    if isinstance(obj, numbers.Integral):
        return VInt(int(obj))
    if isinstance(obj, numbers.Real):
        return VFloat(float(obj))
    if isinstance(obj, str):
        return VString(obj)

    if isinstance(obj, Mapping):
        return VMapping({_key_to_str(k): normalize(v) for k, v in obj.items()})
    if isinstance(obj, (Sequence, Set)) and not isinstance(obj, (bytes, bytearray)):
        return VSequence([normalize(v) for v in obj])

    return VString(str(obj))


def _key_to_str(key: object) -> str:
    if isinstance(key, str):
        return key
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    # Value scalars render as their JSON-ish text
    return str(key)


def to_python(value: Value) -> object:
    """Convert a Value tree into plain dicts, lists and scalars."""
    if isinstance(value, _Null):
        return None
    if isinstance(value, (VBool, VInt, VFloat, VString)):
        return value.value
    if isinstance(value, VMapping):
        return {k: to_python(v) for k, v in value.entries.items()}
    if isinstance(value, VSequence):
        return [to_python(v) for v in value.items]
    raise TypeError(f"not a Value: {value!r}")
