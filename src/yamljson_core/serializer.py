"""Serializer: Value trees → JSON text, with per-field transforms.

Fields are described once by a :class:`SerializationSchema` that the caller
builds and passes to :func:`dumps`. A field marked ``sensitive`` has its
non-empty string values passed through a transform (masking by default;
an encrypting callable can be supplied instead).
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field

from .converter import decode
from .errors import ParseError, YamlJsonError
from .normalizer import normalize, to_python
from .values import Value, VMapping, VSequence, VString

MASK = "***"

DEFAULT_SENSITIVE_FIELDS = (
    "Username",
    "Password",
    "AccessToken",
    "AccessKey",
    "SecretKey",
    "Passphrase",
)

Transform = Callable[[str], str]


def mask(value: str) -> str:
    return MASK


@dataclass(frozen=True)
class FieldSpec:
    name: str
    sensitive: bool = False


@dataclass(frozen=True)
class SerializationSchema:
    """Field descriptors keyed by exact (case-sensitive) field name."""

    fields: Mapping[str, FieldSpec] = field(default_factory=dict)

    @classmethod
    def of(cls, *specs: FieldSpec) -> SerializationSchema:
        return cls({spec.name: spec for spec in specs})

    @classmethod
    def with_sensitive(cls, names: Iterable[str] = DEFAULT_SENSITIVE_FIELDS) -> SerializationSchema:
        return cls.of(*(FieldSpec(name, sensitive=True) for name in names))

    def is_sensitive(self, name: str) -> bool:
        spec = self.fields.get(name)
        return spec is not None and spec.sensitive


_EMPTY_SCHEMA = SerializationSchema()


def dumps(
    value: object,
    schema: SerializationSchema | None = None,
    *,
    transform: Transform = mask,
    indent: int | None = None,
) -> str:
    """Serialize *value* to JSON text, applying *transform* to sensitive fields.

    *value* may be a Value tree or anything :func:`normalize` accepts. Key
    order is preserved. Strings nested anywhere under a sensitive key are
    transformed; empty strings and non-string values are left alone.

    Raises YamlJsonError for NaN or infinite floats, which JSON cannot hold.
    """
    data = _prepare(normalize(value), schema or _EMPTY_SCHEMA, transform, sensitive=False)
    try:
        return json.dumps(data, indent=indent, ensure_ascii=False, allow_nan=False)
    except ValueError as exc:
        raise YamlJsonError(f"value cannot be written as JSON: {exc}") from exc


def _prepare(value: Value, schema: SerializationSchema, transform: Transform, sensitive: bool) -> object:
    if isinstance(value, VMapping):
        return {
            key: _prepare(item, schema, transform, sensitive or schema.is_sensitive(key))
            for key, item in value.entries.items()
        }
    if isinstance(value, VSequence):
        return [_prepare(item, schema, transform, sensitive) for item in value.items]
    if sensitive and isinstance(value, VString) and value.value:
        return transform(value.value)
    return to_python(value)


def loads(text: str | bytes) -> Value:
    """Parse JSON text (or UTF-8 bytes) into a Value tree."""
    text = decode(text)
    try:
        return normalize(json.loads(text))
    except json.JSONDecodeError as exc:
        raise ParseError(exc.msg, exc.lineno) from exc
