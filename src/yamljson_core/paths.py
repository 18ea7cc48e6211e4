"""Dotted-path access and editing for Value trees.

Paths are dot-separated keys where any segment may carry an index, e.g.
``metadata.namespace`` or ``spec.template.spec.imagePullSecrets[0].name``.
Writers edit mappings and sequences in place.
"""

from __future__ import annotations

import re

from .errors import PathError
from .normalizer import normalize
from .values import Null, Value, VMapping, VSequence, VString

_INDEXED_SEGMENT_RE = re.compile(r"^(\w+)\[(\d+)\]$")


def parse_segment(part: str) -> tuple[str, int | None]:
    """Split ``name[3]`` into ``("name", 3)``; plain segments get index None."""
    match = _INDEXED_SEGMENT_RE.match(part)
    if match is None:
        return part, None
    return match.group(1), int(match.group(2))


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------

def get_path(root: Value, path: str) -> Value | None:
    """Resolve *path* from *root*; None when any step is missing."""
    current: Value | None = root
    for part in path.split("."):
        key, index = parse_segment(part)
        current = current.get(key) if isinstance(current, VMapping) else None
        if index is not None:
            if isinstance(current, VSequence) and index < len(current.items):
                current = current.items[index]
            else:
                current = None
        if current is None:
            return None
    return current


def try_get_string(root: Value, path: str) -> str | None:
    value = get_path(root, path)
    if isinstance(value, VString):
        return value.value
    return None


def get_required_string(root: Value, path: str) -> str:
    """Return the string at *path*; PathError when missing, not a string or blank."""
    value = try_get_string(root, path)
    if value is None or not value.strip():
        raise PathError(f"Required value '{path}' not found in document.")
    return value


# ---------------------------------------------------------------------------
# Writing
# ---------------------------------------------------------------------------

def set_path(root: VMapping, path: str, value: object) -> None:
    """Store *value* (normalized) at *path*, creating containers on the way.

    Non-mapping nodes met along the path are replaced by mappings; sequences
    are padded with ``Null`` up to the requested index.
    """
    if not isinstance(root, VMapping):
        raise PathError(f"Cannot set '{path}': root is not a mapping.")
    node = normalize(value)
    parts = path.split(".")
    current = root
    for i, part in enumerate(parts):
        is_last = i == len(parts) - 1
        key, index = parse_segment(part)

        if index is None:
            if is_last:
                current.entries[key] = node
                return
            current = _ensure_mapping(current, key)
            continue

        seq = current.entries.get(key)
        if not isinstance(seq, VSequence):
            seq = VSequence()
            current.entries[key] = seq
        while len(seq.items) <= index:
            seq.items.append(Null)
        if is_last:
            seq.items[index] = node
            return
        nxt = seq.items[index]
        if not isinstance(nxt, VMapping):
            nxt = VMapping()
            seq.items[index] = nxt
        current = nxt


def _ensure_mapping(parent: VMapping, key: str) -> VMapping:
    child = parent.entries.get(key)
    if not isinstance(child, VMapping):
        child = VMapping()
        parent.entries[key] = child
    return child


def ensure_object_path(root: VMapping, path: str) -> VMapping:
    """Return the mapping at *path*, creating any missing mappings."""
    current = root
    for part in path.split("."):
        if part:
            current = _ensure_mapping(current, part)
    return current


def ensure_array_path(root: VMapping, path: str) -> VSequence:
    """Return the sequence at *path*, creating parents and the sequence as needed.

    An empty path returns a new sequence that is not attached to *root*.
    """
    parts = [p for p in path.split(".") if p]
    if not parts:
        return VSequence()
    current = root
    for part in parts[:-1]:
        current = _ensure_mapping(current, part)
    return ensure_array(current, parts[-1])


def ensure_array(root: VMapping, key: str) -> VSequence:
    seq = root.entries.get(key)
    if not isinstance(seq, VSequence):
        seq = VSequence()
        root.entries[key] = seq
    return seq


# ---------------------------------------------------------------------------
# Named entries (``- name: ...`` lists)
# ---------------------------------------------------------------------------

def find_by_name(seq: VSequence, name: str) -> VMapping | None:
    """First mapping in *seq* whose ``name`` entry equals *name*."""
    for item in seq.items:
        if isinstance(item, VMapping) and item.get("name") == VString(name):
            return item
    return None


def has_named_object(seq: VSequence, name: str) -> bool:
    return find_by_name(seq, name) is not None


def ensure_named_object(seq: VSequence, name: str) -> VMapping:
    existing = find_by_name(seq, name)
    if existing is not None:
        return existing
    created = VMapping({"name": VString(name)})
    seq.items.append(created)
    return created


def ensure_env_var(env: VSequence, name: str, value: str) -> None:
    """Append ``{name, value}`` to *env* unless an entry with *name* exists."""
    if has_named_object(env, name):
        return
    env.items.append(VMapping({"name": VString(name), "value": VString(value)}))
