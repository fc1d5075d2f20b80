from __future__ import annotations

import re
from collections.abc import Mapping, MutableMapping
from typing import Any, List, Optional

from arraykit.Support.KeyPath import Segment, SegmentKind
from arraykit.Types import ArrayKey

_INDEX_PATTERN = re.compile(r'^(0|-?[1-9][0-9]*)$')
_SCALARS = (str, bytes, bytearray, int, float, complex, bool, tuple, set, frozenset)


class _Missing:
    """Marker for a lookup that found nothing."""

    __slots__ = ()

    _instance: Optional[_Missing] = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return '<MISSING>'


MISSING: Any = _Missing()


def accessible(value: Any) -> bool:
    """Determine whether the given value is array accessible."""
    return isinstance(value, (Mapping, list))


def is_object(value: Any) -> bool:
    """Determine whether the value exposes named attributes we can walk."""
    if value is None or value is MISSING or accessible(value) or isinstance(value, _SCALARS):
        return False
    return hasattr(value, '__dict__') or hasattr(type(value), '__slots__')


def is_container(value: Any) -> bool:
    return accessible(value) or is_object(value)


def unwrap(value: Any) -> Any:
    """Return the underlying data of a collection-like object."""
    if accessible(value):
        return value
    method = getattr(value, 'all', None)
    if callable(method):
        items = method()
        if accessible(items):
            return items
    return value


def as_index(key: Any) -> Optional[int]:
    """Interpret a key as an integer index, if it looks like one."""
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key
    if isinstance(key, str) and _INDEX_PATTERN.match(key):
        return int(key)
    return None


def resolve_key(target: Any, key: ArrayKey) -> Any:
    """Find the key actually stored in ``target`` that ``key`` refers to.

    Numeric strings and integers address the same mapping entry; lists only
    accept in-range, non-negative indices.
    """
    if isinstance(target, Mapping):
        if key in target:
            return key
        if isinstance(key, str):
            index = as_index(key)
            if index is not None and index in target:
                return index
        elif isinstance(key, int) and str(key) in target:
            return str(key)
        return MISSING

    if isinstance(target, list):
        index = as_index(key)
        if index is not None and 0 <= index < len(target):
            return index
        return MISSING

    return MISSING


def exists(target: Any, key: ArrayKey) -> bool:
    """Determine if the given key exists in the provided array."""
    return resolve_key(target, key) is not MISSING


def has_attribute(target: Any, name: ArrayKey) -> bool:
    return isinstance(name, str) and is_object(target) and hasattr(target, name)


def fetch(target: Any, key: ArrayKey) -> Any:
    """Read one step from a mapping, list or object, or ``MISSING``."""
    if accessible(target):
        resolved = resolve_key(target, key)
        return MISSING if resolved is MISSING else target[resolved]
    if has_attribute(target, key):
        return getattr(target, key)  # type: ignore[arg-type]
    return MISSING


def keys_of(target: Any) -> List[Any]:
    target = unwrap(target)
    if isinstance(target, Mapping):
        return list(target.keys())
    if isinstance(target, list):
        return list(range(len(target)))
    return []


def values_of(target: Any) -> List[Any]:
    target = unwrap(target)
    if isinstance(target, Mapping):
        return list(target.values())
    if isinstance(target, list):
        return list(target)
    return []


def resolve_segment(segment: Segment, target: Any) -> Any:
    """Turn a segment into a concrete key for ``target``.

    ``{first}`` and ``{last}`` resolve against the current container and give
    ``MISSING`` when it is empty or cannot be enumerated.
    """
    if segment.kind is SegmentKind.LITERAL:
        return segment.key

    keys = keys_of(target)
    if not keys:
        return MISSING
    return keys[0] if segment.kind is SegmentKind.FIRST else keys[-1]


def is_mutable_mapping(value: Any) -> bool:
    return isinstance(value, MutableMapping)
