from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, List

from arraykit.Support.Containers import (
    MISSING,
    accessible,
    fetch,
    has_attribute,
    is_mutable_mapping,
    is_object,
    keys_of,
    resolve_key,
    resolve_segment,
    unwrap,
    values_of,
)
from arraykit.Support.KeyPath import KeyPath
from arraykit.Types import ArrayKey, KeyInput

logger = logging.getLogger(__name__)


def value(default: Any) -> Any:
    """Return the default value of the given value, calling it if it is a producer."""
    return default() if callable(default) else default


def collapse(results: List[Any]) -> List[Any]:
    """Concatenate the container items of a list, dropping everything else."""
    collapsed: List[Any] = []
    for item in results:
        if accessible(item):
            collapsed.extend(values_of(item))
    return collapsed


class Accessor:
    """Read, existence and removal operations over dot-notation paths."""

    @staticmethod
    def get(target: Any, keys: Any = None, default: Any = None) -> Any:
        """Get one or multiple items using dot notation.

        ``None`` returns the whole container. A list of keys returns a dict of
        key to value sharing ``default``; a mapping of key to default returns
        a dict using each key's own default.
        """
        if keys is None:
            return target

        if isinstance(keys, Mapping):
            return {key: Accessor.get_value(target, key, fallback) for key, fallback in keys.items()}

        if isinstance(keys, (list, tuple)):
            return {key: Accessor.get_value(target, key, default) for key in keys}

        return Accessor.get_value(target, keys, default)

    @staticmethod
    def get_value(target: Any, key: ArrayKey, default: Any = None) -> Any:
        """Resolve a single key against the target."""
        found = fetch(target, key)
        if found is not MISSING:
            return found

        if not isinstance(key, str) or '.' not in key:
            return value(default)

        return Accessor.traverse(target, KeyPath.parse(key), default)

    @staticmethod
    def traverse(target: Any, path: KeyPath, default: Any = None) -> Any:
        """Walk the path segment by segment, stopping at the first miss."""
        for index, segment in enumerate(path):
            if segment.is_wildcard:
                return Accessor._fan_out(target, path[index + 1:], default)

            if segment.is_position:
                target = unwrap(target)

            key = resolve_segment(segment, target)
            if key is MISSING:
                return value(default)

            target = fetch(target, key)
            if target is MISSING:
                return value(default)

        return target

    @staticmethod
    def _fan_out(target: Any, rest: KeyPath, default: Any) -> Any:
        items = unwrap(target)
        if not accessible(items):
            return value(default)

        results = [Accessor.traverse(item, rest, default) for item in values_of(items)]

        # Every further wildcard would nest the results one level deeper
        if rest.has_wildcard():
            results = collapse(results)

        return results

    @staticmethod
    def has(target: Any, keys: KeyInput) -> bool:
        """Determine if every given key exists using dot notation."""
        if keys is None or keys == '' or (isinstance(keys, (list, tuple)) and not keys):
            return False
        if accessible(target) and not len(target):
            return False

        candidates = list(keys) if isinstance(keys, (list, tuple)) else [keys]
        for key in candidates:
            if fetch(target, key) is not MISSING:
                continue
            if not isinstance(key, str) or '.' not in key:
                return False
            if not Accessor.exists_at(target, KeyPath.parse(key)):
                return False

        return True

    @staticmethod
    def has_any(target: Any, keys: KeyInput) -> bool:
        """Determine if at least one of the given keys exists."""
        if keys is None or keys == '' or (isinstance(keys, (list, tuple)) and not keys):
            return False

        candidates = list(keys) if isinstance(keys, (list, tuple)) else [keys]
        return any(Accessor.has(target, key) for key in candidates)

    @staticmethod
    def exists_at(target: Any, path: KeyPath) -> bool:
        """Check that a value, possibly ``None``, sits at the end of the path.

        A wildcard requires a non-empty container whose every element holds
        the remaining path.
        """
        for index, segment in enumerate(path):
            if segment.is_wildcard:
                items = unwrap(target)
                if not accessible(items) or not len(items):
                    return False
                rest = path[index + 1:]
                return all(Accessor.exists_at(item, rest) for item in values_of(items))

            if segment.is_position:
                target = unwrap(target)

            key = resolve_segment(segment, target)
            if key is MISSING:
                return False

            target = fetch(target, key)
            if target is MISSING:
                return False

        return True

    @staticmethod
    def pluck(target: Any, keys: KeyInput, default: Any = None) -> Dict[Any, Any]:
        """Pluck one or more values, keyed by the requested key strings."""
        if keys is None:
            return {}
        candidates = list(keys) if isinstance(keys, (list, tuple)) else [keys]
        return {key: Accessor.get(target, key, default) for key in candidates}

    @staticmethod
    def forget(target: Any, keys: KeyInput) -> None:
        """Remove one or many items using dot notation.

        A wildcard applies the rest of the path to every element; a trailing
        wildcard removes nothing. Missing or non-container intermediates
        simply skip that key. Removing any list index but the last turns that
        list into an index-keyed dict in its parent, so the other indices keep
        pointing at the same values.
        """
        if keys is None or (isinstance(keys, (list, tuple)) and not keys):
            return

        candidates = list(keys) if isinstance(keys, (list, tuple)) else [keys]
        if isinstance(target, list):
            Accessor._forget_from_list(target, candidates)
            return

        for key in candidates:
            if accessible(target):
                resolved = resolve_key(target, key)
                if resolved is not MISSING:
                    Accessor._delete(target, resolved)
                    continue
            elif has_attribute(target, key):
                delattr(target, key)  # type: ignore[arg-type]
                continue

            Accessor._forget_path(target, KeyPath.parse(key))

    @staticmethod
    def _forget_from_list(target: List[Any], candidates: List[ArrayKey]) -> None:
        """Forget keys on a root list, which cannot be swapped for a dict.

        Direct indices are resolved against the list as given and removed from
        the end, after the nested paths have been handled.
        """
        indices = set()
        for key in candidates:
            index = Accessor._direct_index(target, key)
            if index is MISSING:
                Accessor._forget_path(target, KeyPath.parse(key))
            else:
                indices.add(index)

        for index in sorted(indices, reverse=True):
            del target[index]

    @staticmethod
    def _direct_index(target: List[Any], key: ArrayKey) -> Any:
        resolved = resolve_key(target, key)
        if resolved is not MISSING or not isinstance(key, str):
            return resolved

        path = KeyPath.parse(key)
        if len(path) != 1 or path.head.is_wildcard:
            return MISSING
        position = resolve_segment(path.head, target)
        return MISSING if position is MISSING else resolve_key(target, position)

    @staticmethod
    def _forget_path(target: Any, path: KeyPath) -> Any:
        """Remove the path below `target` and return the container for its slot."""
        segment = path.head
        rest = path.tail()

        if segment.is_wildcard:
            if accessible(target) and not rest.is_empty():
                for key in keys_of(target):
                    Accessor._forget_child(target, key, rest)
            return target

        key = resolve_segment(segment, target)
        if key is MISSING:
            return target

        if accessible(target):
            resolved = resolve_key(target, key)
            if resolved is MISSING:
                return target
            if rest.is_empty():
                return Accessor._delete(target, resolved)
            Accessor._forget_child(target, resolved, rest)
        elif is_object(target) and has_attribute(target, key):
            if rest.is_empty():
                delattr(target, key)  # type: ignore[arg-type]
            else:
                child = getattr(target, key)  # type: ignore[arg-type]
                updated = Accessor._forget_path(child, rest)
                if updated is not child:
                    setattr(target, key, updated)  # type: ignore[arg-type]
        return target

    @staticmethod
    def _forget_child(target: Any, key: ArrayKey, rest: KeyPath) -> None:
        child = target[key]
        updated = Accessor._forget_path(child, rest)
        if updated is child:
            return
        if isinstance(target, list) or is_mutable_mapping(target):
            target[key] = updated
        else:
            logger.debug("Skipping replacement of `%s` in read-only %s", key, type(target).__name__)

    @staticmethod
    def _delete(target: Any, key: ArrayKey) -> Any:
        """Remove `key` and return the container that now holds the rest."""
        if isinstance(target, list):
            if key == len(target) - 1:
                target.pop()
                return target
            promoted = dict(enumerate(target))
            del promoted[key]
            return promoted
        if is_mutable_mapping(target):
            del target[key]
        else:
            logger.debug("Skipping removal of `%s` from read-only %s", key, type(target).__name__)
        return target
