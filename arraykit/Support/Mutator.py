from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from arraykit.Support.Containers import (
    MISSING,
    accessible,
    as_index,
    is_container,
    is_mutable_mapping,
    is_object,
    keys_of,
    resolve_key,
    resolve_segment,
)
from arraykit.Support.KeyPath import KeyPath, Segment, SegmentKind
from arraykit.Types import ArrayKey

logger = logging.getLogger(__name__)


class Mutator:
    """Write operations over dot-notation paths.

    Writes walk forward creating missing intermediates. Each step returns the
    container that should live at that position, so a list that has to
    become a mapping, or a scalar that has to become a container, is swapped
    in by its parent.
    """

    @staticmethod
    def set(target: Any, keys: Any = None, value: Any = None, overwrite: bool = True) -> bool:
        """Set one or many items using dot notation."""
        if keys is None:
            Mutator.replace(target, value)
            return True

        if isinstance(keys, Mapping):
            for key, item in keys.items():
                Mutator.set_value(target, key, item, overwrite)
        else:
            Mutator.set_value(target, keys, value, overwrite)

        return True

    @staticmethod
    def fill(target: Any, keys: Any, value: Any = None) -> bool:
        """Set values only where nothing exists yet."""
        return Mutator.set(target, keys, value, overwrite=False)

    @staticmethod
    def set_value(target: Any, key: ArrayKey, value: Any, overwrite: bool = True) -> None:
        """Write a single key into the root container."""
        result = Mutator.assign(target, KeyPath.parse(key), value, overwrite)
        if result is not target:
            logger.warning(
                "Dropped write to `%s`: the root %s cannot be replaced in place",
                key,
                type(target).__name__,
            )

    @staticmethod
    def assign(target: Any, path: KeyPath, value: Any, overwrite: bool) -> Any:
        """Write ``value`` at ``path`` below ``target`` and return the container for this position."""
        segment = path.head
        rest = path.tail()

        if segment.is_wildcard:
            return Mutator._assign_each(target, rest, value, overwrite)

        if not is_container(target):
            target = Mutator._new_container(segment)

        key = resolve_segment(segment, target)
        if key is MISSING:
            return target

        if isinstance(target, list):
            return Mutator._assign_list(target, key, rest, value, overwrite)

        if isinstance(target, Mapping):
            if not is_mutable_mapping(target):
                logger.debug("Skipping write of `%s` into read-only %s", path, type(target).__name__)
                return target
            return Mutator._assign_mapping(target, key, rest, value, overwrite)

        return Mutator._assign_object(target, key, rest, value, overwrite)

    @staticmethod
    def _assign_mapping(target: Any, key: ArrayKey, rest: KeyPath, value: Any, overwrite: bool) -> Any:
        resolved = resolve_key(target, key)
        slot = key if resolved is MISSING else resolved

        if not rest.is_empty():
            child = MISSING if resolved is MISSING else target[resolved]
            updated = Mutator._descend(child, rest, value, overwrite)
            if updated is not child:
                target[slot] = updated
        elif overwrite or resolved is MISSING:
            target[slot] = value

        return target

    @staticmethod
    def _assign_list(target: Any, key: ArrayKey, rest: KeyPath, value: Any, overwrite: bool) -> Any:
        index = as_index(key)

        # Only dense writes keep the list a list
        if index is None or index < 0 or index > len(target):
            promoted = dict(enumerate(target))
            return Mutator._assign_mapping(promoted, key if index is None else index, rest, value, overwrite)

        if index == len(target):
            target.append(value if rest.is_empty() else Mutator._descend(MISSING, rest, value, overwrite))
            return target

        if not rest.is_empty():
            child = target[index]
            updated = Mutator._descend(child, rest, value, overwrite)
            if updated is not child:
                target[index] = updated
        elif overwrite:
            target[index] = value

        return target

    @staticmethod
    def _assign_object(target: Any, key: ArrayKey, rest: KeyPath, value: Any, overwrite: bool) -> Any:
        name = str(key)

        if not rest.is_empty():
            child = getattr(target, name, MISSING)
            updated = Mutator._descend(child, rest, value, overwrite)
            if updated is not child:
                setattr(target, name, updated)
        elif overwrite or not hasattr(target, name):
            setattr(target, name, value)

        return target

    @staticmethod
    def _assign_each(target: Any, rest: KeyPath, value: Any, overwrite: bool) -> Any:
        if is_object(target):
            return target
        if not accessible(target):
            return {}
        if not (isinstance(target, list) or is_mutable_mapping(target)):
            return target

        if not rest.is_empty():
            for key in keys_of(target):
                child = target[key]
                updated = Mutator._descend(child, rest, value, overwrite)
                if updated is not child:
                    target[key] = updated
        elif overwrite:
            for key in keys_of(target):
                target[key] = value

        return target

    @staticmethod
    def _descend(child: Any, rest: KeyPath, value: Any, overwrite: bool) -> Any:
        if not is_container(child):
            child = Mutator._new_container(rest.head)
        return Mutator.assign(child, rest, value, overwrite)

    @staticmethod
    def _new_container(segment: Segment) -> Any:
        """An empty list when the first key written into it is ``0``, else a dict."""
        if segment.kind is SegmentKind.LITERAL and as_index(segment.key) == 0:
            return []
        return {}

    @staticmethod
    def replace(target: Any, value: Any) -> None:
        """Replace the whole container in place with ``value`` coerced to its shape."""
        if is_mutable_mapping(target):
            target.clear()
            if isinstance(value, Mapping):
                target.update(value)
            elif isinstance(value, (list, tuple)):
                target.update(enumerate(value))
            elif value is not None:
                target[0] = value
        elif isinstance(target, list):
            if isinstance(value, Mapping):
                target[:] = list(value.values())
            elif isinstance(value, (list, tuple)):
                target[:] = list(value)
            else:
                target[:] = [] if value is None else [value]
        else:
            logger.warning("Cannot replace the contents of %s", type(target).__name__)
