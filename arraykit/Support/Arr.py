from __future__ import annotations

from typing import Any, Dict, List, Optional, Union, Callable, TypeVar
from collections.abc import Mapping
import copy
import random as _random

from arraykit.Support import Containers
from arraykit.Support.Accessor import Accessor, value as _value
from arraykit.Support.Exceptions import InvalidArgumentException
from arraykit.Support.Mutator import Mutator
from arraykit.Types import ArrayKey, KeyInput

T = TypeVar('T')


class Arr:
    """Laravel-style array helper class with dot notation support."""

    @staticmethod
    def get(data: Any, key: Any = None, default: Any = None) -> Any:
        """Get an item from an array using dot notation."""
        return Accessor.get(data, key, default)

    @staticmethod
    def set(data: Any, key: Any = None, value: Any = None, overwrite: bool = True) -> bool:
        """Set an array item to a given value using dot notation."""
        return Mutator.set(data, key, value, overwrite)

    @staticmethod
    def fill(data: Any, key: Any, value: Any = None) -> bool:
        """Fill in data where it's missing."""
        return Mutator.fill(data, key, value)

    @staticmethod
    def has(data: Any, keys: KeyInput) -> bool:
        """Check if every given item exists in an array using dot notation."""
        return Accessor.has(data, keys)

    @staticmethod
    def has_any(data: Any, keys: KeyInput) -> bool:
        """Check if any of the given items exists in an array using dot notation."""
        return Accessor.has_any(data, keys)

    @staticmethod
    def pluck(data: Any, keys: KeyInput, default: Any = None) -> Dict[Any, Any]:
        """Pluck the requested keys from an array, keyed by the requested key."""
        return Accessor.pluck(data, keys, default)

    @staticmethod
    def forget(data: Any, keys: KeyInput) -> None:
        """Remove one or many array items using dot notation."""
        Accessor.forget(data, keys)

    @staticmethod
    def flatten(data: Any, prepend: str = '') -> Dict[str, Any]:
        """Flatten a multi-dimensional associative array with dots.

        Empty nested containers are kept as leaves rather than dropped, so
        they survive a trip through ``expand``.
        """
        results: Dict[str, Any] = {}

        def _dot_recursive(container: Any, prefix: str) -> None:
            if isinstance(container, Mapping):
                pairs = list(container.items())
            else:
                pairs = list(enumerate(container))

            for key, value in pairs:
                if Containers.accessible(value) and len(value):
                    _dot_recursive(value, f"{prefix}{key}.")
                else:
                    results[f"{prefix}{key}"] = value

        if Containers.accessible(data):
            _dot_recursive(data, prepend)
        return results

    @staticmethod
    def expand(data: Mapping[str, Any]) -> Dict[Any, Any]:
        """Convert a flattened "dot" notation array back into an expanded array."""
        result: Dict[Any, Any] = {}
        for key, value in data.items():
            Mutator.set(result, key, value)
        return result

    @staticmethod
    def dot(data: Any, prepend: str = '') -> Dict[str, Any]:
        """Alias of ``flatten``."""
        return Arr.flatten(data, prepend)

    @staticmethod
    def undot(data: Mapping[str, Any]) -> Dict[Any, Any]:
        """Alias of ``expand``."""
        return Arr.expand(data)

    @staticmethod
    def string(data: Any, key: ArrayKey, default: Any = None) -> str:
        """Get a string item from an array using dot notation."""
        value = Arr.get(data, key, default)
        if not isinstance(value, str):
            raise InvalidArgumentException('str', value, str(key))
        return value

    @staticmethod
    def integer(data: Any, key: ArrayKey, default: Any = None) -> int:
        """Get an integer item from an array using dot notation."""
        value = Arr.get(data, key, default)
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidArgumentException('int', value, str(key))
        return value

    @staticmethod
    def float(data: Any, key: ArrayKey, default: Any = None) -> float:
        """Get a float item from an array using dot notation."""
        value = Arr.get(data, key, default)
        if not isinstance(value, float):
            raise InvalidArgumentException('float', value, str(key))
        return value

    @staticmethod
    def boolean(data: Any, key: ArrayKey, default: Any = None) -> bool:
        """Get a boolean item from an array using dot notation."""
        value = Arr.get(data, key, default)
        if not isinstance(value, bool):
            raise InvalidArgumentException('bool', value, str(key))
        return value

    @staticmethod
    def array_value(data: Any, key: ArrayKey, default: Any = None) -> Union[Dict[Any, Any], List[Any]]:
        """Get an array item (mapping or list) from an array using dot notation."""
        value = Arr.get(data, key, default)
        if not Containers.accessible(value):
            raise InvalidArgumentException('array', value, str(key))
        return value

    @staticmethod
    def all(data: T) -> T:
        """Get all of the given array."""
        return data

    @staticmethod
    def tap(data: T, callback: Callable[[T], Any]) -> T:
        """Pass the array to the given callback and return it."""
        callback(data)
        return data

    @staticmethod
    def pull(data: Any, key: ArrayKey, default: Any = None) -> Any:
        """Get a value from the array, and remove it."""
        value = Arr.get(data, key, default)
        Arr.forget(data, key)
        return value

    @staticmethod
    def add(data: Any, key: ArrayKey, value: Any) -> Any:
        """Add an element to an array using dot notation if it doesn't exist."""
        Arr.fill(data, key, value)
        return data

    @staticmethod
    def only(data: Any, keys: KeyInput) -> Dict[Any, Any]:
        """Get a subset of the items from the given array."""
        if keys is None:
            return {}
        if isinstance(keys, (str, int)):
            keys = [keys]

        result: Dict[Any, Any] = {}
        for key in keys:
            if Arr.has(data, key):
                Arr.set(result, key, copy.deepcopy(Arr.get(data, key)))
        return result

    @staticmethod
    def except_(data: Any, keys: KeyInput) -> Any:
        """Get all of the given array except for a specified array of keys."""
        result = copy.deepcopy(data)
        Arr.forget(result, keys)
        return result

    @staticmethod
    def accessible(value: Any) -> bool:
        """Determine whether the given value is array accessible."""
        return Containers.accessible(value)

    @staticmethod
    def exists(data: Any, key: ArrayKey) -> bool:
        """Determine if the given key exists in the provided array."""
        return Containers.exists(data, key)

    @staticmethod
    def value(value: Any) -> Any:
        """Return the value, calling it first if it is a producer."""
        return _value(value)

    @staticmethod
    def wrap(value: Any) -> List[Any]:
        """Wrap the given value in an array if it's not already an array."""
        if value is None:
            return []
        if isinstance(value, list):
            return value
        if isinstance(value, Mapping):
            return [value]
        if isinstance(value, tuple):
            return list(value)
        return [value]

    @staticmethod
    def unwrap(value: Any) -> Any:
        """Unwrap a single-item array into its only item."""
        if isinstance(value, list) and len(value) == 1:
            return value[0]
        if isinstance(value, Mapping) and len(value) == 1:
            return next(iter(value.values()))
        return value

    @staticmethod
    def is_multi_dimensional(value: Any) -> bool:
        """Determine if any item of the array is itself an array."""
        if not Containers.accessible(value):
            return False
        return any(Containers.accessible(item) for item in Containers.values_of(value))

    @staticmethod
    def find_key(data: Any, callback: Callable[[Any, Any], bool]) -> Optional[Any]:
        """Return the first key whose item passes the truth test."""
        for key in Containers.keys_of(data):
            if callback(data[key], key):
                return key
        return None

    @staticmethod
    def range(start: int, end: int, step: int = 1) -> List[int]:
        """Create an inclusive range of integers."""
        if step == 0:
            step = 1
        if start > end and step > 0:
            step = -step
        stop = end + (1 if step > 0 else -1)
        return list(range(start, stop, step))

    @staticmethod
    def times(number: int, callback: Optional[Callable[[int], T]] = None) -> List[Any]:
        """Create an array by invoking the callback a given number of times."""
        if number < 1:
            return []
        if callback is None:
            return list(range(1, number + 1))
        return [callback(i) for i in range(1, number + 1)]

    @staticmethod
    def random(data: Any, number: Optional[int] = None, preserve_keys: bool = False) -> Any:
        """Get one or a specified number of random values from an array."""
        keys = Containers.keys_of(data)
        if number is None:
            return data[_random.choice(keys)] if keys else None

        picked = sorted(_random.sample(keys, min(number, len(keys))), key=keys.index)
        if preserve_keys:
            return {key: data[key] for key in picked}
        return [data[key] for key in picked]
