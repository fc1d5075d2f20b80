"""Single-dimension array helpers.

Every helper accepts either a list or a mapping. Helpers that filter or
reorder keep mapping keys in their result and return plain lists for list
input.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union
from collections.abc import Mapping
import random
import statistics

from arraykit.Support import Containers
from arraykit.Types import ArrayData, KeyedCallback


def _pairs(array: Any) -> List[Tuple[Any, Any]]:
    if isinstance(array, Mapping):
        return list(array.items())
    return list(enumerate(array))


def _build(array: Any, pairs: Iterable[Tuple[Any, Any]]) -> ArrayData:
    if isinstance(array, Mapping):
        return dict(pairs)
    return [value for _, value in pairs]


def _values(array: Any) -> List[Any]:
    return list(array.values()) if isinstance(array, Mapping) else list(array)


def _is_numeric(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ArrSingle:
    """Helpers for flat (one-dimensional) arrays."""

    @staticmethod
    def exists(array: Any, key: Any) -> bool:
        """Determine if the given key exists, even when its value is None."""
        return Containers.exists(array, key)

    @staticmethod
    def only(array: Any, keys: Union[Any, List[Any]]) -> ArrayData:
        """Keep only the given keys."""
        wanted = keys if isinstance(keys, (list, tuple)) else [keys]
        picked = [(key, value) for key, value in _pairs(array) if key in wanted or str(key) in wanted]
        return _build(array, picked)

    @staticmethod
    def separate(array: Any) -> Dict[str, List[Any]]:
        """Split an array into its keys and values."""
        pairs = _pairs(array)
        return {
            'keys': [key for key, _ in pairs],
            'values': [value for _, value in pairs],
        }

    @staticmethod
    def is_list(array: Any) -> bool:
        """Determine if the keys are the consecutive integers 0..n-1."""
        if isinstance(array, list):
            return len(array) > 0
        keys = list(array.keys())
        return bool(keys) and keys == list(range(len(keys)))

    @staticmethod
    def is_assoc(array: Any) -> bool:
        """Determine if an array is associative."""
        if isinstance(array, list):
            return False
        return list(array.keys()) != list(range(len(array)))

    @staticmethod
    def prepend(array: Any, value: Any, key: Any = None) -> ArrayData:
        """Push an item onto the beginning of an array."""
        if key is None:
            if isinstance(array, Mapping):
                shifted = [value] + [item for k, item in array.items() if isinstance(k, int)]
                named = {k: item for k, item in array.items() if not isinstance(k, int)}
                result: Dict[Any, Any] = dict(enumerate(shifted))
                result.update(named)
                return result
            return [value] + list(array)

        result = {key: value}
        for k, item in _pairs(array):
            result.setdefault(k, item)
        return result

    @staticmethod
    def is_positive(array: Any) -> bool:
        """Determine if all values are greater than zero."""
        values = _values(array)
        return bool(values) and min(values) > 0

    @staticmethod
    def is_negative(array: Any) -> bool:
        """Determine if all values are lower than zero."""
        values = _values(array)
        return bool(values) and max(values) < 0

    @staticmethod
    def shuffle(array: Any, seed: Optional[int] = None) -> List[Any]:
        """Shuffle the values, reproducibly when a seed is given."""
        values = _values(array)
        generator = random.Random(seed) if seed is not None else random
        generator.shuffle(values)
        return values

    @staticmethod
    def is_int(array: Any) -> bool:
        """Determine if every value is an integer."""
        return all(isinstance(value, int) and not isinstance(value, bool) for value in _values(array))

    @staticmethod
    def non_empty(array: Any) -> List[Any]:
        """Drop values whose string form is empty."""
        return [value for value in _values(array) if value is not None and str(value) != '']

    @staticmethod
    def avg(array: Any) -> Union[int, float]:
        values = _values(array)
        if not values:
            return 0
        return statistics.fmean(values)

    @staticmethod
    def is_unique(array: Any) -> bool:
        values = _values(array)
        seen: List[Any] = []
        for value in values:
            if value in seen:
                return False
            seen.append(value)
        return True

    @staticmethod
    def positive(array: Any) -> ArrayData:
        return ArrSingle.where(array, lambda value, key: _is_numeric(value) and value > 0)

    @staticmethod
    def negative(array: Any) -> ArrayData:
        return ArrSingle.where(array, lambda value, key: _is_numeric(value) and value < 0)

    @staticmethod
    def nth(array: Any, step: int, offset: int = 0) -> List[Any]:
        """Get every n-th value, starting from ``offset``."""
        if step <= 0:
            return []
        return [value for position, value in enumerate(_values(array)) if position % step == offset]

    @staticmethod
    def duplicates(array: Any) -> List[Any]:
        """Get the values that appear more than once."""
        counts: List[List[Any]] = []
        for value in _values(array):
            for entry in counts:
                if entry[0] == value:
                    entry[1] += 1
                    break
            else:
                counts.append([value, 1])
        return [value for value, count in counts if count > 1]

    @staticmethod
    def paginate(array: Any, page: int, per_page: int) -> ArrayData:
        """Get one page of items, keeping mapping keys."""
        start = max(0, (page - 1) * per_page)
        return _build(array, _pairs(array)[start:start + max(0, per_page)])

    @staticmethod
    def combine(keys: List[Any], values: List[Any]) -> Dict[Any, Any]:
        """Create an array by using one array for keys and another for its values."""
        size = min(len(keys), len(values))
        return dict(zip(keys[:size], values[:size]))

    @staticmethod
    def where(array: Any, callback: Optional[KeyedCallback] = None) -> ArrayData:
        """Filter the array using the given callback, or drop falsy values."""
        if callback is None:
            return _build(array, [(key, value) for key, value in _pairs(array) if value])
        return _build(array, [(key, value) for key, value in _pairs(array) if callback(value, key)])

    @staticmethod
    def search(array: Any, needle: Any) -> Optional[Any]:
        """Find the key of a value, or of the first item passing a callback."""
        for key, value in _pairs(array):
            if callable(needle):
                if needle(value, key) is True:
                    return key
            elif type(value) is type(needle) and value == needle:
                return key
        return None

    @staticmethod
    def chunk(array: Any, size: int, preserve_keys: bool = False) -> List[Any]:
        """Break the array into chunks; a non-positive size gives one chunk."""
        if size <= 0:
            return [array]

        pairs = _pairs(array)
        chunks: List[Any] = []
        for i in range(0, len(pairs), size):
            piece = pairs[i:i + size]
            chunks.append(dict(piece) if preserve_keys else [value for _, value in piece])
        return chunks

    @staticmethod
    def map(array: Any, callback: KeyedCallback) -> ArrayData:
        """Apply the callback to every value, keeping keys."""
        return _build(array, [(key, callback(value, key)) for key, value in _pairs(array)])

    @staticmethod
    def each(array: Any, callback: KeyedCallback) -> Any:
        """Run the callback over every item until it returns False."""
        for key, value in _pairs(array):
            if callback(value, key) is False:
                break
        return array

    @staticmethod
    def reduce(array: Any, callback: Callable[[Any, Any, Any], Any], initial: Any = None) -> Any:
        accumulator = initial
        for key, value in _pairs(array):
            accumulator = callback(accumulator, value, key)
        return accumulator

    @staticmethod
    def some(array: Any, callback: KeyedCallback) -> bool:
        return any(callback(value, key) for key, value in _pairs(array))

    @staticmethod
    def every(array: Any, callback: KeyedCallback) -> bool:
        return all(callback(value, key) for key, value in _pairs(array))

    @staticmethod
    def contains(array: Any, value_or_callback: Any, strict: bool = False) -> bool:
        """Determine if the array contains a value or an item passing a callback."""
        if callable(value_or_callback):
            return ArrSingle.some(array, value_or_callback)
        if strict:
            return any(type(value) is type(value_or_callback) and value == value_or_callback
                       for value in _values(array))
        return value_or_callback in _values(array)

    @staticmethod
    def sum(array: Any, callback: Optional[Callable[[Any], Any]] = None) -> Union[int, float]:
        values = _values(array)
        if callback is None:
            return sum(values)
        return sum(callback(value) for value in values)

    @staticmethod
    def unique(array: Any, strict: bool = False) -> List[Any]:
        """Get the unique values, in first-seen order."""
        result: List[Any] = []
        for value in _values(array):
            if strict:
                if not any(type(seen) is type(value) and seen == value for seen in result):
                    result.append(value)
            elif value not in result:
                result.append(value)
        return result

    @staticmethod
    def reject(array: Any, callback: Any = True) -> ArrayData:
        """Drop items passing the callback, or equal to the given value."""
        if callable(callback):
            return _build(array, [(key, value) for key, value in _pairs(array) if not callback(value, key)])
        return _build(array, [(key, value) for key, value in _pairs(array) if value != callback])

    @staticmethod
    def slice(array: Any, offset: int, length: Optional[int] = None) -> ArrayData:
        """Slice the array, keeping mapping keys."""
        pairs = _pairs(array)
        if offset < 0:
            offset = max(0, len(pairs) + offset)
        if length is None:
            end = len(pairs)
        elif length < 0:
            end = len(pairs) + length
        else:
            end = offset + length
        return _build(array, pairs[offset:end])

    @staticmethod
    def skip(array: Any, count: int) -> ArrayData:
        return ArrSingle.slice(array, count)

    @staticmethod
    def skip_while(array: Any, callback: KeyedCallback) -> ArrayData:
        """Skip items while the callback holds, keep the rest."""
        kept = []
        skipping = True
        for key, value in _pairs(array):
            if skipping and not callback(value, key):
                skipping = False
            if not skipping:
                kept.append((key, value))
        return _build(array, kept)

    @staticmethod
    def skip_until(array: Any, callback: KeyedCallback) -> ArrayData:
        return ArrSingle.skip_while(array, lambda value, key: not callback(value, key))

    @staticmethod
    def partition(array: Any, callback: KeyedCallback) -> Tuple[ArrayData, ArrayData]:
        """Split the array into items passing and failing the callback."""
        passed = []
        failed = []
        for key, value in _pairs(array):
            if callback(value, key):
                passed.append((key, value))
            else:
                failed.append((key, value))
        return _build(array, passed), _build(array, failed)
